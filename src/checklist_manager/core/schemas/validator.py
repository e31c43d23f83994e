"""
Checklist Text Validation

Turns the raw text of a slot into checklist items.

The only shape requirement is that the document is a JSON array. Entries are
not checked against any schema; missing fields render blank downstream.

Errors are returned as data on the ``ParseResult``. Nothing here raises for
bad input, the caller decides how to surface the diagnostic.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, NoReturn, Optional

from ..models.items import ChecklistItem

logger = logging.getLogger(__name__)


SHAPE_ERROR_MESSAGE = "JSON must be an array"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """
    Outcome of parsing slot text.

    Attributes:
        items: Parsed entries (empty when ``error`` is set)
        error: Decoder or shape diagnostic, None on success
    """

    items: tuple[ChecklistItem, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    __hash__ = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str) -> NoReturn:
    # NaN / Infinity are not JSON
    raise ValueError(f"Unexpected token {name} in JSON")


def _finite_float(literal: str) -> Optional[float]:
    # Literals beyond float range (e.g. 1e400) decode to null
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_checklist(text: str) -> ParseResult:
    """
    Parse raw slot text into checklist items.

    Args:
        text: Any string typed or pasted by the user

    Returns:
        ParseResult with items, or with an error message and no items.
        Blank text gives an empty result with no error.

    Example:
        >>> parse_checklist("   ").items
        ()
        >>> parse_checklist('{"a": 1}').error
        'JSON must be an array'
    """
    if not text or not text.strip():
        return ParseResult()

    try:
        document: Any = json.loads(
            text, parse_float=_finite_float, parse_constant=_reject_constant
        )
    except ValueError as e:
        logger.debug(f"Checklist text is not valid JSON: {e}")
        return ParseResult(error=str(e))
    except RecursionError:
        logger.debug("Checklist text is nested too deeply to parse")
        return ParseResult(error="Maximum nesting depth exceeded")

    if not isinstance(document, list):
        logger.debug(f"Checklist JSON is a {type(document).__name__}, not an array")
        return ParseResult(error=SHAPE_ERROR_MESSAGE)

    items = tuple(ChecklistItem.from_json(entry) for entry in document)
    logger.debug(f"Parsed {len(items)} checklist item(s)")
    return ParseResult(items=items)
