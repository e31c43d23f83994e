"""
Serialization Utilities

Two output forms for a slot's items:

- ``serialize_items``: pretty-printed, written back into the slot editor after
  a toggle so the user sees the change in the text they are editing.
- ``serialize_items_compact``: single-line, handed to the clipboard on export.

Key order is the order read from the source text. Non-ASCII characters are
written literally. Non-finite floats raise ValueError instead of producing
the non-JSON tokens NaN or Infinity.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..models.items import ChecklistItem


def items_to_json(items: Iterable[ChecklistItem]) -> list[Any]:
    """Return the JSON-ready list for ``items``."""
    return [item.to_json() for item in items]


def serialize_items(items: Iterable[ChecklistItem], *, indent: int = 2) -> str:
    """
    Serialize items to canonical pretty-printed JSON.

    Args:
        items: Items in slot order
        indent: Spaces per nesting level

    Returns:
        JSON text that parses back to equal items
    """
    return json.dumps(
        items_to_json(items), indent=indent, ensure_ascii=False, allow_nan=False
    )


def serialize_items_compact(items: Iterable[ChecklistItem]) -> str:
    """Serialize items to compact JSON with no insignificant whitespace."""
    return json.dumps(
        items_to_json(items), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
