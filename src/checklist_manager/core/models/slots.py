"""
Module: slots

Purpose:
    Provides the Slot dataclass - the (raw_text, items, parse_error) triple
    of one checklist document.

Key Functions:
    - Slot.empty(): Slot at session start
    - Slot.from_text(text): Slot built from user input via the parser
    - Slot.from_items(items, indent): Slot regenerated after a toggle

Used By:
    - core.manager.ChecklistSlotManager
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .items import ChecklistItem


@dataclass(frozen=True, slots=True)
class Slot:
    """
    One independent checklist document.

    Attributes:
        raw_text: Text last accepted from the user or regenerated by a toggle
        items: Entries in source order
        parse_error: Diagnostic when ``raw_text`` is not a valid items array

    Invariants:
        - parse_error is None or items is empty
        - items always reflect raw_text
    """

    raw_text: str = ""
    items: tuple[ChecklistItem, ...] = field(default_factory=tuple)
    parse_error: Optional[str] = None

    __hash__ = None

    def __post_init__(self) -> None:
        if self.parse_error is not None and self.items:
            raise ValueError("A slot with a parse error cannot hold items")

    @classmethod
    def empty(cls) -> Slot:
        return cls()

    @classmethod
    def from_text(cls, text: str) -> Slot:
        """Parse ``text`` and build the slot, replacing any prior state."""
        from ..schemas.validator import parse_checklist

        result = parse_checklist(text)
        return cls(raw_text=text, items=result.items, parse_error=result.error)

    @classmethod
    def from_items(cls, items: Sequence[ChecklistItem], indent: int = 2) -> Slot:
        """Build the slot from structured items with canonical text."""
        from ..utils.serialization import serialize_items

        items = tuple(items)
        return cls(raw_text=serialize_items(items, indent=indent), items=items)

    @property
    def is_valid(self) -> bool:
        return self.parse_error is None

    def __len__(self) -> int:
        return len(self.items)
