"""
Core Package

Checklist synchronization engine: parsing, slot state, toggle resync,
row alignment and export. Has no Qt dependency.
"""

from .models import ChecklistItem, ItemValue, Slot
from .schemas import parse_checklist, ParseResult, SHAPE_ERROR_MESSAGE
from .manager import ChecklistSlotManager, SlotIndexError
from .alignment import AlignedCell, AlignedRow, AlignedRows

__all__ = [
    "ChecklistItem",
    "ItemValue",
    "Slot",
    "parse_checklist",
    "ParseResult",
    "SHAPE_ERROR_MESSAGE",
    "ChecklistSlotManager",
    "SlotIndexError",
    "AlignedCell",
    "AlignedRow",
    "AlignedRows",
]
