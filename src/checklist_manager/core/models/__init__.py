"""
Core Models Package

Immutable data models for checklist documents.

All models in this package are frozen dataclasses. A slot is replaced as a
whole on every edit or toggle, so a reference held by one view never changes
underneath it.
"""

from .items import ChecklistItem, ItemValue
from .slots import Slot

__all__ = [
    "ChecklistItem",
    "ItemValue",
    "Slot",
]
