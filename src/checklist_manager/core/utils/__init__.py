"""
Utils Package

Serialization of checklist items.
"""

from .serialization import (
    serialize_items,
    serialize_items_compact,
    items_to_json,
)

__all__ = [
    "serialize_items",
    "serialize_items_compact",
    "items_to_json",
]
