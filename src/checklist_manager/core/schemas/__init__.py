"""
Schemas Package

Parsing and shape validation of raw checklist text.
"""

from .validator import (
    parse_checklist,
    ParseResult,
    SHAPE_ERROR_MESSAGE,
)

__all__ = [
    "parse_checklist",
    "ParseResult",
    "SHAPE_ERROR_MESSAGE",
]
