"""
Module: items

Purpose:
    Provides the ChecklistItem dataclass - one entry of a checklist
    document. The item wraps the decoded JSON value as-is so that unknown
    extension attributes (and their key order) survive parse/serialize
    cycles untouched.

Key Functions:
    - ChecklistItem.from_json(value): Wrap a decoded JSON array entry
    - ChecklistItem.to_json(): Return the JSON-ready value
    - ChecklistItem.toggled(): Copy with the checked state flipped

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.schemas.validator
    - core.utils.serialization
    - core.manager
    - core.alignment
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ItemValue(str, Enum):
    """Wire values of the ``value`` field."""

    CHECKED = "checked"
    UNCHECKED = ""

    @classmethod
    def read(cls, raw: Any) -> ItemValue:
        """Interpret a raw wire value. Anything but ``"checked"`` is unchecked."""
        return cls.CHECKED if raw == cls.CHECKED.value else cls.UNCHECKED


@dataclass(frozen=True, slots=True)
class ChecklistItem:
    """
    One checklist entry.

    Attributes:
        data: The decoded JSON value of the array entry. Normally a dict with
            ``id``, ``name``, ``type``, ``doctype``, ``value`` and ``mandatory``
            plus any extension keys. Non-object entries are kept opaquely.

    Invariants:
        - ``data`` is never mutated; ``toggled()`` returns a new item
        - Key order of ``data`` is the order read from the source text

    Example:
        >>> item = ChecklistItem.from_json({"id": "1", "value": ""})
        >>> item.toggled().value
        <ItemValue.CHECKED: 'checked'>
    """

    data: Any

    # Equality compares the wrapped JSON; dict payloads are unhashable
    __hash__ = None

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_json(cls, value: Any) -> ChecklistItem:
        """Wrap a decoded JSON array entry without validating it."""
        if isinstance(value, Mapping):
            return cls(data=dict(value))
        return cls(data=value)

    def to_json(self) -> Any:
        """Return a JSON-ready copy of the entry."""
        if self.is_object:
            return dict(self.data)
        return self.data

    # ─────────────────────────────────────────────────────────────────────────
    # Field Accessors
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_object(self) -> bool:
        return isinstance(self.data, dict)

    def get(self, key: str, default: Any = None) -> Any:
        if not self.is_object:
            return default
        return self.data.get(key, default)

    @property
    def id(self) -> str:
        raw = self.get("id")
        return "" if raw is None else str(raw)

    @property
    def name(self) -> str:
        raw = self.get("name")
        return "" if raw is None else str(raw)

    @property
    def type(self) -> str:
        return str(self.get("type", "") or "")

    @property
    def doctype(self) -> str:
        return str(self.get("doctype", "") or "")

    @property
    def mandatory(self) -> Any:
        return self.get("mandatory", "")

    @property
    def value(self) -> ItemValue:
        return ItemValue.read(self.get("value"))

    @property
    def checked(self) -> bool:
        return self.value is ItemValue.CHECKED

    @property
    def required(self) -> bool:
        """True when ``mandatory`` holds a non-blank value."""
        raw = self.mandatory
        if raw is None:
            return False
        if isinstance(raw, str):
            return bool(raw.strip())
        return bool(raw)

    @property
    def extensions(self) -> dict[str, Any]:
        """Attributes outside the known checklist fields."""
        if not self.is_object:
            return {}
        return {k: v for k, v in self.data.items() if k not in KNOWN_FIELDS}

    # ─────────────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────────────

    def with_value(self, value: ItemValue) -> ChecklistItem:
        """
        Return a copy with ``value`` replaced.

        Every other key keeps its value and position. A missing ``value`` key
        is appended at the end.

        Raises:
            TypeError: If the entry is not a JSON object
        """
        if not self.is_object:
            raise TypeError(f"Cannot set value on non-object entry: {self.data!r}")
        updated = dict(self.data)
        updated["value"] = value.value
        return ChecklistItem(data=updated)

    def toggled(self) -> ChecklistItem:
        """Return a copy with the checked state flipped."""
        new_value = ItemValue.UNCHECKED if self.checked else ItemValue.CHECKED
        return self.with_value(new_value)


KNOWN_FIELDS = frozenset({"id", "name", "type", "doctype", "value", "mandatory"})
