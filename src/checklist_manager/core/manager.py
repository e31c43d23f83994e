"""
Module: manager

Purpose:
    The checklist slot manager - owns the independent slots of one session
    and is the only place their state changes.

Key Functions:
    - set_slot_text(index, text): Replace a slot's text and re-parse it
    - toggle_item(slot_index, row_index): Flip one item and resync the text
    - aligned_rows(): Row-aligned view over all slots
    - export_slot(index): Compact JSON of a slot's items
    - subscribe(listener): Be told which slot changed after each mutation

Dependencies:
    - core.models, core.schemas, core.utils.serialization
    - config.ManagerConfig

Used By:
    - gui.main_window.MainWindow
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from checklist_manager.config import ManagerConfig
from .alignment import AlignedRows
from .models.slots import Slot
from .utils.serialization import serialize_items_compact

logger = logging.getLogger(__name__)

SlotListener = Callable[[int], None]


class SlotIndexError(IndexError):
    """Raised when a slot index is outside the manager's slots."""

    def __init__(self, index: int, slot_count: int):
        super().__init__(f"Slot index {index} out of range (0..{slot_count - 1})")
        self.index = index
        self.slot_count = slot_count


class ChecklistSlotManager:
    """
    State container for the checklist slots of one session.

    Each slot is an immutable ``Slot`` value; every mutation replaces the
    value for exactly one index, so other slots are never touched.

    Example:
        >>> manager = ChecklistSlotManager()
        >>> manager.set_slot_text(2, '{"a": 1}').parse_error
        'JSON must be an array'
        >>> len(manager.aligned_rows())
        0
    """

    def __init__(self, config: Optional[ManagerConfig] = None) -> None:
        self.config = config or ManagerConfig()
        self._slots: List[Slot] = [Slot.empty() for _ in range(self.config.slot_count)]
        self._listeners: List[SlotListener] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def slot_count(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(self._slots)

    def slot(self, index: int) -> Slot:
        self._check_index(index)
        return self._slots[index]

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def set_slot_text(self, index: int, text: str) -> Slot:
        """
        Replace the text of one slot and re-parse it.

        Items and error are rebuilt from ``text`` alone; nothing is merged with
        the previous items.

        Raises:
            SlotIndexError: If ``index`` is not a slot
        """
        self._check_index(index)
        slot = Slot.from_text(text)
        self._slots[index] = slot
        if slot.parse_error:
            logger.debug(f"Checklist {index + 1}: {slot.parse_error}")
        else:
            logger.debug(f"Checklist {index + 1}: {len(slot.items)} item(s)")
        self._notify(index)
        return slot

    def toggle_item(self, slot_index: int, row_index: int) -> bool:
        """
        Flip the checked state of one item and regenerate the slot's text.

        Rows beyond the slot's length are ignored, since aligned rows are
        driven by the longest slot.

        Returns:
            True if an item was toggled, False for a no-op

        Raises:
            SlotIndexError: If ``slot_index`` is not a slot
        """
        self._check_index(slot_index)
        slot = self._slots[slot_index]
        if not 0 <= row_index < len(slot.items):
            logger.debug(
                f"Ignoring toggle of row {row_index} in checklist {slot_index + 1} "
                f"({len(slot.items)} item(s))"
            )
            return False

        target = slot.items[row_index]
        if not target.is_object:
            logger.warning(
                f"Checklist {slot_index + 1} row {row_index + 1} is not an object, cannot toggle"
            )
            return False

        items = list(slot.items)
        items[row_index] = target.toggled()
        self._slots[slot_index] = Slot.from_items(items, indent=self.config.indent)
        logger.debug(
            f"Checklist {slot_index + 1} item {target.id!r} -> "
            f"{items[row_index].value.value or 'unchecked'}"
        )
        self._notify(slot_index)
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Derived views
    # ─────────────────────────────────────────────────────────────────────────

    def aligned_rows(self) -> AlignedRows:
        """Return the row-aligned view of the slots as they are now."""
        return AlignedRows(self._slots)

    def export_slot(self, index: int) -> str:
        """
        Compact JSON of a slot's items.

        Raises:
            SlotIndexError: If ``index`` is not a slot
        """
        self._check_index(index)
        return serialize_items_compact(self._slots[index].items)

    # ─────────────────────────────────────────────────────────────────────────
    # Listeners
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, listener: SlotListener) -> Callable[[], None]:
        """
        Register a callback run with the slot index after each mutation.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, index: int) -> None:
        for listener in list(self._listeners):
            listener(index)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or not 0 <= index < len(self._slots):
            raise SlotIndexError(index, len(self._slots))
