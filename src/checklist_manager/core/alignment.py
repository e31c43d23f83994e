"""
Module: alignment

Purpose:
    Row-aligned, read-only comparison of all slots. Row ``r`` pairs the
    r-th item of every slot; a slot shorter than the longest one yields
    an absent cell.

Key Classes:
    - AlignedCell: One slot's entry in a row (present or absent)
    - AlignedRow: One row across all slots
    - AlignedRows: Lazy sequence of rows over a snapshot of the slots

Used By:
    - core.manager.ChecklistSlotManager.aligned_rows
    - gui.widgets.alignment_grid
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, overload

from .models.items import ChecklistItem
from .models.slots import Slot


@dataclass(frozen=True, slots=True)
class AlignedCell:
    """
    One slot's position in an aligned row.

    Attributes:
        slot_index: Column (slot) of the cell
        row_index: Row of the cell
        item: The item at that position, None when the slot is shorter
    """

    slot_index: int
    row_index: int
    item: Optional[ChecklistItem] = None

    __hash__ = None

    @property
    def present(self) -> bool:
        return self.item is not None

    @property
    def required(self) -> bool:
        return self.item is not None and self.item.required

    @property
    def checked(self) -> bool:
        return self.item is not None and self.item.checked

    @property
    def key(self) -> Optional[tuple[int, str]]:
        """Identity across re-renders: ``(slot_index, item.id)``."""
        if self.item is None:
            return None
        return (self.slot_index, self.item.id)


@dataclass(frozen=True, slots=True)
class AlignedRow:
    index: int
    cells: tuple[AlignedCell, ...]

    __hash__ = None

    def __iter__(self) -> Iterator[AlignedCell]:
        return iter(self.cells)

    def __getitem__(self, slot_index: int) -> AlignedCell:
        return self.cells[slot_index]

    def __len__(self) -> int:
        return len(self.cells)


class AlignedRows(Sequence):
    """
    Rows aligned by index across slots.

    Rows are built on access from the slots captured at construction, so
    iterating twice yields the same rows and nothing is held beyond the slot
    tuple itself.
    """

    def __init__(self, slots: Sequence[Slot]) -> None:
        self._slots: tuple[Slot, ...] = tuple(slots)
        self._length = max((len(slot.items) for slot in self._slots), default=0)

    @property
    def slot_count(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, index: int) -> AlignedRow: ...

    @overload
    def __getitem__(self, index: slice) -> list[AlignedRow]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._row(i) for i in range(*index.indices(self._length))]
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError(f"Row index out of range: {index}")
        return self._row(index)

    def _row(self, row_index: int) -> AlignedRow:
        cells = []
        for slot_index, slot in enumerate(self._slots):
            item = slot.items[row_index] if row_index < len(slot.items) else None
            cells.append(AlignedCell(slot_index, row_index, item))
        return AlignedRow(row_index, tuple(cells))

    def __repr__(self) -> str:
        return f"AlignedRows(rows={self._length}, slots={len(self._slots)})"
