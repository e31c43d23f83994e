"""
Checklist items grid: the aligned rows of all slots side by side.
"""
from typing import Dict, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QWidget, QCheckBox

from checklist_manager.core.alignment import AlignedCell, AlignedRows


ABSENT_MARKER = "-"
REQUIRED_LABEL = "Required"


class AlignedCellWidget(QWidget):
    """Checkbox, name and optional "Required" badge for one present cell."""

    toggled = Signal(int, int)

    def __init__(self, cell: AlignedCell, parent=None):
        super().__init__(parent)
        self.cell = cell
        item = cell.item

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        self.checkbox = QCheckBox(item.name)
        self.checkbox.setObjectName(f"item-{cell.slot_index}-{item.id}")
        self.checkbox.setChecked(cell.checked)
        # Non-object entries carry no value to toggle
        self.checkbox.setEnabled(item.is_object)
        self.checkbox.setCursor(Qt.CursorShape.PointingHandCursor)
        # clicked fires for user interaction only, never for setChecked
        self.checkbox.clicked.connect(
            lambda _checked: self.toggled.emit(cell.slot_index, cell.row_index)
        )
        layout.addWidget(self.checkbox, 1)

        self.badge = None
        if cell.required:
            self.badge = QLabel(REQUIRED_LABEL)
            self.badge.setObjectName("requiredBadge")
            layout.addWidget(self.badge)


class AlignmentGrid(QFrame):
    """
    Grid of aligned checklist rows.

    Rebuilt from an ``AlignedRows`` on every ``set_rows`` call. Absent cells
    render a plain "-" label and offer nothing to toggle.
    """

    toggleRequested = Signal(int, int)

    def __init__(self, slot_count: int, parent=None):
        super().__init__(parent)
        self.setObjectName("alignmentGrid")
        self.slot_count = slot_count
        self.cell_widgets: Dict[Tuple[int, int], QWidget] = {}
        self.row_count = 0

        self.grid = QGridLayout(self)
        self.grid.setContentsMargins(0, 0, 0, 0)
        self.grid.setSpacing(0)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignTop)

        for col in range(slot_count):
            header = QLabel(f"Checklist {col + 1}")
            header.setObjectName("gridHeader")
            self.grid.addWidget(header, 0, col)
            self.grid.setColumnStretch(col, 1)

    def set_rows(self, rows: AlignedRows):
        self._clear_rows()
        for row in rows:
            for cell in row:
                widget = self._build_cell(cell)
                self.cell_widgets[(cell.slot_index, cell.row_index)] = widget
                self.grid.addWidget(widget, row.index + 1, cell.slot_index)
        self.row_count = len(rows)

    def cell_widget(self, slot_index: int, row_index: int) -> QWidget:
        return self.cell_widgets[(slot_index, row_index)]

    def _build_cell(self, cell: AlignedCell) -> QWidget:
        if not cell.present:
            label = QLabel(ABSENT_MARKER)
            label.setObjectName("absentCell")
            label.setContentsMargins(12, 8, 12, 8)
            return label
        widget = AlignedCellWidget(cell)
        widget.toggled.connect(self.toggleRequested)
        return widget

    def _clear_rows(self):
        for widget in self.cell_widgets.values():
            self.grid.removeWidget(widget)
            widget.deleteLater()
        self.cell_widgets.clear()
        self.row_count = 0
