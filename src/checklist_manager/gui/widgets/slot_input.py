"""
Input panel for one checklist slot: title, JSON editor and parse diagnostic.
"""
from PySide6.QtCore import Signal, QSignalBlocker
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPlainTextEdit

from checklist_manager.core.models.slots import Slot
from checklist_manager.gui.styles.theme import Fonts


class SlotInputPanel(QWidget):
    """
    Editor for the raw text of one slot.

    Emits ``textEdited(slot_index, text)`` for user edits only; text set by
    ``show_slot`` after a toggle does not re-emit.
    """

    textEdited = Signal(int, str)

    def __init__(self, slot_index: int, parent=None):
        super().__init__(parent)
        self.slot_index = slot_index

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.title_label = QLabel(f"Checklist {slot_index + 1} Input")
        self.title_label.setObjectName("panelTitle")
        layout.addWidget(self.title_label)

        self.editor = QPlainTextEdit()
        self.editor.setPlaceholderText("Paste JSON array here...")
        self.editor.setMinimumHeight(128)
        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.editor.setFont(font)
        self.editor.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.editor, 1)

        self.error_label = QLabel()
        self.error_label.setObjectName("parseError")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

    def text(self) -> str:
        return self.editor.toPlainText()

    def _on_text_changed(self):
        self.textEdited.emit(self.slot_index, self.editor.toPlainText())

    def show_slot(self, slot: Slot):
        """Reflect a slot's state: replace the text if it differs, flag errors."""
        if self.editor.toPlainText() != slot.raw_text:
            with QSignalBlocker(self.editor):
                self.editor.setPlainText(slot.raw_text)
        self.set_error(slot.parse_error)

    def set_error(self, message):
        invalid = message is not None
        self.editor.setProperty("invalid", invalid)
        # Re-polish so the [invalid="true"] selector takes effect
        self.editor.style().unpolish(self.editor)
        self.editor.style().polish(self.editor)
        if invalid:
            self.error_label.setText(message)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()
