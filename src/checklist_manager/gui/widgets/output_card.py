"""
Output card showing the compact export of one slot with a copy button.
"""
from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QPlainTextEdit, QPushButton

from checklist_manager.gui.styles.theme import Fonts


class OutputCard(QFrame):
    copyRequested = Signal(int)

    def __init__(self, slot_index: int, parent=None):
        super().__init__(parent)
        self.setObjectName("outputCard")
        self.slot_index = slot_index

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self.title_label = QLabel(f"Checklist {slot_index + 1} Output")
        self.title_label.setObjectName("panelTitle")
        layout.addWidget(self.title_label)

        self.output_view = QPlainTextEdit()
        self.output_view.setReadOnly(True)
        self.output_view.setMaximumHeight(192)
        self.output_view.setFont(QFont(Fonts.MONO_FONT.split(",")[0]))
        layout.addWidget(self.output_view)

        self.copy_button = QPushButton("Copy JSON")
        self.copy_button.clicked.connect(lambda: self.copyRequested.emit(self.slot_index))
        layout.addWidget(self.copy_button)

    def set_output(self, text: str):
        if self.output_view.toPlainText() != text:
            self.output_view.setPlainText(text)

    def output(self) -> str:
        return self.output_view.toPlainText()
