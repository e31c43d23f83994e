"""
Log console shown under the checklist editor.

Receives records drained from the log queue by the main window, one
``append_log(level, message)`` call per record.
"""
from datetime import datetime

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout

from checklist_manager.gui.styles.theme import Fonts, get_colors
from checklist_manager.gui.utils.clipboard import copy_text

MAX_CONSOLE_LINES = 1000

# Palette attribute per level name; anything else uses TEXT_PRIMARY
LEVEL_COLOR_KEYS = {
    "CRITICAL": "ERROR",
    "ERROR": "ERROR",
    "WARNING": "WARNING",
}


class ConsoleWidget(QGroupBox):
    """Read-only, colour-coded view of the application log."""

    def __init__(self, parent=None):
        super().__init__("Console Log", parent)
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setObjectName("consoleText")
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(MAX_CONSOLE_LINES)

        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setPointSize(int(Fonts.CONSOLE.replace("pt", "")))
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        self._formats: dict[str, QTextCharFormat] = {}
        self.update_theme()

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        level = level.upper()
        timestamp = datetime.now().strftime("%H:%M:%S")

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(f"[{timestamp}] [{level}] {message}\n", self._format_for(level))
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def lines(self) -> list[str]:
        return [line for line in self.text_edit.toPlainText().splitlines() if line]

    def clear(self):
        self.text_edit.clear()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_all_action = menu.addAction("Copy All")
        clear_action = menu.addAction("Clear")

        action = menu.exec(event.globalPos())
        if action == copy_all_action:
            copy_text(self.text_edit.toPlainText())
        elif action == clear_action:
            self.clear()

    def update_theme(self):
        """Re-read the active palette; existing lines keep their colours."""
        C = get_colors()
        self.setStyleSheet(f"""
            QGroupBox {{
                background-color: {C.SURFACE};
                border: none;
                border-top: 1px solid {C.BORDER};
                margin-top: 24px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 8px;
                color: {C.TEXT_SECONDARY};
            }}
            QPlainTextEdit#consoleText {{
                border: none;
                background-color: {C.SURFACE};
            }}
        """)
        self._formats.clear()
        for color_key in ("TEXT_PRIMARY", *LEVEL_COLOR_KEYS.values()):
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(getattr(C, color_key)))
            self._formats[color_key] = fmt

    def _format_for(self, level: str) -> QTextCharFormat:
        return self._formats[LEVEL_COLOR_KEYS.get(level, "TEXT_PRIMARY")]
