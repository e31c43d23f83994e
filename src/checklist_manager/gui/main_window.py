"""
Main Window for the SDA Checklist Manager GUI.
"""
import logging
import queue
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QSplitter, QScrollArea, QPushButton, QLabel, QStatusBar, QApplication
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence

from checklist_manager.core.manager import ChecklistSlotManager
from checklist_manager.gui.models.settings import SettingsStore
from checklist_manager.gui.styles.theme import apply_theme
from checklist_manager.gui.utils.clipboard import copy_text
from checklist_manager.gui.utils.logging_utils import (
    attach_queue_handler, detach_queue_handler, drain_log_queue
)
from checklist_manager.gui.widgets.alignment_grid import AlignmentGrid
from checklist_manager.gui.widgets.console_widget import ConsoleWidget
from checklist_manager.gui.widgets.output_card import OutputCard
from checklist_manager.gui.widgets.slot_input import SlotInputPanel

logger = logging.getLogger(__name__)

COPY_MESSAGE = "Checklist Copied!"
STATUS_TIMEOUT_MS = 3000


class MainWindow(QMainWindow):
    """
    Three input panels, the aligned items grid and the output cards.

    The window owns no checklist state: it forwards edits and toggles to the
    ``ChecklistSlotManager`` it is given and redraws from it whenever the
    manager reports a change.
    """

    def __init__(self, manager: ChecklistSlotManager, settings: SettingsStore):
        super().__init__()
        self.manager = manager
        self.settings = settings
        self.is_dark = settings.get_dark_mode()

        self.setWindowTitle("SDA Checklist Manager")
        self.resize(1280, 900)
        self.setMinimumSize(960, 640)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        exit_action = QAction("Quit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menuBar().addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.is_dark)
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)

        # --- Logging ---
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, "checklist_manager")
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Central Widget ---
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.splitter.setChildrenCollapsible(False)
        main_layout.addWidget(self.splitter)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        scroll.setWidget(content)
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(32, 24, 32, 24)
        content_layout.setSpacing(24)
        self.splitter.addWidget(scroll)

        # --- Header ---
        header = QHBoxLayout()
        titles = QVBoxLayout()
        self.title_label = QLabel("SDA Checklist Manager")
        self.title_label.setObjectName("mainTitle")
        titles.addWidget(self.title_label)
        subtitle = QLabel("Paste JSON checklist data, toggle items, and see real-time output")
        subtitle.setObjectName("mainSubtitle")
        titles.addWidget(subtitle)
        header.addLayout(titles)
        header.addStretch()

        self.theme_button = QPushButton()
        self.theme_button.setObjectName("themeButton")
        self.theme_button.setAccessibleName("Toggle dark mode")
        self.theme_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.theme_button.clicked.connect(lambda: self._toggle_theme(not self.is_dark))
        header.addWidget(self.theme_button, alignment=Qt.AlignmentFlag.AlignTop)
        content_layout.addLayout(header)

        # --- Inputs ---
        slot_count = manager.slot_count
        inputs_layout = QGridLayout()
        inputs_layout.setHorizontalSpacing(24)
        self.input_panels: List[SlotInputPanel] = []
        for index in range(slot_count):
            panel = SlotInputPanel(index)
            panel.textEdited.connect(self._on_text_edited)
            inputs_layout.addWidget(panel, 0, index)
            self.input_panels.append(panel)
        content_layout.addLayout(inputs_layout)

        # --- Checklist Items ---
        items_title = QLabel("Checklist Items")
        items_title.setObjectName("sectionTitle")
        content_layout.addWidget(items_title)
        self.grid = AlignmentGrid(slot_count)
        self.grid.toggleRequested.connect(self._on_toggle_requested)
        content_layout.addWidget(self.grid)

        # --- JSON Output ---
        output_title = QLabel("JSON Output")
        output_title.setObjectName("sectionTitle")
        content_layout.addWidget(output_title)
        outputs_layout = QGridLayout()
        outputs_layout.setHorizontalSpacing(24)
        self.output_cards: List[OutputCard] = []
        for index in range(slot_count):
            card = OutputCard(index)
            card.copyRequested.connect(self._copy_slot)
            outputs_layout.addWidget(card, 0, index)
            self.output_cards.append(card)
        content_layout.addLayout(outputs_layout)
        content_layout.addStretch()

        # --- Console ---
        self.console = ConsoleWidget()
        self.splitter.addWidget(self.console)
        self.splitter.setStretchFactor(0, 4)
        self.splitter.setStretchFactor(1, 1)

        # --- Status Bar ---
        self.status_bar = QStatusBar()
        self.status_bar.showMessage("Ready")
        self.setStatusBar(self.status_bar)

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(bytes.fromhex(geometry))

        self._unsubscribe = self.manager.subscribe(self._on_slot_changed)
        self._apply_theme(self.is_dark)
        self.refresh()

    # ─────────────────────────────────────────────────────────────────────────
    # Manager wiring
    # ─────────────────────────────────────────────────────────────────────────

    def _on_text_edited(self, slot_index: int, text: str):
        self.manager.set_slot_text(slot_index, text)

    def _on_toggle_requested(self, slot_index: int, row_index: int):
        if not self.manager.toggle_item(slot_index, row_index):
            # Nothing changed, so undo the click on the checkbox
            self.grid.set_rows(self.manager.aligned_rows())

    def _on_slot_changed(self, slot_index: int):
        slot = self.manager.slot(slot_index)
        self.input_panels[slot_index].show_slot(slot)
        self.output_cards[slot_index].set_output(self.manager.export_slot(slot_index))
        # Row count depends on every slot
        self.grid.set_rows(self.manager.aligned_rows())

    def refresh(self):
        """Redraw every panel from the manager's current state."""
        for index, slot in enumerate(self.manager.slots):
            self.input_panels[index].show_slot(slot)
            self.output_cards[index].set_output(self.manager.export_slot(index))
        self.grid.set_rows(self.manager.aligned_rows())

    def _copy_slot(self, slot_index: int, copy_fn=copy_text) -> bool:
        text = self.manager.export_slot(slot_index)
        if copy_fn(text):
            self.status_bar.showMessage(COPY_MESSAGE, STATUS_TIMEOUT_MS)
            logger.info(f"Checklist {slot_index + 1} copied to clipboard")
            return True
        self.status_bar.showMessage("Could not copy checklist", STATUS_TIMEOUT_MS)
        logger.warning(f"Failed to copy checklist {slot_index + 1} to clipboard")
        return False

    # ─────────────────────────────────────────────────────────────────────────
    # Theme
    # ─────────────────────────────────────────────────────────────────────────

    def _toggle_theme(self, checked: bool):
        """Handle dark mode toggle."""
        self._apply_theme(checked)
        self.settings.set_dark_mode(checked)

    def _apply_theme(self, is_dark: bool):
        self.is_dark = is_dark
        app: Optional[QApplication] = QApplication.instance()
        if app is not None:
            apply_theme(app, is_dark)
        self.dark_mode_action.setChecked(is_dark)
        self.theme_button.setText("☀️ Light" if is_dark else "🌙 Dark")
        self.console.update_theme()

    # ─────────────────────────────────────────────────────────────────────────
    # Housekeeping
    # ─────────────────────────────────────────────────────────────────────────

    def _drain_log_queue(self):
        drain_log_queue(self.log_queue, self.console.append_log)

    def closeEvent(self, event):
        self.settings.set_window_geometry(self.saveGeometry().data().hex())
        self.log_timer.stop()
        self._unsubscribe()
        detach_queue_handler(self._log_handler, "checklist_manager")
        super().closeEvent(event)
