"""
Entry point for the PySide6 GUI.
"""
import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Send package logs to stderr in addition to the in-app console."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("checklist_manager").setLevel(level)


def run():
    """
    Main entry point for the GUI application.

    Builds one ``ChecklistSlotManager`` for the session and hands it to the
    main window; nothing about the documents outlives the process.
    """
    from PySide6.QtWidgets import QApplication
    from checklist_manager import __version__
    from checklist_manager.config import ManagerConfig
    from checklist_manager.core.manager import ChecklistSlotManager
    from checklist_manager.gui.main_window import MainWindow
    from checklist_manager.gui.models.settings import SettingsStore
    from checklist_manager.gui.styles.theme import apply_theme
    from checklist_manager.gui.utils.paths import get_settings_path

    configure_logging()
    logger = logging.getLogger(__name__)

    app = QApplication(sys.argv)
    app.setApplicationName("SDA Checklist Manager")
    app.setApplicationDisplayName("SDA Checklist Manager")
    app.setOrganizationName("SDA Checklist Manager")
    app.setApplicationVersion(__version__)

    settings = SettingsStore(get_settings_path())
    if settings.load_error:
        logger.warning("Using default settings")

    # Theme is read once here, before any widget is created
    apply_theme(app, settings.get_dark_mode())

    manager = ChecklistSlotManager(ManagerConfig())
    window = MainWindow(manager, settings)
    window.show()
    logger.info(f"SDA Checklist Manager {__version__} started")

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
