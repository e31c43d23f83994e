"""Clipboard access for exported checklists."""
import logging

from PySide6.QtGui import QGuiApplication

logger = logging.getLogger(__name__)


def copy_text(text: str) -> bool:
    """Write ``text`` to the system clipboard.

    Returns:
        True if the clipboard now holds ``text``.
    """
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        logger.warning("Clipboard is not available")
        return False
    clipboard.setText(text)
    return clipboard.text() == text
