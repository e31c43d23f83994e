"""PySide6 desktop shell for the checklist manager."""
