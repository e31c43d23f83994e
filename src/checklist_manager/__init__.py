"""Top-level package for the SDA Checklist Manager.

Provides subpackages:
- checklist_manager.core: slot state, parsing, toggling, alignment and export
- checklist_manager.gui: PySide6 desktop app
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("checklist-manager")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
