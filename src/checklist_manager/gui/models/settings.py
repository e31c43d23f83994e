"""
Settings persistence model for the GUI.

Holds the theme preference and window geometry. Checklist documents are
never persisted.

Any malformed data results in graceful fallback to defaults, never CTD.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEME_DARK = "dark"
THEME_LIGHT = "light"


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        if self._load_error:
            logger.warning(self._load_error.replace("\n", " "))

        if "version" not in self._get_dict():
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def get_theme(self) -> str:
        """Return ``"dark"`` or ``"light"`` (default light)."""
        value = self._get_dict().get(THEME_KEY)
        return THEME_DARK if value == THEME_DARK else THEME_LIGHT

    def get_dark_mode(self) -> bool:
        return self.get_theme() == THEME_DARK

    def set_dark_mode(self, enabled: bool) -> None:
        self._get_dict()[THEME_KEY] = THEME_DARK if enabled else THEME_LIGHT
        self._save()

    def get_window_geometry(self) -> Optional[str]:
        """Get window geometry as hex string.

        Returns None if geometry is missing or not valid hex.
        """
        geo = self._get_dict().get("window_geometry")
        if not isinstance(geo, str) or not geo:
            return None
        try:
            bytes.fromhex(geo)
        except ValueError:
            logger.debug("Ignoring malformed window geometry")
            return None
        return geo

    def set_window_geometry(self, geometry: str) -> None:
        self._get_dict()["window_geometry"] = geometry
        self._save()

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")

            # Atomic rename (overwrites existing)
            temp_path.replace(self.path)
            self._load_error = None
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path:
                try:
                    if temp_path.exists():
                        temp_path.unlink()
                except OSError:
                    pass
