"""Global settings manager for the Spesti desktop app."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_SETTINGS = {
    "pro_enabled": False,   # written after a confirmed Pro payment
    "export_page": {},      # PageConfig overrides, e.g. {"margin_mm": 10}
}

# Settings file location
SETTINGS_FILE = Path(__file__).parent.parent.parent / "data" / "settings.json"


class SettingsManager(QObject):
    """Singleton manager for persisted application settings."""

    # Signal emitted when any setting changes
    settings_changed = pyqtSignal(str, object)  # (setting_name, new_value)

    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Path | None = None):
        if self._initialized:
            return
        super().__init__()
        self._initialized = True
        self._settings_file = settings_file or SETTINGS_FILE
        self._settings = copy.deepcopy(DEFAULT_SETTINGS)
        self._load_settings()

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next construction reloads from disk."""
        cls._instance = None

    def _load_settings(self):
        """Load settings from file, keeping defaults for unknown or missing keys."""
        if not self._settings_file.exists():
            return
        try:
            with open(self._settings_file, "r", encoding="utf-8") as f:
                saved = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load settings from %s: %s", self._settings_file, e)
            return

        for key, value in saved.items():
            if key in DEFAULT_SETTINGS:
                self._settings[key] = value
        logger.debug("Settings loaded from %s", self._settings_file)

    def _save_settings(self):
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._settings_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2, ensure_ascii=False)
            logger.debug("Settings saved to %s", self._settings_file)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value and emit change signal."""
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        if self._settings.get(key) != value:
            self._settings[key] = value
            self._save_settings()
            self.settings_changed.emit(key, value)

    @property
    def export_page(self) -> dict:
        """PageConfig overrides for PDF export."""
        return dict(self._settings.get("export_page") or {})


def get_settings() -> SettingsManager:
    """Return the process-wide settings instance."""
    return SettingsManager()
