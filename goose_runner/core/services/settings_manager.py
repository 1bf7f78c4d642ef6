"""
settings_manager.py
-------------------
Manages persistent user settings (audio).
"""

import copy
from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import Storage
from goose_runner.core.services.config_manager import load_config, save_config


# ===========================================================
# Settings Manager
# ===========================================================

class SettingsManager:
    """Manages persistent user settings with safe defaults."""

    DEFAULTS = {
        "audio": {
            "master_volume": 100,
            "muted": False
        }
    }

    def __init__(self, settings_file=None):
        """
        Initialize settings manager.

        Args:
            settings_file: Optional custom path for settings file
        """
        self.settings_file = settings_file or Storage.SETTINGS_FILE
        self.settings = load_config(self.settings_file, default_dict=self.DEFAULTS)

    # ===========================================================
    # Public API
    # ===========================================================

    def get(self, category, key, default=None):
        """
        Get a setting value.

        Args:
            category: Settings category (audio)
            key: Setting key
            default: Fallback if not found
        """
        return self.settings.get(category, {}).get(key, default)

    def set(self, category, key, value):
        if category not in self.settings:
            self.settings[category] = {}
        self.settings[category][key] = value

    def save(self):
        """Save current settings to file."""
        save_config(self.settings_file, self.settings)

    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = copy.deepcopy(self.DEFAULTS)
        DebugLogger.system("Settings reset to defaults")
