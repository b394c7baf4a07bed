"""
Settings management for tfcomponents.

Loads the optional user configuration file. The tool never writes it.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class Settings:
    """
    Application settings.

    Settings are stored as JSON and merged over DEFAULT_SETTINGS.

    Path:
        Linux/macOS: ~/.config/tfcomponents/settings.json
        Windows: %APPDATA%\\tfcomponents\\settings.json
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize settings.

        Args:
            config_file: Explicit settings file, mainly for tests
        """
        self.config_file = config_file or self._get_config_dir() / "settings.json"
        self._settings: Dict[str, Any] = {}
        self.load()

    @staticmethod
    def _get_config_dir() -> Path:
        """Get platform-specific configuration directory."""
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(base) / 'tfcomponents'

    def load(self):
        """
        Load settings from file.

        If the file doesn't exist or is invalid, uses default settings.
        """
        self._settings = copy.deepcopy(DEFAULT_SETTINGS)

        if not self.config_file.exists():
            logger.debug("No config file found, using defaults")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded_settings = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load settings: {e}, using defaults")
            return

        if not isinstance(loaded_settings, dict):
            logger.error(f"Ignoring {self.config_file}: expected a JSON object, using defaults")
            return

        self._deep_update(self._settings, loaded_settings)
        logger.debug(f"Loaded settings from {self.config_file}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value.

        Supports nested keys with dot notation: "logging.level"

        Args:
            key: Setting key (use dots for nested values)
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        value: Any = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def terraform_binary(self) -> str:
        return str(self.get("terraform_binary", "terraform"))

    @property
    def max_files(self) -> int:
        value = self.get("max_files", DEFAULT_SETTINGS["max_files"])
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            logger.warning(f"Invalid max_files {value!r}, using {DEFAULT_SETTINGS['max_files']}")
            return DEFAULT_SETTINGS["max_files"]
        return value

    @staticmethod
    def _deep_update(base: dict, updates: dict):
        """
        Recursively update base dict with values from updates dict.

        Args:
            base: Dictionary to update
            updates: Dictionary with new values
        """
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Settings._deep_update(base[key], value)
            else:
                base[key] = value
