"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1st: environment variable, 2nd: ~/.linediff
        config_dir = os.environ.get("LINEDIFF_CONFIG_DIR") or os.path.expanduser("~/.linediff")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning(f"Cannot write to {config_dir}: {e}")
            self._config_file = None

        # Last resort: temp dir
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "linediff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.warning(f"Using temporary config path: {self._config_file}")

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @staticmethod
    def _merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        """Overlay update on base; sections (dicts) are merged key by key"""
        merged = copy.deepcopy(base)
        for key, value in update.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            logger.warning(f"Error loading config: expected a JSON object, got {type(stored).__name__}")
            return config

        return self._merge(config, stored)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "encoding": {"candidate": "utf-8", "reference": "utf-8"},
            # 0 disables a check; maxCells bounds the candidate x reference table
            "limits": {"maxLines": 5000, "maxCells": 4_000_000},
            "server": {"host": "127.0.0.1", "port": 8000},
            "logLevel": "INFO",
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Merge config into the current settings and write them to file"""
        self._config = self._merge(self._config, config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value; a dict value is merged into its section"""
        self.save_config({key: value})
