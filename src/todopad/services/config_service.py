"""Configuration service for managing todopad configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated get/set/reset of individual settings
- Config file initialization with defaults on first run
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from todopad.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration.

    This service loads, saves and edits the configuration stored in the user
    config directory, and hands out the resolved data directory used by the
    storage backend.
    """

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("todopad"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("todopad"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: write the defaults
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            # Set file permissions
            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a setting
            ValueError: If the value is rejected by the config schema
        """
        if not self.is_known_key(key):
            raise KeyError(f"Unknown configuration key '{key}'")

        keys = key.split(".")
        config_dict = self.config.model_dump(mode="json")

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration, or a single key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value = self.get_from_config(AppConfig(), key)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump(mode="json")
        self.set(key, default_value)

    def storage_path(self) -> Path:
        """Database path for the sqlite backend."""
        configured = self.config.storage.path
        if configured:
            return Path(configured).expanduser()
        return self.data_dir / "todopad.db"

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    @staticmethod
    def is_known_key(key: str) -> bool:
        parent_key, _, field = key.rpartition(".")
        parent: Any = AppConfig()
        if parent_key:
            parent = ConfigService.get_from_config(parent, parent_key)
        return isinstance(parent, BaseModel) and field in type(parent).model_fields


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide ConfigService."""
    return ConfigService()
