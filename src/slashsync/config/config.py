"""
Configuration management for slashsync.

Settings come from an optional file at ~/.slashsync/config.json, overridden
by environment variables (GUILD_ID, BOT_ENV, SLASHSYNC_LOG_LEVEL).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# Default values - single source of truth
DEFAULTS = {
    "environment": "production",
    "log_level": "INFO",
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "GUILD_ID": "guild_id",
    "BOT_ENV": "environment",
    "SLASHSYNC_LOG_LEVEL": "log_level",
}

DEVELOPMENT = "development"


class Config(BaseModel):
    """Configuration settings for slashsync.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    guild_id: Optional[str] = Field(
        default=None,
        description="Guild that receives permissions (and commands in development)"
    )
    environment: Optional[str] = Field(
        default=None,
        description="Deployment mode: 'development' uses guild commands"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Logging level for the slashsync logger"
    )

    @field_validator("guild_id", mode="before")
    @classmethod
    def _snowflake_to_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)

    @property
    def is_development(self) -> bool:
        """True when commands should be registered per guild."""
        return str(self.get("environment")).lower() == DEVELOPMENT


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".slashsync"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, environ: Optional[dict[str, str]] = None):
        self._config: Optional[Config] = None
        self._environ = environ

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file, then apply environment overrides.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        data: dict[str, Any] = {}
        if self.CONFIG_FILE.exists():
            try:
                data = json.loads(self.CONFIG_FILE.read_text())
                Config.model_validate(data)
            except (json.JSONDecodeError, ValueError) as e:
                logger.warning(f"Invalid config file ({e}), using defaults")
                data = {}

        environ = os.environ if self._environ is None else self._environ
        for env_var, key in ENV_OVERRIDES.items():
            value = environ.get(env_var)
            if value:
                data[key] = value

        return Config.model_validate(data)

    def save(self, config: Optional[Config] = None) -> Path:
        """Save non-empty settings to the config file.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        if config is not None:
            self._config = config

        data = {k: v for k, v in self.config.model_dump().items() if v is not None}
        self.CONFIG_FILE.write_text(json.dumps(data, indent=2) + "\n")
        return self.CONFIG_FILE

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback."""
        return self.config.get(key, default)

    def reload(self) -> Config:
        """Drop the cached config and load again."""
        self._config = None
        return self.config


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
