"""User configuration for alertdesk.

Settings live in ``~/.config/alertdesk/config.toml`` (override the path with
the ``ALERTDESK_CONFIG`` environment variable). Every setting has a default,
so the file is optional.
"""

import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from alertdesk.store import STORAGE_KEY

CONFIG_DIR = Path.home() / ".config" / "alertdesk"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "alertdesk.db"
CONFIG_ENV_VAR = "ALERTDESK_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class StorageSettings(BaseModel):
    """Where alerts are persisted."""

    path: Path = Field(default=DEFAULT_DB_PATH, description="SQLite database file")
    key: str = Field(default=STORAGE_KEY, min_length=1, description="Storage key for the alert collection")

    @field_validator("path")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Root log level")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class AppConfig(BaseModel):
    """Application configuration."""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    log: LoggingSettings = Field(default_factory=LoggingSettings, alias="logging")

    model_config = {"populate_by_name": True}


def get_config_path() -> Path:
    """Path of the configuration file, honouring ``ALERTDESK_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration.

    Args:
        path: Config file path. Defaults to ``get_config_path()``.

    Returns:
        The parsed configuration, or the defaults if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return AppConfig()

    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e


def write_template_config(path: Optional[Path] = None) -> Path:
    """Write a configuration file holding the defaults.

    Args:
        path: Destination. Defaults to ``get_config_path()``.

    Returns:
        The path written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "storage": {
            "path": str(DEFAULT_DB_PATH),
            "key": STORAGE_KEY,
        },
        "logging": {
            "level": "WARNING",  # DEBUG, INFO, WARNING, ERROR or CRITICAL
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
