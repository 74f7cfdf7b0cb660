"""Configuration management for waitstatus."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError
from .layout import AUTO, LAYOUTS, POSIX_LAYOUT

logger = logging.getLogger(__name__)


CONFIG_ENV_VAR = "WAITSTATUS_CONFIG"

# offset + signal must still fit in the 8-bit exit code of this process
MAX_SIGNAL_OFFSET = 0xFF - POSIX_LAYOUT.signal_mask


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the waitstatus CLI."""

    layout: str
    signal_offset: int
    json_output: bool

    def validate(self) -> tuple[bool, str | None]:
        """
        Validate configuration values.

        Returns:
            tuple[bool, str | None]: (is_valid, error_message)
        """
        if not isinstance(self.layout, str) or (
            self.layout.lower() != AUTO and self.layout.lower() not in LAYOUTS
        ):
            known = ", ".join([AUTO] + sorted(LAYOUTS))
            return False, f"layout must be one of: {known}"

        if (
            not isinstance(self.signal_offset, int)
            or isinstance(self.signal_offset, bool)
            or not (0 <= self.signal_offset <= MAX_SIGNAL_OFFSET)
        ):
            return False, f"signal_offset must be an integer between 0 and {MAX_SIGNAL_OFFSET}"

        if not isinstance(self.json_output, bool):
            return False, "json_output must be true or false"

        return True, None


DEFAULT_CONFIG = Config(layout=AUTO, signal_offset=128, json_output=False)


def default_config_path() -> Path:
    """Return $WAITSTATUS_CONFIG if set, otherwise ~/.waitstatus.json."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".waitstatus.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create defaults.

    Args:
        config_path: Path to config file. Defaults to default_config_path()

    Returns:
        Config: Loaded or default configuration

    Raises:
        ConfigError: If config file exists but is invalid. A missing file that
            cannot be created is not an error; defaults are returned.
    """
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        try:
            save_config(DEFAULT_CONFIG, config_path)
        except ConfigError as e:
            # Read-only home: decoding still works with the defaults
            logger.warning(f"Using default configuration: {e}")
        return DEFAULT_CONFIG

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Failed to load config from {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration in {config_path}: expected a JSON object")

    config = Config(
        layout=data.get("layout", DEFAULT_CONFIG.layout),
        signal_offset=data.get("signal_offset", DEFAULT_CONFIG.signal_offset),
        json_output=data.get("json_output", DEFAULT_CONFIG.json_output),
    )

    is_valid, error = config.validate()
    if not is_valid:
        raise ConfigError(f"Invalid configuration in {config_path}: {error}")

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Config object to save
        config_path: Path to config file. Defaults to default_config_path()

    Raises:
        ConfigError: If save fails
    """
    if config_path is None:
        config_path = default_config_path()

    is_valid, error = config.validate()
    if not is_valid:
        raise ConfigError(f"Cannot save invalid configuration: {error}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(
                {
                    "layout": config.layout,
                    "signal_offset": config.signal_offset,
                    "json_output": config.json_output,
                },
                f,
                indent=2,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_path}: {e}")
