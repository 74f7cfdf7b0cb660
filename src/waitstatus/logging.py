"""Logging configuration for waitstatus."""

import logging
import os
from pathlib import Path

from .config import CONFIG_ENV_VAR

LOG_ENV_VAR = "WAITSTATUS_LOG"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def default_log_path() -> Path:
    """
    Where the decoded outcomes are logged.

    $WAITSTATUS_LOG wins; otherwise the log sits beside a $WAITSTATUS_CONFIG
    override (same name, .log suffix); otherwise ~/.waitstatus.log.
    """
    override = os.environ.get(LOG_ENV_VAR)
    if override:
        return Path(override)
    config_override = os.environ.get(CONFIG_ENV_VAR)
    if config_override:
        return Path(config_override).with_suffix(".log")
    return Path.home() / ".waitstatus.log"


def setup_logging(log_path: Path | None = None) -> logging.Logger:
    """
    Attach a single file handler to the "waitstatus" logger.

    Args:
        log_path: Log file. Defaults to default_log_path()

    Returns:
        logging.Logger: The package logger, at DEBUG
    """
    if log_path is None:
        log_path = default_log_path()

    logger = logging.getLogger("waitstatus")
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    try:
        handler = logging.FileHandler(log_path)
    except OSError as e:
        # Unwritable log location: only warnings and above, on stderr
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        logger.addHandler(console_handler)
        logger.warning(f"Could not create log file at {log_path}: {e}")
        return logger

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    return logger
