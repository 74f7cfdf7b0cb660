"""Tests for logging module."""

import logging
from unittest.mock import patch

from waitstatus.logging import default_log_path, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_returns_package_logger(self, tmp_home):
        """Should return the 'waitstatus' logger at DEBUG level."""
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "waitstatus"
        assert logger.level == logging.DEBUG

    def test_writes_to_home_log_file(self, tmp_home):
        """Records land in ~/.waitstatus.log with level and logger name."""
        logger = setup_logging()
        logging.getLogger("waitstatus.runner").warning("child killed by signal 9")

        for handler in logger.handlers:
            handler.flush()
        content = (tmp_home / ".waitstatus.log").read_text()
        assert "child killed by signal 9" in content
        assert "WARNING" in content
        assert "waitstatus.runner" in content

    def test_formatter(self, tmp_home):
        """File handler uses the timestamped format."""
        logger = setup_logging()
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        formatter = file_handlers[0].formatter
        assert formatter._fmt == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert formatter.datefmt == "%Y-%m-%d %H:%M:%S"

    def test_repeated_calls_do_not_duplicate_handlers(self, tmp_home):
        """Calling twice leaves a single handler on the same logger."""
        first = setup_logging()
        second = setup_logging()
        assert first is second
        assert len(second.handlers) == 1

    def test_oserror_falls_back_to_console(self, tmp_home):
        """An unwritable log file falls back to a WARNING console handler."""
        with patch("waitstatus.logging.logging.FileHandler") as mock_file_handler:
            mock_file_handler.side_effect = OSError("Permission denied")
            logger = setup_logging()

        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.WARNING


class TestDefaultLogPath:
    """Where setup_logging writes when no path is passed."""

    def test_home_by_default(self, tmp_home):
        """Without overrides the log lives in HOME."""
        assert default_log_path() == tmp_home / ".waitstatus.log"

    def test_beside_config_override(self, tmp_path, monkeypatch):
        """A WAITSTATUS_CONFIG override moves the log next to it."""
        monkeypatch.setenv("WAITSTATUS_CONFIG", str(tmp_path / "ci" / "waitstatus.json"))
        assert default_log_path() == tmp_path / "ci" / "waitstatus.log"

    def test_log_override_wins(self, tmp_path, monkeypatch):
        """WAITSTATUS_LOG takes precedence over everything."""
        monkeypatch.setenv("WAITSTATUS_CONFIG", str(tmp_path / "waitstatus.json"))
        monkeypatch.setenv("WAITSTATUS_LOG", str(tmp_path / "run.log"))
        assert default_log_path() == tmp_path / "run.log"

    def test_setup_logging_honours_override(self, tmp_home, tmp_path, monkeypatch):
        """Nothing is written to HOME when the log is redirected."""
        target = tmp_path / "elsewhere.log"
        monkeypatch.setenv("WAITSTATUS_LOG", str(target))

        logger = setup_logging()
        logger.info("redirected")
        for handler in logger.handlers:
            handler.flush()

        assert "redirected" in target.read_text()
        assert not (tmp_home / ".waitstatus.log").exists()

    def test_explicit_path(self, tmp_path):
        """An explicit path bypasses the environment."""
        target = tmp_path / "explicit.log"
        logger = setup_logging(target)
        assert logger.handlers[0].baseFilename == str(target)
