"""Pytest configuration and fixtures for waitstatus tests."""

import json

import pytest


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch):
    """Ignore any WAITSTATUS_CONFIG or WAITSTATUS_LOG set in the developer's environment."""
    monkeypatch.delenv("WAITSTATUS_CONFIG", raising=False)
    monkeypatch.delenv("WAITSTATUS_LOG", raising=False)


@pytest.fixture
def tmp_home(tmp_path, monkeypatch):
    """
    Mock home directory for isolated tests.

    Args:
        tmp_path: Pytest temporary directory
        monkeypatch: Pytest monkeypatch fixture

    Yields:
        Path: Temporary home directory
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    yield tmp_path


@pytest.fixture
def tmp_config_file(tmp_home):
    """
    Temporary .waitstatus.json config file in the mocked home.

    Yields:
        Path: Path to temporary .waitstatus.json
    """
    config_path = tmp_home / ".waitstatus.json"
    config_path.write_text(
        json.dumps({"layout": "auto", "signal_offset": 128, "json_output": False})
    )
    yield config_path
