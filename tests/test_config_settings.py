"""
Tests for environment-driven settings.

Environment variables are set with monkeypatch; the autouse fixture in
conftest.py clears CSVTABLE_* variables and the settings cache.
"""

from pathlib import Path

import pytest

from csvtable.config.settings import (
    Settings,
    TableSettings,
    get_settings,
    reset_settings,
)


def test_defaults():
    settings = TableSettings.from_env()
    assert settings.encoding == "utf-8"
    assert settings.line_terminator == "\n"
    assert settings.data_dir == Path("data")


def test_from_env(monkeypatch):
    monkeypatch.setenv("CSVTABLE_ENCODING", "latin-1")
    monkeypatch.setenv("CSVTABLE_LINE_ENDING", "crlf")
    monkeypatch.setenv("CSVTABLE_DATA_DIR", "/tmp/tables")

    settings = TableSettings.from_env()

    assert settings.encoding == "latin-1"
    assert settings.line_terminator == "\r\n"
    assert settings.data_dir == Path("/tmp/tables")


def test_invalid_line_ending(monkeypatch):
    monkeypatch.setenv("CSVTABLE_LINE_ENDING", "CR")
    with pytest.raises(ValueError) as exc_info:
        TableSettings.from_env()
    assert "CSVTABLE_LINE_ENDING" in str(exc_info.value)


def test_unknown_encoding():
    with pytest.raises(ValueError) as exc_info:
        TableSettings(encoding="not-a-codec")
    assert "not-a-codec" in str(exc_info.value)


def test_invalid_line_terminator():
    with pytest.raises(ValueError):
        TableSettings(line_terminator="\r")


def test_settings_are_frozen():
    settings = TableSettings()
    with pytest.raises(AttributeError):
        settings.encoding = "ascii"


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CSVTABLE_ENCODING", "latin-1")

    # Still cached
    assert get_settings() is first
    assert get_settings().table.encoding == "utf-8"

    reset_settings()
    assert get_settings().table.encoding == "latin-1"


def test_settings_from_env_wraps_table_settings():
    settings = Settings.from_env()
    assert settings.table == TableSettings()
