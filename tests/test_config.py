import logging
from pathlib import Path

import pytest

from race_planner_mcp.config import Settings, get_data_dir, get_default_locale, get_settings
from race_planner_mcp.logging_config import setup_logging


def test_settings_frozen():
    settings = Settings(data_dir=Path("/tmp"))
    assert settings.default_locale == "nl"
    assert settings.log_level == "INFO"
    with pytest.raises(AttributeError):
        settings.log_level = "DEBUG"


def test_get_settings_uses_env(monkeypatch, tmp_path):
    monkeypatch.setenv("RACE_PLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RACE_PLANNER_LOCALE", "EN")
    monkeypatch.setenv("RACE_PLANNER_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.data_dir == tmp_path
    assert settings.default_locale == "en"
    assert settings.log_level == "DEBUG"


def test_data_dir_defaults_to_project_root(monkeypatch):
    monkeypatch.delenv("RACE_PLANNER_DATA_DIR", raising=False)
    assert (get_data_dir() / "src" / "race_planner_mcp").is_dir()


def test_unknown_locale_falls_back(monkeypatch):
    monkeypatch.setenv("RACE_PLANNER_LOCALE", "de")
    assert get_default_locale() == "nl"


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        setup_logging("debug")
        setup_logging("info")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("mcp").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
