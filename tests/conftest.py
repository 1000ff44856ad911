from datetime import date

import pytest

MONDAY = date(2026, 1, 5)
WEDNESDAY = date(2026, 1, 7)
SUNDAY = date(2026, 1, 11)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep storage in a temp dir and the default locale at its built-in value."""
    monkeypatch.setenv("RACE_PLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("RACE_PLANNER_LOCALE", raising=False)
    monkeypatch.delenv("RACE_PLANNER_LOG_LEVEL", raising=False)
