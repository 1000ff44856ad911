"""Runtime configuration resolved from environment variables.

Entry points load a `.env` file (python-dotenv) before calling get_settings(),
so every value can be set there or in the process environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path

SUPPORTED_LOCALES = ("nl", "en", "fr")
DEFAULT_LOCALE = "nl"


@dataclass(frozen=True)
class Settings:
    """Immutable settings for the planner server and CLI."""

    data_dir: Path
    default_locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"


def get_data_dir() -> Path:
    """
    Get the data directory for storing local files.

    Uses RACE_PLANNER_DATA_DIR environment variable if set, otherwise defaults
    to the project root directory.

    Returns:
        Path to the data directory
    """
    env_dir = os.environ.get("RACE_PLANNER_DATA_DIR")
    if env_dir:
        return Path(env_dir)
    # Default to project root (parent of src/)
    return Path(__file__).parent.parent.parent


def get_default_locale() -> str:
    """Get the configured default locale, falling back to Dutch."""
    locale = os.environ.get("RACE_PLANNER_LOCALE", DEFAULT_LOCALE).strip().lower()
    return locale if locale in SUPPORTED_LOCALES else DEFAULT_LOCALE


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        data_dir=get_data_dir(),
        default_locale=get_default_locale(),
        log_level=os.environ.get("RACE_PLANNER_LOG_LEVEL", "INFO").upper(),
    )
