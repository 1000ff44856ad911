from datetime import date

from race_planner_mcp.i18n import (
    error_message,
    format_date_long,
    race_label,
    resolve_locale,
    session_description,
    session_title,
    weekday_name,
    weekly_focus,
)
from race_planner_mcp.i18n.catalog import (
    ERRORS,
    FOCUS,
    RACE_LABELS,
    SESSION_DESCRIPTIONS,
    SESSION_TITLES,
    WEEKDAYS,
)


def test_catalog_has_same_keys_for_every_locale():
    for table in (ERRORS, FOCUS, RACE_LABELS, SESSION_DESCRIPTIONS, SESSION_TITLES):
        key_sets = {locale: set(entries) for locale, entries in table.items()}
        assert set(key_sets) == {"nl", "en", "fr"}
        assert key_sets["nl"] == key_sets["en"] == key_sets["fr"]
    assert all(len(names) == 7 for names in WEEKDAYS.values())


def test_resolve_locale(monkeypatch):
    assert resolve_locale("EN") == "en"
    assert resolve_locale(" fr ") == "fr"
    assert resolve_locale(None) == "nl"
    assert resolve_locale("de") == "nl"
    monkeypatch.setenv("RACE_PLANNER_LOCALE", "fr")
    assert resolve_locale("de") == "fr"


def test_weekday_names_start_on_monday():
    assert weekday_name(date(2026, 1, 5), "en") == "Monday"
    assert weekday_name(date(2026, 1, 11), "nl") == "Zondag"
    assert weekday_name(date(2026, 1, 7), "fr") == "Mercredi"


def test_race_labels():
    assert race_label("half-marathon", 21, "nl") == "Halve Marathon"
    assert race_label("half-marathon", 21, "fr") == "Semi-marathon"
    assert race_label("custom", 12.5, "en") == "Custom race (12.5 km)"
    assert race_label("custom", 15.0, "nl") == "Eigen wedstrijd (15 km)"


def test_session_text():
    assert session_title("long", "en") == "Long run"
    assert session_title("race", "fr", race_label="Marathon") == "Course: Marathon"
    assert session_description("easy", 5.0, "10 km", "en").startswith("Easy run of 5 km.")
    assert session_description("race", 10.0, "10 km", "en").startswith("10 km race day.")


def test_weekly_focus_and_errors():
    assert weekly_focus("peak", "en").startswith("Peak block")
    assert error_message("missing_race_date", "en") == "Choose a race date or switch to training weeks."
    assert error_message("invalid_race_date").startswith("Wedstrijddatum is ongeldig")


def test_format_date_long():
    assert format_date_long("2026-01-05", "en") == "05 January 2026"
    assert format_date_long("2026-03-21", "nl") == "21 maart 2026"
    assert format_date_long("2026-08-01", "fr") == "01 aout 2026"
    assert format_date_long("2026-02-30", "en") == "Unknown date"
    assert format_date_long("", "fr") == "Date inconnue"
