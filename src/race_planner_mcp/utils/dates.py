"""Date utility functions for the Race Planner MCP Server."""

import re
from datetime import date, timedelta

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str) -> date:
    """
    Parse a date string in ISO format (YYYY-MM-DD).

    Args:
        date_str: Date string in ISO format

    Returns:
        Date object
    """
    if not is_valid_iso_date(date_str):
        raise ValueError(f"Invalid date format: {date_str}. Expected format: YYYY-MM-DD")
    return date.fromisoformat(date_str)


def is_valid_iso_date(date_str: str | None) -> bool:
    """Check that a string is YYYY-MM-DD and names a real calendar day."""
    if not date_str or not ISO_DATE_PATTERN.match(date_str):
        return False
    try:
        parsed = date.fromisoformat(date_str)
    except ValueError:
        return False
    return parsed.isoformat() == date_str


def add_days(date_obj: date, days: int) -> date:
    """Shift a date by a number of days."""
    return date_obj + timedelta(days=days)


def start_of_week_monday(date_obj: date) -> date:
    """Get the Monday on or before the given date."""
    return date_obj - timedelta(days=date_obj.weekday())
