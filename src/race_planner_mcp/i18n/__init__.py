"""Localization catalog for the Race Planner MCP Server."""

from race_planner_mcp.i18n.catalog import (
    error_message,
    format_date_long,
    race_label,
    resolve_locale,
    session_description,
    session_title,
    weekday_name,
    weekly_focus,
)

__all__ = [
    "error_message",
    "format_date_long",
    "race_label",
    "resolve_locale",
    "session_description",
    "session_title",
    "weekday_name",
    "weekly_focus",
]
