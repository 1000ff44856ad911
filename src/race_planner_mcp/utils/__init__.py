"""Utility functions for the Race Planner MCP Server."""

from race_planner_mcp.utils.formatting import (
    clamp,
    format_distance,
    format_goal_time,
    format_pace,
    format_pace_range,
    round_to_half,
)
from race_planner_mcp.utils.dates import (
    add_days,
    is_valid_iso_date,
    parse_date,
    start_of_week_monday,
)

__all__ = [
    "clamp",
    "round_to_half",
    "format_pace",
    "format_pace_range",
    "format_goal_time",
    "format_distance",
    "add_days",
    "is_valid_iso_date",
    "parse_date",
    "start_of_week_monday",
]
