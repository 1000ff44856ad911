"""Input normalization: coerce raw form values into safe ranges."""

import math
import re
from typing import Any, Optional

from race_planner_mcp.engine.errors import InvalidGoalTimeError
from race_planner_mcp.models.training_plan import RaceType
from race_planner_mcp.utils.formatting import clamp

DEFAULT_CUSTOM_DISTANCE_KM = 10.0
DEFAULT_TRAINING_WEEKS = 16
DEFAULT_DAYS_PER_WEEK = 4

MIN_WEEKS, MAX_WEEKS = 2, 52
MIN_DAYS, MAX_DAYS = 2, 7
MIN_CUSTOM_KM, MAX_CUSTOM_KM = 1.0, 100.0

RACE_DISTANCES_KM = {
    RaceType.MARATHON: 42.195,
    RaceType.HALF_MARATHON: 21.097,
    RaceType.TEN_K: 10.0,
    RaceType.FIVE_K: 5.0,
}

_GOAL_SEGMENT = re.compile(r"^\d+(\.\d+)?$")


def _finite_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def normalize_custom_distance(value: Any) -> float:
    """Custom distance as a finite number, 10 km when missing or non-numeric."""
    number = _finite_number(value)
    return DEFAULT_CUSTOM_DISTANCE_KM if number is None else number


def normalize_training_weeks(value: Any) -> int:
    """Week count rounded to an integer in [2, 52], 16 when non-numeric."""
    number = _finite_number(value)
    weeks = DEFAULT_TRAINING_WEEKS if number is None else _round_half_up(number)
    return int(clamp(weeks, MIN_WEEKS, MAX_WEEKS))


def normalize_days_per_week(value: Any) -> int:
    """Training days rounded to an integer in [2, 7], 4 when non-numeric."""
    number = _finite_number(value)
    days = DEFAULT_DAYS_PER_WEEK if number is None else _round_half_up(number)
    return int(clamp(days, MIN_DAYS, MAX_DAYS))


def resolve_distance_km(race_type: RaceType, custom_distance_km: Any) -> float:
    """
    Race distance in km for a category.

    Custom distances of zero fall back to 10 km like missing values do, and
    are then clamped to [1, 100].
    """
    race_type = RaceType(race_type)
    if race_type in RACE_DISTANCES_KM:
        return RACE_DISTANCES_KM[race_type]
    distance = normalize_custom_distance(custom_distance_km) or DEFAULT_CUSTOM_DISTANCE_KM
    return clamp(distance, MIN_CUSTOM_KM, MAX_CUSTOM_KM)


def parse_goal_time(goal_time: Optional[str], locale: Optional[str] = None) -> float:
    """
    Parse a goal finish time into total minutes.

    Args:
        goal_time: "H:MM" or "H:MM:SS"; minutes and seconds must be below 60
        locale: Locale for the error message

    Returns:
        Goal time in minutes (fractional when seconds are given)

    Raises:
        InvalidGoalTimeError: if the string is empty, malformed, or zero
    """
    cleaned = (goal_time or "").strip()
    if not cleaned:
        raise InvalidGoalTimeError(locale)

    segments = [segment.strip() for segment in cleaned.split(":")]
    if len(segments) not in (2, 3) or not all(_GOAL_SEGMENT.match(s) for s in segments):
        raise InvalidGoalTimeError(locale)

    parts = [float(segment) for segment in segments]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) == 3 else 0.0
    if minutes >= 60 or seconds >= 60:
        raise InvalidGoalTimeError(locale)

    total = hours * 60 + minutes + seconds / 60
    if total <= 0:
        raise InvalidGoalTimeError(locale)
    return total
