"""Formatting utilities for pace, goal times and distances."""

import math

MIN_PACE_MIN_PER_KM = 2.5


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up (e.g. 4.25 -> 4.5)."""
    return math.floor(value * 2 + 0.5) / 2


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]; maximum wins if the bounds cross."""
    return min(maximum, max(minimum, value))


def format_pace(min_per_km: float) -> str:
    """Convert a pace in decimal minutes per km to 'M:SS min/km' (e.g. '5:20 min/km')."""
    minutes = math.floor(min_per_km)
    seconds = math.floor((min_per_km - minutes) * 60 + 0.5)
    if seconds == 60:
        minutes += 1
        seconds = 0
    return f"{minutes}:{seconds:02d} min/km"


def format_pace_range(min_per_km: float, fast_delta: float, slow_delta: float) -> str:
    """Format a 'fast - slow' pace range around a target pace."""
    fast = format_pace(max(MIN_PACE_MIN_PER_KM, min_per_km + fast_delta))
    slow = format_pace(min_per_km + slow_delta)
    return f"{fast} - {slow}"


def format_goal_time(minutes: float) -> str:
    """Convert a duration in decimal minutes to HH:MM:SS."""
    hours = math.floor(minutes / 60)
    mins = math.floor(minutes % 60)
    secs = math.floor((minutes % 1) * 60 + 0.5)
    return f"{hours:02d}:{mins:02d}:{secs:02d}"


def format_distance(distance_km: float) -> str:
    """Format a half-km distance without a trailing '.0' (e.g. 12 or 12.5)."""
    if float(distance_km).is_integer():
        return str(int(distance_km))
    return str(distance_km)
