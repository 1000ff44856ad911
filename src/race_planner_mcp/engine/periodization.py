"""Periodization planner: phase, load profile and focus per week."""

import math

from race_planner_mcp.models.training_plan import RaceType, WeekLoadProfile, WeekPhase

PEAK_BLOCK_WEEKS = 3
PEAK_BLOCK_MIN_PLAN_WEEKS = 8
RECOVERY_EVERY = 4
BASE_SHARE = 0.4

_LOAD_PROFILES = {
    WeekPhase.RACE: WeekLoadProfile(long_run_factor=0.42, volume_factor=0.52, quality_factor=0.72),
    WeekPhase.RECOVERY: WeekLoadProfile(long_run_factor=0.8, volume_factor=0.84, quality_factor=0.88),
    WeekPhase.BASE: WeekLoadProfile(long_run_factor=0.94, volume_factor=0.95, quality_factor=0.9),
    WeekPhase.BUILD: WeekLoadProfile(long_run_factor=1.0, volume_factor=1.0, quality_factor=1.0),
    WeekPhase.PEAK: WeekLoadProfile(long_run_factor=1.04, volume_factor=1.03, quality_factor=1.02),
}

# Keyed by weeks remaining to race: 1 (or less), 2, 3+
_TAPER_PROFILES = {
    1: WeekLoadProfile(long_run_factor=0.52, volume_factor=0.58, quality_factor=0.78),
    2: WeekLoadProfile(long_run_factor=0.68, volume_factor=0.74, quality_factor=0.82),
    3: WeekLoadProfile(long_run_factor=0.76, volume_factor=0.8, quality_factor=0.86),
}


def taper_weeks_for(race_type: RaceType, distance_km: float, total_weeks: int) -> int:
    """Taper length: 3 weeks for marathon-class, 2 for half-class, else 1."""
    if race_type == RaceType.MARATHON or distance_km >= 35:
        target = 3
    elif race_type == RaceType.HALF_MARATHON or distance_km >= 15:
        target = 2
    else:
        target = 1
    # Short plans keep room for at least one build week before the race week.
    return max(1, min(target, total_weeks - 2))


def week_phase(week_number: int, total_weeks: int, taper_weeks: int) -> WeekPhase:
    """
    Classify a 1-based week into a training phase.

    Priority: race week, taper, peak block (plans of 8+ weeks only),
    every 4th week recovery, base for the first 40%, build otherwise.
    """
    if week_number == total_weeks:
        return WeekPhase.RACE

    weeks_to_race = total_weeks - week_number
    if weeks_to_race <= taper_weeks:
        return WeekPhase.TAPER

    peak_start = max(1, total_weeks - taper_weeks - PEAK_BLOCK_WEEKS)
    if total_weeks >= PEAK_BLOCK_MIN_PLAN_WEEKS and week_number >= peak_start:
        return WeekPhase.PEAK

    if week_number % RECOVERY_EVERY == 0:
        return WeekPhase.RECOVERY

    if week_number <= math.ceil(total_weeks * BASE_SHARE):
        return WeekPhase.BASE

    return WeekPhase.BUILD


def week_load_profile(phase: WeekPhase, weeks_to_race: int) -> WeekLoadProfile:
    """Load factors for a phase; taper weeks get lighter closer to the race."""
    if phase == WeekPhase.TAPER:
        return _TAPER_PROFILES[min(3, max(1, weeks_to_race))]
    return _LOAD_PROFILES[phase]


def focus_key(phase: WeekPhase, weeks_to_race: int) -> str:
    """Catalog key for the week's focus sentence."""
    if phase == WeekPhase.TAPER:
        if weeks_to_race <= 1:
            return "taper_final"
        if weeks_to_race == 2:
            return "taper"
        return "taper_early"
    return phase.value
