"""Plan generator entry point and plan assembly."""

import logging
from datetime import date
from typing import Optional

from race_planner_mcp.engine.horizon import resolve_horizon
from race_planner_mcp.engine.normalize import (
    normalize_days_per_week,
    parse_goal_time,
    resolve_distance_km,
)
from race_planner_mcp.engine.periodization import (
    focus_key,
    taper_weeks_for,
    week_load_profile,
    week_phase,
)
from race_planner_mcp.engine.sessions import (
    PlanContext,
    build_week_sessions,
    long_run_km_for_week,
    peak_long_run_km,
)
from race_planner_mcp.i18n import race_label, resolve_locale, weekly_focus
from race_planner_mcp.models.training_plan import (
    PlannerForm,
    RaceType,
    TrainingPlan,
    TrainingSession,
    TrainingWeek,
)
from race_planner_mcp.utils.dates import add_days
from race_planner_mcp.utils.formatting import round_to_half

logger = logging.getLogger(__name__)


def week_total_km(sessions: list[TrainingSession]) -> float:
    """Sum of session distances, rounded to the nearest half km."""
    return round_to_half(sum(session.distance_km for session in sessions))


def generate_plan(
    form: PlannerForm,
    locale: Optional[str] = None,
    today: Optional[date] = None,
) -> TrainingPlan:
    """
    Generate a complete training plan from planner input.

    The result depends only on the form, the locale and the given day, so
    identical inputs always produce identical plans.

    Args:
        form: Planner input; numeric fields are normalized, not validated
        locale: "nl", "en" or "fr"; defaults to the configured locale
        today: Generation day (plan start date); defaults to date.today()

    Returns:
        The generated TrainingPlan

    Raises:
        PlanGenerationError: for an invalid goal time or race date. Nothing
            is built before these checks pass.
    """
    locale = resolve_locale(locale)
    today = today or date.today()
    race_type = RaceType(form.race_type)

    goal_time_minutes = parse_goal_time(form.goal_time, locale)
    days_per_week = normalize_days_per_week(form.days_per_week)
    distance_km = resolve_distance_km(race_type, form.custom_distance_km)
    target_pace = goal_time_minutes / distance_km
    horizon = resolve_horizon(form.mode, form.race_date, form.training_weeks, today, locale)

    total_weeks = horizon.total_weeks
    taper_weeks = taper_weeks_for(race_type, distance_km, total_weeks)
    build_weeks = max(1, total_weeks - taper_weeks - 1)
    peak_km = peak_long_run_km(race_type, distance_km)

    ctx = PlanContext(
        distance_km=distance_km,
        target_pace_min_per_km=target_pace,
        race_label=race_label(race_type.value, round_to_half(distance_km), locale),
        days_per_week=days_per_week,
        start_date=horizon.start_date,
        end_date=horizon.end_date,
        locale=locale,
    )

    weeks: list[TrainingWeek] = []
    for week_number in range(1, total_weeks + 1):
        week_start = horizon.week_start(week_number)
        weeks_to_race = total_weeks - week_number
        phase = week_phase(week_number, total_weeks, taper_weeks)
        profile = week_load_profile(phase, weeks_to_race)
        long_run_km = long_run_km_for_week(week_number - 1, build_weeks, peak_km, profile)
        sessions = build_week_sessions(ctx, week_number, week_start, phase, weeks_to_race, long_run_km, profile)

        weeks.append(
            TrainingWeek(
                week_number=week_number,
                start_date=week_start,
                end_date=add_days(week_start, 6),
                focus=weekly_focus(focus_key(phase, weeks_to_race), locale),
                total_distance_km=week_total_km(sessions),
                sessions=sessions,
            )
        )

    logger.debug(
        "Generated %d-week %s plan (%s to %s, %d days/week)",
        total_weeks,
        race_type.value,
        horizon.start_date,
        horizon.end_date,
        days_per_week,
    )

    return TrainingPlan(
        race_label=ctx.race_label,
        distance_km=round_to_half(distance_km),
        goal_time_minutes=goal_time_minutes,
        target_pace_min_per_km=target_pace,
        start_date=horizon.start_date,
        end_date=horizon.end_date,
        total_weeks=total_weeks,
        days_per_week=days_per_week,
        weeks=weeks,
    )
