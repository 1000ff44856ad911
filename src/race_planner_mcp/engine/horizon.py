"""Horizon resolver: plan start, end and week count."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from race_planner_mcp.engine.errors import (
    InvalidRaceDateError,
    MissingRaceDateError,
    RaceDateNotFutureError,
)
from race_planner_mcp.engine.normalize import MAX_WEEKS, MIN_WEEKS, normalize_training_weeks
from race_planner_mcp.models.training_plan import PlanMode
from race_planner_mcp.utils.dates import add_days, is_valid_iso_date, start_of_week_monday
from race_planner_mcp.utils.formatting import clamp


@dataclass(frozen=True)
class PlanHorizon:
    """Resolved plan bounds. Weeks are anchored on start_monday."""

    start_date: date
    start_monday: date
    end_date: date
    total_weeks: int

    def week_start(self, week_number: int) -> date:
        return add_days(self.start_monday, (week_number - 1) * 7)


def resolve_horizon(
    mode: PlanMode,
    race_date: Optional[str],
    training_weeks: object,
    today: date,
    locale: Optional[str] = None,
) -> PlanHorizon:
    """
    Compute the plan horizon from a race date or a requested week count.

    Args:
        mode: PlanMode.DATE uses race_date, PlanMode.WEEKS uses training_weeks
        race_date: Race date as YYYY-MM-DD (date mode only)
        training_weeks: Raw week count (weeks mode only, normalized here)
        today: The generation day; becomes the plan start date
        locale: Locale for error messages

    Returns:
        PlanHorizon with start/end dates and total weeks in [2, 52]

    Raises:
        MissingRaceDateError, InvalidRaceDateError, RaceDateNotFutureError
    """
    start_monday = start_of_week_monday(today)

    if PlanMode(mode) == PlanMode.DATE:
        if not race_date:
            raise MissingRaceDateError(locale)
        if not is_valid_iso_date(race_date):
            raise InvalidRaceDateError(locale)
        end_date = date.fromisoformat(race_date)
        if end_date <= today:
            raise RaceDateNotFutureError(locale)
        total_weeks = int(clamp((end_date - start_monday).days // 7 + 1, MIN_WEEKS, MAX_WEEKS))
    else:
        total_weeks = normalize_training_weeks(training_weeks)
        # Anchored on the Monday so race day closes the final week
        end_date = add_days(start_monday, total_weeks * 7 - 1)

    return PlanHorizon(
        start_date=today,
        start_monday=start_monday,
        end_date=end_date,
        total_weeks=total_weeks,
    )
