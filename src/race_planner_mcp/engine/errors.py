"""Errors raised when planner input cannot produce a meaningful plan."""

from typing import Optional

from race_planner_mcp.i18n import error_message


class PlanGenerationError(ValueError):
    """Base class for caller-facing plan generation failures."""

    code = "plan_generation_error"

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale
        super().__init__(error_message(self.code, locale))


class InvalidGoalTimeError(PlanGenerationError):
    """Goal time is empty, non-numeric, or has minutes/seconds of 60 or more."""

    code = "invalid_goal_time"


class MissingRaceDateError(PlanGenerationError):
    """Date mode was chosen without a race date."""

    code = "missing_race_date"


class InvalidRaceDateError(PlanGenerationError):
    """Race date is not a real YYYY-MM-DD calendar date."""

    code = "invalid_race_date"


class RaceDateNotFutureError(PlanGenerationError):
    """Race date is today or earlier."""

    code = "race_date_not_future"
