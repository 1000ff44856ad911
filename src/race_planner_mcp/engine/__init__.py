"""Deterministic training plan generation engine."""

from race_planner_mcp.engine.errors import (
    InvalidGoalTimeError,
    InvalidRaceDateError,
    MissingRaceDateError,
    PlanGenerationError,
    RaceDateNotFutureError,
)
from race_planner_mcp.engine.generator import generate_plan

__all__ = [
    "generate_plan",
    "PlanGenerationError",
    "InvalidGoalTimeError",
    "MissingRaceDateError",
    "InvalidRaceDateError",
    "RaceDateNotFutureError",
]
