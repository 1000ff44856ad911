"""Pydantic models for the Race Planner MCP Server."""

from race_planner_mcp.models.training_plan import (
    PlanMode,
    PlannerForm,
    RaceType,
    SessionType,
    TrainingPlan,
    TrainingSession,
    TrainingWeek,
    WeekLoadProfile,
    WeekPhase,
)
from race_planner_mcp.models.planner_state import (
    PlannerState,
    SavedPlanEntry,
)

__all__ = [
    # Planner input
    "RaceType",
    "PlanMode",
    "PlannerForm",
    # Training plan models
    "SessionType",
    "WeekPhase",
    "WeekLoadProfile",
    "TrainingSession",
    "TrainingWeek",
    "TrainingPlan",
    # Persisted state
    "PlannerState",
    "SavedPlanEntry",
]
