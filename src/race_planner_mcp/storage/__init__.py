"""Storage modules for the Race Planner MCP Server."""

from race_planner_mcp.storage.base import BaseStorage
from race_planner_mcp.storage.planner_state import PlannerStateStorage, default_form
from race_planner_mcp.storage.training_plans import TrainingPlanStorage

__all__ = [
    "BaseStorage",
    "PlannerStateStorage",
    "TrainingPlanStorage",
    "default_form",
]
