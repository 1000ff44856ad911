"""Pydantic models for persisted planner state and saved plans."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from race_planner_mcp.models.training_plan import PlannerForm, TrainingPlan


class PlannerState(BaseModel):
    """The planner's working state: last form, last plan, last error."""

    form: PlannerForm = Field(default_factory=PlannerForm)
    plan: Optional[TrainingPlan] = None
    last_error: str = ""

    @property
    def has_plan(self) -> bool:
        return bool(self.plan and self.plan.weeks)


class SavedPlanEntry(BaseModel):
    """A named snapshot of a generated plan and the form that produced it."""

    id: str
    name: str
    created_at: datetime
    form: PlannerForm
    plan: TrainingPlan
