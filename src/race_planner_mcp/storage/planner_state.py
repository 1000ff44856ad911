"""Storage for the planner's working state (last form, plan and error)."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from race_planner_mcp.models.planner_state import PlannerState
from race_planner_mcp.models.training_plan import PlannerForm, PlanMode, RaceType
from race_planner_mcp.storage.base import BaseStorage
from race_planner_mcp.utils.dates import add_days

logger = logging.getLogger(__name__)

DEFAULT_RACE_DATE_OFFSET_DAYS = 112


def default_form(today: Optional[date] = None) -> PlannerForm:
    """The form a new user starts with: a marathon 16 weeks out."""
    today = today or date.today()
    return PlannerForm(
        race_type=RaceType.MARATHON,
        custom_distance_km=15,
        goal_time="03:45",
        mode=PlanMode.DATE,
        race_date=add_days(today, DEFAULT_RACE_DATE_OFFSET_DAYS).isoformat(),
        training_weeks=16,
        days_per_week=4,
    )


class PlannerStateStorage(BaseStorage):
    """Single-document storage for the current planner state."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        """Initialize planner state storage in the planner_state directory."""
        super().__init__("planner_state", data_dir)
        self.state_path = self.data_dir / "state.json"

    def load_state(self, today: Optional[date] = None) -> PlannerState:
        """
        Load the stored state, sanitizing whatever is on disk.

        A missing or corrupt document, or a form that no longer validates,
        yields the default form. A stored plan that no longer validates is
        dropped while a valid form is kept.
        """
        data = self._load_json(self.state_path)
        if not isinstance(data, dict):
            return PlannerState(form=default_form(today))

        form = self._load_form(data.get("form"), today)
        plan = data.get("plan")
        last_error = data.get("last_error")
        try:
            return PlannerState(
                form=form,
                plan=plan,
                last_error=last_error if isinstance(last_error, str) else "",
            )
        except ValidationError as e:
            logger.warning("Dropping invalid stored plan: %s", e)
            return PlannerState(form=form)

    def _load_form(self, data: Any, today: Optional[date]) -> PlannerForm:
        if not isinstance(data, dict):
            return default_form(today)
        try:
            return PlannerForm.model_validate(data)
        except ValidationError as e:
            logger.warning("Resetting invalid stored form: %s", e)
            return default_form(today)

    def save_state(self, state: PlannerState) -> None:
        """Persist the planner state."""
        self._save_json(self.state_path, state.model_dump(mode="json"))

    def reset(self, today: Optional[date] = None) -> PlannerState:
        """Replace the stored state with the default form and no plan."""
        state = PlannerState(form=default_form(today))
        self.save_state(state)
        return state
