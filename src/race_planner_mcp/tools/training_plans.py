"""MCP tools for generating and managing training plans."""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from race_planner_mcp.engine import PlanGenerationError, generate_plan
from race_planner_mcp.i18n import resolve_locale
from race_planner_mcp.models.planner_state import PlannerState
from race_planner_mcp.models.training_plan import PlannerForm
from race_planner_mcp.storage.planner_state import PlannerStateStorage
from race_planner_mcp.storage.training_plans import TrainingPlanStorage

logger = logging.getLogger(__name__)


def register_training_plan_tools(mcp, data_dir: Optional[Path] = None):
    """Register training plan MCP tools."""

    state_storage = PlannerStateStorage(data_dir)
    plan_storage = TrainingPlanStorage(data_dir)

    @mcp.tool()
    def generate_training_plan(
        race_type: str = "marathon",
        goal_time: str = "03:45",
        mode: str = "weeks",
        race_date: str | None = None,
        training_weeks: int = 16,
        days_per_week: int = 4,
        custom_distance_km: float = 10,
        locale: str | None = None,
    ) -> dict[str, Any]:
        """
        Generate a periodized training plan for a race.

        The plan runs from today to race day and is organized in Monday to
        Sunday weeks (base, build, peak, taper and race phases with a recovery
        week every 4th week). The form and plan become the planner's current state.

        Args:
            race_type: marathon, half-marathon, 10k, 5k or custom
            goal_time: Goal finish time as hh:mm or hh:mm:ss (e.g. 03:45)
            mode: "date" to plan up to race_date, "weeks" for training_weeks
            race_date: Race date as YYYY-MM-DD (date mode)
            training_weeks: Number of weeks, 2 to 52 (weeks mode)
            days_per_week: Training days per week, 2 to 7
            custom_distance_km: Race distance for custom races, 1 to 100 km
            locale: Text language: nl, en or fr

        Returns:
            Dictionary containing the generated plan, or an error message
        """
        locale = resolve_locale(locale)
        try:
            form = PlannerForm(
                race_type=race_type,
                goal_time=goal_time,
                mode=mode,
                race_date=race_date,
                training_weeks=training_weeks,
                days_per_week=days_per_week,
                custom_distance_km=custom_distance_km,
            )
        except ValidationError as e:
            message = f"Invalid planner input: {e}"
            state = state_storage.load_state()
            state_storage.save_state(state.model_copy(update={"last_error": message}))
            return {"error": message}

        try:
            plan = generate_plan(form, locale)
        except PlanGenerationError as e:
            logger.info("Rejected planner input: %s", e)
            # The previous plan stays current
            state = state_storage.load_state()
            state_storage.save_state(state.model_copy(update={"form": form, "last_error": str(e)}))
            return {"error": str(e)}

        state_storage.save_state(PlannerState(form=form, plan=plan))
        return {"data": plan.model_dump(mode="json")}

    @mcp.tool()
    def get_planner_state() -> dict[str, Any]:
        """
        Get the planner's current form, last generated plan and last error.

        Returns:
            Dictionary with form, plan (or null), last_error and has_plan
        """
        state = state_storage.load_state()
        return {"data": {**state.model_dump(mode="json"), "has_plan": state.has_plan}}

    @mcp.tool()
    def reset_planner_state() -> dict[str, Any]:
        """
        Reset the planner to the default form and discard the current plan.

        Returns:
            Dictionary containing the default form
        """
        state = state_storage.reset()
        return {"data": {"form": state.form.model_dump(mode="json"), "reset": True}}

    @mcp.tool()
    def save_training_plan(name: str = "") -> dict[str, Any]:
        """
        Save the current plan under a name so it can be reopened later.

        Args:
            name: Display name; defaults to the race label

        Returns:
            Dictionary with plan_id and saved status
        """
        state = state_storage.load_state()
        if not state.has_plan:
            return {"error": "No generated plan to save. Call generate_training_plan first."}

        entry = plan_storage.save_plan(name, state.form, state.plan)
        return {"data": {"plan_id": entry.id, "saved": True, "name": entry.name}}

    @mcp.tool()
    def list_training_plans() -> dict[str, Any]:
        """
        List all saved training plans.

        Returns:
            Dictionary containing plan summaries, newest first
        """
        plans = plan_storage.list_plans()
        return {"data": {"plans": plans, "count": len(plans)}}

    @mcp.tool()
    def get_training_plan(plan_id: str) -> dict[str, Any]:
        """
        Get a saved training plan by ID.

        Args:
            plan_id: The plan ID to retrieve

        Returns:
            Dictionary containing the saved entry (name, form and plan)
        """
        entry = plan_storage.get_plan(plan_id)
        if entry is None:
            return {"error": f"Plan not found: {plan_id}"}
        return {"data": entry.model_dump(mode="json")}

    @mcp.tool()
    def delete_training_plan(plan_id: str) -> dict[str, Any]:
        """
        Delete a saved training plan.

        Args:
            plan_id: The plan ID to delete

        Returns:
            Dictionary with deletion status
        """
        if not plan_storage.delete_plan(plan_id):
            return {"error": f"Plan not found: {plan_id}"}
        return {"data": {"plan_id": plan_id, "deleted": True}}
