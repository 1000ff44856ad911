"""Storage for named, saved training plans."""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from race_planner_mcp.models.planner_state import SavedPlanEntry
from race_planner_mcp.models.training_plan import PlannerForm, TrainingPlan
from race_planner_mcp.storage.base import BaseStorage

logger = logging.getLogger(__name__)


class TrainingPlanStorage(BaseStorage):
    """Storage for saved plan entries, one JSON file per plan."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        """Initialize training plan storage in the training_plans directory."""
        super().__init__("training_plans", data_dir)

    def _generate_plan_id(self) -> str:
        """Generate a unique plan ID."""
        return str(uuid.uuid4())[:8]

    def _plan_path(self, plan_id: str) -> Path:
        return self.data_dir / f"plan_{plan_id}.json"

    def save_plan(
        self,
        name: str,
        form: PlannerForm,
        plan: TrainingPlan,
        plan_id: str | None = None,
    ) -> SavedPlanEntry:
        """
        Save a generated plan together with the form that produced it.

        Args:
            name: Display name; blank names default to the plan's race label
            form: The planner form used for generation
            plan: The generated training plan
            plan_id: Optional plan ID. If not provided, one will be generated.

        Returns:
            The stored entry
        """
        entry = SavedPlanEntry(
            id=plan_id or self._generate_plan_id(),
            name=name.strip() or plan.race_label,
            created_at=datetime.now(),
            form=form,
            plan=plan,
        )
        self._save_json(self._plan_path(entry.id), entry.model_dump(mode="json"))
        logger.info("Saved training plan %s (%s)", entry.id, entry.name)
        return entry

    def get_plan(self, plan_id: str) -> SavedPlanEntry | None:
        """
        Get a saved plan by ID.

        Args:
            plan_id: The plan ID

        Returns:
            The saved entry, or None if it is missing or no longer valid
        """
        data = self._load_json(self._plan_path(plan_id))
        if not isinstance(data, dict):
            return None
        try:
            return SavedPlanEntry.model_validate(data)
        except ValidationError as e:
            logger.warning("Ignoring invalid saved plan %s: %s", plan_id, e)
            return None

    def list_plans(self) -> list[dict[str, Any]]:
        """
        List saved plans with summary information, newest first.

        Returns:
            List of plan summaries (id, name, race label, dates, created_at)
        """
        summaries: list[dict[str, Any]] = []
        for file_path in self.data_dir.glob("plan_*.json"):
            entry = self.get_plan(file_path.stem.replace("plan_", "", 1))
            if entry is None:
                continue
            summaries.append({
                "id": entry.id,
                "name": entry.name,
                "race_label": entry.plan.race_label,
                "start_date": entry.plan.start_date.isoformat(),
                "end_date": entry.plan.end_date.isoformat(),
                "total_weeks": entry.plan.total_weeks,
                "created_at": entry.created_at.isoformat(),
            })
        summaries.sort(key=lambda p: p["created_at"], reverse=True)
        return summaries

    def delete_plan(self, plan_id: str) -> bool:
        """
        Delete a saved plan.

        Args:
            plan_id: The plan ID

        Returns:
            True if deleted, False if not found
        """
        return self._delete(self._plan_path(plan_id))
