import json

from race_planner_mcp.engine import generate_plan
from race_planner_mcp.models.planner_state import PlannerState
from race_planner_mcp.models.training_plan import PlanMode, PlannerForm, RaceType
from race_planner_mcp.storage import PlannerStateStorage, TrainingPlanStorage, default_form

from conftest import MONDAY


def _plan_and_form():
    form = PlannerForm(race_type="5k", goal_time="0:25", mode="weeks", training_weeks=4, days_per_week=3)
    return form, generate_plan(form, "en", today=MONDAY)


def test_storage_uses_configured_data_dir(tmp_path):
    storage = TrainingPlanStorage()
    assert storage.data_dir == tmp_path / "training_plans"
    assert storage.data_dir.is_dir()


def test_default_form():
    form = default_form(MONDAY)
    assert form.race_type == RaceType.MARATHON
    assert form.mode == PlanMode.DATE
    assert form.race_date == "2026-04-27"
    assert form.goal_time == "03:45"
    assert form.training_weeks == 16
    assert form.days_per_week == 4


def test_missing_state_loads_default_form(tmp_path):
    state = PlannerStateStorage(tmp_path).load_state(MONDAY)
    assert state.form == default_form(MONDAY)
    assert state.plan is None
    assert state.has_plan is False


def test_state_round_trip(tmp_path):
    form, plan = _plan_and_form()
    storage = PlannerStateStorage(tmp_path)
    storage.save_state(PlannerState(form=form, plan=plan, last_error=""))

    state = storage.load_state(MONDAY)
    assert state.form == form
    assert state.plan == plan
    assert state.has_plan is True


def test_corrupt_state_is_sanitized(tmp_path):
    storage = PlannerStateStorage(tmp_path)
    storage.state_path.write_text("{not json")
    assert storage.load_state(MONDAY).form == default_form(MONDAY)

    storage.state_path.write_text(json.dumps({"form": {"race_type": "ultra"}, "plan": None}))
    assert storage.load_state(MONDAY).form == default_form(MONDAY)


def test_invalid_stored_plan_is_dropped_but_form_kept(tmp_path):
    form, _ = _plan_and_form()
    storage = PlannerStateStorage(tmp_path)
    storage.state_path.write_text(
        json.dumps({"form": form.model_dump(mode="json"), "plan": {"weeks": "nope"}, "last_error": 3})
    )
    state = storage.load_state(MONDAY)
    assert state.form == form
    assert state.plan is None
    assert state.last_error == ""


def test_bad_stored_numbers_keep_rest_of_form(tmp_path):
    storage = PlannerStateStorage(tmp_path)
    storage.state_path.write_text(
        json.dumps(
            {
                "form": {
                    "race_type": "5k",
                    "custom_distance_km": "abc",
                    "goal_time": "0:22",
                    "mode": "weeks",
                    "race_date": None,
                    "training_weeks": "12",
                    "days_per_week": "",
                },
                "plan": None,
            }
        )
    )
    form = storage.load_state(MONDAY).form
    assert form.race_type == RaceType.FIVE_K
    assert form.goal_time == "0:22"
    assert form.mode == PlanMode.WEEKS
    assert form.training_weeks == 12
    assert form.custom_distance_km is None
    assert form.days_per_week is None

    plan = generate_plan(form, "en", today=MONDAY)
    assert plan.total_weeks == 12
    assert plan.days_per_week == 4


def test_reset_state(tmp_path):
    form, plan = _plan_and_form()
    storage = PlannerStateStorage(tmp_path)
    storage.save_state(PlannerState(form=form, plan=plan, last_error="boom"))
    state = storage.reset(MONDAY)
    assert state.plan is None
    assert storage.load_state(MONDAY).form == default_form(MONDAY)


def test_save_get_list_delete_plans(tmp_path):
    form, plan = _plan_and_form()
    storage = TrainingPlanStorage(tmp_path)

    entry = storage.save_plan("Spring 5k", form, plan)
    unnamed = storage.save_plan("  ", form, plan, plan_id="fixed")
    assert unnamed.id == "fixed"
    assert unnamed.name == "5 km"

    loaded = storage.get_plan(entry.id)
    assert loaded.name == "Spring 5k"
    assert loaded.plan == plan
    assert loaded.form == form

    summaries = storage.list_plans()
    assert {s["id"] for s in summaries} == {entry.id, "fixed"}
    assert summaries[0]["created_at"] >= summaries[1]["created_at"]
    assert summaries[0]["start_date"] == "2026-01-05"

    assert storage.delete_plan(entry.id) is True
    assert storage.delete_plan(entry.id) is False
    assert storage.get_plan(entry.id) is None


def test_invalid_saved_plan_is_skipped(tmp_path):
    storage = TrainingPlanStorage(tmp_path)
    (storage.data_dir / "plan_broken.json").write_text(json.dumps({"id": "broken"}))
    assert storage.get_plan("broken") is None
    assert storage.list_plans() == []
