from datetime import date, timedelta

import pytest

from race_planner_mcp.engine import (
    InvalidGoalTimeError,
    InvalidRaceDateError,
    MissingRaceDateError,
    RaceDateNotFutureError,
    generate_plan,
)
from race_planner_mcp.engine.generator import week_total_km
from race_planner_mcp.models.training_plan import PlannerForm, TrainingPlan

from conftest import MONDAY, SUNDAY, WEDNESDAY


def _form(**overrides):
    values = {
        "race_type": "10k",
        "goal_time": "00:45",
        "mode": "weeks",
        "training_weeks": 8,
        "days_per_week": 3,
        "custom_distance_km": 10,
    }
    values.update(overrides)
    return PlannerForm(**values)


def _sessions(plan):
    return [session for week in plan.weeks for session in week.sessions]


def _long_runs(plan):
    return {
        week.week_number: next(s.distance_km for s in week.sessions if s.type == "long")
        for week in plan.weeks
        if any(s.type == "long" for s in week.sessions)
    }


def assert_plan_invariants(plan: TrainingPlan) -> None:
    assert 2 <= plan.total_weeks <= 52
    assert 2 <= plan.days_per_week <= 7
    assert len(plan.weeks) == plan.total_weeks
    assert [w.week_number for w in plan.weeks] == list(range(1, plan.total_weeks + 1))

    for week in plan.weeks:
        assert week.start_date.weekday() == 0
        assert week.end_date == week.start_date + timedelta(days=6)
        assert [s.date for s in week.sessions] == sorted(s.date for s in week.sessions)
        assert week.total_distance_km == week_total_km(week.sessions)
        assert (week.total_distance_km * 2).is_integer()
    for previous, current in zip(plan.weeks, plan.weeks[1:]):
        assert current.start_date == previous.start_date + timedelta(days=7)

    sessions = _sessions(plan)
    assert len({s.id for s in sessions}) == len(sessions)
    for session in sessions:
        assert plan.start_date <= session.date <= plan.end_date
        assert session.distance_km > 0
        assert (session.distance_km * 2).is_integer()

    races = [s for s in sessions if s.type == "race"]
    assert all(s.date != plan.end_date for s in sessions if s.type != "race")
    assert len(races) == 1
    assert races[0].date == plan.end_date
    assert races[0] in plan.weeks[-1].sessions


def test_scenario_ten_k_by_weeks():
    plan = generate_plan(_form(), "en", today=MONDAY)

    assert_plan_invariants(plan)
    assert plan.total_weeks == 8
    assert plan.distance_km == 10
    assert plan.goal_time_minutes == 45
    assert plan.target_pace_min_per_km == 4.5
    assert plan.start_date == MONDAY
    assert plan.end_date == date(2026, 3, 1)
    assert plan.race_label == "10 km"

    for week in plan.weeks[:7]:
        assert len(week.sessions) == 3
        assert [s.weekday for s in week.sessions] == ["Tuesday", "Thursday", "Sunday"]
    assert [s.type for s in plan.weeks[0].sessions] == ["easy", "tempo", "long"]

    race_week = plan.weeks[-1]
    assert [s.type for s in race_week.sessions] == ["easy", "easy", "race"]
    race = race_week.sessions[-1]
    assert race.distance_km == 10
    assert race.pace == "4:30 min/km"
    assert race.title == "Race: 10 km"
    assert race.weekday == "Sunday"


def test_scenario_marathon_by_date():
    form = _form(
        race_type="marathon",
        goal_time="03:30",
        mode="date",
        race_date=(MONDAY + timedelta(days=180)).isoformat(),
        days_per_week=5,
    )
    plan = generate_plan(form, "en", today=MONDAY)

    assert_plan_invariants(plan)
    assert plan.total_weeks == 26
    assert plan.end_date == date(2026, 7, 4)
    assert plan.distance_km == 42

    taper_focus = [w.focus for w in plan.weeks[22:25]]
    assert taper_focus[0].startswith("Early taper")
    assert taper_focus[1].startswith("Taper week")
    assert taper_focus[2].startswith("Final taper week")

    long_runs = _long_runs(plan)
    recovery_weeks = {4, 8, 12, 16}
    building = [long_runs[w] for w in range(1, 23) if w not in recovery_weeks]
    assert building == sorted(building)
    assert long_runs[22] == 32
    assert long_runs[22] > long_runs[23] > long_runs[24] > long_runs[25]
    assert 26 not in long_runs

    race_week = plan.weeks[-1]
    assert [s.type for s in race_week.sessions] == ["recovery", "easy", "easy", "easy", "race"]
    assert race_week.sessions[-1].weekday == "Saturday"


def test_scenario_custom_zero_distance_falls_back_to_ten():
    plan = generate_plan(_form(race_type="custom", custom_distance_km=0), "en", today=MONDAY)
    assert plan.distance_km == 10
    assert plan.race_label == "Custom race (10 km)"
    assert _sessions(plan)[-1].distance_km == 10


def test_custom_distance_is_clamped():
    assert generate_plan(_form(race_type="custom", custom_distance_km=500), "en", today=MONDAY).distance_km == 100
    assert generate_plan(_form(race_type="custom", custom_distance_km=-3), "en", today=MONDAY).distance_km == 1


def test_generation_is_deterministic():
    form = _form(race_type="half-marathon", goal_time="1:45:30", training_weeks=14, days_per_week=6)
    first = generate_plan(form, "fr", today=WEDNESDAY)
    second = generate_plan(form, "fr", today=WEDNESDAY)
    assert first.model_dump_json() == second.model_dump_json()


def test_plan_round_trips_through_json():
    plan = generate_plan(_form(training_weeks=4), "en", today=MONDAY)
    restored = TrainingPlan.model_validate_json(plan.model_dump_json())
    assert restored == plan
    dumped = plan.model_dump(mode="json")
    assert dumped["start_date"] == "2026-01-05"
    assert dumped["weeks"][0]["sessions"][0]["date"] == "2026-01-06"


def test_first_week_is_truncated_by_start_date():
    plan = generate_plan(_form(days_per_week=4), "en", today=WEDNESDAY)
    assert_plan_invariants(plan)
    first_week = plan.weeks[0]
    assert first_week.start_date == MONDAY
    assert [s.date for s in first_week.sessions] == [date(2026, 1, 7), date(2026, 1, 9), date(2026, 1, 11)]


def test_default_locale_is_dutch():
    plan = generate_plan(_form(), today=MONDAY)
    assert plan.weeks[0].sessions[0].weekday == "Dinsdag"
    assert plan.weeks[-1].sessions[-1].title == "Wedstrijd: 10 km"


def test_days_per_week_is_normalized():
    plan = generate_plan(_form(days_per_week=12), "en", today=MONDAY)
    assert plan.days_per_week == 7
    assert len(plan.weeks[0].sessions) == 7
    plan = generate_plan(_form(days_per_week=float("nan")), "en", today=MONDAY)
    assert plan.days_per_week == 4


RACE_TYPES = ["marathon", "half-marathon", "10k", "5k", "custom"]


@pytest.mark.parametrize("race_type", RACE_TYPES)
@pytest.mark.parametrize("days", [2, 3, 4, 5, 6, 7])
@pytest.mark.parametrize("weeks", [2, 3, 5, 9, 16, 52])
def test_invariants_by_weeks(race_type, days, weeks):
    form = _form(race_type=race_type, custom_distance_km=37, training_weeks=weeks, days_per_week=days)
    for today in (MONDAY, WEDNESDAY, SUNDAY):
        assert_plan_invariants(generate_plan(form, "en", today=today))


@pytest.mark.parametrize("race_type", RACE_TYPES)
@pytest.mark.parametrize("days", [2, 4, 7])
@pytest.mark.parametrize("days_ahead", [1, 2, 6, 9, 20, 100, 400])
def test_invariants_by_date(race_type, days, days_ahead):
    for today in (MONDAY, WEDNESDAY, SUNDAY):
        form = _form(
            race_type=race_type,
            mode="date",
            race_date=(today + timedelta(days=days_ahead)).isoformat(),
            days_per_week=days,
            custom_distance_km=3,
        )
        assert_plan_invariants(generate_plan(form, "nl", today=today))


def test_invalid_goal_time_is_rejected():
    with pytest.raises(InvalidGoalTimeError):
        generate_plan(_form(goal_time=""), today=MONDAY)
    with pytest.raises(InvalidGoalTimeError):
        generate_plan(_form(goal_time="3:75"), today=MONDAY)


def test_race_date_errors():
    with pytest.raises(RaceDateNotFutureError) as exc_info:
        generate_plan(_form(mode="date", race_date=MONDAY.isoformat()), "en", today=MONDAY)
    assert str(exc_info.value) == "Race date must be after today."

    with pytest.raises(InvalidRaceDateError):
        generate_plan(_form(mode="date", race_date="2020-02-30"), today=MONDAY)
    with pytest.raises(MissingRaceDateError):
        generate_plan(_form(mode="date", race_date=None), today=MONDAY)


def test_goal_time_is_checked_before_race_date():
    with pytest.raises(InvalidGoalTimeError):
        generate_plan(_form(goal_time="x", mode="date", race_date="2020-02-30"), today=MONDAY)
