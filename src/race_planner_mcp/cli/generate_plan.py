#!/usr/bin/env python3
"""
Generate a training plan from the command line.

Plans up to a race date (--race-date) or for a number of weeks (--weeks),
prints the schedule or its JSON, and optionally saves it.
"""

import argparse
import sys
from datetime import date

from dotenv import load_dotenv

from race_planner_mcp.cli.show_plan import print_plan_overview, print_weeks
from race_planner_mcp.config import get_settings
from race_planner_mcp.engine import PlanGenerationError, generate_plan
from race_planner_mcp.logging_config import setup_logging
from race_planner_mcp.models.planner_state import PlannerState
from race_planner_mcp.models.training_plan import PlanMode, PlannerForm, RaceType
from race_planner_mcp.storage.planner_state import PlannerStateStorage
from race_planner_mcp.storage.training_plans import TrainingPlanStorage
from race_planner_mcp.utils.dates import parse_date


def build_form(args: argparse.Namespace) -> PlannerForm:
    """Build a planner form from parsed arguments."""
    return PlannerForm(
        race_type=args.race_type,
        custom_distance_km=args.distance,
        goal_time=args.goal_time,
        mode=PlanMode.DATE if args.race_date else PlanMode.WEEKS,
        race_date=args.race_date,
        training_weeks=args.weeks,
        days_per_week=args.days,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a periodized race training plan")
    parser.add_argument(
        "--race-type",
        choices=[race_type.value for race_type in RaceType],
        default=RaceType.MARATHON.value,
        help="Race category (default: marathon)",
    )
    parser.add_argument(
        "--goal-time",
        required=True,
        help="Goal finish time as hh:mm or hh:mm:ss",
    )
    parser.add_argument("--race-date", help="Race date (YYYY-MM-DD); plans up to this date")
    parser.add_argument(
        "--weeks",
        type=int,
        default=16,
        help="Number of training weeks when no race date is given (default: 16)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=4,
        help="Training days per week, 2 to 7 (default: 4)",
    )
    parser.add_argument(
        "--distance",
        type=float,
        default=10,
        help="Distance in km for --race-type custom (default: 10)",
    )
    parser.add_argument("--locale", help="Text language: nl, en or fr")
    parser.add_argument("--today", help="Plan start date (YYYY-MM-DD, default: today)")
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON")
    parser.add_argument("--save", metavar="NAME", help="Save the plan under this name")
    return parser


def main() -> int:
    """Main function to generate a training plan."""
    args = build_parser().parse_args()

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        today = parse_date(args.today) if args.today else date.today()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    form = build_form(args)
    state_storage = PlannerStateStorage()
    try:
        plan = generate_plan(form, args.locale, today=today)
    except PlanGenerationError as e:
        state = state_storage.load_state(today)
        state_storage.save_state(state.model_copy(update={"form": form, "last_error": str(e)}))
        print(f"Error: {e}")
        return 1
    state_storage.save_state(PlannerState(form=form, plan=plan))

    if args.json:
        print(plan.model_dump_json(indent=2))
    else:
        print_plan_overview(plan, args.locale)
        print_weeks(plan)

    if args.save is not None:
        entry = TrainingPlanStorage().save_plan(args.save, form, plan)
        # Keep stdout parseable in --json mode
        print(f"Saved plan {entry.id} ({entry.name})", file=sys.stderr if args.json else sys.stdout)

    return 0


if __name__ == "__main__":
    exit(main())
