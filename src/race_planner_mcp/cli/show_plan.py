#!/usr/bin/env python3
"""
Show a saved training plan.

This script prints a saved plan:
- Race, goal time and target pace
- Plan dates and week count
- Every week's focus, sessions and total distance
"""

import argparse

from dotenv import load_dotenv

from race_planner_mcp.i18n import format_date_long
from race_planner_mcp.models.training_plan import TrainingPlan
from race_planner_mcp.storage.training_plans import TrainingPlanStorage
from race_planner_mcp.utils.formatting import format_distance, format_goal_time, format_pace


def print_plan_overview(plan: TrainingPlan, locale: str | None = None) -> None:
    """Print overview of the training plan."""
    print("=" * 100)
    print("TRAINING PLAN OVERVIEW")
    print("=" * 100)
    print()
    print(f"Race:            {plan.race_label} ({format_distance(plan.distance_km)} km)")
    print(f"Goal Time:       {format_goal_time(plan.goal_time_minutes)}")
    print(f"Target Pace:     {format_pace(plan.target_pace_min_per_km)}")
    print(
        f"Plan Duration:   {format_date_long(plan.start_date.isoformat(), locale)} to "
        f"{format_date_long(plan.end_date.isoformat(), locale)}"
    )
    print(f"Weeks:           {plan.total_weeks} ({plan.days_per_week} days/week)")
    print()


def print_weeks(plan: TrainingPlan) -> None:
    """Print each week with its sessions."""
    for week in plan.weeks:
        print("-" * 100)
        print(
            f"Week {week.week_number:2d}  {week.start_date} to {week.end_date}  "
            f"{format_distance(week.total_distance_km)} km"
        )
        print(f"  {week.focus}")
        for session in week.sessions:
            print(
                f"  {session.date}  {session.weekday:<10} {session.title:<28} "
                f"{format_distance(session.distance_km):>5} km  {session.pace}"
            )
    print()


def main() -> int:
    """Main function to show a saved training plan."""
    parser = argparse.ArgumentParser(description="Show a saved training plan")
    parser.add_argument(
        "plan_id",
        nargs="?",
        help="Plan ID to show (if not provided, uses the most recently saved plan)",
    )
    parser.add_argument("--locale", help="Date language: nl, en or fr")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the saved plan as JSON",
    )

    args = parser.parse_args()
    load_dotenv()

    plan_storage = TrainingPlanStorage()
    plan_id = args.plan_id
    if not plan_id:
        plans = plan_storage.list_plans()
        if not plans:
            print("No saved training plans found.")
            print("Use race-planner --save NAME to save a plan first.")
            return 1
        plan_id = plans[0]["id"]

    entry = plan_storage.get_plan(plan_id)
    if entry is None:
        print(f"Error: Plan not found: {plan_id}")
        return 1

    if args.json:
        print(entry.model_dump_json(indent=2))
        return 0

    print(f"{entry.name} (saved {entry.created_at:%Y-%m-%d %H:%M})")
    print_plan_overview(entry.plan, args.locale)
    print_weeks(entry.plan)
    return 0


if __name__ == "__main__":
    exit(main())
