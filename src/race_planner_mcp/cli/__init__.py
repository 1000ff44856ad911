"""CLI tools for the Race Planner MCP Server."""

from race_planner_mcp.cli.generate_plan import main as generate_plan_main
from race_planner_mcp.cli.show_plan import main as show_plan_main

__all__ = [
    "generate_plan_main",
    "show_plan_main",
]
