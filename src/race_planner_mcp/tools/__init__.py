"""MCP tools for the Race Planner MCP Server."""

from race_planner_mcp.tools.training_plans import register_training_plan_tools

__all__ = [
    "register_training_plan_tools",
]


def register_all_tools(mcp):
    """Register all MCP tools with the server."""
    register_training_plan_tools(mcp)
