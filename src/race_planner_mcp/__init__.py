"""Race Planner MCP Server: periodized race training plan generation."""

__version__ = "0.1.0"
