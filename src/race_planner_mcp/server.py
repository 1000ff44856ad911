#!/usr/bin/env python3
"""
MCP server for race training plan generation.
This server exposes tools to generate, save and reopen periodized training plans.
"""

import logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from race_planner_mcp.config import get_settings
from race_planner_mcp.logging_config import setup_logging
from race_planner_mcp.tools import register_all_tools

load_dotenv()

logger = logging.getLogger(__name__)

mcp = FastMCP("race-planner")
register_all_tools(mcp)


def main() -> None:
    """Main function to start the Race Planner MCP server."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Starting Race Planner MCP server (data dir %s, locale %s)",
        settings.data_dir,
        settings.default_locale,
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
