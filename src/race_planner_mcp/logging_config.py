"""Logging setup for the server and CLI.

Logs go to stderr; stdout carries the MCP stdio transport.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger (no-op if one exists)."""
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Reduce noise from the MCP transport
    logging.getLogger("mcp").setLevel(logging.WARNING)
