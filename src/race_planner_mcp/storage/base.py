"""Base storage class with data directory configuration."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from race_planner_mcp.config import get_data_dir

logger = logging.getLogger(__name__)


class BaseStorage:
    """Base class for JSON file storage."""

    def __init__(self, subdirectory: str, data_dir: Optional[Path] = None):
        """
        Initialize storage with a subdirectory name.

        Args:
            subdirectory: Name of the subdirectory within the data directory
            data_dir: Root data directory; defaults to the configured one
        """
        self.data_dir = (data_dir or get_data_dir()) / subdirectory
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _load_json(self, file_path: Path) -> dict[str, Any] | list[Any] | None:
        """Load JSON from a file, returning None if it is missing or unreadable."""
        if not file_path.exists():
            return None
        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable file %s: %s", file_path, e)
            return None

    def _save_json(self, file_path: Path, data: dict[str, Any] | list[Any]) -> None:
        """Save data as JSON to a file."""
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2, default=str)

    def _delete(self, file_path: Path) -> bool:
        """Delete a file. Returns True if it existed."""
        if file_path.exists():
            file_path.unlink()
            return True
        return False
