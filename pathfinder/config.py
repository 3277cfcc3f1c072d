"""
Configuration constants for the Pathfinder project.

All paths, settings, and tunable parameters are defined here.
Overrides are read from environment variables, after loading a
.env file from the project root if one exists.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

# Local overrides; variables already set in the environment win
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

# Graph file used by the CLI when --graph is not given.
# None means "use the built-in sample graph".
DEFAULT_GRAPH_PATH = (
    Path(os.environ["PATHFINDER_GRAPH"]) if os.environ.get("PATHFINDER_GRAPH") else None
)

# Supported graph file formats, keyed by file suffix
GRAPH_FILE_SUFFIXES = {
    ".json": "json",
    ".msgpack": "msgpack",
    ".mpk": "msgpack",
}

# =============================================================================
# Search Configuration
# =============================================================================

# "scan": linear scan of the frontier for the minimum distance
# "heap": binary heap keyed by (distance, insertion order)
FRONTIER_STRATEGIES = ("scan", "heap")

DEFAULT_FRONTIER = os.environ.get("PATHFINDER_FRONTIER", "heap")

# Separator used when rendering a path as text
PATH_SEPARATOR = " -> "

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_frontier(name: str) -> str:
    """Return the frontier strategy name, or raise ValueError if unknown."""
    if name not in FRONTIER_STRATEGIES:
        available = ", ".join(FRONTIER_STRATEGIES)
        raise ValueError(f"Unknown frontier strategy '{name}'. Available: {available}")
    return name


def graph_format_for(path: Path) -> str | None:
    """Return the graph file format for a path, or None if unsupported."""
    return GRAPH_FILE_SUFFIXES.get(Path(path).suffix.lower())


def resolve_log_level(name: str) -> int:
    """Return the numeric logging level for a name like 'info', or raise ValueError."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'. Use DEBUG, INFO, WARNING or ERROR")
    return level
