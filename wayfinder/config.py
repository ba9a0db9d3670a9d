"""
Configuration constants for the Wayfinder project.

All paths, symbols, and tunable parameters are defined here.
Environment overrides are read once at import time.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of wayfinder/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the sample maze and transit network)
DATA_DIR = PROJECT_ROOT / "data"

# Individual data file paths
DEFAULT_MAZE_PATH = DATA_DIR / "maze.txt"
DEFAULT_NETWORK_PATH = DATA_DIR / "transit.json"

# =============================================================================
# Maze Configuration
# =============================================================================

# Cell symbols. Anything that is not a wall is an open cell (a node).
WALL = "#"
START = "S"
END = "E"

# Symbol used when drawing a path over the maze
PATH_MARK = "*"

# Neighbour offsets (row, col): up, down, left, right.
# Edge insertion follows this order, which fixes BFS/DFS visitation order.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to edges added without an explicit weight
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Dijkstra Configuration
# =============================================================================

# How equal-distance candidates are chosen during minimum selection:
#   "last"  - highest index wins (matches the classic `<=` linear scan)
#   "first" - lowest index wins (strict `<`)
TIE_BREAK_POLICIES = ("last", "first")
DIJKSTRA_TIE_BREAK = os.environ.get("WAYFINDER_TIE_BREAK", "last")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which sample data files exist."""
    return {
        "maze": DEFAULT_MAZE_PATH.exists(),
        "network": DEFAULT_NETWORK_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
