"""
Configuration constants for the grid pathfinding engine.

All grid limits, algorithm names, and tunable parameters are defined here.
Overrides are read from environment variables (a project .env is loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

# Example mazes shipped with the repository (ASCII format)
MAZES_DIR = PROJECT_ROOT / "mazes"

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Grid Configuration
# =============================================================================

# Square grid side length limits (inclusive)
MIN_SIZE = 5
MAX_SIZE = 20

# Side length of a freshly created maze
DEFAULT_SIZE = 10

# =============================================================================
# Search Configuration
# =============================================================================

# Names accepted by the dispatcher, in selector order
ALGORITHMS = ("A*", "Dijkstra", "BFS", "DFS")

# Algorithm used when the caller does not choose one
DEFAULT_ALGORITHM = os.environ.get("PATHFINDER_ALGORITHM", "A*")

# =============================================================================
# Session Configuration
# =============================================================================

# Maximum number of undo snapshots kept by a session
HISTORY_LIMIT = int(os.environ.get("PATHFINDER_HISTORY_LIMIT", "100"))

# Visit count at which a cell reaches full heatmap intensity
HEATMAP_SATURATION = 10

# =============================================================================
# Random Maze Configuration
# =============================================================================

# Fraction of cells turned into obstacles by the generator
DEFAULT_OBSTACLE_DENSITY = 0.25

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_size(size: int) -> int:
    """Clamp a requested grid size into [MIN_SIZE, MAX_SIZE]."""
    return max(MIN_SIZE, min(MAX_SIZE, int(size)))


def is_known_algorithm(name: str) -> bool:
    """Exact-match check against the configured algorithm names."""
    return name in ALGORITHMS
