"""Seeded random obstacle mazes for demos and benchmarks."""

from __future__ import annotations

import logging

import numpy as np

from pathfinder.config import DEFAULT_OBSTACLE_DENSITY, DEFAULT_SIZE, validate_size
from pathfinder.maze.model import CellKind, GridModel, Position

logger = logging.getLogger(__name__)


def random_maze(
    size: int = DEFAULT_SIZE,
    density: float = DEFAULT_OBSTACLE_DENSITY,
    seed: int | None = None,
) -> GridModel:
    """
    Scatter obstacles uniformly at random over a size x size grid.

    Start is placed top-left and goal bottom-right; those two cells are never
    obstacles. The goal is not guaranteed to be reachable.

    Args:
        size: Side length (clamped to the configured range)
        density: Probability that any other cell becomes an obstacle
        seed: Seed for numpy's default_rng, for reproducible mazes
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density}")

    size = validate_size(size)
    rng = np.random.default_rng(seed)

    cells = np.where(
        rng.random((size, size)) < density, CellKind.OBSTACLE, CellKind.EMPTY
    ).astype(np.int8)

    start = Position(0, 0)
    goal = Position(size - 1, size - 1)
    cells[start.row, start.col] = CellKind.START
    cells[goal.row, goal.col] = CellKind.GOAL

    logger.debug(
        f"Generated {size}x{size} maze (density={density}, seed={seed}, "
        f"obstacles={int((cells == CellKind.OBSTACLE).sum())})"
    )
    return GridModel(cells=cells, start=start, goal=goal)
