"""
Depth-first search.

LIFO frontier. Neighbors are pushed in reverse of the canonical order (left,
down, right, up) so that pops come off as up, right, down, left. This fixed
convention keeps exploration order identical across reruns on the same grid.
"""

from __future__ import annotations

import numpy as np

from pathfinder.maze.model import GridModel, Position
from pathfinder.maze.neighbors import neighbors
from pathfinder.search.base import (
    SearchAlgorithm,
    encode,
    new_predecessors,
    reconstruct_path,
)


class DepthFirstSearch(SearchAlgorithm):
    """Stack-based exploration; finds a path, not necessarily the shortest."""

    @property
    def name(self) -> str:
        return "DFS"

    @property
    def description(self) -> str:
        return "LIFO stack, dives deep before backtracking; not optimal"

    @property
    def optimal(self) -> bool:
        return False

    def _explore(
        self, model: GridModel, start: Position, goal: Position
    ) -> tuple[tuple[Position, ...], list[Position]]:
        cols = model.cols
        discovered = np.zeros(model.rows * cols, dtype=bool)
        came_from = new_predecessors(model)
        visited: list[Position] = []

        stack: list[Position] = [start]
        discovered[encode(start, cols)] = True

        while stack:
            current = stack.pop()
            visited.append(current)

            if current == goal:
                return reconstruct_path(came_from, cols, start, goal), visited

            current_idx = encode(current, cols)
            for neighbor in reversed(neighbors(model, current)):
                neighbor_idx = encode(neighbor, cols)
                if discovered[neighbor_idx]:
                    continue
                discovered[neighbor_idx] = True
                came_from[neighbor_idx] = current_idx
                stack.append(neighbor)

        return (), visited
