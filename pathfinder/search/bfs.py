"""
Breadth-first search.

FIFO frontier. Positions are marked discovered when enqueued rather than when
dequeued, so no position enters the queue twice; unit-cost BFS never needs to
reopen a node.
"""

from __future__ import annotations

from collections import deque

import numpy as np

from pathfinder.maze.model import GridModel, Position
from pathfinder.maze.neighbors import neighbors
from pathfinder.search.base import (
    SearchAlgorithm,
    encode,
    new_predecessors,
    reconstruct_path,
)


class BreadthFirstSearch(SearchAlgorithm):
    """Layer-by-layer expansion; shortest path in move count."""

    @property
    def name(self) -> str:
        return "BFS"

    @property
    def description(self) -> str:
        return "FIFO queue, explores in layers; optimal on unweighted grids"

    def _explore(
        self, model: GridModel, start: Position, goal: Position
    ) -> tuple[tuple[Position, ...], list[Position]]:
        cols = model.cols
        discovered = np.zeros(model.rows * cols, dtype=bool)
        came_from = new_predecessors(model)
        visited: list[Position] = []

        queue: deque[Position] = deque([start])
        discovered[encode(start, cols)] = True

        while queue:
            current = queue.popleft()
            visited.append(current)

            if current == goal:
                return reconstruct_path(came_from, cols, start, goal), visited

            current_idx = encode(current, cols)
            for neighbor in neighbors(model, current):
                neighbor_idx = encode(neighbor, cols)
                if discovered[neighbor_idx]:
                    continue
                discovered[neighbor_idx] = True
                came_from[neighbor_idx] = current_idx
                queue.append(neighbor)

        return (), visited
