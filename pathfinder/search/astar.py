"""
Best-first searches over a binary heap: A* and Dijkstra.

Heap entries are (f, h, seq, g, position). Among equal f the entry closer to
the goal pops first, then the earlier insertion (seq is a monotonic counter),
so runs on the same grid are reproducible.
"""

from __future__ import annotations

import heapq
import itertools

import numpy as np

from pathfinder.maze.model import GridModel, Position
from pathfinder.maze.neighbors import manhattan, neighbors
from pathfinder.search.base import (
    SearchAlgorithm,
    encode,
    new_predecessors,
    reconstruct_path,
)

_UNREACHED = np.iinfo(np.int64).max


class AStarSearch(SearchAlgorithm):
    """
    A* with the Manhattan heuristic.

    The heuristic is consistent for unit-cost 4-way moves, so a node's g-score
    is final once it is expanded. Heap entries that were superseded by a later,
    cheaper push are skipped on pop, and expanded neighbors are never re-pushed.
    """

    @property
    def name(self) -> str:
        return "A*"

    @property
    def description(self) -> str:
        return "Best-first on g + Manhattan distance; optimal, expands few nodes"

    def heuristic(self, pos: Position, goal: Position) -> int:
        return manhattan(pos, goal)

    def _explore(
        self, model: GridModel, start: Position, goal: Position
    ) -> tuple[tuple[Position, ...], list[Position]]:
        cols = model.cols
        g_score = np.full(model.rows * cols, _UNREACHED, dtype=np.int64)
        expanded = np.zeros(model.rows * cols, dtype=bool)
        came_from = new_predecessors(model)
        visited: list[Position] = []

        seq = itertools.count()
        g_score[encode(start, cols)] = 0
        h_start = self.heuristic(start, goal)
        frontier = [(h_start, h_start, next(seq), 0, start)]

        while frontier:
            _, _, _, g, current = heapq.heappop(frontier)
            current_idx = encode(current, cols)

            # Stale entry
            if expanded[current_idx] or g > g_score[current_idx]:
                continue

            expanded[current_idx] = True
            visited.append(current)

            if current == goal:
                return reconstruct_path(came_from, cols, start, goal), visited

            tentative = g + 1
            for neighbor in neighbors(model, current):
                neighbor_idx = encode(neighbor, cols)
                if expanded[neighbor_idx]:
                    continue
                if tentative < g_score[neighbor_idx]:
                    g_score[neighbor_idx] = tentative
                    came_from[neighbor_idx] = current_idx
                    h = self.heuristic(neighbor, goal)
                    heapq.heappush(
                        frontier, (tentative + h, h, next(seq), tentative, neighbor)
                    )

        return (), visited


class DijkstraSearch(AStarSearch):
    """Uniform-cost search: A* with the heuristic fixed at zero."""

    @property
    def name(self) -> str:
        return "Dijkstra"

    @property
    def description(self) -> str:
        return "Uniform-cost expansion in rings of equal distance; optimal, no heuristic"

    def heuristic(self, pos: Position, goal: Position) -> int:
        return 0
