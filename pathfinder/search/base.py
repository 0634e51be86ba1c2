"""
Search strategy base class and the shared result record.

All strategies implement _explore(); the base class handles the missing
start/goal precondition, timing, logging and result assembly.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from pathfinder.maze.model import GridModel, Position

logger = logging.getLogger(__name__)

# Predecessor arrays use this for "not reached"
NO_PARENT = -1


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a single search.

    Attributes:
        path: Positions from start to goal inclusive; empty if unreachable
        visited: Positions in the exact order they were expanded
        elapsed_ms: Wall-clock duration of the search (milliseconds)
        algorithm: Name of the strategy that produced this result
    """

    path: tuple[Position, ...] = ()
    visited: tuple[Position, ...] = ()
    elapsed_ms: float = 0.0
    algorithm: str = ""

    @property
    def nodes_expanded(self) -> int:
        """Number of expansions (always len(visited))."""
        return len(self.visited)

    @property
    def found(self) -> bool:
        """Whether a path was found (start == goal counts)."""
        return bool(self.path)


def empty_result(algorithm: str = "") -> SearchResult:
    """Not-found result for a search that never ran."""
    return SearchResult(algorithm=algorithm)


def encode(pos: Position, cols: int) -> int:
    """Dense integer key for pos: row * cols + col."""
    return pos[0] * cols + pos[1]


def decode(index: int, cols: int) -> Position:
    row, col = divmod(int(index), cols)
    return Position(row, col)


def new_predecessors(model: GridModel) -> np.ndarray:
    """Flat predecessor array for model, every entry NO_PARENT."""
    return np.full(model.rows * model.cols, NO_PARENT, dtype=np.int64)


def reconstruct_path(
    came_from: np.ndarray, cols: int, start: Position, goal: Position
) -> tuple[Position, ...]:
    """Walk predecessors back from goal to start and return the forward path."""
    start_idx = encode(start, cols)
    idx = encode(goal, cols)
    path = [goal]
    while idx != start_idx:
        idx = int(came_from[idx])
        path.append(decode(idx, cols))
    path.reverse()
    return tuple(path)


class SearchAlgorithm(ABC):
    """
    Abstract base class for grid search strategies.

    Strategies differ only in how they order the frontier. They all use the
    shared neighbor rule, unit move costs, and reconstruct_path().
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Dispatcher name (e.g., 'A*', 'BFS')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary of the strategy."""
        ...

    @property
    def optimal(self) -> bool:
        """Whether returned paths are guaranteed shortest."""
        return True

    @abstractmethod
    def _explore(
        self, model: GridModel, start: Position, goal: Position
    ) -> tuple[tuple[Position, ...], list[Position]]:
        """
        Run the search proper.

        Returns:
            (path, visited): path is empty when goal is unreachable
        """
        ...

    def search(self, model: GridModel) -> SearchResult:
        """
        Search model from its start to its goal.

        A model without a start or goal returns the empty result immediately.
        """
        if model.start is None or model.goal is None:
            return empty_result(self.name)

        started = time.perf_counter()
        path, visited = self._explore(model, model.start, model.goal)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        logger.debug(
            f"{self.name}: found={bool(path)} expanded={len(visited)} "
            f"path_len={len(path)} elapsed={elapsed_ms:.3f}ms"
        )
        return SearchResult(
            path=path,
            visited=tuple(visited),
            elapsed_ms=elapsed_ms,
            algorithm=self.name,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
