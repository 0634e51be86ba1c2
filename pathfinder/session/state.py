"""
Run records for tracking searches made during an editing session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator

from pathfinder.maze.model import Position
from pathfinder.search.base import SearchResult


@dataclass(frozen=True)
class SearchRun:
    """
    Complete record of one search requested by the user.

    Attributes:
        algorithm: Name the search was requested with
        result: What the engine returned
        timestamp: When the search was run
    """

    algorithm: str
    result: SearchResult
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        return self.result.found

    @property
    def path_cost(self) -> int | None:
        """Number of moves on the path, or None if no path was found."""
        if not self.result.found:
            return None
        return len(self.result.path) - 1

    @property
    def efficiency(self) -> float | None:
        """
        Ratio of path length to nodes expanded.

        Returns None if nothing was expanded. Higher is better; 1.0 means the
        search expanded only the cells on its path.
        """
        if self.result.nodes_expanded == 0:
            return None
        return len(self.result.path) / self.result.nodes_expanded

    def summary(self) -> dict[str, object]:
        """Metrics a UI shows next to the grid."""
        return {
            "algorithm": self.algorithm,
            "found": self.found,
            "path_length": len(self.result.path),
            "nodes_expanded": self.result.nodes_expanded,
            "elapsed_ms": round(self.result.elapsed_ms, 3),
            "efficiency": None if self.efficiency is None else round(self.efficiency, 3),
        }


def replay_frames(result: SearchResult) -> Iterator[tuple[Position, ...]]:
    """Yield visited[:k] for k = 0..len(visited), the step-animation order."""
    for k in range(len(result.visited) + 1):
        yield result.visited[:k]
