"""
Search module.

Provides the grid search strategies and the dispatcher:
- AStarSearch: Manhattan-guided best-first search (optimal)
- DijkstraSearch: Uniform-cost search, A* with zero heuristic (optimal)
- BreadthFirstSearch: FIFO layer expansion (optimal on unit costs)
- DepthFirstSearch: LIFO stack exploration (not optimal)
- run_search: Run a strategy by name, never raising for unknown names
"""

from __future__ import annotations

import logging

from pathfinder.config import ALGORITHMS, is_known_algorithm
from pathfinder.maze.model import GridModel
from pathfinder.search.astar import AStarSearch, DijkstraSearch
from pathfinder.search.base import SearchAlgorithm, SearchResult, empty_result
from pathfinder.search.bfs import BreadthFirstSearch
from pathfinder.search.dfs import DepthFirstSearch

logger = logging.getLogger(__name__)

__all__ = [
    "SearchAlgorithm",
    "SearchResult",
    "AStarSearch",
    "DijkstraSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "empty_result",
    "get_algorithm",
    "run_search",
    "describe_algorithms",
]

_REGISTRY: dict[str, type[SearchAlgorithm]] = {
    "A*": AStarSearch,
    "Dijkstra": DijkstraSearch,
    "BFS": BreadthFirstSearch,
    "DFS": DepthFirstSearch,
}


def get_algorithm(name: str) -> SearchAlgorithm:
    """
    Get a search strategy by exact name.

    Args:
        name: One of "A*", "Dijkstra", "BFS", "DFS"

    Returns:
        Instantiated strategy

    Raises:
        ValueError: If the name is unknown
    """
    if name not in _REGISTRY:
        available = ", ".join(ALGORITHMS)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")
    return _REGISTRY[name]()


def run_search(model: GridModel, algorithm_name: str) -> SearchResult:
    """
    Run the named strategy on model.

    Unknown names produce the same empty, not-found result as a model without
    start or goal. Callers are expected to offer only ALGORITHMS.
    """
    if not is_known_algorithm(algorithm_name):
        logger.warning(f"Unknown algorithm '{algorithm_name}', returning empty result")
        return empty_result()
    return get_algorithm(algorithm_name).search(model)


def describe_algorithms() -> list[tuple[str, str, bool]]:
    """(name, description, optimal) for every strategy, in selector order."""
    out = []
    for name in ALGORITHMS:
        algo = get_algorithm(name)
        out.append((algo.name, algo.description, algo.optimal))
    return out
