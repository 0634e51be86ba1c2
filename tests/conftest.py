"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from pathfinder.config import ALGORITHMS
from pathfinder.maze import CellKind, GridModel, from_ascii, manhattan
from pathfinder.search import SearchResult


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mazes_dir(project_root: Path) -> Path:
    """Return the directory of example maze files."""
    return project_root / "mazes"


@pytest.fixture(params=ALGORITHMS)
def algorithm(request) -> str:
    """Each dispatcher algorithm name in turn."""
    return request.param


@pytest.fixture
def open_maze() -> GridModel:
    """5x5 grid, no obstacles, start top-left, goal bottom-right."""
    return from_ascii(
        """
        S....
        .....
        .....
        .....
        ....G
        """
    )


@pytest.fixture
def walled_maze() -> GridModel:
    """5x5 grid with column 2 blocked on rows 0-3; row 4 stays open."""
    return from_ascii(
        """
        S.#..
        ..#..
        ..#..
        ..#..
        ....G
        """
    )


@pytest.fixture
def boxed_maze() -> GridModel:
    """Start sealed in by obstacles on all four sides; goal otherwise reachable."""
    return from_ascii(
        """
        .#...
        #S#..
        .#...
        .....
        ....G
        """
    )


@pytest.fixture
def check_path() -> Callable[[GridModel, SearchResult], None]:
    """Return an assertion helper for path validity."""

    def _check(model: GridModel, result: SearchResult) -> None:
        path = result.path
        assert path, "expected a non-empty path"
        assert path[0] == model.start
        assert path[-1] == model.goal
        assert len(set(path)) == len(path), "path revisits a cell"
        for a, b in zip(path, path[1:]):
            assert manhattan(a, b) == 1, f"{a} -> {b} is not an orthogonal move"
        for pos in path:
            assert model.kind_at(pos) != CellKind.OBSTACLE

    return _check
