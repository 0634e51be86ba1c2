"""
Headless maze editing session.

MazeSession plays the part of the interactive front end: it owns the current
GridModel, validates coordinates before they reach the model's mutators, keeps
an undo history of snapshots, runs searches through the dispatcher and folds
each search's visited trace into the heatmap counts.
"""

from __future__ import annotations

import logging
from collections import deque

from pathfinder.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_SIZE,
    HISTORY_LIMIT,
    is_known_algorithm,
)
from pathfinder.maze import model as maze
from pathfinder.maze.model import CellKind, GridModel, Position
from pathfinder.maze.overlay import render_cell_kind
from pathfinder.maze.text import to_ascii
from pathfinder.search import run_search
from pathfinder.session.state import SearchRun

logger = logging.getLogger(__name__)


class MazeSession:
    """
    Owns one maze and the searches run against it.

    Every edit that changes the maze pushes the previous snapshot onto the
    undo history and discards the last search, since its path no longer
    matches the grid. Undo restores a whole snapshot, visit counts included.
    """

    def __init__(
        self,
        model: GridModel | None = None,
        size: int = DEFAULT_SIZE,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        """
        Initialize the session.

        Args:
            model: Maze to start from (a fresh empty maze if None)
            size: Side length of the fresh maze when model is None
            history_limit: Maximum number of undo snapshots kept
        """
        self._model = model if model is not None else maze.create_empty(size)
        self._history: deque[GridModel] = deque(maxlen=history_limit)
        self._last_run: SearchRun | None = None

    @property
    def model(self) -> GridModel:
        """Current snapshot. Safe to hand to other code; it never changes."""
        return self._model

    @property
    def last_run(self) -> SearchRun | None:
        return self._last_run

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    # -------------------- editing --------------------

    def _check(self, pos: Position) -> Position:
        pos = Position(*pos)
        if not maze.is_in_bounds(self._model, pos):
            raise IndexError(
                f"Cell {tuple(pos)} is outside the {self._model.rows}x{self._model.cols} maze"
            )
        return pos

    def _apply(self, new_model: GridModel) -> bool:
        """Adopt new_model if it differs from the current one."""
        if new_model is self._model or new_model == self._model:
            return False
        self._history.append(self._model)
        self._model = new_model
        self._last_run = None
        return True

    def toggle_obstacle(self, pos: Position) -> bool:
        """Flip an obstacle. Returns whether the maze changed."""
        return self._apply(maze.toggle_obstacle(self._model, self._check(pos)))

    def paint(self, pos: Position, blocked: bool = True) -> bool:
        """Drag-paint (blocked=True) or erase an obstacle."""
        return self._apply(maze.set_obstacle(self._model, self._check(pos), blocked))

    def set_start(self, pos: Position) -> bool:
        return self._apply(maze.set_start(self._model, self._check(pos)))

    def set_goal(self, pos: Position) -> bool:
        return self._apply(maze.set_goal(self._model, self._check(pos)))

    def resize(self, size: int) -> bool:
        """Resize to size x size (clamped); start/goal outside the new grid are dropped."""
        return self._apply(maze.resize(self._model, size))

    def reset(self) -> bool:
        """Replace the maze with an empty one of the same shape."""
        return self._apply(maze.clear(self._model))

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False when there is nothing to undo."""
        if not self._history:
            return False
        self._model = self._history.pop()
        self._last_run = None
        return True

    # -------------------- searching --------------------

    def run(self, algorithm: str = DEFAULT_ALGORITHM) -> SearchRun:
        """
        Search the current maze and remember the run.

        Searches that expanded anything add one visit per visited entry to the
        maze's visit counts. That update is bookkeeping, not an edit, so it is
        not pushed onto the undo history.
        """
        result = run_search(self._model, algorithm)
        if result.visited:
            self._model = maze.record_visits(self._model, result)

        run = SearchRun(algorithm=algorithm, result=result)
        self._last_run = run

        if not is_known_algorithm(algorithm):
            logger.info(f"{algorithm}: unknown algorithm, nothing was searched")
        elif result.found:
            logger.info(
                f"{algorithm}: path of {run.path_cost} moves, "
                f"{result.nodes_expanded} nodes expanded in {result.elapsed_ms:.2f}ms"
            )
        elif self._model.start is None or self._model.goal is None:
            logger.info(f"{algorithm}: start and goal must both be placed")
        else:
            logger.info(f"{algorithm}: no path ({result.nodes_expanded} nodes expanded)")
        return run

    def compare(self, algorithms: tuple[str, ...] | list[str]) -> list[SearchRun]:
        """Run several algorithms on the same snapshot; the last one becomes last_run."""
        return [self.run(name) for name in algorithms]

    # -------------------- display --------------------

    def cell_kind(self, pos: Position, step: int | None = None) -> CellKind:
        """Kind to draw at pos, overlaid with the last run (revealed up to step)."""
        pos = self._check(pos)
        result = self._last_run.result if self._last_run else None
        return render_cell_kind(self._model, result, pos.row, pos.col, step)

    def render(self, step: int | None = None) -> str:
        """Text rendering of the maze with the last run's overlay."""
        result = self._last_run.result if self._last_run else None
        return to_ascii(self._model, result, step)
