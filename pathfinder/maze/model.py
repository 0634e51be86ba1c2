"""
Maze data model: positions, cell kinds, and the immutable grid snapshot.

Every mutator in this module is pure. It builds a new GridModel from copies of
the input's arrays and never writes to the input, so a model handed to a search
(or kept in an undo history) can never change underneath its holder.

Preconditions:
    Positions passed to the mutators must satisfy is_in_bounds(). This layer
    does not check them; out-of-range coordinates are undefined behavior and
    must be rejected by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from pathfinder.config import DEFAULT_SIZE, validate_size

if TYPE_CHECKING:
    from pathfinder.search.base import SearchResult


class Position(NamedTuple):
    """A (row, col) cell coordinate."""

    row: int
    col: int


class CellKind(IntEnum):
    """
    Tag stored in (or derived for) a grid cell.

    Only EMPTY, OBSTACLE, START and GOAL are ever persisted in a GridModel.
    PATH and VISITED are display tags produced from a SearchResult.
    """

    EMPTY = 0
    OBSTACLE = 1
    START = 2
    GOAL = 3
    PATH = 4
    VISITED = 5


@dataclass(frozen=True, eq=False)
class GridModel:
    """
    Immutable maze snapshot.

    The constructor copies the arrays it is given and freezes the copies. It
    does not check that start and goal point at START and GOAL cells; the
    mutators below keep that consistent.

    Attributes:
        cells: (rows, cols) int8 array of CellKind values
        start: Position of the START cell, or None
        goal: Position of the GOAL cell, or None
        visit_frequency: (rows, cols) int array of historical visit counts.
            Observational only; no search reads it.
    """

    cells: np.ndarray
    start: Position | None = None
    goal: Position | None = None
    visit_frequency: np.ndarray | None = field(default=None)

    def __post_init__(self) -> None:
        # Own private copies so no caller (or base array of a view) can write into them
        cells = np.array(self.cells, dtype=np.int8, copy=True)
        if self.visit_frequency is None:
            visits = np.zeros(cells.shape, dtype=np.int64)
        else:
            visits = np.array(self.visit_frequency, dtype=np.int64, copy=True)
        cells.flags.writeable = False
        visits.flags.writeable = False
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "visit_frequency", visits)

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    @property
    def size(self) -> int:
        """Side length for square grids (the row count otherwise)."""
        return self.rows

    def kind_at(self, pos: Position) -> CellKind:
        """Persisted kind of the cell at pos."""
        return CellKind(int(self.cells[pos[0], pos[1]]))

    def is_obstacle(self, pos: Position) -> bool:
        return self.cells[pos[0], pos[1]] == CellKind.OBSTACLE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridModel):
            return NotImplemented
        return (
            self.cells.shape == other.cells.shape
            and self.start == other.start
            and self.goal == other.goal
            and np.array_equal(self.cells, other.cells)
            and np.array_equal(self.visit_frequency, other.visit_frequency)
        )

    def __repr__(self) -> str:
        return (
            f"GridModel(rows={self.rows}, cols={self.cols}, "
            f"start={self.start}, goal={self.goal})"
        )


def _rebuild(
    model: GridModel,
    cells: np.ndarray | None = None,
    visit_frequency: np.ndarray | None = None,
    **markers: Position | None,
) -> GridModel:
    """Assemble a new model from fresh arrays, defaulting to copies of model's."""
    return GridModel(
        cells=cells if cells is not None else model.cells.copy(),
        start=markers.get("start", model.start),
        goal=markers.get("goal", model.goal),
        visit_frequency=(
            visit_frequency if visit_frequency is not None else model.visit_frequency.copy()
        ),
    )


def create_empty(size: int = DEFAULT_SIZE) -> GridModel:
    """Create an all-EMPTY size x size maze (size is clamped to the configured range)."""
    size = validate_size(size)
    return GridModel(cells=np.full((size, size), CellKind.EMPTY, dtype=np.int8))


def clear(model: GridModel) -> GridModel:
    """All-EMPTY maze with the same shape as model (markers and visit counts dropped)."""
    return GridModel(cells=np.full(model.cells.shape, CellKind.EMPTY, dtype=np.int8))


def clone(model: GridModel) -> GridModel:
    """Return an equal model that shares no storage with model."""
    return _rebuild(model)


def is_in_bounds(model: GridModel, pos: Position) -> bool:
    """Boundary predicate: 0 <= row < rows and 0 <= col < cols."""
    row, col = pos
    return 0 <= row < model.rows and 0 <= col < model.cols


def toggle_obstacle(model: GridModel, pos: Position) -> GridModel:
    """Flip EMPTY <-> OBSTACLE at pos. START and GOAL cells are left alone."""
    current = model.kind_at(pos)
    if current in (CellKind.START, CellKind.GOAL):
        return model

    cells = model.cells.copy()
    flipped = CellKind.EMPTY if current == CellKind.OBSTACLE else CellKind.OBSTACLE
    cells[pos[0], pos[1]] = flipped
    return _rebuild(model, cells=cells)


def set_obstacle(model: GridModel, pos: Position, blocked: bool) -> GridModel:
    """
    Paint (blocked=True) or erase (blocked=False) an obstacle at pos.

    Used for drag painting, where every cell under the pointer gets the same
    value instead of flipping. START and GOAL cells are left alone, and a cell
    that already has the requested value returns the input unchanged.
    """
    current = model.kind_at(pos)
    if current in (CellKind.START, CellKind.GOAL):
        return model
    if (current == CellKind.OBSTACLE) == blocked:
        return model

    cells = model.cells.copy()
    cells[pos[0], pos[1]] = CellKind.OBSTACLE if blocked else CellKind.EMPTY
    return _rebuild(model, cells=cells)


def _place_marker(model: GridModel, pos: Position, kind: CellKind) -> GridModel:
    if model.is_obstacle(pos):
        return model

    pos = Position(*pos)
    own, other = ("start", "goal") if kind == CellKind.START else ("goal", "start")
    cells = model.cells.copy()

    previous = getattr(model, own)
    if previous is not None and cells[previous[0], previous[1]] == kind:
        cells[previous[0], previous[1]] = CellKind.EMPTY

    markers: dict[str, Position | None] = {own: pos}
    # A cell holds one kind, so claiming the other marker's cell clears it
    if getattr(model, other) == pos:
        markers[other] = None

    cells[pos[0], pos[1]] = kind
    return _rebuild(model, cells=cells, **markers)


def set_start(model: GridModel, pos: Position) -> GridModel:
    """Move the START marker to pos. No-op when pos is an obstacle."""
    return _place_marker(model, pos, CellKind.START)


def set_goal(model: GridModel, pos: Position) -> GridModel:
    """Move the GOAL marker to pos. No-op when pos is an obstacle."""
    return _place_marker(model, pos, CellKind.GOAL)


def resize(model: GridModel, new_size: int) -> GridModel:
    """
    Rebuild the maze as a new_size x new_size grid.

    The overlapping top-left region of cells and visit counts is copied over.
    Start and goal survive only if they are still in bounds; otherwise they are
    cleared (and their cells are outside the new grid anyway).
    """
    new_size = validate_size(new_size)
    cells = np.full((new_size, new_size), CellKind.EMPTY, dtype=np.int8)
    visits = np.zeros((new_size, new_size), dtype=np.int64)

    r = min(model.rows, new_size)
    c = min(model.cols, new_size)
    cells[:r, :c] = model.cells[:r, :c]
    visits[:r, :c] = model.visit_frequency[:r, :c]

    def adjust(pos: Position | None) -> Position | None:
        if pos is None:
            return None
        if pos[0] < new_size and pos[1] < new_size:
            return pos
        return None

    return GridModel(
        cells=cells,
        start=adjust(model.start),
        goal=adjust(model.goal),
        visit_frequency=visits,
    )


def record_visits(model: GridModel, result: SearchResult) -> GridModel:
    """Return model with visit_frequency incremented once per visited entry."""
    if not result.visited:
        return model

    visits = model.visit_frequency.copy()
    rows, cols = zip(*result.visited)
    np.add.at(visits, (np.array(rows), np.array(cols)), 1)
    return _rebuild(model, visit_frequency=visits)
