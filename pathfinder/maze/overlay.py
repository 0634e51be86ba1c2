"""
Display overlay: derive PATH / VISITED tags and heat values from a search.

Nothing here touches the persisted grid. A renderer asks for the kind of a
cell given the model, the last SearchResult and (for step-by-step replay) how
many entries of the visited trace have been revealed so far.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathfinder.config import HEATMAP_SATURATION
from pathfinder.maze.model import CellKind, GridModel, Position

if TYPE_CHECKING:
    from pathfinder.search.base import SearchResult


def render_cell_kind(
    model: GridModel,
    result: SearchResult | None,
    row: int,
    col: int,
    step: int | None = None,
) -> CellKind:
    """
    Kind to draw at (row, col).

    START and GOAL always win, then PATH, then VISITED (limited to the first
    `step` visited entries when step is given), then the persisted kind.
    """
    base = model.kind_at(Position(row, col))
    if base in (CellKind.START, CellKind.GOAL) or result is None:
        return base

    pos = Position(row, col)
    if pos in result.path:
        return CellKind.PATH

    visited = result.visited if step is None else result.visited[:step]
    if pos in visited:
        return CellKind.VISITED
    return base


def render_grid(
    model: GridModel,
    result: SearchResult | None = None,
    step: int | None = None,
) -> np.ndarray:
    """Whole-grid version of render_cell_kind, as a (rows, cols) int8 array."""
    kinds = model.cells.copy()
    if result is None:
        return kinds

    visited = result.visited if step is None else result.visited[:step]
    for r, c in visited:
        kinds[r, c] = CellKind.VISITED
    for r, c in result.path:
        kinds[r, c] = CellKind.PATH

    markers = (model.cells == CellKind.START) | (model.cells == CellKind.GOAL)
    kinds[markers] = model.cells[markers]
    return kinds


def heatmap_intensity(count: int) -> float:
    """Map a visit count to [0, 1]; saturates at HEATMAP_SATURATION visits."""
    if count <= 0:
        return 0.0
    return min(1.0, count / HEATMAP_SATURATION)


def heatmap(model: GridModel) -> np.ndarray:
    """Per-cell heat for the whole grid. Obstacles, start and goal stay at 0."""
    heat = np.minimum(1.0, model.visit_frequency / float(HEATMAP_SATURATION))
    heat[model.cells != CellKind.EMPTY] = 0.0
    return heat
