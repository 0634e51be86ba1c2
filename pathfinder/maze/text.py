"""
Plain-text maze format.

One line per row, one glyph per cell:

    .  empty        #  obstacle
    S  start        G  goal
    *  path         o  visited      (written by to_ascii only)

Blank lines at either end are ignored, and so is surrounding whitespace on
each line. Parsing does not clamp the size, so files and test fixtures may
describe non-square grids.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from pathfinder.maze.model import CellKind, GridModel, Position
from pathfinder.maze.overlay import render_grid

if TYPE_CHECKING:
    from pathfinder.search.base import SearchResult

GLYPHS = {
    CellKind.EMPTY: ".",
    CellKind.OBSTACLE: "#",
    CellKind.START: "S",
    CellKind.GOAL: "G",
    CellKind.PATH: "*",
    CellKind.VISITED: "o",
}

_PARSE = {
    ".": CellKind.EMPTY,
    "#": CellKind.OBSTACLE,
    "S": CellKind.START,
    "G": CellKind.GOAL,
}


class MazeFormatError(ValueError):
    """Raised when maze text cannot be parsed into a valid GridModel."""


def from_ascii(text: str) -> GridModel:
    """
    Parse maze text into a GridModel.

    Raises:
        MazeFormatError: On empty input, ragged rows, unknown glyphs,
            or more than one S or G.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise MazeFormatError("Maze text is empty")

    cols = len(lines[0])
    cells = np.empty((len(lines), cols), dtype=np.int8)
    start: Position | None = None
    goal: Position | None = None

    for r, line in enumerate(lines):
        if len(line) != cols:
            raise MazeFormatError(
                f"Row {r} has {len(line)} cells, expected {cols}"
            )
        for c, glyph in enumerate(line):
            kind = _PARSE.get(glyph)
            if kind is None:
                raise MazeFormatError(f"Unknown glyph {glyph!r} at row {r}, col {c}")
            if kind == CellKind.START:
                if start is not None:
                    raise MazeFormatError("Maze has more than one start (S)")
                start = Position(r, c)
            elif kind == CellKind.GOAL:
                if goal is not None:
                    raise MazeFormatError("Maze has more than one goal (G)")
                goal = Position(r, c)
            cells[r, c] = kind

    return GridModel(cells=cells, start=start, goal=goal)


def to_ascii(
    model: GridModel,
    result: SearchResult | None = None,
    step: int | None = None,
) -> str:
    """Render model (optionally overlaid with a search result) as maze text."""
    kinds = render_grid(model, result, step)
    return "\n".join(
        "".join(GLYPHS[CellKind(int(k))] for k in row) for row in kinds
    )


def load_maze(path: str | Path) -> GridModel:
    """Read a maze file in the text format above."""
    return from_ascii(Path(path).read_text(encoding="utf-8"))
