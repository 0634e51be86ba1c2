"""Orthogonal neighbor rule shared by every search strategy."""

from __future__ import annotations

from pathfinder.maze.model import CellKind, GridModel, Position

# Up, right, down, left. DFS relies on this exact order.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def neighbors(model: GridModel, pos: Position) -> list[Position]:
    """In-bounds, non-obstacle positions adjacent to pos, in DIRECTIONS order."""
    row, col = pos
    rows, cols = model.cells.shape
    cells = model.cells
    out: list[Position] = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols and cells[r, c] != CellKind.OBSTACLE:
            out.append(Position(r, c))
    return out


def manhattan(a: Position, b: Position) -> int:
    """Manhattan distance; admissible and consistent for unit 4-way moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
