"""
Maze module.

Provides the grid data model and the operations around it:
- GridModel: Immutable maze snapshot (cells, start, goal, visit counts)
- create_empty / clear / toggle_obstacle / set_start / set_goal / resize: Pure mutators
- neighbors: Orthogonal traversable neighbor rule
- render_cell_kind / heatmap: Display overlay derived from a search result
- from_ascii / to_ascii: Text maze format
- random_maze: Seeded obstacle scatter
"""

from pathfinder.maze.generate import random_maze
from pathfinder.maze.model import (
    CellKind,
    GridModel,
    Position,
    clear,
    clone,
    create_empty,
    is_in_bounds,
    record_visits,
    resize,
    set_goal,
    set_obstacle,
    set_start,
    toggle_obstacle,
)
from pathfinder.maze.neighbors import DIRECTIONS, manhattan, neighbors
from pathfinder.maze.overlay import heatmap, heatmap_intensity, render_cell_kind, render_grid
from pathfinder.maze.text import MazeFormatError, from_ascii, load_maze, to_ascii

__all__ = [
    "CellKind",
    "GridModel",
    "Position",
    "clear",
    "clone",
    "create_empty",
    "is_in_bounds",
    "record_visits",
    "resize",
    "set_goal",
    "set_obstacle",
    "set_start",
    "toggle_obstacle",
    "DIRECTIONS",
    "manhattan",
    "neighbors",
    "heatmap",
    "heatmap_intensity",
    "render_cell_kind",
    "render_grid",
    "MazeFormatError",
    "from_ascii",
    "load_maze",
    "to_ascii",
    "random_maze",
]
