"""
Session module.

Provides a headless stand-in for the interactive front end:
- MazeSession: Owns the current maze, undo history and last search
- SearchRun: Record of one search with derived metrics
- replay_frames: Step-by-step slices of a visited trace
"""

from pathfinder.maze.overlay import heatmap, heatmap_intensity, render_cell_kind
from pathfinder.session.engine import MazeSession
from pathfinder.session.state import SearchRun, replay_frames

__all__ = [
    "MazeSession",
    "SearchRun",
    "replay_frames",
    "heatmap",
    "heatmap_intensity",
    "render_cell_kind",
]
