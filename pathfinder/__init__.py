"""
Grid Pathfinding Engine.

An interactive-maze pathfinding core that compares A*, Dijkstra,
Breadth-First Search and Depth-First Search on a 2-D obstacle grid.
"""

__version__ = "0.1.0"
