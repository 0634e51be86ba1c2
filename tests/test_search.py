"""
Unit tests for the four search strategies.
"""

from collections import deque

import numpy as np
import pytest

from pathfinder.maze import (
    CellKind,
    GridModel,
    Position,
    create_empty,
    from_ascii,
    neighbors,
    random_maze,
    set_start,
)
from pathfinder.search import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    DijkstraSearch,
    run_search,
)

OPTIMAL = ("A*", "Dijkstra", "BFS")


def shortest_moves(model: GridModel) -> int | None:
    """Reference distance by flood fill, independent of the strategies."""
    dist = {model.start: 0}
    frontier = deque([model.start])
    while frontier:
        cur = frontier.popleft()
        if cur == model.goal:
            return dist[cur]
        r, c = cur
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < model.rows and 0 <= nc < model.cols:
                if model.cells[nr, nc] != CellKind.OBSTACLE and (nr, nc) not in dist:
                    dist[(nr, nc)] = dist[cur] + 1
                    frontier.append((nr, nc))
    return None


class TestNeighborRule:
    """Test the shared neighbor rule."""

    def test_order_is_up_right_down_left(self):
        """Neighbors come back in up, right, down, left order."""
        model = create_empty(5)
        assert neighbors(model, Position(2, 2)) == [(1, 2), (2, 3), (3, 2), (2, 1)]

    def test_corner_drops_out_of_bounds(self):
        """Out-of-bounds positions are skipped."""
        model = create_empty(5)
        assert neighbors(model, Position(0, 0)) == [(0, 1), (1, 0)]
        assert neighbors(model, Position(4, 4)) == [(3, 4), (4, 3)]

    def test_obstacles_skipped(self, walled_maze):
        """Obstacle cells are never neighbors."""
        assert neighbors(walled_maze, Position(1, 1)) == [(0, 1), (2, 1), (1, 0)]


class TestPreconditions:
    """Searches without start or goal never run."""

    def test_missing_start_and_goal(self, algorithm):
        """Empty maze returns the empty, not-found result."""
        result = run_search(create_empty(5), algorithm)
        assert not result.found
        assert result.path == ()
        assert result.visited == ()
        assert result.nodes_expanded == 0
        assert result.elapsed_ms == 0

    def test_missing_goal_only(self, algorithm):
        """A start alone is not enough."""
        result = run_search(set_start(create_empty(5), Position(0, 0)), algorithm)
        assert not result.found
        assert result.visited == ()

    def test_start_equals_goal(self, algorithm):
        """start == goal is found with a single-cell path."""
        # The mutators never put both markers on one cell, so build it directly
        cells = np.zeros((5, 5), dtype=np.int8)
        cells[2, 2] = CellKind.START
        model = GridModel(cells=cells, start=Position(2, 2), goal=Position(2, 2))
        result = run_search(model, algorithm)
        assert result.found
        assert result.path == ((2, 2),)
        assert result.visited == ((2, 2),)


class TestScenarios:
    """Concrete grids with known answers."""

    def test_open_grid(self, open_maze, algorithm, check_path):
        """Open 5x5: everyone finds a path; optimal ones take 8 moves."""
        result = run_search(open_maze, algorithm)
        assert result.found
        check_path(open_maze, result)
        if algorithm in OPTIMAL:
            assert len(result.path) == 9
        else:
            assert len(result.path) >= 9

    def test_walled_grid_optimal_agree(self, walled_maze, check_path):
        """Wall in column 2: optimal searches detour through row 4 and agree exactly on length."""
        lengths = set()
        for name in OPTIMAL:
            result = run_search(walled_maze, name)
            check_path(walled_maze, result)
            lengths.add(len(result.path))
        assert lengths == {9}

    def test_walled_grid_dfs(self, walled_maze, check_path):
        """DFS still gets through the gap."""
        result = run_search(walled_maze, "DFS")
        check_path(walled_maze, result)
        assert len(result.path) >= 9

    def test_boxed_start(self, boxed_maze, algorithm):
        """Sealed start: nothing found and only the start is expanded."""
        result = run_search(boxed_maze, algorithm)
        assert not result.found
        assert result.path == ()
        assert result.visited == (boxed_maze.start,)
        assert result.nodes_expanded == 1

    def test_serpentine_file(self, mazes_dir, algorithm, check_path):
        """Long corridor maze from the examples directory."""
        model = from_ascii((mazes_dir / "serpentine.txt").read_text())
        result = run_search(model, algorithm)
        check_path(model, result)
        # Single corridor, so even DFS finds the shortest route
        assert len(result.path) - 1 == 38


class TestProperties:
    """Properties that hold on arbitrary grids."""

    @pytest.mark.parametrize("seed", range(12))
    def test_optimality_and_completeness(self, seed, check_path):
        """Optimal strategies match the reference distance; DFS is never shorter."""
        model = random_maze(12, 0.3, seed)
        expected = shortest_moves(model)
        for name in ("A*", "Dijkstra", "BFS", "DFS"):
            result = run_search(model, name)
            if expected is None:
                assert not result.found
                assert result.path == ()
                assert result.visited
                continue
            check_path(model, result)
            if name in OPTIMAL:
                assert len(result.path) - 1 == expected
            else:
                assert len(result.path) - 1 >= expected

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, seed, algorithm):
        """Repeated runs give identical path and visited sequences."""
        model = random_maze(15, 0.25, seed)
        first = run_search(model, algorithm)
        second = run_search(model, algorithm)
        assert first.path == second.path
        assert first.visited == second.visited

    @pytest.mark.parametrize("seed", range(5))
    def test_visited_has_no_duplicates(self, seed, algorithm):
        """Each position is expanded at most once and the count matches."""
        model = random_maze(15, 0.2, seed)
        result = run_search(model, algorithm)
        assert result.nodes_expanded == len(result.visited)
        assert len(set(result.visited)) == len(result.visited)

    def test_search_does_not_touch_model(self, open_maze, algorithm):
        """Searches read the snapshot and leave visit counts alone."""
        before = open_maze.cells.copy()
        run_search(open_maze, algorithm)
        assert np.array_equal(open_maze.cells, before)
        assert open_maze.visit_frequency.sum() == 0

    def test_elapsed_is_non_negative(self, open_maze, algorithm):
        """Timing is recorded for searches that ran."""
        assert run_search(open_maze, algorithm).elapsed_ms >= 0.0


class TestExplorationOrder:
    """Pinned traversal orders."""

    def test_bfs_layers(self, open_maze):
        """BFS expands the start, then its neighbors in rule order."""
        result = BreadthFirstSearch().search(open_maze)
        assert result.visited[:3] == ((0, 0), (0, 1), (1, 0))

    def test_dfs_follows_up_right_down_left(self, open_maze):
        """DFS runs right along row 0, then down the last column."""
        result = DepthFirstSearch().search(open_maze)
        assert result.path[:5] == ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))
        assert result.path[-1] == (4, 4)
        assert len(result.path) == 9

    def test_astar_expands_fewer_than_dijkstra(self, open_maze):
        """The heuristic focuses A* on the goal."""
        astar = AStarSearch().search(open_maze)
        dijkstra = DijkstraSearch().search(open_maze)
        assert astar.nodes_expanded < dijkstra.nodes_expanded
        assert dijkstra.nodes_expanded == 25

    def test_result_carries_algorithm_name(self, open_maze, algorithm):
        """Results are labelled with the producing strategy."""
        assert run_search(open_maze, algorithm).algorithm == algorithm
