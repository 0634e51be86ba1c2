#!/usr/bin/env python3
"""
Grid Pathfinder CLI - Solve a maze with any search algorithm.

Usage:
    python scripts/solve.py --maze mazes/wall.txt
    python scripts/solve.py --maze mazes/wall.txt --algorithm DFS
    python scripts/solve.py --size 15 --density 0.3 --seed 7 --algorithm all
    python scripts/solve.py --maze mazes/serpentine.txt --algorithm BFS --steps 12

Algorithms:
    A*        - Manhattan-guided best-first search (optimal)
    Dijkstra  - Uniform-cost search (optimal)
    BFS       - Breadth-first search (optimal on unit costs)
    DFS       - Depth-first search (finds a path, not the shortest)
    all       - Run all four on the same maze and compare

Maze files:
    One line per row: '.' empty, '#' obstacle, 'S' start, 'G' goal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder.config import (  # noqa: E402
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    DEFAULT_OBSTACLE_DENSITY,
    DEFAULT_SIZE,
    LOG_LEVEL,
)
from pathfinder.maze import load_maze, random_maze, to_ascii  # noqa: E402
from pathfinder.search import get_algorithm  # noqa: E402
from pathfinder.session import MazeSession, SearchRun  # noqa: E402


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a grid maze with A*, Dijkstra, BFS or DFS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--maze",
        type=Path,
        default=None,
        help="Maze text file (default: generate a random maze)",
    )
    source.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Side length of a random maze (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_OBSTACLE_DENSITY,
        help=f"Obstacle density of a random maze (default: {DEFAULT_OBSTACLE_DENSITY})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible random maze",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[*ALGORITHMS, "all"],
        help=f"Search algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--steps",
        type=non_negative_int,
        default=None,
        help="Only reveal the first N expansions of the visited trace",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_run(run: SearchRun) -> None:
    """Print the metrics panel for one run."""
    metrics = run.summary()
    status = "found" if run.found else "no path"
    efficiency = metrics["efficiency"]
    print(
        f"  {run.algorithm:9}: {status:8} "
        f"path={metrics['path_length']:3}  "
        f"expanded={metrics['nodes_expanded']:4}  "
        f"time={metrics['elapsed_ms']:.3f}ms  "
        f"efficiency={'-' if efficiency is None else f'{efficiency:.2f}'}"
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.maze is not None:
            model = load_maze(args.maze)
        else:
            model = random_maze(args.size, args.density, args.seed)
        algorithms = list(ALGORITHMS) if args.algorithm == "all" else [args.algorithm]
        for name in algorithms:
            get_algorithm(name)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = MazeSession(model)

    print("\n" + "=" * 60)
    print("Grid Pathfinder")
    print("=" * 60)
    print(f"  Maze:  {args.maze or f'random (seed={args.seed})'}")
    print(f"  Size:  {model.rows}x{model.cols}")
    print(f"  Start: {tuple(model.start) if model.start else '-'}")
    print(f"  Goal:  {tuple(model.goal) if model.goal else '-'}")
    print("=" * 60 + "\n")

    runs = session.compare(algorithms)

    for run in runs:
        if len(runs) > 1:
            print(f"[{run.algorithm}]")
        print(to_ascii(model, run.result, step=args.steps))
        print()

    print("Metrics:")
    for run in runs:
        print_run(run)

    return 0 if all(run.found for run in runs) else 1


if __name__ == "__main__":
    sys.exit(main())
