#!/usr/bin/env python3
"""
Quick benchmark to compare the four search algorithms on seeded random mazes.
"""

from __future__ import annotations

import statistics
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathfinder.config import ALGORITHMS
from pathfinder.maze import random_maze
from pathfinder.search import run_search

# Test cases: (size, obstacle density, seed)
TEST_CASES = [
    (10, 0.15, 1),
    (10, 0.25, 2),
    (12, 0.30, 3),
    (15, 0.20, 4),
    (15, 0.30, 5),
    (18, 0.25, 6),
    (20, 0.20, 7),
    (20, 0.30, 8),
    (20, 0.35, 9),
    (20, 0.10, 10),
]


def run_benchmark():
    print("=" * 70)
    print("Grid Pathfinder - Algorithm Comparison")
    print("=" * 70)
    print(f"\nTesting {len(ALGORITHMS)} algorithms on {len(TEST_CASES)} mazes...\n")

    results = {name: [] for name in ALGORITHMS}

    for i, (size, density, seed) in enumerate(TEST_CASES, 1):
        model = random_maze(size, density, seed)
        print(f"\n[{i}/{len(TEST_CASES)}] {size}x{size}, density {density:.2f}, seed {seed}")
        print("-" * 50)

        for name in ALGORITHMS:
            result = run_search(model, name)
            results[name].append(result)

            status = "FOUND" if result.found else "NONE"
            print(
                f"  {name:10} : {status:5} path {len(result.path):3}  "
                f"expanded {result.nodes_expanded:4}  ({result.elapsed_ms:.2f}ms)"
            )

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for name in ALGORITHMS:
        runs = results[name]
        found = [r for r in runs if r.found]
        mean_expanded = statistics.mean(r.nodes_expanded for r in runs)
        mean_path = statistics.mean(len(r.path) for r in found) if found else 0.0
        mean_ms = statistics.mean(r.elapsed_ms for r in runs)

        print(
            f"  {name:10} : {len(found)}/{len(runs)} found, "
            f"avg path {mean_path:.1f}, avg expanded {mean_expanded:.1f}, "
            f"avg {mean_ms:.2f}ms"
        )


if __name__ == "__main__":
    run_benchmark()
