#!/usr/bin/env python3
"""Benchmark the automaton step and drunk walker on growing grids."""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path

from rulepcg.environment.generators.automaton import AutomatonParams, GridAutomaton
from rulepcg.environment.generators.drunk_walker import (
    DrunkWalker,
    WalkerParams,
    WalkerState,
)
from rulepcg.environment.grid import as_grid

GRID_SIZES: tuple[tuple[int, int], ...] = (
    (20, 10),
    (80, 40),
    (160, 120),
    (400, 300),
)


class GenerationBenchmark:
    """Times one automaton step and one walker call per grid size."""

    def __init__(self, iterations: int, radius: int) -> None:
        self.iterations = iterations
        self.automaton = GridAutomaton(AutomatonParams(radius=radius, threshold=0.5))
        self.walker = DrunkWalker(WalkerParams(walk_count=20, steps_per_walk=100))
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, width: int, height: int) -> tuple[float, float]:
        """Return average (automaton_ms, walker_ms) for one grid size."""
        automaton_total = 0.0
        walker_total = 0.0

        for i in range(self.iterations):
            rng = random.Random((width * 1_000_000) + (height * 1_000) + i)
            grid = as_grid(
                [[rng.randint(0, 1) for _ in range(width)] for _ in range(height)]
            )

            start = time.perf_counter()
            grid = self.automaton.step(grid)
            automaton_total += time.perf_counter() - start

            state = WalkerState.at_center(grid, self.walker.params)
            start = time.perf_counter()
            self.walker.walk(grid, state, rng)
            walker_total += time.perf_counter() - start

        return (
            (automaton_total / self.iterations) * 1000.0,
            (walker_total / self.iterations) * 1000.0,
        )

    def run(self) -> None:
        print("Generation Benchmark")
        print("=" * 42)
        print(f"Iterations per size: {self.iterations}")
        print()
        print(f"{'Size':>12} {'Automaton (ms)':>15} {'Walker (ms)':>12}")
        print("-" * 42)

        for width, height in GRID_SIZES:
            automaton_ms, walker_ms = self._run_case(width, height)
            size_key = f"{width}x{height}"
            self.results[size_key] = {
                "automaton_ms": automaton_ms,
                "walker_ms": walker_ms,
            }
            print(f"{size_key:>12} {automaton_ms:15.2f} {walker_ms:12.2f}")

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark map generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per grid size (default: 5)",
    )
    parser.add_argument("--radius", type=int, default=1)
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    args = parser.parse_args(argv)

    benchmark = GenerationBenchmark(iterations=args.iterations, radius=args.radius)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)


if __name__ == "__main__":
    main()
