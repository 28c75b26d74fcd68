"""Tests for individual pipeline layers.

Covers:
- NoiseFillLayer
- CellularAutomataLayer
- DrunkWalkLayer
- IterationLayer
"""

from __future__ import annotations

import numpy as np
import pytest

from rulepcg import config
from rulepcg.environment.generators.automaton import AutomatonParams, automaton_step
from rulepcg.environment.generators.drunk_walker import WalkerParams
from rulepcg.environment.generators.pipeline import GenerationContext
from rulepcg.environment.generators.pipeline.layers import (
    CellularAutomataLayer,
    DrunkWalkLayer,
    IterationLayer,
    NoiseFillLayer,
)
from rulepcg.environment.grid import CellState

# =============================================================================
# NoiseFillLayer
# =============================================================================


class TestNoiseFillLayer:
    def test_density_zero_and_one(self) -> None:
        ctx = GenerationContext.create_empty(width=10, height=6, seed=1)

        NoiseFillLayer(density=1.0).apply(ctx)
        assert ctx.grid.all()

        NoiseFillLayer(density=0.0).apply(ctx)
        assert not ctx.grid.any()

    def test_half_density_mixes_states(self) -> None:
        ctx = GenerationContext.create_empty(width=30, height=30, seed=2)

        NoiseFillLayer(density=0.5).apply(ctx)

        occupied = int(ctx.grid.sum())
        assert 0 < occupied < 900

    def test_same_seed_same_noise(self) -> None:
        ctx_a = GenerationContext.create_empty(width=20, height=20, seed=77)
        ctx_b = GenerationContext.create_empty(width=20, height=20, seed=77)

        NoiseFillLayer().apply(ctx_a)
        NoiseFillLayer().apply(ctx_b)

        np.testing.assert_array_equal(ctx_a.grid, ctx_b.grid)

    def test_different_seeds_different_noise(self) -> None:
        ctx_a = GenerationContext.create_empty(width=20, height=20, seed=1)
        ctx_b = GenerationContext.create_empty(width=20, height=20, seed=2)

        NoiseFillLayer().apply(ctx_a)
        NoiseFillLayer().apply(ctx_b)

        assert not np.array_equal(ctx_a.grid, ctx_b.grid)

    def test_invalid_density(self) -> None:
        with pytest.raises(ValueError, match="density"):
            NoiseFillLayer(density=1.5)


# =============================================================================
# CellularAutomataLayer
# =============================================================================


class TestCellularAutomataLayer:
    def test_defaults_come_from_config(self) -> None:
        layer = CellularAutomataLayer()

        assert layer.params.radius == config.AUTOMATON_RADIUS
        assert layer.params.threshold == config.AUTOMATON_THRESHOLD

    def test_applies_one_step(self) -> None:
        ctx = GenerationContext.create_empty(width=16, height=9, seed=4)
        NoiseFillLayer().apply(ctx)
        before = ctx.grid.copy()
        params = AutomatonParams(radius=1, threshold=0.4)

        CellularAutomataLayer(params).apply(ctx)

        np.testing.assert_array_equal(ctx.grid, automaton_step(before, 1, 0.4))


# =============================================================================
# DrunkWalkLayer
# =============================================================================


class TestDrunkWalkLayer:
    def test_creates_walker_at_center(self) -> None:
        ctx = GenerationContext.create_empty(width=20, height=10, seed=6)
        params = WalkerParams(walk_count=0)

        DrunkWalkLayer(params).apply(ctx)

        assert ctx.walker is not None
        assert ctx.walker.position == (5, 10)

    def test_custom_start(self) -> None:
        ctx = GenerationContext.create_empty(width=20, height=10, seed=6)
        params = WalkerParams(walk_count=0)

        DrunkWalkLayer(params, start=(1, 2)).apply(ctx)

        assert ctx.walker is not None
        assert ctx.walker.position == (1, 2)

    def test_reuses_existing_walker(self) -> None:
        ctx = GenerationContext.create_empty(width=20, height=20, seed=9)
        params = WalkerParams(walk_count=2, steps_per_walk=5)
        layer = DrunkWalkLayer(params)

        layer.apply(ctx)
        walker = ctx.walker
        assert walker is not None
        carried = walker.position

        layer.apply(ctx)

        assert ctx.walker is walker
        assert ctx.grid[carried] == CellState.OCCUPIED

    def test_vary_draws_counts_within_limits(self) -> None:
        ctx = GenerationContext.create_empty(width=10, height=10, seed=10)
        layer = DrunkWalkLayer(WalkerParams(walk_count=4, steps_per_walk=7), vary=True)

        drawn = [layer._params_for_iteration(ctx) for _ in range(50)]

        assert all(1 <= p.walk_count <= 4 for p in drawn)
        assert all(1 <= p.steps_per_walk <= 7 for p in drawn)
        assert len({p.walk_count for p in drawn}) > 1

    def test_without_vary_params_are_fixed(self) -> None:
        ctx = GenerationContext.create_empty(width=10, height=10, seed=10)
        params = WalkerParams(walk_count=4, steps_per_walk=7)

        assert DrunkWalkLayer(params)._params_for_iteration(ctx) is params


# =============================================================================
# IterationLayer
# =============================================================================


class CountingLayer(NoiseFillLayer):
    def __init__(self) -> None:
        super().__init__(density=0.0)
        self.calls = 0

    def apply(self, ctx: GenerationContext) -> None:
        self.calls += 1
        super().apply(ctx)


class TestIterationLayer:
    def test_runs_layers_each_iteration(self) -> None:
        ctx = GenerationContext.create_empty(width=5, height=5)
        first, second = CountingLayer(), CountingLayer()

        IterationLayer([first, second], iterations=4).apply(ctx)

        assert first.calls == 4
        assert second.calls == 4
        assert ctx.iteration == 4

    def test_callback_after_each_round(self) -> None:
        ctx = GenerationContext.create_empty(width=5, height=5)
        seen: list[int] = []

        IterationLayer(
            [CountingLayer()],
            iterations=3,
            on_iteration=lambda c: seen.append(c.iteration),
        ).apply(ctx)

        assert seen == [1, 2, 3]

    def test_negative_iterations_rejected(self) -> None:
        with pytest.raises(ValueError, match="iterations"):
            IterationLayer([], iterations=-1)
