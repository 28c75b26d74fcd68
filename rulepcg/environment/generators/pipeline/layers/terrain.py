"""Terrain layers: initial noise and cellular automata smoothing.

- NoiseFillLayer: Seeds every cell with random occupied/empty noise
- CellularAutomataLayer: Smooths the grid with one automaton step

Tuning guide for noise density followed by radius-1 smoothing at U=0.5:
- density=0.50 -> scattered blobs that mostly erode away
- density=0.60 -> connected cave walls
- density=0.40 -> nearly empty grid for the walker to carve into
"""

from __future__ import annotations

from rulepcg import config
from rulepcg.environment.generators.automaton import AutomatonParams, GridAutomaton
from rulepcg.environment.generators.pipeline.context import GenerationContext
from rulepcg.environment.generators.pipeline.layer import GenerationLayer
from rulepcg.environment.grid import CellState

NOISE_DOMAIN = "map.noise"


class NoiseFillLayer(GenerationLayer):
    """Fills the grid with independent random cells.

    Each cell becomes OCCUPIED with probability ``density``.
    """

    def __init__(self, density: float = config.NOISE_DENSITY) -> None:
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.density = density

    def apply(self, ctx: GenerationContext) -> None:
        rng = ctx.rng(NOISE_DOMAIN)
        grid = ctx.grid.copy()
        for x in range(ctx.height):
            for y in range(ctx.width):
                if rng.random() < self.density:
                    grid[x, y] = CellState.OCCUPIED
                else:
                    grid[x, y] = CellState.EMPTY
        ctx.replace_grid(grid)


class CellularAutomataLayer(GenerationLayer):
    """Runs one GridAutomaton step over the context's grid."""

    def __init__(self, params: AutomatonParams | None = None) -> None:
        if params is None:
            params = AutomatonParams(
                radius=config.AUTOMATON_RADIUS,
                threshold=config.AUTOMATON_THRESHOLD,
            )
        self.automaton = GridAutomaton(params)

    @property
    def params(self) -> AutomatonParams:
        return self.automaton.params

    def apply(self, ctx: GenerationContext) -> None:
        ctx.replace_grid(self.automaton.step(ctx.grid))
