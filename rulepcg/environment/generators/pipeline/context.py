"""Generation context for the pipeline map generator.

The GenerationContext is a mutable container that holds all state during map
generation: the current grid, the walker that persists between iterations and
the RNG provider every layer draws from. Each layer in the pipeline receives
the same context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from rulepcg.environment.generators.base import GeneratedMapData
from rulepcg.environment.grid import CellState, GridShapeError, create_grid
from rulepcg.types import RandomSeed
from rulepcg.util.rng import RNGProvider

if TYPE_CHECKING:
    from rulepcg.environment.generators.drunk_walker import WalkerState
    from rulepcg.util.rng import RNGStream


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        width: Map width in cells (columns).
        height: Map height in cells (rows).
        grid: 2D numpy array of CellState values. Shape: (height, width).
        rngs: Provider of the named random streams used by layers.
        walker: Walker carried across iterations. None until a walk layer
            first runs.
        iteration: Number of completed pipeline iterations.
    """

    width: int
    height: int
    grid: np.ndarray
    rngs: RNGProvider = field(default_factory=RNGProvider)
    walker: WalkerState | None = None
    iteration: int = 0

    @classmethod
    def create_empty(
        cls,
        width: int,
        height: int,
        seed: RandomSeed = None,
        fill: CellState = CellState.EMPTY,
    ) -> GenerationContext:
        """Create a generation context around a freshly filled grid.

        Args:
            width: Map width in cells.
            height: Map height in cells.
            seed: Master seed for every random stream of the run.
            fill: Cell state to fill the initial grid with.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        return cls(
            width=width,
            height=height,
            grid=create_grid(width, height, fill),
            rngs=RNGProvider(seed),
        )

    def rng(self, domain: str) -> RNGStream:
        """Return the random stream for ``domain``."""
        return self.rngs.get(domain)

    def replace_grid(self, new_grid: np.ndarray) -> None:
        """Swap in the next-state grid produced by a layer.

        Raises:
            GridShapeError: If the new grid's shape differs from the map's.
        """
        if new_grid.shape != (self.height, self.width):
            raise GridShapeError(
                f"Layer produced a grid of shape {new_grid.shape}, "
                f"expected {(self.height, self.width)}"
            )
        self.grid = new_grid

    def to_generated_map_data(self) -> GeneratedMapData:
        """Convert this context to a GeneratedMapData.

        Returns:
            A GeneratedMapData instance containing the final map data.
        """
        return GeneratedMapData(
            grid=self.grid,
            walker=self.walker,
            iterations=self.iteration,
        )
