"""Pipeline generator that orchestrates layer-based map generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rulepcg.environment.generators.base import BaseMapGenerator, GeneratedMapData
from rulepcg.environment.grid import CellState, occupied_count
from rulepcg.types import RandomSeed, TileCoord

from .context import GenerationContext

if TYPE_CHECKING:
    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Map generator that runs layers sequentially on a shared context.

    Example:
        generator = PipelineGenerator(
            layers=[
                NoiseFillLayer(),
                IterationLayer(
                    [CellularAutomataLayer(), DrunkWalkLayer()],
                    iterations=5,
                ),
            ],
            map_width=20,
            map_height=10,
            seed=12345,
        )
        map_data = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        seed: Master seed for the run's random streams.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_width: TileCoord,
        map_height: TileCoord,
        seed: RandomSeed = None,
        fill: CellState = CellState.EMPTY,
    ) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: List of GenerationLayer instances to apply in order.
            map_width: Width of the map in cells.
            map_height: Height of the map in cells.
            seed: Optional random seed for deterministic generation.
            fill: Initial state of every cell before the first layer runs.
        """
        super().__init__(map_width, map_height)
        self.layers = layers
        self.seed = seed
        self.fill = fill

    def create_context(self) -> GenerationContext:
        return GenerationContext.create_empty(
            width=self.map_width,
            height=self.map_height,
            seed=self.seed,
            fill=self.fill,
        )

    def generate(self) -> GeneratedMapData:
        """Generate a map by running all layers in sequence.

        Returns:
            GeneratedMapData with the final grid and walker state.
        """
        ctx = self.create_context()

        for layer in self.layers:
            layer.apply(ctx)

        logger.info(
            f"Generated {self.map_width}x{self.map_height} map: "
            f"{occupied_count(ctx.grid)} occupied cells after "
            f"{ctx.iteration} iterations"
        )
        return ctx.to_generated_map_data()
