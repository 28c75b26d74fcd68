"""Corridor layer: carves paths and rooms with a drunk walker.

The walker is stored on the GenerationContext the first time this layer
runs, so repeated applications (one per pipeline iteration) continue the same
path instead of starting over.
"""

from __future__ import annotations

import dataclasses
import logging

from rulepcg import config
from rulepcg.environment.generators.drunk_walker import (
    DrunkWalker,
    WalkerParams,
    WalkerState,
)
from rulepcg.environment.generators.pipeline.context import GenerationContext
from rulepcg.environment.generators.pipeline.layer import GenerationLayer
from rulepcg.types import GridPos

WALK_DOMAIN = "map.drunk_walk"
VARIETY_DOMAIN = "driver.variety"

logger = logging.getLogger(__name__)


def default_walker_params() -> WalkerParams:
    """WalkerParams built from the values in ``config``."""
    return WalkerParams(
        walk_count=config.WALKER_WALK_COUNT,
        steps_per_walk=config.WALKER_STEPS_PER_WALK,
        room_size_x=config.WALKER_ROOM_SIZE_X,
        room_size_y=config.WALKER_ROOM_SIZE_Y,
        prob_generate_room=config.WALKER_PROB_GENERATE_ROOM,
        prob_increase_room=config.WALKER_PROB_INCREASE_ROOM,
        prob_change_direction=config.WALKER_PROB_CHANGE_DIRECTION,
        prob_increase_change=config.WALKER_PROB_INCREASE_CHANGE,
    )


class DrunkWalkLayer(GenerationLayer):
    """Carves corridors and rooms into the grid with a DrunkWalker.

    When ``vary`` is set, each application re-draws the walk count and steps
    per walk uniformly from ``1`` up to the configured values, giving each
    iteration a different amount of carving.
    """

    def __init__(
        self,
        params: WalkerParams | None = None,
        start: GridPos | None = None,
        vary: bool = False,
    ) -> None:
        """Initialize the walk layer.

        Args:
            params: Walker configuration. Defaults to the values in config.
            start: Starting cell of the walker. Defaults to the grid centre.
            vary: Re-draw walk and step counts on every application.
        """
        self.params = params if params is not None else default_walker_params()
        self.start = start
        self.vary = vary

    def _params_for_iteration(self, ctx: GenerationContext) -> WalkerParams:
        if not self.vary:
            return self.params
        rng = ctx.rng(VARIETY_DOMAIN)
        walk_count = rng.randint(min(1, self.params.walk_count), self.params.walk_count)
        steps = rng.randint(
            min(1, self.params.steps_per_walk), self.params.steps_per_walk
        )
        logger.debug(f"Iteration {ctx.iteration}: {walk_count} walks x {steps} steps")
        return dataclasses.replace(
            self.params, walk_count=walk_count, steps_per_walk=steps
        )

    def _ensure_walker(self, ctx: GenerationContext) -> WalkerState:
        if ctx.walker is None:
            if self.start is None:
                ctx.walker = WalkerState.at_center(ctx.grid, self.params)
            else:
                x, y = self.start
                ctx.walker = WalkerState.create(x, y, self.params)
        return ctx.walker

    def apply(self, ctx: GenerationContext) -> None:
        walker_state = self._ensure_walker(ctx)
        walker = DrunkWalker(self._params_for_iteration(ctx))
        ctx.replace_grid(walker.walk(ctx.grid, walker_state, ctx.rng(WALK_DOMAIN)))
