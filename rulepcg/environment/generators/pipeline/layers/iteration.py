"""Repetition layer for iterative pipelines."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from rulepcg.environment.generators.pipeline.context import GenerationContext
from rulepcg.environment.generators.pipeline.layer import GenerationLayer

logger = logging.getLogger(__name__)

IterationCallback: TypeAlias = Callable[[GenerationContext], None]


class IterationLayer(GenerationLayer):
    """Applies a group of layers ``iterations`` times in order.

    After each round ``ctx.iteration`` is incremented and ``on_iteration``
    (if given) is called with the context, e.g. to render the grid. With
    ``report_initial`` the callback also runs once before the first round,
    while ``ctx.iteration`` is still 0.
    """

    def __init__(
        self,
        layers: Sequence[GenerationLayer],
        iterations: int,
        on_iteration: IterationCallback | None = None,
        report_initial: bool = False,
    ) -> None:
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        self.layers = list(layers)
        self.iterations = iterations
        self.on_iteration = on_iteration
        self.report_initial = report_initial

    def apply(self, ctx: GenerationContext) -> None:
        if self.report_initial and self.on_iteration is not None:
            self.on_iteration(ctx)

        for _ in range(self.iterations):
            for layer in self.layers:
                layer.apply(ctx)
            ctx.iteration += 1
            logger.debug(f"Completed iteration {ctx.iteration}/{self.iterations}")
            if self.on_iteration is not None:
                self.on_iteration(ctx)
