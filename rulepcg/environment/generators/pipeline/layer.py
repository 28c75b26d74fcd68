"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext: seeding noise, smoothing, carving.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for map generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and updates it in place.
    """

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        Layers that compute a next-state grid hand it to
        ``ctx.replace_grid()`` rather than editing ``ctx.grid`` cell by cell.
        Random decisions must come from ``ctx.rng(domain)``.

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
