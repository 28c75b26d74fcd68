"""Base classes for map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from rulepcg.environment.generators.drunk_walker import WalkerState
    from rulepcg.types import TileCoord


@dataclass
class GeneratedMapData:
    """A container for all raw data produced by a map generator.

    Attributes:
        grid: 2D numpy array of CellState values. Shape: (height, width).
        walker: Final walker state, if the generator ran a walker.
        iterations: Number of completed generation rounds.
    """

    grid: np.ndarray
    walker: WalkerState | None = None
    iterations: int = 0


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> GeneratedMapData:
        """Generate the map and return its data."""
        raise NotImplementedError
