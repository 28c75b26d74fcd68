"""Cellular automata smoothing for occupancy grids.

One step replaces every cell by a density vote over the square window of
half-width ``radius`` around it:

    ratio = occupied cells in window / (2 * radius + 1) ** 2
    new cell = OCCUPIED if ratio > threshold else EMPTY

Window cells that fall off the grid contribute nothing, but the denominator is
always the full window area, so cells near the border (corners most of all)
see a lower density than interior cells with the same neighbourhood.

Every cell is computed from the grid as it was before the step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from rulepcg.environment.grid import GRID_DTYPE, occupied_count, validate_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutomatonParams:
    """Window radius and density threshold for one automaton step.

    Attributes:
        radius: Half-width of the square window. 1 gives 3x3, 2 gives 5x5.
        threshold: Density a window must exceed for the cell to be occupied.
    """

    radius: int = 1
    threshold: float = 0.5

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be in [0, 1], got {self.threshold}")

    @property
    def window_area(self) -> int:
        side = 2 * self.radius + 1
        return side * side


def window_counts(grid: np.ndarray, radius: int) -> np.ndarray:
    """Count occupied cells in the clipped window around every cell.

    Returns an int array with the same shape as ``grid``.
    """
    side = 2 * radius + 1
    # Zero padding makes off-grid cells count as nothing.
    padded = np.pad(grid.astype(np.int32), radius, mode="constant", constant_values=0)
    return sliding_window_view(padded, (side, side)).sum(axis=(-2, -1))


def automaton_step(grid: np.ndarray, radius: int, threshold: float) -> np.ndarray:
    """Apply one smoothing step and return the next-state grid.

    The input grid is not modified.
    """
    side = 2 * radius + 1
    ratio = window_counts(grid, radius) / (side * side)
    return (ratio > threshold).astype(GRID_DTYPE)


class GridAutomaton:
    """Applies cellular automata smoothing with a fixed set of parameters."""

    def __init__(self, params: AutomatonParams | None = None) -> None:
        self.params = params if params is not None else AutomatonParams()

    def step(self, grid: np.ndarray) -> np.ndarray:
        """Return the grid after one smoothing step."""
        validate_grid(grid)
        new_grid = automaton_step(grid, self.params.radius, self.params.threshold)
        logger.debug(
            f"Automaton step (R={self.params.radius}, U={self.params.threshold}): "
            f"{occupied_count(grid)} -> {occupied_count(new_grid)} occupied"
        )
        return new_grid
