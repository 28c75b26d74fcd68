"""Occupancy grids shared by every generator.

A grid is a 2D ``numpy`` array of shape ``(height, width)`` holding
``CellState`` values. Positions index it as ``grid[x, y]`` with ``x`` the
row and ``y`` the column.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

import numpy as np

GRID_DTYPE = np.uint8


class CellState(IntEnum):
    """State of a single grid cell."""

    EMPTY = 0
    OCCUPIED = 1


class GridShapeError(ValueError):
    """Raised when a grid is not a non-empty rectangle."""


def create_grid(
    width: int, height: int, fill: CellState = CellState.EMPTY
) -> np.ndarray:
    """Create a ``height`` x ``width`` grid filled with ``fill``.

    Raises:
        GridShapeError: If either dimension is below 1.
    """
    if width < 1 or height < 1:
        raise GridShapeError(f"Grid must be at least 1x1, got {width}x{height}")
    return np.full((height, width), fill_value=fill, dtype=GRID_DTYPE)


def validate_grid(grid: np.ndarray) -> np.ndarray:
    """Check that ``grid`` is a non-empty 2D array and return it unchanged."""
    if grid.ndim != 2:
        raise GridShapeError(f"Grid must be 2D, got {grid.ndim} dimensions")
    height, width = grid.shape
    if width < 1 or height < 1:
        raise GridShapeError(f"Grid must be at least 1x1, got {width}x{height}")
    return grid


def as_grid(rows: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    """Convert nested rows of 0/1 values into a validated grid.

    Rows of different lengths are rejected rather than padded.
    """
    if isinstance(rows, np.ndarray):
        return validate_grid(rows.astype(GRID_DTYPE, copy=True))

    if len(rows) == 0:
        raise GridShapeError("Grid must have at least one row")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise GridShapeError(
                f"Ragged grid: row {i} has {len(row)} columns, expected {width}"
            )
    return validate_grid(np.array(rows, dtype=GRID_DTYPE))


def grid_dimensions(grid: np.ndarray) -> tuple[int, int]:
    """Return ``(width, height)`` of a grid."""
    height, width = grid.shape
    return width, height


def occupied_count(grid: np.ndarray) -> int:
    return int(np.count_nonzero(grid == CellState.OCCUPIED))
