from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Grid positions are (row, column) pairs that index a grid as grid[x, y].
GridPos: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (5, 10) = row 5, column 10

# Directions - discrete grid steps
UnitStep: TypeAlias = Literal[-1, 0, 1]
Direction: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = one row up

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Seed accepted by the RNG provider. None means "use system entropy".
RandomSeed: TypeAlias = int | str | None

# Probability accumulators may grow past 1.0; they are not clamped.
Probability: TypeAlias = float
