"""Rectangles and bounds checks in grid coordinates.

Grid coordinates follow numpy indexing: ``x`` selects the row and ``y`` the
column, so a grid of shape ``(height, width)`` is addressed as ``grid[x, y]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rulepcg.types import GridPos, TileCoord


class Rect:
    """Half-open rectangle ``[x1, x2) x [y1, y2)`` in grid coordinates."""

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        return cls(x1, y1, x2 - x1, y2 - y1)

    @classmethod
    def centered(
        cls, center: GridPos, size_x: TileCoord, size_y: TileCoord
    ) -> Rect:
        """Create a ``size_x`` x ``size_y`` Rect centred on ``center``.

        Even sizes cannot be centred exactly; the extra cell goes on the
        low side of the centre.
        """
        cx, cy = center
        return cls(cx - size_x // 2, cy - size_y // 2, size_x, size_y)

    @property
    def size_x(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def size_y(self) -> TileCoord:
        return self.y2 - self.y1

    def clipped(self, rows: TileCoord, cols: TileCoord) -> Rect:
        """Return the part of this Rect that lies inside a rows x cols grid."""
        x1 = max(0, self.x1)
        y1 = max(0, self.y1)
        x2 = max(x1, min(rows, self.x2))
        y2 = max(y1, min(cols, self.y2))
        return Rect.from_bounds(x1, y1, x2, y2)

    def slices(self) -> tuple[slice, slice]:
        """Numpy index for this Rect: ``grid[rect.slices()]``."""
        return slice(self.x1, self.x2), slice(self.y1, self.y2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


def is_valid_grid_pos(pos: GridPos, rows: TileCoord, cols: TileCoord) -> bool:
    """Check if a grid position is within a rows x cols grid."""
    x, y = pos
    return 0 <= x < rows and 0 <= y < cols
