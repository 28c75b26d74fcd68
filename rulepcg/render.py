"""Plain-text rendering of occupancy grids."""

from __future__ import annotations

import numpy as np

from rulepcg import config
from rulepcg.environment.grid import CellState


def render_ascii(
    grid: np.ndarray,
    occupied: str = config.OCCUPIED_CHAR,
    empty: str = config.EMPTY_CHAR,
    separator: str = "",
) -> str:
    """Render a grid as one line of characters per row."""
    chars = {CellState.EMPTY: empty, CellState.OCCUPIED: occupied}
    return "\n".join(separator.join(chars[int(cell)] for cell in row) for row in grid)


def format_map(grid: np.ndarray, title: str = "Current Map") -> str:
    """Render a grid framed by a title line and a closing rule."""
    body = render_ascii(grid)
    header = f"--- {title} ---"
    return f"{header}\n{body}\n{'-' * len(header)}"
