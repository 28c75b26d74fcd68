from .grid import (
    CellState,
    GridShapeError,
    as_grid,
    create_grid,
    grid_dimensions,
    occupied_count,
    validate_grid,
)

__all__ = [
    "CellState",
    "GridShapeError",
    "as_grid",
    "create_grid",
    "grid_dimensions",
    "occupied_count",
    "validate_grid",
]
