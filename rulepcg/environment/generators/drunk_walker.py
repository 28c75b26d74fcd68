"""Drunk-walk corridor and room carving.

A walker wanders the grid, marking every cell it stands on as occupied. On
each step it may also carve a rectangular room around itself and may turn to
a new random heading. Both decisions use "pity timer" chances: every miss
raises the chance by a fixed increment (with no upper bound, so a chance
above 1.0 always succeeds) and every success drops it back to its base value.

Walker position, heading and both chances live in a WalkerState that the
caller owns and keeps between calls, so consecutive calls continue the same
path instead of restarting it. The heading is re-rolled at the start of every
walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from rulepcg.environment.grid import CellState, grid_dimensions, validate_grid
from rulepcg.util.coordinates import Rect, is_valid_grid_pos

if TYPE_CHECKING:
    from rulepcg.types import Direction, GridPos, Probability, TileCoord
    from rulepcg.util.rng import RNG

logger = logging.getLogger(__name__)


class Heading(IntEnum):
    """Axis-aligned direction of travel."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def offset(self) -> Direction:
        """Unit ``(row, column)`` step for this heading."""
        return HEADING_OFFSETS[self]


HEADING_OFFSETS: dict[Heading, Direction] = {
    Heading.UP: (-1, 0),
    Heading.DOWN: (1, 0),
    Heading.LEFT: (0, -1),
    Heading.RIGHT: (0, 1),
}

HEADINGS: tuple[Heading, ...] = tuple(Heading)


@dataclass(frozen=True)
class WalkerParams:
    """Configuration for one call to DrunkWalker.walk().

    Attributes:
        walk_count: Number of walks (J). Each walk re-rolls the heading.
        steps_per_walk: Steps taken per walk (I).
        room_size_x: Rows spanned by a carved room.
        room_size_y: Columns spanned by a carved room.
        prob_generate_room: Base chance of carving a room on a step.
        prob_increase_room: Added to the room chance after each miss.
        prob_change_direction: Base chance of turning on a step.
        prob_increase_change: Added to the turn chance after each miss.
    """

    walk_count: int = 5
    steps_per_walk: int = 10
    room_size_x: int = 5
    room_size_y: int = 3
    prob_generate_room: Probability = 0.1
    prob_increase_room: Probability = 0.05
    prob_change_direction: Probability = 0.2
    prob_increase_change: Probability = 0.03

    def __post_init__(self) -> None:
        if self.walk_count < 0:
            raise ValueError(f"walk_count must be >= 0, got {self.walk_count}")
        if self.steps_per_walk < 0:
            raise ValueError(
                f"steps_per_walk must be >= 0, got {self.steps_per_walk}"
            )
        if self.room_size_x < 1 or self.room_size_y < 1:
            raise ValueError(
                "room sizes must be >= 1, got "
                f"{self.room_size_x}x{self.room_size_y}"
            )


@dataclass
class WalkerState:
    """Mutable walker state carried from one walk() call to the next.

    Attributes:
        x: Current row.
        y: Current column.
        heading: Direction the walker will try to move on its next step.
        room_chance: Current chance of carving a room. None until the first
            step, which starts it at the base value of the walk's params.
        turn_chance: Current chance of turning. None until the first step.
    """

    x: TileCoord
    y: TileCoord
    heading: Heading = Heading.UP
    room_chance: Probability | None = None
    turn_chance: Probability | None = None

    @classmethod
    def create(cls, x: TileCoord, y: TileCoord, params: WalkerParams) -> WalkerState:
        """Place a walker at ``(x, y)`` with both chances at their base values."""
        return cls(
            x=x,
            y=y,
            room_chance=params.prob_generate_room,
            turn_chance=params.prob_change_direction,
        )

    @classmethod
    def at_center(cls, grid: np.ndarray, params: WalkerParams) -> WalkerState:
        """Place a walker in the middle of ``grid``."""
        width, height = grid_dimensions(grid)
        return cls.create(height // 2, width // 2, params)

    @property
    def position(self) -> GridPos:
        return (self.x, self.y)


def carve_room(
    grid: np.ndarray, center: GridPos, size_x: TileCoord, size_y: TileCoord
) -> Rect:
    """Mark a ``size_x`` x ``size_y`` rectangle around ``center`` occupied.

    The rectangle is clipped to the grid. Returns the area actually carved.
    """
    rows, cols = grid.shape
    room = Rect.centered(center, size_x, size_y).clipped(rows, cols)
    grid[room.slices()] = CellState.OCCUPIED
    return room


class DrunkWalker:
    """Carves corridors and rooms by random walks over a grid."""

    def __init__(self, params: WalkerParams | None = None) -> None:
        self.params = params if params is not None else WalkerParams()

    def walk(self, grid: np.ndarray, state: WalkerState, rng: RNG) -> np.ndarray:
        """Run ``walk_count`` walks and return the carved grid.

        The input grid is left untouched. ``state`` is updated in place and
        ends wherever the last step left the walker.

        Raises:
            ValueError: If the walker starts outside the grid.
        """
        validate_grid(grid)
        rows, cols = grid.shape
        if not is_valid_grid_pos(state.position, rows, cols):
            raise ValueError(
                f"Walker position {state.position} is outside a "
                f"{rows}x{cols} grid"
            )

        new_grid = grid.copy()
        start = state.position
        for _ in range(self.params.walk_count):
            state.heading = rng.choice(HEADINGS)
            for _ in range(self.params.steps_per_walk):
                self.step(new_grid, state, rng)

        logger.debug(
            f"Walker moved {start} -> {state.position} over "
            f"{self.params.walk_count}x{self.params.steps_per_walk} steps"
        )
        return new_grid

    def step(self, grid: np.ndarray, state: WalkerState, rng: RNG) -> None:
        """Advance the walker one step, carving into ``grid`` in place."""
        params = self.params
        rows, cols = grid.shape

        if state.room_chance is None:
            state.room_chance = params.prob_generate_room
        if state.turn_chance is None:
            state.turn_chance = params.prob_change_direction

        grid[state.x, state.y] = CellState.OCCUPIED

        if rng.random() < state.room_chance:
            room = carve_room(
                grid, state.position, params.room_size_x, params.room_size_y
            )
            logger.debug(f"Carved room {room} at {state.position}")
            state.room_chance = params.prob_generate_room
        else:
            state.room_chance += params.prob_increase_room

        if rng.random() < state.turn_chance:
            state.heading = rng.choice(HEADINGS)
            state.turn_chance = params.prob_change_direction
        else:
            state.turn_chance += params.prob_increase_change

        dx, dy = state.heading.offset
        next_pos = (state.x + dx, state.y + dy)
        if is_valid_grid_pos(next_pos, rows, cols):
            state.x, state.y = next_pos
        else:
            # Bumping an edge counts as a turn.
            state.heading = rng.choice(HEADINGS)
            state.turn_chance = params.prob_change_direction


def drunk_walk(
    grid: np.ndarray, params: WalkerParams, state: WalkerState, rng: RNG
) -> np.ndarray:
    """Run a DrunkWalker configured with ``params`` once over ``grid``."""
    return DrunkWalker(params).walk(grid, state, rng)
