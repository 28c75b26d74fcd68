from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from rulepcg.environment.generators.drunk_walker import Heading

T = TypeVar("T")


class ScriptedRNG:
    """Stand-in RNG that replays fixed draws.

    ``random()`` cycles through ``randoms`` and ``choice()`` cycles through
    ``headings`` regardless of the sequence it is given.
    """

    def __init__(
        self,
        randoms: Sequence[float] = (0.99,),
        headings: Sequence[Heading] = (Heading.RIGHT,),
    ) -> None:
        self._randoms = itertools.cycle(randoms)
        self._headings = itertools.cycle(headings)
        self.choice_calls = 0

    def random(self) -> float:
        return next(self._randoms)

    def choice(self, seq: Sequence[T]) -> T:
        self.choice_calls += 1
        heading = next(self._headings)
        assert heading in seq
        return heading  # type: ignore[return-value]


def reference_automaton_step(
    grid: np.ndarray, radius: int, threshold: float
) -> np.ndarray:
    """Straightforward loop version of one automaton step."""
    rows, cols = grid.shape
    area = (2 * radius + 1) ** 2
    result = np.zeros_like(grid)
    for i in range(rows):
        for j in range(cols):
            count = 0
            for di in range(-radius, radius + 1):
                for dj in range(-radius, radius + 1):
                    ni, nj = i + di, j + dj
                    if 0 <= ni < rows and 0 <= nj < cols:
                        count += int(grid[ni, nj])
            result[i, j] = 1 if count / area > threshold else 0
    return result
