from __future__ import annotations

import pytest

from rulepcg.util.coordinates import Rect, is_valid_grid_pos


def test_rect_bounds_and_sizes() -> None:
    rect = Rect(2, 3, 4, 5)

    assert (rect.x1, rect.y1, rect.x2, rect.y2) == (2, 3, 6, 8)
    assert rect.size_x == 4
    assert rect.size_y == 5
    assert rect == Rect.from_bounds(2, 3, 6, 8)


@pytest.mark.parametrize(
    ("size", "expected_x1", "expected_x2"),
    [(1, 5, 6), (3, 4, 7), (4, 3, 7), (5, 3, 8)],
)
def test_centered(size: int, expected_x1: int, expected_x2: int) -> None:
    rect = Rect.centered((5, 5), size, size)

    assert (rect.x1, rect.x2) == (expected_x1, expected_x2)
    assert (rect.y1, rect.y2) == (expected_x1, expected_x2)


def test_clipped_inside_is_unchanged() -> None:
    rect = Rect(1, 1, 2, 2)

    assert rect.clipped(10, 10) == rect


def test_clipped_to_grid() -> None:
    rect = Rect.from_bounds(-3, 2, 4, 12)

    assert rect.clipped(3, 10) == Rect.from_bounds(0, 2, 3, 10)


def test_clipped_fully_outside_is_empty() -> None:
    rect = Rect(20, 20, 3, 3)

    clipped = rect.clipped(5, 5)

    assert clipped.size_x == 0
    assert clipped.size_y == 0


def test_slices_index_numpy_rows_then_columns() -> None:
    rect = Rect.from_bounds(1, 2, 3, 5)

    assert rect.slices() == (slice(1, 3), slice(2, 5))


@pytest.mark.parametrize(
    ("pos", "valid"),
    [
        ((0, 0), True),
        ((2, 4), True),
        ((3, 0), False),
        ((0, 5), False),
        ((-1, 2), False),
    ],
)
def test_is_valid_grid_pos(pos: tuple[int, int], valid: bool) -> None:
    assert is_valid_grid_pos(pos, rows=3, cols=5) is valid
