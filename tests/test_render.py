from __future__ import annotations

from rulepcg.environment.grid import as_grid
from rulepcg.render import format_map, render_ascii


def test_render_ascii_default_chars() -> None:
    grid = as_grid([[1, 0, 0], [0, 1, 1]])

    assert render_ascii(grid) == "#..\n.##"


def test_render_ascii_custom_chars_and_separator() -> None:
    grid = as_grid([[1, 0], [0, 1]])

    assert render_ascii(grid, occupied="1", empty="0", separator=" ") == "1 0\n0 1"


def test_format_map_frames_grid() -> None:
    grid = as_grid([[1]])

    lines = format_map(grid, title="Map").splitlines()

    assert lines == ["--- Map ---", "#", "-----------"]
