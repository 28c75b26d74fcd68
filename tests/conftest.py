from __future__ import annotations

import random

import pytest

from rulepcg.environment.generators.drunk_walker import WalkerParams


@pytest.fixture
def seeded_rng() -> random.Random:
    """A fresh, fixed-seed Random for each test."""
    return random.Random(1234)


@pytest.fixture
def quiet_walker_params() -> WalkerParams:
    """Walker that never carves rooms and turns with low probability."""
    return WalkerParams(
        walk_count=1,
        steps_per_walk=1,
        room_size_x=3,
        room_size_y=3,
        prob_generate_room=0.0,
        prob_increase_room=0.0,
        prob_change_direction=0.25,
        prob_increase_change=0.1,
    )
