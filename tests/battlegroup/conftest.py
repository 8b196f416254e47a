from __future__ import annotations

import random

import pytest

from battlegroup.game.ai.probability_target import ProbabilityTargeting
from battlegroup.game.core.board import BoardState
from battlegroup.game.core.models import Coord, Orientation, ShipPlacement


def make_fixed_placements() -> list[ShipPlacement]:
    return [
        ShipPlacement(5, Coord(0, 0), Orientation.HORIZONTAL),
        ShipPlacement(4, Coord(2, 9), Orientation.VERTICAL),
        ShipPlacement(3, Coord(4, 2), Orientation.HORIZONTAL),
        ShipPlacement(3, Coord(5, 2), Orientation.HORIZONTAL),
        ShipPlacement(2, Coord(8, 6), Orientation.VERTICAL),
    ]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def fixed_board() -> BoardState:
    return BoardState.from_placements(make_fixed_placements())


@pytest.fixture
def probability_strategy(seeded_rng: random.Random) -> ProbabilityTargeting:
    return ProbabilityTargeting(seeded_rng)
