import random

import pytest

from battlegroup.game.ai.adjacent_target import AdjacentTargeting
from battlegroup.game.core.board import BoardState
from battlegroup.game.core.fleet import random_fleet
from battlegroup.game.core.models import Coord, TargetMode


def test_hunting_walks_parity_cells() -> None:
    strategy = AdjacentTargeting(random.Random(4))
    for _ in range(10):
        shot = strategy.next_coordinate()
        assert (shot.row + shot.col) % 2 == 0
        strategy.report_outcome(shot, False)
    assert strategy.mode is TargetMode.HUNTING


def test_hit_focuses_on_open_neighbours() -> None:
    strategy = AdjacentTargeting(random.Random(5))
    strategy.report_outcome(Coord(4, 5), False)
    strategy.report_outcome(Coord(4, 4), True)
    assert strategy.mode is TargetMode.TARGETING
    assert strategy.focused_targets == (Coord(3, 4), Coord(5, 4), Coord(4, 3))
    assert strategy.next_coordinate() == Coord(3, 4)


def test_reset_targeting_returns_to_hunting() -> None:
    strategy = AdjacentTargeting(random.Random(6))
    strategy.report_outcome(Coord(2, 2), True)
    strategy.reset_targeting()
    assert strategy.mode is TargetMode.HUNTING
    assert strategy.focused_targets == ()


@pytest.mark.parametrize("seed", range(6))
def test_full_game_never_repeats_a_shot(seed: int) -> None:
    board = BoardState.from_placements(random_fleet(random.Random(seed)))
    strategy = AdjacentTargeting(random.Random(seed))
    fired: set[Coord] = set()
    while not board.all_ships_sunk():
        coord = strategy.next_coordinate()
        assert coord not in fired
        fired.add(coord)
        outcome = board.apply_shot(coord)
        strategy.report_outcome(coord, outcome.hit, outcome.sunk_length)
    assert strategy.remaining_fleet.is_empty()
    assert len(fired) <= 100
