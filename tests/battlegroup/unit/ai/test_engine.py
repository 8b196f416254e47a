import logging
import random

import pytest

from battlegroup.game.ai.adjacent_target import AdjacentTargeting
from battlegroup.game.ai.engine import TargetingEngine, create_strategy
from battlegroup.game.ai.probability_target import ProbabilityTargeting
from battlegroup.game.ai.strategy import TargetingStrategy
from battlegroup.game.core.models import Coord, TargetMode


def test_default_engine_uses_probability_strategy() -> None:
    engine = TargetingEngine(rng=random.Random(1))
    assert isinstance(engine.strategy, ProbabilityTargeting)
    assert isinstance(engine.strategy, TargetingStrategy)
    assert engine.mode is TargetMode.HUNTING


def test_create_strategy_by_name() -> None:
    assert isinstance(create_strategy("Adjacent", random.Random(1)), AdjacentTargeting)
    assert isinstance(create_strategy(" probability ", random.Random(1)), ProbabilityTargeting)
    with pytest.raises(ValueError):
        create_strategy("psychic", random.Random(1))


def test_next_and_report_round_trip() -> None:
    engine = TargetingEngine.create("probability", random.Random(2))
    coord = engine.next_coordinate()
    assert engine.pending == coord
    engine.report_outcome(coord, True)
    assert engine.pending is None
    assert engine.mode is TargetMode.TARGETING
    assert engine.recoveries == 0
    follow_up = engine.next_coordinate()
    assert follow_up in coord.adjacent()


def test_repeated_next_coordinate_returns_pending(caplog: pytest.LogCaptureFixture) -> None:
    engine = TargetingEngine(rng=random.Random(3))
    first = engine.next_coordinate()
    with caplog.at_level(logging.WARNING, logger="battlegroup.game.ai.engine"):
        assert engine.next_coordinate() == first
    assert any("next_coordinate_repeated" in r.getMessage() for r in caplog.records)


def test_outcome_for_unissued_cell_resets_to_hunting(caplog: pytest.LogCaptureFixture) -> None:
    engine = TargetingEngine(rng=random.Random(4))
    issued = engine.next_coordinate()
    other = Coord(0, 0) if issued != Coord(0, 0) else Coord(9, 9)
    with caplog.at_level(logging.WARNING, logger="battlegroup.game.ai.engine"):
        engine.report_outcome(other, True)
    assert engine.mode is TargetMode.HUNTING
    assert engine.strategy.hits == ()
    assert engine.strategy.candidate_queue == ()
    assert other in engine.history
    assert engine.recoveries == 1
    assert any("targeting_recovered" in r.getMessage() for r in caplog.records)


def test_impossible_sunk_report_is_recovered() -> None:
    engine = TargetingEngine(rng=random.Random(5))
    coord = engine.next_coordinate()
    engine.report_outcome(coord, True, 3)
    assert engine.mode is TargetMode.HUNTING
    assert engine.recoveries == 1
    assert engine.remaining_fleet.lengths == (5, 4, 3, 2)
    assert len(engine.history) == 1


def test_duplicate_and_off_board_reports_never_raise() -> None:
    engine = TargetingEngine(rng=random.Random(6))
    coord = engine.next_coordinate()
    engine.report_outcome(coord, False)
    engine.report_outcome(coord, True)
    engine.report_outcome(Coord(10, 10), False)
    engine.report_outcome(Coord(1, 1), False, 4)
    assert len(engine.history) == 2
    assert Coord(1, 1) in engine.history
    assert engine.recoveries == 3
    assert engine.mode is TargetMode.HUNTING


def test_engine_never_returns_a_coordinate_twice() -> None:
    engine = TargetingEngine.create("probability", random.Random(7))
    seen: set[Coord] = set()
    for _ in range(100):
        coord = engine.next_coordinate()
        assert coord not in seen
        seen.add(coord)
        engine.report_outcome(coord, False)
    assert len(seen) == 100


def test_miss_reported_as_sinking_is_recorded_and_never_reissued() -> None:
    engine = TargetingEngine.create("probability", random.Random(11))
    first = engine.next_coordinate()
    engine.report_outcome(first, False, 2)
    assert len(engine.history) == 1
    assert first in engine.history
    assert engine.recoveries == 1
    assert engine.remaining_fleet.lengths == (5, 4, 3, 3, 2)

    issued = [first]
    for _ in range(99):
        coord = engine.next_coordinate()
        issued.append(coord)
        engine.report_outcome(coord, False)
    assert issued.count(first) == 1
    assert len(set(issued)) == 100
