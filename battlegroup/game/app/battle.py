"""Local battle loop: drive a targeting engine against a simulated board."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from battlegroup.game.ai.engine import TargetingEngine
from battlegroup.game.core.board import BoardState
from battlegroup.game.core.fleet import random_fleet
from battlegroup.game.core.models import Coord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleReport:
    """Outcome of one battle."""

    won: bool
    shots: list[Coord] = field(default_factory=list)
    hits: int = 0
    sunk: list[int] = field(default_factory=list)
    recoveries: int = 0

    @property
    def shot_count(self) -> int:
        return len(self.shots)

    @property
    def misses(self) -> int:
        return self.shot_count - self.hits

    @property
    def hit_ratio(self) -> float:
        return self.hits / self.shot_count if self.shot_count else 0.0


@dataclass(frozen=True, slots=True)
class SeriesSummary:
    """Aggregate over several battles."""

    games: int
    wins: int
    average_shots: float
    best: int
    worst: int


def run_battle(engine: TargetingEngine, board: BoardState, max_turns: int = 100) -> BattleReport:
    """Fire until the board's fleet is sunk or the turn budget runs out."""
    report = BattleReport(won=False)
    for _ in range(max_turns):
        coord = engine.next_coordinate()
        outcome = board.apply_shot(coord)
        engine.report_outcome(coord, outcome.hit, outcome.sunk_length)

        report.shots.append(coord)
        if outcome.hit:
            report.hits += 1
        if outcome.sunk_length is not None:
            report.sunk.append(outcome.sunk_length)
        if board.all_ships_sunk():
            report.won = True
            break

    report.recoveries = engine.recoveries
    if report.won:
        logger.info("battle_won shots=%d hit_ratio=%.2f", report.shot_count, report.hit_ratio)
    else:
        logger.info("battle_lost shots=%d sunk=%s", report.shot_count, report.sunk)
    return report


def run_series(
    games: int,
    strategy: str = "probability",
    seed: int | None = None,
    max_turns: int = 100,
) -> SeriesSummary:
    """Play ``games`` battles on fresh random fleets and summarise shots per win."""
    if games <= 0:
        raise ValueError("games must be positive")
    rng = random.Random(seed)
    shot_counts: list[int] = []
    wins = 0
    for index in range(games):
        board = BoardState.from_placements(random_fleet(rng))
        engine = TargetingEngine.create(strategy, random.Random(rng.randrange(2**32)))
        report = run_battle(engine, board, max_turns=max_turns)
        logger.debug("series_game index=%d won=%s shots=%d", index, report.won, report.shot_count)
        if report.won:
            wins += 1
            shot_counts.append(report.shot_count)

    if not shot_counts:
        return SeriesSummary(games=games, wins=0, average_shots=0.0, best=0, worst=0)
    return SeriesSummary(
        games=games,
        wins=wins,
        average_shots=sum(shot_counts) / len(shot_counts),
        best=min(shot_counts),
        worst=max(shot_counts),
    )
