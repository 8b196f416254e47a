"""Targeting engine facade consumed by the battle loop."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from battlegroup.game.ai.adjacent_target import AdjacentTargeting
from battlegroup.game.ai.probability_target import ProbabilityTargeting
from battlegroup.game.ai.strategy import TargetingStrategy
from battlegroup.game.core.errors import TargetingError
from battlegroup.game.core.fleet import RemainingFleet
from battlegroup.game.core.history import ShotHistory
from battlegroup.game.core.models import Coord, TargetMode

logger = logging.getLogger(__name__)

StrategyFactory = Callable[[random.Random], TargetingStrategy]

STRATEGIES: dict[str, StrategyFactory] = {
    ProbabilityTargeting.name: ProbabilityTargeting,
    AdjacentTargeting.name: AdjacentTargeting,
}


def create_strategy(name: str, rng: random.Random) -> TargetingStrategy:
    """Build a registered strategy by name."""
    key = name.strip().lower()
    factory = STRATEGIES.get(key)
    if factory is None:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown targeting strategy {name!r}; expected one of: {known}.")
    return factory(rng)


class TargetingEngine:
    """Answers "where next" and ingests "what happened" for one game.

    Protocol slips from the caller (outcome for a cell that was not issued,
    repeated or off-board cells, impossible sunk reports) are logged and
    recovered by returning the strategy to hunting; they never propagate.
    """

    def __init__(
        self,
        strategy: TargetingStrategy | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if strategy is None:
            strategy = ProbabilityTargeting(rng if rng is not None else random.Random())
        self._strategy = strategy
        self._pending: Coord | None = None
        self._recoveries = 0

    @classmethod
    def create(cls, strategy_name: str, rng: random.Random) -> TargetingEngine:
        return cls(create_strategy(strategy_name, rng))

    @property
    def strategy(self) -> TargetingStrategy:
        return self._strategy

    @property
    def mode(self) -> TargetMode:
        return self._strategy.mode

    @property
    def history(self) -> ShotHistory:
        return self._strategy.history

    @property
    def remaining_fleet(self) -> RemainingFleet:
        return self._strategy.remaining_fleet

    @property
    def pending(self) -> Coord | None:
        return self._pending

    @property
    def recoveries(self) -> int:
        """Number of times an inconsistent outcome forced a reset to hunting."""
        return self._recoveries

    def next_coordinate(self) -> Coord:
        if self._pending is not None:
            logger.warning("next_coordinate_repeated pending=%s", self._pending.label())
            return self._pending
        coord = self._strategy.next_coordinate()
        self._pending = coord
        return coord

    def report_outcome(self, coord: Coord, hit: bool, sunk_length: int | None = None) -> None:
        pending, self._pending = self._pending, None
        try:
            self._strategy.report_outcome(coord, hit, sunk_length)
        except TargetingError as exc:
            self._recover(str(exc), coord)
            return
        if pending != coord:
            issued = pending.label() if pending is not None else "nothing"
            self._recover(f"outcome for {coord} but last issued {issued}", coord)

    def _recover(self, reason: str, coord: Coord) -> None:
        self._recoveries += 1
        logger.warning(
            "targeting_recovered reason=%s",
            reason,
            extra={"shot": str(coord), "recoveries": self._recoveries},
        )
        self._strategy.reset_targeting()
