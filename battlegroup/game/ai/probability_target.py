"""Probability-density targeting with hunt/target follow-up."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

import numpy as np

from battlegroup.game.ai.density import probability_field
from battlegroup.game.ai.hunt_target import HuntTargetMachine
from battlegroup.game.ai.strategy import TargetingStrategy
from battlegroup.game.core.errors import BoardExhaustedError, OutcomeInconsistencyError
from battlegroup.game.core.fleet import RemainingFleet
from battlegroup.game.core.history import ShotHistory
from battlegroup.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET_LENGTHS,
    Coord,
    ShotRecord,
    TargetMode,
)

logger = logging.getLogger(__name__)


class ProbabilityTargeting(TargetingStrategy):
    """Fire at the densest cell while hunting, drain the candidate queue while targeting."""

    name = "probability"

    def __init__(
        self,
        rng: random.Random,
        size: int = BOARD_SIZE,
        fleet_lengths: Sequence[int] = DEFAULT_FLEET_LENGTHS,
    ) -> None:
        self._rng = rng
        self._size = size
        self._history = ShotHistory(size)
        self._fleet = RemainingFleet(fleet_lengths)
        self._machine = HuntTargetMachine(size)
        self._field: np.ndarray | None = None
        self._sunk: list[int] = []

    @property
    def mode(self) -> TargetMode:
        return self._machine.mode

    @property
    def history(self) -> ShotHistory:
        return self._history

    @property
    def remaining_fleet(self) -> RemainingFleet:
        return self._fleet

    @property
    def hits(self) -> tuple[Coord, ...]:
        return self._machine.hits

    @property
    def candidate_queue(self) -> tuple[Coord, ...]:
        return self._machine.candidate_queue

    @property
    def field(self) -> np.ndarray | None:
        """Probability field from the most recent hunting decision."""
        return self._field

    def next_coordinate(self) -> Coord:
        if self._machine.mode is TargetMode.TARGETING:
            candidate = self._machine.pop_candidate()
            if candidate is not None:
                return candidate
            logger.warning(
                "targeting_queue_empty hits=%s",
                [hit.label() for hit in self._machine.hits],
            )
        return self._hunt()

    def report_outcome(self, coord: Coord, hit: bool, sunk_length: int | None = None) -> None:
        if not coord.valid(self._size):
            raise OutcomeInconsistencyError(f"outcome reported for off-board cell {coord}")
        if not hit and sunk_length is not None:
            # The cell was still fired at; keep it out of later hunts.
            self._history.append(ShotRecord(coord=coord, hit=False))
            self._machine.discard(coord)
            raise OutcomeInconsistencyError(f"miss at {coord.label()} reported as sinking {sunk_length}")

        self._history.append(ShotRecord(coord=coord, hit=hit, sunk_length=sunk_length))
        self._machine.discard(coord)
        if hit:
            if sunk_length is not None:
                self._fleet.sink(sunk_length)
                self._sunk.append(sunk_length)
            self._machine.record_hit(coord, self._history, sunk_length, self._cluster_field())
        self._log_report(coord, hit, sunk_length)

    def reset_targeting(self) -> None:
        self._machine.reset()

    def _hunt(self) -> Coord:
        self._field = probability_field(self._fleet, self._history)
        best = int(self._field.max())
        if best > 0:
            candidates = [Coord(int(row), int(col)) for row, col in np.argwhere(self._field == best)]
        else:
            candidates = self._history.unshot()
            if not candidates:
                raise BoardExhaustedError("every cell has already been fired at")
            logger.warning(
                "probability_field_empty remaining=%s unshot=%d",
                list(self._fleet),
                len(candidates),
            )
        if len(candidates) == 1:
            return candidates[0]
        return self._rng.choice(candidates)

    def _cluster_field(self) -> np.ndarray:
        if self._field is None:
            self._field = probability_field(self._fleet, self._history)
        return self._field

    def _log_report(self, coord: Coord, hit: bool, sunk_length: int | None) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        shots = len(self._history)
        hit_count = self._history.hit_count
        logger.debug(
            "targeting_report round=%d shot=%s hit=%s sunk=%s mode=%s",
            shots,
            coord.label(),
            hit,
            sunk_length,
            self.mode.value,
            extra={
                "remaining_fleet": list(self._fleet),
                "sunk": list(self._sunk),
                "shots_unique": len(set(self._history.coords())) == shots,
                "hits": [item.label() for item in self._machine.hits],
                "targets": [item.label() for item in self._machine.candidate_queue],
                "hit_count": hit_count,
                "miss_count": shots - hit_count,
                "hit_ratio": round(hit_count / shots, 3),
            },
        )
