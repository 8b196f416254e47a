"""Parity hunt with adjacent follow-up targeting."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Sequence

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


class AdjacentTargeting(TargetingStrategy):
    """Checkerboard hunt; every hit queues its open neighbours."""

    name = "adjacent"

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
        self._focused: deque[Coord] = deque()
        self._hunt_cells: list[Coord] = [
            Coord(r, c) for r in range(size) for c in range(size) if (r + c) % 2 == 0
        ]
        self._rng.shuffle(self._hunt_cells)

    @property
    def mode(self) -> TargetMode:
        return TargetMode.TARGETING if self._focused else TargetMode.HUNTING

    @property
    def history(self) -> ShotHistory:
        return self._history

    @property
    def remaining_fleet(self) -> RemainingFleet:
        return self._fleet

    @property
    def focused_targets(self) -> tuple[Coord, ...]:
        return tuple(self._focused)

    def next_coordinate(self) -> Coord:
        while self._focused:
            coord = self._focused.popleft()
            if coord not in self._history:
                return coord

        while self._hunt_cells:
            coord = self._hunt_cells.pop()
            if coord not in self._history:
                return coord

        unshot = self._history.unshot()
        if not unshot:
            raise BoardExhaustedError("every cell has already been fired at")
        return self._rng.choice(unshot)

    def report_outcome(self, coord: Coord, hit: bool, sunk_length: int | None = None) -> None:
        if not coord.valid(self._size):
            raise OutcomeInconsistencyError(f"outcome reported for off-board cell {coord}")
        self._history.append(ShotRecord(coord=coord, hit=hit, sunk_length=sunk_length))
        if coord in self._focused:
            self._focused.remove(coord)
        if not hit:
            return
        if sunk_length is not None:
            self._fleet.sink(sunk_length)

        for target in coord.adjacent(self._size):
            if target in self._history or target in self._focused:
                continue
            if target in self._hunt_cells:
                self._hunt_cells.remove(target)
            self._focused.append(target)

    def reset_targeting(self) -> None:
        self._focused.clear()
