"""Hunt/target state machine used to follow up hits."""

from __future__ import annotations

from collections import deque

import numpy as np

from battlegroup.game.core.errors import OutcomeInconsistencyError
from battlegroup.game.core.history import ShotHistory
from battlegroup.game.core.models import (
    BOARD_SIZE,
    NEIGHBOUR_ORDER,
    Coord,
    Direction,
    Orientation,
    TargetMode,
)


class HuntTargetMachine:
    """Tracks the unresolved hit cluster and the ordered candidate queue.

    The machine is HUNTING exactly when no unresolved hit exists, and the queue
    is only ever populated while TARGETING.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._size = size
        self._hits: list[Coord] = []
        self._queue: deque[Coord] = deque()
        self._cluster_field: np.ndarray | None = None

    @property
    def mode(self) -> TargetMode:
        return TargetMode.TARGETING if self._hits else TargetMode.HUNTING

    @property
    def hits(self) -> tuple[Coord, ...]:
        return tuple(self._hits)

    @property
    def candidate_queue(self) -> tuple[Coord, ...]:
        return tuple(self._queue)

    @property
    def cluster_field(self) -> np.ndarray | None:
        """Probability field captured when the current cluster's first hit landed."""
        return self._cluster_field

    def pop_candidate(self) -> Coord | None:
        if not self._queue:
            return None
        return self._queue.popleft()

    def discard(self, coord: Coord) -> None:
        """Forget a queued candidate that has been fired at."""
        if coord in self._queue:
            self._queue.remove(coord)

    def reset(self) -> None:
        self._hits.clear()
        self._queue.clear()
        self._cluster_field = None

    def record_hit(
        self,
        coord: Coord,
        history: ShotHistory,
        sunk_length: int | None,
        field: np.ndarray,
    ) -> None:
        """Fold a hit into the cluster; ``history`` must already contain ``coord``."""
        if not self._hits:
            self._cluster_field = field
        self._hits.append(coord)

        if sunk_length is not None:
            self._resolve_sunk(coord, sunk_length)
            return

        axis = self._established_axis()
        if axis is None:
            self._enqueue_adjacent(coord, history)
        else:
            self._extend_line(axis, history)

    def _resolve_sunk(self, coord: Coord, length: int) -> None:
        run = self._find_sunk_run(coord, length)
        if run is None:
            raise OutcomeInconsistencyError(
                f"no contiguous run of {length} hits through {coord.label()}"
            )
        sunk = set(run)
        self._hits = [hit for hit in self._hits if hit not in sunk]
        if not self._hits:
            self.reset()

    def _find_sunk_run(self, coord: Coord, length: int) -> list[Coord] | None:
        hits = set(self._hits)
        # The sinking shot is usually an end of the ship.
        for direction in NEIGHBOUR_ORDER:
            run = [coord.step(direction, i) for i in range(length)]
            if hits.issuperset(run):
                return run
        for direction in (Direction.DOWN, Direction.RIGHT):
            for back in range(1, length - 1):
                start = coord.step(direction.opposite, back)
                run = [start.step(direction, i) for i in range(length)]
                if hits.issuperset(run):
                    return run
        return None

    def _established_axis(self) -> Orientation | None:
        if len(self._hits) < 2:
            return None
        if len({hit.col for hit in self._hits}) == 1:
            return Orientation.VERTICAL
        if len({hit.row for hit in self._hits}) == 1:
            return Orientation.HORIZONTAL
        return None

    def _extend_line(self, axis: Orientation, history: ShotHistory) -> None:
        if axis is Orientation.VERTICAL:
            ordered = sorted(self._hits, key=lambda hit: hit.row)
            ends = [ordered[0].up, ordered[-1].down]
            line = ordered[0].col

            def on_line(cell: Coord) -> bool:
                return cell.col == line
        else:
            ordered = sorted(self._hits, key=lambda hit: hit.col)
            ends = [ordered[0].left, ordered[-1].right]
            line = ordered[0].row

            def on_line(cell: Coord) -> bool:
                return cell.row == line

        candidates = [cell for cell in ends if cell.valid(self._size) and cell not in history]
        rest = [cell for cell in self._queue if cell not in candidates]
        self._queue = deque(
            [
                *candidates,
                *(cell for cell in rest if on_line(cell)),
                *(cell for cell in rest if not on_line(cell)),
            ]
        )

    def _enqueue_adjacent(self, coord: Coord, history: ShotHistory) -> None:
        fresh = [
            cell
            for cell in coord.adjacent(self._size)
            if cell not in history and cell not in self._queue
        ]
        field = self._cluster_field
        if field is not None:
            fresh.sort(key=lambda cell: int(field[cell.row, cell.col]), reverse=True)
        self._queue.extend(fresh)
