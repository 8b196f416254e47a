"""Append-only record of shots fired during one game."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from battlegroup.game.core.errors import DuplicateShotError
from battlegroup.game.core.models import BOARD_SIZE, Coord, ShotRecord


class ShotHistory:
    """Ordered shot log with constant-time membership checks."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._size = size
        self._records: list[ShotRecord] = []
        self._shot: set[Coord] = set()

    def append(self, record: ShotRecord) -> None:
        if record.coord in self._shot:
            raise DuplicateShotError(f"coordinate already shot: {record.coord.label()}")
        self._records.append(record)
        self._shot.add(record.coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._shot

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ShotRecord]:
        return iter(self._records)

    @property
    def size(self) -> int:
        return self._size

    @property
    def last(self) -> ShotRecord | None:
        return self._records[-1] if self._records else None

    @property
    def hit_count(self) -> int:
        return sum(1 for record in self._records if record.hit)

    @property
    def miss_count(self) -> int:
        return len(self._records) - self.hit_count

    def coords(self) -> list[Coord]:
        return [record.coord for record in self._records]

    def unshot(self) -> list[Coord]:
        """Return every on-board cell not yet fired at, row-major."""
        return [
            Coord(row, col)
            for row in range(self._size)
            for col in range(self._size)
            if Coord(row, col) not in self._shot
        ]

    def shot_mask(self) -> np.ndarray:
        """Boolean matrix with True on every resolved cell, hit or miss."""
        mask = np.zeros((self._size, self._size), dtype=bool)
        for coord in self._shot:
            mask[coord.row, coord.col] = True
        return mask
