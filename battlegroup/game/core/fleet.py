"""Fleet bookkeeping and random fleet generation."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

from battlegroup.game.core.errors import UnknownShipLengthError
from battlegroup.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET_LENGTHS,
    Coord,
    Orientation,
    ShipPlacement,
    cells_for_placement,
)

_PLACEMENT_ATTEMPTS = 10_000


class RemainingFleet:
    """Multiset of ship lengths that are still afloat."""

    def __init__(self, lengths: Iterable[int] = DEFAULT_FLEET_LENGTHS) -> None:
        self._lengths: list[int] = sorted(lengths, reverse=True)

    def sink(self, length: int) -> None:
        """Remove exactly one ship of ``length``."""
        if length not in self._lengths:
            raise UnknownShipLengthError(f"no remaining ship of length {length}")
        self._lengths.remove(length)

    def __contains__(self, length: object) -> bool:
        return length in self._lengths

    def __iter__(self) -> Iterator[int]:
        return iter(self._lengths)

    def __len__(self) -> int:
        return len(self._lengths)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RemainingFleet):
            return Counter(self._lengths) == Counter(other._lengths)
        return NotImplemented

    def __repr__(self) -> str:
        return f"RemainingFleet({self._lengths!r})"

    @property
    def lengths(self) -> tuple[int, ...]:
        return tuple(self._lengths)

    def is_empty(self) -> bool:
        return not self._lengths


def random_fleet(
    rng: random.Random,
    lengths: Sequence[int] = DEFAULT_FLEET_LENGTHS,
    size: int = BOARD_SIZE,
) -> list[ShipPlacement]:
    """Place every ship at a random start and orientation, retrying on overlap."""
    occupied: set[Coord] = set()
    placements: list[ShipPlacement] = []

    for length in lengths:
        for _ in range(_PLACEMENT_ATTEMPTS):
            placement = _random_placement(rng, length, size)
            cells = cells_for_placement(placement)
            if occupied.isdisjoint(cells):
                occupied.update(cells)
                placements.append(placement)
                break
        else:
            raise RuntimeError(f"Failed to place ship of length {length}.")

    return placements


def _random_placement(rng: random.Random, length: int, size: int) -> ShipPlacement:
    orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
    if orientation is Orientation.VERTICAL:
        bow = Coord(rng.randrange(size - length + 1), rng.randrange(size))
    else:
        bow = Coord(rng.randrange(size), rng.randrange(size - length + 1))
    return ShipPlacement(length=length, bow=bow, orientation=orientation)
