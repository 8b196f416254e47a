"""Opponent board used to resolve shots in local battles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from battlegroup.game.core.models import (
    BOARD_SIZE,
    Coord,
    ShipPlacement,
    ShotOutcome,
    cells_for_placement,
)


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state.

    ``ships`` holds the 1-based ship id per cell (0 is open water) and ``shots``
    marks resolved cells (1 miss, 2 hit).
    """

    size: int = BOARD_SIZE
    ships: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int16)
    )
    shots: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    )
    ship_lengths: dict[int, int] = field(default_factory=dict)
    ship_remaining: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.ships.shape != (self.size, self.size):
            self.ships = np.zeros((self.size, self.size), dtype=np.int16)
        if self.shots.shape != (self.size, self.size):
            self.shots = np.zeros((self.size, self.size), dtype=np.int8)

    @classmethod
    def from_placements(cls, placements: Iterable[ShipPlacement], size: int = BOARD_SIZE) -> BoardState:
        board = cls(size=size)
        for ship_id, placement in enumerate(placements, start=1):
            board.place_ship(ship_id, placement)
        return board

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement is on the board and non-overlapping."""
        for cell in cells_for_placement(placement):
            if not cell.valid(self.size):
                return False
            if self.ships[cell.row, cell.col] != 0:
                return False
        return True

    def place_ship(self, ship_id: int, placement: ShipPlacement) -> None:
        if not self.can_place(placement):
            raise ValueError(f"Invalid placement for ship of length {placement.length}.")
        for cell in cells_for_placement(placement):
            self.ships[cell.row, cell.col] = ship_id
        self.ship_lengths[ship_id] = placement.length
        self.ship_remaining[ship_id] = placement.length

    def was_shot(self, coord: Coord) -> bool:
        return self.shots[coord.row, coord.col] != 0

    def apply_shot(self, coord: Coord) -> ShotOutcome:
        """Resolve a shot into hit / sunk length."""
        if not coord.valid(self.size):
            raise ValueError(f"Shot off the board: {coord}.")
        if self.was_shot(coord):
            raise ValueError(f"Cell already shot: {coord}.")

        ship_id = int(self.ships[coord.row, coord.col])
        if ship_id == 0:
            self.shots[coord.row, coord.col] = 1
            return ShotOutcome(hit=False)

        self.shots[coord.row, coord.col] = 2
        self.ship_remaining[ship_id] -= 1
        if self.ship_remaining[ship_id] == 0:
            return ShotOutcome(hit=True, sunk_length=self.ship_lengths[ship_id])
        return ShotOutcome(hit=True)

    def all_ships_sunk(self) -> bool:
        return all(remaining == 0 for remaining in self.ship_remaining.values())
