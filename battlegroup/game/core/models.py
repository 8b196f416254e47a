"""Core domain models shared by targeting and fleet logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
COLUMN_HEADERS = "ABCDEFGHIJ"

DEFAULT_FLEET_LENGTHS: tuple[int, ...] = (5, 4, 3, 3, 2)


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class Direction(StrEnum):
    """Grid navigation direction."""

    UP = "UP"
    DOWN = "DOWN"
    RIGHT = "RIGHT"
    LEFT = "LEFT"

    @property
    def delta(self) -> tuple[int, int]:
        return DIRECTION_DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
}

# Neighbour order used wherever ties must be broken deterministically.
NEIGHBOUR_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.RIGHT,
    Direction.LEFT,
)


class TargetMode(StrEnum):
    """Hunt/target state machine mode."""

    HUNTING = "HUNTING"
    TARGETING = "TARGETING"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate. Neighbours may lie off the grid; check with ``valid``."""

    row: int
    col: int

    def step(self, direction: Direction, distance: int = 1) -> Coord:
        dr, dc = direction.delta
        return Coord(self.row + dr * distance, self.col + dc * distance)

    @property
    def up(self) -> Coord:
        return self.step(Direction.UP)

    @property
    def down(self) -> Coord:
        return self.step(Direction.DOWN)

    @property
    def right(self) -> Coord:
        return self.step(Direction.RIGHT)

    @property
    def left(self) -> Coord:
        return self.step(Direction.LEFT)

    def valid(self, size: int = BOARD_SIZE) -> bool:
        """Return whether the coordinate lies on the board."""
        return 0 <= self.row < size and 0 <= self.col < size

    def adjacent(self, size: int = BOARD_SIZE) -> list[Coord]:
        """Return on-board orthogonal neighbours in up/down/right/left order."""
        neighbours = (self.step(direction) for direction in NEIGHBOUR_ORDER)
        return [cell for cell in neighbours if cell.valid(size)]

    def label(self) -> str:
        """Render as column letter plus 1-based row, e.g. ``A1``."""
        if not self.valid(len(COLUMN_HEADERS)):
            return f"({self.row}, {self.col})"
        return f"{COLUMN_HEADERS[self.col]}{self.row + 1}"

    def __str__(self) -> str:
        return self.label()


@dataclass(frozen=True, slots=True)
class ShotRecord:
    """One fired shot and what the opponent reported for it."""

    coord: Coord
    hit: bool
    sunk_length: int | None = None


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Opponent answer for a single shot."""

    hit: bool
    sunk_length: int | None = None

    @property
    def sunk(self) -> bool:
        return self.sunk_length is not None


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship."""

    length: int
    bow: Coord
    orientation: Orientation


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    direction = Direction.RIGHT if placement.orientation is Orientation.HORIZONTAL else Direction.DOWN
    return [placement.bow.step(direction, i) for i in range(placement.length)]
