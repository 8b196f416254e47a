"""Targeting strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from battlegroup.game.core.fleet import RemainingFleet
from battlegroup.game.core.history import ShotHistory
from battlegroup.game.core.models import Coord, TargetMode


class TargetingStrategy(ABC):
    """Shot selection contract driven one turn at a time.

    Each ``next_coordinate`` call is answered by exactly one ``report_outcome``
    for the same cell before the next call.
    """

    name: str = ""

    @property
    @abstractmethod
    def mode(self) -> TargetMode:
        """Current hunt/target mode."""

    @property
    @abstractmethod
    def history(self) -> ShotHistory:
        """Shots fired so far in this game."""

    @property
    @abstractmethod
    def remaining_fleet(self) -> RemainingFleet:
        """Ship lengths not yet reported sunk."""

    @abstractmethod
    def next_coordinate(self) -> Coord:
        """Return next coordinate to fire."""

    @abstractmethod
    def report_outcome(self, coord: Coord, hit: bool, sunk_length: int | None = None) -> None:
        """Update strategy state with shot result."""

    @abstractmethod
    def reset_targeting(self) -> None:
        """Drop unresolved hits and queued candidates, returning to hunting."""
