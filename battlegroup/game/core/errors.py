"""Targeting exception hierarchy."""

from __future__ import annotations


class TargetingError(RuntimeError):
    """Base error for targeting data inconsistencies."""


class OutcomeInconsistencyError(TargetingError):
    """A reported outcome contradicts the targeting state."""


class DuplicateShotError(TargetingError):
    """A coordinate was recorded twice in one game."""


class UnknownShipLengthError(TargetingError):
    """A sunk length is not among the remaining fleet."""


class BoardExhaustedError(TargetingError):
    """No unshot cell is left to fire at."""
