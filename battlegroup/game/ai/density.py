"""Placement density fields.

A density field counts, for every cell, how many axis-aligned placements of a
single ship length cover it without touching an already resolved cell. The
probability field sums those counts across the lengths still afloat. Both are
rebuilt from the shot history on demand and never updated in place.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from battlegroup.game.core.history import ShotHistory


def density_field(length: int, history: ShotHistory) -> np.ndarray:
    """Count valid placements of ``length`` covering each cell."""
    if length <= 0:
        raise ValueError(f"ship length must be positive, got {length}")
    mask = history.shot_mask()
    horizontal = _row_runs(mask, length)
    vertical = _row_runs(mask.T, length).T
    return horizontal + vertical


def probability_field(lengths: Iterable[int], history: ShotHistory) -> np.ndarray:
    """Sum density fields over ``lengths``; repeated lengths count repeatedly."""
    field = np.zeros((history.size, history.size), dtype=np.int64)
    for length in lengths:
        field += density_field(length, history)
    return field


def _row_runs(mask: np.ndarray, length: int) -> np.ndarray:
    rows, cols = mask.shape
    counts = np.zeros((rows, cols), dtype=np.int64)
    if length > cols:
        return counts
    # windows[r, s] covers columns s .. s+length-1 of row r
    windows = sliding_window_view(mask, length, axis=1)
    open_runs = ~windows.any(axis=-1)
    starts = cols - length + 1
    for offset in range(length):
        counts[:, offset : offset + starts] += open_runs
    return counts
