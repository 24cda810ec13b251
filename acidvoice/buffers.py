"""Operations on sequences of samples."""

from __future__ import annotations

import statistics
from collections.abc import Sequence


def circular_shift(buffer: Sequence, num_positions: int) -> list:
    """Return the buffer rotated right by ``num_positions`` (left if negative)."""
    items = list(buffer)
    if not items:
        return items
    n = abs(num_positions) % len(items)
    if n == 0:
        return items
    if num_positions < 0:
        return items[n:] + items[:n]
    return items[-n:] + items[:-n]


def clip_buffer(buffer: Sequence, low, high) -> list:
    """Return the buffer with every value restricted to ``low``...``high``."""
    return [low if v < low else high if v > high else v for v in buffer]


def max_abs(buffer: Sequence):
    """Return the largest absolute value in the buffer (0 for an empty buffer)."""
    return max((abs(v) for v in buffer), default=0)


def _require_values(buffer: Sequence) -> list:
    items = list(buffer)
    if not items:
        raise ValueError("buffer is empty")
    return items


def max_index(buffer: Sequence) -> int:
    """Return the index of the first occurrence of the maximum value."""
    items = _require_values(buffer)
    return max(range(len(items)), key=items.__getitem__)


def min_index(buffer: Sequence) -> int:
    """Return the index of the first occurrence of the minimum value."""
    items = _require_values(buffer)
    return min(range(len(items)), key=items.__getitem__)


def mean(buffer: Sequence) -> float:
    """Return the mean (DC component) of the buffer."""
    items = _require_values(buffer)
    return sum(items) / len(items)


def median(buffer: Sequence):
    """Return the median of the buffer."""
    return statistics.median(_require_values(buffer))


def normalize(buffer: Sequence, maximum: float) -> list:
    """Return the buffer scaled so that its largest absolute value equals ``maximum``."""
    items = list(buffer)
    peak = max_abs(items)
    if peak == 0:
        raise ValueError("cannot normalize a buffer that is all zeros")
    factor = maximum / peak
    return [v * factor for v in items]


def remove_mean(buffer: Sequence) -> list:
    """Return the buffer with its mean subtracted."""
    items = list(buffer)
    m = mean(items)
    return [v - m for v in items]