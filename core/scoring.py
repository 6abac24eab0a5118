"""
Scoring helpers for the typing drill.

All functions are pure so the live timer and the final result can be
recomputed from timestamps at any moment, independent of tick cadence.
"""

from __future__ import annotations

import math
from typing import Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def elapsed_seconds(start_time: Optional[float], now: float) -> float:
    """
    Seconds since start_time.

    Returns 0.0 when no round has started.
    """
    if start_time is None:
        return 0.0
    return max(0.0, now - start_time)


def words_per_minute(correct_count: int, elapsed: float) -> int:
    """
    Correctly typed words per elapsed minute.

    Args:
        correct_count: Words fully typed correctly
        elapsed: Elapsed time in seconds

    Returns:
        Rounded WPM, 0 when no time has elapsed
    """
    if elapsed <= 0:
        return 0
    return round_half_up(correct_count / (elapsed / 60))


def accuracy_percent(correct_count: int, round_size: int) -> int:
    if round_size <= 0:
        return 0
    return round_half_up(correct_count / round_size * 100)
