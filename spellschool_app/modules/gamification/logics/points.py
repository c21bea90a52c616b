"""
Points Logic - Pure functions turning raw game scores into XP.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.

Every function here is total: junk input (None, NaN, strings, negatives)
is clamped to a sane value instead of raising, because scores are shown
to the learner right after a game ends.
"""
from __future__ import annotations

import math

# Global scoring settings
XP_MULTIPLIER = 0.25
DEFAULT_TARGET_ITEMS = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def to_number(value) -> float:
    """Coerce ``value`` to a finite float, 0.0 when that is impossible."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def scale_points(raw_points, multiplier: float = XP_MULTIPLIER) -> int:
    """
    Apply the global XP multiplier to a raw score.

    Examples:
        >>> scale_points(100)
        25
        >>> scale_points(-5)
        0
        >>> scale_points(None)
        0
    """
    raw = max(0.0, to_number(raw_points))
    return max(0, round_half_up(raw * to_number(multiplier)))


def set_size_factor(item_count, target_items=DEFAULT_TARGET_ITEMS) -> float:
    """Factor in (0, 1] that keeps big vocabulary sets from outscoring small ones."""
    items = max(1, math.floor(to_number(item_count)))
    target = max(1, math.floor(to_number(target_items)))
    return min(1.0, target / items)


def normalize_by_set_size(raw_points, item_count, target_items=DEFAULT_TARGET_ITEMS) -> int:
    """
    Scale a session score by ``target_items / item_count``, never above 1.

    A 50-word set earns at most ``10/50`` of what a 10-word set earns for the
    same per-word performance; sets smaller than the target are not penalized.

    Examples:
        >>> normalize_by_set_size(100, 50, 10)
        20
        >>> normalize_by_set_size(100, 5, 10)
        100
    """
    raw = max(0.0, to_number(raw_points))
    return max(0, round_half_up(raw * set_size_factor(item_count, target_items)))


def session_xp(raw_points, item_count, multiplier: float = XP_MULTIPLIER,
               target_items=DEFAULT_TARGET_ITEMS) -> int:
    """Normalize by set size, then apply the XP multiplier."""
    return scale_points(normalize_by_set_size(raw_points, item_count, target_items), multiplier)
