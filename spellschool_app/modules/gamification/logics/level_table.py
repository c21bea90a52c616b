"""
Level Table - Pure functions for the XP level curve.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.

The curve is geometric: the XP needed to clear level L is
``B * r ** (L - 1)`` where ``B`` is chosen so that clearing every level
costs exactly ``total_xp``. Rounding error is absorbed by the last level.
"""

from __future__ import annotations

import math
import threading
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from spellschool_app.core.exceptions import InvalidConfig
from spellschool_app.core.logging_config import get_logger
from .points import round_half_up

logger = get_logger('spellschool.gamification.level_table')

DEFAULT_TOTAL_XP = 1_000_000
DEFAULT_MAX_LEVEL = 100
DEFAULT_GROWTH_RATE = 1.06


@dataclass(frozen=True)
class LevelCurveConfig:
    """Immutable input to curve generation. Hashable, so it doubles as a cache key."""
    total_xp: float = DEFAULT_TOTAL_XP
    max_level: int = DEFAULT_MAX_LEVEL
    growth_rate: float = DEFAULT_GROWTH_RATE

    def validate(self) -> None:
        """Raise InvalidConfig unless the curve can be generated."""
        errors = {}
        if isinstance(self.total_xp, bool) or not _is_number(self.total_xp) \
                or not math.isfinite(self.total_xp) or self.total_xp <= 0:
            errors['total_xp'] = 'must be a positive finite number'
        if isinstance(self.max_level, bool) or not _is_number(self.max_level) \
                or not math.isfinite(self.max_level) or self.max_level != int(self.max_level) \
                or self.max_level <= 0:
            errors['max_level'] = 'must be a positive integer'
        if isinstance(self.growth_rate, bool) or not _is_number(self.growth_rate) \
                or not math.isfinite(self.growth_rate) or self.growth_rate <= 1:
            errors['growth_rate'] = 'must be a finite number greater than 1'
        if errors:
            raise InvalidConfig(
                f"Invalid level curve configuration: {', '.join(sorted(errors))}",
                errors=errors
            )


@dataclass(frozen=True)
class LevelRow:
    """One level of the curve: XP to clear it and XP accumulated once cleared."""
    level: int
    delta_xp: int
    cumulative_xp: int

    def to_dict(self) -> dict:
        return {
            'level': self.level,
            'delta_xp': self.delta_xp,
            'cumulative_xp': self.cumulative_xp,
        }


@dataclass(frozen=True)
class LevelProgress:
    """Where a given XP total sits on the curve."""
    level: int
    progress_to_next: float
    next_delta: int
    xp_to_next: int

    def to_dict(self) -> dict:
        return {
            'level': self.level,
            'progress_to_next': self.progress_to_next,
            'next_delta': self.next_delta,
            'xp_to_next': self.xp_to_next,
        }


def _is_number(value) -> bool:
    return isinstance(value, (int, float))


def _base_coefficient(total_xp: float, max_level: int, growth_rate: float) -> float:
    try:
        denom = math.pow(growth_rate, max_level) - 1
    except OverflowError:
        raise InvalidConfig(
            'growth_rate is too large for max_level',
            errors={'growth_rate': 'overflows at max_level'}
        )
    if denom == 0:
        return total_xp / max_level
    return total_xp * (growth_rate - 1) / denom


def generate_level_table(config: LevelCurveConfig = None) -> Tuple[LevelRow, ...]:
    """
    Build the full level curve for ``config``.

    Args:
        config: Curve parameters (defaults: 1,000,000 XP over 100 levels, r=1.06).

    Returns:
        Tuple of ``max_level`` LevelRow objects, index 0 is level 1.

    Raises:
        InvalidConfig: total_xp <= 0, max_level <= 0 or growth_rate <= 1.

    Examples:
        >>> rows = generate_level_table(LevelCurveConfig(1_000_000, 100, 1.06))
        >>> rows[-1].cumulative_xp
        1000000
    """
    if config is None:
        config = LevelCurveConfig()
    config.validate()

    max_level = int(config.max_level)
    growth_rate = float(config.growth_rate)
    target = round_half_up(config.total_xp)
    base = _base_coefficient(float(config.total_xp), max_level, growth_rate)

    deltas = []
    for level in range(1, max_level + 1):
        delta = round_half_up(base * math.pow(growth_rate, level - 1))
        deltas.append(max(1, delta))

    # The last level absorbs rounding drift so the curve ends exactly on target
    drift = target - sum(deltas)
    if drift:
        adjusted = deltas[-1] + drift
        if adjusted < 1:
            logger.warning(
                "Level curve %s cannot hit total_xp exactly: last delta clamped to 1, "
                "total is off by %d", config, 1 - adjusted
            )
            adjusted = 1
        deltas[-1] = adjusted

    rows = []
    cumulative = 0
    for level, delta in enumerate(deltas, start=1):
        cumulative += delta
        rows.append(LevelRow(level=level, delta_xp=delta, cumulative_xp=cumulative))
    return tuple(rows)


def level_for_xp(xp, rows: Sequence[LevelRow]) -> LevelProgress:
    """
    Locate ``xp`` on a generated curve.

    Level L starts at the cumulative XP of level L-1 (0 for level 1). At the
    top level progress is reported as complete.
    """
    if not rows:
        raise InvalidConfig('Cannot look up a level on an empty curve')

    try:
        xp = float(xp)
    except (TypeError, ValueError):
        xp = 0.0
    if math.isnan(xp) or xp <= 0:
        first = rows[0]
        return LevelProgress(level=1, progress_to_next=0.0,
                             next_delta=first.delta_xp, xp_to_next=first.delta_xp)

    starts = [0] + [row.cumulative_xp for row in rows[:-1]]
    level = max(1, bisect_right(starts, xp))
    max_level = rows[-1].level
    if level >= max_level:
        return LevelProgress(level=max_level, progress_to_next=1.0, next_delta=0, xp_to_next=0)

    row = rows[level - 1]
    gained = xp - starts[level - 1]
    progress = max(0.0, min(1.0, gained / row.delta_xp))
    xp_to_next = max(0, int(math.ceil(row.cumulative_xp - xp)))
    return LevelProgress(level=level, progress_to_next=progress,
                         next_delta=row.delta_xp, xp_to_next=xp_to_next)


class LevelTableCache:
    """
    Memoizes generated curves per LevelCurveConfig.

    Owned by whoever builds the progression engine; cached tuples are
    immutable and can be shared read-only between threads.
    """

    def __init__(self):
        self._tables: Dict[LevelCurveConfig, Tuple[LevelRow, ...]] = {}
        self._lock = threading.Lock()

    def get(self, config: LevelCurveConfig) -> Tuple[LevelRow, ...]:
        table = self._tables.get(config)
        if table is not None:
            return table
        logger.debug("Level table cache miss for %s", config)
        table = generate_level_table(config)
        with self._lock:
            return self._tables.setdefault(config, table)

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()

    def __contains__(self, config) -> bool:
        return config in self._tables

    def __len__(self) -> int:
        return len(self._tables)
