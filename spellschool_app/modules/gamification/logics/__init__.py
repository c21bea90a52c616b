"""Pure gamification logic: level curve, XP points, streaks, game scoring, titles."""

from .level_table import (
    LevelCurveConfig,
    LevelProgress,
    LevelRow,
    LevelTableCache,
    generate_level_table,
    level_for_xp,
)
from .points import (
    XP_MULTIPLIER,
    normalize_by_set_size,
    scale_points,
    session_xp,
)
from .streak_logic import (
    StreakState,
    StreakTransition,
    StreakUpdate,
    apply_play,
    calculate_streak_from_dates,
    reconcile,
    resolve_today,
)

__all__ = [
    'LevelCurveConfig',
    'LevelProgress',
    'LevelRow',
    'LevelTableCache',
    'generate_level_table',
    'level_for_xp',
    'XP_MULTIPLIER',
    'normalize_by_set_size',
    'scale_points',
    'session_xp',
    'StreakState',
    'StreakTransition',
    'StreakUpdate',
    'apply_play',
    'calculate_streak_from_dates',
    'reconcile',
    'resolve_today',
]
