"""
Gamification Interface
======================
Public API for other modules (and the persistence layer) to use the
progression engine. Cross-module calls go through here, not the services.
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from flask import current_app

from .logics.game_scoring import GameScoreResult, score_game
from .logics.level_table import LevelCurveConfig, LevelRow
from .logics.wizard_titles import title_for_level
from .schemas import StreakDTO, XpAwardDTO
from .services.progression_service import ProgressionService
from .services.streak_service import SessionStreakStore, StreakService, StreakTracker

_EXTENSION_KEY = 'spellschool_progression'


def get_progression_service() -> ProgressionService:
    """Per-app ProgressionService, built from app config on first use."""
    service = current_app.extensions.get(_EXTENSION_KEY)
    if service is None:
        service = ProgressionService.from_app_config(current_app.config)
        current_app.extensions[_EXTENSION_KEY] = service
    return service


def get_level_table(curve: Optional[LevelCurveConfig] = None) -> List[Dict[str, Any]]:
    """Full level curve with rank titles, for progress bars and the levels page."""
    service = get_progression_service()
    rows = service.cache.get(curve) if curve is not None else service.level_table()
    return [_row_with_title(row) for row in rows]


def _row_with_title(row: LevelRow) -> Dict[str, Any]:
    data = row.to_dict()
    step = title_for_level(row.level)
    data['title'] = step.title
    data['image'] = step.image
    return data


def get_level_summary(total_xp) -> Dict[str, Any]:
    """Level, progress to next level and title for a cumulative XP total."""
    return get_progression_service().level_summary(total_xp)


def award_session_xp(current_xp, raw_points, item_count) -> XpAwardDTO:
    """XP earned by one session and the learner's resulting level."""
    return get_progression_service().award_session_xp(current_xp, raw_points, item_count)


def score_finished_game(game_id: str, **counts) -> GameScoreResult:
    """Raw score for a finished mini-game."""
    return score_game(game_id, **counts)


def get_session_streak_tracker() -> StreakTracker:
    """Streak tracker backed by the current Flask session."""
    return StreakTracker(
        SessionStreakStore(),
        timezone=current_app.config.get('STREAK_TIMEZONE', 'UTC'),
        cutover_hour=current_app.config.get('STREAK_CUTOVER_HOUR', 0),
    )


def get_streak(now: Optional[datetime] = None) -> StreakDTO:
    """Reconciled streak for the current session's learner."""
    state = get_session_streak_tracker().reconcile(now)
    data = state.to_dict()
    return StreakDTO(data['current_streak'], data['last_play_date'])


def record_play(now: Optional[datetime] = None) -> StreakDTO:
    """Record that the current session's learner played today."""
    update = get_session_streak_tracker().record_play(now)
    data = update.state.to_dict()
    return StreakDTO(data['current_streak'], data['last_play_date'], update.transition.value)


def get_history_streak(finished_at: Iterable[datetime], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Streak info computed from session finish times supplied by the persistence layer."""
    return StreakService.get_streak_info(
        finished_at,
        now=now,
        timezone=current_app.config.get('STREAK_TIMEZONE', 'UTC'),
        cutover_hour=current_app.config.get('STREAK_CUTOVER_HOUR', 0),
    )
