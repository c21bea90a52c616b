# File: spellschool_app/modules/gamification/services/streak_service.py
"""
Streak Service
==============
Tracks consecutive days of play against an injected key-value store.

The store only needs ``get(key)`` and ``set(key, value)``, so the same
transition rules run against the Flask session, a profile record, or a
plain dict in tests. Writes are read-modify-write with no locking: two
devices recording a play from the same stale state both write the same
value and the later write wins.
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any, Callable, Dict, Iterable, Optional, Protocol, Union

from spellschool_app.core.logging_config import get_logger
from spellschool_app.core.signals import streak_updated
from ..logics.streak_logic import (
    StreakState,
    StreakUpdate,
    apply_play,
    calculate_streak_from_dates,
    longest_streak,
    normalize_to_date,
    parse_streak_count,
    reconcile,
    resolve_today,
)

logger = get_logger('spellschool.gamification.streak')

STREAK_KEY = 'currentStreak'
LAST_PLAY_KEY = 'lastPlayDate'


class StreakStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class InMemoryStreakStore:
    """Dict-backed store for scripts and tests."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class SessionStreakStore:
    """Stores streak keys in the Flask cookie session, like browser storage on the client."""

    def __init__(self, session=None):
        if session is None:
            from flask import session as flask_session
            session = flask_session
        self._session = session

    def get(self, key: str) -> Any:
        return self._session.get(key)

    def set(self, key: str, value: Any) -> None:
        self._session[key] = value


class StreakTracker:
    """
    Applies streak transitions to one learner's stored state.

    Args:
        store: Object with ``get``/``set``.
        clock: Callable returning the current aware datetime (default: UTC now).
        timezone: Reference timezone that defines calendar days.
        cutover_hour: Hours after midnight still counted as the previous day.
        key_prefix: Prepended to the store keys, for stores shared by many learners.
    """

    def __init__(
        self,
        store: StreakStore,
        clock: Optional[Callable[[], datetime]] = None,
        timezone: Union[str, tzinfo] = 'UTC',
        cutover_hour: int = 0,
        key_prefix: str = ''
    ):
        self.store = store
        self.clock = clock
        self.timezone = timezone
        self.cutover_hour = cutover_hour
        self.streak_key = f"{key_prefix}{STREAK_KEY}"
        self.last_play_key = f"{key_prefix}{LAST_PLAY_KEY}"

    def today(self, now: Optional[datetime] = None) -> date:
        if now is None and self.clock is not None:
            now = self.clock()
        return resolve_today(now, self.timezone, self.cutover_hour)

    def load(self) -> StreakState:
        """Read the stored state; unreadable data degrades to no prior play."""
        try:
            raw_streak = self.store.get(self.streak_key)
            raw_last = self.store.get(self.last_play_key)
        except Exception as e:
            logger.warning(f"Could not read streak state, starting fresh: {e}")
            return StreakState()

        last_play = normalize_to_date(raw_last)
        if raw_last not in (None, '') and last_play is None:
            logger.warning(f"Ignoring malformed last play date {raw_last!r}")
        if last_play is None:
            return StreakState(0, None)
        return StreakState(parse_streak_count(raw_streak), last_play)

    def save(self, state: StreakState) -> bool:
        """Write ``state`` to the store; a failed write is logged and reported as False."""
        try:
            self.store.set(self.streak_key, str(state.current_streak))
            self.store.set(
                self.last_play_key,
                state.last_play_date.isoformat() if state.last_play_date else None
            )
        except Exception as e:
            logger.warning(f"Could not write streak state {state}: {e}")
            return False
        return True

    def record_play(self, now: Optional[datetime] = None) -> StreakUpdate:
        """Apply a play event for today and persist the new state."""
        today = self.today(now)
        update = apply_play(self.load(), today)
        self.save(update.state)
        logger.debug(
            "Streak %s -> %d (last play %s)",
            update.transition.value, update.state.current_streak, update.state.last_play_date
        )
        streak_updated.send(
            self,
            current_streak=update.state.current_streak,
            last_play_date=update.state.last_play_date,
            transition=update.transition,
        )
        return update

    def reconcile(self, now: Optional[datetime] = None) -> StreakState:
        """Zero a stale streak on load, before any new play happens."""
        state = self.load()
        reconciled = reconcile(state, self.today(now))
        if reconciled != state:
            self.save(reconciled)
            logger.info(
                "Streak of %d expired (last play %s)", state.current_streak, state.last_play_date
            )
        return reconciled


class StreakService:
    """Helpers for streaks derived from play history rather than stored state."""

    @staticmethod
    def played_days(instants: Iterable[datetime], timezone: str = 'UTC', cutover_hour: int = 0) -> set:
        """Map session finish times onto calendar days under one day-boundary policy."""
        days = set()
        for instant in instants or ():
            if isinstance(instant, datetime):
                days.add(resolve_today(instant, timezone, cutover_hour))
            else:
                day = normalize_to_date(instant)
                if day:
                    days.add(day)
        return days

    @staticmethod
    def get_streak_info(
        instants: Iterable[datetime],
        now: Optional[datetime] = None,
        timezone: str = 'UTC',
        cutover_hour: int = 0
    ) -> dict:
        """
        Get formatted streak information for UI display.

        Returns:
            dict with streak data and display-friendly values
        """
        days = StreakService.played_days(instants, timezone, cutover_hour)
        today = resolve_today(now, timezone, cutover_hour)
        last_activity = max(days) if days else None

        return {
            'current_streak': calculate_streak_from_dates(days, today),
            'longest_streak': longest_streak(days),
            'last_activity_date': last_activity.isoformat() if last_activity else None,
            'is_active_today': today in days,
        }
