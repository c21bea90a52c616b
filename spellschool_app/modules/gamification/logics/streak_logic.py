"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.

All comparisons are between calendar dates (``datetime.date``), never
elapsed hours. ``resolve_today`` maps an instant to the calendar day it
belongs to under one reference timezone and cutover hour.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Iterable, Optional, Set, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DateLike = Union[date, datetime, str, None]


class StreakTransition(Enum):
    """Which rule fired when a play was recorded."""
    FRESH = "fresh"
    CONTINUED_TODAY = "continued_today"
    INCREMENTED = "incremented"
    RESET = "reset"


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    last_play_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            'current_streak': self.current_streak,
            'last_play_date': self.last_play_date.isoformat() if self.last_play_date else None,
        }


@dataclass(frozen=True)
class StreakUpdate:
    state: StreakState
    transition: StreakTransition


def resolve_today(
    now: Optional[datetime] = None,
    tz: Union[str, tzinfo, None] = None,
    cutover_hour: int = 0
) -> date:
    """
    Calendar day that ``now`` belongs to.

    Args:
        now: Instant to resolve (default: current UTC time). Naive values are
            taken to already be in the reference zone.
        tz: Reference timezone, IANA name or tzinfo (default: UTC).
        cutover_hour: Hours after midnight that still count as the previous
            day (0 = plain midnight boundary).

    Examples:
        >>> resolve_today(datetime(2024, 1, 3, 5, 30, tzinfo=timezone.utc), cutover_hour=6)
        datetime.date(2024, 1, 2)
    """
    zone = _resolve_zone(tz)
    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(zone)
    cutover_hour = max(0, min(23, int(cutover_hour or 0)))
    if now.hour < cutover_hour:
        now = now - timedelta(days=1)
    return now.date()


def _resolve_zone(tz: Union[str, tzinfo, None]) -> tzinfo:
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    if str(tz).upper() == 'UTC':
        return timezone.utc
    try:
        return ZoneInfo(str(tz))
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown streak timezone: {tz!r}")


def apply_play(state: StreakState, today: date) -> StreakUpdate:
    """
    Transition ``state`` for a play happening on ``today``.

    Examples:
        >>> apply_play(StreakState(3, date(2024, 1, 2)), date(2024, 1, 3)).state.current_streak
        4
        >>> apply_play(StreakState(2, date(2024, 1, 3)), date(2024, 1, 3)).transition
        <StreakTransition.CONTINUED_TODAY: 'continued_today'>
    """
    last = state.last_play_date
    if last is None:
        return StreakUpdate(StreakState(1, today), StreakTransition.FRESH)
    if last == today:
        return StreakUpdate(state, StreakTransition.CONTINUED_TODAY)
    if last == today - timedelta(days=1):
        return StreakUpdate(
            StreakState(max(0, state.current_streak) + 1, today),
            StreakTransition.INCREMENTED
        )
    # Gap of two or more days, or a last play date in the future
    return StreakUpdate(StreakState(1, today), StreakTransition.RESET)


def reconcile(state: StreakState, today: date) -> StreakState:
    """
    Zero a stale streak without waiting for the next play.

    A streak survives only while the last play was today or yesterday.
    """
    last = state.last_play_date
    if last is not None and (last == today or last == today - timedelta(days=1)):
        return state
    if state.current_streak == 0:
        return state
    return StreakState(0, last)


def calculate_streak_from_dates(
    activity_dates: Iterable[DateLike],
    today: date = None
) -> int:
    """
    Count consecutive active days ending today (or yesterday).

    Args:
        activity_dates: date objects, datetime objects, or ISO date strings.
        today: Day to count back from (default: current UTC date).

    Returns:
        Number of consecutive active days (int).

    Examples:
        >>> dates = [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]
        >>> calculate_streak_from_dates(dates, today=date(2024, 1, 3))
        3

        >>> # Gap in dates
        >>> dates = [date(2024, 1, 3), date(2024, 1, 1)]  # Missing Jan 2
        >>> calculate_streak_from_dates(dates, today=date(2024, 1, 3))
        1
    """
    learned_dates = _normalize_dates(activity_dates)
    if not learned_dates:
        return 0

    if today is None:
        today = resolve_today()

    yesterday = today - timedelta(days=1)

    # Determine starting point for streak counting
    if today in learned_dates:
        current_check = today
    elif yesterday in learned_dates:
        # Not played today yet, but played yesterday
        current_check = yesterday
    else:
        return 0

    streak = 0
    while current_check in learned_dates:
        streak += 1
        current_check -= timedelta(days=1)

    return streak


def longest_streak(activity_dates: Iterable[DateLike]) -> int:
    """Longest run of consecutive active days anywhere in the history."""
    learned_dates = sorted(_normalize_dates(activity_dates))
    best = 0
    run = 0
    previous: Optional[date] = None
    for day in learned_dates:
        if previous is not None and day - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def _normalize_dates(activity_dates: Iterable[DateLike]) -> Set[date]:
    learned: Set[date] = set()
    for val in activity_dates or ():
        normalized = normalize_to_date(val)
        if normalized:
            learned.add(normalized)
    return learned


def normalize_to_date(val: DateLike) -> Union[date, None]:
    """
    Normalize various date representations to a date object.

    Args:
        val: Can be date, datetime, ISO string, or None.

    Returns:
        date object or None if conversion fails.
    """
    if val is None:
        return None

    if isinstance(val, datetime):
        return val.date()

    if isinstance(val, date):
        return val

    if isinstance(val, str):
        try:
            # Try ISO format first (YYYY-MM-DD or full datetime)
            return datetime.fromisoformat(val.strip()).date()
        except ValueError:
            try:
                return datetime.strptime(val.strip(), '%Y-%m-%d').date()
            except ValueError:
                return None

    return None


def parse_streak_count(val) -> int:
    """Stored streak counter as a non-negative int, 0 for anything unreadable."""
    if val is None or isinstance(val, bool):
        return 0
    try:
        count = int(str(val).strip())
    except (TypeError, ValueError):
        return 0
    return max(0, count)

