# File: spellschool_app/modules/gamification/services/progression_service.py
"""
Progression Service
===================
Composes the pure level and points logic for one configured curve.

Each service instance owns its level-table cache, so several curves (one per
game mode, say) can live in the same process without sharing hidden state.
The service never stores XP: callers pass the learner's current total in and
persist the returned total themselves.
"""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from spellschool_app.core.logging_config import get_logger
from spellschool_app.core.signals import level_up, xp_awarded
from ..config import GamificationDefaultConfig
from ..logics.level_table import (
    LevelCurveConfig,
    LevelProgress,
    LevelRow,
    LevelTableCache,
    level_for_xp,
)
from ..logics.points import DEFAULT_TARGET_ITEMS, XP_MULTIPLIER, session_xp, to_number
from ..logics.wizard_titles import next_title, title_for_level
from ..schemas import XpAwardDTO

logger = get_logger('spellschool.gamification.progression')


class ProgressionService:
    """XP awards and level lookups against a single level curve."""

    def __init__(
        self,
        curve: Optional[LevelCurveConfig] = None,
        multiplier: float = XP_MULTIPLIER,
        target_items: int = DEFAULT_TARGET_ITEMS,
        cache: Optional[LevelTableCache] = None
    ):
        self.curve = curve or LevelCurveConfig()
        self.multiplier = multiplier
        self.target_items = target_items
        self.cache = cache if cache is not None else LevelTableCache()

    @classmethod
    def from_app_config(cls, config: Optional[Mapping] = None, cache: Optional[LevelTableCache] = None) -> 'ProgressionService':
        """Build a service from Flask-style config keys (LEVEL_*, XP_*)."""
        get = lambda key: GamificationDefaultConfig.get(config, key)  # noqa: E731
        curve = LevelCurveConfig(
            total_xp=get('LEVEL_TOTAL_XP'),
            max_level=get('LEVEL_MAX'),
            growth_rate=get('LEVEL_GROWTH_RATE'),
        )
        return cls(
            curve=curve,
            multiplier=get('XP_MULTIPLIER'),
            target_items=get('XP_TARGET_ITEMS'),
            cache=cache,
        )

    def level_table(self) -> Tuple[LevelRow, ...]:
        """The full curve, generated once per config."""
        return self.cache.get(self.curve)

    def level_progress(self, total_xp) -> LevelProgress:
        return level_for_xp(total_xp, self.level_table())

    def level_summary(self, total_xp) -> dict:
        """Level progress plus the rank title, ready for JSON."""
        progress = self.level_progress(total_xp)
        data = progress.to_dict()
        data['title'] = title_for_level(progress.level).to_dict()
        upcoming = next_title(progress.level)
        data['next_title'] = dict(upcoming.to_dict(), at=upcoming.at) if upcoming else None
        return data

    def session_xp(self, raw_points, item_count) -> int:
        """XP for one finished session: set-size normalization, then the global multiplier."""
        return session_xp(raw_points, item_count, self.multiplier, self.target_items)

    def award_session_xp(self, current_xp, raw_points, item_count) -> XpAwardDTO:
        """
        Compute the XP a session earns and what it does to the learner's level.

        Args:
            current_xp: Learner's cumulative XP before this session.
            raw_points: Raw game score.
            item_count: Number of words in the practised set.

        Returns:
            XpAwardDTO; persist ``new_xp`` through the profile store.
        """
        xp = self.session_xp(raw_points, item_count)
        try:
            previous_xp = max(0, int(current_xp or 0))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Non-numeric current XP {current_xp!r}, treating as 0")
            previous_xp = 0
        new_xp = previous_xp + xp

        previous_level = self.level_progress(previous_xp).level
        new_level = self.level_progress(new_xp).level
        award = XpAwardDTO(
            raw_points=_clean_raw(raw_points),
            xp=xp,
            previous_xp=previous_xp,
            new_xp=new_xp,
            previous_level=previous_level,
            new_level=new_level,
            leveled_up=new_level > previous_level,
        )

        xp_awarded.send(self, raw_points=award.raw_points, xp=xp, previous_xp=previous_xp, new_xp=new_xp)
        if award.leveled_up:
            logger.info(f"Level up: {previous_level} -> {new_level} at {new_xp} XP")
            level_up.send(self, previous_level=previous_level, new_level=new_level, new_xp=new_xp)
        return award


def _clean_raw(raw_points):
    raw = max(0.0, to_number(raw_points))
    return int(raw) if raw.is_integer() else raw
