"""
Event Handlers for Gamification Module.

Listens to signals from other modules and triggers gamification logic.
The session module doesn't need to know about streak internals.
"""
from spellschool_app.core.logging_config import get_logger
from spellschool_app.core.signals import game_completed

logger = get_logger('spellschool.gamification.events')


@game_completed.connect
def on_game_completed(sender, **kwargs):
    """
    Handle game_completed signal.
    Records a play on the learner's streak tracker when one is supplied.

    Expected kwargs:
        - game_id: str
        - raw_points: int
        - item_count: int
        - streak_tracker: StreakTracker (optional)
        - now: datetime (optional)
    """
    tracker = kwargs.get('streak_tracker')
    if tracker is None:
        return

    try:
        update = tracker.record_play(kwargs.get('now'))
    except ValueError as e:
        # Unknown STREAK_TIMEZONE
        logger.error(f"[Gamification] Could not record play for {kwargs.get('game_id')}: {e}")
        return

    logger.debug(
        f"[Gamification] Game completed: game={kwargs.get('game_id')}, "
        f"streak={update.state.current_streak} ({update.transition.value})"
    )

