"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker (Flask's signalling library) to enable decoupled
communication between modules.

Usage:
    # Publisher (sender)
    from spellschool_app.core.signals import game_completed
    game_completed.send(None, game_id='translate', raw_points=12, item_count=10)

    # Subscriber (receiver) - in module's events.py
    @game_completed.connect
    def on_game_completed(sender, **kwargs):
        ...
"""
from blinker import Namespace

progression_signals = Namespace()

# Signal: Fired when a mini-game finishes
# Payload includes: game_id, raw_points, item_count, streak_tracker (optional), now (optional)
game_completed = progression_signals.signal('game_completed')

# Signal: Fired when session XP has been computed
# Payload includes: raw_points, xp, previous_xp, new_xp
xp_awarded = progression_signals.signal('xp_awarded')

# Signal: Fired when an XP award crosses at least one level boundary
# Payload includes: previous_level, new_level, new_xp
level_up = progression_signals.signal('level_up')

# Signal: Fired after a streak transition has been written to its store
# Payload includes: current_streak, last_play_date, transition
streak_updated = progression_signals.signal('streak_updated')
