# modules/gamification/config.py

class GamificationDefaultConfig:
    """
    Default configuration for the Gamification module.
    Used when the Flask config does not define a key.
    """

    # --- Level curve ---
    LEVEL_TOTAL_XP = 1_000_000
    LEVEL_MAX = 100
    LEVEL_GROWTH_RATE = 1.06

    # --- XP awards ---
    XP_MULTIPLIER = 0.25
    XP_TARGET_ITEMS = 10

    # --- Streaks ---
    STREAK_TIMEZONE = 'UTC'
    STREAK_CUTOVER_HOUR = 0

    @classmethod
    def get(cls, config, key):
        """Look ``key`` up in ``config`` (any mapping), falling back to the default here."""
        if config is not None and config.get(key) is not None:
            return config.get(key)
        return getattr(cls, key)
