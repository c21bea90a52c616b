# File: spellschool_app/config.py
# Application configuration, read from the environment (.env supported).

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """SpellSchool application settings."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = _env_bool('LOG_JSON')

    # Level curve
    LEVEL_TOTAL_XP = int(os.environ.get('LEVEL_TOTAL_XP', 1_000_000))
    LEVEL_MAX = int(os.environ.get('LEVEL_MAX', 100))
    LEVEL_GROWTH_RATE = float(os.environ.get('LEVEL_GROWTH_RATE', 1.06))

    # XP awards
    XP_MULTIPLIER = float(os.environ.get('XP_MULTIPLIER', 0.25))
    XP_TARGET_ITEMS = int(os.environ.get('XP_TARGET_ITEMS', 10))

    # Streak day boundary
    STREAK_TIMEZONE = os.environ.get('STREAK_TIMEZONE', 'UTC')
    STREAK_CUTOVER_HOUR = int(os.environ.get('STREAK_CUTOVER_HOUR', 0))

    JSON_SORT_KEYS = False
