"""
Tests for application wiring: factory, logging, signal handlers
"""

import logging
from datetime import datetime, timezone

import pytest
from flask import Flask

from spellschool_app import create_app
from spellschool_app.core.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging
from spellschool_app.core.module_registry import API_BLUEPRINTS, register_api_blueprints
from spellschool_app.core.signals import game_completed
from spellschool_app.modules.gamification.interface import get_progression_service
from spellschool_app.modules.gamification.services.streak_service import InMemoryStreakStore, StreakTracker

import conftest


class TestAppFactory:

    def test_blueprints_registered(self, app):
        assert 'gamification_api' in app.blueprints
        assert 'session_api' in app.blueprints

    def test_config_applied(self, app):
        assert app.config['TESTING'] is True
        assert app.config['LEVEL_MAX'] == 100
        assert app.config['STREAK_TIMEZONE'] == 'UTC'

    def test_progression_service_cached_per_app(self, app):
        assert get_progression_service() is get_progression_service()
        assert app.extensions['spellschool_progression'].curve.max_level == 100

    def test_registry_mounts_api_prefixes(self):
        app = Flask(__name__)
        register_api_blueprints(app, API_BLUEPRINTS)

        prefixes = {bp.url_prefix for bp in app.blueprints.values()}
        assert prefixes == {'/api/gamification', '/api/session'}

    def test_registry_rejects_non_blueprint(self):
        with pytest.raises(TypeError):
            register_api_blueprints(Flask(__name__), ['spellschool_app.config:Config'])


class TestLogging:

    def test_file_handler_created(self, tmp_path):
        logger = setup_logging(log_level='DEBUG', log_dir=str(tmp_path))

        logger.info('hello')
        for handler in logger.handlers:
            handler.flush()

        assert (tmp_path / 'spellschool.log').exists()
        assert logger.level == logging.DEBUG

    def test_console_only_without_dir(self):
        logger = setup_logging(log_level='WARNING')
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_module_loggers_are_children(self):
        assert get_logger('spellschool.gamification.streak').parent.name in (
            ROOT_LOGGER_NAME, 'spellschool.gamification'
        )

    def test_log_dir_from_config(self, tmp_path):
        class FileLogConfig(conftest.TestConfig):
            LOG_DIR = str(tmp_path)

        create_app(FileLogConfig)
        assert (tmp_path / 'spellschool.log').exists()


class TestGameCompletedHandler:
    """The gamification event handler records plays."""

    def test_records_play_on_supplied_tracker(self, app):
        store = InMemoryStreakStore()
        tracker = StreakTracker(store)

        game_completed.send(
            None,
            game_id='memory',
            streak_tracker=tracker,
            now=datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc),
        )

        assert store.data == {'currentStreak': '1', 'lastPlayDate': '2024-03-10'}

    def test_without_tracker_is_noop(self, app):
        game_completed.send(None, game_id='memory')

    def test_bad_timezone_logged_not_raised(self, app, caplog):
        tracker = StreakTracker(InMemoryStreakStore(), timezone='Nowhere/Special')

        with caplog.at_level(logging.ERROR, logger='spellschool.gamification.events'):
            game_completed.send(None, game_id='memory', streak_tracker=tracker)

        assert 'Could not record play' in caplog.text

    def test_failed_streak_write_not_raised(self, app, caplog):
        class QuotaExceededStore(InMemoryStreakStore):
            def set(self, key, value):
                raise RuntimeError('quota exceeded')

        with caplog.at_level(logging.WARNING, logger='spellschool.gamification.streak'):
            game_completed.send(None, game_id='memory', streak_tracker=StreakTracker(QuotaExceededStore()))

        assert 'quota exceeded' in caplog.text
