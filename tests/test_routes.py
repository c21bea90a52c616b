"""
Tests for the JSON API

Tests cover:
- Level table and level lookup endpoints
- Session XP and game scoring endpoints
- Session-backed streak endpoints
- Session game ordering endpoints
- JSON error responses
"""

from datetime import datetime, timedelta, timezone

from spellschool_app import create_app

import conftest


class TestLevelEndpoints:

    def test_levels(self, client):
        response = client.get('/api/gamification/levels')
        data = response.get_json()

        assert response.status_code == 200
        assert data['success'] is True
        assert data['max_level'] == 100
        assert data['total_xp'] == 1_000_000
        assert data['levels'][0]['level'] == 1
        assert data['levels'][0]['title'] == 'Novice Learner'
        assert data['levels'][9]['title'] == 'Spark Initiate'

    def test_level_lookup(self, client):
        data = client.get('/api/gamification/level?xp=0').get_json()

        assert data['success'] is True
        assert data['level'] == 1
        assert data['title']['title'] == 'Novice Learner'

    def test_level_lookup_at_max(self, client):
        data = client.get('/api/gamification/level?xp=2000000').get_json()
        assert data['level'] == 100
        assert data['xp_to_next'] == 0

    def test_level_lookup_rejects_non_numeric(self, client):
        response = client.get('/api/gamification/level?xp=lots')
        data = response.get_json()

        assert response.status_code == 400
        assert data['success'] is False
        assert data['code'] == 'VALIDATION_ERROR'
        assert 'xp' in data['details']['errors']

    def test_level_lookup_rejects_infinity(self, client):
        assert client.get('/api/gamification/level?xp=inf').status_code == 400

    def test_custom_curve_from_config(self):
        class SmallCurveConfig(conftest.TestConfig):
            LEVEL_TOTAL_XP = 100
            LEVEL_MAX = 4
            LEVEL_GROWTH_RATE = 2

        client = create_app(SmallCurveConfig).test_client()
        data = client.get('/api/gamification/levels').get_json()

        assert [row['cumulative_xp'] for row in data['levels']] == [7, 20, 47, 100]

    def test_invalid_curve_config_is_400(self):
        class BrokenCurveConfig(conftest.TestConfig):
            LEVEL_GROWTH_RATE = 0.5

        response = create_app(BrokenCurveConfig).test_client().get('/api/gamification/levels')

        assert response.status_code == 400
        assert response.get_json()['code'] == 'INVALID_CONFIG'


class TestXpEndpoints:

    def test_session_xp(self, client):
        response = client.post('/api/gamification/session-xp', json={
            'raw_points': 100,
            'item_count': 50,
            'current_xp': 0,
        })
        award = response.get_json()['award']

        assert response.status_code == 200
        assert award['xp'] == 5
        assert award['new_xp'] == 5
        assert award['leveled_up'] is False

    def test_session_xp_tolerates_junk(self, client):
        response = client.post('/api/gamification/session-xp', json={'raw_points': 'abc'})
        assert response.status_code == 200
        assert response.get_json()['award']['xp'] == 0

    def test_score_game(self, client):
        response = client.post('/api/gamification/score', json={
            'game_id': 'memory',
            'counts': {'correct_pairs': 4, 'total_pairs': 4},
            'item_count': 4,
            'current_xp': 0,
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['score']['points_awarded'] == 12
        assert data['award']['xp'] == 3
        assert data['streak']['current_streak'] == 1

    def test_score_unknown_game(self, client):
        response = client.post('/api/gamification/score', json={'game_id': 'chess'})
        assert response.status_code == 400
        assert response.get_json()['details']['errors']['game_id'] == 'chess'

    def test_score_missing_game_id(self, client):
        assert client.post('/api/gamification/score', json={}).status_code == 400

    def test_score_non_finite_counts(self, client):
        """NaN and Infinity literals in the JSON body are scored as 0."""
        response = client.post(
            '/api/gamification/score',
            data='{"game_id": "flashcards", "counts": {"correct_answers": NaN, "total_questions": Infinity}}',
            content_type='application/json',
        )
        data = response.get_json()

        assert response.status_code == 200
        assert data['score']['points_awarded'] == 0
        assert data['score']['accuracy'] == 0
        assert data['score']['details']['correct_answers'] == 0
        assert data['award']['xp'] == 0

    def test_score_bad_counts(self, client):
        response = client.post('/api/gamification/score', json={
            'game_id': 'memory',
            'counts': {'bogus': 1},
        })
        assert response.status_code == 400


class TestStreakEndpoints:

    def test_empty_session(self, client):
        data = client.get('/api/gamification/streak').get_json()
        assert data['streak'] == {'current_streak': 0, 'last_play_date': None, 'transition': None}

    def test_play_twice_same_day(self, client):
        first = client.post('/api/gamification/streak/play').get_json()['streak']
        second = client.post('/api/gamification/streak/play').get_json()['streak']

        assert first['current_streak'] == 1
        assert first['transition'] == 'fresh'
        assert second['current_streak'] == 1
        assert second['transition'] == 'continued_today'

    def test_stale_session_streak_reconciled(self, client):
        stale = (datetime.now(timezone.utc).date() - timedelta(days=2)).isoformat()
        with client.session_transaction() as sess:
            sess['currentStreak'] = '5'
            sess['lastPlayDate'] = stale

        data = client.get('/api/gamification/streak').get_json()

        assert data['streak']['current_streak'] == 0
        with client.session_transaction() as sess:
            assert sess['currentStreak'] == '0'


class TestSessionEndpoints:

    def test_order(self, client):
        response = client.post('/api/session/order', json={'games': ['translate', 'flashcards', 'unknown_id']})
        data = response.get_json()

        assert response.status_code == 200
        assert data['games'] == ['flashcards', 'translate', 'unknown_id']
        assert data['unknown'] == ['unknown_id']

    def test_order_requires_list(self, client):
        assert client.post('/api/session/order', json={'games': 'flashcards'}).status_code == 400
        assert client.post('/api/session/order', json={'games': [1, 2]}).status_code == 400

    def test_games(self, client):
        data = client.get('/api/session/games').get_json()
        assert len(data['games']) == 8
        assert data['games'][0]['id'] == 'flashcards'

    def test_games_by_keyword(self, client):
        data = client.get('/api/session/games?keyword=spelling').get_json()
        assert [g['id'] for g in data['games']] == ['word_scramble', 'translate']

    def test_game_detail(self, client):
        assert client.get('/api/session/games/memory').get_json()['game']['name'] == 'Memory'

    def test_game_detail_not_found(self, client):
        response = client.get('/api/session/games/chess')
        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'


class TestApiErrors:

    def test_unknown_api_path(self, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_method_not_allowed(self, client):
        response = client.get('/api/session/order')
        assert response.status_code == 405
        assert response.get_json()['code'] == 'METHOD_NOT_ALLOWED'
