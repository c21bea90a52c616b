import math

from flask import jsonify, request, current_app

from spellschool_app.core.error_handlers import ValidationError
from spellschool_app.core.signals import game_completed
from . import gamification_api_bp
from .interface import (
    award_session_xp,
    get_level_summary,
    get_level_table,
    get_session_streak_tracker,
    get_streak,
    record_play,
    score_finished_game,
)


def _number_arg(value, name):
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = None
    if number is None or not math.isfinite(number):
        raise ValidationError(f"'{name}' must be a finite number", errors={name: value})
    return number


@gamification_api_bp.route('/levels', methods=['GET'])
def get_levels_api():
    """Full level table with titles."""
    rows = get_level_table()
    return jsonify({
        'success': True,
        'levels': rows,
        'max_level': len(rows),
        'total_xp': rows[-1]['cumulative_xp'] if rows else 0
    })


@gamification_api_bp.route('/level', methods=['GET'])
def get_level_api():
    """Level summary for ?xp=<total>."""
    xp = _number_arg(request.args.get('xp', 0), 'xp')
    return jsonify({'success': True, 'xp': xp, **get_level_summary(xp)})


@gamification_api_bp.route('/session-xp', methods=['POST'])
def session_xp_api():
    """Normalize a session's raw points into XP and apply them."""
    payload = request.get_json(silent=True) or {}
    award = award_session_xp(
        payload.get('current_xp', 0),
        payload.get('raw_points', 0),
        payload.get('item_count', 0)
    )
    return jsonify({'success': True, 'award': award.to_dict()})


@gamification_api_bp.route('/score', methods=['POST'])
def score_game_api():
    """Score a finished game, award its XP and record the play."""
    payload = request.get_json(silent=True) or {}
    game_id = payload.get('game_id')
    counts = payload.get('counts') or {}
    if not game_id:
        raise ValidationError("'game_id' is required", errors={'game_id': game_id})
    if not isinstance(counts, dict):
        raise ValidationError("'counts' must be an object", errors={'counts': counts})

    try:
        result = score_finished_game(game_id, **counts)
    except KeyError:
        raise ValidationError(f"Unknown game '{game_id}'", errors={'game_id': game_id})
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid counts for '{game_id}'", errors={'counts': str(e)})

    item_count = payload.get('item_count', 0)
    award = award_session_xp(payload.get('current_xp', 0), result.points_awarded, item_count)
    current_app.logger.info(
        f"[Gamification] Scored {game_id}: {result.points_awarded} pts -> {award.xp} XP"
    )

    game_completed.send(
        current_app._get_current_object(),
        game_id=game_id,
        raw_points=result.points_awarded,
        item_count=item_count,
        streak_tracker=get_session_streak_tracker(),
    )

    return jsonify({
        'success': True,
        'score': result.to_dict(),
        'award': award.to_dict(),
        'streak': get_streak().to_dict()
    })


@gamification_api_bp.route('/streak', methods=['GET'])
def get_streak_api():
    """Current streak, reconciled against today."""
    return jsonify({'success': True, 'streak': get_streak().to_dict()})


@gamification_api_bp.route('/streak/play', methods=['POST'])
def record_play_api():
    """Record that the learner played today."""
    return jsonify({'success': True, 'streak': record_play().to_dict()})
