from flask import jsonify, request, current_app

from spellschool_app.core.error_handlers import NotFoundError, ValidationError
from . import session_api_bp
from .interface import SessionInterface


@session_api_bp.route('/order', methods=['POST'])
def order_games_api():
    """Order the selected games for a session."""
    payload = request.get_json(silent=True) or {}
    games = payload.get('games')
    if not isinstance(games, list) or not all(isinstance(g, str) for g in games):
        raise ValidationError("'games' must be a list of game ids", errors={'games': games})

    ordered = SessionInterface.order_games(games)
    unknown = [gid for gid in ordered if SessionInterface.get_game(gid) is None]
    if unknown:
        current_app.logger.info(f"[Session] Unknown game ids placed last: {unknown}")
    return jsonify({'success': True, 'games': ordered, 'unknown': unknown})


@session_api_bp.route('/games', methods=['GET'])
def list_games_api():
    """Game catalogue, optionally filtered by ?keyword=."""
    keyword = request.args.get('keyword')
    return jsonify({'success': True, 'games': SessionInterface.list_games(keyword)})


@session_api_bp.route('/games/<game_id>', methods=['GET'])
def get_game_api(game_id):
    game = SessionInterface.get_game(game_id)
    if game is None:
        raise NotFoundError(f"Game '{game_id}' not found")
    return jsonify({'success': True, 'game': game.to_dict()})
