"""
Pedagogical ordering of the games in a session.

Recognition games come first, production games last. Unknown ids are
tolerated and placed at the end.
"""
from typing import Iterable, List

from ..catalogue import SESSION_GAMES

UNKNOWN_ORDER = 999


def recommended_order(game_id, catalogue=SESSION_GAMES) -> int:
    for game in catalogue:
        if game.id == game_id:
            return game.recommended_order
    return UNKNOWN_ORDER


def order_games(game_ids: Iterable[str], catalogue=SESSION_GAMES) -> List[str]:
    """
    Sort game ids by their catalogue ``recommended_order``.

    ``sorted`` is stable, so ids with the same order (including every unknown
    id) keep their input order.
    """
    order_map = {game.id: game.recommended_order for game in catalogue}
    return sorted(game_ids, key=lambda gid: order_map.get(gid, UNKNOWN_ORDER))
