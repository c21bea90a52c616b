"""
Session Interface
=================
Public API for other modules to read the session game catalogue and order
the games an instructor picked.
"""
from typing import Any, Dict, Iterable, List, Optional

from .catalogue import SESSION_GAMES, GameMetadata, games_with_keyword, get_game_metadata
from .logics.ordering import order_games


class SessionInterface:
    """Public interface for session module operations."""

    @staticmethod
    def order_games(game_ids: Iterable[str]) -> List[str]:
        """Game ids in recommended play order, unknown ids last."""
        return order_games(game_ids)

    @staticmethod
    def get_game(game_id: str) -> Optional[GameMetadata]:
        return get_game_metadata(game_id)

    @staticmethod
    def list_games(keyword: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Catalogue entries as dicts.

        Args:
            keyword: Optional filter, matched case-insensitively against each
                game's keywords.
        """
        games = games_with_keyword(keyword) if keyword else SESSION_GAMES
        return [game.to_dict() for game in games]
