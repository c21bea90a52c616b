"""Pure session logic (no Flask)."""
from .ordering import UNKNOWN_ORDER, order_games, recommended_order

__all__ = ['UNKNOWN_ORDER', 'order_games', 'recommended_order']
