"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, websocket_game_required
from .helpers import get_user_identity, build_intent, serialize_outcome
from .game_logger import game_logger

__all__ = [
    'require_game', 'websocket_game_required',
    'get_user_identity', 'build_intent', 'serialize_outcome',
    'game_logger'
]
