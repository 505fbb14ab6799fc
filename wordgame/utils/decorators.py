"""
Game Lookup Decorators

Contains decorators that resolve the game session for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game(f):
    """
    Decorator that resolves ``game_id`` to a live session for HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        if game_id not in game_service.sessions:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404
        
        return f(game_id, *args, game_service=game_service, **kwargs)
    
    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events that act on a game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return
        
        if not args or not isinstance(args[0], dict) or 'game_id' not in args[0]:
            emit('error', {'error': 'game_id required'})
            return
        
        game_id = args[0]['game_id']
        if game_id not in game_service.sessions:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return
        
        kwargs['game_service'] = game_service
        return f(*args, **kwargs)
    
    return decorated_function
