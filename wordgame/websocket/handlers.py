"""
WebSocket Event Handlers

Delivers display intents over Socket.IO and pushes board updates to every
client watching a game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.errors import WordGameError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import build_intent, serialize_outcome

# event name -> intent type understood by build_intent
INTENT_EVENTS = {
    'cell_changed': 'cell_changed',
    'navigate': 'navigate',
    'submit_guess': 'submit',
    'request_hint': 'hint',
    'restart_game': 'restart',
}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""
    
    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service):
        """Subscribe the client to a game's board updates."""
        game_id = data['game_id']
        join_room(game_id)
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('board_state', {
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })
    
    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving a game's board updates."""
        if isinstance(data, dict) and 'game_id' in data:
            leave_room(data['game_id'])
    
    def make_intent_handler(event, intent_type):
        @websocket_game_required
        def handler(data, game_service):
            game_id = data['game_id']
            game_logger.log_user_action(request, event, game_id)
            
            try:
                intent = build_intent(intent_type, data)
                outcome = game_service.dispatch(game_id, intent)
            except WordGameError as e:
                game_logger.log_server_response(
                    request, event, False, {'error': str(e)}, game_id
                )
                emit('error', {
                    'game_id': game_id,
                    'event': event,
                    'error': str(e),
                    'error_type': type(e).__name__
                })
                return
            
            state = game_service.get_game_state(game_id)
            if intent_type == 'submit' and state.game_over:
                game_logger.log_game_event(
                    game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                    rows_used=state.current_row + 1, target_word=state.answer
                )
            
            response_data = {
                'game_id': game_id,
                'event': event,
                'outcome': serialize_outcome(outcome),
                'state': asdict(state)
            }
            game_logger.log_server_response(request, event, True, response_data, game_id)
            socketio.emit('board_state', response_data, to=game_id)
        
        handler.__name__ = f'handle_{event}'
        return handler
    
    for event, intent_type in INTENT_EVENTS.items():
        socketio.on_event(event, make_intent_handler(event, intent_type))
