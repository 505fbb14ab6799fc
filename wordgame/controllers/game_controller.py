"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.errors import WordGameError
from ..models.intents import HintRequested, RestartRequested, SubmitRequested
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import build_intent, serialize_outcome

game_bp = Blueprint('game', __name__)


def _log_game_over(game_service, game_id, final_guess):
    """Log win/loss events once a guess ends the game."""
    state = game_service.get_game_state(game_id)
    if not state.game_over:
        return
    
    game_logger.log_game_event(
        game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
        rows_used=state.current_row + 1, target_word=state.answer,
        final_guess=final_guess
    )


def _dispatch(game_service, game_id, intent, action, **log_details):
    """Dispatch an intent and build the JSON response."""
    try:
        outcome = game_service.dispatch(game_id, intent)
        
        response_data = {
            'success': True,
            'outcome': serialize_outcome(outcome),
            'state': asdict(game_service.get_game_state(game_id))
        }
        game_logger.log_server_response(request, action, True, response_data, game_id, **log_details)
        return response_data, outcome
        
    except WordGameError as e:
        error_response = {
            'success': False,
            'error': str(e),
            'error_type': type(e).__name__
        }
        game_logger.log_server_response(
            request, action, False, error_response, game_id,
            validation_error=str(e), **log_details
        )
        return error_response, None


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        # Log user action
        game_logger.log_user_action(request, 'new_game')
        
        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)
        
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }
        
        # Log successful response
        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_rows=state.max_rows
        )
        game_logger.log_game_event(game_id, 'game_started', request.remote_addr)
        
        return jsonify(response_data)
        
    except WordGameError as e:
        game_logger.log_error(request, e, 'new_game')
        
        error_response = {
            'success': False,
            'error': str(e)
        }
        
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400
        
    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)
    
    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'state': asdict(state)
    }
    
    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        current_row=state.current_row, game_over=state.game_over
    )
    
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/intent', methods=['POST'])
@require_game
def dispatch_intent(game_id, game_service):
    """Deliver one display intent (cell_changed, navigate, submit, hint, restart)."""
    try:
        data = request.get_json(silent=True) or {}
        intent_type = data.get('type')
        
        game_logger.log_user_action(request, 'dispatch_intent', game_id, intent_type=intent_type)
        
        try:
            intent = build_intent(intent_type, data)
        except WordGameError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'dispatch_intent', False, error_response, game_id)
            return jsonify(error_response), 400
        
        response_data, outcome = _dispatch(
            game_service, game_id, intent, 'dispatch_intent', intent_type=intent_type
        )
        if not response_data['success']:
            return jsonify(response_data), 400
        
        if isinstance(intent, SubmitRequested):
            _log_game_over(game_service, game_id, ''.join(v.letter for v in outcome.verdicts))
        
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'dispatch_intent', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'dispatch_intent', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game_service):
    """
    Submit a guess for evaluation.
    
    The body may carry the whole word (``{"guess": "PLANET"}``) or the row's
    cells (``{"letters": ["P", "", ...]}``); either is written into the
    active row's editable cells before the row is submitted.
    """
    try:
        data = request.get_json(silent=True) or {}
        if 'guess' not in data and 'letters' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400
        
        letters = data.get('letters')
        if letters is None:
            letters = list(str(data['guess']).strip())
        
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=''.join(str(letter or '') for letter in letters), guess_length=len(letters)
        )
        
        session = game_service.get_session(game_id)
        tracker = session.tracker
        if len(letters) > tracker.word_length:
            error_response = {
                'success': False,
                'error': f"Guess length must be {tracker.word_length}, got {len(letters)}",
                'error_type': 'ValidationError'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400
        
        if not tracker.is_over:
            row = tracker.current_row
            for col in range(tracker.word_length):
                if session.display.is_cell_locked(row, col):
                    continue
                value = str(letters[col] or '') if col < len(letters) else ''
                session.display.set_cell(row, col, value.strip().upper())
        
        response_data, outcome = _dispatch(game_service, game_id, SubmitRequested(), 'submit_guess')
        if not response_data['success']:
            return jsonify(response_data), 400
        
        _log_game_over(game_service, game_id, ''.join(v.letter for v in outcome.verdicts))
        
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
@require_game
def request_hint(game_id, game_service):
    """Reveal the next unconfirmed letter."""
    game_logger.log_user_action(request, 'request_hint', game_id)
    
    response_data, outcome = _dispatch(game_service, game_id, HintRequested(), 'request_hint')
    if not response_data['success']:
        return jsonify(response_data), 400
    
    if outcome is not None:
        game_logger.log_game_event(
            game_id, 'hint_revealed', request.remote_addr,
            position=outcome.position, hints_used=outcome.hints_used
        )
    
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game
def restart_game(game_id, game_service):
    """Start over with a new secret in the same session."""
    game_logger.log_user_action(request, 'restart_game', game_id)
    
    response_data, _ = _dispatch(game_service, game_id, RestartRequested(), 'restart_game')
    if not response_data['success']:
        return jsonify(response_data), 400
    
    game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500
    
    # Log user action
    game_logger.log_user_action(request, 'delete_game', game_id)
    
    success = game_service.delete_game(game_id)
    
    response_data = {
        'success': success
    }
    
    # Log response
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    
    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)
    
    response_data['error'] = 'Game not found'
    return jsonify(response_data), 404


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    
    game_logger.log_user_action(request, 'health_check')
    
    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.sessions) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    
    game_logger.log_server_response(request, 'health_check', True, response_data)
    
    return jsonify(response_data)
