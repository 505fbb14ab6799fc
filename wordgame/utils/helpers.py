"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from flask import request

from ..models.intents import (
    CellChanged, Direction, HintRequested, NavigateRequested, RestartRequested, SubmitRequested
)
from ..models.errors import ValidationError


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request
        
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    
    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def build_intent(intent_type: str, data: Optional[Dict[str, Any]] = None):
    """
    Builds a display intent from a client payload.
    
    Args:
        intent_type: One of 'cell_changed', 'navigate', 'submit', 'hint', 'restart'
        data: Payload fields (row, col, value, direction)
        
    Raises:
        ValidationError: If the type is unknown or a field is missing or malformed
    """
    data = data or {}
    
    try:
        if intent_type == 'cell_changed':
            return CellChanged(int(data['row']), int(data['col']), str(data.get('value') or ''))
        if intent_type == 'navigate':
            return NavigateRequested(int(data['row']), int(data['col']), Direction(data['direction']))
        if intent_type == 'submit':
            return SubmitRequested()
        if intent_type == 'hint':
            return HintRequested()
        if intent_type == 'restart':
            return RestartRequested()
    except KeyError as e:
        raise ValidationError(f"Missing field: {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid intent payload: {e}") from e
    
    raise ValidationError(f"Unknown intent type: {intent_type}")


def serialize_outcome(outcome) -> Optional[Dict[str, Any]]:
    """JSON-ready view of a GuessOutcome or HintOutcome."""
    if outcome is None:
        return None
    
    if hasattr(outcome, 'verdicts'):
        return {
            'row': outcome.row,
            'phase': outcome.phase.value,
            'verdicts': [
                {'letter': v.letter, 'position': v.position, 'state': v.state.value}
                for v in outcome.verdicts
            ],
            'new_confirmed': sorted(outcome.new_confirmed),
            'next_row': outcome.next_row,
            'prefilled': {str(k): v for k, v in outcome.prefilled.items()}
        }
    
    return {
        'position': outcome.position,
        'letter': outcome.letter,
        'hints_used': outcome.hints_used,
        'hints_remaining': outcome.hints_remaining
    }
