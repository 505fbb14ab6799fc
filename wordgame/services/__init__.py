"""
Services Package

Contains the game core and the service classes built on it.
"""

from .evaluator import evaluate
from .attempt_tracker import AttemptTracker
from .answer_source import (
    AnswerSource, StaticAnswerSource, RetryPolicy, fixed_backoff, linear_backoff, exponential_backoff
)
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate', 'AttemptTracker',
    'AnswerSource', 'StaticAnswerSource', 'RetryPolicy',
    'fixed_backoff', 'linear_backoff', 'exponential_backoff',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service'
]
