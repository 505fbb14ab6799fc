"""
Data Models Package

Contains all data models, intents and errors used throughout the application.
"""

from .game import (
    LetterState, GamePhase, LetterVerdict, AttemptState, GuessOutcome, HintOutcome, GameState
)
from .intents import (
    Direction, CellChanged, NavigateRequested, SubmitRequested, HintRequested, RestartRequested
)
from .errors import (
    WordGameError, ValidationError, LengthMismatchError, RowNotFullError, SecretNotSetError,
    GameOverError, HintExhaustedError, ExternalFetchError, FetchCancelledError, GameNotFoundError
)

__all__ = [
    'LetterState', 'GamePhase', 'LetterVerdict', 'AttemptState', 'GuessOutcome', 'HintOutcome',
    'GameState',
    'Direction', 'CellChanged', 'NavigateRequested', 'SubmitRequested', 'HintRequested',
    'RestartRequested',
    'WordGameError', 'ValidationError', 'LengthMismatchError', 'RowNotFullError',
    'SecretNotSetError', 'GameOverError', 'HintExhaustedError', 'ExternalFetchError',
    'FetchCancelledError', 'GameNotFoundError'
]
