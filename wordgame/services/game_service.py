"""
Game Service

Manages game sessions: secret acquisition with the fallback policy, intent
dispatch and client-facing game state.
"""

import uuid
from typing import Dict, Optional

from ..config.app_config import Config
from ..models.errors import ExternalFetchError, GameNotFoundError
from ..models.game import GamePhase, GameState
from ..utils.game_logger import game_logger
from ..views.board import BoardDisplay
from .answer_source import AnswerSource, RetryPolicy, linear_backoff
from .attempt_tracker import AttemptTracker
from .game_session import GameSession


class GameService:
    """
    Core game service managing multiple game sessions.
    
    This class handles:
    - Game session management with unique game IDs
    - Secret acquisition, falling back to a default word when the Answer Source fails
    - Routing display intents to the right session
    - Game state snapshots that never expose an unfinished game's answer
    """
    
    def __init__(self, config=Config, answer_source=None):
        self.config = config
        self.sessions: Dict[str, GameSession] = {}  # Store active games by game_id
        self.answer_source = answer_source or AnswerSource(
            config.ANSWER_API_URL,
            RetryPolicy(
                max_attempts=config.ANSWER_API_RETRIES,
                timeout=config.ANSWER_API_TIMEOUT,
                backoff=linear_backoff(config.ANSWER_API_BACKOFF)
            )
        )
    
    def _obtain_secret(self, length: int, game_id: Optional[str] = None) -> str:
        """Fetches a secret, substituting the configured fallback on failure."""
        try:
            return self.answer_source.fetch_secret(length)
        except ExternalFetchError as e:
            game_logger.log_game_event(
                game_id, 'secret_fallback', 'system',
                error_type=type(e).__name__, error_message=str(e)
            )
            return self.config.FALLBACK_SECRET
    
    def create_new_game(self, secret: Optional[str] = None) -> str:
        """
        Creates a new game session.
        
        Args:
            secret: Word to play; fetched from the Answer Source when omitted
            
        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        tracker = AttemptTracker(
            word_length=self.config.WORD_LENGTH,
            max_rows=self.config.MAX_ROWS,
            max_hints=self.config.MAX_HINTS
        )
        display = BoardDisplay(tracker.max_rows, tracker.word_length)
        session = GameSession(
            tracker, display,
            lambda length: self._obtain_secret(length, game_id)
        )
        
        session.start(secret)
        self.sessions[game_id] = session
        return game_id
    
    def get_session(self, game_id: str) -> GameSession:
        """
        Looks up a game session.
        
        Raises:
            GameNotFoundError: If no session has this id
        """
        session = self.sessions.get(game_id)
        if session is None:
            raise GameNotFoundError("Game not found")
        return session
    
    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).
        
        Args:
            game_id: Unique game identifier
            
        Returns:
            GameState object or None if game not found
        """
        session = self.sessions.get(game_id)
        if session is None:
            return None
        
        tracker = session.tracker
        
        return GameState(
            game_id=game_id,
            phase=tracker.phase.value,
            current_row=tracker.current_row,
            max_rows=tracker.max_rows,
            word_length=tracker.word_length,
            game_over=tracker.is_over,
            won=tracker.phase is GamePhase.WON,
            confirmed_positions=sorted(tracker.confirmed_positions),
            hints_used=tracker.hints_used,
            max_hints=tracker.max_hints,
            board=session.display.snapshot(),
            answer=tracker.secret if tracker.is_over else None
        )
    
    def dispatch(self, game_id: str, intent):
        """
        Applies a display intent to a game.
        
        Returns:
            Whatever the session returns for the intent (GuessOutcome,
            HintOutcome or None)
        """
        return self.get_session(game_id).dispatch(intent)
    
    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.
        
        Args:
            game_id: Unique game identifier
            
        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config=Config, answer_source=None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(config, answer_source)
    return _game_service
