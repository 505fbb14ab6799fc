"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple


class LetterState(Enum):
    """Per-letter verdict of an evaluated guess."""
    IN_PLACE = "inplace"
    CORRECT = "correct"
    WRONG = "wrong"


class GamePhase(Enum):
    """Row-progression states of a single game."""
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class LetterVerdict:
    """Verdict for one position of a guess."""
    letter: str
    position: int
    state: LetterState

    def is_in_place(self) -> bool:
        return self.state is LetterState.IN_PLACE

    def is_correct(self) -> bool:
        return self.state is LetterState.CORRECT

    def is_wrong(self) -> bool:
        return self.state is LetterState.WRONG


@dataclass(frozen=True)
class AttemptState:
    """Active row index and the number of rows available."""
    current_row: int
    max_rows: int


@dataclass(frozen=True)
class GuessOutcome:
    """Result of a successful guess submission."""
    verdicts: Tuple[LetterVerdict, ...]
    new_confirmed: FrozenSet[int]
    phase: GamePhase
    row: int
    next_row: Optional[int] = None
    prefilled: Dict[int, str] = field(default_factory=dict)  # position -> secret letter, for next_row

    @property
    def is_terminal(self) -> bool:
        return self.phase is not GamePhase.AWAITING_GUESS


@dataclass(frozen=True)
class HintOutcome:
    """A revealed hint position and the remaining hint budget."""
    position: int
    letter: str
    hints_used: int
    hints_remaining: int


@dataclass
class GameState:
    """Serializable game state returned to clients."""
    game_id: str
    phase: str
    current_row: int
    max_rows: int
    word_length: int
    game_over: bool
    won: bool
    confirmed_positions: List[int]
    hints_used: int
    max_hints: int
    board: Dict
    answer: Optional[str] = None  # Only included when game is over
