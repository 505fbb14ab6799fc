"""
Attempt Tracker

Row-progression state machine for a single game: owns the secret, the
active row, the positions confirmed so far and the hint budget.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Union

from ..config.game_settings import (
    MAX_HINT_COUNT, MAX_ROWS, WORD_LENGTH, normalize_letters, validate_word
)
from ..models.errors import (
    GameOverError, HintExhaustedError, RowNotFullError, SecretNotSetError, ValidationError
)
from ..models.game import (
    AttemptState, GamePhase, GuessOutcome, HintOutcome, LetterVerdict
)
from .evaluator import evaluate


class AttemptTracker:
    """
    Tracks one game from the first row to a win or loss.

    States are ``AWAITING_GUESS`` on rows ``0..max_rows-1``, then ``WON`` or
    ``LOST``. Failed operations raise without changing any state.
    """

    def __init__(self, word_length: int = WORD_LENGTH, max_rows: int = MAX_ROWS,
                 max_hints: int = MAX_HINT_COUNT):
        if word_length < 1:
            raise ValueError("word_length must be positive")
        if max_rows < 1:
            raise ValueError("max_rows must be positive")
        if max_hints < 0:
            raise ValueError("max_hints cannot be negative")

        self.word_length = word_length
        self.max_rows = max_rows
        self.max_hints = max_hints

        self._secret: Optional[str] = None
        self._current_row = 0
        self._phase = GamePhase.AWAITING_GUESS
        self._confirmed: Set[int] = set()
        self._hints_used = 0

    @property
    def secret(self) -> Optional[str]:
        return self._secret

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def attempt_state(self) -> AttemptState:
        return AttemptState(self._current_row, self.max_rows)

    @property
    def confirmed_positions(self) -> FrozenSet[int]:
        return frozenset(self._confirmed)

    @property
    def hints_used(self) -> int:
        return self._hints_used

    @property
    def hints_remaining(self) -> int:
        return self.max_hints - self._hints_used

    @property
    def is_over(self) -> bool:
        return self._phase is not GamePhase.AWAITING_GUESS

    def set_secret(self, word: str) -> None:
        """Validates and stores the secret for the current game."""
        self._secret = validate_word(word, self.word_length)

    def is_row_full(self, letters: Union[str, Iterable[str]]) -> bool:
        """True when the row has exactly word_length non-blank cells."""
        cells = normalize_letters(letters)
        return len(cells) == self.word_length and all(cells)

    def prefilled_cells(self) -> Dict[int, str]:
        """Confirmed positions mapped to the secret's letter, for the active row."""
        if self._secret is None:
            return {}
        return {index: self._secret[index] for index in sorted(self._confirmed)}

    def submit_guess(self, guess: Union[str, Iterable[str]]) -> GuessOutcome:
        """
        Evaluates a full row and advances the state machine.

        Args:
            guess: The guessed word or the row's cell values

        Returns:
            GuessOutcome with the verdicts, the positions newly confirmed by
            this guess, the resulting phase and, when play continues, the
            cells to pre-fill and lock in the next row

        Raises:
            GameOverError: If the game is already won or lost
            SecretNotSetError: If no secret has been supplied
            RowNotFullError: If the row is short or has a blank cell
            ValidationError: If the row is too long or has non-letters
        """
        self._require_playable()

        cells = normalize_letters(guess)
        if len(cells) > self.word_length:
            raise ValidationError(f"Guess length must be {self.word_length}, got {len(cells)}")
        if not self.is_row_full(cells):
            raise RowNotFullError("Please fill in every letter of the row")
        if not all(len(cell) == 1 and cell.isalpha() and cell.isascii() for cell in cells):
            raise ValidationError("Guess must contain only letters")

        verdicts: List[LetterVerdict] = evaluate(self._secret, cells)
        in_place = {verdict.position for verdict in verdicts if verdict.is_in_place()}
        new_confirmed = frozenset(in_place - self._confirmed)
        row = self._current_row

        self._confirmed |= in_place

        if ''.join(cells) == self._secret:
            self._phase = GamePhase.WON
        elif row == self.max_rows - 1:
            self._phase = GamePhase.LOST
        else:
            self._current_row = row + 1
            return GuessOutcome(
                verdicts=tuple(verdicts),
                new_confirmed=new_confirmed,
                phase=self._phase,
                row=row,
                next_row=self._current_row,
                prefilled=self.prefilled_cells()
            )

        return GuessOutcome(
            verdicts=tuple(verdicts),
            new_confirmed=new_confirmed,
            phase=self._phase,
            row=row
        )

    def next_hint_position(self) -> Optional[int]:
        """Left-most position not yet confirmed, or None when all are."""
        return next((i for i in range(self.word_length) if i not in self._confirmed), None)

    def reveal_hint(self) -> Optional[HintOutcome]:
        """
        Reveals the next unconfirmed position as if discovered by play.

        Returns:
            HintOutcome, or None when every position is already confirmed
            (no hint is spent in that case)

        Raises:
            GameOverError: If the game is already won or lost
            SecretNotSetError: If no secret has been supplied
            HintExhaustedError: If the hint budget is used up
        """
        self._require_playable()

        if self._hints_used >= self.max_hints:
            raise HintExhaustedError(f"All {self.max_hints} hints have been used")

        position = self.next_hint_position()
        if position is None:
            return None

        self._confirmed.add(position)
        self._hints_used += 1

        return HintOutcome(
            position=position,
            letter=self._secret[position],
            hints_used=self._hints_used,
            hints_remaining=self.hints_remaining
        )

    def reset(self) -> None:
        """Returns to row 0 with no secret, no confirmed positions and no hints used."""
        self._secret = None
        self._current_row = 0
        self._phase = GamePhase.AWAITING_GUESS
        self._confirmed.clear()
        self._hints_used = 0

    def _require_playable(self) -> None:
        if self.is_over:
            raise GameOverError(f"Game is already over ({self._phase.value})")
        if self._secret is None:
            raise SecretNotSetError("Answer has not been set")
