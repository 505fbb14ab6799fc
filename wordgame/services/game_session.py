"""
Game Session

Connects one AttemptTracker to one Display. The display layer sends
discrete intents to ``dispatch``; the session applies them to the tracker
and pushes the results back to the display.
"""

from typing import Callable, Optional

from ..config.game_settings import HINT_MESSAGE_TIMEOUT_MS
from ..models.game import GamePhase, GuessOutcome, HintOutcome
from ..models.intents import (
    CellChanged, Direction, HintRequested, NavigateRequested, RestartRequested, SubmitRequested
)
from ..views.board import Display
from .attempt_tracker import AttemptTracker


class GameSession:
    """
    Single game played on a single display.

    Args:
        tracker: State machine holding the secret and row progression
        display: Presentation layer to drive
        secret_provider: Called with the word length to obtain a new secret
            on start and restart
    """

    def __init__(self, tracker: AttemptTracker, display: Display,
                 secret_provider: Callable[[int], str]):
        self.tracker = tracker
        self.display = display
        self.secret_provider = secret_provider
        self._handlers = {
            CellChanged: self._on_cell_changed,
            NavigateRequested: self._on_navigate,
            SubmitRequested: self._on_submit,
            HintRequested: self._on_hint,
            RestartRequested: self._on_restart,
        }

    def start(self, secret: Optional[str] = None) -> None:
        """Sets the secret (fetching one if not given) and opens row 0."""
        if secret is None:
            secret = self.secret_provider(self.tracker.word_length)
        self.tracker.set_secret(secret)

        self.display.enable_row(0)
        self.display.set_submit_enabled(False)
        self.display.set_hint_enabled(self.tracker.max_hints > 0)
        self.display.focus_cell(0, 0)

    def dispatch(self, intent):
        """
        Applies one display intent.

        Returns the GuessOutcome or HintOutcome for submit and hint intents,
        None otherwise. Errors from the tracker propagate unchanged.
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {type(intent).__name__}")
        return handler(intent)

    def _on_cell_changed(self, intent: CellChanged) -> None:
        row = self.tracker.current_row
        if self.tracker.is_over or intent.row != row:
            return
        if not 0 <= intent.col < self.tracker.word_length:
            return
        if self.display.is_cell_locked(row, intent.col):
            return

        letters = [char for char in (intent.value or '') if char.isalpha() and char.isascii()]
        value = letters[0].upper() if letters else ''
        self.display.set_cell(row, intent.col, value)

        if value:
            self._move_focus(row, intent.col, Direction.FORWARD)

        self.display.set_submit_enabled(self.tracker.is_row_full(self.display.get_row_values(row)))

    def _on_navigate(self, intent: NavigateRequested) -> None:
        if self.tracker.is_over or intent.row != self.tracker.current_row:
            return
        self._move_focus(intent.row, intent.col, intent.direction)

    def _on_submit(self, intent: SubmitRequested) -> GuessOutcome:
        row = self.tracker.current_row
        guess = self.display.get_row_values(row)

        outcome = self.tracker.submit_guess(guess)

        for verdict in outcome.verdicts:
            self.display.apply_verdict(row, verdict)
        self.display.disable_row(row)
        self.display.set_submit_enabled(False)

        answer = self.tracker.secret.lower()
        if outcome.phase is GamePhase.WON:
            self.display.show_message(f"You Won! The word was {answer}")
            self.display.set_hint_enabled(False)
        elif outcome.phase is GamePhase.LOST:
            self.display.show_message(f"You Lost! The word was {answer}")
            self.display.set_hint_enabled(False)
        else:
            self.display.enable_row(outcome.next_row)
            for col, letter in outcome.prefilled.items():
                self.display.prefill_cell(outcome.next_row, col, letter)
            self._focus_first_editable(outcome.next_row)

        return outcome

    def _on_hint(self, intent: HintRequested) -> Optional[HintOutcome]:
        outcome = self.tracker.reveal_hint()
        row = self.tracker.current_row

        if outcome is None:
            self.display.show_message("No more hints available", HINT_MESSAGE_TIMEOUT_MS)
            return None

        self.display.prefill_cell(row, outcome.position, outcome.letter)
        self.display.show_message(
            f"Hint: letter {outcome.letter} is at position {outcome.position + 1}",
            HINT_MESSAGE_TIMEOUT_MS
        )
        if outcome.hints_remaining == 0:
            self.display.set_hint_enabled(False)
        self.display.set_submit_enabled(self.tracker.is_row_full(self.display.get_row_values(row)))
        self._focus_first_editable(row)
        return outcome

    def _on_restart(self, intent: RestartRequested) -> None:
        self.tracker.reset()
        self.display.reset()
        self.start()

    def _move_focus(self, row: int, col: int, direction: Direction) -> None:
        step = 1 if direction is Direction.FORWARD else -1
        target = col + step
        while 0 <= target < self.tracker.word_length:
            if not self.display.is_cell_locked(row, target):
                self.display.focus_cell(row, target)
                return
            target += step

    def _focus_first_editable(self, row: int) -> None:
        for col in range(self.tracker.word_length):
            if not self.display.is_cell_locked(row, col):
                self.display.focus_cell(row, col)
                return
