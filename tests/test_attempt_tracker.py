"""
Testing row progression, win/loss detection and hints.
"""

import pytest

from wordgame.models.errors import (
    GameOverError, HintExhaustedError, RowNotFullError, SecretNotSetError, ValidationError
)
from wordgame.models.game import AttemptState, GamePhase, LetterState
from wordgame.services.attempt_tracker import AttemptTracker


def snapshot(tracker):
    return (tracker.current_row, tracker.phase, tracker.confirmed_positions,
            tracker.hints_used, tracker.secret)


def test_initial_state():
    tracker = AttemptTracker()
    assert tracker.current_row == 0
    assert tracker.phase is GamePhase.AWAITING_GUESS
    assert tracker.confirmed_positions == frozenset()
    assert tracker.attempt_state == AttemptState(0, 6)
    assert tracker.secret is None


@pytest.mark.parametrize("word", ["", "   ", "PLANE", "PLANETS", "PLAN3T", "PLA ET"])
def test_invalid_secret_rejected(word):
    tracker = AttemptTracker(word_length=6)
    with pytest.raises(ValidationError):
        tracker.set_secret(word)
    assert tracker.secret is None


def test_secret_is_uppercased():
    tracker = AttemptTracker(word_length=6)
    tracker.set_secret("  planet ")
    assert tracker.secret == "PLANET"


def test_submit_without_secret():
    tracker = AttemptTracker()
    with pytest.raises(SecretNotSetError):
        tracker.submit_guess("PLANET")
    assert tracker.current_row == 0


def test_win_on_first_row(tracker):
    outcome = tracker.submit_guess("planet")
    assert outcome.phase is GamePhase.WON
    assert outcome.is_terminal
    assert outcome.next_row is None
    assert tracker.phase is GamePhase.WON
    assert tracker.confirmed_positions == frozenset(range(6))


def test_win_on_last_row(tracker):
    for _ in range(5):
        tracker.submit_guess("ZZZZZZ")
    assert tracker.current_row == 5
    outcome = tracker.submit_guess("PLANET")
    assert outcome.phase is GamePhase.WON
    assert outcome.row == 5


def test_loss_after_max_rows(tracker):
    for row in range(6):
        outcome = tracker.submit_guess("ZZZZZZ")
        assert outcome.row == row
    assert outcome.phase is GamePhase.LOST
    assert tracker.phase is GamePhase.LOST
    assert tracker.current_row == 5

    before = snapshot(tracker)
    with pytest.raises(GameOverError):
        tracker.submit_guess("PLANET")
    assert snapshot(tracker) == before


@pytest.mark.parametrize("guess", ["PLANE", "", ["P", "L", "A", "", "E", "T"], "PLA ET"])
def test_row_not_full_leaves_state_unchanged(tracker, guess):
    tracker.submit_guess("PLAINS")
    before = snapshot(tracker)
    with pytest.raises(RowNotFullError):
        tracker.submit_guess(guess)
    assert snapshot(tracker) == before


def test_row_not_full_is_a_validation_error(tracker):
    with pytest.raises(ValidationError):
        tracker.submit_guess("PLA")


def test_too_long_and_non_letters_rejected(tracker):
    with pytest.raises(ValidationError) as excinfo:
        tracker.submit_guess("PLANETS")
    assert not isinstance(excinfo.value, RowNotFullError)

    with pytest.raises(ValidationError):
        tracker.submit_guess("PL4NET")
    assert tracker.current_row == 0


def test_carry_forward_of_confirmed_positions(tracker):
    outcome = tracker.submit_guess("PLAINS")
    assert [v.state for v in outcome.verdicts] == [
        LetterState.IN_PLACE, LetterState.IN_PLACE, LetterState.IN_PLACE,
        LetterState.WRONG, LetterState.CORRECT, LetterState.WRONG,
    ]
    assert outcome.new_confirmed == frozenset({0, 1, 2})
    assert outcome.next_row == 1
    assert outcome.prefilled == {0: "P", 1: "L", 2: "A"}

    outcome = tracker.submit_guess("PLANTS")
    assert outcome.new_confirmed == frozenset({3})
    assert outcome.prefilled == {0: "P", 1: "L", 2: "A", 3: "N"}
    assert tracker.prefilled_cells() == outcome.prefilled


def test_confirmed_positions_only_grow(tracker):
    tracker.submit_guess("PLAINS")
    outcome = tracker.submit_guess("ZZZZZZ")
    assert outcome.new_confirmed == frozenset()
    assert tracker.confirmed_positions == frozenset({0, 1, 2})

    # re-confirming the same positions does not count them again
    outcome = tracker.submit_guess("PLAINS")
    assert outcome.new_confirmed == frozenset()
    assert len(tracker.confirmed_positions) == 3


def test_reset(tracker):
    tracker.submit_guess("PLAINS")
    tracker.reveal_hint()
    tracker.reset()

    assert tracker.current_row == 0
    assert tracker.phase is GamePhase.AWAITING_GUESS
    assert tracker.confirmed_positions == frozenset()
    assert tracker.hints_used == 0
    assert tracker.secret is None
    with pytest.raises(SecretNotSetError):
        tracker.submit_guess("PLANET")


def test_reset_after_loss_allows_new_game(tracker):
    for _ in range(6):
        tracker.submit_guess("ZZZZZZ")
    tracker.reset()
    tracker.set_secret("STREAM")
    assert tracker.submit_guess("STREAM").phase is GamePhase.WON


def test_five_letter_game():
    tracker = AttemptTracker(word_length=5, max_rows=2)
    tracker.set_secret("CRANE")
    outcome = tracker.submit_guess("TRACE")
    assert outcome.new_confirmed == frozenset({1, 2, 4})
    assert outcome.prefilled == {1: "R", 2: "A", 4: "E"}
    assert tracker.submit_guess("TRACE").phase is GamePhase.LOST


def test_is_row_full(tracker):
    assert tracker.is_row_full("PLANET")
    assert tracker.is_row_full(["p", "l", "a", "n", "e", "t"])
    assert not tracker.is_row_full(["P", "L", "A", "N", "E", ""])
    assert not tracker.is_row_full("PLAN")


@pytest.mark.parametrize("kwargs", [
    {"word_length": 0}, {"max_rows": 0}, {"max_hints": -1},
])
def test_invalid_dimensions(kwargs):
    with pytest.raises(ValueError):
        AttemptTracker(**kwargs)


def test_hint_reveals_leftmost_unconfirmed(tracker):
    assert tracker.next_hint_position() == 0
    tracker.submit_guess("PLZZZZ")
    assert tracker.next_hint_position() == 2

    hint = tracker.reveal_hint()
    assert (hint.position, hint.letter) == (2, "A")
    assert hint.hints_used == 1
    assert hint.hints_remaining == 2
    assert 2 in tracker.confirmed_positions
    assert tracker.next_hint_position() == 3


def test_hinted_positions_are_carried_forward(tracker):
    tracker.reveal_hint()
    outcome = tracker.submit_guess("ZZZZZZ")
    assert outcome.prefilled == {0: "P"}


def test_hints_exhausted(tracker):
    for _ in range(3):
        tracker.reveal_hint()
    before = snapshot(tracker)
    with pytest.raises(HintExhaustedError):
        tracker.reveal_hint()
    assert snapshot(tracker) == before


def test_no_hint_when_everything_confirmed():
    tracker = AttemptTracker(word_length=6, max_rows=6, max_hints=10)
    tracker.set_secret("PLANET")
    for _ in range(6):
        tracker.reveal_hint()
    assert tracker.next_hint_position() is None
    assert tracker.reveal_hint() is None
    assert tracker.hints_used == 6


def test_hint_requires_active_game(tracker):
    with pytest.raises(SecretNotSetError):
        AttemptTracker().reveal_hint()

    tracker.submit_guess("PLANET")
    with pytest.raises(GameOverError):
        tracker.reveal_hint()
