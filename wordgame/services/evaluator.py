"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm with correct handling of
duplicate letters.
"""

from typing import List, Optional, Sequence, Union

from ..models.errors import LengthMismatchError
from ..models.game import LetterState, LetterVerdict

Letters = Union[str, Sequence[str]]


def evaluate(secret: Letters, guess: Letters) -> List[LetterVerdict]:
    """
    Evaluates a guess against the secret, one verdict per guess position.

    Exact matches are resolved first so a correctly placed letter can never
    be claimed by an earlier displaced copy of the same letter. Displaced
    letters then consume the left-most unconsumed matching secret position.

    Args:
        secret: The hidden word
        guess: The guessed word or row of cells

    Returns:
        List[LetterVerdict]: Verdicts in guess order

    Raises:
        LengthMismatchError: If secret and guess differ in length
    """
    secret_chars = [(char or '').upper() for char in secret]
    guess_chars = [(char or '').upper() for char in guess]

    if len(secret_chars) != len(guess_chars):
        raise LengthMismatchError(
            f"Guess length must be {len(secret_chars)}, got {len(guess_chars)}"
        )

    states: List[Optional[LetterState]] = [None] * len(guess_chars)
    consumed = [False] * len(secret_chars)

    # First pass: exact position matches
    for i, letter in enumerate(guess_chars):
        if letter and letter == secret_chars[i]:
            states[i] = LetterState.IN_PLACE
            consumed[i] = True

    # Second pass: displaced letters take the left-most unconsumed match
    for i, letter in enumerate(guess_chars):
        if states[i] is not None:
            continue

        if not letter.strip():
            states[i] = LetterState.WRONG
            continue

        found = next(
            (j for j, char in enumerate(secret_chars) if not consumed[j] and char == letter),
            None
        )
        if found is None:
            states[i] = LetterState.WRONG
        else:
            states[i] = LetterState.CORRECT
            consumed[found] = True

    return [LetterVerdict(letter, i, state) for i, (letter, state) in enumerate(zip(guess_chars, states))]
