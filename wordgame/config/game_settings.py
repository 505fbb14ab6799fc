"""
Game Configuration Constants Module

This module defines the game rules: board dimensions, hint budget and the
fallback answer, plus the word normalisation and validation used wherever
a secret or guess enters the core.
"""

from typing import Final, Iterable, List, Union

from ..models.errors import ValidationError

WORD_LENGTH: Final[int] = 6
"""
Number of letters in the secret word and in every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ROWS: Final[int] = 6
"""
Maximum number of guess attempts (rows) allowed per game.
"""

MAX_HINT_COUNT: Final[int] = 3
"""
Maximum number of hints a player may reveal per game.
"""

HINT_MESSAGE_TIMEOUT_MS: Final[int] = 3000
"""
How long the display should keep a hint message visible, in milliseconds.
"""

FALLBACK_SECRET: Final[str] = "WORDLE"
"""
Answer used by the application when the Answer Source cannot supply one.
"""


def normalize_letters(letters: Union[str, Iterable[str]]) -> List[str]:
    """
    Normalises a word or a row of cell values to a list of uppercase cells.

    Blank cells are kept as empty strings so callers can tell a short row
    from a full one.
    """
    if isinstance(letters, str):
        letters = list(letters.strip())
    return [(cell or '').strip().upper() for cell in letters]


def validate_word(word: str, length: int) -> str:
    """
    Validates a word for use as a secret.

    Args:
        word: Candidate word, any case
        length: Required number of letters

    Returns:
        str: The word in uppercase

    Raises:
        ValidationError: If the word is empty, has the wrong length or
            contains non-alphabetic characters
    """
    if not word or not isinstance(word, str):
        raise ValidationError("Word must be a non-empty string")

    normalized = word.strip().upper()

    if not normalized:
        raise ValidationError("Word cannot be empty")

    if len(normalized) != length:
        raise ValidationError(f"Word length must be {length}, got {len(normalized)}")

    if not (normalized.isalpha() and normalized.isascii()):
        raise ValidationError(f"Word '{normalized}' contains non-alphabetic characters")

    return normalized
