"""
Game Errors

Exception hierarchy raised by the game core and the services around it.
Every core operation that raises leaves the game state as it was.
"""


class WordGameError(Exception):
    """Base class for all game errors."""


class ValidationError(WordGameError):
    """A secret or guess is malformed (empty, wrong length, non-alphabetic)."""


class LengthMismatchError(ValidationError):
    """Secret and guess handed to the evaluator differ in length."""


class RowNotFullError(ValidationError):
    """The submitted row is short or has a blank cell."""


class SecretNotSetError(WordGameError):
    """An operation needs the secret before one has been supplied."""


class GameOverError(WordGameError):
    """The game has been won or lost and accepts no further moves."""


class HintExhaustedError(WordGameError):
    """The configured maximum number of hints has already been used."""


class ExternalFetchError(WordGameError):
    """The Answer Source could not supply a valid secret."""


class FetchCancelledError(ExternalFetchError):
    """The secret fetch was cancelled before it completed."""


class GameNotFoundError(WordGameError):
    """No game session exists for the given id."""
