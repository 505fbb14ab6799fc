"""
Answer Source

Fetches the secret word from the random word API with a bounded retry
policy, per-attempt timeout and cooperative cancellation.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from ..config.game_settings import validate_word
from ..models.errors import ExternalFetchError, FetchCancelledError, ValidationError
from ..utils.game_logger import game_logger


def fixed_backoff(delay: float) -> Callable[[int], float]:
    """Same delay after every failed attempt."""
    return lambda attempt: delay


def linear_backoff(base: float) -> Callable[[int], float]:
    """Delay grows with the attempt number: base, 2*base, 3*base..."""
    return lambda attempt: base * attempt


def exponential_backoff(base: float, factor: float = 2.0) -> Callable[[int], float]:
    """Delay multiplies by factor after every failed attempt."""
    return lambda attempt: base * factor ** (attempt - 1)


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry policy: attempt count, per-attempt timeout and backoff."""
    max_attempts: int = 3
    timeout: float = 5.0
    backoff: Callable[[int], float] = linear_backoff(1.0)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given (1-based) failed attempt."""
        return max(0.0, self.backoff(attempt))


class AnswerSource:
    """
    HTTP client for the random word API.

    The secret is only returned once a response has fully validated, so a
    cancelled or failed fetch never leaves a partial word behind.
    """

    def __init__(self, api_url: str, policy: Optional[RetryPolicy] = None,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.policy = policy or RetryPolicy()
        self.session = session or requests.Session()

    def fetch_secret(self, length: int, cancel_event: Optional[threading.Event] = None) -> str:
        """
        Fetches a random word of the given length.

        Args:
            length: Required number of letters
            cancel_event: Set by another thread to abandon the fetch

        Returns:
            str: The word in uppercase

        Raises:
            FetchCancelledError: If cancel_event was set
            ExternalFetchError: If every attempt failed
        """
        cancel_event = cancel_event or threading.Event()
        last_error: Optional[Exception] = None

        for attempt in range(1, self.policy.max_attempts + 1):
            if cancel_event.is_set():
                raise FetchCancelledError("Secret fetch was cancelled")

            try:
                return self._fetch_once(length)
            except (requests.RequestException, ValueError, ValidationError) as e:
                last_error = e
                game_logger.logger.warning(
                    f"Answer fetch attempt {attempt}/{self.policy.max_attempts} failed: {e}"
                )

            if attempt < self.policy.max_attempts:
                if cancel_event.wait(self.policy.delay_for(attempt)):
                    raise FetchCancelledError("Secret fetch was cancelled")

        raise ExternalFetchError(
            f"Failed to fetch word after {self.policy.max_attempts} attempts: {last_error}"
        ) from last_error

    def _fetch_once(self, length: int) -> str:
        response = self.session.get(
            self.api_url,
            params={'length': length, 'number': 1},
            timeout=self.policy.timeout
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, list) or not data or not isinstance(data[0], str):
            raise ValueError("Invalid response from word API")

        return validate_word(data[0], length)


class StaticAnswerSource:
    """Answer source that always returns the same word."""

    def __init__(self, word: str):
        self.word = word

    def fetch_secret(self, length: int, cancel_event: Optional[threading.Event] = None) -> str:
        if cancel_event is not None and cancel_event.is_set():
            raise FetchCancelledError("Secret fetch was cancelled")
        try:
            return validate_word(self.word, length)
        except ValidationError as e:
            raise ExternalFetchError(str(e)) from e
