r"""Retry policy: how many times to retry, how long to wait, and which
errors are worth retrying."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "RETRYABLE_ERRORS",
    "RetryPolicy",
    "is_retryable_error",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from decnet.backoff.exponential import ExponentialBackoff
from decnet.core.validation import validate_retry_params
from decnet.exceptions import NetworkError, ServerError, ServiceUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

# Default maximum number of retries
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Default delays in seconds
# Wait time = min(base_delay * (2 ** attempt), max_delay)
# With 1.0 and 10.0: 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_BASE_DELAY = 1.0
DEFAULT_MAX_DELAY = 10.0

# Errors retried by the default predicate
RETRYABLE_ERRORS = (ServerError, ServiceUnavailableError, NetworkError)


def is_retryable_error(error: Exception) -> bool:
    """Return whether an error is transient.

    Args:
        error: The error raised by an attempt.

    Returns:
        ``True`` for server errors, service unavailable errors and
        network errors, ``False`` otherwise.

    Example:
        ```pycon
        >>> from decnet.exceptions import NotFoundError, ServiceUnavailableError
        >>> from decnet.retry import is_retryable_error
        >>> is_retryable_error(ServiceUnavailableError())
        True
        >>> is_retryable_error(NotFoundError())
        False

        ```
    """
    return isinstance(error, RETRYABLE_ERRORS)


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry policy shared by all requests of a client.

    Args:
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0.
        base_delay: Delay in seconds after the initial attempt fails.
            Must be > 0.
        max_delay: Upper bound of any single delay in seconds. Must be > 0.
        should_retry: Predicate deciding whether an error is retried.
            Defaults to ``is_retryable_error``.

    Example:
        ```pycon
        >>> from decnet.retry import RetryPolicy
        >>> policy = RetryPolicy()
        >>> [policy.delay(attempt) for attempt in range(5)]
        [1.0, 2.0, 4.0, 8.0, 10.0]
        >>> RetryPolicy(max_retries=0).max_retries
        0

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    should_retry: Callable[[Exception], bool] = is_retryable_error

    def __post_init__(self) -> None:
        validate_retry_params(
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
        )

    @property
    def backoff(self) -> ExponentialBackoff:
        return ExponentialBackoff(base_delay=self.base_delay, max_delay=self.max_delay)

    def delay(self, attempt: int) -> float:
        """Return the delay in seconds after ``attempt`` failed.

        Args:
            attempt: The attempt that just failed (0-indexed).

        Returns:
            ``min(base_delay * 2 ** attempt, max_delay)``.
        """
        return self.backoff.calculate(attempt)
