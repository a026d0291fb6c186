r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long the retry executor sleeps
    before the next attempt of a request.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before the next attempt.

        Args:
            attempt: The attempt that just failed (0-indexed).
                ``attempt=0`` is the initial request.

        Returns:
            The delay in seconds.
        """
