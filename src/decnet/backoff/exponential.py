r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from decnet.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with a hard ceiling.

    Calculates delay as ``min(base_delay * 2 ** attempt, max_delay)``.
    No jitter is applied.

    Args:
        base_delay: Delay in seconds after the initial attempt fails.
            Must be > 0.
        max_delay: Upper bound of any single delay in seconds. Must be > 0.

    Example:
        ```pycon
        >>> from decnet.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=10.0)
        >>> [backoff.calculate(attempt) for attempt in range(5)]
        [1.0, 2.0, 4.0, 8.0, 10.0]

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float = 10.0) -> None:
        if base_delay <= 0:
            msg = f"base_delay must be > 0, got {base_delay}"
            raise ValueError(msg)
        if max_delay <= 0:
            msg = f"max_delay must be > 0, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_delay={self.base_delay}, max_delay={self.max_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The attempt that just failed (0-indexed).

        Returns:
            ``base_delay * 2 ** attempt`` capped at ``max_delay``.
        """
        return min(self.base_delay * (2**attempt), self.max_delay)
