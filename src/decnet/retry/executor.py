r"""Asynchronous retry executor.

This module provides the ``RetryExecutor`` class and the ``with_retry``
helper that run an async attempt function under a ``RetryPolicy``.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "with_retry"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from decnet.retry.policy import RetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Runs async attempts with bounded exponential backoff.

    The executor makes up to ``max_retries + 1`` attempts. After a failed
    attempt it asks ``policy.should_retry``; non-retryable errors are
    raised immediately. Retryable errors are followed by
    ``asyncio.sleep(policy.delay(attempt))`` unless the budget is
    exhausted, in which case the last error is raised.

    Cancellation is not intercepted: ``asyncio.CancelledError`` is not an
    ``Exception`` and propagates from the attempt or from the sleep.

    Args:
        policy: The retry policy.

    Example:
        ```pycon
        >>> import asyncio
        >>> from decnet.retry import RetryExecutor, RetryPolicy
        >>> async def fetch() -> str:
        ...     return "ok"
        ...
        >>> asyncio.run(RetryExecutor(RetryPolicy()).execute(fetch))
        'ok'

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    async def execute(self, attempt: Callable[[], Awaitable[T]]) -> T:
        """Run ``attempt`` until it succeeds or the policy gives up.

        Args:
            attempt: Async function performing one attempt. It is called
                again from scratch for every retry.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The error of the last attempt, when it is not
                retryable or when all retries are exhausted.
        """
        max_retries = self.policy.max_retries
        for number in range(max_retries + 1):
            try:
                return await attempt()
            except Exception as exc:
                if not self.policy.should_retry(exc):
                    logger.debug(
                        f"Attempt {number + 1}/{max_retries + 1} failed with "
                        f"non-retryable {type(exc).__name__}: {exc}"
                    )
                    raise
                if number == max_retries:
                    logger.debug(
                        f"Attempt {number + 1}/{max_retries + 1} failed with "
                        f"{type(exc).__name__}, retries exhausted"
                    )
                    raise
                delay = self.policy.delay(number)
                logger.debug(
                    f"Attempt {number + 1}/{max_retries + 1} failed with "
                    f"{type(exc).__name__}: {exc}. Retrying in {delay:.2f}s"
                )
            await asyncio.sleep(delay)
        msg = "retry loop exited without a result"  # pragma: no cover
        raise RuntimeError(msg)


async def with_retry(policy: RetryPolicy, attempt: Callable[[], Awaitable[T]]) -> T:
    """Run ``attempt`` under ``policy``.

    Args:
        policy: The retry policy.
        attempt: Async function performing one attempt.

    Returns:
        The result of the first successful attempt.

    Example:
        ```pycon
        >>> import asyncio
        >>> from decnet.retry import RetryPolicy, with_retry
        >>> async def fetch() -> int:
        ...     return 42
        ...
        >>> asyncio.run(with_retry(RetryPolicy(max_retries=1), fetch))
        42

        ```
    """
    return await RetryExecutor(policy).execute(attempt)
