r"""Retry policy and orchestration."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "RETRYABLE_ERRORS",
    "RetryExecutor",
    "RetryPolicy",
    "is_retryable_error",
    "with_retry",
]

from decnet.retry.executor import RetryExecutor, with_retry
from decnet.retry.policy import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    RETRYABLE_ERRORS,
    RetryPolicy,
    is_retryable_error,
)
