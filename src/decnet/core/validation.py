r"""Parameter validation utilities for client and retry configuration.

This module provides validation functions used by the configuration
dataclasses to reject invalid values at construction time.
"""

from __future__ import annotations

__all__ = ["validate_base_url", "validate_retry_params", "validate_timeout"]


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses. Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from decnet.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(max_retries: int, base_delay: float, max_delay: float) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0. A value of 0 means only the initial attempt.
        base_delay: Delay in seconds after the initial attempt fails.
            Must be > 0.
        max_delay: Upper bound of any single delay in seconds. Must be > 0.

    Raises:
        ValueError: If max_retries is negative or a delay is non-positive.

    Example:
        ```pycon
        >>> from decnet.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, base_delay=1.0, max_delay=10.0)
        >>> validate_retry_params(max_retries=-1, base_delay=1.0, max_delay=10.0)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if base_delay <= 0:
        msg = f"base_delay must be > 0, got {base_delay}"
        raise ValueError(msg)
    if max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)


def validate_base_url(base_url: str) -> None:
    """Validate the base URL of a client.

    Only emptiness is checked here. Whether the URL is absolute is
    checked by the request builder, which reports it as a
    ``BuildError`` on the request that uses it.

    Args:
        base_url: The base URL.

    Raises:
        ValueError: If base_url is empty.
    """
    if not base_url:
        msg = "base_url must not be empty"
        raise ValueError(msg)
