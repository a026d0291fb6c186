r"""Configuration dataclass and defaults for DecNetClient.

This module provides configuration constants and a dataclass-based
configuration object for the ``DecNetClient`` async context manager.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
]

from dataclasses import dataclass, field, replace
from typing import Any

from decnet.core.validation import validate_timeout
from decnet.retry.policy import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    RetryPolicy,
)
from decnet.utils.request_logger import LogLevel

# Default timeout in seconds of the default httpx transport
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a DecNetClient.

    Args:
        log_level: Level of the request/response logs.
        retry_policy: Retry policy shared by every request of the client.
        timeout: Timeout in seconds of the default httpx transport. It is
            not used when a transport is passed to the client. Must be > 0.

    Example:
        ```pycon
        >>> from decnet.core.config import ClientConfig
        >>> from decnet.retry import RetryPolicy
        >>> config = ClientConfig()
        >>> config.retry_policy.max_retries
        3
        >>> config.log_level
        <LogLevel.DEBUG: 'debug'>
        >>> merged = config.merge(retry_policy=RetryPolicy(max_retries=5))
        >>> merged.retry_policy.max_retries
        5
        >>> config.retry_policy.max_retries  # Original unchanged
        3

        ```
    """

    log_level: LogLevel = LogLevel.DEBUG
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from decnet.core.config import ClientConfig
            >>> from decnet.utils.request_logger import LogLevel
            >>> config = ClientConfig()
            >>> config.merge(log_level=LogLevel.OFF, timeout=None).timeout
            10.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.

        Example:
            ```pycon
            >>> from decnet.core.config import ClientConfig
            >>> ClientConfig(timeout=30.0).to_dict()["timeout"]
            30.0

            ```
        """
        return {
            "log_level": self.log_level,
            "retry_policy": self.retry_policy,
            "timeout": self.timeout,
        }
