r"""Backoff strategies for retry delays."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from decnet.backoff.base import BaseBackoffStrategy
from decnet.backoff.exponential import ExponentialBackoff
