r"""Utilities for logging requests and preparing request bodies."""

from __future__ import annotations

__all__ = ["LogLevel", "RequestLogger", "as_params"]

from decnet.utils.params import as_params
from decnet.utils.request_logger import LogLevel, RequestLogger
