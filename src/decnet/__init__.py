r"""decnet - Declarative, typed HTTP requests with automatic retries.

Endpoints are described as ``Request`` values. ``DecNetClient`` turns
them into HTTP requests, sends them with httpx, maps error statuses to
typed exceptions, decodes successful responses into the requested type
and retries transient failures with exponential backoff.

Key Features:
    - Declarative request descriptors (path, method, query, headers, body)
    - JSON, URL-encoded and multipart/form-data bodies
    - Typed decoding of responses (dataclasses, pydantic models, ...)
    - Closed error taxonomy (``NotFoundError``, ``ServerError``, ...)
    - Exponential backoff retries for server, availability and network errors
    - Level-gated request/response logging with curl commands

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from decnet import DecNetClient, Request
    >>> from decnet.core.config import ClientConfig
    >>> from decnet.retry import RetryPolicy
    >>> @dataclass
    ... class User:
    ...     id: int
    ...     name: str
    ...     email: str
    ...
    >>> async def main():  # doctest: +SKIP
    ...     config = ClientConfig(retry_policy=RetryPolicy(max_retries=5))
    ...     async with DecNetClient("https://api.example.com", config=config) as client:
    ...         return await client.request(Request(path="/users/1", decode_target=User))
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "BadRequestError",
    "BuildError",
    "ClientConfig",
    "ClientError",
    "ContentType",
    "DecError",
    "DecNetClient",
    "DecodingFailedError",
    "ForbiddenError",
    "HttpMethod",
    "InvalidRequestError",
    "LogLevel",
    "MultipartPart",
    "NetworkError",
    "NotFoundError",
    "Request",
    "RetryPolicy",
    "ServerError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "UnknownError",
    "__version__",
    "as_params",
    "build_request",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from decnet.builder import build_request
from decnet.client import DecNetClient
from decnet.core.config import ClientConfig
from decnet.exceptions import (
    BadRequestError,
    BuildError,
    ClientError,
    DecError,
    DecodingFailedError,
    ForbiddenError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    ServerError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnknownError,
)
from decnet.request import ContentType, HttpMethod, MultipartPart, Request
from decnet.retry import RetryPolicy, with_retry
from decnet.utils import LogLevel, as_params

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
