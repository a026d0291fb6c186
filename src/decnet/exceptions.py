r"""Error taxonomy for decnet requests.

This module defines the closed set of errors a request can end with.
Every failure surfaced by the client is an instance of ``DecError``, so
callers can branch on the concrete subclass (or on ``error.kind``)
instead of inspecting opaque exceptions.

Example:
    ```pycon
    >>> from decnet.exceptions import NotFoundError, classify_status
    >>> error = classify_status(404, b'{"detail": "missing"}')
    >>> isinstance(error, NotFoundError)
    True
    >>> error == NotFoundError()
    True
    >>> classify_status(204, b"") is None
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "BadRequestError",
    "BuildError",
    "BuildErrorReason",
    "ClientError",
    "DecError",
    "DecodingFailedError",
    "ErrorKind",
    "ForbiddenError",
    "InvalidRequestError",
    "NetworkError",
    "NotFoundError",
    "ServerError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "UnknownError",
    "classify_status",
]

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of errors a request can end with."""

    INVALID_REQUEST = "invalid_request"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    DECODING_FAILED = "decoding_failed"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


class DecError(Exception):
    """Base class of all decnet errors.

    Two errors compare equal when they are of the same kind. The carried
    response body is ignored; subclasses that carry a discriminating
    payload (status code, message, cause) extend the comparison through
    ``_identity``.

    Args:
        message: Human readable description. Defaults to the class
            description.
        body: Raw response bytes, when the error comes from an HTTP
            response.
        status_code: HTTP status code, when the error comes from an HTTP
            response.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN
    description: str = "Unknown error"

    def __init__(
        self,
        message: str | None = None,
        *,
        body: bytes | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message if message is not None else self.description
        self.body = body
        self.status_code = status_code
        super().__init__(self.message)

    def _identity(self) -> tuple[Any, ...]:
        return (self.kind,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecError):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code})"


class InvalidRequestError(DecError):
    """Raised when a request cannot be turned into a wire request."""

    kind = ErrorKind.INVALID_REQUEST
    description = "Invalid request"


class BuildErrorReason(str, Enum):
    """Reasons a request descriptor fails to build."""

    INVALID_BASE_URL = "invalid_base_url"
    UNENCODABLE_VALUE = "unencodable_value"


class BuildError(InvalidRequestError):
    """Raised by the request builder for contract violations.

    Args:
        reason: Why the descriptor could not be built.
        message: Human readable description.
    """

    def __init__(self, reason: BuildErrorReason, message: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class BadRequestError(DecError):
    kind = ErrorKind.BAD_REQUEST
    description = "Bad request"


class UnauthorizedError(DecError):
    kind = ErrorKind.UNAUTHORIZED
    description = "Unauthorized"


class ForbiddenError(DecError):
    kind = ErrorKind.FORBIDDEN
    description = "Forbidden"


class NotFoundError(DecError):
    kind = ErrorKind.NOT_FOUND
    description = "Not found"


class ClientError(DecError):
    """Raised for 4xx statuses without a dedicated error class.

    Args:
        status_code: The HTTP status code.
        body: Raw response bytes.
    """

    kind = ErrorKind.CLIENT_ERROR
    description = "Client error"

    def __init__(self, status_code: int, body: bytes | None = None) -> None:
        super().__init__(f"Client error: {status_code}", body=body, status_code=status_code)

    def _identity(self) -> tuple[Any, ...]:
        return (self.kind, self.status_code)


class ServerError(DecError):
    kind = ErrorKind.SERVER_ERROR
    description = "Server error"


class ServiceUnavailableError(DecError):
    kind = ErrorKind.SERVICE_UNAVAILABLE
    description = "Service unavailable"


class DecodingFailedError(DecError):
    """Raised when a successful response body cannot be decoded.

    Args:
        reason: Description of the decoding failure.
    """

    kind = ErrorKind.DECODING_FAILED
    description = "Decoding failed"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Decoding failed: {reason}")
        self.reason = reason

    def _identity(self) -> tuple[Any, ...]:
        return (self.kind, self.reason)


class NetworkError(DecError):
    """Raised when the transport fails before a response is received.

    Args:
        cause: The underlying transport exception.
    """

    kind = ErrorKind.NETWORK_ERROR
    description = "Network error"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network error: {cause}")
        self.cause = cause

    def _identity(self) -> tuple[Any, ...]:
        return (self.kind, str(self.cause))


class UnknownError(DecError):
    kind = ErrorKind.UNKNOWN
    description = "Unknown error"


def classify_status(status_code: int, body: bytes | None = None) -> DecError | None:
    """Map an HTTP status code to an error.

    Args:
        status_code: The HTTP status code of the response.
        body: The raw response bytes, attached to the returned error.

    Returns:
        ``None`` for 2xx statuses, otherwise the matching error.

    Example:
        ```pycon
        >>> from decnet.exceptions import classify_status
        >>> classify_status(200) is None
        True
        >>> classify_status(429)
        ClientError(message='Client error: 429', status_code=429)
        >>> classify_status(502)
        ServerError(message='Server error', status_code=502)

        ```
    """
    if 200 <= status_code <= 299:
        return None
    if status_code == 400:
        return BadRequestError(body=body, status_code=status_code)
    if status_code == 401:
        return UnauthorizedError(body=body, status_code=status_code)
    if status_code == 403:
        return ForbiddenError(body=body, status_code=status_code)
    if status_code == 404:
        return NotFoundError(body=body, status_code=status_code)
    if 402 <= status_code <= 499:
        return ClientError(status_code, body=body)
    if status_code == 503:
        return ServiceUnavailableError(body=body, status_code=status_code)
    if 500 <= status_code <= 599:
        return ServerError(body=body, status_code=status_code)
    return UnknownError(body=body, status_code=status_code)
