r"""HTTP transport abstraction.

The client never talks to the network directly. It hands fully built
``WireRequest`` objects to a ``Transport`` and gets ``TransportResponse``
objects back. ``HttpxTransport`` is the default implementation; tests
can pass any object with a compatible ``send`` coroutine.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport", "TransportError", "TransportResponse"]

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import httpx

from decnet.core.validation import validate_timeout

if TYPE_CHECKING:
    from decnet.wire import WireRequest

logger: logging.Logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when a request fails before a response is received.

    Args:
        message: Description of the failure.
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response returned by a transport.

    Attributes:
        status_code: The HTTP status code.
        content: The raw response body.
        headers: The response headers.
    """

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Protocol of the HTTP transports used by the client.

    Implementations must be safe for concurrent use.
    """

    async def send(self, request: WireRequest) -> TransportResponse:
        """Send a request and return the raw response.

        Args:
            request: The wire request.

        Returns:
            The raw response, whatever its status code.

        Raises:
            TransportError: If no response could be obtained.
        """
        ...


class HttpxTransport:
    r"""Transport backed by ``httpx.AsyncClient``.

    Redirects are followed. Connection errors and timeouts are raised as
    ``TransportError``.

    Args:
        timeout: Timeout in seconds of the client created when ``client``
            is ``None``. Must be > 0.
        client: An existing ``httpx.AsyncClient``. It is not closed by
            ``aclose`` since the caller owns it.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from decnet.request import HttpMethod
        >>> from decnet.transport import HttpxTransport
        >>> from decnet.wire import WireRequest
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
        >>> transport = HttpxTransport(client=httpx.AsyncClient(transport=mock))
        >>> response = asyncio.run(
        ...     transport.send(WireRequest(HttpMethod.GET, "https://api.example.com/ping"))
        ... )
        >>> response.status_code
        200

        ```
    """

    def __init__(self, *, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        if client is None:
            validate_timeout(timeout)
            client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    async def send(self, request: WireRequest) -> TransportResponse:
        try:
            response = await self._client.request(
                method=request.method.value,
                url=request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as exc:
            logger.debug(f"{request.method.value} request to {request.url} timed out: {exc}")
            msg = f"{request.method.value} request to {request.url} timed out"
            raise TransportError(msg, cause=exc) from exc
        except httpx.RequestError as exc:
            error_type = type(exc).__name__
            logger.debug(
                f"{request.method.value} request to {request.url} encountered {error_type}: {exc}"
            )
            msg = f"{request.method.value} request to {request.url} failed: {exc}"
            raise TransportError(msg, cause=exc) from exc
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
