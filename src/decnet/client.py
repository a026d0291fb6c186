r"""Asynchronous client for declarative requests.

This module provides ``DecNetClient``, which binds a base URL, a
configuration and a transport, and executes ``Request`` descriptors
with automatic retry logic.
"""

from __future__ import annotations

__all__ = ["DecNetClient"]

import logging
from typing import TYPE_CHECKING, Any

from decnet.builder import build_request
from decnet.codec import JsonCodec
from decnet.core.config import ClientConfig
from decnet.core.validation import validate_base_url
from decnet.dispatcher import Dispatcher
from decnet.retry import RetryExecutor
from decnet.transport import HttpxTransport
from decnet.utils.request_logger import RequestLogger

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from decnet.codec import Codec
    from decnet.request import Request
    from decnet.transport import Transport
    from decnet.wire import WireRequest

logger: logging.Logger = logging.getLogger(__name__)


class DecNetClient:
    r"""Asynchronous client executing request descriptors.

    Each call to ``request`` builds the wire request once up front, so
    contract violations raise ``BuildError`` before any network
    activity. Every retry then rebuilds the wire request from the same
    descriptor; multipart requests get a new boundary on each attempt.

    Args:
        base_url: Absolute URL every request path is appended to.
        config: Optional ClientConfig. If ``None``, a default
            ClientConfig is used.
        transport: Transport used to send requests. If ``None``, an
            ``HttpxTransport`` is created with ``config.timeout`` and
            closed with the client.
        codec: Codec used to encode JSON bodies and decode responses.
            Defaults to ``JsonCodec``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from dataclasses import dataclass
        >>> from decnet import DecNetClient, Request
        >>> @dataclass
        ... class User:
        ...     id: int
        ...     name: str
        ...
        >>> async def main():  # doctest: +SKIP
        ...     async with DecNetClient("https://api.example.com") as client:
        ...         return await client.request(Request(path="/users/1", decode_target=User))
        ...
        >>> asyncio.run(main())  # doctest: +SKIP
        User(id=1, name='A')

        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        codec: Codec | None = None,
    ) -> None:
        validate_base_url(base_url)
        self.base_url = base_url
        self._config = config if config is not None else ClientConfig()

        self._owns_transport = transport is None
        self._transport: Transport = (
            transport if transport is not None else HttpxTransport(timeout=self._config.timeout)
        )
        self._codec: Codec = codec if codec is not None else JsonCodec()
        self._dispatcher = Dispatcher(
            transport=self._transport,
            codec=self._codec,
            request_logger=RequestLogger(self._config.log_level),
        )
        self._executor = RetryExecutor(self._config.retry_policy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, config={self._config})"

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if the client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def build(self, request: Request) -> WireRequest:
        """Build the wire request of a descriptor against the base URL.

        Args:
            request: The request descriptor.

        Returns:
            The wire request.

        Raises:
            BuildError: If the descriptor cannot be built.
        """
        return build_request(request, self.base_url, codec=self._codec)

    async def request(self, request: Request) -> Any:
        r"""Execute a request descriptor with automatic retry logic.

        Args:
            request: The request descriptor.

        Returns:
            The response decoded into ``request.decode_target``, or
            ``None`` if it has no decode target.

        Raises:
            BuildError: If the descriptor cannot be built. Never retried.
            DecError: The classified error of the last attempt.

        Example:
            ```pycon
            >>> import asyncio
            >>> from decnet import DecNetClient, Request
            >>> from decnet.transport import TransportResponse
            >>> class StaticTransport:
            ...     async def send(self, request):
            ...         return TransportResponse(200, b'{"status": "up"}')
            ...
            >>> client = DecNetClient("https://api.example.com", transport=StaticTransport())
            >>> asyncio.run(client.request(Request(path="/health", decode_target=dict)))
            {'status': 'up'}

            ```
        """
        pending = [self.build(request)]

        async def attempt() -> Any:
            wire_request = pending.pop() if pending else self.build(request)
            return await self._dispatcher.dispatch(wire_request, request.decode_target)

        return await self._executor.execute(attempt)
