r"""Dispatch of wire requests and classification of responses.

This module provides the ``Dispatcher`` class that sends one wire
request through the transport, maps non-2xx responses to the error
taxonomy and decodes successful bodies.
"""

from __future__ import annotations

__all__ = ["Dispatcher"]

import logging
from typing import TYPE_CHECKING, Any

from decnet.codec import JsonCodec
from decnet.exceptions import DecodingFailedError, NetworkError, classify_status
from decnet.transport import TransportError
from decnet.utils.request_logger import RequestLogger

if TYPE_CHECKING:
    from decnet.codec import Codec
    from decnet.transport import Transport, TransportResponse
    from decnet.wire import WireRequest

logger: logging.Logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends wire requests and turns responses into typed results.

    Args:
        transport: The transport used to send requests.
        codec: The codec used to decode successful bodies. Defaults to
            ``JsonCodec``.
        request_logger: The request/response logger. Defaults to a
            ``RequestLogger`` at debug level.

    Example:
        ```pycon
        >>> import asyncio
        >>> from decnet.dispatcher import Dispatcher
        >>> from decnet.request import HttpMethod
        >>> from decnet.transport import TransportResponse
        >>> from decnet.wire import WireRequest
        >>> class StaticTransport:
        ...     async def send(self, request):
        ...         return TransportResponse(200, b'{"id": 1}')
        ...
        >>> dispatcher = Dispatcher(StaticTransport())
        >>> asyncio.run(
        ...     dispatcher.dispatch(WireRequest(HttpMethod.GET, "https://api.example.com"), dict)
        ... )
        {'id': 1}

        ```
    """

    def __init__(
        self,
        transport: Transport,
        codec: Codec | None = None,
        request_logger: RequestLogger | None = None,
    ) -> None:
        self.transport = transport
        self.codec = codec if codec is not None else JsonCodec()
        self.request_logger = request_logger if request_logger is not None else RequestLogger()

    async def dispatch(self, request: WireRequest, decode_target: Any) -> Any:
        """Send a request and decode its response.

        Args:
            request: The wire request.
            decode_target: The type the response body decodes into, or
                ``None`` to discard the body.

        Returns:
            The decoded body, or ``None`` if ``decode_target`` is ``None``.

        Raises:
            NetworkError: If the transport fails.
            DecError: The classified error for non-2xx responses.
            DecodingFailedError: If the body does not decode into
                ``decode_target``.
        """
        self._log_request(request)
        try:
            response = await self.transport.send(request)
        except TransportError as exc:
            raise NetworkError(exc.cause if exc.cause is not None else exc) from exc
        self._log_response(request, response)

        error = classify_status(response.status_code, response.content)
        if error is not None:
            logger.debug(
                f"{request.method.value} request to {request.url} failed with "
                f"status {response.status_code} ({error.kind.value})"
            )
            raise error

        if decode_target is None:
            return None
        try:
            return self.codec.decode(response.content, decode_target)
        except (TypeError, ValueError) as exc:
            raise DecodingFailedError(str(exc)) from exc

    def _log_request(self, request: WireRequest) -> None:
        try:
            self.request_logger.log_request(request)
        except Exception:
            logger.warning("Failed to log request", exc_info=True)

    def _log_response(self, request: WireRequest, response: TransportResponse) -> None:
        try:
            self.request_logger.log_response(response.status_code, request.url, response.content)
        except Exception:
            logger.warning("Failed to log response", exc_info=True)
