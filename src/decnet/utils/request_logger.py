r"""Request and response logging.

``RequestLogger`` writes a human readable trace of every request and
response through the ``decnet.requests`` logger. What is written is
gated by a ``LogLevel``:

- ``OFF``: nothing.
- ``INFO``: request line, headers and body; response status line.
- ``DEBUG``: everything above, plus a ``curl`` command reproducing the
  request and the response body.

Example:
    Show decnet traffic on stderr:

    ```python
    import logging

    logging.basicConfig()
    logging.getLogger("decnet").setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["LogLevel", "RequestLogger"]

import json
import logging
from enum import Enum
from typing import TYPE_CHECKING

from decnet.wire import decode_text

if TYPE_CHECKING:
    from decnet.wire import WireRequest

logger: logging.Logger = logging.getLogger("decnet.requests")


class LogLevel(str, Enum):
    """Verbosity of the request/response logs."""

    OFF = "off"
    INFO = "info"
    DEBUG = "debug"


class RequestLogger:
    """Level-gated logger for requests and responses.

    Args:
        level: The verbosity of the logs.
        logger: The logger records are written to. Defaults to the
            ``decnet.requests`` logger.

    Example:
        ```pycon
        >>> from decnet.request import HttpMethod
        >>> from decnet.utils.request_logger import LogLevel, RequestLogger
        >>> from decnet.wire import WireRequest
        >>> request_logger = RequestLogger(LogLevel.INFO)
        >>> request_logger.log_request(WireRequest(HttpMethod.GET, "https://api.example.com"))
        >>> request_logger.log_response(200, "https://api.example.com", b"{}")

        ```
    """

    def __init__(self, level: LogLevel = LogLevel.DEBUG, logger: logging.Logger = logger) -> None:
        self.level = level
        self.logger = logger

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level})"

    def log_request(self, request: WireRequest) -> None:
        """Log an outgoing request.

        Args:
            request: The wire request about to be sent.
        """
        if self.level is LogLevel.OFF:
            return
        lines = [f"[Request] {request.method.value} '{request.url}'"]
        if request.headers:
            lines.append("Headers:")
            lines.extend(f"  {key}: {value}" for key, value in request.headers.items())
        body = decode_text(request.body)
        if body is not None:
            lines.append(f"Body: {body}")
        self.logger.info("\n".join(lines))

        if self.level is LogLevel.DEBUG:
            self.logger.debug(request.to_curl_command())

    def log_response(self, status_code: int, url: str, body: bytes | None) -> None:
        """Log a received response.

        Args:
            status_code: The HTTP status code.
            url: The URL of the request.
            body: The raw response bytes.
        """
        if self.level is LogLevel.OFF:
            return
        self.logger.info(f"[Response] {status_code} '{url}'")

        if self.level is LogLevel.DEBUG:
            self.logger.debug(f"[Response] Body: {_render_body(body)}")


def _render_body(body: bytes | None) -> str:
    text = decode_text(body)
    if text is None:
        return f"<{len(body or b'')} bytes>"
    try:
        return json.dumps(json.loads(text), ensure_ascii=False)
    except ValueError:
        return text
