r"""Wire request representation."""

from __future__ import annotations

__all__ = ["WireRequest", "decode_text"]

import shlex
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decnet.request import HttpMethod


@dataclass(frozen=True)
class WireRequest:
    """A fully resolved HTTP request, ready for the transport.

    Attributes:
        method: The HTTP method.
        url: The absolute URL including the query string.
        headers: Request headers. Keys are case-sensitive.
        body: Encoded body bytes, or ``None`` when there is no body.
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def to_curl_command(self) -> str:
        r"""Render the request as a ``curl`` command line.

        The ``Cookie`` header is left out. Bodies that are not valid
        UTF-8 are omitted. Header lines and bodies are shell quoted.

        Returns:
            The command, one option per line.

        Example:
            ```pycon
            >>> from decnet.request import HttpMethod
            >>> from decnet.wire import WireRequest
            >>> request = WireRequest(
            ...     method=HttpMethod.POST,
            ...     url="https://api.example.com/users",
            ...     headers={"Content-Type": "application/json"},
            ...     body=b'{"name":"A"}',
            ... )
            >>> print(request.to_curl_command())
            curl "https://api.example.com/users" \
              -X POST \
              -H 'Content-Type: application/json' \
              -d '{"name":"A"}'

            ```
        """
        command = [f'curl "{self.url}"']
        if self.method.value not in ("GET", "HEAD"):
            command.append(f"-X {self.method.value}")
        command.extend(
            f"-H {shlex.quote(f'{key}: {value}')}"
            for key, value in self.headers.items()
            if key != "Cookie"
        )
        text = decode_text(self.body)
        if text is not None:
            command.append(f"-d {shlex.quote(text)}")
        return " \\\n  ".join(command)


def decode_text(data: bytes | None) -> str | None:
    r"""Decode bytes as UTF-8 text.

    Args:
        data: The bytes to decode.

    Returns:
        The decoded text, or ``None`` if ``data`` is ``None`` or not
        valid UTF-8.
    """
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None
