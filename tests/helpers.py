r"""Shared test helpers.

This module contains the test doubles and sample types used across the
unit and integration tests.
"""

from __future__ import annotations

__all__ = [
    "BASE_URL",
    "RecordingTransport",
    "User",
    "create_transport_response",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from decnet.transport import TransportError, TransportResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from decnet.wire import WireRequest

BASE_URL = "https://api.example.com"


@dataclass
class User:
    id: int
    name: str
    email: str


def create_transport_response(status_code: int = 200, content: bytes = b"{}") -> TransportResponse:
    """Create a transport response for testing.

    Args:
        status_code: HTTP status code for the response.
        content: Raw response body.

    Returns:
        The transport response.
    """
    return TransportResponse(status_code=status_code, content=content)


class RecordingTransport:
    """Transport returning scripted outcomes and recording requests.

    Each call to ``send`` consumes the next outcome. The last outcome is
    repeated once the script is exhausted. An outcome is either a
    ``TransportResponse`` or an exception to raise.

    Args:
        outcomes: The scripted outcomes. Defaults to a single 200
            response with an empty JSON object.
    """

    def __init__(self, outcomes: Sequence[TransportResponse | Exception] | None = None) -> None:
        self.outcomes = list(outcomes) if outcomes else [create_transport_response()]
        self.requests: list[WireRequest] = []

    @classmethod
    def failing(cls, message: str = "connection refused") -> RecordingTransport:
        return cls([TransportError(message, cause=ConnectionError(message))])

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def send(self, request: WireRequest) -> TransportResponse:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
