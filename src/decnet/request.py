r"""Declarative request descriptors.

A ``Request`` describes one endpoint call: where it goes, how its body
is encoded and what type the response decodes into. Descriptors are
immutable values; every call site builds its own.

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from decnet.request import ContentType, HttpMethod, Request
    >>> @dataclass
    ... class User:
    ...     id: int
    ...     name: str
    ...
    >>> def get_user(user_id: int) -> Request:
    ...     return Request(path=f"/users/{user_id}", decode_target=User)
    ...
    >>> get_user(1).method
    <HttpMethod.GET: 'GET'>
    >>> Request(
    ...     path="/login", method=HttpMethod.POST, content_type=ContentType.URL_ENCODED
    ... ).content_type.value
    'application/x-www-form-urlencoded'

    ```
"""

from __future__ import annotations

__all__ = [
    "Body",
    "ContentType",
    "HeaderField",
    "HttpMethod",
    "MultipartPart",
    "QueryParams",
    "Request",
    "Scalar",
    "Value",
]

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

Scalar = Union[str, int, float, bool]
Value = Union[Scalar, Mapping[str, "Value"], Sequence["Value"]]
QueryParams = Mapping[str, Scalar]
Body = Mapping[str, Value]


class HttpMethod(str, Enum):
    """HTTP methods supported by request descriptors."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ContentType(str, Enum):
    """Body encodings supported by request descriptors."""

    JSON = "application/json"
    URL_ENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class HeaderField(str, Enum):
    """Names of commonly used request headers."""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"
    AUTH_TOKEN = "X-AUTH-TOKEN"
    ACCEPT_ENCODING = "Accept-Encoding"


@dataclass(frozen=True)
class MultipartPart:
    """A file attached to a multipart request.

    Attributes:
        field_name: The form field name of the part.
        file_bytes: The raw file content.
        file_name: The file name announced to the server.
        mime_type: The ``Content-Type`` of the part.
    """

    field_name: str
    file_bytes: bytes
    file_name: str
    mime_type: str


@dataclass(frozen=True)
class Request:
    """Declarative description of one HTTP endpoint call.

    Attributes:
        path: Path appended to the client's base URL, e.g. ``/users/1``.
        method: The HTTP method.
        content_type: Selects how ``body`` is encoded.
        query_params: Scalars appended to the URL query string.
        body: Values encoded according to ``content_type``.
        headers: Headers overlaid on the default ``Content-Type`` header.
        multipart_parts: Files attached when ``content_type`` is
            ``ContentType.MULTIPART``. Ignored otherwise.
        requires_auth: Whether the endpoint expects credentials. The
            client does not act on it; it is available to callers that
            add authorization headers.
        decode_target: The type the response body decodes into, or
            ``None`` to discard the body.
    """

    path: str
    method: HttpMethod = HttpMethod.GET
    content_type: ContentType = ContentType.JSON
    query_params: QueryParams | None = None
    body: Body | None = None
    headers: Mapping[str, str] | None = None
    multipart_parts: Sequence[MultipartPart] | None = None
    requires_auth: bool = True
    decode_target: Any = None
