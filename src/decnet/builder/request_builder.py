r"""Translation of request descriptors into wire requests.

``build_request`` is pure: given the same descriptor, base URL and
boundary it always returns the same wire request. Without an explicit
boundary a fresh one is generated on every call, so rebuilding a
multipart request (for example on retry) yields a byte-different but
equivalent body.
"""

from __future__ import annotations

__all__ = ["build_request", "build_url"]

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote, urlsplit, urlunsplit

import httpx

from decnet.builder.encoding import encode_json_body, encode_query, encode_url_encoded_body
from decnet.builder.multipart import encode_multipart_body, generate_boundary
from decnet.exceptions import BuildError, BuildErrorReason
from decnet.request import ContentType, HeaderField
from decnet.wire import WireRequest

if TYPE_CHECKING:
    from decnet.codec import Codec
    from decnet.request import QueryParams, Request

logger: logging.Logger = logging.getLogger(__name__)

# Characters kept verbatim in the path: unreserved, sub-delims, ":", "@",
# "/" and "%" so that already escaped paths are not encoded twice.
PATH_SAFE = "/:@!$&'()*+,;=%"


def build_url(base_url: str, path: str, query_params: QueryParams | None = None) -> str:
    r"""Assemble the absolute URL of a request.

    Args:
        base_url: The absolute base URL, e.g. ``https://api.example.com/v1``.
        path: The path appended to the base URL path.
        query_params: Optional query parameters appended to the URL.

    Returns:
        The absolute URL.

    Raises:
        BuildError: If the base URL is not an absolute URL, or a query
            value is not a scalar.

    Example:
        ```pycon
        >>> from decnet.builder import build_url
        >>> build_url("https://api.example.com/v1", "/users", {"q": "a&b", "page": 2})
        'https://api.example.com/v1/users?q=a%26b&page=2'

        ```
    """
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        msg = f"invalid base URL {base_url!r}: {exc}"
        raise BuildError(BuildErrorReason.INVALID_BASE_URL, msg) from exc
    if not parts.scheme or not parts.netloc:
        msg = f"base URL must be absolute, got {base_url!r}"
        raise BuildError(BuildErrorReason.INVALID_BASE_URL, msg)

    base_path = parts.path
    if base_path.endswith("/") and path.startswith("/"):
        base_path = base_path[:-1]
    full_path = quote(f"{base_path}{path}", safe=PATH_SAFE)

    query = parts.query
    if query_params:
        encoded = encode_query(query_params)
        query = f"{query}&{encoded}" if query else encoded

    url = urlunsplit((parts.scheme, parts.netloc, full_path, query, parts.fragment))
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        msg = f"invalid URL {url!r}: {exc}"
        raise BuildError(BuildErrorReason.INVALID_BASE_URL, msg) from exc
    return url


def build_request(
    request: Request,
    base_url: str,
    *,
    boundary: str | None = None,
    codec: Codec | None = None,
) -> WireRequest:
    r"""Build the wire request for a request descriptor.

    The default ``Content-Type`` header is always
    ``"<content type>; boundary=<token>"``. Headers from the descriptor
    are merged on top of it, so a caller supplied ``Content-Type`` wins.

    Args:
        request: The request descriptor.
        base_url: The absolute base URL of the API.
        boundary: The multipart boundary token. A random one is
            generated if ``None``.
        codec: The codec serializing JSON bodies. Defaults to
            ``JsonCodec``.

    Returns:
        The wire request.

    Raises:
        BuildError: If the URL cannot be assembled or the body cannot be
            encoded.

    Example:
        ```pycon
        >>> from decnet.builder import build_request
        >>> from decnet.request import HttpMethod, Request
        >>> wire = build_request(
        ...     Request(path="/users", method=HttpMethod.POST, body={"name": "A"}),
        ...     "https://api.example.com",
        ...     boundary="B",
        ... )
        >>> wire.url
        'https://api.example.com/users'
        >>> wire.headers
        {'Content-Type': 'application/json; boundary=B'}
        >>> wire.body
        b'{"name":"A"}'

        ```
    """
    url = build_url(base_url, request.path, request.query_params)
    if boundary is None:
        boundary = generate_boundary()

    headers = {HeaderField.CONTENT_TYPE.value: f"{request.content_type.value}; boundary={boundary}"}
    headers.update(request.headers or {})

    body: bytes | None = None
    if request.content_type is ContentType.JSON:
        if request.body is not None:
            body = encode_json_body(request.body, codec)
    elif request.content_type is ContentType.URL_ENCODED:
        if request.body is not None:
            body = encode_url_encoded_body(request.body)
    else:
        body = encode_multipart_body(request.body, request.multipart_parts, boundary)

    logger.debug(f"Built {request.method.value} request to {url}")
    return WireRequest(method=request.method, url=url, headers=headers, body=body)
