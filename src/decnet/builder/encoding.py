r"""Percent-encoding and body encoders for request descriptors.

This module implements the value rendering rules shared by query
strings and request bodies, plus the JSON and URL-encoded body
encoders.
"""

from __future__ import annotations

__all__ = [
    "encode_json_body",
    "encode_query",
    "encode_url_encoded_body",
    "percent_encode",
    "render_scalar",
]

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from decnet.codec import JsonCodec
from decnet.exceptions import BuildError, BuildErrorReason

if TYPE_CHECKING:
    from decnet.codec import Codec
    from decnet.request import Body, QueryParams

# RFC 3986 section 3.4 allows "/" and "?" in a query but the general and
# sub delimiters ":#[]@!$&'()*+,;=" must be escaped inside a value.
QUERY_VALUE_SAFE = "/?"


def percent_encode(text: str) -> str:
    r"""Percent-encode a query key or value.

    Unreserved characters, ``/`` and ``?`` are kept; everything else,
    including ``: # [ ] @ ! $ & ' ( ) * + , ; =``, is encoded.

    Args:
        text: The text to encode.

    Returns:
        The encoded text.

    Example:
        ```pycon
        >>> from decnet.builder.encoding import percent_encode
        >>> percent_encode("a b&c=d")
        'a%20b%26c%3Dd'
        >>> percent_encode("path/to?x")
        'path/to?x'

        ```
    """
    return quote(text, safe=QUERY_VALUE_SAFE)


def render_scalar(value: Any, *, key: str) -> str:
    r"""Render a scalar as its wire string.

    Args:
        value: The value to render.
        key: The key the value belongs to, used in error messages.

    Returns:
        ``true``/``false`` for booleans, the text for strings and
        ``str(value)`` for numbers.

    Raises:
        BuildError: If ``value`` is not a string, number or boolean.

    Example:
        ```pycon
        >>> from decnet.builder.encoding import render_scalar
        >>> render_scalar(True, key="active")
        'true'
        >>> render_scalar(2.5, key="ratio")
        '2.5'

        ```
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    msg = f"value of {key!r} is not a string, number or boolean: {type(value).__name__}"
    raise BuildError(BuildErrorReason.UNENCODABLE_VALUE, msg)


def encode_query(params: QueryParams) -> str:
    r"""Encode query parameters as ``key=value`` pairs joined by ``&``.

    Args:
        params: The query parameters. Values must be scalars.

    Returns:
        The encoded query string, without the leading ``?``.

    Raises:
        BuildError: If a value is not a scalar.
    """
    return "&".join(
        f"{percent_encode(key)}={percent_encode(render_scalar(value, key=key))}"
        for key, value in params.items()
    )


def encode_url_encoded_body(body: Body) -> bytes:
    r"""Encode a body as ``application/x-www-form-urlencoded``.

    Nested mappings are flattened with bracket notation
    (``parent[child]=v``) and sequences are expanded as
    ``key[]=v1&key[]=v2``.

    Args:
        body: The body mapping.

    Returns:
        The UTF-8 encoded body.

    Raises:
        BuildError: If a value cannot be rendered.

    Example:
        ```pycon
        >>> from decnet.builder.encoding import encode_url_encoded_body
        >>> encode_url_encoded_body({"user": {"name": "A B"}, "tags": ["x", "y"]})
        b'user[name]=A%20B&tags[]=x&tags[]=y'

        ```
    """
    return _flatten(body, parent=None).encode("utf-8")


def _flatten(params: Mapping[str, Any], parent: str | None) -> str:
    pairs = []
    for key, value in params.items():
        escaped_key = percent_encode(str(key))
        if parent is not None:
            escaped_key = f"{parent}[{escaped_key}]"
        if isinstance(value, Mapping):
            pairs.append(_flatten(value, parent=escaped_key))
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            pairs.append(
                "&".join(
                    f"{escaped_key}[]={percent_encode(render_scalar(entry, key=str(key)))}"
                    for entry in value
                )
            )
        else:
            pairs.append(f"{escaped_key}={percent_encode(render_scalar(value, key=str(key)))}")
    return "&".join(pair for pair in pairs if pair)


def encode_json_body(body: Body, codec: Codec | None = None) -> bytes:
    r"""Encode a body as a JSON object.

    Args:
        body: The body mapping.
        codec: The codec serializing the body. Defaults to ``JsonCodec``,
            which writes compact JSON.

    Returns:
        The encoded body.

    Raises:
        BuildError: If the codec cannot serialize the body, including
            non-finite floats such as ``nan`` for ``JsonCodec``.

    Example:
        ```pycon
        >>> from decnet.builder.encoding import encode_json_body
        >>> encode_json_body({"name": "A", "tags": [1, 2]})
        b'{"name":"A","tags":[1,2]}'

        ```
    """
    codec = codec if codec is not None else JsonCodec()
    try:
        return codec.encode(dict(body))
    except (TypeError, ValueError) as exc:
        msg = f"body is not JSON serializable: {exc}"
        raise BuildError(BuildErrorReason.UNENCODABLE_VALUE, msg) from exc
