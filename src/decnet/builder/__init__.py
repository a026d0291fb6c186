r"""Request builder.

This package turns request descriptors into wire requests: URL
assembly, header merging and body encoding for JSON, URL-encoded and
multipart content types.
"""

from __future__ import annotations

__all__ = [
    "build_request",
    "build_url",
    "encode_json_body",
    "encode_multipart_body",
    "encode_query",
    "encode_url_encoded_body",
    "generate_boundary",
    "percent_encode",
    "render_scalar",
]

from decnet.builder.encoding import (
    encode_json_body,
    encode_query,
    encode_url_encoded_body,
    percent_encode,
    render_scalar,
)
from decnet.builder.multipart import encode_multipart_body, generate_boundary
from decnet.builder.request_builder import build_request, build_url
