r"""Multipart form-data body encoder."""

from __future__ import annotations

__all__ = ["encode_multipart_body", "generate_boundary"]

import uuid
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from decnet.builder.encoding import render_scalar
from decnet.exceptions import BuildError, BuildErrorReason

if TYPE_CHECKING:
    from decnet.request import Body, MultipartPart


def generate_boundary() -> str:
    r"""Generate a random multipart boundary token.

    Returns:
        An upper case UUID4 string.
    """
    return str(uuid.uuid4()).upper()


def encode_multipart_body(
    body: Body | None,
    parts: Sequence[MultipartPart] | None,
    boundary: str,
) -> bytes | None:
    r"""Encode form fields and files as ``multipart/form-data``.

    Form fields come first, in mapping order, followed by the files in
    sequence order. Every part opens with ``--<boundary>`` and the body
    closes with ``--<boundary>--``.

    Args:
        body: Form fields. Values must be scalars.
        parts: Files to attach.
        boundary: The boundary token.

    Returns:
        The encoded body, or ``None`` if there are neither fields nor
        files.

    Raises:
        BuildError: If a form field value is not a scalar.

    Example:
        ```pycon
        >>> from decnet.builder.multipart import encode_multipart_body
        >>> from decnet.request import MultipartPart
        >>> data = encode_multipart_body(
        ...     {"title": "hi"},
        ...     [MultipartPart("file", b"\x01", "a.bin", "application/octet-stream")],
        ...     boundary="XYZ",
        ... )
        >>> data.startswith(b"--XYZ\r\n")
        True
        >>> data.endswith(b"--XYZ--\r\n")
        True

        ```
    """
    if body is None and parts is None:
        return None
    opening = f"--{boundary}\r\n".encode()
    chunks = []
    for name, value in (body or {}).items():
        if isinstance(value, Mapping) or (
            isinstance(value, Sequence) and not isinstance(value, (str, bytes))
        ):
            msg = f"multipart field {name!r} must be a string, number or boolean"
            raise BuildError(BuildErrorReason.UNENCODABLE_VALUE, msg)
        chunks.append(opening)
        chunks.append(f'Content-Disposition: form-data; name="{name}"\r\n\r\n'.encode())
        chunks.append(render_scalar(value, key=name).encode("utf-8"))
        chunks.append(b"\r\n")
    for part in parts or ():
        chunks.append(opening)
        chunks.append(
            f'Content-Disposition: form-data; name="{part.field_name}"; '
            f'filename="{part.file_name}"\r\n'.encode()
        )
        chunks.append(f"Content-Type: {part.mime_type}\r\n\r\n".encode())
        chunks.append(part.file_bytes)
        chunks.append(b"\r\n")
    chunks.append(f"--{boundary}--\r\n".encode())
    return b"".join(chunks)
