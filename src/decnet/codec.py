r"""JSON codec used to encode values and decode typed responses.

Decoding goes through ``pydantic.TypeAdapter``, so the decode target
can be a pydantic model, a dataclass, a ``TypedDict`` or any type
pydantic can validate (``dict``, ``list[int]``, ...).

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from decnet.codec import JsonCodec
    >>> @dataclass
    ... class User:
    ...     id: int
    ...     name: str
    ...
    >>> JsonCodec().decode(b'{"id": 1, "name": "A"}', User)
    User(id=1, name='A')

    ```
"""

from __future__ import annotations

__all__ = ["Codec", "JsonCodec"]

import json
from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Codec(Protocol):
    """Protocol of the codecs used by the client."""

    def encode(self, value: Any) -> bytes:
        """Serialize a value to bytes."""
        ...

    def decode(self, data: bytes, target: type[T]) -> T:
        """Deserialize bytes into an instance of ``target``.

        Raises:
            ValueError: If the data is malformed or does not match
                ``target``.
        """
        ...


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class JsonCodec:
    """Codec for JSON payloads."""

    def encode(self, value: Any) -> bytes:
        return json.dumps(
            value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        ).encode("utf-8")

    def decode(self, data: bytes, target: type[T]) -> T:
        return _adapter(target).validate_json(data)
