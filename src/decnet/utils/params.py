r"""Conversion of structured objects into request bodies."""

from __future__ import annotations

__all__ = ["as_params"]

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def as_params(obj: Any) -> dict[str, Any]:
    r"""Convert a structured object into a request body mapping.

    Dataclasses and pydantic models are converted field by field
    (recursively for dataclasses); mappings are copied. ``None`` values
    are dropped at every nesting level so the result only holds
    encodable values.

    Args:
        obj: A dataclass instance, a pydantic model or a mapping.

    Returns:
        The body mapping.

    Raises:
        TypeError: If ``obj`` is none of the supported types.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from decnet.utils.params import as_params
        >>> @dataclass
        ... class NewUser:
        ...     name: str
        ...     email: str | None = None
        ...
        >>> as_params(NewUser(name="A"))
        {'name': 'A'}

        ```
    """
    if isinstance(obj, BaseModel):
        data = obj.model_dump(mode="json")
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        data = dataclasses.asdict(obj)
    elif isinstance(obj, Mapping):
        data = dict(obj)
    else:
        msg = f"cannot convert {type(obj).__name__} to request parameters"
        raise TypeError(msg)
    return _drop_none(data)


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _drop_none(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_none(item) for item in value if item is not None]
    return value
