"""JSON shortcuts.

``to_json`` accepts the value types used across xtend (dataclasses, enums,
dates, named tuples) as well as plain JSON data. ``from_json`` can rebuild a
dataclass tree from the decoded document.

Examples:
    ```py
    >>> to_json([1, 2, 3])
    '[1, 2, 3]'
    >>> from_json('{"values": [1, 2, 3]}', Sample)
    Sample(values=[1, 2, 3])
    ```
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import MISSING, asdict, fields, is_dataclass
from datetime import date, datetime, time
from enum import Enum
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints, overload

from xtend.errors import require_not_none

D = TypeVar("D")


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Serialize *value* to a JSON document.

    Named tuples serialize as arrays, like any other tuple. ``None`` becomes
    ``"null"``.
    """
    return json.dumps(value, default=_default, indent=indent)


@overload
def from_json(value: str, target: None = None) -> Any: ...
@overload
def from_json(value: str, target: type[D]) -> D: ...
def from_json(value, target=None):
    """Deserialize the JSON document *value*.

    Args:
        value: The JSON text.
        target: Optional dataclass type to build from the decoded object.

    Returns:
        The decoded value, or an instance of *target*.

    Raises:
        ArgumentNoneError: If *value* is None.
        json.JSONDecodeError: If *value* is not valid JSON.
        KeyError: If a required dataclass field is missing.
    """
    require_not_none(value, "value")
    decoded = json.loads(value)
    if target is None:
        return decoded
    return dict_to_dataclass(target, decoded)


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Recursively build a dataclass instance from a nested dict.

    Args:
        dc_type: The dataclass type to build.
        values: The dict containing the data.

    Returns:
        An instance of dc_type populated with data from values.

    Note:
        - Fields in values that are not in dc_type are ignored.
        - All fields without defaults must be present in values.
        - Nested dataclasses, ``SomeDataclass | None`` and
          ``list[SomeDataclass]`` fields are rebuilt; other values are
          passed through unchanged.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        field_type = type_hints.get(field.name, field.type)
        if field.name in values:
            kwargs[field.name] = _convert(field_type, values[field.name])
        elif field.default is not MISSING:
            kwargs[field.name] = field.default
        elif field.default_factory is not MISSING:
            factory = cast(Callable[[], Any], field.default_factory)
            kwargs[field.name] = factory()
        else:
            raise KeyError(f"Missing required field '{field.name}'")
    return cast(D, dc_type(**kwargs))


def _convert(field_type: Any, inner: Any) -> Any:
    target_dc = _resolve_dataclass_type(field_type)
    if target_dc and isinstance(inner, dict):
        return dict_to_dataclass(target_dc, inner)

    item_dc = _resolve_list_item_type(field_type)
    if item_dc and isinstance(inner, list):
        return [
            dict_to_dataclass(item_dc, item) if isinstance(item, dict) else item
            for item in inner
        ]
    return inner


def _resolve_dataclass_type(field_type: Any) -> type[Any] | None:
    origin = get_origin(field_type)
    if origin is None:
        return cast(type[Any], field_type) if is_dataclass(field_type) else None
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None


def _resolve_list_item_type(field_type: Any) -> type[Any] | None:
    if get_origin(field_type) is not list:
        return None
    args = get_args(field_type)
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
