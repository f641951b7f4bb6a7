"""Recursive conversion between Python data and JSON values.

Both directions accept an optional table of custom handlers. A handler is
tried before the built-in rules, so it can take over any type, including
the element types of containers.

* A *serializer* maps a Python type to a function that turns an instance
  into something :class:`JsonValue` accepts. The handler for the nearest
  class in the instance's method resolution order is used.
* A *deserializer* maps a kind (see :mod:`maakit.jsonkit.typed`) to a
  function that turns a :class:`JsonValue` into a Python value. It should
  raise :class:`JsonError` when the value does not fit.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from typing import Any, Optional, get_args, get_origin

from maakit.jsonkit.typed import convert
from maakit.jsonkit.value import JsonArray, JsonError, JsonObject, JsonValue

Serializer = Mapping[type, Callable[[Any], Any]]
Deserializer = Mapping[Any, Callable[[JsonValue], Any]]

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def _find_handler(value: Any, serializer: Optional[Serializer]) -> Optional[Callable[[Any], Any]]:
    if not serializer:
        return None
    for cls in type(value).__mro__:
        handler = serializer.get(cls)
        if handler is not None:
            return handler
    return None


def _ordered(items: Any) -> list:
    if isinstance(items, (set, frozenset)):
        try:
            return sorted(items)
        except TypeError:
            return list(items)
    return list(items)


def serialize(value: Any, serializer: Optional[Serializer] = None) -> JsonValue:
    """Turn *value* into a :class:`JsonValue`.

    Lists, tuples and sets become arrays (sets in sorted order when their
    elements can be ordered), mappings with string keys become objects,
    enums become their value, objects with a ``to_json()`` method use it,
    and scalars are stored directly. Anything else raises ``TypeError``.
    """
    handler = _find_handler(value, serializer)
    if handler is not None:
        return JsonValue(handler(value))
    if isinstance(value, (JsonValue, JsonArray, JsonObject)):
        return JsonValue(value)
    if isinstance(value, _COLLECTION_TYPES):
        return JsonValue(JsonArray(serialize(item, serializer) for item in _ordered(value)))
    if isinstance(value, Mapping):
        obj = JsonObject()
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, not {type(key).__name__}")
            obj[key] = serialize(item, serializer)
        return JsonValue(obj)
    if isinstance(value, enum.Enum) and not isinstance(value, (int, str)):
        return serialize(value.value, serializer)
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return JsonValue(to_json())
    try:
        return JsonValue(value)
    except TypeError:
        raise TypeError(f"unable to serialize {type(value).__name__}") from None


def _collection_kind(kind: Any) -> Optional[tuple[type, Any]]:
    if kind in (list, set, frozenset):
        return kind, JsonValue
    origin = get_origin(kind)
    args = get_args(kind)
    if origin in (list, set, frozenset):
        return origin, (args[0] if args else JsonValue)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return tuple, args[0]
    return None


def _fixed_kind(kind: Any) -> Optional[tuple]:
    if get_origin(kind) is not tuple:
        return None
    args = get_args(kind)
    if args == ((),):
        return ()
    if len(args) == 2 and args[1] is Ellipsis:
        return None
    return args


def _mapping_kind(kind: Any) -> Optional[tuple[Any, Any]]:
    if kind is dict:
        return str, JsonValue
    if get_origin(kind) is dict:
        args = get_args(kind)
        return args if args else (str, JsonValue)
    return None


def _lookup(kind: Any, deserializer: Optional[Deserializer]) -> Optional[Callable[[JsonValue], Any]]:
    if not deserializer:
        return None
    try:
        return deserializer.get(kind)
    except TypeError:
        return None


def deserialize(value: Any, kind: Any, deserializer: Optional[Deserializer] = None) -> Any:
    """Read *value* as *kind*, recursing into containers.

    Raises :class:`JsonError` when the value does not have the expected
    shape, and ``TypeError`` for a kind that cannot be read at all.
    """
    if not isinstance(value, JsonValue):
        value = JsonValue(value)

    handler = _lookup(kind, deserializer)
    if handler is not None:
        return handler(value)

    collection = _collection_kind(kind)
    if collection is not None:
        container, item_kind = collection
        if not value.is_array():
            raise JsonError("Wrong Type")
        return container(deserialize(item, item_kind, deserializer) for item in value.as_array())

    fixed = _fixed_kind(kind)
    if fixed is not None:
        if not value.is_array():
            raise JsonError("Wrong Type")
        items = value.as_array()
        if len(items) != len(fixed):
            raise JsonError("Wrong Type")
        return tuple(
            deserialize(item, member, deserializer) for item, member in zip(items, fixed)
        )

    mapping = _mapping_kind(kind)
    if mapping is not None:
        key_kind, item_kind = mapping
        if key_kind is not str:
            raise TypeError(f"unsupported key kind: {key_kind!r}")
        if not value.is_object():
            raise JsonError("Wrong Type")
        return {
            key: deserialize(item, item_kind, deserializer)
            for key, item in value.as_object().items()
        }

    return convert(value, kind)