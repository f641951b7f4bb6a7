"""Type-directed checks and conversions for JSON values.

A *kind* describes the Python shape wanted from a :class:`JsonValue`:

* ``JsonValue`` (or ``typing.Any``) accepts anything and yields a copy;
* ``None`` accepts only null;
* ``bool``, ``int``, ``float``, ``str`` and :class:`enum.Enum` subclasses
  accept booleans, numbers, strings and numbers respectively;
* ``JsonArray`` and ``JsonObject`` accept arrays and objects;
* ``list[T]``, ``set[T]``, ``frozenset[T]`` and ``tuple[T, ...]`` accept
  arrays whose every element is of kind ``T``;
* ``tuple[A, B, ...]`` accepts arrays of exactly that length, element by
  element;
* ``dict[str, T]`` accepts objects whose every value is of kind ``T``;
* ``Union[...]`` accepts a value matching any member, trying them in order;
* a class with a ``check_json(value)`` and/or ``from_json(value)`` hook
  decides for itself.
"""

from __future__ import annotations

import enum
import types
from typing import Any, Optional, Union, get_args, get_origin

from maakit.jsonkit.value import JsonArray, JsonError, JsonObject, JsonValue

_NONE_TYPE = type(None)


def _as_value(value: Any) -> JsonValue:
    if isinstance(value, JsonValue):
        return value
    return JsonValue(value)


def _is_null_kind(kind: Any) -> bool:
    return kind is None or kind is _NONE_TYPE


def _is_any_kind(kind: Any) -> bool:
    return kind is JsonValue or kind is Any


def _union_members(kind: Any) -> Optional[tuple]:
    origin = get_origin(kind)
    if origin is Union or origin is types.UnionType:
        return get_args(kind)
    return None


def _plain_class(kind: Any) -> bool:
    return isinstance(kind, type) and get_origin(kind) is None


def _collection(kind: Any) -> Optional[tuple[type, Any]]:
    if kind is list or kind is set or kind is frozenset or kind is tuple:
        return kind, JsonValue
    origin = get_origin(kind)
    args = get_args(kind)
    if origin in (list, set, frozenset):
        return origin, (args[0] if args else JsonValue)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return tuple, args[0]
    return None


def _fixed(kind: Any) -> Optional[tuple]:
    if get_origin(kind) is not tuple:
        return None
    args = get_args(kind)
    if args == ((),):
        return ()
    if len(args) == 2 and args[1] is Ellipsis:
        return None
    return args


def _mapping(kind: Any) -> Optional[tuple[Any, Any]]:
    if kind is dict:
        return str, JsonValue
    if get_origin(kind) is dict:
        args = get_args(kind)
        return args if args else (str, JsonValue)
    return None


def is_of(value: Any, kind: Any) -> bool:
    """Return whether *value* can be read as *kind*."""
    value = _as_value(value)
    if _is_any_kind(kind):
        return True
    if _is_null_kind(kind):
        return value.is_null()
    members = _union_members(kind)
    if members is not None:
        return any(is_of(value, member) for member in members)
    if _plain_class(kind):
        check = getattr(kind, "check_json", None)
        if check is not None:
            return bool(check(value))
        if kind is bool:
            return value.is_boolean()
        if kind is int or kind is float or issubclass(kind, enum.Enum):
            return value.is_number()
        if kind is str:
            return value.is_string()
        if kind is JsonArray:
            return value.is_array()
        if kind is JsonObject:
            return value.is_object()
    collection = _collection(kind)
    if collection is not None:
        return value.is_array() and all_of(value, collection[1])
    fixed = _fixed(kind)
    if fixed is not None:
        if not value.is_array():
            return False
        items = value.as_array()
        return len(items) == len(fixed) and all(
            is_of(item, member) for item, member in zip(items, fixed)
        )
    mapping = _mapping(kind)
    if mapping is not None:
        key_kind, item_kind = mapping
        return value.is_object() and key_kind is str and all_of(value, item_kind)
    raise TypeError(f"unsupported kind: {kind!r}")


def convert(value: Any, kind: Any) -> Any:
    """Read *value* as *kind*; raise :class:`JsonError` if it does not fit."""
    value = _as_value(value)
    if _is_any_kind(kind):
        return JsonValue(value)
    if _is_null_kind(kind):
        if not value.is_null():
            raise JsonError("Wrong Type")
        return None
    members = _union_members(kind)
    if members is not None:
        for member in members:
            if is_of(value, member):
                return convert(value, member)
        raise JsonError("Wrong Type")
    if _plain_class(kind):
        load = getattr(kind, "from_json", None)
        if load is not None:
            result = load(value)
            if result is None or result is False:
                raise JsonError("Wrong JSON")
            return result
        if kind is bool:
            return value.as_boolean()
        if issubclass(kind, enum.Enum):
            return kind(value.as_integer())
        if kind is int:
            return value.as_integer()
        if kind is float:
            return value.as_float()
        if kind is str:
            return value.as_string()
        if kind is JsonArray:
            return JsonArray(value.as_array())
        if kind is JsonObject:
            return JsonObject(value.as_object())
    collection = _collection(kind)
    if collection is not None:
        container, item_kind = collection
        return container(convert(item, item_kind) for item in value.as_array())
    fixed = _fixed(kind)
    if fixed is not None:
        items = value.as_array()
        if len(items) != len(fixed):
            raise JsonError("Wrong Type")
        return tuple(convert(item, member) for item, member in zip(items, fixed))
    mapping = _mapping(kind)
    if mapping is not None:
        key_kind, item_kind = mapping
        if key_kind is not str:
            raise JsonError("Wrong Type")
        return as_map(value, item_kind)
    raise TypeError(f"unsupported kind: {kind!r}")


def all_of(value: Any, kind: Any) -> bool:
    """Whether every element of an array, or every value of an object, is of *kind*.

    Anything that is neither an array nor an object gives ``False``.
    """
    value = _as_value(value)
    if value.is_array():
        return all(is_of(item, kind) for item in value.as_array())
    if value.is_object():
        return all(is_of(item, kind) for item in value.as_object().values())
    return False


def as_map(value: Any, kind: Any) -> dict[str, Any]:
    """Convert an object into a ``dict`` whose values are read as *kind*."""
    obj = _as_value(value).as_object()
    return {key: convert(item, kind) for key, item in obj.items()}


def _default_kind(default: Any) -> Any:
    if default is None or isinstance(default, JsonValue):
        return JsonValue
    return type(default)


def get(value: Any, *args: Any) -> Any:
    """Follow a path of keys and positions, then read the result like the default.

    Call as ``get(value, key1, key2, ..., default)``. String keys index
    objects and integer keys index arrays. If any step is missing or the
    final value is not of the default's kind, the default is returned.
    """
    if len(args) < 2:
        raise TypeError("get takes one or more keys followed by a default value")
    *keys, default = args
    current = _as_value(value)
    for key in keys:
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise TypeError("keys must be str or int positions")
        if not current.contains(key):
            return default
        current = current.at(key)
    kind = _default_kind(default)
    if is_of(current, kind):
        return convert(current, kind)
    return default


def find(value: Any, key: Union[str, int], kind: Any = JsonValue) -> Any:
    """Return the element under *key* read as *kind*, or ``None``.

    ``None`` is returned when the key is missing, the container is of the
    wrong type, or the element is not of *kind*.
    """
    current = _as_value(value)
    if not current.contains(key):
        return None
    item = current.at(key)
    return convert(item, kind) if is_of(item, kind) else None