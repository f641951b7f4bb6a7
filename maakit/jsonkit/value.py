"""JSON document model: values, arrays and objects with exact text output.

Objects keep their keys in sorted order, so their text output is stable.
Assigning a value into a container stores a copy of it.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping, MutableMapping, MutableSequence
from typing import Any, Optional, Union


class JsonError(Exception):
    """Raised when a JSON value is used as a type it does not hold."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Unknown exception")


class ValueType(enum.Enum):
    """The kind of data a :class:`JsonValue` holds."""

    INVALID = "invalid"
    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"


_ESCAPE_TABLE = str.maketrans(
    {
        '"': '\\"',
        "\\": "\\\\",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


def _quote(text: str) -> str:
    return '"' + text.translate(_ESCAPE_TABLE) + '"'


def _number_text(number: Union[int, float]) -> str:
    return str(number) if isinstance(number, int) else repr(number)


def _array_items(other: Any) -> list["JsonValue"]:
    if isinstance(other, JsonArray):
        return list(other._items)
    if isinstance(other, JsonValue):
        return list(other.as_array()._items)
    if isinstance(other, (list, tuple)):
        return [JsonValue(item) for item in other]
    raise TypeError(f"cannot use {type(other).__name__} as a JSON array")


def _object_pairs(other: Any) -> list[tuple[str, Any]]:
    if isinstance(other, JsonValue):
        other = other.as_object()
    if isinstance(other, Mapping):
        return list(other.items())
    raise TypeError(f"cannot use {type(other).__name__} as a JSON object")


class JsonObject(MutableMapping):
    """A JSON object: string keys mapped to :class:`JsonValue`, kept sorted."""

    def __init__(self, data: Any = None) -> None:
        self._data: dict[str, JsonValue] = {}
        if data is None:
            return
        pairs = data.items() if isinstance(data, Mapping) else data
        for key, value in pairs:
            self[key] = value

    def __getitem__(self, key: str) -> "JsonValue":
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
        self._data[key] = JsonValue(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def contains(self, key: str) -> bool:
        """Return whether *key* is present."""
        return key in self._data

    def at(self, key: str) -> "JsonValue":
        """Return the value under *key*; raise ``KeyError`` if it is missing."""
        return self._data[key]

    def emplace(self, key: str, value: Any) -> "JsonValue":
        """Insert or replace the value under *key* and return the stored value."""
        self[key] = value
        return self._data[key]

    def erase(self, key: str) -> bool:
        """Remove *key*; return whether it was present."""
        return self._data.pop(key, None) is not None

    def to_string(self) -> str:
        """Compact text form."""
        body = ",".join(_quote(key) + ":" + self._data[key].to_string() for key in self)
        return "{" + body + "}"

    def format(self, indent: int = 4) -> str:
        """Indented text form."""
        return self._format(indent, 0)

    def _format(self, indent: int, level: int) -> str:
        tail = " " * (indent * level)
        body = " " * (indent * (level + 1))
        lines = ",\n".join(
            body + _quote(key) + ": " + self._data[key]._format(indent, level + 1) for key in self
        )
        return "{\n" + (lines + "\n" if lines else "") + tail + "}"

    def dumps(self, indent: Optional[int] = None) -> str:
        """Compact text when *indent* is ``None``, indented text otherwise."""
        return self.to_string() if indent is None else self.format(indent)

    def __or__(self, other: Any) -> "JsonObject":
        """Merge; keys already present on the left are kept."""
        try:
            pairs = _object_pairs(other)
        except TypeError:
            return NotImplemented
        result = JsonObject(self)
        result._merge(pairs)
        return result

    def __ior__(self, other: Any) -> "JsonObject":
        try:
            pairs = _object_pairs(other)
        except TypeError:
            return NotImplemented
        self._merge(pairs)
        return self

    def _merge(self, pairs: list[tuple[str, Any]]) -> None:
        for key, value in pairs:
            if key not in self._data:
                self[key] = value

    def __repr__(self) -> str:
        return f"JsonObject({self.to_string()})"

    def __str__(self) -> str:
        return self.format()


class JsonArray(MutableSequence):
    """A JSON array of :class:`JsonValue`."""

    def __init__(self, items: Any = ()) -> None:
        self._items: list[JsonValue] = [JsonValue(item) for item in items]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return JsonArray(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [JsonValue(item) for item in value]
        else:
            self._items[index] = JsonValue(value)

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, JsonValue(value))

    def contains(self, pos: int) -> bool:
        """Return whether *pos* is a valid position."""
        return 0 <= pos < len(self._items)

    def at(self, pos: int) -> "JsonValue":
        """Return the element at *pos*; raise ``IndexError`` if out of range."""
        if not self.contains(pos):
            raise IndexError(f"position {pos} out of range")
        return self._items[pos]

    def erase(self, pos: int) -> bool:
        """Remove the element at *pos*; return whether it existed."""
        if not self.contains(pos):
            return False
        del self._items[pos]
        return True

    def to_string(self) -> str:
        """Compact text form."""
        return "[" + ",".join(item.to_string() for item in self._items) + "]"

    def format(self, indent: int = 4) -> str:
        """Indented text form."""
        return self._format(indent, 0)

    def _format(self, indent: int, level: int) -> str:
        tail = " " * (indent * level)
        body = " " * (indent * (level + 1))
        lines = ",\n".join(body + item._format(indent, level + 1) for item in self._items)
        return "[\n" + (lines + "\n" if lines else "") + tail + "]"

    def dumps(self, indent: Optional[int] = None) -> str:
        """Compact text when *indent* is ``None``, indented text otherwise."""
        return self.to_string() if indent is None else self.format(indent)

    def __add__(self, other: Any) -> "JsonArray":
        try:
            extra = _array_items(other)
        except TypeError:
            return NotImplemented
        result = JsonArray(self._items)
        result._items.extend(JsonValue(item) for item in extra)
        return result

    def __iadd__(self, other: Any) -> "JsonArray":
        try:
            extra = _array_items(other)
        except TypeError:
            return NotImplemented
        self._items.extend(JsonValue(item) for item in extra)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonArray):
            others = other._items
        elif isinstance(other, (list, tuple)):
            others = list(other)
        else:
            return NotImplemented
        return len(self._items) == len(others) and all(a == b for a, b in zip(self._items, others))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonArray({self.to_string()})"

    def __str__(self) -> str:
        return self.format()


class JsonValue:
    """Any JSON value: null, boolean, number, string, array or object."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        if isinstance(value, JsonValue):
            self._type = value._type
            data = value._data
            if isinstance(data, (JsonArray, JsonObject)):
                data = type(data)(data)
            self._data: Any = data
        elif value is None:
            self._type, self._data = ValueType.NULL, None
        elif isinstance(value, bool):
            self._type, self._data = ValueType.BOOLEAN, value
        elif isinstance(value, int):
            self._type, self._data = ValueType.NUMBER, int(value)
        elif isinstance(value, float):
            self._type, self._data = ValueType.NUMBER, float(value)
        elif isinstance(value, str):
            self._type, self._data = ValueType.STRING, str(value)
        elif isinstance(value, (JsonArray, list, tuple)):
            self._type, self._data = ValueType.ARRAY, JsonArray(value)
        elif isinstance(value, Mapping):
            self._type, self._data = ValueType.OBJECT, JsonObject(value)
        else:
            raise TypeError(f"cannot build a JSON value from {type(value).__name__}")

    @property
    def type(self) -> ValueType:
        """The kind of data held."""
        return self._type

    def valid(self) -> bool:
        return self._type is not ValueType.INVALID

    def empty(self) -> bool:
        return self.is_null()

    def is_null(self) -> bool:
        return self._type is ValueType.NULL

    def is_number(self) -> bool:
        return self._type is ValueType.NUMBER

    def is_boolean(self) -> bool:
        return self._type is ValueType.BOOLEAN

    def is_string(self) -> bool:
        return self._type is ValueType.STRING

    def is_array(self) -> bool:
        return self._type is ValueType.ARRAY

    def is_object(self) -> bool:
        return self._type is ValueType.OBJECT

    @staticmethod
    def _is_position(key: Any) -> bool:
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise TypeError("key must be a str or an int position")
        return isinstance(key, int)

    def contains(self, key: Union[str, int]) -> bool:
        """Whether an object holds *key*, or an array has position *key*."""
        if self._is_position(key):
            return self.is_array() and self._data.contains(key)
        return self.is_object() and self._data.contains(key)

    def at(self, key: Union[str, int]) -> "JsonValue":
        """Return the element under *key*; raise if the type or key is wrong."""
        if self._is_position(key):
            return self.as_array().at(key)
        return self.as_object().at(key)

    def erase(self, key: Union[str, int]) -> bool:
        """Remove the element under *key*; return whether it existed."""
        if self._is_position(key):
            return self.as_array().erase(key)
        return self.as_object().erase(key)

    def as_boolean(self) -> bool:
        if not self.is_boolean():
            raise JsonError("Wrong Type")
        return self._data

    def as_integer(self) -> int:
        """The number as an int; a fractional part is dropped."""
        if not self.is_number():
            raise JsonError("Wrong Type")
        return int(self._data)

    def as_float(self) -> float:
        if not self.is_number():
            raise JsonError("Wrong Type")
        return float(self._data)

    def as_string(self) -> str:
        if not self.is_string():
            raise JsonError("Wrong Type")
        return self._data

    def as_array(self) -> JsonArray:
        if not self.is_array():
            raise JsonError("Wrong Type")
        return self._data

    def as_object(self) -> JsonObject:
        if not self.is_object():
            raise JsonError("Wrong Type or data empty")
        return self._data

    def _ensure_array(self) -> JsonArray:
        if self.is_null():
            self._type, self._data = ValueType.ARRAY, JsonArray()
        return self.as_array()

    def _ensure_object(self) -> JsonObject:
        if self.is_null():
            self._type, self._data = ValueType.OBJECT, JsonObject()
        return self.as_object()

    def emplace(self, *args: Any) -> "JsonValue":
        """Append one item to an array, or set a ``key, value`` pair in an object.

        A null value first becomes an empty array or object.
        """
        if len(args) == 1:
            array = self._ensure_array()
            array.append(args[0])
            return array[-1]
        if len(args) == 2:
            return self._ensure_object().emplace(*args)
        raise TypeError("emplace takes an item, or a key and a value")

    def clear(self) -> None:
        """Reset to null."""
        self._type, self._data = ValueType.NULL, None

    def to_string(self) -> str:
        """Compact text form."""
        kind = self._type
        if kind is ValueType.NULL:
            return "null"
        if kind is ValueType.BOOLEAN:
            return "true" if self._data else "false"
        if kind is ValueType.NUMBER:
            return _number_text(self._data)
        if kind is ValueType.STRING:
            return _quote(self._data)
        if kind in (ValueType.ARRAY, ValueType.OBJECT):
            return self._data.to_string()
        raise JsonError("Unknown basic_value Type")

    def format(self, indent: int = 4) -> str:
        """Indented text form."""
        return self._format(indent, 0)

    def _format(self, indent: int, level: int) -> str:
        if self._type in (ValueType.ARRAY, ValueType.OBJECT):
            return self._data._format(indent, level)
        return self.to_string()

    def dumps(self, indent: Optional[int] = None) -> str:
        """Compact text when *indent* is ``None``, indented text otherwise."""
        return self.to_string() if indent is None else self.format(indent)

    def to_python(self) -> Any:
        """Plain Python data: None, bool, int, float, str, list or dict."""
        if self.is_array():
            return [item.to_python() for item in self._data]
        if self.is_object():
            return {key: item.to_python() for key, item in self._data.items()}
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            try:
                other = JsonValue(other)
            except TypeError:
                return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is ValueType.NUMBER:
            return _number_text(self._data) == _number_text(other._data)
        return self._data == other._data

    def __getitem__(self, key: Union[str, int]) -> "JsonValue":
        """Index an array, or look up an object key.

        A missing key is created with a null value, and a null value first
        becomes an empty object, so nested assignment works in one line.
        """
        if self._is_position(key):
            return self.as_array()[key]
        return self._ensure_object()._data.setdefault(key, JsonValue())

    def __setitem__(self, key: Union[str, int], item: Any) -> None:
        if self._is_position(key):
            self.as_array()[key] = item
        else:
            self._ensure_object()[key] = item

    def __or__(self, other: Any) -> "JsonValue":
        merged = self.as_object() | other
        if merged is NotImplemented:
            return NotImplemented
        return JsonValue(merged)

    def __ior__(self, other: Any) -> "JsonValue":
        obj = self._ensure_object()
        obj |= other
        return self

    def __add__(self, other: Any) -> "JsonValue":
        joined = self.as_array() + other
        if joined is NotImplemented:
            return NotImplemented
        return JsonValue(joined)

    def __iadd__(self, other: Any) -> "JsonValue":
        array = self._ensure_array()
        array += other
        return self

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"JsonValue({self.to_string()})"