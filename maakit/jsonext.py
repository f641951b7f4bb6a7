"""JSON conversions for points, rectangles and filesystem paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from maakit.jsonkit.value import JsonError, JsonValue
from maakit.osutils import path_to_utf8_string, to_path


def _as_value(value: Any) -> JsonValue:
    return value if isinstance(value, JsonValue) else JsonValue(value)


def _is_int_array(value: JsonValue, size: int) -> bool:
    if not value.is_array():
        return False
    items = value.as_array()
    return len(items) == size and all(item.is_number() for item in items)


@dataclass(frozen=True)
class Point:
    """An integer point, written in JSON as ``[x, y]``."""

    x: int = 0
    y: int = 0

    def to_json(self) -> JsonValue:
        return JsonValue([self.x, self.y])

    @classmethod
    def check_json(cls, value: Any) -> bool:
        """Whether *value* is an array of exactly two numbers."""
        return _is_int_array(_as_value(value), 2)

    @classmethod
    def from_json(cls, value: Any) -> "Point":
        """Read a point; raise :class:`JsonError` if *value* does not fit."""
        value = _as_value(value)
        if not cls.check_json(value):
            raise JsonError("Wrong JSON")
        return cls(*(item.as_integer() for item in value.as_array()))


@dataclass(frozen=True)
class Rect:
    """An integer rectangle, written in JSON as ``[x, y, width, height]``."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_json(self) -> JsonValue:
        return JsonValue([self.x, self.y, self.width, self.height])

    @classmethod
    def check_json(cls, value: Any) -> bool:
        """Whether *value* is an array of exactly four numbers."""
        return _is_int_array(_as_value(value), 4)

    @classmethod
    def from_json(cls, value: Any) -> "Rect":
        """Read a rectangle; raise :class:`JsonError` if *value* does not fit."""
        value = _as_value(value)
        if not cls.check_json(value):
            raise JsonError("Wrong JSON")
        return cls(*(item.as_integer() for item in value.as_array()))


def path_to_json(path: Union[str, os.PathLike]) -> JsonValue:
    """Write a path as a JSON string with forward slashes on Windows."""
    return JsonValue(path_to_utf8_string(path))


def path_from_json(value: Any) -> Path:
    """Read a path from a JSON string; raise :class:`JsonError` otherwise."""
    return to_path(_as_value(value).as_string())