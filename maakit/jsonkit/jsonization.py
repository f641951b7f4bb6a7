"""Declarative mapping between object attributes and JSON object members.

A :class:`Jsonization` lists the attributes of an object that take part in
JSON conversion. Each one is described by a :class:`Field`, or by a bare
attribute name. A field is written under its attribute name unless a
different key is given. It may be optional, and it has a kind (see
:mod:`maakit.jsonkit.typed`). When no kind is given, the type of the
attribute's current value on the object is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from maakit.jsonkit.serialization import deserialize, serialize
from maakit.jsonkit.typed import is_of
from maakit.jsonkit.value import JsonError, JsonObject, JsonValue


@dataclass(frozen=True)
class Field:
    """One attribute taking part in JSON conversion."""

    name: str
    kind: Any = None
    optional: bool = False
    key: Optional[str] = None

    @property
    def json_key(self) -> str:
        """The member name used in the JSON object."""
        return self.key if self.key is not None else self.name

    def kind_for(self, obj: Any) -> Any:
        """The declared kind, or the type of the attribute's current value on *obj*."""
        if self.kind is not None:
            return self.kind
        if obj is None:
            raise TypeError(f"field {self.name!r} has no kind and no object to take it from")
        current = getattr(obj, self.name)
        if current is None or isinstance(current, JsonValue):
            return JsonValue
        return type(current)


class Jsonization:
    """Converts objects to and from JSON objects through a list of fields."""

    def __init__(self, *args: Union[Field, str]) -> None:
        fields = []
        for arg in args:
            if isinstance(arg, Field):
                fields.append(arg)
            elif isinstance(arg, str):
                fields.append(Field(arg))
            else:
                raise TypeError(f"expected a Field or an attribute name, not {type(arg).__name__}")
        self.fields: tuple[Field, ...] = tuple(fields)

    def to_json(self, obj: Any) -> JsonValue:
        """Build a JSON object from the attributes of *obj*.

        Optional fields are always written. A later field with the same key
        replaces an earlier one.
        """
        result = JsonObject()
        for field in self.fields:
            result.emplace(field.json_key, serialize(getattr(obj, field.name)))
        return JsonValue(result)

    def error_key(self, value: Any, obj: Any = None) -> Optional[str]:
        """Return the key of the first field that does not fit *value*, or ``None``.

        A required field must be present and of its kind; an optional field
        may be missing but must be of its kind when present. A value that is
        not an object has no members at all.
        """
        if not isinstance(value, JsonValue):
            value = JsonValue(value)
        for field in self.fields:
            key = field.json_key
            present = value.is_object() and value.contains(key)
            if not present:
                if field.optional:
                    continue
                return key
            if not is_of(value.at(key), field.kind_for(obj)):
                return key
        return None

    def check_json(self, value: Any, obj: Any = None) -> bool:
        """Return whether *value* fits every field."""
        return self.error_key(value, obj) is None

    def from_json(self, value: Any, obj: Any) -> Any:
        """Set the attributes of *obj* from *value* and return *obj*.

        Missing optional fields leave their attributes untouched. If any
        field does not fit, :class:`JsonError` naming its key is raised and
        *obj* is left unchanged.
        """
        if not isinstance(value, JsonValue):
            value = JsonValue(value)
        bad_key = self.error_key(value, obj)
        if bad_key is not None:
            raise JsonError(f"Wrong JSON at key {bad_key!r}")
        updates = {}
        for field in self.fields:
            key = field.json_key
            if value.is_object() and value.contains(key):
                updates[field.name] = deserialize(value.at(key), field.kind_for(obj))
        for name, item in updates.items():
            setattr(obj, name, item)
        return obj