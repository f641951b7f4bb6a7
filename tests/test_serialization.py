import enum

import pytest

from maakit.jsonkit.serialization import deserialize, serialize
from maakit.jsonkit.value import JsonError, JsonValue


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Pair:
    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __eq__(self, other):
        return isinstance(other, Pair) and (self.a, self.b) == (other.a, other.b)


class WithToJson:
    def to_json(self):
        return {"kind": "custom"}


PAIR_OUT = {Pair: lambda p: [p.a, p.b]}


def _pair_in(value):
    items = deserialize(value, tuple[int, int])
    return Pair(*items)


PAIR_IN = {Pair: _pair_in}


def test_serialize_list_of_ints():
    assert serialize([1, 2, 3]).to_string() == "[1,2,3]"


def test_serialize_nested_mapping():
    result = serialize({"b": [True, None], "a": 1})
    assert result.to_string() == '{"a":1,"b":[true,null]}'


def test_serialize_set_is_sorted():
    assert serialize({3, 1, 2}) == JsonValue([1, 2, 3])


def test_serialize_enum_uses_value():
    assert serialize([Color.RED, Color.GREEN]) == JsonValue([1, 2])


def test_serialize_to_json_method():
    assert serialize(WithToJson()) == JsonValue({"kind": "custom"})


def test_serialize_custom_handler_inside_containers():
    result = serialize({"points": [Pair(1, 2), Pair(3, 4)]}, PAIR_OUT)
    assert result == JsonValue({"points": [[1, 2], [3, 4]]})


def test_serialize_unknown_type_raises():
    with pytest.raises(TypeError):
        serialize(object())


def test_serialize_non_string_key_raises():
    with pytest.raises(TypeError):
        serialize({1: "x"})


def test_serialize_copies_json_value():
    original = JsonValue([1, 2])
    copy = serialize(original)
    copy.emplace(3)
    assert original == JsonValue([1, 2])
    assert len(copy.as_array()) == 3


@pytest.mark.parametrize(
    "data, kind",
    [
        ([1, 2, 3], list[int]),
        ({"a": [1, 2], "b": []}, dict[str, list[int]]),
        ((1, "x", True), tuple[int, str, bool]),
        ((4, 5, 6), tuple[int, ...]),
        ({"x", "y"}, set[str]),
        ([[1.5], [2.5, 3.5]], list[list[float]]),
    ],
)
def test_round_trip(data, kind):
    assert deserialize(serialize(data), kind) == data


def test_round_trip_with_custom_handlers():
    data = [Pair(1, 2), Pair(5, 6)]
    assert deserialize(serialize(data, PAIR_OUT), list[Pair], PAIR_IN) == data


def test_deserialize_enum():
    assert deserialize(JsonValue([2, 1]), list[Color]) == [Color.GREEN, Color.RED]


def test_deserialize_accepts_plain_python():
    assert deserialize({"k": [1]}, dict[str, list[int]]) == {"k": [1]}


def test_deserialize_wrong_container_raises():
    with pytest.raises(JsonError):
        deserialize(JsonValue({"a": 1}), list[int])


def test_deserialize_object_expected_raises():
    with pytest.raises(JsonError):
        deserialize(JsonValue([1, 2]), dict[str, int])


def test_deserialize_fixed_tuple_length_mismatch_raises():
    with pytest.raises(JsonError):
        deserialize(JsonValue([1, 2, 3]), tuple[int, int])


def test_deserialize_wrong_element_raises():
    with pytest.raises(JsonError):
        deserialize(JsonValue([1, "two"]), list[int])


def test_deserialize_scalar_falls_back_to_conversion():
    assert deserialize(JsonValue("hello"), str) == "hello"
    with pytest.raises(JsonError):
        deserialize(JsonValue("hello"), int)


def test_deserialize_unsupported_key_kind_raises():
    with pytest.raises(TypeError):
        deserialize(JsonValue({"a": 1}), dict[int, int])