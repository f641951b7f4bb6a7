from pathlib import Path

import pytest

from maakit.jsonext import Point, Rect, path_from_json, path_to_json
from maakit.jsonkit.serialization import deserialize, serialize
from maakit.jsonkit.typed import convert, is_of
from maakit.jsonkit.value import JsonError, JsonValue


def test_point_to_json_is_pair():
    assert Point(1, 2).to_json() == JsonValue([1, 2])
    assert Point(1, 2).to_json().to_string() == "[1,2]"


@pytest.mark.parametrize(
    "data, expected",
    [([1, 2], True), ([1], False), ([1, 2, 3], False), (["a", "b"], False), ("x", False), (None, False)],
)
def test_point_check_json(data, expected):
    assert Point.check_json(JsonValue(data)) is expected


def test_point_round_trip():
    point = Point(-5, 9)
    assert Point.from_json(point.to_json()) == point


def test_point_from_bad_json_raises():
    with pytest.raises(JsonError):
        Point.from_json(JsonValue([1, 2, 3]))


def test_rect_round_trip():
    rect = Rect(3, 4, 50, 60)
    assert Rect.from_json(rect.to_json()) == rect
    assert rect.to_json() == JsonValue([3, 4, 50, 60])


def test_rect_check_json_needs_four_numbers():
    assert Rect.check_json([1, 2, 3, 4])
    assert not Rect.check_json([1, 2, 3])
    assert not Rect.check_json({"x": 1})


def test_rect_from_bad_json_raises():
    with pytest.raises(JsonError):
        Rect.from_json(JsonValue([1, 2]))


def test_typed_conversion_uses_hooks():
    assert is_of(JsonValue([7, 8]), Point)
    assert not is_of(JsonValue([7]), Point)
    assert convert(JsonValue([7, 8]), Point) == Point(7, 8)


def test_serialization_of_points_in_lists():
    points = [Point(1, 2), Point(3, 4)]
    value = serialize(points)
    assert value == JsonValue([[1, 2], [3, 4]])
    assert deserialize(value, list[Point]) == points


def test_path_round_trip():
    path = Path("some") / "dir" / "file.txt"
    assert path_from_json(path_to_json(path)) == path


def test_path_to_json_is_string():
    assert path_to_json(Path("name.txt")) == JsonValue("name.txt")


def test_path_from_non_string_raises():
    with pytest.raises(JsonError):
        path_from_json(JsonValue(5))