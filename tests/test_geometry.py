import math

import pytest

from gamezer.geometry import (
    Block,
    Coordinate,
    Dimensions,
    ScreenCoordinate,
    ScreenDimensions,
    distance,
    read_file,
)


def test_distance_pythagorean_triple():
    assert distance(Coordinate(0, 0), Coordinate(3, 4)) == pytest.approx(5.0)


def test_distance_to_self_is_zero():
    point = Coordinate(1.5, -2.25)
    assert distance(point, point) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        (Coordinate(0, 0), Coordinate(1, 1)),
        (Coordinate(-5, 2), Coordinate(7, -3)),
        (Coordinate(10.5, 0.25), Coordinate(-1.0, 4.0)),
    ],
)
def test_distance_is_symmetric_and_non_negative(a, b):
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) >= 0


def test_distance_along_axis_equals_offset():
    assert distance(Coordinate(2, 7), Coordinate(2, 12)) == pytest.approx(5)


def test_triangle_inequality():
    a, b, c = Coordinate(0, 0), Coordinate(4, 1), Coordinate(-2, 6)
    assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-9


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "data.json"
    content = '{"w": 40, "h": 30}\n'
    path.write_text(content, encoding="utf-8")
    assert read_file(path) == content
    assert read_file(str(path)) == content


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.json")


def test_value_types_hold_fields():
    block = Block(x=1, y=2, w=3, h=4)
    assert (block.x, block.y, block.w, block.h) == (1, 2, 3, 4)
    assert Dimensions(2, 3) == Dimensions(w=2, h=3)
    assert ScreenCoordinate(5, 6) == ScreenCoordinate(x=5, y=6)
    assert ScreenDimensions(7, 8).h == 8
    assert not math.isnan(distance(Coordinate(), Coordinate()))