"""Test positions and their mixing rules with vectors.

Tests for src.tuples.point:
    - Construction fixes w at 1
    - Point + Vector → Point, Point - Vector → Point
    - Point - Point → Vector (w 1 - 1 = 0)
    - scale / div leave w at 1
    - Translate / untranslate round trip
    - Undefined operations raise TypeError

Run:
    pytest tests/test_point.py -v
"""

import math

import pytest

from src.tuples import Axis, Point, Vector


def test_new_point_has_unit_w():
    p = Point(4.3, -4.2, 3.1)
    assert (p.x, p.y, p.z, p.w) == (4.3, -4.2, 3.1, 1.0)
    assert Point.from_array([4.3, -4.2, 3.1]) == p


def test_two_points_equal():
    assert Point(1.0, 1.0, 1.0) == Point(1.0, 1.0, 1.0)


def test_two_points_not_equal():
    assert Point(1.0, -1.0, 1.0) != Point(1.0, 1.0, 1.0)


def test_axis_indexing():
    p = Point(3.0, 2.0, 1.0)
    assert (p[Axis.X], p[Axis.Y], p[Axis.Z]) == (3.0, 2.0, 1.0)


def test_add_a_vector_to_a_point():
    point = Point(3.0, -2.0, 5.0)
    vector = Vector(-2.0, 3.0, 1.0)

    result = point.add(vector)
    assert isinstance(result, Point)
    assert result == Point(1.0, 1.0, 6.0)
    assert point + vector == Point(1.0, 1.0, 6.0)
    assert result.w == 1.0


def test_subtract_two_points():
    p_1 = Point(3.0, 2.0, 1.0)
    p_2 = Point(5.0, 6.0, 7.0)

    result = p_1.sub(p_2)
    assert isinstance(result, Vector)
    assert result == Vector(-2.0, -4.0, -6.0)
    assert p_1 - p_2 == Vector(-2.0, -4.0, -6.0)
    assert result.w == 0.0


def test_subtract_vector_from_point():
    p = Point(3.0, 2.0, 1.0)
    v = Vector(5.0, 6.0, 7.0)

    result = p.sub(v)
    assert isinstance(result, Point)
    assert result == Point(-2.0, -4.0, -6.0)
    assert p - v == Point(-2.0, -4.0, -6.0)
    assert result.w == 1.0


def test_multiply_point_scalar():
    p = Point(1.0, 2.0, 3.0)
    assert p.scale(3.0) == Point(3.0, 6.0, 9.0)
    assert p * 3.0 == Point(3.0, 6.0, 9.0)
    assert 3.0 * p == Point(3.0, 6.0, 9.0)
    assert p.scale(3.0).w == 1.0
    assert p.scale(0.0).w == 1.0


def test_divide_point_scalar():
    p = Point(1.0, 2.0, 3.0)
    assert p.div(2.0) == Point(0.5, 1.0, 1.5)
    assert p / 2.0 == Point(0.5, 1.0, 1.5)
    assert p.div(2.0).w == 1.0


def test_divide_point_by_zero_keeps_w():
    p = Point(1.0, 0.0, -1.0).div(0.0)
    assert p.x == math.inf
    assert math.isnan(p.y)
    assert p.z == -math.inf
    assert p.w == 1.0


@pytest.mark.parametrize("p, v", [
    (Point(3.0, -2.0, 5.0), Vector(-2.0, 3.0, 1.0)),
    (Point(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0)),
    (Point(-1.5, 2.25, 0.5), Vector(0.75, -0.125, 4.0)),
])
def test_translate_round_trip(p, v):
    assert p.add(v).sub(v) == p


def test_undefined_point_operations():
    p = Point(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        p + p
    with pytest.raises(TypeError):
        -p
    with pytest.raises(TypeError):
        p.add(Point(0.0, 0.0, 0.0))
    with pytest.raises(TypeError):
        p.sub(3.0)
    assert not hasattr(p, 'magnitude')
    assert not hasattr(p, 'normalize')
    assert not hasattr(p, 'cross')
