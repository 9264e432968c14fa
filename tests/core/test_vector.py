from __future__ import annotations

import math

import pytest

from engine.core.vector import Vector2


def test_arithmetic_basics() -> None:
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -1.0)
    assert a + b == Vector2(4.0, 1.0)
    assert a - b == Vector2(-2.0, 3.0)
    assert -a == Vector2(-1.0, -2.0)
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == Vector2(2.0, 4.0)
    assert a * b == Vector2(3.0, -2.0)  # 要素積
    assert a.mul(b) == Vector2(3.0, -2.0)


def test_length_and_distance() -> None:
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vector2(1.0, 1.0).distance(Vector2(4.0, 5.0)) == pytest.approx(5.0)


def test_angle_range_is_half_open() -> None:
    assert Vector2(1.0, 0.0).angle() == pytest.approx(0.0)
    assert Vector2(0.0, 1.0).angle() == pytest.approx(90.0)
    assert Vector2(-1.0, 0.0).angle() == pytest.approx(180.0)
    assert Vector2(-1.0, -0.0).angle() == 180.0
    assert Vector2(0.0, -1.0).angle() == pytest.approx(-90.0)


def test_rotate_quarter_turn_counter_clockwise() -> None:
    v = Vector2(1.0, 0.0).rotate(90.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)


def test_rotate_by_unit_matches_rotate() -> None:
    v = Vector2(2.0, -3.0)
    a = v.rotate(37.0)
    b = v.rotate_by(Vector2.from_angle(37.0))
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)
    assert a.length() == pytest.approx(v.length())


def test_perpendicular() -> None:
    assert Vector2(2.0, 5.0).perpendicular() == Vector2(-5.0, 2.0)


def test_normalize_unit_length() -> None:
    n = Vector2(10.0, -10.0).normalize()
    assert n.length() == pytest.approx(1.0)


def test_normalize_zero_vector_returns_zero() -> None:
    assert Vector2(0.0, 0.0).normalize() == Vector2(0.0, 0.0)
    assert Vector2(math.inf, 0.0).normalize() == Vector2(0.0, 0.0)


def test_unpacking_and_tuple() -> None:
    x, y = Vector2(1.5, -2.5)
    assert (x, y) == (1.5, -2.5)
    assert Vector2(1.5, -2.5).as_tuple() == (1.5, -2.5)


def test_value_semantics() -> None:
    a = Vector2(1.0, 2.0)
    assert a == Vector2(1.0, 2.0)
    assert hash(a) == hash(Vector2(1.0, 2.0))
    with pytest.raises(AttributeError):
        a.x = 3.0  # type: ignore[misc]
