from __future__ import annotations

import math

import pytest

from geometry.config import GeometryConfig, set_config
from geometry.vector import Vec2, lerp


def test_constructors() -> None:
    assert Vec2.new(1, 2) == Vec2(1, 2)
    assert Vec2.zero() == Vec2(0, 0)
    assert Vec2.unit_x() == Vec2(1, 0)
    assert Vec2.unit_y() == Vec2(0, 1)
    assert Vec2.from_tuple((5, 6)).to_tuple() == (5, 6)
    x, y = Vec2(7, 8)
    assert (x, y) == (7, 8)


def test_from_polar() -> None:
    v = Vec2.from_polar(math.pi / 2, 2.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(2.0)


def test_add_sub_and_str() -> None:
    assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
    assert Vec2(1, 2) - Vec2(3, 4) == Vec2(-2, -2)
    assert str(Vec2(1, 2)) == "[1, 2]"
    assert str(Vec2(0.5, -1.5)) == "[0.5, -1.5]"


def test_dot_and_length() -> None:
    assert Vec2.unit_x().dot(Vec2.unit_y()) == 0
    assert Vec2(3, 4).length_sqr() == 25
    assert Vec2(3, 4).length() == 5
    assert Vec2.zero().length() == 0


def test_scale_returns_new_vector() -> None:
    v = Vec2(1, -2)
    assert v.scale(3) == Vec2(3, -6)
    assert v == Vec2(1, -2)


def test_normalize_in_place() -> None:
    v = Vec2(3.0, 4.0)
    v.normalize()
    assert v.x == pytest.approx(0.6)
    assert v.y == pytest.approx(0.8)


def test_normalize_zero_vector_is_not_finite() -> None:
    v = Vec2.zero()
    v.normalize()
    assert math.isnan(v.x)
    assert math.isnan(v.y)


def test_unit_divides_by_length() -> None:
    v = Vec2(3.0, 4.0)
    unit = v.unit()
    assert unit.x == pytest.approx(0.6)
    assert unit.y == pytest.approx(0.8)
    assert unit.length() == pytest.approx(1.0)
    assert v == Vec2(3.0, 4.0)
    zero_unit = Vec2.zero().unit()
    assert math.isnan(zero_unit.x)


def test_rotate_quarter_turn() -> None:
    v = Vec2(1.0, 0.0)
    v.rotate(math.radians(90))
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)


def test_angle_measures_atan2_of_x_then_y() -> None:
    assert Vec2(1.0, 0.0).angle() == pytest.approx(math.pi / 2)
    assert Vec2(0.0, 1.0).angle() == pytest.approx(0.0)
    assert Vec2(1.0, 1.0).angle() == pytest.approx(math.pi / 4)


def test_lerp_default_and_custom_interpolator() -> None:
    start = Vec2(0.0, 10.0)
    end = Vec2(10.0, 20.0)
    assert lerp(start, end, 0.5) == Vec2(5.0, 15.0)
    assert start.lerp(end, 0.0) == start
    assert start.lerp(end, 1.0) == end

    calls: list[tuple[float, float, float]] = []

    def step(a: float, b: float, t: float) -> float:
        calls.append((a, b, t))
        return b if t >= 0.5 else a

    assert lerp(start, end, 0.7, step) == end
    assert calls == [(0.0, 10.0, 0.7), (10.0, 20.0, 0.7)]


def test_is_close_uses_configured_tolerance() -> None:
    assert Vec2(1.0, 1.0).is_close(Vec2(1.0 + 1e-12, 1.0))
    assert not Vec2(1.0, 1.0).is_close(Vec2(1.01, 1.0))
    set_config(GeometryConfig(abs_tolerance=0.1))
    assert Vec2(1.0, 1.0).is_close(Vec2(1.05, 1.0))
    assert not Vec2(1.0, 1.0).is_close(Vec2(1.05, 1.0), abs_tol=0.01)
