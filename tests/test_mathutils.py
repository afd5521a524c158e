import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from etgkit.mathutils import (
    Vec2,
    angle_between,
    angle_to_radian,
    apply_bell_curve_force,
    bell_curve,
    calculate_four_corner,
    gen_random_number,
    interval_lerp,
    is_in_range,
    normalize,
    percentage_of,
    radian_to_direction,
    radians_to_degrees,
    rotate_vector,
    sin_wave_lerp,
    vector_length,
    vector_size_squared,
)

finite = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)


def test_vec2_length():
    assert Vec2(3, 4).length() == 5
    assert vector_length(Vec2(3, 4)) == Vec2(3, 4).length()
    assert vector_size_squared(Vec2(3, 4)) == Vec2(3, 4).length_squared()


def test_vec2_arithmetic_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(0.5, 4.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2
    assert -(-a) == a


@given(finite, finite)
def test_normalize_gives_unit_length(x, y):
    v = Vec2(x, y)
    if v.length() < 1e-6:
        with pytest.raises(ValueError):
            normalize(Vec2(0, 0))
    else:
        assert math.isclose(normalize(v).length(), 1.0, rel_tol=1e-9)


def test_normalize_zero_raises_with_message():
    with pytest.raises(ValueError, match="length is 0"):
        normalize(Vec2(0, 0))


@given(st.floats(min_value=-10, max_value=10))
def test_degree_radian_round_trip(rad):
    assert math.isclose(angle_to_radian(radians_to_degrees(rad)), rad, abs_tol=1e-12)


@given(st.floats(min_value=-3.0, max_value=3.0))
def test_radian_to_direction_is_unit_and_matches_angle(rad):
    d = radian_to_direction(rad)
    assert math.isclose(d.length(), 1.0, rel_tol=1e-12)
    assert math.isclose(angle_between(Vec2(0, 0), d), radians_to_degrees(rad), abs_tol=1e-9)


def test_is_in_range_inclusive():
    assert is_in_range(0, 0, 5)
    assert is_in_range(5, 0, 5)
    assert not is_in_range(6, 0, 5)


@given(st.integers(-100, 100), st.integers(0, 100))
def test_gen_random_int_within_bounds(lo, span):
    value = gen_random_number(lo, lo + span)
    assert isinstance(value, int)
    assert lo <= value <= lo + span


def test_gen_random_float_within_bounds():
    for _ in range(50):
        value = gen_random_number(0.5, 1.5)
        assert isinstance(value, float)
        assert 0.5 <= value <= 1.5


def test_interval_lerp_ends_and_reset():
    assert interval_lerp(10.0, 20.0, 4.0, 0.0) == 10.0
    assert interval_lerp(10.0, 20.0, 4.0, 4.0) == 20.0
    assert interval_lerp(10.0, 20.0, 4.0, 5.0) == 10.0


def test_sin_wave_lerp_peak_and_wrap():
    value, timer = sin_wave_lerp(25.0, 255.0, 1.0, 0.25, 0.25)
    assert timer == 0.5
    assert math.isclose(value, 255.0)
    value, timer = sin_wave_lerp(25.0, 255.0, 1.0, 0.9, 0.5)
    assert timer == 0.0
    assert value == 25.0


@given(st.floats(min_value=0, max_value=1))
def test_bell_curve_symmetric_and_bounded(p):
    assert math.isclose(bell_curve(p), bell_curve(1 - p), abs_tol=1e-12)
    assert -1e-12 <= bell_curve(p) <= 1.0


def test_bell_curve_peak_and_force():
    assert math.isclose(bell_curve(0.5), 1.0)
    assert abs(bell_curve(0.0)) < 1e-12
    direction = Vec2(1.0, 0.0)
    force = apply_bell_curve_force(0.5, direction, 300.0, 0.016)
    assert math.isclose(force.x, 300.0 * 0.016)
    assert force.y == 0.0


def test_rotate_vector_identity_and_quarter_turn():
    offset = Vec2(2.0, 1.0)
    assert rotate_vector(0.0, Vec2(1, 1), offset) == offset
    turned = rotate_vector(90.0, Vec2(1, 1), offset)
    assert math.isclose(turned.length(), offset.length())
    assert abs(turned.x * offset.x + turned.y * offset.y) < 1e-9


def test_four_corner_geometry():
    corners = calculate_four_corner(Vec2(10, 20), Vec2(8, 4), Vec2(4, 2), Vec2(0.5, 0.5))
    assert corners.top_right.y == corners.top_left.y
    assert corners.bottom_left.x == corners.top_left.x
    assert corners.top_right - corners.top_left == Vec2(8 * 0.5, 0)
    assert corners.bottom_left - corners.top_left == Vec2(0, 4 * 0.5)
    centre = (corners.top_left + corners.bottom_right) / 2
    assert centre == Vec2(10, 20)


def test_four_corner_default_scale_with_zero_origin():
    corners = calculate_four_corner(Vec2(1, 2), Vec2(3, 5), Vec2(0, 0))
    assert corners.top_left == Vec2(1, 2)
    assert corners.bottom_right == Vec2(1 + 3, 2 + 5)


def test_percentage_of():
    assert percentage_of(200, 50) == 100
    assert percentage_of(Vec2(10, 20), 100) == Vec2(10, 20)