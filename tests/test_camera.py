import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from etgkit.camera import (
    MAX_MOVE_SPEED,
    MAX_SCALE_SPEED,
    MIN_MOVE_SPEED,
    MIN_SCALE_SPEED,
    CameraController,
    View,
    adjust_move_factor,
    adjust_zoom_factor,
    mouse_angle,
    movement_direction,
    relative_mouse_pos,
    zoom_scale,
)
from etgkit.mathutils import Vec2

scales = st.floats(min_value=1e-6, max_value=1e9, allow_nan=False, allow_infinity=False)


def test_view_zoom_round_trip():
    view = View(Vec2(0, 0), Vec2(100, 50))
    view.zoom(2.0)
    assert view.size == Vec2(200, 100)
    view.zoom(0.5)
    assert view.size == Vec2(100, 50)


def test_view_move_round_trip():
    view = View(Vec2(10, 20), Vec2(100, 50))
    view.move(3, 4)
    assert view.center != Vec2(10, 20)
    view.move(-3, -4)
    assert view.center == Vec2(10, 20)


def test_view_top_left_plus_half_size_is_center():
    view = View(Vec2(7, -3), Vec2(40, 30))
    assert view.top_left() + view.size / 2 == view.center


def test_zoom_scale_of_identical_sizes_is_one():
    assert zoom_scale(Vec2(800, 600), Vec2(800, 600)) == 1


def test_zoom_scale_grows_when_view_shrinks():
    assert zoom_scale(Vec2(800, 600), Vec2(400, 300)) > zoom_scale(Vec2(800, 600), Vec2(800, 600))


@given(scales)
def test_move_factor_is_clamped(scale):
    assert MIN_MOVE_SPEED <= adjust_move_factor(scale) <= MAX_MOVE_SPEED


@given(scales)
def test_zoom_factor_is_clamped(scale):
    assert MIN_SCALE_SPEED <= adjust_zoom_factor(scale) <= MAX_SCALE_SPEED


@given(scales, scales)
def test_factors_do_not_grow_with_scale(a, b):
    low, high = sorted((a, b))
    assert adjust_move_factor(high) <= adjust_move_factor(low)
    assert adjust_zoom_factor(high) <= adjust_zoom_factor(low)


def test_factor_limits_reached():
    assert adjust_move_factor(1e-9) == MAX_MOVE_SPEED
    assert adjust_move_factor(1e9) == MIN_MOVE_SPEED
    assert adjust_zoom_factor(1e-9) == MAX_SCALE_SPEED
    assert adjust_zoom_factor(1e9) == MIN_SCALE_SPEED


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({"A"}, Vec2(-1, 0)),
        ({"D"}, Vec2(1, 0)),
        ({"W"}, Vec2(0, -1)),
        ({"S"}, Vec2(0, 1)),
        ({"A", "D"}, Vec2(0, 0)),
        ({"w", "d"}, Vec2(1, -1)),
        (set(), Vec2(0, 0)),
    ],
)
def test_movement_direction(keys, expected):
    assert movement_direction(keys) == expected


def test_relative_mouse_pos_at_top_left_is_zero():
    view = View(Vec2(5, 5), Vec2(20, 10))
    assert relative_mouse_pos(view, view.top_left()) == Vec2(0, 0)


def test_mouse_angle_directions():
    hero = Vec2(10, 10)
    assert mouse_angle(Vec2(20, 10), hero) == 0.0
    assert mouse_angle(Vec2(10, 30), hero) == pytest.approx(math.pi / 2)


def test_controller_initial_view_is_zoomed():
    controller = CameraController(Vec2(1000, 500))
    assert controller.view.center == Vec2(0, 0)
    controller.update(set())
    assert controller.scale == pytest.approx(5.0)


def test_controller_zoom_keys_change_view_size():
    controller = CameraController(Vec2(1000, 500))
    before = controller.view.size
    controller.update({"E"})
    assert controller.view.size.x < before.x
    shrunk = controller.view.size
    controller.update({"Q"})
    assert controller.view.size.x > shrunk.x


def test_controller_arrow_keys_move_view():
    controller = CameraController(Vec2(1000, 500))
    controller.update({"UP", "RIGHT"})
    assert controller.view.center.y < 0
    assert controller.view.center.x > 0


def test_controller_direction_and_shooting():
    controller = CameraController(Vec2(1000, 500))
    controller.update({"W", "MOUSE_LEFT"})
    assert controller.is_moving()
    assert controller.is_shooting
    controller.update(set())
    assert not controller.is_moving()
    assert not controller.is_shooting


def test_controller_mouse_at_window_centre_maps_to_view_centre():
    controller = CameraController(Vec2(1000, 500), mouse_pixel=Vec2(500, 250))
    controller.update({"DOWN"})
    assert controller.world_mouse_pos == controller.view.center
    assert controller.view_local_mouse_pos == controller.view.size / 2