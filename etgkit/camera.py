"""Camera view handling and per-frame keyboard and mouse input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .mathutils import Vec2

MIN_SCALE_SPEED = 0.001
MAX_SCALE_SPEED = 0.008
ZOOM_FACTOR = 0.01
MOVE_FACTOR = 5.0
MIN_MOVE_SPEED = 0.25
MAX_MOVE_SPEED = 3.0

# The main view starts centred on the origin and zoomed in to this fraction.
INITIAL_ZOOM = 0.2

_MOVEMENT_KEYS = {
    "A": Vec2(-1.0, 0.0),
    "D": Vec2(1.0, 0.0),
    "W": Vec2(0.0, -1.0),
    "S": Vec2(0.0, 1.0),
}

_ARROW_KEYS = {
    "UP": Vec2(0.0, -1.0),
    "DOWN": Vec2(0.0, 1.0),
    "RIGHT": Vec2(1.0, 0.0),
    "LEFT": Vec2(-1.0, 0.0),
}

SHOOT_BUTTON = "MOUSE_LEFT"


@dataclass
class View:
    """A rectangular region of the world shown on screen."""

    center: Vec2 = Vec2()
    size: Vec2 = Vec2(1.0, 1.0)

    def zoom(self, factor: float) -> None:
        """Resize the view; a factor below 1 zooms in."""
        self.size = self.size * factor

    def move(self, dx: float, dy: float) -> None:
        """Shift the view's centre."""
        self.center = self.center + Vec2(dx, dy)

    def top_left(self) -> Vec2:
        """World position of the view's top-left corner."""
        return self.center - self.size / 2.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _keys(pressed: Iterable[str]) -> set[str]:
    return {str(key).upper() for key in pressed}


def _map_pixel_to_coords(view: View, pixel: Vec2, window_size: Vec2) -> Vec2:
    return Vec2(
        view.center.x + (pixel.x / window_size.x - 0.5) * view.size.x,
        view.center.y + (pixel.y / window_size.y - 0.5) * view.size.y,
    )


def zoom_scale(default_size: Vec2, current_size: Vec2) -> float:
    """How many times the current view is magnified relative to the default one."""
    return default_size.x / current_size.x


def adjust_move_factor(scale: float) -> float:
    """Camera pan speed for the given zoom scale, slower when zoomed in."""
    return _clamp(ZOOM_FACTOR * math.sqrt(10000.0 / scale), MIN_MOVE_SPEED, MAX_MOVE_SPEED)


def adjust_zoom_factor(scale: float) -> float:
    """Camera zoom speed for the given zoom scale, slower when zoomed in."""
    return _clamp(ZOOM_FACTOR * math.sqrt(0.1 / scale), MIN_SCALE_SPEED, MAX_SCALE_SPEED)


def movement_direction(pressed: Iterable[str]) -> Vec2:
    """Unnormalised W/A/S/D movement direction; each axis is -1, 0 or 1."""
    keys = _keys(pressed)
    direction = Vec2()
    for key, step in _MOVEMENT_KEYS.items():
        if key in keys:
            direction = direction + step
    return direction


def relative_mouse_pos(view: View, mouse_world: Vec2) -> Vec2:
    """Mouse position measured from the view's top-left corner."""
    return mouse_world - view.top_left()


def mouse_angle(mouse_world: Vec2, hero_position: Vec2) -> float:
    """Angle in radians from the hero to the mouse."""
    diff = mouse_world - hero_position
    return math.atan2(diff.y, diff.x)


@dataclass
class CameraController:
    """Reads held keys each frame and steers the view and movement direction.

    ``default_size`` is the window's size; ``mouse_pixel`` is the mouse
    position in window pixels and is set by the caller before ``update``.
    """

    default_size: Vec2
    view: View | None = None
    mouse_pixel: Vec2 = Vec2()
    direction: Vec2 = field(default=Vec2(), init=False)
    scale: float = field(default=0.0, init=False)
    is_shooting: bool = field(default=False, init=False)
    view_local_mouse_pos: Vec2 = field(default=Vec2(), init=False)
    world_mouse_pos: Vec2 = field(default=Vec2(), init=False)

    def __post_init__(self) -> None:
        if self.view is None:
            self.view = View(Vec2(0.0, 0.0), self.default_size * INITIAL_ZOOM)

    def update(self, pressed: Iterable[str]) -> None:
        """Apply one frame of input from the set of held keys and buttons."""
        keys = _keys(pressed)
        self.scale = zoom_scale(self.default_size, self.view.size)
        zoom_step = adjust_zoom_factor(self.scale)
        move_step = adjust_move_factor(self.scale)

        self.direction = movement_direction(keys)
        self.is_shooting = SHOOT_BUTTON in keys

        if "E" in keys:
            self.view.zoom(1.0 - zoom_step)
        if "Q" in keys:
            self.view.zoom(1.0 + zoom_step)
        for key, step in _ARROW_KEYS.items():
            if key in keys:
                self.view.move(step.x * move_step, step.y * move_step)

        self.world_mouse_pos = _map_pixel_to_coords(self.view, self.mouse_pixel, self.default_size)
        self.view_local_mouse_pos = relative_mouse_pos(self.view, self.world_mouse_pos)

    def is_moving(self) -> bool:
        """Whether any movement key was held in the last update."""
        return self.direction != Vec2(0.0, 0.0)