"""Vector type and small math helpers used across the game."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        """Squared magnitude."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Magnitude."""
        return math.sqrt(self.length_squared())


@dataclass(frozen=True)
class FourCorner:
    """Corners of an axis-aligned rectangle."""

    top_left: Vec2 = Vec2()
    top_right: Vec2 = Vec2()
    bottom_left: Vec2 = Vec2()
    bottom_right: Vec2 = Vec2()


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def gen_random_number(minimum, maximum):
    """Random integer in [minimum, maximum] for ints, uniform float otherwise."""
    if _is_int(minimum) and _is_int(maximum):
        return random.randint(minimum, maximum)
    return random.uniform(float(minimum), float(maximum))


def normalize(vector: Vec2) -> Vec2:
    """Scale ``vector`` to unit length; raise ValueError for a zero vector."""
    length = vector.length()
    if length == 0:
        raise ValueError(f"length is 0. Vector is: {vector.x:f} {vector.y:f}")
    return vector / length


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def angle_to_radian(angle: float) -> float:
    return angle * math.pi / 180.0


def radian_to_direction(rad: float) -> Vec2:
    """Unit vector pointing at angle ``rad``."""
    return Vec2(math.cos(rad), math.sin(rad))


def vector_size_squared(vector: Vec2) -> float:
    return vector.length_squared()


def vector_length(vector: Vec2) -> float:
    return vector.length()


def is_in_range(value, minimum, maximum) -> bool:
    """Inclusive range check."""
    return minimum <= value <= maximum


def _lerp(a, b, t):
    value = a + t * (b - a)
    return int(value) if _is_int(a) and _is_int(b) else value


def sin_wave_lerp(a, b, interval, timer, frame_tick):
    """Advance ``timer`` by one frame and lerp along a half sine wave.

    Returns ``(value, new_timer)``. The timer wraps to 0 once it passes 1.
    """
    timer += frame_tick / interval
    if timer > 1.0:
        timer = 0.0
    sine = math.sin(timer * math.pi)
    return _lerp(a, b, sine), timer


def interval_lerp(a, b, interval, timer):
    """Lerp from ``a`` to ``b`` over ``interval``; restart past the end."""
    t = timer / interval
    if t > 1.0:
        t = 0.0
    return _lerp(a, b, t)


def bell_curve(progress: float) -> float:
    """0 at progress 0 and 1, peaking at 1 when progress is 0.5."""
    return math.sin(progress * math.pi)


def apply_bell_curve_force(progress: float, direction: Vec2, amount: float, delta_time: float) -> Vec2:
    """Velocity for this frame of a bell-shaped push along ``direction``."""
    force = bell_curve(progress) * amount
    return direction * (force * delta_time)


def angle_between(start: Vec2, end: Vec2) -> float:
    """Angle in degrees of the vector from ``start`` to ``end``."""
    return radians_to_degrees(math.atan2(end.y - start.y, end.x - start.x))


def rotate_vector(rotation: float, scale: Vec2, offset: Vec2) -> Vec2:
    """Scale ``offset`` component-wise, then rotate it by ``rotation`` degrees."""
    angle = rotation * (math.pi / 180.0)
    sx = offset.x * scale.x
    sy = offset.y * scale.y
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vec2(sx * cos_a - sy * sin_a, sx * sin_a + sy * cos_a)


def calculate_four_corner(pos: Vec2, size: Vec2, origin: Vec2, scale: Vec2 = Vec2(1.0, 1.0)) -> FourCorner:
    """Corners of a sprite at ``pos`` with the given size, origin and scale."""
    width = size.x * scale.x
    height = size.y * scale.y
    shift = Vec2(origin.x * scale.x, origin.y * scale.y)
    return FourCorner(
        top_left=Vec2(pos.x, pos.y) - shift,
        top_right=Vec2(pos.x + width, pos.y) - shift,
        bottom_left=Vec2(pos.x, pos.y + height) - shift,
        bottom_right=Vec2(pos.x + width, pos.y + height) - shift,
    )


def percentage_of(value, percentage: float):
    """``percentage`` percent of ``value``."""
    return value * (percentage / 100)