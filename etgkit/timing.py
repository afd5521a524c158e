"""Frame timing and text formatting of vectors and rectangles."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .mathutils import Vec2
from .spritebatch import Rect

FPS = 170
DEFAULT_SCALE = 1.0


@dataclass
class FrameClock:
    """Tracks time since start and the length of the last frame, in seconds."""

    start: float = field(default_factory=time.monotonic)
    frame_tick: float = field(default=0.0, init=False)
    elapsed_seconds: float = field(default=0.0, init=False)
    _last: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._last = self.start

    @property
    def delta_time(self) -> float:
        """Same as ``frame_tick``."""
        return self.frame_tick

    def tick(self, now: float | None = None) -> float:
        """Start a new frame at ``now`` and return the previous frame's length."""
        if now is None:
            now = time.monotonic()
        self.elapsed_seconds = now - self.start
        self.frame_tick = now - self._last
        self._last = now
        return self.frame_tick


def _num(value) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return format(value, "g")


def format_vector(vector: Vec2) -> str:
    """``X: <x> Y: <y>`` followed by a newline."""
    return f"X: {_num(vector.x)} Y: {_num(vector.y)}\n"


def format_int_rect(rect: Rect) -> str:
    """Multi-line description of an integer rectangle."""
    left, top = int(rect.left), int(rect.top)
    width, height = int(rect.width), int(rect.height)
    return (
        f"Size: {format_vector(Vec2(width, height))}"
        f"Height: {height} Width: {width} Top: {top} Left:{left}\n"
        f"Position: {format_vector(Vec2(left, top))}\n"
    )


def format_float_rect(rect: Rect) -> str:
    """One-line description of a floating-point rectangle."""
    return (
        f"Left: {_num(rect.left)}, Top: {_num(rect.top)}, "
        f"Width: {_num(rect.width)}, Height: {_num(rect.height)} Size: \n"
    )