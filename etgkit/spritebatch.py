"""Collecting textured sprites into depth-sorted, texture-grouped batches."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from itertools import groupby
from typing import ClassVar

from .mathutils import Vec2


@dataclass(frozen=True)
class Color:
    """RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(eq=False)
class Texture:
    """A texture handle; two textures are the same only if they are one object."""

    width: int
    height: int
    name: str = ""
    fill: Color = Color.WHITE

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid texture size {self.width}x{self.height}")

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class Vertex:
    """A corner of a quad: screen position, colour and texture coordinates."""

    position: Vec2
    color: Color = Color.WHITE
    tex_coords: Vec2 = Vec2()


@dataclass
class Sprite:
    """A textured rectangle with position, rotation (degrees), scale and origin."""

    texture: Texture | None = None
    position: Vec2 = Vec2()
    rotation: float = 0.0
    scale: Vec2 = Vec2(1.0, 1.0)
    origin: Vec2 = Vec2()
    color: Color = Color.WHITE
    texture_rect: Rect | None = None

    @property
    def rect(self) -> Rect:
        """Texture area shown; the whole texture unless set explicitly."""
        if self.texture_rect is not None:
            return self.texture_rect
        if self.texture is None:
            return Rect(0, 0, 0, 0)
        return Rect(0, 0, self.texture.width, self.texture.height)

    def transform_point(self, x: float, y: float) -> Vec2:
        """Map a local point through origin, scale, rotation and position."""
        angle = math.radians(self.rotation)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        lx = (x - self.origin.x) * self.scale.x
        ly = (y - self.origin.y) * self.scale.y
        return Vec2(
            lx * cos_a - ly * sin_a + self.position.x,
            lx * sin_a + ly * cos_a + self.position.y,
        )


@dataclass(frozen=True)
class SpriteQuad:
    """A queued sprite: four vertices, its texture, depth and submission order."""

    vertices: tuple[Vertex, Vertex, Vertex, Vertex]
    texture: Texture
    depth: float
    draw_order: int


@dataclass(frozen=True)
class DrawBatch:
    """Consecutive quads sharing a texture, drawn in one call."""

    texture: Texture
    vertices: tuple[Vertex, ...]


@lru_cache(maxsize=None)
def pixel_texture() -> Texture:
    """The shared 1x1 white texture."""
    return Texture(1, 1, "pixel", Color.WHITE)


@dataclass
class SpriteBatch:
    """Queues sprites between ``begin`` and ``end`` and groups them for drawing.

    Higher depth is drawn first; equal depths keep submission order.
    """

    _quads: list[SpriteQuad] = field(default_factory=list, init=False, repr=False)
    _draw_counter: int = field(default=0, init=False, repr=False)

    @property
    def pending(self) -> tuple[SpriteQuad, ...]:
        """Quads queued since the last ``begin``."""
        return tuple(self._quads)

    def begin(self) -> None:
        """Drop everything queued so far."""
        self._quads.clear()

    def draw(self, sprite: Sprite, depth: float) -> None:
        """Queue ``sprite`` at ``depth``; sprites without a texture are ignored."""
        texture = sprite.texture
        if texture is None:
            return
        rect = sprite.rect
        left, top = float(rect.left), float(rect.top)
        right, bottom = left + rect.width, top + rect.height
        corners = (
            ((0.0, 0.0), Vec2(left, top)),
            ((rect.width, 0.0), Vec2(right, top)),
            ((rect.width, rect.height), Vec2(right, bottom)),
            ((0.0, rect.height), Vec2(left, bottom)),
        )
        vertices = tuple(
            Vertex(sprite.transform_point(float(lx), float(ly)), sprite.color, tex)
            for (lx, ly), tex in corners
        )
        self._quads.append(SpriteQuad(vertices, texture, depth, self._draw_counter))
        self._draw_counter += 1

    def draw_rect_outline(self, rect: Rect, color: Color, thickness: float, depth: float) -> None:
        """Queue the four edges of ``rect`` as stretched pixel sprites."""
        pixel = pixel_texture()
        edges = (
            (Vec2(rect.left, rect.top), Vec2(rect.width, thickness)),
            (Vec2(rect.left, rect.top + rect.height - thickness), Vec2(rect.width, thickness)),
            (Vec2(rect.left, rect.top), Vec2(thickness, rect.height)),
            (Vec2(rect.left + rect.width - thickness, rect.top), Vec2(thickness, rect.height)),
        )
        for position, scale in edges:
            self.draw(Sprite(texture=pixel, position=position, scale=scale, color=color), depth)

    def end(self) -> list[DrawBatch]:
        """Sort the queued quads and split them into per-texture draw batches."""
        if not self._quads:
            return []
        ordered = sorted(self._quads, key=lambda quad: (-quad.depth, quad.draw_order))
        return [
            DrawBatch(texture, tuple(v for quad in group for v in quad.vertices))
            for texture, group in groupby(ordered, key=lambda quad: quad.texture)
        ]