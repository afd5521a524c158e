"""Heads-up display pieces: ammo counter, ammo indicators, ammo bars and layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .mathutils import Vec2
from .spritebatch import Color, Sprite, Texture

# Empty magazine slots are drawn at half opacity.
EMPTY_SLOT_COLOR = Color(255, 255, 255, 128)
FULL_SLOT_COLOR = Color.WHITE

# Multiplier of the projectile height used as the gap between indicators.
INDICATOR_SPACING = 3.5

AMMO_COUNTER_OFFSET = Vec2(15.0, 100.0)


def _half(value) -> float:
    """Half a texture dimension; whole pixel sizes halve with integer division."""
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value // 2)
    if isinstance(value, float) and value.is_integer():
        return float(int(value) // 2)
    return value / 2


@dataclass
class AmmoCounter:
    """Text showing ``current / maximum`` ammo at a screen position."""

    position: Vec2 = Vec2()
    current_ammo: int = field(default=0, init=False)
    max_ammo: int = field(default=0, init=False)
    text: str = field(default="0 / 0", init=False)

    def set_ammo(self, current: int, maximum: int) -> bool:
        """Show new ammo values; return True if the text changed."""
        if current == self.current_ammo and maximum == self.max_ammo:
            return False
        self.current_ammo = current
        self.max_ammo = maximum
        self.text = f"{current} / {maximum}"
        return True


@dataclass(frozen=True)
class AmmoIndicator:
    """Draw properties of one bullet icon in the magazine column."""

    position: Vec2
    origin: Vec2
    color: Color = FULL_SLOT_COLOR
    scale: Vec2 = Vec2(1.0, 1.0)
    rotation: float = 0.0
    depth: float = 0.0
    texture: Texture | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether this slot still holds a round."""
        return self.color == FULL_SLOT_COLOR

    def sprite(self) -> Sprite:
        """A sprite ready to be queued in a sprite batch."""
        return Sprite(
            texture=self.texture,
            position=self.position,
            rotation=self.rotation,
            scale=self.scale,
            origin=self.origin,
            color=self.color,
        )


@dataclass
class AmmoIndicators:
    """Column of bullet icons stacked upward from the bottom ammo bar.

    ``on_top_bar_position`` receives the y coordinate the top bar should move
    to after each layout.
    """

    spacing_multiplier: float = INDICATOR_SPACING
    on_top_bar_position: Callable[[float], None] | None = None
    texture: Texture | None = None
    each_ammo_spacing: float = field(default=0.0, init=False)
    indicators: list[AmmoIndicator] = field(default_factory=list, init=False)

    def update(
        self,
        bottom_position: Vec2,
        magazine_size: int,
        magazine_ammo: int,
        projectile_size: Vec2 | None,
    ) -> float | None:
        """Lay out one icon per magazine slot and return the top bar's y.

        Returns None, leaving no icons, when the magazine holds no slots.
        """
        self.indicators = []
        if bottom_position is None or projectile_size is None:
            raise ValueError("a bottom bar and a projectile texture are required")
        if magazine_size <= 0:
            return None

        self.each_ammo_spacing = projectile_size.y * self.spacing_multiplier
        origin = Vec2(projectile_size.x / 2.0, projectile_size.y / 2.0)

        current_y = bottom_position.y - self.each_ammo_spacing
        for slot in range(magazine_size):
            color = EMPTY_SLOT_COLOR if slot >= magazine_ammo else FULL_SLOT_COLOR
            self.indicators.append(
                AmmoIndicator(
                    position=Vec2(bottom_position.x, current_y),
                    origin=origin,
                    color=color,
                    texture=self.texture,
                )
            )
            current_y -= self.each_ammo_spacing

        if self.on_top_bar_position is not None:
            self.on_top_bar_position(current_y)
        return current_y


@dataclass
class AmmoBar:
    """An end cap of the ammo column, centred on its position."""

    position: Vec2 = Vec2()
    texture: Texture | None = None
    scale: Vec2 = Vec2(1.0, 1.0)
    origin: Vec2 = field(default=Vec2(), init=False)

    def __post_init__(self) -> None:
        if self.texture is not None:
            self.origin = Vec2(self.texture.width / 2.0, self.texture.height / 2.0)

    def flip(self, horizontally: bool = True, vertically: bool = True) -> None:
        """Mirror the bar; a False axis is reset to its normal orientation."""
        self.scale = Vec2(-1.0 if horizontally else 1.0, -1.0 if vertically else 1.0)

    def sprite(self) -> Sprite:
        """A sprite ready to be queued in a sprite batch."""
        return Sprite(
            texture=self.texture,
            position=self.position,
            scale=self.scale,
            origin=self.origin,
        )


@dataclass
class HudLayout:
    """Screen placement of the HUD frames, bars and item icons.

    The game area is the window minus the width taken by the engine panel.
    """

    screen_size: Vec2
    engine_ui_width: float = 0.0
    right_frame_offset_perc: Vec2 = Vec2(4.0, 3.5)
    left_frame_offset_perc: Vec2 = Vec2(1.0, 3.5)
    ammo_bar_offset_perc_x: float = 2.0
    initial_ammo_bar_offset_y: float = 50.0
    left_x_offset_per_item: float = 10.0
    initial_left_offset_x: float = 35.0
    initial_left_offset_y: float = 18.0

    @property
    def game_screen_size(self) -> Vec2:
        """Size of the area the game is drawn in."""
        return Vec2(self.screen_size.x - self.engine_ui_width, self.screen_size.y)

    def right_frame_position(self, frame_size: Vec2) -> Vec2:
        """Centre of the gun frame in the bottom-right corner."""
        game = self.game_screen_size
        offset_x = game.x * (self.right_frame_offset_perc.x / 100)
        offset_y = game.y * (self.right_frame_offset_perc.y / 100)
        return Vec2(
            game.x - offset_x - _half(frame_size.x),
            game.y - offset_y - _half(frame_size.y),
        )

    def left_frame_position(self, frame_size: Vec2) -> Vec2:
        """Centre of the active item frame in the bottom-left corner."""
        game = self.game_screen_size
        offset_x = game.x * (self.left_frame_offset_perc.x / 100)
        offset_y = game.y * (self.left_frame_offset_perc.y / 100)
        return Vec2(
            offset_x + _half(frame_size.x),
            game.y - offset_y - _half(frame_size.y),
        )

    def progress_bar_position(self, left_frame_position: Vec2, frame_size: Vec2) -> Vec2:
        """Progress bar placed on the right edge of the left frame."""
        return Vec2(left_frame_position.x + _half(frame_size.x), left_frame_position.y)

    def ammo_bar_x(self, right_frame_position: Vec2, frame_size: Vec2) -> float:
        """Horizontal position of the ammo column, right of the gun frame."""
        game = self.game_screen_size
        return (
            right_frame_position.x
            + _half(frame_size.x)
            + game.x * self.ammo_bar_offset_perc_x / 100
        )

    def ammo_counter_position(self, right_frame_position: Vec2) -> Vec2:
        """Ammo counter text, above and slightly left of the gun frame."""
        return right_frame_position - AMMO_COUNTER_OFFSET

    def passive_item_positions(self, count: int) -> list[Vec2]:
        """Positions of ``count`` passive item icons along the bottom-left edge."""
        y = self.game_screen_size.y - self.initial_left_offset_y
        return [
            Vec2(self.initial_left_offset_x + self.left_x_offset_per_item * slot, y)
            for slot in range(1, count + 1)
        ]