"""Reload feedback shown above the hero: the reload slider and the blinking reload text."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import GunStateEnum
from .mathutils import Vec2, calculate_four_corner, interval_lerp, sin_wave_lerp
from .spritebatch import Color


@dataclass
class GunAmmo:
    """Ammunition state of a gun that the reload widgets read and update."""

    magazine_size: int
    magazine_ammo: int
    max_ammo: int
    reload_time: float
    is_reloading: bool = False
    state: GunStateEnum = GunStateEnum.Idle


@dataclass
class ReloadSlider:
    """A bar above the hero with a marker sliding left to right while reloading.

    ``bar_size`` is the size of the slider bar texture in pixels.
    """

    bar_size: Vec2
    gun: GunAmmo | None = None
    bar_offset_y: float = 20.0
    position_tolerance: float = 0.10
    scale: Vec2 = Vec2(0.25, 0.25)
    reload_timer: float = field(default=0.0, init=False)
    is_animating: bool = field(default=False, init=False)
    bar_position: Vec2 = field(default=Vec2(), init=False)
    value_position: Vec2 = field(default=Vec2(), init=False)

    @property
    def origin(self) -> Vec2:
        """Centre of the bar texture."""
        return Vec2(self.bar_size.x / 2, self.bar_size.y / 2)

    @property
    def visible(self) -> bool:
        """The slider is only drawn while it animates."""
        return self.is_animating

    def on_reload_start(self, is_reloading: bool) -> None:
        """Start the animation when the gun reports that it began reloading."""
        if is_reloading:
            self.is_animating = True
            self.reload_timer = 0.0

    def update(self, hero_position: Vec2, frame_tick: float) -> None:
        """Follow the hero and, while animating, advance the marker by one frame."""
        self.bar_position = hero_position + Vec2(0.0, -self.bar_offset_y)
        if not self.is_animating:
            return
        self._advance(frame_tick)

    def _advance(self, frame_tick: float) -> None:
        self.value_position = self.bar_position
        gun = self.gun
        if gun is None or not gun.is_reloading:
            self.finish()
            return
        if gun.reload_time <= 0.0:
            self.finish()
            return

        corners = calculate_four_corner(self.bar_position, self.bar_size, self.origin, self.scale)
        left_mid_x = corners.top_left.x / 2 + corners.bottom_left.x / 2
        right_mid_x = corners.top_right.x / 2 + corners.bottom_right.x / 2

        marker_x = interval_lerp(left_mid_x, right_mid_x, gun.reload_time, self.reload_timer)
        self.value_position = Vec2(marker_x, self.value_position.y)
        self.reload_timer += frame_tick

        position_reached = abs(marker_x - right_mid_x) <= self.position_tolerance
        time_complete = self.reload_timer >= gun.reload_time
        if position_reached or time_complete:
            self.finish()

    def finish(self) -> None:
        """Refill the magazine from the reserve and stop the animation."""
        gun = self.gun
        if gun is None:
            raise RuntimeError("Gun not found")
        gun.is_reloading = False
        gun.max_ammo -= gun.magazine_size - gun.magazine_ammo
        gun.magazine_ammo = gun.magazine_size
        gun.state = GunStateEnum.Idle
        self.is_animating = False
        self.reload_timer = 0.0


@dataclass
class ReloadText:
    """"Reload" text blinking above the hero while the magazine is empty."""

    texture_y_offset: float = -20.0
    blink_interval: float = 2.5
    min_alpha: float = 25.0
    max_alpha: float = 255.0
    scale: Vec2 = Vec2(0.2, 0.2)
    needs_reload: bool = False
    is_visible: bool = True
    blink_timer: float = field(default=0.0, init=False)
    position: Vec2 = field(default=Vec2(), init=False)
    color: Color = field(default=Color.WHITE, init=False)

    @property
    def drawn(self) -> bool:
        """Whether the text is shown this frame."""
        return self.needs_reload and self.is_visible

    def on_ammo_state_changed(self, is_empty: bool) -> None:
        """React to the gun running out of ammo or being refilled."""
        self.needs_reload = is_empty
        if not is_empty:
            self.is_visible = True

    def update(self, hero_position: Vec2, frame_tick: float) -> None:
        """Follow the hero and fade the text along a sine wave."""
        if not self.needs_reload:
            return
        self.position = hero_position + Vec2(0.0, self.texture_y_offset)
        alpha, self.blink_timer = sin_wave_lerp(
            self.min_alpha, self.max_alpha, self.blink_interval, self.blink_timer, frame_tick
        )
        self.color = Color(self.color.r, self.color.g, self.color.b, int(alpha))