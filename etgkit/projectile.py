"""Projectiles that fly in a straight line until they exceed their range."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .mathutils import Vec2
from .spritebatch import Texture


@dataclass
class Projectile:
    """A bullet moving at constant velocity, destroyed after travelling ``range``."""

    position: Vec2
    velocity: Vec2
    range: float
    rotation: float = 0.0
    damage: float = 1.0
    force: float = 1.0
    texture: Texture | None = None
    owner: Any = None
    collision_radius: float = 1.0
    distance_traveled: float = field(default=0.0, init=False)
    pending_destroy: bool = field(default=False, init=False)

    def update(self, frame_tick: float) -> None:
        """Advance one frame; marks the projectile for destruction past its range."""
        if self.pending_destroy:
            return
        movement = self.velocity * frame_tick
        self.position = self.position + movement
        self.distance_traveled += movement.length()
        if self.distance_traveled >= self.range:
            self.mark_for_destroy()

    def mark_for_destroy(self) -> None:
        """Flag the projectile for removal; it stops moving."""
        self.pending_destroy = True