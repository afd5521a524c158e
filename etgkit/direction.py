"""Mapping angles and key presses to facing directions and animation variants."""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import Iterable

from .enums import (
    BulletManDeathEnum,
    BulletManHitEnum,
    BulletManIdleEnum,
    BulletManRunEnum,
    BulletManShootingEnum,
    Direction,
    HeroDashEnum,
    HeroIdleEnum,
    HeroRunEnum,
)
from .mathutils import Vec2, normalize

_DEFAULT_RANGES = (
    ((0, 22), Direction.Right),
    ((22, 67), Direction.FrontHandRight),
    ((67, 112), Direction.FrontHandLeft),
    ((112, 157), Direction.Left),
    ((157, 202), Direction.BackDiagonalLeft),
    ((202, 247), Direction.BackHandLeft),
    ((247, 292), Direction.BackHandRight),
    ((292, 337), Direction.BackDiagonalRight),
    ((337, 360), Direction.Right),
)

# Sector boundaries in degrees; each sector spans 45 degrees centred on a direction.
_SECTOR_BOUNDS = (22.5, 67.5, 112.5, 157.5, 202.5, 247.5, 292.5, 337.5)
_SECTOR_DIRECTIONS = (
    Direction.Right,
    Direction.FrontHandRight,
    Direction.FrontHandLeft,
    Direction.Left,
    Direction.BackDiagonalLeft,
    Direction.BackHandLeft,
    Direction.BackHandRight,
    Direction.BackDiagonalRight,
    Direction.Right,
)


def populate_direction_ranges() -> dict[tuple[int, int], Direction]:
    """Default map of inclusive degree ranges to directions."""
    return dict(_DEFAULT_RANGES)


def direction_from_angle(ranges: dict[tuple[int, int], Direction], angle: float) -> Direction:
    """Direction whose inclusive range holds ``angle``; ValueError if none does."""
    for (low, high), direction in ranges.items():
        if low <= angle <= high:
            return direction
    raise ValueError(f"Mouse angle is out of defined ranges. Angle is: {angle:f}")


def direction_to_target(target_position: Vec2, self_position: Vec2) -> Direction:
    """Direction one must face at ``self_position`` to look at ``target_position``."""
    unit = normalize(target_position - self_position)
    angle = math.degrees(math.atan2(unit.y, unit.x))
    if angle < 0:
        angle += 360.0
    return _SECTOR_DIRECTIONS[bisect_right(_SECTOR_BOUNDS, angle)]


_HERO_IDLE = {
    Direction.BackHandRight: HeroIdleEnum.Idle_Back,
    Direction.BackHandLeft: HeroIdleEnum.Idle_Back,
    Direction.BackDiagonalRight: HeroIdleEnum.Idle_BackWard,
    Direction.BackDiagonalLeft: HeroIdleEnum.Idle_BackWard,
    Direction.Right: HeroIdleEnum.Idle_Right,
    Direction.Left: HeroIdleEnum.Idle_Right,
    Direction.FrontHandRight: HeroIdleEnum.Idle_Front,
    Direction.FrontHandLeft: HeroIdleEnum.Idle_Front,
}

_HERO_RUN = {
    Direction.BackHandRight: HeroRunEnum.Run_Back,
    Direction.BackHandLeft: HeroRunEnum.Run_Back,
    Direction.BackDiagonalRight: HeroRunEnum.Run_BackWard,
    Direction.BackDiagonalLeft: HeroRunEnum.Run_BackWard,
    Direction.Right: HeroRunEnum.Run_Forward,
    Direction.Left: HeroRunEnum.Run_Forward,
    Direction.FrontHandRight: HeroRunEnum.Run_Front,
    Direction.FrontHandLeft: HeroRunEnum.Run_Front,
}

_BULLET_MAN_SHOOTING_RIGHT = frozenset(
    {
        Direction.BackHandRight,
        Direction.BackDiagonalRight,
        Direction.Right,
        Direction.FrontHandRight,
    }
)

_BULLET_MAN_HIT = {
    Direction.BackHandRight: BulletManHitEnum.Hit_Back_Right,
    Direction.BackDiagonalRight: BulletManHitEnum.Hit_Back_Right,
    Direction.Right: BulletManHitEnum.Hit_Right,
    Direction.FrontHandRight: BulletManHitEnum.Hit_Right,
    Direction.BackHandLeft: BulletManHitEnum.Hit_Back_Left,
    Direction.BackDiagonalLeft: BulletManHitEnum.Hit_Back_Left,
    Direction.Left: BulletManHitEnum.Hit_Left,
    Direction.FrontHandLeft: BulletManHitEnum.Hit_Left,
}

_BULLET_MAN_DEATH = {
    Direction.Right: BulletManDeathEnum.Death_Right_Side,
    Direction.FrontHandRight: BulletManDeathEnum.Death_Right_Front,
    Direction.FrontHandLeft: BulletManDeathEnum.Death_Left_Front,
    Direction.Left: BulletManDeathEnum.Death_Left_Side,
    Direction.BackDiagonalLeft: BulletManDeathEnum.Death_Left_Back,
    Direction.BackHandLeft: BulletManDeathEnum.Death_Left_Back,
    Direction.BackHandRight: BulletManDeathEnum.Death_Right_Back,
    Direction.BackDiagonalRight: BulletManDeathEnum.Death_Right_Back,
    Direction.Front_For_Dash: BulletManDeathEnum.Death_Front_North,
}

_BULLET_MAN_IDLE = {
    Direction.BackHandRight: BulletManIdleEnum.Idle_Back,
    Direction.BackHandLeft: BulletManIdleEnum.Idle_Back,
    Direction.BackDiagonalRight: BulletManIdleEnum.Idle_Back,
    Direction.Right: BulletManIdleEnum.Idle_Right,
    Direction.FrontHandRight: BulletManIdleEnum.Idle_Right,
    Direction.Left: BulletManIdleEnum.Idle_Left,
    Direction.FrontHandLeft: BulletManIdleEnum.Idle_Left,
    Direction.BackDiagonalLeft: BulletManIdleEnum.Idle_Left,
}

_BULLET_MAN_RUN = {
    Direction.BackHandRight: BulletManRunEnum.Run_Right_Back,
    Direction.BackDiagonalRight: BulletManRunEnum.Run_Right_Back,
    Direction.BackHandLeft: BulletManRunEnum.Run_Left_Back,
    Direction.BackDiagonalLeft: BulletManRunEnum.Run_Left_Back,
    Direction.Right: BulletManRunEnum.Run_Right,
    Direction.FrontHandRight: BulletManRunEnum.Run_Right,
    Direction.Left: BulletManRunEnum.Run_Left,
    Direction.FrontHandLeft: BulletManRunEnum.Run_Left,
}


def hero_idle_enum(direction: Direction) -> HeroIdleEnum:
    """Hero idle animation for a facing direction."""
    return _HERO_IDLE.get(direction, HeroIdleEnum.Idle_Back)


def hero_run_enum(direction: Direction) -> HeroRunEnum:
    """Hero run animation for a facing direction."""
    return _HERO_RUN.get(direction, HeroRunEnum.Run_Forward)


def bullet_man_shooting_enum(direction: Direction) -> BulletManShootingEnum:
    """Bullet man shooting animation for a facing direction."""
    if direction in _BULLET_MAN_SHOOTING_RIGHT:
        return BulletManShootingEnum.Shoot_Right
    return BulletManShootingEnum.Shoot_Left


def bullet_man_hit_enum(direction: Direction) -> BulletManHitEnum:
    """Bullet man hit animation for a facing direction."""
    return _BULLET_MAN_HIT.get(direction, BulletManHitEnum.Hit_Left)


def bullet_man_death_enum(direction: Direction) -> BulletManDeathEnum:
    """Bullet man death animation for a facing direction."""
    return _BULLET_MAN_DEATH.get(direction, BulletManDeathEnum.Death_Back_South)


def bullet_man_idle_enum(direction: Direction) -> BulletManIdleEnum:
    """Bullet man idle animation for a facing direction."""
    return _BULLET_MAN_IDLE.get(direction, BulletManIdleEnum.Idle_Back)


def bullet_man_run_enum(direction: Direction) -> BulletManRunEnum:
    """Bullet man run animation for a facing direction."""
    return _BULLET_MAN_RUN.get(direction, BulletManRunEnum.Run_Left)


# Checked in order; the first rule whose keys are all held wins.
_DASH_RULES = (
    (frozenset("DW"), HeroDashEnum.Dash_BackWard, Direction.BackDiagonalRight),
    (frozenset("AW"), HeroDashEnum.Dash_BackWard, Direction.BackDiagonalLeft),
    (frozenset("AS"), HeroDashEnum.Dash_Right, Direction.FrontHandLeft),
    (frozenset("DS"), HeroDashEnum.Dash_Right, Direction.FrontHandRight),
    (frozenset("A"), HeroDashEnum.Dash_Left, Direction.Left),
    (frozenset("D"), HeroDashEnum.Dash_Right, Direction.Right),
    (frozenset("W"), HeroDashEnum.Dash_Back, Direction.BackHandRight),
    (frozenset("S"), HeroDashEnum.Dash_Front, Direction.Front_For_Dash),
)


def dash_from_keys(pressed: Iterable[str]) -> tuple[HeroDashEnum, Direction | None]:
    """Dash animation and dash direction for the held W/A/S/D keys.

    Returns ``(HeroDashEnum.Unknown, None)`` when no movement key is held.
    """
    keys = {str(key).upper() for key in pressed}
    for required, dash, direction in _DASH_RULES:
        if required <= keys:
            return dash, direction
    return HeroDashEnum.Unknown, None


_DASH_VECTORS = {
    Direction.Left: Vec2(-1.0, 0.0),
    Direction.Right: Vec2(1.0, 0.0),
    Direction.BackHandRight: Vec2(0.0, -1.0),
    Direction.BackHandLeft: Vec2(0.0, -1.0),
    Direction.FrontHandRight: normalize(Vec2(1.0, 1.0)),
    Direction.FrontHandLeft: normalize(Vec2(-1.0, 1.0)),
    Direction.BackDiagonalRight: normalize(Vec2(1.0, -1.0)),
    Direction.BackDiagonalLeft: normalize(Vec2(-1.0, -1.0)),
    Direction.Front_For_Dash: Vec2(0.0, 1.0),
}


def dash_direction_vector(direction: Direction | None) -> Vec2:
    """Unit movement vector of a dash; the zero vector when there is none."""
    return _DASH_VECTORS.get(direction, Vec2(0.0, 0.0))