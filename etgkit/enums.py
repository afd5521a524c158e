"""State and direction enumerations shared by heroes, enemies and guns."""

from enum import Enum


class HeroRunEnum(Enum):
    """Running animation variants of the hero."""

    Run_Back = 0
    Run_BackWard = 1
    Run_Forward = 2
    Run_Front = 3


class HeroIdleEnum(Enum):
    """Idle animation variants of the hero."""

    Idle_Back = 0
    Idle_BackWard = 1
    Idle_Front = 2
    Idle_Right = 3


class HeroDashEnum(Enum):
    """Dash animation variants of the hero."""

    Dash_Back = 0
    Dash_BackWard = 1
    Dash_Front = 2
    Dash_Left = 3
    Dash_Right = 4
    Unknown = 5


class HeroHit(Enum):
    """Hit animation of the hero."""

    JustHit = 0


class HeroDeath(Enum):
    """Death animation of the hero."""

    Dead = 0


class HeroStateEnum(Enum):
    """High level state of the hero."""

    Idle = 0
    Run = 1
    Dash = 2
    Die = 3
    Hit = 4


class EnemyStateEnum(Enum):
    """High level state of an enemy."""

    Idle = 0
    Run = 1
    Dash = 2
    Die = 3
    Shooting = 4
    Hit = 5


class BulletManRunEnum(Enum):
    """Running animation variants of the bullet man."""

    Run_Left = 0
    Run_Left_Back = 1
    Run_Right = 2
    Run_Right_Back = 3


class BulletManIdleEnum(Enum):
    """Idle animation variants of the bullet man.

    Members are listed in their described order; the values keep the
    declaration order.
    """

    Idle_Back = 0
    Idle_Left = 2
    Idle_Right = 1


class BulletManShootingEnum(Enum):
    """Shooting animation variants of the bullet man."""

    Shoot_Left = 0
    Shoot_Right = 1


class BulletManHitEnum(Enum):
    """Hit animation variants of the bullet man."""

    Hit_Back_Left = 0
    Hit_Back_Right = 1
    Hit_Left = 2
    Hit_Right = 3


class BulletManDeathEnum(Enum):
    """Death animation variants of the bullet man."""

    Death_Back_South = 0
    Death_Front_North = 1
    Death_Left_Back = 2
    Death_Left_Front = 3
    Death_Left_Side = 4
    Death_Right_Back = 5
    Death_Right_Front = 6
    Death_Right_Side = 7


class GunStateEnum(Enum):
    """State of a gun."""

    Idle = 0
    Shoot = 1
    Reload = 2


class Direction(Enum):
    """Eight facing directions plus the forward dash direction."""

    Right = 0
    FrontHandRight = 1
    FrontHandLeft = 2
    Left = 3
    BackDiagonalLeft = 4
    BackHandLeft = 5
    BackHandRight = 6
    BackDiagonalRight = 7
    # Only set when dashing straight down.
    Front_For_Dash = 8