"""Bit flags describing which actions a hero or enemy state allows."""

from enum import IntFlag


class HeroStateFlags(IntFlag):
    """Hero states and the action masks built from them.

    Bits, low to high: idle, run, dash, die, hit.
    """

    StateNone = 0
    StateIdle = 0b00001
    StateRun = 0b00010
    StateDash = 0b00100
    StateDie = 0b01000
    StateHit = 0b10000

    # Dashing, dying or being hit blocks these actions.
    PreventGunSwitching = 0b11100
    PreventMovement = 0b11100
    PreventShooting = 0b11100
    PreventActiveItemUsage = 0b11100
    PreventDamage = 0b11100
    # Only dying or being hit blocks flipping animations.
    PreventAnimFlip = 0b11000

    # Idle or running allows these actions.
    CanGunSwitch = 0b00011
    CanMove = 0b00011
    CanShoot = 0b00011
    CanUseActiveItems = 0b00011
    # Dashing additionally allows these.
    CanFlipAnims = 0b00111
    CanTakeDamage = 0b00111


class EnemyStateFlag(IntFlag):
    """Enemy states and the action masks built from them.

    Bits, low to high: idle, run, shooting, hit, die.
    """

    StateNone = 0
    StateIdle = 0b00001
    StateRun = 0b00010
    StateShooting = 0b00100
    StateHit = 0b01000
    StateDie = 0b10000

    PreventMovement = 0b11000
    PreventShooting = 0b11000
    PreventAnimFlip = 0b10000

    CanMove = 0b00111
    CanShoot = 0b00111
    CanFlipAnims = 0b01111


def _check_same_kind(flags, check):
    if type(flags) is not type(check):
        raise TypeError(
            f"cannot compare {type(flags).__name__} with {type(check).__name__}"
        )


def has_any_flag(flags, check):
    """Return True if ``flags`` shares at least one bit with ``check``."""
    _check_same_kind(flags, check)
    return (flags & check) != 0


def has_all_flags(flags, check):
    """Return True if every bit of ``check`` is set in ``flags``."""
    _check_same_kind(flags, check)
    return (flags & check) == check