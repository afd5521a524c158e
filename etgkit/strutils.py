"""Helpers for turning enums and types into display strings."""

from enum import Enum


def remove_namespace(name: str) -> str:
    """Drop everything up to and including the last ':' in ``name``."""
    _, sep, tail = name.rpartition(":")
    return tail if sep else name


def enum_to_string(value) -> str:
    """Name of an enum member, or "unnamed" when it has none."""
    if not isinstance(value, Enum):
        raise TypeError(f"{value!r} is not an enum member")
    return value.name or "unnamed"


def type_name_to_string(cls) -> str:
    """Bare class name, without enclosing scopes."""
    if not isinstance(cls, type):
        raise TypeError(f"{cls!r} is not a class")
    return cls.__qualname__.rpartition(".")[2]


def enum_values(enum_cls) -> list:
    """All members of ``enum_cls`` in their defined order."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"{enum_cls!r} is not an enum class")
    return list(enum_cls)