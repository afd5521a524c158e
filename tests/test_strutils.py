import pytest

from etgkit.enums import BulletManIdleEnum, Direction, HeroDashEnum
from etgkit.mathutils import FourCorner, Vec2
from etgkit.strutils import enum_to_string, enum_values, remove_namespace, type_name_to_string


def test_remove_namespace():
    assert remove_namespace("ETG::Hero") == "Hero"
    assert remove_namespace("Hero") == "Hero"
    assert remove_namespace("A::B::C") == "C"


def test_enum_to_string_gives_member_name():
    assert enum_to_string(Direction.Right) == "Right"
    assert enum_to_string(HeroDashEnum.Unknown) == "Unknown"


def test_enum_to_string_rejects_non_enum():
    with pytest.raises(TypeError):
        enum_to_string(3)


def test_type_name_to_string():
    assert type_name_to_string(Vec2) == "Vec2"
    assert type_name_to_string(FourCorner) == "FourCorner"


def test_type_name_to_string_strips_enclosing_class():
    class Outer:
        class Inner:
            pass

    assert type_name_to_string(Outer.Inner) == "Inner"


def test_type_name_to_string_rejects_instance():
    with pytest.raises(TypeError):
        type_name_to_string(Vec2())


def test_enum_values_in_described_order():
    assert enum_values(BulletManIdleEnum) == [
        BulletManIdleEnum.Idle_Back,
        BulletManIdleEnum.Idle_Left,
        BulletManIdleEnum.Idle_Right,
    ]


def test_enum_values_round_trip_through_names():
    for member in enum_values(Direction):
        assert Direction[enum_to_string(member)] is member


def test_enum_values_rejects_non_enum():
    with pytest.raises(TypeError):
        enum_values(Vec2)