from dataclasses import dataclass

import pytest

from etgkit.mathutils import Vec2
from etgkit.progress import (
    ActiveItem,
    ActiveItemState,
    BarType,
    FrameBar,
    ProgressBar,
)
from etgkit.spritebatch import Color, Texture


@dataclass
class _Gun:
    texture: Texture
    color: Color = Color.WHITE


def test_progress_bar_dimensions_leave_margin():
    bar = ProgressBar(Vec2(24, 128))
    assert bar.max_width == 24 - 4
    assert bar.max_height == 128 - 4
    assert bar.rect_size == Vec2(bar.max_width, bar.max_height)
    assert bar.fill_color == Color.YELLOW


def test_total_length_equals_inner_height():
    bar = ProgressBar(Vec2(24, 128))
    bar.update(Vec2(100.0, 200.0))
    assert bar.total_length == pytest.approx(bar.max_height)
    assert bar.top_center.x == bar.bottom_center.x == 100.0
    assert bar.bottom_center.y > bar.top_center.y


def test_ready_item_hides_bar_and_restores_color():
    item = ActiveItem(state=ActiveItemState.Ready, color=Color(94, 94, 94))
    bar = ProgressBar(Vec2(24, 128), active_item=item)
    bar.update(Vec2(0.0, 0.0))
    assert bar.is_visible is False
    assert item.color == Color.WHITE
    assert bar.draws_progress is False


def test_consuming_starts_full():
    item = ActiveItem(total_consume_time=2.0, state=ActiveItemState.Consuming)
    bar = ProgressBar(Vec2(24, 128), active_item=item)
    bar.update(Vec2(0.0, 0.0))
    assert bar.current_progress == pytest.approx(bar.total_length)
    assert bar.rect_size == Vec2(bar.max_width, -bar.current_progress)
    assert bar.rect_position == bar.bottom_center
    assert bar.rect_origin == Vec2(bar.max_width / 2, 0.0)
    assert bar.fill_color == Color.WHITE
    assert item.color == Color(94, 94, 94)
    assert bar.is_visible is True
    assert bar.draws_progress is True


def test_consuming_drains_over_time():
    item = ActiveItem(total_consume_time=2.0, state=ActiveItemState.Consuming)
    bar = ProgressBar(Vec2(24, 128), active_item=item)
    values = []
    for timer in (0.0, 0.5, 1.0, 1.5):
        item.consume_timer = timer
        bar.update(Vec2(0.0, 0.0))
        values.append(bar.current_progress)
    assert values == sorted(values, reverse=True)
    assert values[0] > values[-1]


def test_cooldown_starts_empty_and_fills():
    item = ActiveItem(total_cooldown_time=4.0, state=ActiveItemState.Cooldown)
    bar = ProgressBar(Vec2(24, 128), active_item=item)
    bar.update(Vec2(0.0, 0.0))
    assert bar.current_progress == 0.0
    assert item.color == Color(94, 94, 94)
    item.cooldown_timer = 2.0
    bar.update(Vec2(0.0, 0.0))
    assert 0.0 < bar.current_progress < bar.total_length
    assert bar.rect_size.y == -bar.current_progress


def test_progress_bar_without_item_keeps_initial_rect():
    bar = ProgressBar(Vec2(24, 128))
    bar.update(Vec2(10.0, 10.0))
    assert bar.rect_size == Vec2(bar.max_width, bar.max_height)
    assert bar.is_visible is True


def test_frame_set_gun_clears_item():
    frame = FrameBar(Texture(64, 48), bar_type=BarType.ActiveItemBar)
    frame.item_content = ActiveItem(texture=Texture(8, 8))
    gun = _Gun(Texture(16, 10))
    frame.set_gun(gun)
    assert frame.bar_type is BarType.GunBar
    assert frame.item_content is None
    assert frame.gun_content is gun


def test_frame_gun_content_is_centred_and_scaled():
    gun_texture = Texture(16, 10)
    frame = FrameBar(Texture(64, 48), position=Vec2(30.0, 40.0))
    frame.set_gun(_Gun(gun_texture, Color.RED))
    frame.update()
    sprite = frame.content_sprite()
    assert sprite.texture is gun_texture
    assert sprite.position == frame.position
    assert sprite.scale == Vec2(frame.content_scale, frame.content_scale)
    assert sprite.origin == Vec2(8.0, 5.0)
    assert sprite.color == Color.RED


def test_frame_active_item_switches_textures():
    full = Texture(64, 48, "full")
    with_progress = Texture(64, 48, "progress")
    frame = FrameBar(
        Texture(64, 48),
        full_frame_texture=full,
        progress_frame_texture=with_progress,
    )
    item = ActiveItem(state=ActiveItemState.Ready, texture=Texture(8, 8))
    frame.set_active_item(item)
    assert frame.bar_type is BarType.ActiveItemBar
    assert frame.texture is full
    item.state = ActiveItemState.Cooldown
    frame.update()
    assert frame.texture is with_progress
    assert frame.gun_content is None


def test_frame_without_content_draws_nothing():
    frame = FrameBar(Texture(64, 48))
    frame.update()
    assert frame.content_sprite() is None


def test_frame_content_without_texture_raises():
    frame = FrameBar(Texture(64, 48))
    frame.set_gun(_Gun(None))
    with pytest.raises(ValueError):
        frame.update()


def test_frame_origin_is_texture_centre():
    frame = FrameBar(Texture(64, 48))
    assert frame.origin == Vec2(32.0, 24.0)