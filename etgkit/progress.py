"""Active item progress bar and the HUD frames that show a gun or active item."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .mathutils import Vec2, interval_lerp
from .spritebatch import Color, Sprite, Texture

# Tint applied to an active item while it is in use or cooling down.
INACTIVE_ITEM_COLOR = Color(94, 94, 94)

# Margin, in pixels, between the progress frame texture and the bar inside it.
PROGRESS_MARGIN = 4


class ActiveItemState(Enum):
    """Lifecycle of an active item."""

    Ready = 0
    Consuming = 1
    Cooldown = 2


@dataclass
class ActiveItem:
    """An item the hero activates, then waits for it to cool down."""

    total_consume_time: float = 1.0
    total_cooldown_time: float = 1.0
    state: ActiveItemState = ActiveItemState.Ready
    consume_timer: float = 0.0
    cooldown_timer: float = 0.0
    color: Color = Color.WHITE
    texture: Texture | None = None


@dataclass
class ProgressBar:
    """Vertical bar next to the active item frame showing use or cooldown progress.

    ``texture_size`` is the size of the bar's frame texture in pixels.
    """

    texture_size: Vec2
    progress_color: Color = Color.YELLOW
    active_item: ActiveItem | None = None
    max_width: float = field(default=0.0, init=False)
    max_height: float = field(default=0.0, init=False)
    fill_color: Color = field(default=Color.YELLOW, init=False)
    rect_position: Vec2 = field(default=Vec2(), init=False)
    rect_size: Vec2 = field(default=Vec2(), init=False)
    rect_origin: Vec2 = field(default=Vec2(), init=False)
    top_center: Vec2 = field(default=Vec2(), init=False)
    bottom_center: Vec2 = field(default=Vec2(), init=False)
    total_length: float = field(default=0.0, init=False)
    current_progress: float = field(default=0.0, init=False)
    is_visible: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        self.max_width = float(self.texture_size.x - PROGRESS_MARGIN)
        self.max_height = float(self.texture_size.y - PROGRESS_MARGIN)
        self.fill_color = self.progress_color
        self.rect_size = Vec2(self.max_width, self.max_height)

    @property
    def origin(self) -> Vec2:
        """Centre of the frame texture."""
        return Vec2(self.texture_size.x / 2, self.texture_size.y / 2)

    @property
    def draws_progress(self) -> bool:
        """Whether the filled rectangle is drawn this frame."""
        return self.active_item is not None and self.active_item.state is not ActiveItemState.Ready

    def update(self, position: Vec2) -> None:
        """Recompute the filled part for the bar centred at ``position``."""
        self.top_center = Vec2(position.x, position.y - self.max_height / 2)
        self.bottom_center = Vec2(position.x, position.y + self.max_height / 2)
        self.total_length = abs(self.top_center.y - self.bottom_center.y)

        item = self.active_item
        if item is None:
            return

        if item.state is ActiveItemState.Consuming:
            item.color = INACTIVE_ITEM_COLOR
            self.current_progress = interval_lerp(
                self.total_length, 0.0, item.total_consume_time, item.consume_timer
            )
            self.fill_color = Color.WHITE
            self.rect_position = self.bottom_center
            self.rect_size = Vec2(self.max_width, -self.current_progress)
            self.rect_origin = Vec2(self.rect_size.x / 2, 0.0)
            self.is_visible = True
        elif item.state is ActiveItemState.Ready:
            self.is_visible = False
            item.color = Color.WHITE
        elif item.state is ActiveItemState.Cooldown:
            item.color = INACTIVE_ITEM_COLOR
            self.current_progress = interval_lerp(
                0.0, self.total_length, item.total_cooldown_time, item.cooldown_timer
            )
            self.rect_position = self.bottom_center
            self.rect_size = Vec2(self.max_width, -self.current_progress)
            self.is_visible = True


class BarType(Enum):
    """What a HUD frame displays."""

    GunBar = 0
    ActiveItemBar = 1


@dataclass
class FrameBar:
    """A HUD frame showing the held gun or the equipped active item, enlarged.

    The content is any object with ``texture`` and ``color`` attributes. An
    active item frame switches between ``full_frame_texture`` when the item is
    ready and ``progress_frame_texture`` otherwise.
    """

    texture: Texture
    bar_type: BarType = BarType.GunBar
    full_frame_texture: Texture | None = None
    progress_frame_texture: Texture | None = None
    position: Vec2 = Vec2()
    content_scale: float = 3.0
    gun_content: Any = field(default=None, init=False)
    item_content: ActiveItem | None = field(default=None, init=False)
    content: Sprite = field(default_factory=Sprite, init=False)

    def __post_init__(self) -> None:
        if self.full_frame_texture is None:
            self.full_frame_texture = self.texture
        if self.progress_frame_texture is None:
            self.progress_frame_texture = self.texture

    @property
    def origin(self) -> Vec2:
        """Centre of the current frame texture."""
        return Vec2(self.texture.width / 2, self.texture.height / 2)

    def _current_content(self):
        if self.bar_type is BarType.GunBar:
            return self.gun_content
        return self.item_content

    def content_sprite(self) -> Sprite | None:
        """The content to draw over the frame, or None when there is nothing."""
        content = self._current_content()
        if content is None or content.texture is None:
            return None
        return self.content

    def set_gun(self, gun) -> None:
        """Show ``gun`` in this frame."""
        self.gun_content = gun
        self.item_content = None
        self.bar_type = BarType.GunBar

    def set_active_item(self, item: ActiveItem) -> None:
        """Show ``item`` in this frame and refresh it at once."""
        self.item_content = item
        self.gun_content = None
        self.bar_type = BarType.ActiveItemBar
        self.update()

    def update(self) -> None:
        """Copy the content's look and, for items, pick the frame texture."""
        if self.bar_type is BarType.GunBar and self.gun_content is not None:
            self._load_content(self.gun_content)
        elif self.bar_type is BarType.ActiveItemBar and self.item_content is not None:
            self._load_content(self.item_content)
            if self.item_content.state is ActiveItemState.Ready:
                self.texture = self.full_frame_texture
            else:
                self.texture = self.progress_frame_texture

    def _load_content(self, content) -> None:
        texture = content.texture
        if texture is None:
            raise ValueError("frame content has no texture")
        self.content = Sprite(
            texture=texture,
            position=self.position,
            scale=Vec2(self.content_scale, self.content_scale),
            origin=Vec2(texture.width / 2.0, texture.height / 2.0),
            color=content.color,
        )