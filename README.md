# etgkit

Engine-independent gameplay pieces for a top-down twin-stick shooter.
Every piece works on plain numbers, enums and small dataclasses, so the
game logic can be driven, inspected and tested without a renderer.

## What is inside

- `etgkit.enums`: animation and state enums for the hero (`HeroRunEnum`,
  `HeroIdleEnum`, `HeroDashEnum`, `HeroStateEnum`, ...), the bullet man
  enemy (`BulletManRunEnum`, `BulletManHitEnum`, `BulletManDeathEnum`, ...),
  guns (`GunStateEnum`) and the eight-way `Direction`.
- `etgkit.flags`: `HeroStateFlags` and `EnemyStateFlag` bit flags with
  `has_any_flag` and `has_all_flags`. Mixing the two flag types raises
  `TypeError`.
- `etgkit.mathutils`: the immutable `Vec2`, `normalize`, angle conversion,
  `interval_lerp` and `sin_wave_lerp`, `bell_curve` and
  `apply_bell_curve_force`, `rotate_vector`, `calculate_four_corner`
  (returning a `FourCorner`), `percentage_of` and `gen_random_number`.
- `etgkit.strutils`: `enum_to_string`, `enum_values`, `remove_namespace`,
  `type_name_to_string`.
- `etgkit.direction`: `populate_direction_ranges` and
  `direction_from_angle`, `direction_to_target`, the per-direction
  animation lookups (`hero_idle_enum`, `hero_run_enum`,
  `bullet_man_idle_enum`, ...), `dash_from_keys` and
  `dash_direction_vector`.
- `etgkit.spritebatch`: `Color`, `Texture`, `Rect`, `Sprite` and a
  `SpriteBatch` that queues sprite quads and, on `end()`, sorts them by
  depth (higher first) and submission order into per-texture `DrawBatch`
  runs. `pixel_texture()` is the shared 1x1 white texture used by
  `draw_rect_outline`.
- `etgkit.camera`: a `View` (zoom, move, top-left) and a
  `CameraController` that turns a set of held keys into a movement
  direction, shooting state, zoom (`E`/`Q`) and panning (arrow keys).
- `etgkit.timing`: `FrameClock` for frame ticks and elapsed time, and
  `format_vector`, `format_int_rect`, `format_float_rect`.
- `etgkit.projectile`: a `Projectile` that moves at constant velocity and
  marks itself for destruction once it has travelled its range.
- `etgkit.hud`: `AmmoCounter`, `AmmoIndicators` (a column of
  `AmmoIndicator` icons), `AmmoBar` and `HudLayout` for placing frames,
  the ammo column, the ammo counter and passive item icons.
- `etgkit.reload`: `GunAmmo`, the `ReloadSlider` that refills the magazine
  when its animation finishes, and the blinking `ReloadText`.
- `etgkit.progress`: `ActiveItem` with its `ActiveItemState`, the
  `ProgressBar` that shows use and cooldown progress, and `FrameBar`
  showing a gun or an active item.

## Installation

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Examples

    from etgkit.direction import populate_direction_ranges, direction_from_angle, dash_from_keys
    from etgkit.enums import Direction, HeroDashEnum

    ranges = populate_direction_ranges()
    assert direction_from_angle(ranges, 10.0) is Direction.Right
    assert dash_from_keys({"W", "D"}) == (HeroDashEnum.Dash_BackWard, Direction.BackDiagonalRight)

    from etgkit.mathutils import Vec2, normalize
    unit = normalize(Vec2(3.0, 4.0))   # Vec2(x=0.6, y=0.8)

    from etgkit.spritebatch import SpriteBatch, Sprite, Texture
    batch = SpriteBatch()
    batch.begin()
    bullet = Texture(16, 16, "bullet")
    batch.draw(Sprite(texture=bullet, position=Vec2(10.0, 10.0)), depth=0)
    runs = batch.end()                 # one DrawBatch holding four vertices

    from etgkit.projectile import Projectile
    shot = Projectile(Vec2(0.0, 0.0), Vec2(100.0, 0.0), range=50.0)
    shot.update(0.25)                  # position is now Vec2(25.0, 0.0)
    shot.update(0.25)                  # travelled 50: pending_destroy is True

An angle outside every range makes `direction_from_angle` raise
`ValueError`, and normalising a zero-length vector raises `ValueError`.

## What it does not do

There is no game loop, window, renderer, audio or asset loading here.
`SpriteBatch.end()` returns vertex runs for a renderer to draw, textures
are size-only handles, and input arrives as sets of key names passed to
`CameraController.update` and `dash_from_keys` rather than being read from
a device. There is no command to run.