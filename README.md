# nothingkit

Pure-Python building blocks for a small 2D platformer: vector and rectangle
geometry, 3×3 transformation matrices, triangle rasterisation, a simple
rigid-body simulation, reading level titles from files, and the state behind
a handful of UI widgets (an Emacs-style edit field, a command history, a
scrolling console log, a list selector, a slider and wiggly title text).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the tests, install the extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `nothingkit.vec` – the immutable `Vec` (also used as a point) with `+`, `-`,
  unary `-`, `arg`, `length`, `sqr_norm`, `norm`, `scale`, `entry_mult` and
  `entry_div`; plus `vec_from_polar`, `vec_from_points`, `rad_to_deg`,
  `rand_float` and `rand_float_range`.
- `nothingkit.rect` – `Rect`, `Line` and the `RectSide` enum. `Rect` has
  `position`, `center`, `grow`, `contains_point`, `side` and `rounded`
  (integers rounded half away from zero). Free functions: `rect_from_vecs`,
  `rect_from_points`, `rects_overlap`, `rects_overlap_area`,
  `rect_boundary2`, `rect_object_impact` (a tuple of booleans indexed by
  `RectSide`), `rect_snap` and `rect_impulse` (which return the moved
  rectangles together with a velocity mask), `horizontal_thicc_line` and
  `vertical_thicc_line`.
- `nothingkit.triangle` – `Triangle` (iterable over its three points, with
  `sorted_by_y`), `equilateral_triangle`, `random_triangle`,
  `rect_as_triangles`.
- `nothingkit.matrix` – the immutable `Mat3`, composed with `m1 @ m2`, with
  `transform_point` and `transform_triangle`; `trans_mat`, `trans_mat_vec`,
  `rot_mat`, `scale_mat` and `product` (the product of any number of
  matrices).
- `nothingkit.raster` – `draw_triangle` and `fill_triangle`, both of which
  call a `draw_line(x1, y1, x2, y2)` function you pass in, and `Surface`, a
  byte buffer of 1 to 4 bytes per pixel with `getpixel` and `putpixel`.
- `nothingkit.line_stream` – `LineStream(filename, mode="r", capacity=256)`,
  a context manager that reads a text file in chunks of at most
  `capacity - 1` characters (`next_chunk`, `next_line`, `collect_n_lines`,
  `collect_until_end`, `close`), and `trim_endline`.
- `nothingkit.hashset` – `HashSet` of byte strings of one fixed size, spread
  over a fixed number of buckets by the 64-bit FNV-1 hash (`fnv1`); supports
  `insert`, `in`, `len`, `clear` and `values`.
- `nothingkit.stack` – `Stack` of non-empty byte strings with `push`, `top`,
  `top_size`, `pop` and truth testing.
- `nothingkit.files` – `last_modified`, the modification time in whole
  seconds.
- `nothingkit.log` – `log_fail`, `log_warn` and `log_info`, which write
  `[FAIL] `, `[WARN] ` or `[INFO] ` followed by the message to standard
  error.
- `nothingkit.levels` – `LevelMetadata` (a level's title),
  `read_level_metadata`, `level_metadata_from_line_stream`, and
  `LevelFolder`, which lists the files of a directory (skipping names that
  start with a dot) with their titles.
- `nothingkit.events` – input events (`KeyDown`, `TextInput`, `MouseMotion`,
  `MouseButtonDown`, `MouseButtonUp`) and the `Key`, `Mod` and `MouseButton`
  enums that the widgets react to.
- `nothingkit.sprite_font` – layout for a 7×9 bitmap font sheet of 18
  glyphs per row: `char_rect`, `boundary_box`, `glyph_placements`.
- `nothingkit.history` – `History`, a fixed-capacity ring of commands with
  `push`, `current`, `previous` and `next`.
- `nothingkit.console_log` – `ConsoleLog`, a ring of coloured lines with
  `push_line` and `layout`.
- `nothingkit.edit_field` – `EditField`, a single line of at most 256
  characters with Emacs-style keys (`handle_event`, `replace`, `clean`,
  `restyle`, `cursor_rect`).
- `nothingkit.list_selector` – `ListSelector`, picked with the arrow keys,
  Return, mouse motion and the left button (`handle_event`, `item_boxes`,
  `size`, `move`, `clean_selection`, and `selected`, which is `None` until an
  item is chosen).
- `nothingkit.slider` – `Slider`, dragged with the mouse (`handle_event`,
  `layout`).
- `nothingkit.wiggly_text` – `WigglyText` and `FadingWigglyText`
  (`update`, `size`, `glyph_positions`, and `reset` for the fading kind).
- `nothingkit.rigid_bodies` – `RigidBodies`, a fixed-capacity pool of bodies
  addressed by integer id, and `Platforms`, the static rectangles they
  collide with. Adding past the capacity raises `OverflowError`; an unknown
  id raises `IndexError`.

## Examples

A box falling onto a platform:

```python
from nothingkit.vec import Vec
from nothingkit.rect import Rect
from nothingkit.rigid_bodies import Platforms, RigidBodies

platforms = Platforms([Rect(0.0, 100.0, 500.0, 20.0)])
bodies = RigidBodies(capacity=4)
box = bodies.add(Rect(10.0, 50.0, 20.0, 20.0))

for _ in range(60):
    bodies.apply_force(box, Vec(0.0, 1000.0))
    bodies.update(box, 1.0 / 60.0)
    bodies.collide(platforms)

print(bodies.hitbox(box), bodies.touches_ground(box))
```

Editing text with Emacs-style keys:

```python
from nothingkit.edit_field import EditField
from nothingkit.events import Key, KeyDown, Mod, TextInput
from nothingkit.vec import Vec

field = EditField(Vec(3.0, 3.0), (0.8, 0.8, 0.8, 0.8))
field.handle_event(TextInput("hello world"))
field.handle_event(KeyDown(Key.BACKSPACE, Mod.CTRL))
print(field.text)  # "hello "
```

Composing transformations:

```python
from nothingkit.matrix import rot_mat, trans_mat
from nothingkit.vec import Vec

m = trans_mat(10.0, 0.0) @ rot_mat(0.0)
print(m.transform_point(Vec(1.0, 2.0)))  # Vec(x=11.0, y=2.0)
```

## What it does not do

nothingkit is a library only. It opens no window, draws nothing, plays no
sound and reads no input devices: the widgets and the rasteriser work out
what should be drawn (rectangles, glyph positions, scanlines, text) and leave
the drawing to your renderer, and events have to be built from your own input
source. There is no game loop and no command to run. Of a level file it reads
only the title on the first line; the rest of a level, and any scripting or
console command evaluation, is outside the package.