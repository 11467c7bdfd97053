# dome

The drawing and file-handling core of a small, design-oriented game engine.
It is pure Python and has no third-party dependencies.

## Modules

- **`dome.canvas`**: a software pixel canvas (`Canvas`) with an offset, a
  clip rectangle (`Rect`), alpha blending and drawing primitives: pixels,
  lines with a square pen size, circles, ellipses, triangles, rectangles
  and text. It also has the helpers `color_components` and `blend`.
- **`dome.font`**: the built-in 8x8 bitmap font, through `glyph` and
  `glyph_pixels`. The glyph tables themselves are in `dome.glyphs_latin`
  (U+0000 to U+00FF), `dome.glyphs_box` (box drawing, U+2500 to U+257F) and
  `dome.glyphs_extra` (Greek, block elements, Hiragana and the Standard
  Galactic Alphabet at U+E541 to U+E55A).
- **`dome.mathutil`**: an immutable 2D vector `Vec`, plus `lerp`, `mid`,
  `fmid` and `gcd`.
- **`dome.paths`**: base-path handling, path resolution, file and directory
  checks (`file_info` returns a `FileKind`), whole-file reads and writes,
  and reading a member out of a tar bundle.
- **`dome.engine`**: an `Engine` that logs to a stream and a log file,
  reads and writes game files relative to the base path, and draws the
  debug overlay. The module also has `resolve_entry_path`, which finds a
  game's entry point, and `find_mouse_cursor_index`, `print_title` and
  `print_usage`.

## Installation

Install with pip from a checkout of this directory. The `test` extra adds
pytest.

## Colours

Colours are 32-bit integers laid out as `0xAABBGGRR`. Red is in the lowest
byte and alpha is in the highest. A fully transparent colour draws nothing.
An alpha below `0xFF` is blended over the existing pixel, and the result is
always opaque.

## Drawing

```python
from dome.canvas import Canvas

canvas = Canvas(320, 240)
canvas.rectfill(10, 10, 50, 30, 0xFF0000FF)      # opaque red
canvas.circle_filled(160, 120, 20, 0x8000FF00)   # half-transparent green
canvas.line(0, 0, 319, 239, 0xFFFFFFFF, 1)
canvas.print_text("Hello, world", 8, 200, 0xFFFFFFFF)

print(hex(canvas.pget(20, 20)))
```

Drawing goes through `offset_x`, `offset_y` and the `clip` rectangle. Pixels
that fall outside the clip or the canvas are dropped. `pget` reads the
stored pixel and returns `0xFF000000` for coordinates outside the canvas.
In `print_text`, a newline moves down 10 pixels and back to the starting
`x`.

`resize(width, height, color)` changes the size of the canvas and fills it
with the given colour. If the size is unchanged, it does nothing.

## Font

```python
from dome.font import glyph, glyph_pixels

rows = glyph(ord("A"))           # eight row bytes, bit 0 is the leftmost pixel
pixels = glyph_pixels(ord("A"))  # [(x, y), ...] of the lit pixels
```

A codepoint outside the covered blocks, and U+007F, gets the placeholder
glyph `MISSING_GLYPH`: seven lit columns in every row.

## Maths

```python
from dome.mathutil import Vec, lerp, mid, gcd

v = Vec(3, 4)
print(v.length())              # 5.0
print((v + Vec(1, 1)).dot(v))  # 31
print(v.perp())                # Vec(x=-4, y=3)
print(mid(0, 15, 10))          # 10, the middle of the three values
print(gcd(48, 18))             # 6
print(lerp(0.0, 10.0, 0.25))   # 2.5
```

`gcd` raises `ValueError` for negative arguments.

## Paths and files

```python
from dome.paths import set_base_path, resolve_path, file_info, FileKind

set_base_path("/games/mygame")
print(resolve_path("main.wren"))           # /games/mygame/main.wren
print(file_info("/games/mygame") is FileKind.DIRECTORY)
```

Relative paths are resolved against the base path. If no base path has been
set, the current working directory is used. `read_file_from_tar` matches a
member stored as `path`, `./path` or `/path`, and raises
`FileNotFoundError` when none matches.

## Engine

```python
import sys
from dome.engine import Engine, resolve_entry_path, EntryResolutionError

with Engine(sys.stdout, "DOME-out.log") as engine:
    try:
        module = resolve_entry_path(engine, "mygame", True)
        source = engine.read_file(module)
    except EntryResolutionError:
        pass  # the error and the usage text have already been logged
```

`Engine.log` writes to the stream and to the log file. Pass `log_path=None`
to turn off the file. `report_error` also records the message in
`engine.errors`. `read_file` looks in the tar bundle first, when one is
open, then on disk, and raises `FileNotFoundError` if neither has the file.

The entry argument of `resolve_entry_path` can be a directory, a script file
or a `game.egg` tar bundle. For a directory it looks for `game.egg` first and
falls back to `main.wren`. It moves the base path and the working directory
to the game's directory and stores the resolved path in `engine.argv[1]`. It
returns the name of the file to load. When no entry point exists, it logs
an error and the usage text, then raises `EntryResolutionError`.

## What this package does not do

The package draws into an in-memory pixel list and reads files. It does not:

- open a window or show the canvas on screen;
- run game scripts or a game loop;
- handle input or play audio;
- provide a command-line program.

`print_usage` only writes the usage text to the engine's log.