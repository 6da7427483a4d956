# gfc

Games fundamental classes for pygame: an off-screen drawing canvas that uses
bottom-up coordinates, a stream-style text writer with alignment and flow
manipulators, a sound player with play modes, and simple collision tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gfc.canvas` – `Canvas`, an image you can draw on, plus `set_default_file_path`
  and `find_file` for locating image files.
- `gfc.graphics` – `Graphics`, a `Canvas` that also writes buffered text.
- `gfc.text` – `Align`, `Flow`, `FontMetrics`, `timetext` and the text
  manipulators used with `Graphics`.
- `gfc.font` – `Font`, a simple helper for drawing text at explicit positions.
- `gfc.sound` – `Sound`, `SoundPlayer`, `PlayMode` and `set_audio_params`.
- `gfc.collide` – bounding-box, bounding-circle and pixel-perfect collision tests.

## Coordinates

Every drawing call on a `Canvas` takes coordinates with the origin in the
**bottom-left** corner and *y* growing upwards. Rectangles are `(x, y, w, h)`
with `(x, y)` the bottom-left corner. The `scroll_pos` property shifts all
drawing by an offset; `reset_scroll_pos()` sets it back to `(0, 0)`.

## Drawing

```python
from gfc.canvas import Canvas

canvas = Canvas(320, 240)
canvas.fill((255, 255, 255))
canvas.draw_line((10, 10), (100, 50), (255, 0, 0))
canvas.fill_circle((160, 120), 30, (0, 0, 255))
canvas.draw_polygon([(0, 0), (50, 0), (25, 40)], (0, 128, 0))
print(canvas.get_pixel(160, 120))   # (0, 0, 255, 255)
```

Other drawing methods: `set_pixel`, `fill_rect` and `draw_rect` (rounded
corners with `radius`), `draw_hline`, `draw_vline`, `draw_oval`, `fill_oval`,
`draw_circle`, `draw_pie` and `fill_pie` (angles in degrees clockwise from
straight up), `draw_triangle`, `fill_triangle`, `draw_polyline`,
`fill_polygon`, `draw_bezier` and `blit`. Transparency is handled with
`set_color_key`, `color_key`, `is_color_key_set` and `clear_color_key`;
`match_color` returns the nearest colour the canvas can hold.

Canvases can also be made with `Canvas.from_surface`, `Canvas.from_file`,
`Canvas.from_fragment` (a rectangle of another canvas, surface or file),
`Canvas.from_tile` (one tile of a grid; column 0 is leftmost, row 0 is the
bottom one) and `copy`. Image files are looked up along a search path, by
default the current directory and an `images` sub-directory; change it with
`set_default_file_path("dir1;dir2")`. A missing or unreadable image gives a
small 16×16 placeholder picture instead of an error.

## Text

`Graphics` is a `Canvas` that also writes text in the style of a stream,
mixed with manipulators from `gfc.text`:

```python
from gfc.graphics import Graphics
from gfc.text import top, bottom, left, right, endl, font, color, timetext

g = Graphics(640, 480)
g.clear((0, 0, 0))
g << top << left << color(255, 255, 0) << "Score: " << 120
g << right << "Time: " << timetext(83450) << endl
g << bottom << font(24) << "Press SPACE"
g.flush()
```

`clear` fills the canvas and resets the text state: margins 5, 5, 2, 2,
`arial.ttf` at 18 points, black text, top row, left alignment. Left-aligned
text is drawn as soon as it is written; right-aligned and centred text is
drawn when its line ends or on `flush`. Fonts are found on the image search
path; when a font file is not found, pygame's default font is used.

The manipulators are `top`, `bottom`, `vcenter` (`vcentre`), `left`,
`right`, `center` (`centre`), `up`, `down`, `endl`, `flush`, and the
factories `row(n)`, `col(n)`, `rowcol(r, c)`, `xy(x, y)`, `font(face)`,
`font(size)`, `font(face, size)`, `leading(n)`, `color(clr)` or
`color(r, g, b, a=255)` (also `colour`), and `margins(l, r, u, b)`.
`g.write(...)` takes any mix of values and manipulators, and `g.cursor`
gives the insertion point. `timetext(ms)` formats a time in milliseconds as
`MM:SS.cc`.

For simpler needs `gfc.font.Font` wraps a `Graphics` object:

```python
from gfc.font import Font

f = Font(g)
f.set_color(255, 0, 0)
f.set_size(24)
f.draw_text(10, 10, "Hello")
f.draw_number(10, 40, 42)
```

## Sound

```python
from gfc.sound import Sound, SoundPlayer, PlayMode

player = SoundPlayer(PlayMode.PLAY_IF_NEW)
player.play(Sound("explosion.wav"))
player.volume(0.5)
```

Sound files are looked up in the current directory and a `sounds`
sub-directory, and cached; a missing file loads nothing and playing it does
nothing. The mixer is opened on first use with the parameters from
`set_audio_params` (by default 44100 Hz, 16-bit, stereo, buffer 2048), so an
audio device must be available.

Play modes decide what `play` does while something is already playing:
`TERMINATE_AND_PLAY` always restarts, `PLAY_IF_IDLE` plays only when idle,
`PLAY_IF_NEW` will not restart the sound that is playing, and `PLAY_ONCE`
will not replay the last sound given. A player also has `play_file`,
`is_playing`, `last_playing`, `pause`, `resume`, `is_paused`, `stop`,
`fade_out`, `expire` and `set_position`.

## Collisions

`gfc.collide` works on pygame surfaces, in surface coordinates (*y* grows
downwards): `collide_bounding_box`, `collide_bounding_circle`,
`collide_circles`, `collide_rects` (objects with `x`, `y`, `w`, `h`, such as
`pygame.Rect`), and `collide_pixel`, which treats pixels of a surface's colour
key as transparent (`is_transparent_pixel`).

## What it does not do

The package draws on off-screen canvases only. It does not open a window,
show a canvas on screen, run a game loop or handle keyboard and mouse events;
use pygame directly for those.