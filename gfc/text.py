"""Text layout primitives and the manipulators used with ``Graphics << ...``.

A manipulator is a callable that takes the graphics object, changes its text
state and returns it.  The graphics object is expected to provide ``flush``,
``set_align``, ``set_flow``, ``write``, the ``goto_*`` methods and the font,
colour and margin setters.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Align(Enum):
    """Horizontal alignment of text against the insertion point."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Flow(Enum):
    """Direction in which a new line moves the insertion point."""

    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class FontMetrics:
    """Measurements of a loaded font, in pixels."""

    size: int = 0
    height: int = 0
    width: int = 0
    ascent: int = 0
    descent: int = 0
    leading: int = 0
    baseline: int = 0

    def with_leading(self, leading):
        """Return a copy with a new leading and the baseline adjusted to it."""
        return replace(
            self,
            leading=leading,
            baseline=leading - self.height - self.descent,
        )


def _c_divmod_trunc(value, divisor):
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _c_mod(value, divisor):
    remainder = abs(value) % divisor
    return remainder if value >= 0 else -remainder


def timetext(t):
    """Format a time in milliseconds as ``MM:SS.cc``."""
    minutes = _c_mod(_c_divmod_trunc(t, 60000), 100)
    seconds = _c_mod(_c_divmod_trunc(t, 1000), 60)
    centis = _c_mod(_c_divmod_trunc(t, 10), 100)
    return f"{minutes:02d}:{seconds:02d}.{centis:02d}"


# Manipulators applied directly to the graphics object


def top(g):
    """Move to the top row and make text flow downwards."""
    g.flush()
    g.set_flow(Flow.DOWN)
    g.goto_row_top(0)
    g.goto_col(0)
    return g


def bottom(g):
    """Move to the bottom row and make text flow upwards."""
    g.flush()
    g.set_flow(Flow.UP)
    g.goto_row_bottom(0)
    g.goto_col(0)
    return g


def vcenter(g):
    """Move to the vertical centre and make text flow downwards."""
    g.flush()
    g.set_flow(Flow.DOWN)
    g.goto_row_center(0)
    g.goto_col(0)
    return g


vcentre = vcenter


def center(g):
    """Centre text on the insertion point."""
    g.set_align(Align.CENTER)
    return g


centre = center


def left(g):
    """Align text to the left of the line."""
    g.set_align(Align.LEFT)
    return g


def right(g):
    """Align text to the right of the line."""
    g.set_align(Align.RIGHT)
    return g


def up(g):
    """Make new lines go upwards without moving the insertion point."""
    g.set_flow(Flow.UP)
    return g


def down(g):
    """Make new lines go downwards without moving the insertion point."""
    g.set_flow(Flow.DOWN)
    return g


def endl(g):
    """End the current line and draw any buffered text."""
    g.write("\n")
    g.flush()
    return g


def flush(g):
    """Draw any buffered text."""
    g.flush()
    return g


# Manipulator factories


def row(n):
    """Manipulator moving to text row ``n``."""
    def apply(g):
        g.flush()
        g.goto_row(n)
        return g
    return apply


def col(n):
    """Manipulator moving to text column ``n``."""
    def apply(g):
        g.flush()
        g.goto_col(n)
        return g
    return apply


def rowcol(r, c):
    """Manipulator moving to text row ``r`` and column ``c``."""
    def apply(g):
        g.flush()
        g.goto_row(r)
        g.goto_col(c)
        return g
    return apply


def xy(x, y):
    """Manipulator moving the insertion point to pixel (x, y)."""
    def apply(g):
        g.flush()
        g.goto_xy(x, y)
        return g
    return apply


def font(*args):
    """Manipulator changing the font: ``font(face)``, ``font(size)`` or ``font(face, size)``."""
    if len(args) == 1 and isinstance(args[0], str):
        face, = args

        def apply(g):
            g.flush()
            g.set_font(face, 0)
            return g
    elif len(args) == 1 and isinstance(args[0], int) and not isinstance(args[0], bool):
        size, = args

        def apply(g):
            g.flush()
            g.set_font_size(size)
            return g
    elif len(args) == 2 and isinstance(args[0], str) and isinstance(args[1], int):
        face, size = args

        def apply(g):
            g.flush()
            g.set_font(face, size)
            return g
    else:
        raise TypeError("font() takes a face name, a point size, or both")
    return apply


def leading(n):
    """Manipulator changing the distance between text lines."""
    def apply(g):
        g.flush()
        g.set_font_leading(n)
        return g
    return apply


def _channel(value):
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel out of range 0..255: {value}")
    return value


def color(*args):
    """Manipulator changing the text colour: ``color(clr)`` or ``color(r, g, b, a=255)``."""
    if len(args) == 1:
        clr = args[0]
    elif len(args) in (3, 4):
        clr = tuple(_channel(v) for v in args)
        if len(clr) == 3:
            clr = clr + (255,)
    else:
        raise TypeError("color() takes a colour, or r, g, b and optional a")

    def apply(g):
        g.flush()
        g.set_text_color(clr)
        return g
    apply.color = clr
    return apply


colour = color


def margins(l=5, r=5, u=2, b=2):
    """Manipulator setting the left, right, upper and bottom text margins."""
    def apply(g):
        g.flush()
        g.set_margins(l, r, u, b)
        return g
    return apply