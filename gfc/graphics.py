"""A canvas that can print text through stream-like manipulators.

``Graphics`` adds to :class:`~gfc.canvas.Canvas` a text insertion point,
a current font, colour and margins, and a small text buffer.  Values
written with ``g << value`` (or :meth:`Graphics.write`) are buffered and
drawn at the insertion point.  Left-aligned text is drawn at once, while
right-aligned and centred text waits for the end of its line.
Manipulators from :mod:`gfc.text` change the text state in between.
"""

from __future__ import annotations

import pygame

from . import text as _text
from .canvas import Canvas, find_file
from .text import Align, Flow, FontMetrics

_DEFAULT_FONT = "arial.ttf"
_DEFAULT_SIZE = 18


def _trunc_div(value, divisor):
    """Integer division rounding towards zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _format(value):
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def _open_font(face, size):
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        path = find_file(face)
    except FileNotFoundError:
        return pygame.font.Font(None, size)
    return pygame.font.Font(path, size)


class Graphics(Canvas):
    """A canvas with a text cursor, fonts, margins and buffered text output."""

    def _attach(self, surface):
        super()._attach(surface)
        self._fonts = {}
        self._font = None
        self._metrics = FontMetrics()
        self._font_file = ""
        self._text_color = (0, 0, 0, 255)
        self._x = 0
        self._y = 0
        self._ml = self._mr = 5
        self._mu = self._mb = 2
        self._buffer = ""
        self._align = Align.LEFT
        self._flow = Flow.DOWN

    # clearing

    def clear(self, color):
        """Fill the canvas and reset scroll, text state and the insertion point."""
        self.reset_scroll_pos()
        self._buffer = ""
        self._align = Align.LEFT
        self._flow = Flow.DOWN
        self.write(
            _text.margins(),
            _text.font(_DEFAULT_FONT, _DEFAULT_SIZE),
            _text.color(0, 0, 0),
            _text.top,
            _text.left,
        )
        self.fill(color)

    # fonts

    def _load(self, font_face, size):
        if not size:
            size = self._metrics.size
        if not size:
            size = _DEFAULT_SIZE
        label = f"{font_face}.{size}"
        cached = self._fonts.get(label)
        if cached is None:
            pg_font = _open_font(font_face, size)
            height = pg_font.get_height()
            descent = pg_font.get_descent()
            line_skip = max(pg_font.get_linesize(), height)
            metrics = FontMetrics(
                size=size,
                height=height,
                width=height,
                ascent=pg_font.get_ascent(),
                descent=descent,
                leading=line_skip,
                baseline=line_skip - height - descent,
            )
            cached = (pg_font, metrics)
            self._fonts[label] = cached
        return cached

    def find_font(self, font_face, size=0):
        """Return the metrics of a font, loading and caching it if needed.

        A size of 0 means the current font size, or 18 if there is none.
        """
        return self._load(font_face, size)[1]

    def set_font(self, font_face, size=0):
        """Make a font current."""
        self._font, self._metrics = self._load(font_face, size)
        self._font_file = font_face

    def set_font_size(self, size):
        """Change the size of the current font (Arial if none is set)."""
        if not self._font_file:
            self._font_file = _DEFAULT_FONT
        self.set_font(self._font_file, size)

    @property
    def font_name(self):
        return self._font_file

    @property
    def font_size(self):
        return self._metrics.size

    @property
    def font_metrics(self):
        return self._metrics

    @property
    def text_color(self):
        return self._text_color

    def set_text_color(self, color):
        self._text_color = tuple(pygame.Color(color))

    def set_margins(self, l, r, u, b):
        """Set the left, right, upper and bottom margins and go to row 0, column 0."""
        self._ml, self._mr, self._mu, self._mb = l, r, u, b
        self.goto_row_col(0, 0)

    def set_font_leading(self, leading):
        """Change the distance between lines of the current font."""
        self._metrics = self._metrics.with_leading(leading)

    @property
    def align(self):
        return self._align

    @property
    def flow(self):
        return self._flow

    def set_align(self, align):
        """Change the alignment, drawing pending text in the old one first."""
        if align == self._align:
            return
        self.flush()
        self._align = align
        self.goto_col(0)

    def set_flow(self, flow):
        self._flow = flow

    # rendering

    def text_surface(self, text, font_face=None, size=0, color=None):
        """Render ``text`` into a new canvas.

        Without a font face the current font and text colour are used.
        """
        if font_face is None:
            if self._font is None:
                self.set_font_size(0)
            pg_font = self._font
            rgba = self._text_color
        else:
            pg_font = self._load(font_face, size)[0]
            rgba = self._text_color if color is None else tuple(pygame.Color(color))
        return Canvas.from_surface(pg_font.render(text, True, rgba))

    def draw_text_at(self, pos, font_face, size, color, text):
        """Draw text with a given font at ``pos``; return its width.

        Returns 0 for empty text and -1 if the font cannot be loaded.
        """
        try:
            rendered = self.text_surface(text, font_face, size, color)
        except (pygame.error, OSError):
            return -1
        if not text:
            return 0
        x, y = pos
        self.blit((x, y + self._metrics.descent), rendered)
        return rendered.width

    def _draw_line(self, line):
        if not line:
            return 0
        rendered = self.text_surface(line)
        width = rendered.width
        if self._align is Align.LEFT:
            self.blit((self._x, self._y + self._metrics.descent), rendered)
            return width
        if self._align is Align.CENTER:
            half = width // 2
            self.blit((self._x - half, self._y), rendered)
            return half
        self.blit((self._x - width, self._y), rendered)
        return 0

    # stream output

    def write(self, *args):
        """Write values and apply manipulators in order."""
        for item in args:
            if callable(item):
                item(self)
            else:
                self._buffer += _format(item)
                self._draw_buffered()
        return self

    def __lshift__(self, item):
        return self.write(item)

    def flush(self):
        """Draw all buffered text, moving to a new line at each line break."""
        if not self._buffer:
            return
        first, *rest = self._buffer.split("\n")
        self._buffer = ""
        self._x += self._draw_line(first)
        for line in rest:
            self.goto_line()
            self._x += self._draw_line(line)

    def _draw_buffered(self):
        if self._align is Align.LEFT:
            self.flush()
            return
        if "\n" not in self._buffer:
            return
        first, *rest = self._buffer.split("\n")
        self._buffer = ""
        self._x += self._draw_line(first)
        for index, line in enumerate(rest):
            self.goto_line()
            if line and index == len(rest) - 1:
                self._buffer = line
                return
            self._x += self._draw_line(line)

    # insertion point

    @property
    def cursor(self):
        """The insertion point as (x, y)."""
        return (self._x, self._y)

    def goto_xy(self, x, y):
        self._x = x
        self._y = y

    def goto_row_col(self, r, c):
        self.goto_row(r)
        self.goto_col(c)

    def goto_row(self, r=0):
        """Go to row ``r``, counted from the top or bottom depending on the flow."""
        if self._flow is Flow.DOWN:
            self.goto_row_top(r)
        else:
            self.goto_row_bottom(r)

    def goto_row_top(self, r=0):
        m = self._metrics
        self._y = self.height - self._mu - int((r + 1) * m.leading) + m.baseline

    def goto_row_bottom(self, r=0):
        m = self._metrics
        self._y = self._mb + int(r * m.leading) - m.descent

    def goto_row_center(self, r=0):
        m = self._metrics
        span = self.height - self._mu - self._mb - m.leading
        self._y = self._mb + _trunc_div(span, 2) - int(r * m.leading)

    def goto_col(self, c=0):
        """Go to column ``c``, counted from the side given by the alignment."""
        fw = self._metrics.width
        if self._align is Align.LEFT:
            self._x = self._ml + int(c * fw)
        elif self._align is Align.RIGHT:
            self._x = self.width - self._mr - int(c * fw)
        else:
            span = self.width - self._ml - self._mr
            self._x = self._ml + _trunc_div(span, 2) + int(c * fw)

    def goto_line(self):
        """Move one line in the flow direction and back to column 0."""
        step = self._metrics.leading
        self._y -= step if self._flow is Flow.DOWN else -step
        self.goto_col(0)