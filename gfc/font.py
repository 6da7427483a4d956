"""A small text-drawing helper bound to a :class:`~gfc.graphics.Graphics`.

It keeps its own font face, size and colour and draws each piece of text at
explicit coordinates.  The stream interface of ``Graphics`` is usually the
better choice; this class suits code that positions every string itself.
"""

from __future__ import annotations

import pygame

_DEFAULT_FACE = "arial.ttf"
_DEFAULT_SIZE = 18
_BLACK = (0, 0, 0, 255)
_DEFAULT_ALPHA = 100


class Font:
    """A font face, size and colour used to draw on one graphics object."""

    def __init__(self, graphics):
        self._graphics = graphics
        self._face = _DEFAULT_FACE
        self._size = _DEFAULT_SIZE
        self._color = _BLACK
        self.load_default()

    @property
    def face(self):
        return self._face

    @property
    def size(self):
        return self._size

    @property
    def color(self):
        return self._color

    def load_default(self):
        """Select Arial, 18 points, black."""
        return self.load(_DEFAULT_FACE)

    def load(self, filename):
        """Select a font file at 18 points in black; True if it can be used."""
        self._face = filename
        self._size = _DEFAULT_SIZE
        self._color = _BLACK
        return self._graphics.draw_text_at((0, 0), self._face, self._size, self._color, "") >= 0

    def set_color(self, *args):
        """Set the colour: ``set_color(color)`` or ``set_color(r, g, b, a=100)``."""
        if len(args) == 1:
            self._color = tuple(pygame.Color(args[0]))
        elif len(args) in (3, 4):
            r, g, b, *rest = args
            a = rest[0] if rest else _DEFAULT_ALPHA
            self._color = tuple(pygame.Color(r, g, b, a))
        else:
            raise TypeError("set_color() takes a colour, or r, g, b and optional a")

    def set_size(self, size):
        self._size = size

    def draw_text(self, x, y, text, color=None, size=None):
        """Draw text at (x, y); return its width, or -1 if the font fails."""
        return self._graphics.draw_text_at(
            (x, y),
            self._face,
            self._size if size is None else size,
            self._color if color is None else color,
            text,
        )

    def draw_number(self, x, y, number, color=None, size=None):
        """Draw an integer in decimal; return its width."""
        return self.draw_text(x, y, str(int(number)), color, size)

    def draw_char(self, x, y, c):
        """Draw a single character; return its width."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return self.draw_text(x, y, c)