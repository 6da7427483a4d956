"""Drawing surfaces with a bottom-left origin.

A :class:`Canvas` wraps a ``pygame.Surface``.  All coordinates given to a
canvas have y growing upwards from the bottom edge, and are shifted by the
canvas scroll position before drawing.  Rectangles are ``(x, y, w, h)`` with
``(x, y)`` the bottom-left corner; points are ``(x, y)``.  Colours are
anything pygame accepts; colours read back are ``(r, g, b, a)`` tuples.
"""

from __future__ import annotations

import math
from pathlib import Path

import pygame

_DEFAULT_SEARCH_PATH = ".;images"
_search_path: list[str] = []
_image_cache: dict[str, pygame.Surface] = {}


def set_default_file_path(path):
    """Set the ``;``-separated list of directories searched for image files."""
    entries = [entry.strip().replace("\\", "/") or "." for entry in path.split(";")]
    _search_path[:] = entries
    _image_cache.clear()


set_default_file_path(_DEFAULT_SEARCH_PATH)


def find_file(filename):
    """Return the path of ``filename`` found along the search path.

    Raises FileNotFoundError if no directory on the path holds it.
    """
    candidate = Path(filename)
    if candidate.is_absolute():
        if candidate.is_file():
            return str(candidate)
    else:
        for directory in _search_path:
            found = Path(directory) / candidate
            if found.is_file():
                return str(found)
    raise FileNotFoundError(f"image file not found on the search path: {filename}")


def _load_image(filename):
    path = find_file(filename)
    key = str(Path(path).resolve())
    surface = _image_cache.get(key)
    if surface is None:
        surface = pygame.image.load(path)
        _image_cache[key] = surface
    return surface


def _placeholder():
    """A small red image with a white cross, used when no image is available."""
    surface = pygame.Surface((16, 16), 0, 32)
    surface.fill((255, 0, 0))
    pygame.draw.line(surface, (255, 255, 255), (2, 2), (13, 13), 2)
    pygame.draw.line(surface, (255, 255, 255), (13, 2), (2, 13), 2)
    pygame.draw.rect(surface, (0, 0, 0), surface.get_rect(), 1)
    return surface


def _new_surface(width, height):
    """Create a surface in the display's format, or 32-bit RGB without a display."""
    display = pygame.display.get_surface() if pygame.display.get_init() else None
    if display is not None:
        return pygame.Surface((width, height), 0, display)
    return pygame.Surface((width, height), 0, 32)


def _source_surface(source):
    """Return the surface of a Canvas, a pygame Surface or a file name (or None)."""
    if isinstance(source, Canvas):
        return source.surface
    if isinstance(source, pygame.Surface):
        return source
    try:
        return _load_image(source)
    except (FileNotFoundError, pygame.error):
        return None


def _cut(surface, rect):
    """Copy a bottom-left-origin rectangle out of ``surface``."""
    r = pygame.Rect(rect)
    out = _new_surface(r.w, r.h)
    area = pygame.Rect(r.x, surface.get_height() - r.y - r.h, r.w, r.h)
    out.blit(surface, (0, 0), area)
    return out


def _bezier_point(points, t):
    while len(points) > 1:
        points = [
            ((1 - t) * x0 + t * x1, (1 - t) * y0 + t * y1)
            for (x0, y0), (x1, y1) in zip(points, points[1:])
        ]
    return points[0]


class Canvas:
    """A drawable image with a bottom-left origin and a scroll offset."""

    def __init__(self, width, height, color_key=None):
        self._attach(_new_surface(width, height))
        if color_key is not None:
            self.set_color_key(color_key)

    def _attach(self, surface):
        self._surface = surface
        self._scroll = (0, 0)

    @classmethod
    def _wrap(cls, surface, color_key=None):
        obj = cls.__new__(cls)
        obj._attach(surface)
        if color_key is not None:
            obj.set_color_key(color_key)
        return obj

    # construction

    @classmethod
    def from_surface(cls, surface=None):
        """Wrap an existing surface; with None, a placeholder image is used."""
        return cls._wrap(surface if surface is not None else _placeholder())

    @classmethod
    def from_file(cls, filename, color_key=None):
        """Load an image file found on the search path.

        A missing or unreadable file gives the placeholder image.  With a
        colour key, a 24-bit image is converted to 32 bits first.
        """
        try:
            loaded = _load_image(filename)
        except (FileNotFoundError, pygame.error):
            return cls._wrap(_placeholder(), color_key)
        surface = loaded.copy()
        if color_key is not None and surface.get_bitsize() == 24:
            widened = pygame.Surface(surface.get_size(), 0, 32)
            widened.blit(surface, (0, 0))
            surface = widened
        return cls._wrap(surface, color_key)

    @classmethod
    def from_fragment(cls, source, rect, color_key=None):
        """Copy a rectangle out of a canvas, surface or image file."""
        surface = _source_surface(source)
        if surface is None:
            return cls._wrap(_placeholder(), color_key)
        return cls._wrap(_cut(surface, rect), color_key)

    @classmethod
    def from_tile(cls, source, num_cols, num_rows, i_col, i_row, color_key=None):
        """Copy one tile of an image divided into ``num_cols`` x ``num_rows`` tiles.

        Column 0 is the leftmost, row 0 the bottom one.
        """
        if num_cols <= 0 or num_rows <= 0:
            raise ValueError("a tile grid needs at least one column and one row")
        surface = _source_surface(source)
        if surface is None:
            return cls._wrap(_placeholder(), color_key)
        width = surface.get_width() // num_cols
        height = surface.get_height() // num_rows
        rect = (i_col * width, i_row * height, width, height)
        return cls._wrap(_cut(surface, rect), color_key)

    def copy(self, color_key=None):
        """Return a new canvas holding a copy of this one's pixels."""
        return type(self)._wrap(self._surface.copy(), color_key)

    # properties

    @property
    def surface(self):
        """The underlying pygame surface."""
        return self._surface

    @property
    def width(self):
        return self._surface.get_width()

    @property
    def height(self):
        return self._surface.get_height()

    @property
    def scroll_pos(self):
        """Offset added to every drawing coordinate."""
        return self._scroll

    @scroll_pos.setter
    def scroll_pos(self, value):
        x, y = value
        self._scroll = (int(x), int(y))

    def reset_scroll_pos(self):
        self._scroll = (0, 0)

    # coordinate helpers

    def _screen_point(self, pt, inset=0):
        sx, sy = self._scroll
        x, y = pt
        return (int(x) + sx, self.height - (int(y) + sy) - inset)

    def _screen_rect(self, rect):
        r = pygame.Rect(rect)
        sx, sy = self._scroll
        return pygame.Rect(r.x + sx, self.height - (r.y + sy) - r.h, r.w, r.h)

    # colours

    def match_color(self, color):
        """Return the closest colour this canvas's pixel format can hold."""
        return tuple(self._surface.unmap_rgb(self._surface.map_rgb(color)))

    def set_color_key(self, color):
        """Make pixels of ``color`` transparent when this canvas is blitted."""
        self._surface.set_colorkey(self._surface.map_rgb(color))

    def is_color_key_set(self):
        return self._surface.get_colorkey() is not None

    def color_key(self):
        """The transparent colour, or None if none is set."""
        key = self._surface.get_colorkey()
        return None if key is None else tuple(key)

    def clear_color_key(self):
        self._surface.set_colorkey(None)

    # pixels and fills

    def get_pixel(self, x, y):
        return tuple(self._surface.get_at(self._screen_point((x, y), 1)))

    def set_pixel(self, x, y, color):
        self._surface.set_at(self._screen_point((x, y), 1), color)

    def fill(self, color):
        """Fill the whole canvas, ignoring the scroll position."""
        self._surface.fill(color)

    def fill_rect(self, rect, color, radius=None):
        """Fill a rectangle, with rounded corners if ``radius`` is given."""
        screen = self._screen_rect(rect)
        if radius is None:
            self._surface.fill(color, screen)
        else:
            pygame.draw.rect(self._surface, color, screen, 0, border_radius=int(radius))

    def blit(self, dest, src, src_rect=None):
        """Copy ``src`` (or its ``src_rect`` part) to a point or rectangle.

        Only the position of a destination rectangle is used, but its height
        decides where its bottom edge lies.
        """
        src_surface = src.surface if isinstance(src, Canvas) else src
        if src_rect is None:
            area = pygame.Rect(0, 0, *src_surface.get_size())
        else:
            area = pygame.Rect(src_rect)
        if isinstance(dest, pygame.Rect) or len(dest) == 4:
            dest_rect = pygame.Rect(dest)
        else:
            dest_rect = pygame.Rect(int(dest[0]), int(dest[1]), area.w, area.h)
        source_area = pygame.Rect(
            area.x, src_surface.get_height() - area.y - area.h, area.w, area.h
        )
        self._surface.blit(src_surface, self._screen_rect(dest_rect).topleft, source_area)

    # lines and shapes

    def draw_hline(self, pt1, x2, color):
        start = self._screen_point(pt1, 1)
        end = (int(x2) + self._scroll[0], start[1])
        pygame.draw.line(self._surface, color, start, end)

    def draw_vline(self, pt1, y2, color):
        start = self._screen_point(pt1, 1)
        end = (start[0], self.height - (int(y2) + self._scroll[1]) - 1)
        pygame.draw.line(self._surface, color, start, end)

    def draw_line(self, pt1, pt2, color, width=None):
        """Draw a line, ``width`` pixels thick if given."""
        start = self._screen_point(pt1, 1)
        end = self._screen_point(pt2, 1)
        pygame.draw.line(self._surface, color, start, end, int(width) if width else 1)

    def draw_rect(self, rect, color, radius=None):
        """Outline a rectangle, with rounded corners if ``radius`` is given."""
        screen = self._screen_rect(rect)
        pygame.draw.rect(
            self._surface, color, screen, 1,
            border_radius=int(radius) if radius is not None else -1,
        )

    def draw_oval(self, rect, color):
        pygame.draw.ellipse(self._surface, color, self._screen_rect(rect), 1)

    def fill_oval(self, rect, color):
        pygame.draw.ellipse(self._surface, color, self._screen_rect(rect), 0)

    def draw_circle(self, pt, radius, color):
        pygame.draw.circle(self._surface, color, self._screen_point(pt), int(radius), 1)

    def fill_circle(self, pt, radius, color):
        pygame.draw.circle(self._surface, color, self._screen_point(pt), int(radius), 0)

    def _pie_points(self, pt, radius, angle_start, angle_end):
        cx, cy = self._screen_point(pt)
        start = angle_start - 90
        end = angle_end - 90
        while end < start:
            end += 360
        steps = max(1, int(end - start))
        points = [(cx, cy)]
        for i in range(steps + 1):
            angle = math.radians(start + (end - start) * i / steps)
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        return points

    def draw_pie(self, pt, radius, angle_start, angle_end, color):
        """Outline a pie slice; angles are degrees clockwise from straight up."""
        points = self._pie_points(pt, radius, angle_start, angle_end)
        pygame.draw.polygon(self._surface, color, points, 1)

    def fill_pie(self, pt, radius, angle_start, angle_end, color):
        """Fill a pie slice; angles are degrees clockwise from straight up."""
        points = self._pie_points(pt, radius, angle_start, angle_end)
        pygame.draw.polygon(self._surface, color, points, 0)

    def draw_triangle(self, pt1, pt2, pt3, color):
        self.draw_polygon([pt1, pt2, pt3], color)

    def fill_triangle(self, pt1, pt2, pt3, color):
        self.fill_polygon([pt1, pt2, pt3], color)

    def draw_polyline(self, pts, color):
        """Draw lines joining consecutive points."""
        pts = list(pts)
        for a, b in zip(pts, pts[1:]):
            self.draw_line(a, b, color)

    def draw_polygon(self, pts, color):
        """Outline a polygon; fewer than three points draw nothing."""
        points = [self._screen_point(p) for p in pts]
        if len(points) >= 3:
            pygame.draw.polygon(self._surface, color, points, 1)

    def fill_polygon(self, pts, color):
        """Fill a polygon; fewer than three points draw nothing."""
        points = [self._screen_point(p) for p in pts]
        if len(points) >= 3:
            pygame.draw.polygon(self._surface, color, points, 0)

    def draw_bezier(self, pts, steps, color):
        """Draw a Bezier curve over the control points in ``steps`` segments.

        It needs at least three control points and two steps; otherwise
        nothing is drawn.
        """
        points = [self._screen_point(p) for p in pts]
        if len(points) < 3 or steps < 2:
            return
        curve = [_bezier_point(points, i / steps) for i in range(steps + 1)]
        pygame.draw.lines(self._surface, color, False, curve)