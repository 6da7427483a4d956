"""Collision tests between surfaces, rectangles and circles.

Surfaces are anything with ``get_size()``; the pixel-level tests also need
``get_colorkey()``, ``get_at_mapped()`` and ``map_rgb()`` (as on
``pygame.Surface``).  Coordinates are surface coordinates, with y growing
downwards.
"""

from __future__ import annotations


def is_transparent_pixel(surface, u, v):
    """Return True if pixel (u, v) of ``surface`` has the colour-key colour.

    A surface without a colour key has no transparent pixels.
    """
    width, height = surface.get_size()
    if not (0 <= u < width and 0 <= v < height):
        raise IndexError(f"pixel ({u}, {v}) lies outside a {width}x{height} surface")
    key = surface.get_colorkey()
    if key is None:
        return False
    return surface.get_at_mapped((u, v)) == surface.map_rgb(key)


def collide_pixel(a, ax, ay, b, bx, by, skip=1):
    """Pixel-perfect collision of surface ``a`` at (ax, ay) and ``b`` at (bx, by).

    The overlapping area is scanned every ``skip`` pixels in both directions;
    two non-transparent pixels in the same place make a collision.
    """
    if skip < 1:
        raise ValueError(f"skip must be a positive step, got {skip}")

    a_width, a_height = a.get_size()
    b_width, b_height = b.get_size()

    ax1 = ax + a_width - 1
    ay1 = ay + a_height - 1
    bx1 = bx + b_width - 1
    by1 = by + b_height - 1

    if bx1 < ax or ax1 < bx:
        return False
    if by1 < ay or ay1 < by:
        return False

    xs = range(max(ax, bx), min(ax1, bx1) + 1, skip)
    ys = range(max(ay, by), min(ay1, by1) + 1, skip)

    return any(
        not is_transparent_pixel(a, x - ax, y - ay)
        and not is_transparent_pixel(b, x - bx, y - by)
        for y in ys
        for x in xs
    )


def _boxes_touch(ax, ay, aw, ah, bx, by, bw, bh):
    if bx + bw < ax or bx > ax + aw:
        return False
    if by + bh < ay or by > ay + ah:
        return False
    return True


def collide_bounding_box(a, ax, ay, b, bx, by):
    """Return True if the bounding boxes of two placed surfaces touch or overlap."""
    a_width, a_height = a.get_size()
    b_width, b_height = b.get_size()
    return _boxes_touch(ax, ay, a_width, a_height, bx, by, b_width, b_height)


def collide_rects(a, b):
    """Return True if two rectangles (objects with x, y, w, h) touch or overlap."""
    return _boxes_touch(a.x, a.y, a.w, a.h, b.x, b.y, b.w, b.h)


def collide_circles(x1, y1, r1, x2, y2, r2, offset=0):
    """Return True if two circles intersect, allowing a gap of ``offset``."""
    xdiff = x2 - x1
    ydiff = y2 - y1
    centre_distance_sq = xdiff * xdiff + ydiff * ydiff
    radius_sum_sq = (r1 + r2) ** 2
    return centre_distance_sq - radius_sum_sq <= offset * offset


def collide_bounding_circle(a, x1, y1, b, x2, y2, offset=0):
    """Circle collision of two placed surfaces.

    Each circle is centred on its surface and has a radius of a quarter of the
    sum of the surface's width and height.
    """
    a_width, a_height = a.get_size()
    b_width, b_height = b.get_size()

    r1 = (a_width + a_height) // 4
    r2 = (b_width + b_height) // 4

    return collide_circles(
        x1 + a_width // 2,
        y1 + a_height // 2,
        r1,
        x2 + b_width // 2,
        y2 + b_height // 2,
        r2,
        offset,
    )