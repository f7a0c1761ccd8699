"""Drawing the wire-frame of a height map with Bresenham lines."""

from __future__ import annotations

from itertools import repeat

from .color import gradient_color
from .image import Image
from .mapfile import HeightMap, Point
from .projection import View, project


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


def _shallow(image: Image, begin: Point, end: Point, dx: int, dy: int) -> None:
    """Lines that move further along x than along y."""
    x, y = begin.x, begin.y
    if dy == 0:
        step = _sign(dx)
        while x != end.x:
            color = gradient_color(Point(x, y), begin, end, dx, dy)
            image.put_pixel(x, begin.y, color)
            x += step
    else:
        p = 2 * abs(dy) - abs(dx)
        while x != end.x or y != end.y:
            color = gradient_color(Point(x, y), begin, end, dx, dy)
            image.put_pixel(x, y, color)
            x += _sign(dx)
            if p < 0:
                p += 2 * abs(dy)
            else:
                y += _sign(dy)
                p += 2 * abs(dy) - 2 * abs(dx)
    image.put_pixel(end.x, end.y, end.color)


def _steep(image: Image, begin: Point, end: Point, dx: int, dy: int) -> None:
    """Lines that move at least as far along y as along x."""
    x, y = begin.x, begin.y
    if dx == 0:
        step = _sign(dy)
        while y != end.y:
            color = gradient_color(Point(x, y), begin, end, dx, dy)
            image.put_pixel(x, y, color)
            y += step
    else:
        p = 2 * abs(dx) - abs(dy)
        while x != end.x or y != end.y:
            color = gradient_color(Point(x, y), begin, end, dx, dy)
            image.put_pixel(x, y, color)
            if dy > 0:
                y += 1
            elif dy < 0:
                y -= 1
            if p < 0:
                p += 2 * abs(dx)
            else:
                if dx > 0:
                    x += 1
                elif dx < 0:
                    x -= 1
                p += 2 * abs(dx) - 2 * abs(dy)
    image.put_pixel(end.x, end.y, end.color)


def draw_line_bresenham(image: Image, begin: Point, end: Point) -> None:
    """Draw a line between two screen points, blending their colours."""
    dx = end.x - begin.x
    dy = end.y - begin.y
    if abs(dx) > abs(dy):
        _shallow(image, begin, end, dx, dy)
    else:
        _steep(image, begin, end, dx, dy)


def draw_map(image: Image, heightmap: HeightMap, view: View) -> None:
    """Clear the image and draw every edge of the map's grid."""
    image.clear()
    screen = [
        [project(point, view, heightmap.rows, heightmap.columns) for point in row]
        for row in heightmap.points
    ]
    for row, below in zip(screen, [*screen[1:], None]):
        downs = below if below is not None else repeat(None)
        for point, right, down in zip(row, [*row[1:], None], downs):
            if right is not None:
                draw_line_bresenham(image, point, right)
            if down is not None:
                draw_line_bresenham(image, point, down)