"""Colour interpolation along a line between two points."""

from __future__ import annotations

import struct

from .mapfile import Point


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def fraction(x1: float, x2: float, x: float) -> float:
    """How far ``x`` lies from ``x1`` towards ``x2``; 0 when they coincide."""
    if x1 != x2:
        return _f32((x - x1) / (x2 - x1))
    return 0.0


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def color_gradient(begin: Point, end: Point, distance: float) -> int:
    """Blend the colours of two points at the given fraction."""
    r, g, b = (
        int(_f32(start + _f32(distance * (stop - start))))
        for start, stop in zip(_channels(begin.color), _channels(end.color))
    )
    return (r << 16) | (g << 8) | b


def gradient_color(current: Point, begin: Point, end: Point, dx: int, dy: int) -> int:
    """Colour at ``current`` on the line from ``begin`` to ``end``."""
    if begin.color == end.color:
        return begin.color
    if abs(dx) > abs(dy):
        position = fraction(begin.x, end.x, current.x)
    else:
        position = fraction(begin.y, end.y, current.y)
    return color_gradient(begin, end, position)