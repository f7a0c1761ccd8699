"""View state and the transform from map points to screen coordinates."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, replace
from enum import IntEnum

from .image import HEIGHT, WIDTH
from .mapfile import HeightMap, Point

_ISO_ANGLE = 30 * math.pi / 180
_MIN_SCALE = 2


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class ProjectionType(IntEnum):
    """Fixed parallel views cycled through in parallel mode."""

    TOP_VIEW = 0
    FRONT_VIEW = 1
    RIGHT_SIDE_VIEW = 2


@dataclass
class View:
    """How the map is placed, scaled and turned on screen."""

    offset_x: int = 0
    offset_y: int = 0
    scale: int = 0
    z_factor: float = 0.0
    z_max: int = 0
    z_elevation: int = 0
    alpha_x: float = 0.0
    tetha_y: float = 0.0
    gamma_z: float = 0.0
    is_iso: bool = False
    color_switch: bool = False
    projection: ProjectionType = ProjectionType.TOP_VIEW


def rotate_x(point: Point, view: View) -> Point:
    """Turn the point in the y-z plane by ``view.gamma_z``."""
    cos_a, sin_a = math.cos(view.gamma_z), math.sin(view.gamma_z)
    return replace(
        point,
        y=int(point.y * cos_a - point.z * sin_a),
        z=_f32(point.y * sin_a + point.z * cos_a),
    )


def rotate_y(point: Point, view: View) -> Point:
    """Turn the point in the x-z plane by ``view.tetha_y``."""
    cos_a, sin_a = math.cos(view.tetha_y), math.sin(view.tetha_y)
    return replace(
        point,
        x=int(point.x * cos_a + point.z * sin_a),
        z=_f32(point.z * cos_a - point.x * sin_a),
    )


def rotate_z(point: Point, view: View) -> Point:
    """Turn the point in the x-y plane by ``view.alpha_x``."""
    cos_a, sin_a = math.cos(view.alpha_x), math.sin(view.alpha_x)
    return replace(
        point,
        x=int(point.x * cos_a - point.y * sin_a),
        y=int(point.x * sin_a + point.y * cos_a),
    )


def isometric(point: Point, view: View) -> Point:
    """Isometric projection, lifting the point by its scaled height."""
    lift = _f32(point.z * view.z_factor)
    return replace(
        point,
        x=int((point.x - point.y) * math.cos(_ISO_ANGLE)),
        y=int((point.x + point.y) * math.sin(_ISO_ANGLE) - lift),
    )


def project(point: Point, view: View, rows: int, columns: int) -> Point:
    """Screen position of a map point under the current view."""
    scale = view.scale
    result = replace(
        point,
        x=point.x * scale - _cdiv(columns * scale, 2),
        y=point.y * scale - _cdiv(rows * scale, 2),
        z=_f32(point.z * scale),
    )
    if view.is_iso:
        result = isometric(result, view)
    result = rotate_z(rotate_y(rotate_x(result, view), view), view)
    return replace(
        result,
        x=result.x + WIDTH // 2 + view.offset_x,
        y=result.y + HEIGHT // 2 + view.offset_y,
    )


def get_scale(rows: int, columns: int, z_max: int) -> int:
    """Initial zoom that keeps the map well inside the window."""
    if rows == 0 or columns == 0:
        raise ValueError("Map has no rows or columns")
    if z_max == 0:
        raise ValueError("Highest point of the map must not be zero")
    fits = (
        _cdiv(_cdiv(WIDTH, columns), 5),
        _cdiv(_cdiv(HEIGHT, rows), 5),
        _cdiv(_cdiv(HEIGHT, z_max), 5),
    )
    return min(fits) or _MIN_SCALE


def make_view(heightmap: HeightMap) -> View:
    """Starting view for a map: isometric, centred and fitted."""
    z_max = heightmap.z_max()
    return View(
        scale=get_scale(heightmap.rows, heightmap.columns, z_max),
        z_factor=1.0,
        z_max=z_max,
        is_iso=True,
    )