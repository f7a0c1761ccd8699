"""Keyboard and mouse controls that change the map and its view."""

from __future__ import annotations

import math
import struct
from enum import IntEnum

from .mapfile import HeightMap
from .projection import ProjectionType, View

COLOR1 = 0x87CEFA
COLOR2 = 0x7CFC00
MOVE_STEP = 100
ROTATE_STEP = 0.1
ELEVATION_STEP = 0.1

BUTTON4 = 4
BUTTON5 = 5


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Key(IntEnum):
    """X11 key symbols the viewer reacts to."""

    ESC = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    SPACE = 0x20
    MINUS = 0x2D
    EQUAL = 0x3D
    ONE = 0x31
    TWO = 0x32
    THREE = 0x33
    SEVEN = 0x37
    EIGHT = 0x38
    NINE = 0x39
    I = 0x69  # noqa: E741
    P = 0x70
    X = 0x78
    Z = 0x7A


_MOVE_KEYS = {Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT}
_ZOOM_KEYS = {Key.EQUAL, Key.MINUS}
_ROTATE_KEYS = {Key.ONE, Key.TWO, Key.THREE, Key.SEVEN, Key.EIGHT, Key.NINE}
_PROJECTION_KEYS = {Key.P, Key.I}
_ELEVATION_KEYS = {Key.Z, Key.X}


def handle_key(key: int, heightmap: HeightMap, view: View) -> bool:
    """Apply a key press; False means the viewer should close."""
    if key == Key.ESC:
        return False
    if key in _MOVE_KEYS:
        move(key, view)
    if key in _ZOOM_KEYS:
        zoom(key, view)
    if key in _ROTATE_KEYS:
        rotate(key, view)
    if key in _PROJECTION_KEYS:
        projection_pressed(key, view)
    if key == Key.SPACE:
        change_colour(key, heightmap, view)
    if key in _ELEVATION_KEYS:
        elevation(key, heightmap, view)
    return True


def elevation(key: int, heightmap: HeightMap, view: View) -> None:
    """Z raises the height factor once per point; X lowers every point."""
    for row in heightmap.points:
        for point in row:
            if key == Key.Z:
                view.z_factor = _f32(view.z_factor + ELEVATION_STEP)
            elif key == Key.X:
                point.z = _f32(point.z - ELEVATION_STEP)


def change_colour(key: int, heightmap: HeightMap, view: View) -> None:
    """Toggle between height colouring and the map's own colours."""
    if key != Key.SPACE:
        return
    for row in heightmap.points:
        for point in row:
            if view.color_switch:
                point.color = point.ori_color
            else:
                point.color = COLOR1 if point.z <= 0 else COLOR2
    view.color_switch = not view.color_switch


def projection_pressed(key: int, view: View) -> None:
    """I selects isometric view; P cycles through the parallel views."""
    if key == Key.I:
        view.is_iso = True
        view.alpha_x = view.tetha_y = view.gamma_z = 0.0
    if key == Key.P:
        view.is_iso = False
        view.alpha_x = view.tetha_y = view.gamma_z = 0.0
        view.projection = ProjectionType((view.projection + 1) % len(ProjectionType))
        projection_type(view)


def projection_type(view: View) -> None:
    """Set the rotation angles for the current parallel view."""
    quarter = _f32(90 * math.pi / 180)
    three_quarters = _f32(270 * math.pi / 180)
    if view.projection == ProjectionType.TOP_VIEW:
        view.alpha_x, view.tetha_y, view.gamma_z = 0.0, 0.0, 0.0
    elif view.projection == ProjectionType.FRONT_VIEW:
        view.alpha_x, view.tetha_y, view.gamma_z = 0.0, 0.0, quarter
    elif view.projection == ProjectionType.RIGHT_SIDE_VIEW:
        view.alpha_x, view.tetha_y, view.gamma_z = three_quarters, quarter, 0.0


def rotate(key: int, view: View) -> None:
    """1/2/3 turn forward about z/y/x; 7/8/9 turn back."""
    if key == Key.ONE:
        view.gamma_z = _f32(view.gamma_z + ROTATE_STEP)
    if key == Key.TWO:
        view.tetha_y = _f32(view.tetha_y + ROTATE_STEP)
    if key == Key.THREE:
        view.alpha_x = _f32(view.alpha_x + ROTATE_STEP)
    if key == Key.SEVEN:
        view.gamma_z = _f32(view.gamma_z - ROTATE_STEP)
    if key == Key.EIGHT:
        view.tetha_y = _f32(view.tetha_y - ROTATE_STEP)
    if key == Key.NINE:
        view.alpha_x = _f32(view.alpha_x - ROTATE_STEP)


def zoom(key: int, view: View) -> None:
    """'=' zooms in by one step, '-' zooms out."""
    if key == Key.EQUAL:
        view.scale += 1
    if key == Key.MINUS:
        view.scale -= 1


def move(key: int, view: View) -> None:
    """Arrow keys shift the map on screen."""
    if key == Key.UP:
        view.offset_y -= MOVE_STEP
    if key == Key.DOWN:
        view.offset_y += MOVE_STEP
    if key == Key.LEFT:
        view.offset_x -= MOVE_STEP
    if key == Key.RIGHT:
        view.offset_x += MOVE_STEP


def mouse_scroll(button: int, view: View) -> None:
    """Wheel buttons are passed on to the zoom handler."""
    if button in (BUTTON4, BUTTON5):
        zoom(button, view)