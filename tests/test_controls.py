import math
from dataclasses import replace

import pytest

from fdfview.controls import (
    COLOR1,
    COLOR2,
    MOVE_STEP,
    Key,
    change_colour,
    elevation,
    handle_key,
    mouse_scroll,
    move,
    projection_pressed,
    projection_type,
    rotate,
    zoom,
)
from fdfview.mapfile import HeightMap, Point
from fdfview.projection import ProjectionType, View


def _map():
    heights = [[0.0, 3.0], [-2.0, 5.0]]
    colors = [[0x111111, 0x222222], [0x333333, 0x444444]]
    points = [
        [Point(x, y, heights[y][x], colors[y][x], colors[y][x]) for x in range(2)]
        for y in range(2)
    ]
    return HeightMap(2, 2, points)


def _view():
    return View(scale=10, z_factor=1.0, z_max=5, is_iso=True)


def test_raw_x11_key_codes_are_handled():
    view = _view()
    heightmap = _map()
    assert handle_key(65307, heightmap, view) is False
    assert handle_key(ord("z"), heightmap, view) is True
    assert view.z_factor == pytest.approx(1.0 + 0.1 * 4, rel=1e-5)
    assert handle_key(ord(" "), heightmap, view) is True
    assert view.color_switch is True


def test_escape_requests_close():
    view = _view()
    assert handle_key(Key.ESC, _map(), view) is False
    assert view == _view()


def test_other_keys_keep_running():
    view = _view()
    assert handle_key(Key.UP, _map(), view) is True
    assert view.offset_y == -MOVE_STEP


def test_unknown_key_changes_nothing():
    view = _view()
    heightmap = _map()
    assert handle_key(ord("q"), heightmap, view) is True
    assert view == _view()
    assert heightmap == _map()


@pytest.mark.parametrize(
    "key, dx, dy",
    [
        (Key.UP, 0, -MOVE_STEP),
        (Key.DOWN, 0, MOVE_STEP),
        (Key.LEFT, -MOVE_STEP, 0),
        (Key.RIGHT, MOVE_STEP, 0),
    ],
)
def test_move(key, dx, dy):
    view = _view()
    move(key, view)
    assert (view.offset_x, view.offset_y) == (dx, dy)


def test_opposite_moves_cancel():
    view = _view()
    for key in (Key.UP, Key.LEFT, Key.DOWN, Key.RIGHT):
        move(key, view)
    assert (view.offset_x, view.offset_y) == (0, 0)


def test_zoom_in_and_out():
    view = _view()
    zoom(Key.EQUAL, view)
    assert view.scale == 11
    zoom(Key.MINUS, view)
    zoom(Key.MINUS, view)
    assert view.scale == 9


def test_mouse_scroll_does_not_change_scale():
    view = _view()
    mouse_scroll(4, view)
    mouse_scroll(5, view)
    assert view.scale == _view().scale


@pytest.mark.parametrize(
    "forward, back, attr",
    [
        (Key.ONE, Key.SEVEN, "gamma_z"),
        (Key.TWO, Key.EIGHT, "tetha_y"),
        (Key.THREE, Key.NINE, "alpha_x"),
    ],
)
def test_rotate_forward_and_back(forward, back, attr):
    view = _view()
    rotate(forward, view)
    assert getattr(view, attr) == pytest.approx(0.1, rel=1e-6)
    rotate(back, view)
    assert getattr(view, attr) == pytest.approx(0.0, abs=1e-7)


def test_projection_p_cycles_views():
    view = replace(_view(), gamma_z=0.4)
    projection_pressed(Key.P, view)
    assert view.is_iso is False
    assert view.projection == ProjectionType.FRONT_VIEW
    assert view.gamma_z == pytest.approx(math.pi / 2, rel=1e-6)
    projection_pressed(Key.P, view)
    assert view.projection == ProjectionType.RIGHT_SIDE_VIEW
    assert view.alpha_x == pytest.approx(3 * math.pi / 2, rel=1e-6)
    assert view.tetha_y == pytest.approx(math.pi / 2, rel=1e-6)
    projection_pressed(Key.P, view)
    assert view.projection == ProjectionType.TOP_VIEW
    assert (view.alpha_x, view.tetha_y, view.gamma_z) == (0.0, 0.0, 0.0)


def test_projection_i_restores_isometric():
    view = _view()
    projection_pressed(Key.P, view)
    projection_pressed(Key.I, view)
    assert view.is_iso is True
    assert (view.alpha_x, view.tetha_y, view.gamma_z) == (0.0, 0.0, 0.0)


def test_projection_type_top_view_zeroes_angles():
    view = replace(_view(), alpha_x=1.0, tetha_y=2.0, gamma_z=3.0)
    projection_type(view)
    assert (view.alpha_x, view.tetha_y, view.gamma_z) == (0.0, 0.0, 0.0)


def test_change_colour_uses_height_then_restores():
    heightmap = _map()
    view = _view()
    change_colour(Key.SPACE, heightmap, view)
    assert view.color_switch is True
    for row in heightmap.points:
        for point in row:
            assert point.color == (COLOR1 if point.z <= 0 else COLOR2)
    change_colour(Key.SPACE, heightmap, view)
    assert view.color_switch is False
    assert heightmap == _map()


def test_change_colour_ignores_other_keys():
    heightmap = _map()
    view = _view()
    change_colour(Key.P, heightmap, view)
    assert heightmap == _map()
    assert view.color_switch is False


def test_elevation_z_raises_factor_once_per_point():
    heightmap = _map()
    view = _view()
    elevation(Key.Z, heightmap, view)
    assert view.z_factor == pytest.approx(1.0 + 0.1 * 4, rel=1e-5)
    assert heightmap == _map()


def test_elevation_x_lowers_every_point():
    heightmap = _map()
    view = _view()
    elevation(Key.X, heightmap, view)
    for lowered, original in zip(
        (p for row in heightmap.points for p in row),
        (p for row in _map().points for p in row),
    ):
        assert lowered.z == pytest.approx(original.z - 0.1, abs=1e-6)
    assert view.z_factor == 1.0