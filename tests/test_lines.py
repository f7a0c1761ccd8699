from fdfview.image import Image
from fdfview.lines import draw_line_bresenham, draw_map
from fdfview.mapfile import HeightMap, Point
from fdfview.projection import View, project


def _lit(image, width, height):
    return {
        (x, y)
        for y in range(height)
        for x in range(width)
        if image.get_pixel(x, y) != 0
    }


def test_horizontal_line_covers_every_column():
    image = Image(20, 10)
    draw_line_bresenham(image, Point(2, 5, color=0x00FF00), Point(12, 5, color=0x00FF00))
    assert _lit(image, 20, 10) == {(x, 5) for x in range(2, 13)}
    assert all(image.get_pixel(x, 5) == 0x00FF00 for x in range(2, 13))


def test_horizontal_line_right_to_left():
    image = Image(20, 10)
    draw_line_bresenham(image, Point(12, 3, color=0xFF), Point(2, 3, color=0xFF))
    assert _lit(image, 20, 10) == {(x, 3) for x in range(2, 13)}


def test_vertical_line_covers_every_row():
    image = Image(10, 20)
    draw_line_bresenham(image, Point(4, 15, color=0xFF0000), Point(4, 1, color=0xFF0000))
    assert _lit(image, 10, 20) == {(4, y) for y in range(1, 16)}


def test_single_point_line():
    image = Image(5, 5)
    draw_line_bresenham(image, Point(2, 2, color=0x123456), Point(2, 2, color=0x123456))
    assert _lit(image, 5, 5) == {(2, 2)}
    assert image.get_pixel(2, 2) == 0x123456


def test_diagonal_line_is_connected():
    image = Image(30, 30)
    draw_line_bresenham(image, Point(1, 2, color=0xFFFFFF), Point(20, 9, color=0xFFFFFF))
    lit = _lit(image, 30, 30)
    assert len(lit) == 20
    assert (1, 2) in lit and (20, 9) in lit
    xs = sorted(x for x, _ in lit)
    assert xs == list(range(1, 21))


def test_steep_line_one_pixel_per_row():
    image = Image(30, 30)
    draw_line_bresenham(image, Point(10, 25, color=0xFFFFFF), Point(3, 2, color=0xFFFFFF))
    lit = _lit(image, 30, 30)
    assert sorted(y for _, y in lit) == list(range(2, 26))
    assert (10, 25) in lit and (3, 2) in lit


def test_gradient_endpoints_keep_their_colours():
    image = Image(40, 10)
    begin = Point(0, 4, color=0x0000FF)
    end = Point(30, 4, color=0xFF0000)
    draw_line_bresenham(image, begin, end)
    assert image.get_pixel(0, 4) == begin.color
    assert image.get_pixel(30, 4) == end.color
    reds = [(image.get_pixel(x, 4) >> 16) & 0xFF for x in range(31)]
    assert reds == sorted(reds)


def test_line_outside_image_is_clipped():
    image = Image(10, 10)
    draw_line_bresenham(image, Point(-5, 5, color=0xFF), Point(5, 5, color=0xFF))
    assert _lit(image, 10, 10) == {(x, 5) for x in range(0, 6)}


def _grid(rows, columns, color):
    points = [
        [Point(x, y, 0.0, color, color) for x in range(columns)] for y in range(rows)
    ]
    return HeightMap(rows, columns, points)


def test_draw_map_clears_and_draws_vertices():
    heightmap = _grid(2, 3, 0x00FF00)
    view = View(scale=10, z_factor=1.0)
    image = Image()
    image.put_pixel(0, 0, 0xFFFFFF)
    draw_map(image, heightmap, view)
    assert image.get_pixel(0, 0) == 0
    for row in heightmap.points:
        for point in row:
            screen = project(point, view, heightmap.rows, heightmap.columns)
            assert image.get_pixel(screen.x, screen.y) == 0x00FF00


def test_draw_map_draws_edges_between_neighbours():
    heightmap = _grid(2, 2, 0xFFFFFF)
    view = View(scale=10, z_factor=1.0)
    image = Image()
    draw_map(image, heightmap, view)
    a = project(heightmap.points[0][0], view, 2, 2)
    b = project(heightmap.points[0][1], view, 2, 2)
    c = project(heightmap.points[1][0], view, 2, 2)
    for x in range(a.x, b.x + 1):
        assert image.get_pixel(x, a.y) == 0xFFFFFF
    for y in range(a.y, c.y + 1):
        assert image.get_pixel(a.x, y) == 0xFFFFFF
    assert image.get_pixel(a.x + 5, a.y + 5) == 0