"""An in-memory 32-bit pixel image and simple shape drawing."""

from __future__ import annotations

import math
import sys
from array import array

WIDTH = 3000
HEIGHT = 2000

_DEMO_WIDTH = 1920
_DEMO_HEIGHT = 1080

_TYPECODE = next(code for code in "IL" if array(code).itemsize == 4)


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Image:
    """A width x height grid of 32-bit pixels, black when created."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image size must not be negative")
        self.width = width
        self.height = height
        self._pixels = self._blank()

    def _blank(self) -> array:
        return array(_TYPECODE, bytes(4 * self.width * self.height))

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        x, y = int(x), int(y)
        if self._contains(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel as an unsigned 32-bit value."""
        if not self._contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside the image")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Paint the whole image black."""
        self._pixels = self._blank()

    def to_bytes(self) -> bytes:
        """Row-major pixel data, four little-endian bytes per pixel."""
        data = array(_TYPECODE, self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()


def draw_line(
    image: Image, begin_x: int, begin_y: int, end_x: int, end_y: int, color: int
) -> None:
    """Step along a line in unit increments, one pixel per unit of length."""
    delta_x = float(end_x - begin_x)
    delta_y = float(end_y - begin_y)
    pixels = int(math.sqrt(delta_x * delta_x + delta_y * delta_y))
    if pixels == 0:
        return
    step_x = delta_x / pixels
    step_y = delta_y / pixels
    pixel_x = float(begin_x)
    pixel_y = float(begin_y)
    for _ in range(pixels):
        image.put_pixel(int(pixel_x), int(pixel_y), color)
        pixel_x += step_x
        pixel_y += step_y


def draw_circle(image: Image, x: int, y: int, radius: int, color: int) -> None:
    """Fill a disc of the given radius centred on (x, y)."""
    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            if math.sqrt(i * i + j * j) > radius:
                continue
            px, py = x + j, y + i
            if 0 <= px < _DEMO_WIDTH and 0 <= py < _DEMO_HEIGHT:
                image.put_pixel(px, py, color)


def draw_square(image: Image, x: int, y: int, size: int, color: int) -> None:
    """Fill a size x size square whose top-left corner is (x, y)."""
    for i in range(size):
        for j in range(size):
            image.put_pixel(x + j, y + i, color)


def draw_square_gradient(
    image: Image, x: int, y: int, size: int, start_color: int, end_color: int
) -> None:
    """Fill a square whose colour blends from top to bottom."""
    if size <= 0:
        return
    start = _channels(start_color)
    increments = [
        (stop - begin) / size for begin, stop in zip(start, _channels(end_color))
    ]
    for i in range(size):
        r, g, b = (
            min(255, max(0, begin + int(i * inc)))
            for begin, inc in zip(start, increments)
        )
        color = (r << 16) | (g << 8) | b
        for j in range(size):
            image.put_pixel(x + j, y + i, color)