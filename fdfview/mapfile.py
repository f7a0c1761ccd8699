"""Reading FDF height-map files into a grid of points."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from itertools import islice, takewhile
from pathlib import Path
from typing import Iterator

DEFAULT_COLOR = 0xFFFFFF
EXTENSION = ".fdf"

_INT_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_HEX_DIGITS = {ch: int(ch, 16) for ch in "0123456789abcdefABCDEF"}


class MapError(Exception):
    """Raised when a map file cannot be read or is malformed."""


@dataclass
class Point:
    """One vertex of the map: grid position, height and colour."""

    x: int = 0
    y: int = 0
    z: float = 0.0
    color: int = 0
    ori_color: int = 0


@dataclass
class HeightMap:
    """A rectangular grid of points read from a map file."""

    rows: int
    columns: int
    points: list[list[Point]] = field(default_factory=list)

    def _heights(self) -> Iterator[float]:
        if not self.points or not self.points[0]:
            raise MapError("Map is empty")
        return (point.z for row in self.points for point in row)

    def z_max(self) -> int:
        """Highest z value, truncated to an integer."""
        return int(max(self._heights()))

    def z_min(self) -> int:
        """Lowest z value, truncated to an integer."""
        return int(min(self._heights()))


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does; 0 if there is none."""
    match = _INT_PATTERN.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return _wrap32(-value if sign == "-" else value)


def parse_base(text: str, base: int) -> int:
    """Parse a number in ``base`` (2 to 16).

    A leading '-' is skipped and ignored. A character that is not a hex digit
    counts again as the digit before it, so a "0x" prefix reads as zeros.
    """
    if not text or not 2 <= base <= 16:
        return 0
    if text[0] == "-":
        text = text[1:]
    result = 0
    digit = 0
    for ch in text:
        digit = _HEX_DIGITS.get(ch, digit)
        result = _wrap32(result * base + digit)
    return result


def split_fields(line: str, sep: str) -> list[str]:
    """Split on runs of ``sep``, dropping empty fields."""
    return [part for part in line.split(sep) if part]


def check_file_extension(filename: str) -> bool:
    """True if the name ends in '.fdf' and has something before it."""
    return len(filename) > len(EXTENSION) and filename.endswith(EXTENSION)


def count_columns(line: str) -> int:
    """Number of space-separated fields before a bare line ending."""
    fields = split_fields(line, " ")
    return sum(1 for _ in takewhile(lambda f: not f.startswith("\n"), fields))


def _read_lines(path: str | os.PathLike) -> Iterator[str]:
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError(f"Failed to open file: {path}") from exc
    *complete, tail = text.split("\n")
    for line in complete:
        yield line + "\n"
    if tail:
        yield tail


def read_dimensions(path: str | os.PathLike) -> tuple[int, int]:
    """Count rows and columns, checking every row has the same width."""
    rows = 0
    columns = 0
    for line in _read_lines(path):
        rows += 1
        count = count_columns(line)
        if columns == 0:
            columns = count
        elif count != columns:
            raise MapError("Inconsistent row lengths in map")
    return rows, columns


def parse_color(token: str) -> int:
    """Colour given after a comma in a field, or the default colour."""
    if "," not in token:
        return DEFAULT_COLOR
    parts = split_fields(token, ",")
    if len(parts) < 2:
        raise MapError(f"Missing colour in field {token!r}")
    return parse_base(parts[1], 16)


def load_map(path: str | os.PathLike) -> HeightMap:
    """Read an .fdf file into a HeightMap."""
    if not check_file_extension(os.fspath(path)):
        raise MapError("Incorrect file extension")
    rows, columns = read_dimensions(path)
    if rows == 0 or columns == 0:
        raise MapError("Map is empty")
    points = [[Point() for _ in range(columns)] for _ in range(rows)]
    for y, line in enumerate(islice(_read_lines(path), rows)):
        for x, token in enumerate(split_fields(line, " ")[:columns]):
            color = parse_color(token)
            points[y][x] = Point(x, y, float(parse_int(token)), color, color)
    return HeightMap(rows, columns, points)