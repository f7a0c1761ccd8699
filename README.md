# fdfview

A wireframe viewer for `.fdf` height maps. A map is a grid of integer
heights, one row per line, fields separated by spaces, with an optional
hexadecimal colour after a comma (`10,0xFF0000`). Points without a colour are
white. The viewer joins every point to its right and lower neighbour with
lines whose colour blends from one end to the other, and shows the result in
a 3000 x 2000 window in an isometric or parallel projection.

## Installation

```
pip install .
```

## Usage

```
fdfview maps/42.fdf
```

The command takes exactly one argument. It stops with an error message and
exit status 1 when:

- the file name does not end in `.fdf` (with something before the extension),
- the file cannot be read,
- the rows do not all have the same number of columns, or the map is empty,
- the highest point of the map is at height 0 (the starting zoom is worked
  out from the highest point, so an entirely flat or sunken map is refused).

The window closes with Esc or the window's close button.

### Controls

| Key        | Action                                                        |
|------------|---------------------------------------------------------------|
| Arrow keys | Move the map by 100 pixels                                    |
| `=` / `-`  | Zoom in / out by one step                                     |
| `1` / `7`  | Turn the map in the y-z plane (by 0.1 radian)                 |
| `2` / `8`  | Turn the map in the x-z plane                                 |
| `3` / `9`  | Turn the map in the x-y plane                                 |
| `i`        | Isometric projection, turns reset                             |
| `p`        | Parallel projection; each press moves on through front, side and top view |
| `z`        | Raise the relief in isometric view (height factor grows by 0.1 per map point) |
| `x`        | Lower every point of the map by 0.1                           |
| Space      | Toggle height colouring (light blue at or below 0, green above) and the map's own colours |
| Esc        | Quit                                                          |

## Using it as a library

```python
from fdfview.mapfile import load_map
from fdfview.projection import make_view
from fdfview.image import Image
from fdfview.lines import draw_map
from fdfview.controls import Key, handle_key

heightmap = load_map("maps/42.fdf")
view = make_view(heightmap)
image = Image(3000, 2000)
handle_key(Key.P, heightmap, view)      # switch to the front view
draw_map(image, heightmap, view)
raw = image.to_bytes()                   # four little-endian bytes per pixel
```

The modules:

- `fdfview.mapfile` – `load_map`, `HeightMap` (with `z_max()` and `z_min()`),
  `Point`, and `MapError` for bad files.
- `fdfview.projection` – `View`, `ProjectionType`, `make_view`, `project` and
  the rotation helpers.
- `fdfview.lines` – `draw_line_bresenham` and `draw_map`.
- `fdfview.color` – colour blending along a line.
- `fdfview.image` – `Image`, a 32-bit pixel buffer with `put_pixel`,
  `get_pixel`, `clear` and `to_bytes`, plus `draw_line`, `draw_circle`,
  `draw_square` and `draw_square_gradient`.
- `fdfview.controls` – `Key` and `handle_key`, which returns `False` for Esc.
- `fdfview.tracker` – `MouseTracker`, which prints and returns the angle in
  degrees of each movement made while the left button is held.
- `fdfview.app` – `Viewer`, which holds a map, its view and its image and
  opens the pygame window with `run()`; `main` is the `fdfview` command.

## What it does not do

- The mouse wheel does not zoom: wheel events reach the viewer but change
  nothing.
- There is no way to save the drawn picture to a file from the viewer;
  `Image.to_bytes()` gives the raw pixels for that.

## Running the tests

```
pip install .[test]
pytest
```