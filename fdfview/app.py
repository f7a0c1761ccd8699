"""The interactive viewer window and the command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys

from .controls import Key, handle_key, mouse_scroll
from .image import HEIGHT, WIDTH, Image
from .lines import draw_map
from .mapfile import HeightMap, MapError, load_map
from .projection import View, make_view

_TITLE = "FDF"
_FRAME_RATE = 30


def _rgb_bytes(image: Image) -> bytes:
    """Pixel data as packed RGB triples, row-major."""
    data = image.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


class Viewer:
    """A height map, its view state and the image it is drawn into."""

    def __init__(self, heightmap: HeightMap) -> None:
        self.heightmap = heightmap
        self.view: View = make_view(heightmap)
        self.image = Image(WIDTH, HEIGHT)
        self.running = True

    def render(self) -> Image:
        """Redraw the wire-frame into the image and return it."""
        draw_map(self.image, self.heightmap, self.view)
        return self.image

    def key(self, key: int) -> bool:
        """Apply a key press; returns False once the viewer should close."""
        self.running = handle_key(key, self.heightmap, self.view)
        return self.running

    def _scroll(self, button: int) -> None:
        mouse_scroll(button, self.view)

    def run(self) -> None:
        """Open a window and redraw it until it is closed or Esc is pressed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        keymap = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.image.width, self.image.height))
            pygame.display.set_caption(_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.key(keymap.get(event.key, event.key))
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self._scroll(event.button)
                if not self.running:
                    break
                image = self.render()
                surface = pygame.image.frombuffer(
                    _rgb_bytes(image), (image.width, image.height), "RGB"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: fdf test_map.fdf", file=sys.stderr)
        return 1
    parser = argparse.ArgumentParser(prog="fdf", description="Wire-frame map viewer")
    parser.add_argument("map", help="path of an .fdf height map")
    options = parser.parse_args(args)
    try:
        viewer = Viewer(load_map(options.map))
    except (MapError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())