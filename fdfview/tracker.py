"""Tracking the direction of mouse drags."""

from __future__ import annotations

import math
from dataclasses import dataclass

LEFT_BUTTON = 1


@dataclass
class MouseTracker:
    """Reports the angle of each movement while the left button is held."""

    pressed: bool = False
    prev_x: int = 0
    prev_y: int = 0

    def press(self, button: int, x: int, y: int) -> None:
        """Start a drag when the left button goes down."""
        if button == LEFT_BUTTON:
            self.pressed = True
            self.prev_x = x
            self.prev_y = y
            print(f"Mouse pressed at ({x}, {y})")

    def move(self, x: int, y: int) -> float | None:
        """Angle in degrees of the movement, or None if not dragging or still."""
        if not self.pressed:
            return None
        dx = x - self.prev_x
        dy = y - self.prev_y
        if dx == 0 and dy == 0:
            return None
        angle = math.degrees(math.atan2(dy, dx))
        print(f"Mouse moved to ({x}, {y}), Angle: {angle:.2f}°")
        self.prev_x = x
        self.prev_y = y
        return angle

    def release(self, button: int, x: int, y: int) -> None:
        """End the drag when the left button comes up."""
        if button == LEFT_BUTTON:
            self.pressed = False
            print(f"Mouse released at ({x}, {y})")