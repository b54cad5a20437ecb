"""
World <-> screen mapping shared by the 2D and 3D renderers.

Coordinate system:
- "world" is the math plane with y pointing up.
- the canvas has y pointing down.
So the conversion flips the sign in y.
"""

from lintrans.config import CANVAS_HEIGHT, CANVAS_WIDTH, WORLD_SCALE
from lintrans.vectors import Vector2D


class CoordinateMapper:
    """Centered, uniformly scaled map between world units and pixels."""

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, scale=WORLD_SCALE):
        self.width = width
        self.height = height
        self.scale = scale
        self.center_x = width / 2
        self.center_y = height / 2

    def world_to_screen(self, v):
        """(x, y) world -> (px, py) screen. Returns floats, no rounding."""
        x, y = v[0], v[1]
        return (self.center_x + x * self.scale,
                self.center_y - y * self.scale)

    def screen_to_world(self, x, y):
        """Exact inverse of world_to_screen."""
        return Vector2D((x - self.center_x) / self.scale,
                        -(y - self.center_y) / self.scale)
