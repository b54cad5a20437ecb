"""
3D canvas: three grid planes, colored axes and user vectors seen through
a rotating perspective camera.

Depth convention: after the camera rotation, smaller z is farther away.
Lines and vectors are drawn in ascending z so nearer ones land on top
(painter's algorithm).
"""

from lintrans import config
from lintrans.coords import CoordinateMapper
from lintrans.drawing import (Fonts, blit_text_safe, draw_arrow, draw_segment,
                              draw_vector_arrow, drawable, vector_style)
from lintrans.projection import project3d, rotate_camera
from lintrans.scene import Camera
from lintrans.vectors import ZERO3, Vector3D, add3d, scale3d, sum3d


def _on_axis(start, end):
    # On a coordinate axis when two coordinates are zero at both ends.
    zero = [start[i] == 0 and end[i] == 0 for i in range(3)]
    return sum(zero) >= 2

def grid_lines(camera, extent=config.GRID_EXTENT_3D):
    """
    Grid lines on the XY, XZ and YZ planes, sorted far-to-near.

    Returns (start, end, depth, is_main) with depth = rotated z of start.
    """
    raw = []
    for i in range(-extent, extent + 1):
        # XY plane
        raw.append((Vector3D(-extent, i, 0), Vector3D(extent, i, 0)))
        raw.append((Vector3D(i, -extent, 0), Vector3D(i, extent, 0)))
        # XZ plane
        raw.append((Vector3D(-extent, 0, i), Vector3D(extent, 0, i)))
        raw.append((Vector3D(i, 0, -extent), Vector3D(i, 0, extent)))
        # YZ plane
        raw.append((Vector3D(0, -extent, i), Vector3D(0, extent, i)))
        raw.append((Vector3D(0, i, -extent), Vector3D(0, i, extent)))

    lines = []
    for start, end in raw:
        depth = rotate_camera(start, camera.rotation_x, camera.rotation_y).z
        lines.append((start, end, depth, _on_axis(start, end)))

    lines.sort(key=lambda line: line[2])
    return lines

def vector_draw_order(scene, camera):
    """(index, scaled vector, depth) for every user vector, far-to-near."""
    order = []
    for index, v in enumerate(scene.vectors):
        scaled = scale3d(v, scene.scale_of(index))
        depth = rotate_camera(scaled, camera.rotation_x, camera.rotation_y).z
        order.append((index, scaled, depth))
    order.sort(key=lambda item: item[2])
    return order


class Renderer3D:
    """Draws a Scene3D through its own camera onto a pygame surface."""

    def __init__(self, mapper=None, camera_distance=config.CAMERA_DISTANCE, fonts=None):
        self.mapper = mapper or CoordinateMapper()
        self.camera_distance = camera_distance
        self.camera = Camera()
        self._fonts = fonts

    @property
    def fonts(self):
        if self._fonts is None:
            self._fonts = Fonts()
        return self._fonts

    def to_screen(self, v):
        """World point -> (px, py) through camera rotation and perspective."""
        rotated = rotate_camera(v, self.camera.rotation_x, self.camera.rotation_y)
        projected = project3d(rotated, self.camera_distance)
        return self.mapper.world_to_screen(projected)

    def render(self, surf, scene, interaction=None):
        surf.fill(config.BACKGROUND)

        if scene.show_grid:
            self.draw_grid(surf)

        self.draw_axes(surf)

        order = vector_draw_order(scene, self.camera)
        last = len(scene.vectors) - 1
        current = ZERO3

        for index, scaled, _ in order:
            color, width = vector_style(index, interaction)
            self.draw_vector(surf, ZERO3, scaled, color, width, f"v{index + 1}")

            if scene.show_vector_sum and len(scene.vectors) > 1 and index < last:
                self.draw_vector(surf, current, add3d(current, scaled),
                                 config.SUM_CONNECTOR, 2, dashed=True)
            current = add3d(current, scaled)

        if scene.show_vector_sum and scene.vectors:
            total = sum3d(scaled for _, scaled, _ in order)
            self.draw_vector(surf, ZERO3, total, config.SUM_VECTOR, 4, "sum")

    def draw_vector(self, surf, start, end, color, width=3, label=None, dashed=False):
        draw_vector_arrow(surf, self.fonts, color, self.to_screen(start), self.to_screen(end),
                          width, label, dashed)

    def draw_grid(self, surf):
        for start, end, _, is_main in grid_lines(self.camera):
            color = config.GRID_MAIN if is_main else config.GRID_MINOR
            draw_segment(surf, color, self.to_screen(start), self.to_screen(end),
                         2 if is_main else 1)

    def draw_axes(self, surf):
        length = config.AXIS_LENGTH_3D
        axes = [
            (Vector3D(length, 0, 0), config.BASIS_I, "x"),
            (Vector3D(0, length, 0), config.BASIS_J, "y"),
            (Vector3D(0, 0, length), config.AXIS_Z, "z"),
        ]
        origin = self.to_screen(ZERO3)
        fonts = self.fonts
        for end, color, label in axes:
            tip = self.to_screen(end)
            if not drawable(origin, tip):
                continue
            draw_arrow(surf, color, origin, tip, 3, head_len=12)
            blit_text_safe(surf, fonts.label, label, (tip[0] + 15, tip[1] - 22), color,
                           unicode_ok=fonts.unicode_ok, outline=config.LABEL_OUTLINE)
