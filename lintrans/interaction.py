"""
Pointer handling for the two canvases.

Both controllers hit-test vector endpoints in screen space, topmost
(highest index) first. The 2D controller only drags vectors; the 3D one
falls back to orbiting the camera when the pointer misses every vector.
"""

import logging
import math

from lintrans import config
from lintrans.coords import CoordinateMapper
from lintrans.matrices import apply_matrix
from lintrans.scene import InteractionState
from lintrans.scene2d import display_matrix
from lintrans.vectors import Vector3D, scale3d

logger = logging.getLogger(__name__)


def hit_test(pointer, endpoints, radius=config.HIT_RADIUS):
    """
    Index of the last endpoint strictly within `radius` px of `pointer`,
    or None. Later endpoints are drawn on top, so they win ties.
    """
    px, py = pointer
    for i in range(len(endpoints) - 1, -1, -1):
        ex, ey = endpoints[i]
        if math.hypot(px - ex, py - ey) < radius:
            return i
    return None

def _log_drag_end(state):
    if state.dragging_index is not None:
        logger.debug("Dropped v%d", state.dragging_index + 1)
    elif state.dragging_view:
        logger.debug("Camera orbit ended")


class Controller2D:
    """Drag and hover for the 2D canvas."""

    def __init__(self, mapper=None, radius=config.HIT_RADIUS):
        self.mapper = mapper or CoordinateMapper()
        self.radius = radius
        self.state = InteractionState()

    def endpoints(self, scene):
        m = display_matrix(scene)
        return [self.mapper.world_to_screen(apply_matrix(v, m)) for v in scene.vectors]

    def on_pointer_down(self, x, y, scene):
        hit = hit_test((x, y), self.endpoints(scene), self.radius)
        if hit is not None:
            self.state.dragging_index = hit
            logger.debug("Dragging v%d", hit + 1)

    def on_pointer_move(self, x, y, scene, on_vector_update):
        if self.state.dragging_index is not None:
            on_vector_update(self.state.dragging_index, self.mapper.screen_to_world(x, y))
            return
        self.state.hovered_index = hit_test((x, y), self.endpoints(scene), self.radius)

    def on_pointer_up(self):
        _log_drag_end(self.state)
        self.state.release()

    def on_pointer_leave(self):
        _log_drag_end(self.state)
        self.state.leave()


class Controller3D:
    """Drag, hover and camera orbit for the 3D canvas."""

    def __init__(self, renderer, mapper=None, radius=config.HIT_RADIUS,
                 sensitivity=config.ROTATION_SENSITIVITY):
        self.renderer = renderer
        self.mapper = mapper or renderer.mapper
        self.radius = radius
        self.sensitivity = sensitivity
        self.state = InteractionState()

    @property
    def camera(self):
        return self.renderer.camera

    def endpoints(self, scene):
        return [self.renderer.to_screen(scale3d(v, scene.scale_of(i)))
                for i, v in enumerate(scene.vectors)]

    def on_pointer_down(self, x, y, scene):
        hit = hit_test((x, y), self.endpoints(scene), self.radius)
        if hit is not None:
            self.state.dragging_index = hit
            self.state.drag_depth = scene.vectors[hit].z
            logger.debug("Dragging v%d", hit + 1)
            return

        self.state.dragging_view = True
        self.state.last_pointer = (x, y)
        logger.debug("Orbiting camera")

    def on_pointer_move(self, x, y, scene, on_vector_update):
        if self.state.dragging_view:
            lx, ly = self.state.last_pointer
            self.camera.rotation_y += (x - lx) * self.sensitivity
            self.camera.rotation_x += (y - ly) * self.sensitivity
            self.state.last_pointer = (x, y)
            return

        if self.state.dragging_index is not None:
            # Dragging moves x/y in the screen plane; depth stays put.
            world = self.mapper.screen_to_world(x, y)
            on_vector_update(self.state.dragging_index,
                             Vector3D(world.x, world.y, self.state.drag_depth))
            return

        self.state.hovered_index = hit_test((x, y), self.endpoints(scene), self.radius)

    def on_pointer_up(self):
        _log_drag_end(self.state)
        self.state.release()

    def on_pointer_leave(self):
        _log_drag_end(self.state)
        self.state.leave()
