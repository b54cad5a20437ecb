"""
Scene state handed to the renderers and controllers every frame.

The app owns these objects. The core reads them fresh on each call and
never keeps a copy; the only state the core owns is the camera and the
pointer interaction state, both defined here as small structs.
"""

from typing import List, Optional, Tuple

from lintrans.config import INITIAL_ROTATION_X, INITIAL_ROTATION_Y
from lintrans.matrices import Matrix2D, identity_matrix
from lintrans.vectors import Vector2D, Vector3D


class Scene2D:
    """Vectors, target transformation and toggles for the 2D canvas."""

    def __init__(self, vectors=None, transformation=None,
                 show_grid=True, show_basis_vectors=True,
                 show_eigenvectors=False, animation_progress=1.0):
        if vectors is None:
            vectors = [Vector2D(3.0, 2.0), Vector2D(-2.0, 3.0)]
        self.vectors: List[Vector2D] = list(vectors)
        self.transformation: Matrix2D = transformation or identity_matrix()
        self.show_grid = show_grid
        self.show_basis_vectors = show_basis_vectors
        self.show_eigenvectors = show_eigenvectors
        self.animation_progress = animation_progress

    def add_vector(self):
        self.vectors.append(Vector2D(1.0, 1.0))

    def update_vector(self, index, vector):
        self.vectors[index] = Vector2D(vector.x, vector.y)

    def remove_vector(self, index):
        """Drop a vector; later vectors shift down one index."""
        del self.vectors[index]


class Scene3D:
    """Vectors with per-vector multipliers and toggles for the 3D canvas."""

    def __init__(self, vectors=None, scales=None,
                 show_grid=True, show_vector_sum=False):
        if vectors is None:
            vectors = [Vector3D(3.0, 2.0, 1.0), Vector3D(-1.0, 3.0, 2.0)]
        self.vectors: List[Vector3D] = list(vectors)
        if scales is None:
            scales = [1.0] * len(self.vectors)
        self.scales: List[float] = list(scales)
        self.show_grid = show_grid
        self.show_vector_sum = show_vector_sum

    def scale_of(self, index):
        """Multiplier for vector `index`; missing or zero counts as 1."""
        if index < len(self.scales) and self.scales[index]:
            return self.scales[index]
        return 1.0

    def add_vector(self):
        self.vectors.append(Vector3D(1.0, 1.0, 1.0))
        self.scales.append(1.0)

    def update_vector(self, index, vector):
        self.vectors[index] = Vector3D(vector.x, vector.y, vector.z)

    def set_scale(self, index, k):
        self.scales[index] = k

    def remove_vector(self, index):
        """Drop a vector and its multiplier; later vectors shift down."""
        del self.vectors[index]
        if index < len(self.scales):
            del self.scales[index]


class Camera:
    """Two view angles in radians; unbounded, trig takes care of wrapping."""

    def __init__(self, rotation_x=INITIAL_ROTATION_X, rotation_y=INITIAL_ROTATION_Y):
        self.rotation_x = rotation_x
        self.rotation_y = rotation_y


class InteractionState:
    """
    Pointer state owned by a controller.

    release() is pointer-up: drags end, hover stays.
    leave() is pointer-leave: everything clears.
    """

    def __init__(self):
        self.dragging_index: Optional[int] = None
        self.hovered_index: Optional[int] = None
        self.dragging_view = False
        self.last_pointer: Tuple[float, float] = (0.0, 0.0)
        # z of the dragged 3D vector, frozen at pointer-down
        self.drag_depth: Optional[float] = None

    def release(self):
        self.dragging_index = None
        self.dragging_view = False
        self.drag_depth = None

    def leave(self):
        self.release()
        self.hovered_index = None
