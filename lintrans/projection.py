"""
3D rotations about the X and Y axes and a pinhole perspective projection.
"""

import math

from lintrans.config import CAMERA_DISTANCE
from lintrans.vectors import Vector2D, Vector3D


def rotate_x3d(v, theta):
    """Rotate v about the X axis (right-hand rule)."""
    c, s = math.cos(theta), math.sin(theta)
    return Vector3D(v.x,
                    v.y * c - v.z * s,
                    v.y * s + v.z * c)

def rotate_y3d(v, theta):
    """Rotate v about the Y axis (right-hand rule)."""
    c, s = math.cos(theta), math.sin(theta)
    return Vector3D(v.x * c + v.z * s,
                    v.y,
                    -v.x * s + v.z * c)

def rotate_camera(v, rotation_x, rotation_y):
    """Camera orientation: X rotation first, then Y."""
    return rotate_y3d(rotate_x3d(v, rotation_x), rotation_y)

def _ieee_div(num, den):
    # Python raises on x/0.0; the projection wants the IEEE answer instead.
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den

def project3d(v, camera_distance=CAMERA_DISTANCE):
    """
    Perspective divide: scale = d / (d + z).

    A point on the camera plane (d + z == 0) yields non-finite coordinates;
    callers decide whether to draw them.
    """
    s = _ieee_div(camera_distance, camera_distance + v.z)
    return Vector2D(v.x * s, v.y * s)
