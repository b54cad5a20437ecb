"""
Plain 2D/3D vector arithmetic.

Vectors are immutable NamedTuples, so they unpack like (x, y) tuples
and every operation returns a new value. No numpy: in two and three
dimensions every formula fits on one line.
"""

import math
from typing import Iterable, NamedTuple


class Vector2D(NamedTuple):
    x: float
    y: float


class Vector3D(NamedTuple):
    x: float
    y: float
    z: float


ZERO2 = Vector2D(0.0, 0.0)
ZERO3 = Vector3D(0.0, 0.0, 0.0)

# ============================================================
# 2D
# ============================================================

def add(v1, v2):
    return Vector2D(v1.x + v2.x, v1.y + v2.y)

def subtract(v1, v2):
    return Vector2D(v1.x - v2.x, v1.y - v2.y)

def scale(v, k):
    """Multiply v by the scalar k."""
    return Vector2D(v.x * k, v.y * k)

def magnitude(v):
    """Euclidean norm."""
    return math.sqrt(v.x * v.x + v.y * v.y)

def normalize(v):
    """Unit vector along v. The zero vector maps to itself."""
    mag = magnitude(v)
    if mag == 0:
        return ZERO2
    return Vector2D(v.x / mag, v.y / mag)

def dot(v1, v2):
    return v1.x * v2.x + v1.y * v2.y

def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation a -> b. t is not clamped."""
    return a + (b - a) * t

def lerp_vector(v1, v2, t):
    return Vector2D(lerp(v1.x, v2.x, t), lerp(v1.y, v2.y, t))

# ============================================================
# 3D
# ============================================================

def add3d(v1, v2):
    return Vector3D(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)

def subtract3d(v1, v2):
    return Vector3D(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)

def scale3d(v, k):
    return Vector3D(v.x * k, v.y * k, v.z * k)

def magnitude3d(v):
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)

def normalize3d(v):
    """Unit vector along v. The zero vector maps to itself."""
    mag = magnitude3d(v)
    if mag == 0:
        return ZERO3
    return Vector3D(v.x / mag, v.y / mag, v.z / mag)

def dot3d(v1, v2):
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

def cross3d(v1, v2):
    """Right-handed cross product v1 x v2."""
    return Vector3D(v1.y * v2.z - v1.z * v2.y,
                    v1.z * v2.x - v1.x * v2.z,
                    v1.x * v2.y - v1.y * v2.x)

def sum3d(vectors: Iterable[Vector3D]) -> Vector3D:
    """Head-to-tail sum, starting from the origin."""
    total = ZERO3
    for v in vectors:
        total = add3d(total, v)
    return total
