"""
2x2 matrices: factories, composition, determinant, interpolation and
a closed-form eigen-decomposition.

A Matrix2D(a, b, c, d) stands for [[a, b], [c, d]] and acts on column
vectors: (x, y) -> (a*x + b*y, c*x + d*y).
"""

import logging
import math
from typing import NamedTuple

from lintrans.config import EIGEN_EPSILON
from lintrans.vectors import Vector2D, lerp, normalize

logger = logging.getLogger(__name__)


class Matrix2D(NamedTuple):
    a: float
    b: float
    c: float
    d: float


class EigenResult(NamedTuple):
    """Real eigenvalues, lambda1 >= lambda2. Both NaN when complex."""
    lambda1: float
    lambda2: float

# ============================================================
# APPLICATION & COMPOSITION
# ============================================================

def apply_matrix(v, m):
    """Apply m to the column vector v."""
    return Vector2D(m.a * v.x + m.b * v.y,
                    m.c * v.x + m.d * v.y)

def multiply_matrices(m1, m2):
    """Product m1*m2. Rightmost factor acts first."""
    return Matrix2D(m1.a * m2.a + m1.b * m2.c,
                    m1.a * m2.b + m1.b * m2.d,
                    m1.c * m2.a + m1.d * m2.c,
                    m1.c * m2.b + m1.d * m2.d)

# ============================================================
# MATRIX FACTORIES
# ============================================================

def identity_matrix():
    return Matrix2D(1.0, 0.0, 0.0, 1.0)

def rotation_matrix(theta):
    """Counter-clockwise rotation by theta radians."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix2D(c, -s,
                    s, c)

def scaling_matrix(sx, sy):
    return Matrix2D(sx, 0.0,
                    0.0, sy)

def shear_matrix(shx, shy):
    """[[1, shx], [shy, 1]]; shx slides x along y and shy slides y along x."""
    return Matrix2D(1.0, shx,
                    shy, 1.0)

def reflection_matrix():
    """Mirror across the y axis."""
    return Matrix2D(-1.0, 0.0,
                    0.0, 1.0)

def projection_matrix():
    """Orthogonal projection onto the x axis."""
    return Matrix2D(1.0, 0.0,
                    0.0, 0.0)

# Keys double as the names shown by the app; order follows the digit keys.
PRESETS = {
    "identity": identity_matrix,
    "rotate90": lambda: rotation_matrix(math.pi / 2),
    "rotate45": lambda: rotation_matrix(math.pi / 4),
    "scale2": lambda: scaling_matrix(2, 2),
    "scaleX": lambda: scaling_matrix(2, 1),
    "scaleY": lambda: scaling_matrix(1, 2),
    "shearX": lambda: shear_matrix(1, 0),
    "shearY": lambda: shear_matrix(0, 1),
    "reflection": reflection_matrix,
    "projection": projection_matrix,
}

def preset_matrix(name: str) -> Matrix2D:
    """Look up a named preset. Unknown names give the identity."""
    factory = PRESETS.get(name)
    if factory is None:
        logger.warning("Unknown preset %r, using identity", name)
        return identity_matrix()
    return factory()

# ============================================================
# SCALAR PROPERTIES
# ============================================================

def determinant(m):
    """Signed area scale factor. Negative means orientation flips."""
    return m.a * m.d - m.b * m.c

def classify_determinant(det: float) -> str:
    """Bucket a determinant into 'reflection', 'collapse' or 'preserving'."""
    if det < 0:
        return "reflection"
    if det == 0:
        return "collapse"
    return "preserving"

def lerp_matrix(m1, m2, t):
    """Entry-wise interpolation m1 -> m2. Callers clamp t."""
    return Matrix2D(lerp(m1.a, m2.a, t),
                    lerp(m1.b, m2.b, t),
                    lerp(m1.c, m2.c, t),
                    lerp(m1.d, m2.d, t))

# ============================================================
# EIGEN-DECOMPOSITION (2x2, real case only)
# ============================================================

def calculate_eigenvalues(m):
    """
    Roots of  lambda^2 - tr(m) lambda + det(m) = 0.

    A negative discriminant means complex roots; both values are then NaN.
    """
    trace = m.a + m.d
    det = determinant(m)
    discriminant = trace * trace - 4 * det

    if discriminant < 0:
        return EigenResult(math.nan, math.nan)

    sqrt_disc = math.sqrt(discriminant)
    return EigenResult((trace + sqrt_disc) / 2,
                       (trace - sqrt_disc) / 2)

def calculate_eigenvector(m, lam, eps=EIGEN_EPSILON):
    """
    Unit vector spanning the null space of (m - lam*I), or None.

    Tries the first row, then the second row. If both off-diagonal entries
    vanish the matrix is diagonal: lam*I gives (1, 0), otherwise the axis
    whose diagonal entry matches lam. Anything else has no stable direction.
    """
    if math.isnan(lam):
        return None

    a = m.a - lam
    b = m.b
    c = m.c
    d = m.d - lam

    if abs(b) > eps:
        return normalize(Vector2D(-b, a))
    elif abs(c) > eps:
        return normalize(Vector2D(-d, c))
    elif abs(a) < eps:
        return Vector2D(1.0, 0.0)
    elif abs(d) < eps:
        return Vector2D(0.0, 1.0)

    return None

def eigen_pairs(m):
    """
    (eigenvalue, eigenvector) pairs worth displaying.

    Complex cases give an empty list, a repeated eigenvalue is listed once,
    and eigenvalues without a stable eigenvector are dropped.
    """
    eig = calculate_eigenvalues(m)
    values = [eig.lambda1]
    if eig.lambda2 != eig.lambda1:
        values.append(eig.lambda2)

    pairs = []
    for lam in values:
        vec = calculate_eigenvector(m, lam)
        if vec is not None:
            pairs.append((lam, vec))
    return pairs
