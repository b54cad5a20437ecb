"""
lintrans: an interactive playground for 2D/3D vectors and linear maps.

The math lives in vectors, matrices and projection; coords, animation,
scene2d, scene3d and interaction make up the canvas pipeline; app is the
pygame window that ties them together.
"""

__version__ = "0.1.0"
