"""
Session-wide constants: canvas geometry, palettes, interaction tuning.

Everything here is constant for a session. Classes that use these values
accept overrides in their constructors, so tests can pick other numbers.
"""

# ============================================================
# CANVAS
# ============================================================

# Abstract canvas: 800x800, origin in the middle, 40 px per world unit.
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 800
WORLD_SCALE = 40

FPS = 60

# ============================================================
# COLORS
# ============================================================

# pygame.draw does not alpha-blend on a plain surface, so the
# translucent strokes of the design are pre-mixed against BACKGROUND.
BACKGROUND = (10, 22, 40)

GRID_MAIN = (31, 66, 128)      # lines through the origin
GRID_MINOR = (17, 38, 72)
GRID_LABEL = (68, 104, 139)
AXES = (45, 84, 124)
AXIS_LABEL = (109, 143, 183)

BASIS_I = (239, 68, 68)        # red
BASIS_J = (34, 197, 94)        # green
AXIS_Z = (59, 130, 246)        # blue

VECTOR_IDLE = (249, 115, 22)
VECTOR_HOVER = (253, 186, 116)
VECTOR_DRAG = (251, 146, 60)

SUM_VECTOR = (34, 197, 94)
SUM_CONNECTOR = (36, 65, 102)
EIGEN_LINE = (192, 132, 252)

LABEL_OUTLINE = (10, 26, 40)

# Determinant category -> readout color.
DETERMINANT_COLORS = {
    "reflection": (96, 165, 250),
    "collapse": (148, 163, 184),
    "preserving": (251, 146, 60),
}

# ============================================================
# INTERACTION / ANIMATION / 3D
# ============================================================

HIT_RADIUS = 15                # px
ROTATION_SENSITIVITY = 0.01    # rad per px of camera drag

ANIMATION_DURATION_MS = 1000

CAMERA_DISTANCE = 8.0
INITIAL_ROTATION_X = 0.4
INITIAL_ROTATION_Y = 0.6

GRID_EXTENT_2D = 10
GRID_EXTENT_3D = 5
AXIS_LENGTH_3D = 6

EIGEN_EPSILON = 1e-4
