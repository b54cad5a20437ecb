"""
2D canvas: the plane as seen through the (possibly mid-animation) matrix.

Each frame draws, back to front: the transformed grid, the fixed screen
axes, the images of the basis vectors, optional eigen-lines and the user
vectors.
"""

from lintrans import config
from lintrans.coords import CoordinateMapper
from lintrans.drawing import (Fonts, blit_text_safe, draw_segment, draw_vector_arrow,
                              vector_style)
from lintrans.matrices import apply_matrix, eigen_pairs, identity_matrix, lerp_matrix
from lintrans.vectors import ZERO2, Vector2D, scale


def display_matrix(scene):
    """Identity blended toward the scene's transformation."""
    return lerp_matrix(identity_matrix(), scene.transformation, scene.animation_progress)

def grid_segments(matrix, extent=config.GRID_EXTENT_2D):
    """
    Grid lines x = k and y = k for k in [-extent, extent], pushed through
    `matrix`. Returns (p1, p2, is_main) in world units; is_main marks the
    two lines through the origin.
    """
    segments = []
    for k in range(-extent, extent + 1):
        is_main = k == 0
        # Vertical grid line x = k
        segments.append((apply_matrix(Vector2D(k, -extent), matrix),
                         apply_matrix(Vector2D(k, extent), matrix),
                         is_main))
        # Horizontal grid line y = k
        segments.append((apply_matrix(Vector2D(-extent, k), matrix),
                         apply_matrix(Vector2D(extent, k), matrix),
                         is_main))
    return segments


class Renderer2D:
    """Draws a Scene2D onto a pygame surface."""

    def __init__(self, mapper=None, fonts=None):
        self.mapper = mapper or CoordinateMapper()
        self._fonts = fonts

    @property
    def fonts(self):
        # Deferred so a renderer can exist before pygame.font is initialised.
        if self._fonts is None:
            self._fonts = Fonts()
        return self._fonts

    def render(self, surf, scene, interaction=None):
        surf.fill(config.BACKGROUND)
        m = display_matrix(scene)

        if scene.show_grid:
            self.draw_grid(surf, m)

        self.draw_axes(surf)

        if scene.show_eigenvectors:
            self.draw_eigenvectors(surf, scene.transformation)

        if scene.show_basis_vectors:
            i_hat = apply_matrix(Vector2D(1, 0), m)
            j_hat = apply_matrix(Vector2D(0, 1), m)
            self.draw_vector(surf, i_hat, config.BASIS_I, 4, "î")
            self.draw_vector(surf, j_hat, config.BASIS_J, 4, "ĵ")

        for index, v in enumerate(scene.vectors):
            color, width = vector_style(index, interaction)
            self.draw_vector(surf, apply_matrix(v, m), color, width, f"v{index + 1}")

    def draw_vector(self, surf, v, color, width=3, label=None):
        w2s = self.mapper.world_to_screen
        draw_vector_arrow(surf, self.fonts, color, w2s(ZERO2), w2s(v), width, label)

    def draw_grid(self, surf, m):
        w2s = self.mapper.world_to_screen
        for p1, p2, is_main in grid_segments(m):
            color = config.GRID_MAIN if is_main else config.GRID_MINOR
            draw_segment(surf, color, w2s(p1), w2s(p2), 2 if is_main else 1)

        # Coordinate labels every second unit along the transformed axes.
        fonts = self.fonts
        for i in range(-8, 9, 2):
            if i == 0:
                continue
            xs = w2s(apply_matrix(Vector2D(i, 0), m))
            ys = w2s(apply_matrix(Vector2D(0, i), m))
            blit_text_safe(surf, fonts.small, str(i), (xs[0], xs[1] + 12), config.GRID_LABEL,
                           unicode_ok=fonts.unicode_ok, center=True)
            blit_text_safe(surf, fonts.small, str(i), (ys[0] - 15, ys[1]), config.GRID_LABEL,
                           unicode_ok=fonts.unicode_ok, center=True)

    def draw_axes(self, surf):
        """Untransformed screen-space reference axes."""
        mp = self.mapper
        draw_segment(surf, config.AXES, (0, mp.center_y), (mp.width, mp.center_y), 2)
        draw_segment(surf, config.AXES, (mp.center_x, 0), (mp.center_x, mp.height), 2)

        fonts = self.fonts
        blit_text_safe(surf, fonts.axis, "x", (mp.width - 20, mp.center_y - 14), config.AXIS_LABEL,
                       unicode_ok=fonts.unicode_ok, center=True)
        blit_text_safe(surf, fonts.axis, "y", (mp.center_x + 15, 16), config.AXIS_LABEL,
                       unicode_ok=fonts.unicode_ok, center=True)

    def draw_eigenvectors(self, surf, target):
        """
        Lines spanned by the target's real eigenvectors. Each span is
        invariant under every blend of identity and target, so it is drawn
        untransformed.
        """
        w2s = self.mapper.world_to_screen
        span = config.GRID_EXTENT_2D
        fonts = self.fonts
        for n, (lam, vec) in enumerate(eigen_pairs(target), start=1):
            draw_segment(surf, config.EIGEN_LINE, w2s(scale(vec, -span)), w2s(scale(vec, span)), 2)
            tip = w2s(scale(vec, 4))
            blit_text_safe(surf, fonts.small, f"λ{n}={lam:.2f}", (tip[0] + 8, tip[1] + 4),
                           config.EIGEN_LINE, unicode_ok=fonts.unicode_ok,
                           outline=config.LABEL_OUTLINE)
