"""
pygame drawing primitives shared by the 2D and 3D renderers.

Everything here works in screen pixels. Mapping from world units is the
renderer's job (see lintrans.coords).
"""

import logging
import math

import pygame

from lintrans.config import LABEL_OUTLINE, VECTOR_DRAG, VECTOR_HOVER, VECTOR_IDLE

logger = logging.getLogger(__name__)

# Anything past this is far off-canvas; pygame's C ints would overflow.
MAX_PIXEL = 1e6

# ============================================================
# UNICODE-SAFE TEXT RENDERING
# ============================================================

# If a font doesn't cover a character you get little squares ("tofu"),
# so labels like "î" fall back to plain ASCII when the font is unknown.

def _pick_font_path(preferred_names, bold=False):
    """First system font file matching one of the preferred names."""
    for name in preferred_names:
        path = pygame.font.match_font(name, bold=bold)
        if path:
            return path
    return None

def load_ui_font(size, bold=False, monospace=False):
    """
    Load a font with good Unicode coverage for math-ish symbols.
    Returns (font_obj, unicode_ok_flag).
    """
    if not pygame.font.get_init():
        pygame.font.init()

    preferred = [
        "Segoe UI Symbol", "Segoe UI",
        "DejaVu Sans", "Noto Sans", "Liberation Sans",
        "Arial Unicode MS", "Arial",
    ]
    if monospace:
        preferred = ["DejaVu Sans Mono", "Noto Sans Mono", "Liberation Mono",
                     "Consolas", "Courier New"] + preferred
    path = _pick_font_path(preferred, bold=bold)

    # Font family in the path is a good hint for Unicode coverage.
    unicode_ok = False
    if path:
        low = path.lower()
        unicode_ok = any(k in low for k in ["segoe", "dejavu", "noto", "arialuni", "symbol", "liberation"])
        try:
            return pygame.font.Font(path, size), unicode_ok
        except (OSError, pygame.error) as exc:
            logger.debug("Could not load font %s: %s", path, exc)

    return pygame.font.SysFont(None, size, bold=bold), False

UNICODE_REPLACEMENTS = {
    "î": "i",
    "ĵ": "j",
    "λ": "lambda",
    "θ": "theta",
    "°": "deg",
    "·": "*",
    "×": "x",
    "−": "-",
    "≠": "!=",
    "≈": "~",
}

def sanitize_unicode(text: str) -> str:
    """Replace math Unicode with ASCII so it never renders as tofu."""
    for k, v in UNICODE_REPLACEMENTS.items():
        text = text.replace(k, v)
    return text


class Fonts:
    """The three faces the canvases use, plus the Unicode flag."""

    def __init__(self):
        self.label, ok1 = load_ui_font(16, bold=True)
        self.axis, ok2 = load_ui_font(14, bold=True)
        self.small, ok3 = load_ui_font(11, monospace=True)
        self.unicode_ok = ok1 and ok2 and ok3


def blit_text_safe(surf, font, text, pos, color, unicode_ok=True, center=False, outline=None):
    """
    Render text at pos (top-left, or center if `center`).
    An `outline` color draws a 1px halo first so labels stay legible on lines.
    """
    if not unicode_ok:
        text = sanitize_unicode(text)
    if not drawable(pos):
        return

    image = font.render(text, True, color)
    rect = image.get_rect()
    if center:
        rect.center = (int(pos[0]), int(pos[1]))
    else:
        rect.topleft = (int(pos[0]), int(pos[1]))

    if outline is not None:
        halo = font.render(text, True, outline)
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            surf.blit(halo, rect.move(dx, dy))
    surf.blit(image, rect)

# ============================================================
# SHAPES
# ============================================================

def drawable(*points):
    """True if every point is finite and within pygame's pixel range."""
    for p in points:
        for coord in p:
            if not math.isfinite(coord) or abs(coord) > MAX_PIXEL:
                return False
    return True

def draw_segment(surf, color, a, b, width=1):
    if drawable(a, b):
        pygame.draw.line(surf, color, a, b, width)

def draw_dashed_line(surf, color, a, b, width=1, dash=8, gap=4):
    """Dashed segment a -> b with an 8-on/4-off pattern by default."""
    if not drawable(a, b):
        return
    dx, dy = b[0] - a[0], b[1] - a[1]
    L = math.hypot(dx, dy)
    if L < 1e-6:
        return
    ux, uy = dx / L, dy / L

    pos = 0.0
    while pos < L:
        end = min(pos + dash, L)
        pygame.draw.line(surf, color,
                         (a[0] + ux * pos, a[1] + uy * pos),
                         (a[0] + ux * end, a[1] + uy * end), width)
        pos = end + gap

def draw_arrowhead(surf, color, a, b, head_len=15):
    """Filled triangle at b pointing away from a (30 degree half-angle)."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    L = math.hypot(dx, dy)
    if L < 1e-6:
        return

    # Unit direction along the arrow + perpendicular for the head triangle.
    ux, uy = dx / L, dy / L
    px, py = -uy, ux
    head_w = head_len * math.tan(math.pi / 6)

    tip = (b[0], b[1])
    left = (b[0] - head_len*ux + head_w*px, b[1] - head_len*uy + head_w*py)
    right = (b[0] - head_len*ux - head_w*px, b[1] - head_len*uy - head_w*py)
    pygame.draw.polygon(surf, color, [tip, left, right])

def draw_arrow(surf, color, a, b, width=3, head_len=15, dashed=False):
    """Shaft from a to b plus arrowhead. Non-finite ends draw nothing."""
    if not drawable(a, b):
        return
    if dashed:
        draw_dashed_line(surf, color, a, b, width)
    else:
        pygame.draw.line(surf, color, a, b, width)
    draw_arrowhead(surf, color, a, b, head_len)

def draw_endpoint(surf, color, p, radius=6):
    if drawable(p):
        pygame.draw.circle(surf, color, p, radius)

def draw_vector_arrow(surf, fonts, color, start, end, width=3, label=None, dashed=False):
    """
    The canvas's vector glyph: shaft, arrowhead, endpoint dot and an
    optional label offset up-right of the tip.
    """
    if not drawable(start, end):
        return
    draw_arrow(surf, color, start, end, width, dashed=dashed)
    draw_endpoint(surf, color, end)
    if label and fonts is not None:
        blit_text_safe(surf, fonts.label, label, (end[0] + 15, end[1] - 27), color,
                       unicode_ok=fonts.unicode_ok, outline=LABEL_OUTLINE)

def vector_style(index, interaction):
    """(color, width) for user vector `index`: drag beats hover beats idle."""
    if interaction is not None and interaction.dragging_index == index:
        return VECTOR_DRAG, 4
    if interaction is not None and interaction.hovered_index == index:
        return VECTOR_HOVER, 4
    return VECTOR_IDLE, 3
