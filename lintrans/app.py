"""
Pygame front end for the linear-transformation playground.

The window holds an 800x800 canvas (2D or 3D) and a narrow readout on the
right. This module plays the part of the control panel: it owns the scene
state, turns keys into calls on the core, and forwards mouse events to the
active controller.

Controls:
- drag a vector tip : move the vector (3D keeps its depth)
- drag empty space  : orbit the camera (3D)
- TAB               : switch between 2D and 3D
- 0..9              : transformation presets (2D, animated; 0 = identity)
- G / B / E / S     : grid / basis vectors / eigenvectors / vector sum
- N                 : add a vector
- DEL / BACKSPACE   : remove the hovered (or last) vector
- + / -             : grow or shrink the hovered (or last) 3D vector
- ESC               : quit
"""

import argparse
import logging
import math

import pygame

from lintrans import config
from lintrans.animation import AnimationDriver
from lintrans.coords import CoordinateMapper
from lintrans.drawing import Fonts, blit_text_safe
from lintrans.interaction import Controller2D, Controller3D
from lintrans.logging_config import setup_logging
from lintrans.matrices import (PRESETS, calculate_eigenvalues, classify_determinant,
                               determinant, eigen_pairs, preset_matrix)
from lintrans.scene import Scene2D, Scene3D
from lintrans.scene2d import Renderer2D
from lintrans.scene3d import Renderer3D
from lintrans.vectors import scale3d, sum3d

logger = logging.getLogger(__name__)

SIDEBAR_W = 340
PANEL_BG = (13, 27, 42)
PANEL_EDGE = (30, 58, 95)
TEXT = (219, 234, 254)
MUTED = (96, 130, 170)

# Digit key -> preset name, in the order PRESETS lists them.
PRESET_KEYS = {pygame.K_0 + i: name for i, name in enumerate(PRESETS)}

SCALE_STEP = 0.25
SCALE_MIN, SCALE_MAX = 0.25, 3.0

# ============================================================
# READOUT
# ============================================================

def fnum(x, places=2):
    """Fixed-point formatting that prints 'nan' for NaN."""
    if math.isnan(x):
        return "nan"
    return f"{x:.{places}f}"

def readout_lines_2d(scene):
    """(text, color) rows describing the current 2D transformation."""
    m = scene.transformation
    det = determinant(m)
    eig = calculate_eigenvalues(m)
    lines = [
        ("Matrix", MUTED),
        (f"[{fnum(m.a)}, {fnum(m.b)}]", TEXT),
        (f"[{fnum(m.c)}, {fnum(m.d)}]", TEXT),
        (f"det = {fnum(det, 3)}", config.DETERMINANT_COLORS[classify_determinant(det)]),
    ]
    pairs = eigen_pairs(m)
    if math.isnan(eig.lambda1):
        lines.append(("No real eigenvalues", MUTED))
    for n, (lam, vec) in enumerate(pairs, start=1):
        lines.append((f"λ{n} = {fnum(lam, 3)}  v = [{fnum(vec.x)}, {fnum(vec.y)}]", config.EIGEN_LINE))

    lines.append(("", TEXT))
    lines.append(("Vectors", MUTED))
    for i, v in enumerate(scene.vectors):
        lines.append((f"v{i + 1} = ({fnum(v.x)}, {fnum(v.y)})", config.VECTOR_IDLE))
    return lines

def readout_lines_3d(scene):
    lines = [("Vectors", MUTED)]
    for i, v in enumerate(scene.vectors):
        k = scene.scale_of(i)
        lines.append((f"v{i + 1} = ({fnum(v.x)}, {fnum(v.y)}, {fnum(v.z)})  ×{fnum(k)}",
                      config.VECTOR_IDLE))
    if scene.show_vector_sum and scene.vectors:
        total = sum3d(scale3d(v, scene.scale_of(i)) for i, v in enumerate(scene.vectors))
        lines.append(("", TEXT))
        lines.append((f"sum = ({fnum(total.x)}, {fnum(total.y)}, {fnum(total.z)})", config.SUM_VECTOR))
    return lines

def draw_sidebar(screen, rect, fonts, title, lines):
    pygame.draw.rect(screen, PANEL_BG, rect)
    pygame.draw.line(screen, PANEL_EDGE, rect.topleft, rect.bottomleft, 2)
    blit_text_safe(screen, fonts.label, title, (rect.x + 16, rect.y + 14), TEXT,
                   unicode_ok=fonts.unicode_ok)
    y = rect.y + 46
    for text, color in lines:
        blit_text_safe(screen, fonts.small, text, (rect.x + 16, y), color,
                       unicode_ok=fonts.unicode_ok)
        y += 18

# ============================================================
# MAIN
# ============================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive linear-transformation playground")
    parser.add_argument("--mode", choices=["2d", "3d"], default="2d", help="canvas to start in")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    pygame.init()
    pygame.display.set_caption("Linear Transformations")

    W, H = config.CANVAS_WIDTH + SIDEBAR_W, config.CANVAS_HEIGHT
    screen = pygame.display.set_mode((W, H))
    canvas = pygame.Surface((config.CANVAS_WIDTH, config.CANVAS_HEIGHT))
    canvas_rect = canvas.get_rect()
    side = pygame.Rect(config.CANVAS_WIDTH, 0, SIDEBAR_W, H)
    clock = pygame.time.Clock()

    fonts = Fonts()
    mapper = CoordinateMapper()

    scene2d = Scene2D()
    scene3d = Scene3D()
    driver = AnimationDriver()

    renderer2d = Renderer2D(mapper, fonts)
    renderer3d = Renderer3D(mapper, fonts=fonts)
    controller2d = Controller2D(mapper)
    controller3d = Controller3D(renderer3d)

    mode_3d = args.mode == "3d"
    pointer_inside = False
    logger.info("Starting in %s mode", "3D" if mode_3d else "2D")

    running = True
    while running:
        clock.tick(config.FPS)

        scene = scene3d if mode_3d else scene2d
        controller = controller3d if mode_3d else controller2d

        # -------------------------
        # EVENTS
        # -------------------------
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if canvas_rect.collidepoint(e.pos):
                    controller.on_pointer_down(e.pos[0], e.pos[1], scene)

            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                controller.on_pointer_up()

            elif e.type == pygame.MOUSEMOTION:
                if canvas_rect.collidepoint(e.pos):
                    pointer_inside = True
                    controller.on_pointer_move(e.pos[0], e.pos[1], scene, scene.update_vector)
                elif pointer_inside:
                    pointer_inside = False
                    controller.on_pointer_leave()

            elif e.type == pygame.WINDOWLEAVE:
                pointer_inside = False
                controller.on_pointer_leave()

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False

                elif e.key == pygame.K_TAB:
                    controller.on_pointer_leave()
                    mode_3d = not mode_3d
                    logger.info("Switched to %s mode", "3D" if mode_3d else "2D")

                elif e.key in PRESET_KEYS and not mode_3d:
                    name = PRESET_KEYS[e.key]
                    logger.info("Applying preset %s", name)
                    driver.request(preset_matrix(name), pygame.time.get_ticks())
                    scene2d.transformation = driver.target
                    scene2d.animation_progress = driver.interpolation

                elif e.key == pygame.K_g:
                    scene.show_grid = not scene.show_grid

                elif e.key == pygame.K_b and not mode_3d:
                    scene2d.show_basis_vectors = not scene2d.show_basis_vectors

                elif e.key == pygame.K_e and not mode_3d:
                    scene2d.show_eigenvectors = not scene2d.show_eigenvectors

                elif e.key == pygame.K_s and mode_3d:
                    scene3d.show_vector_sum = not scene3d.show_vector_sum

                elif e.key == pygame.K_n:
                    scene.add_vector()

                elif e.key in (pygame.K_DELETE, pygame.K_BACKSPACE) and scene.vectors:
                    index = controller.state.hovered_index
                    if index is None:
                        index = len(scene.vectors) - 1
                    scene.remove_vector(index)
                    # Indices shifted; stale hover/drag would point at the wrong vector.
                    controller.on_pointer_leave()

                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS,
                               pygame.K_MINUS, pygame.K_KP_MINUS) and mode_3d and scene3d.vectors:
                    index = controller3d.state.hovered_index
                    if index is None:
                        index = len(scene3d.vectors) - 1
                    step = -SCALE_STEP if e.key in (pygame.K_MINUS, pygame.K_KP_MINUS) else SCALE_STEP
                    k = min(SCALE_MAX, max(SCALE_MIN, scene3d.scale_of(index) + step))
                    scene3d.set_scale(index, k)

        # -------------------------
        # DRAW
        # -------------------------
        # After events: a preset requested this frame draws from identity.
        scene2d.animation_progress = driver.tick(pygame.time.get_ticks())

        if mode_3d:
            renderer3d.render(canvas, scene3d, controller3d.state)
            draw_sidebar(screen, side, fonts, "3D vectors", readout_lines_3d(scene3d))
        else:
            renderer2d.render(canvas, scene2d, controller2d.state)
            draw_sidebar(screen, side, fonts, "Transformation", readout_lines_2d(scene2d))

        screen.blit(canvas, (0, 0))
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
