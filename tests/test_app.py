"""Tests for the app's readout, argument parsing, logging setup and main loop."""
import logging
import math

import pygame
import pytest

from lintrans import app, config
from lintrans.logging_config import setup_logging
from lintrans.matrices import identity_matrix, reflection_matrix, rotation_matrix, scaling_matrix
from lintrans.scene import Scene2D, Scene3D
from lintrans.scene2d import Renderer2D, display_matrix
from lintrans.vectors import Vector3D


def texts(lines):
    return [text for text, _ in lines]


class TestReadout:

    def test_complex_eigenvalues_reported(self):
        lines = app.readout_lines_2d(Scene2D(transformation=rotation_matrix(math.pi / 2)))
        assert "No real eigenvalues" in texts(lines)

    def test_real_eigenpairs_listed(self):
        lines = app.readout_lines_2d(Scene2D(transformation=scaling_matrix(2, 3)))
        eig_rows = [t for t in texts(lines) if t.startswith("λ")]
        assert eig_rows == ["λ1 = 3.000  v = [0.00, 1.00]", "λ2 = 2.000  v = [1.00, 0.00]"]

    def test_determinant_color_follows_sign(self):
        lines = app.readout_lines_2d(Scene2D(transformation=reflection_matrix()))
        det_row = [row for row in lines if row[0].startswith("det")][0]
        assert det_row == ("det = -1.000", config.DETERMINANT_COLORS["reflection"])

    def test_sum_row_only_when_enabled(self):
        scene = Scene3D(vectors=[Vector3D(1, 0, 0), Vector3D(0, 2, 0)], scales=[2.0, 1.0])
        assert not any(t.startswith("sum") for t in texts(app.readout_lines_3d(scene)))
        scene.show_vector_sum = True
        assert "sum = (2.00, 2.00, 0.00)" in texts(app.readout_lines_3d(scene))

    def test_fnum(self):
        assert app.fnum(math.nan) == "nan"
        assert app.fnum(1.23456, 3) == "1.235"


def test_preset_keys_cover_digits():
    assert len(app.PRESET_KEYS) == 10
    assert app.PRESET_KEYS[app.pygame.K_0] == "identity"


def test_parse_args():
    args = app.parse_args(["--mode", "3d", "--debug"])
    assert args.mode == "3d"
    assert args.debug
    assert args.log_file is None


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))
    logger = logging.getLogger("lintrans")
    assert len(logger.handlers) == 2
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------

class TestMainLoop:

    @pytest.fixture
    def frames(self, monkeypatch):
        """Display matrices handed to the 2D renderer, one per frame."""
        recorded = []

        def render(self, surf, scene, interaction=None):
            recorded.append(display_matrix(scene))

        monkeypatch.setattr(Renderer2D, "render", render)
        monkeypatch.setattr(app.pygame.time, "get_ticks", lambda: 1000)
        # Keep pygame (and the session fonts) alive after main() returns.
        monkeypatch.setattr(app.pygame, "quit", lambda: None)
        yield recorded
        logger = logging.getLogger("lintrans")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def run(self, monkeypatch, batches):
        batches = iter(batches)
        monkeypatch.setattr(app.pygame.event, "get", lambda: next(batches, []))
        app.main([])

    def test_preset_starts_from_identity(self, monkeypatch, frames):
        key = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_3)
        self.run(monkeypatch, [[key], [pygame.event.Event(pygame.QUIT)]])
        assert frames[0] == identity_matrix()
        assert frames[1] == identity_matrix()

    def test_retarget_restarts_from_identity(self, monkeypatch, frames):
        ticks = iter([0, 0, 500, 500, 500])
        monkeypatch.setattr(app.pygame.time, "get_ticks", lambda: next(ticks, 500))
        scale2 = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_3)
        shear = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_6)
        self.run(monkeypatch, [[scale2], [shear], [pygame.event.Event(pygame.QUIT)]])
        assert frames[0] == identity_matrix()
        assert frames[1] == identity_matrix()
