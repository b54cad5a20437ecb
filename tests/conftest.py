"""Shared fixtures. pygame runs headless: nothing here opens a window."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from lintrans.coords import CoordinateMapper


@pytest.fixture(scope="session")
def fonts():
    from lintrans.drawing import Fonts
    pygame.font.init()
    return Fonts()


@pytest.fixture
def surface():
    return pygame.Surface((800, 800))


@pytest.fixture
def mapper():
    return CoordinateMapper()
