import os

# Headless pygame for the app tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from mandelbrot_explorer.renderer import PixelBuffer
from mandelbrot_explorer.session import Session


@pytest.fixture
def session():
    return Session(1000, 1000)


@pytest.fixture
def small_session():
    return Session(60, 40)


@pytest.fixture
def small_buffer():
    return PixelBuffer(60, 40)
