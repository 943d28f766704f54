import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from canvas import Canvas
from noise_engine import AnimationState, NoiseField, NoiseMotion


class FixedField:
    """Noise stand-in that always returns the same sample."""
    def __init__(self, value):
        self.value = value

    def sample(self, seed, t):
        return self.value


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def canvas():
    return Canvas((800, 800))


@pytest.fixture
def motion():
    return NoiseMotion(NoiseField(seed=7), AnimationState())


@pytest.fixture
def fixed_field():
    return FixedField
