"""
Shared pytest fixtures.

Forces SDL's dummy drivers so rendering tests run without a display or
sound card.
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from asteroids.game import Game  # noqa: E402


@pytest.fixture(scope="session")
def pygame_session():
    # Fonts are cached for the whole run, so pygame stays up until the end
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def game():
    """A seeded game on the default 800x600 field."""
    return Game(rng=random.Random(1234))


@pytest.fixture
def surface(pygame_session):
    """Off-screen 800x600 canvas."""
    return pygame.Surface((800, 600))
