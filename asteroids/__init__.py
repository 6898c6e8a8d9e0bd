"""
Asteroids - wrap-around arcade shooter built on pygame.
"""

__version__ = "1.0.0"

from .game import Game, GameState
from .config import *  # noqa: F401,F403

__all__ = ["Game", "GameState"]
