"""User interface components."""

from .game_over import GameOverScreen, GameStatistics
from .hud import HUD
from .manager import Message, UIManager
from .minimap import Minimap
from .text import ScoreDisplay, draw_text, get_font

__all__ = [
    "GameOverScreen",
    "GameStatistics",
    "HUD",
    "Message",
    "Minimap",
    "ScoreDisplay",
    "UIManager",
    "draw_text",
    "get_font",
]
