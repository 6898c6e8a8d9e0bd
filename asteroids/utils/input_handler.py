"""
Input handler for Asteroids.

Maps pygame key codes to ship controls (held every frame) and to
one-shot UI actions (pressed once).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping

import pygame


class GameAction(Enum):
    """One-shot actions triggered by a key press."""
    TOGGLE_CONTROLS = auto()
    TOGGLE_DEBUG = auto()
    PAUSE = auto()
    RESTART = auto()
    NONE = auto()


ACTION_KEYS: dict[int, GameAction] = {
    pygame.K_h: GameAction.TOGGLE_CONTROLS,
    pygame.K_F1: GameAction.TOGGLE_DEBUG,
    pygame.K_ESCAPE: GameAction.PAUSE,
    pygame.K_r: GameAction.RESTART,
}

THRUST_FORWARD_KEY = pygame.K_w
THRUST_BACK_KEY = pygame.K_s
ROTATE_LEFT_KEY = pygame.K_a
ROTATE_RIGHT_KEY = pygame.K_d
SHOOT_KEY = pygame.K_SPACE


def action_for_key(key: int) -> GameAction:
    """Return the UI action bound to *key*; unbound keys give NONE."""
    return ACTION_KEYS.get(key, GameAction.NONE)


@dataclass
class InputState:
    """Snapshot of the held ship controls for one frame."""
    thrust_forward: bool = False
    thrust_back: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    shoot: bool = False

    @staticmethod
    def from_pressed(pressed: Mapping[int, bool]) -> "InputState":
        """Build from anything indexable by key code.

        Works with ``pygame.key.get_pressed()`` as well as a plain dict.
        """
        def held(key: int) -> bool:
            try:
                return bool(pressed[key])
            except (KeyError, IndexError):
                return False

        return InputState(
            thrust_forward=held(THRUST_FORWARD_KEY),
            thrust_back=held(THRUST_BACK_KEY),
            rotate_left=held(ROTATE_LEFT_KEY),
            rotate_right=held(ROTATE_RIGHT_KEY),
            shoot=held(SHOOT_KEY),
        )
