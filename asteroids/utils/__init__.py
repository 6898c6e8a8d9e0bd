"""Utility functions and helpers."""

from .functions import (
    asteroids_for_score,
    calculate_accuracy,
    distance,
    format_time,
    threat_color,
)
from .input_handler import GameAction, InputState, action_for_key

__all__ = [
    "asteroids_for_score",
    "calculate_accuracy",
    "distance",
    "format_time",
    "threat_color",
    "GameAction",
    "InputState",
    "action_for_key",
]
