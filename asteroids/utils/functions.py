"""
Shared helpers for Asteroids: spawn policy, scoring and formatting.
"""

from __future__ import annotations

import math

from asteroids.config import (
    INITIAL_ASTEROIDS,
    MAX_WAVE_ASTEROIDS,
    POINTS_PER_EXTRA_ASTEROID,
)


# ── Spawn policy ────────────────────────────────────────────────────────────


def asteroids_for_score(score: int) -> int:
    """Number of large asteroids in the next wave.

    One extra per 1000 points on top of the initial five, capped at 7.
    """
    return min(
        MAX_WAVE_ASTEROIDS,
        INITIAL_ASTEROIDS + score // POINTS_PER_EXTRA_ASTEROID,
    )


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


# ── Statistics ──────────────────────────────────────────────────────────────


def calculate_accuracy(shots_fired: int, shots_hit: int) -> float:
    """Hit percentage (0-100); 0 when nothing was fired."""
    if shots_fired <= 0:
        return 0.0
    return shots_hit / shots_fired * 100


def format_time(seconds: float) -> str:
    """Format a duration as ``"2m 5s"`` or ``"42s"``."""
    total = int(seconds)
    minutes, remaining = divmod(total, 60)
    if minutes > 0:
        return f"{minutes}m {remaining}s"
    return f"{remaining}s"


def threat_color(dist: float, threat_range: float) -> tuple[int, int, int]:
    """Indicator colour: red when close, shading to yellow at *threat_range*."""
    threat = max(0.0, 1 - dist / threat_range)
    green = math.floor(255 * (1 - threat))
    return (255, green, 0)
