"""
2D vector used for positions and velocities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2D:
    """Plain 2D vector.

    Arithmetic returns new vectors.  Components stay mutable so that
    screen wrapping can snap a single axis in place.
    """

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> "Vector2D":
        """Return a vector of *length* pointing along *angle* (radians)."""
        return Vector2D(math.cos(angle) * length, math.sin(angle) * length)

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def multiply(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def rotate(self, angle: float) -> "Vector2D":
        """Rotate counter-clockwise (in screen space: clockwise) by *angle*."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2D(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
        )

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vector2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
