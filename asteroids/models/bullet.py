"""
Bullets fired by the ship.
"""

from __future__ import annotations

from dataclasses import dataclass

from asteroids.config import (
    BULLET_LIFETIME,
    BULLET_RADIUS,
    BULLET_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from asteroids.models.entity import GameObject
from asteroids.models.vector import Vector2D


@dataclass
class Bullet(GameObject):
    """Straight-line projectile that expires after ``lifetime`` seconds.

    Bullets wrap around the field like everything else.
    """

    radius: float = BULLET_RADIUS
    lifetime: float = BULLET_LIFETIME

    @staticmethod
    def fire(x: float, y: float, rotation: float) -> "Bullet":
        """Create a bullet at (*x*, *y*) heading along *rotation*."""
        return Bullet(
            position=Vector2D(x, y),
            velocity=Vector2D.from_angle(rotation, BULLET_SPEED),
            rotation=rotation,
        )

    def update(
        self,
        dt: float,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
    ) -> None:
        super().update(dt, width, height)
        self.lifetime -= dt
        if self.lifetime <= 0:
            self.active = False
