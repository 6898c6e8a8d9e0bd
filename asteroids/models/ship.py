"""
Player ship.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from asteroids.config import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHIP_DAMPING,
    SHIP_HULL,
    SHIP_INVULNERABLE_TIME,
    SHIP_MAX_SPEED,
    SHIP_RADIUS,
    SHIP_REVERSE_FACTOR,
    SHIP_ROTATION_SPEED,
    SHIP_THRUST_POWER,
)
from asteroids.models.entity import GameObject
from asteroids.models.vector import Vector2D


@dataclass
class Ship(GameObject):
    """The player's ship.

    Thrust accelerates along the current heading, capped at
    ``max_speed``.  Velocity is damped by ``damping`` on every update
    regardless of frame length.  After a respawn the ship ignores
    asteroid contact for ``SHIP_INVULNERABLE_TIME`` seconds.
    """

    radius: float = SHIP_RADIUS
    thrust_power: float = SHIP_THRUST_POWER
    rotation_speed: float = SHIP_ROTATION_SPEED
    max_speed: float = SHIP_MAX_SPEED
    damping: float = SHIP_DAMPING
    invulnerable: bool = False
    invulnerable_time: float = 0.0

    @staticmethod
    def at(x: float, y: float) -> "Ship":
        return Ship(position=Vector2D(x, y))

    def thrust(self, forward: bool, dt: float) -> None:
        """Accelerate forward, or backward at half power."""
        factor = 1.0 if forward else -SHIP_REVERSE_FACTOR
        direction = Vector2D.from_angle(self.rotation)
        self.velocity = self.velocity.add(
            direction.multiply(self.thrust_power * dt * factor)
        )
        speed = self.velocity.magnitude()
        if speed > self.max_speed:
            self.velocity = self.velocity.multiply(self.max_speed / speed)

    def rotate(self, direction: int, dt: float) -> None:
        """Turn by ``direction`` (-1 left, +1 right) for *dt* seconds."""
        self.rotation += direction * self.rotation_speed * dt

    def update(
        self,
        dt: float,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
    ) -> None:
        super().update(dt, width, height)
        self.velocity = self.velocity.multiply(self.damping)

        if self.invulnerable:
            self.invulnerable_time -= dt
            if self.invulnerable_time <= 0:
                self.invulnerable = False
                self.invulnerable_time = 0.0

    def respawn(self, x: float, y: float) -> None:
        """Return to (*x*, *y*) at rest, facing right, and invulnerable."""
        self.position = Vector2D(x, y)
        self.velocity = Vector2D()
        self.rotation = 0.0
        self.invulnerable = True
        self.invulnerable_time = SHIP_INVULNERABLE_TIME

    @property
    def is_blink_frame(self) -> bool:
        """True on the dimmed half of the invulnerability blink."""
        if not self.invulnerable:
            return False
        return math.floor(self.invulnerable_time * 10) % 2 == 1

    def hull_points(self) -> list[tuple[float, float]]:
        """Hull outline in world coordinates."""
        points = []
        for px, py in SHIP_HULL:
            p = Vector2D(px, py).rotate(self.rotation).add(self.position)
            points.append(p.as_tuple())
        return points
