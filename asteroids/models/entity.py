"""
Base class shared by every simulated body: ship, bullets, asteroids.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from asteroids.config import SCREEN_HEIGHT, SCREEN_WIDTH
from asteroids.models.vector import Vector2D


@dataclass
class GameObject:
    """A circle moving across a wrapping field.

    Collision uses the bounding circle of ``radius``; ``rotation`` only
    matters for drawing and for the ship's heading.
    """

    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)
    rotation: float = 0.0
    radius: float = 10
    active: bool = True

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def update(
        self,
        dt: float,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
    ) -> None:
        """Integrate position over *dt* seconds and wrap at the edges."""
        self.position = self.position.add(self.velocity.multiply(dt))
        self.wrap_position(width, height)

    def wrap_position(self, width: float, height: float) -> None:
        """Teleport to the opposite edge once strictly outside the field."""
        if self.position.x < 0:
            self.position.x = width
        elif self.position.x > width:
            self.position.x = 0
        if self.position.y < 0:
            self.position.y = height
        elif self.position.y > height:
            self.position.y = 0

    def check_collision(self, other: "GameObject") -> bool:
        """Return True if the bounding circles overlap."""
        return self.position.distance_to(other.position) < self.radius + other.radius
