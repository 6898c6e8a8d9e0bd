"""
Asteroids and their split rules.

A large asteroid breaks into two mediums, a medium into two smalls, and
a small is simply destroyed.  Every fragment gets a fresh random heading
at its size's fixed speed.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from asteroids.config import (
    ASTEROID_EXTRA_VERTICES,
    ASTEROID_FRAGMENTS,
    ASTEROID_MIN_VERTICES,
    ASTEROID_POINTS,
    ASTEROID_RADIUS,
    ASTEROID_SPEED,
    ASTEROID_VARIANCE_MIN,
    ASTEROID_VARIANCE_SPAN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from asteroids.models.entity import GameObject
from asteroids.models.vector import Vector2D


# ── Sizes ───────────────────────────────────────────────────────────────────


class AsteroidSize(Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @property
    def radius(self) -> float:
        return ASTEROID_RADIUS[self.value]

    @property
    def speed(self) -> float:
        return ASTEROID_SPEED[self.value]

    @property
    def points(self) -> int:
        return ASTEROID_POINTS[self.value]

    @property
    def smaller(self) -> Optional["AsteroidSize"]:
        """The fragment size, or None for SMALL."""
        if self is AsteroidSize.LARGE:
            return AsteroidSize.MEDIUM
        if self is AsteroidSize.MEDIUM:
            return AsteroidSize.SMALL
        return None


def random_outline(
    radius: float, rng: random.Random
) -> list[tuple[float, float]]:
    """Jagged polygon of 8-11 vertices around the origin."""
    count = ASTEROID_MIN_VERTICES + rng.randrange(ASTEROID_EXTRA_VERTICES)
    vertices = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        variance = ASTEROID_VARIANCE_MIN + rng.random() * ASTEROID_VARIANCE_SPAN
        vertices.append((
            math.cos(angle) * radius * variance,
            math.sin(angle) * radius * variance,
        ))
    return vertices


# ── Asteroid ────────────────────────────────────────────────────────────────


@dataclass
class Asteroid(GameObject):
    """A tumbling rock.

    Use :meth:`spawn` to build one with random heading, spin and
    outline; the plain constructor leaves everything explicit for tests.
    """

    size: AsteroidSize = AsteroidSize.LARGE
    spin: float = 0.0
    vertices: list[tuple[float, float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.radius = self.size.radius

    @staticmethod
    def spawn(
        x: float,
        y: float,
        size: AsteroidSize,
        rng: Optional[random.Random] = None,
    ) -> "Asteroid":
        """Create an asteroid at (*x*, *y*) with randomised motion."""
        rng = rng or random.Random()
        rotation = rng.random() * math.pi * 2
        spin = (rng.random() - 0.5) * 2
        heading = rng.random() * math.pi * 2
        return Asteroid(
            position=Vector2D(x, y),
            velocity=Vector2D.from_angle(heading, size.speed),
            rotation=rotation,
            size=size,
            spin=spin,
            vertices=random_outline(size.radius, rng),
        )

    @property
    def points(self) -> int:
        return self.size.points

    def update(
        self,
        dt: float,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
    ) -> None:
        super().update(dt, width, height)
        self.rotation += self.spin * dt

    def split(self, rng: Optional[random.Random] = None) -> list["Asteroid"]:
        """Return the fragments this asteroid breaks into (may be empty)."""
        smaller = self.size.smaller
        if smaller is None:
            return []
        rng = rng or random.Random()
        return [
            Asteroid.spawn(self.position.x, self.position.y, smaller, rng)
            for _ in range(ASTEROID_FRAGMENTS)
        ]

    def outline_points(self) -> list[tuple[float, float]]:
        """Outline polygon in world coordinates."""
        points = []
        for vx, vy in self.vertices:
            p = Vector2D(vx, vy).rotate(self.rotation).add(self.position)
            points.append(p.as_tuple())
        return points
