"""
Entity drawing for Asteroids.

Vector-style outlines in the spirit of the original cabinet: green ship,
yellow bullets, white rocks.
"""

from __future__ import annotations

import pygame

from asteroids.config import (
    ASTEROID_COLOR,
    BULLET_COLOR,
    SHIP_BLINK_COLOR,
    SHIP_COLOR,
    TRAIL_FADE_ALPHA,
)
from asteroids.models.asteroid import Asteroid
from asteroids.models.bullet import Bullet
from asteroids.models.ship import Ship


def fade_surface(size: tuple[int, int]) -> pygame.Surface:
    """Translucent black layer that leaves motion trails when blitted."""
    layer = pygame.Surface(size, pygame.SRCALPHA)
    layer.fill((0, 0, 0, TRAIL_FADE_ALPHA))
    return layer


def draw_ship(surface: pygame.Surface, ship: Ship) -> None:
    color = SHIP_BLINK_COLOR if ship.is_blink_frame else SHIP_COLOR
    pygame.draw.polygon(surface, color, ship.hull_points(), 2)


def draw_bullet(surface: pygame.Surface, bullet: Bullet) -> None:
    center = (int(bullet.x), int(bullet.y))
    pygame.draw.circle(surface, BULLET_COLOR, center, max(1, int(bullet.radius)))


def draw_asteroid(surface: pygame.Surface, asteroid: Asteroid) -> None:
    points = asteroid.outline_points()
    if len(points) < 3:
        pygame.draw.circle(surface, ASTEROID_COLOR,
                           (int(asteroid.x), int(asteroid.y)),
                           int(asteroid.radius), 2)
        return
    pygame.draw.polygon(surface, ASTEROID_COLOR, points, 2)
