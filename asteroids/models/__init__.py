from asteroids.models.vector import Vector2D
from asteroids.models.entity import GameObject
from asteroids.models.ship import Ship
from asteroids.models.bullet import Bullet
from asteroids.models.asteroid import Asteroid, AsteroidSize

__all__ = [
    "Vector2D", "GameObject",
    "Ship", "Bullet",
    "Asteroid", "AsteroidSize",
]
