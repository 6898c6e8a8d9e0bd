"""
Core game logic for Asteroids.

Drives the per-frame simulation: input, entity integration, collision
detection, scoring, lives and wave spawning.  Rendering lives in
``main.py`` and the UI package; nothing here touches the display.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from asteroids.config import (
    INITIAL_ASTEROIDS,
    SAFE_SPAWN_DISTANCE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHOOT_COOLDOWN,
    STARTING_LIVES,
)
from asteroids.models.asteroid import Asteroid, AsteroidSize
from asteroids.models.bullet import Bullet
from asteroids.models.ship import Ship
from asteroids.ui.game_over import GameStatistics
from asteroids.ui.text import ScoreDisplay
from asteroids.utils.functions import (
    asteroids_for_score,
    calculate_accuracy,
    distance,
)
from asteroids.utils.input_handler import InputState

logger = logging.getLogger(__name__)


# ── Game states ─────────────────────────────────────────────────────────────


class GameState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level game controller.

    Holds the ship, bullets and asteroids and advances them by a
    variable time step in seconds.  ``rng`` drives every random choice
    so a seeded game replays identically.
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    starting_lives: int = STARTING_LIVES
    rng: random.Random = field(default_factory=random.Random, repr=False)

    # Simulation state (initialised by ``reset``)
    ship: Ship = field(default_factory=Ship)
    bullets: list[Bullet] = field(default_factory=list)
    asteroids: list[Asteroid] = field(default_factory=list)
    score_display: ScoreDisplay = field(default_factory=ScoreDisplay)
    lives: int = STARTING_LIVES
    wave: int = 1
    state: GameState = GameState.RUNNING

    # Shooting
    can_shoot: bool = True
    shoot_cooldown: float = 0.0

    # Held controls for the current frame
    controls: InputState = field(default_factory=InputState)

    # Statistics
    asteroids_destroyed: int = 0
    shots_fired: int = 0
    shots_hit: int = 0
    game_time: float = 0.0

    # Mirrored from the UI message queue for display
    messages: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.reset()

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a fresh game: new ship, full lives, first wave."""
        self.ship = Ship.at(self.width / 2, self.height / 2)
        self.bullets = []
        self.asteroids = []
        self.score_display.reset()
        self.lives = self.starting_lives
        self.wave = 1
        self.state = GameState.RUNNING
        self.can_shoot = True
        self.shoot_cooldown = 0.0
        self.controls = InputState()
        self.asteroids_destroyed = 0
        self.shots_fired = 0
        self.shots_hit = 0
        self.game_time = 0.0
        self.messages = []

        self.spawn_asteroids(INITIAL_ASTEROIDS)
        logger.info("New game: %d lives, %d asteroids",
                    self.lives, len(self.asteroids))

    def end_game(self) -> None:
        self.state = GameState.GAME_OVER
        logger.info("Game over: score %d, wave %d", self.score, self.wave)

    def set_paused(self, paused: bool) -> None:
        """Pause or resume; ignored once the game is over."""
        if self.state == GameState.GAME_OVER:
            return
        self.state = GameState.PAUSED if paused else GameState.RUNNING

    def resize(self, width: float, height: float) -> None:
        """Change the field size; bodies wrap into it on their next update."""
        self.width = width
        self.height = height
        logger.debug("Field resized to %dx%d", width, height)

    # ── Spawning ────────────────────────────────────────────────────────

    def spawn_asteroids(self, count: int) -> None:
        """Add *count* large asteroids away from the ship."""
        ship_x, ship_y = self.ship.x, self.ship.y
        for _ in range(count):
            while True:
                x = self.rng.random() * self.width
                y = self.rng.random() * self.height
                if distance(x, y, ship_x, ship_y) >= SAFE_SPAWN_DISTANCE:
                    break
            self.asteroids.append(
                Asteroid.spawn(x, y, AsteroidSize.LARGE, self.rng)
            )

    # ── Player actions ──────────────────────────────────────────────────

    def handle_input(self, dt: float, controls: Optional[InputState] = None) -> None:
        """Apply held controls for this frame.

        Holding fire shoots once per cooldown; releasing it re-arms
        immediately so rapid tapping is not rate limited.
        """
        if self.state == GameState.GAME_OVER:
            return
        if controls is not None:
            self.controls = controls
        c = self.controls

        if c.thrust_forward:
            self.ship.thrust(True, dt)
        if c.thrust_back:
            self.ship.thrust(False, dt)
        if c.rotate_left:
            self.ship.rotate(-1, dt)
        if c.rotate_right:
            self.ship.rotate(1, dt)

        if c.shoot and self.can_shoot:
            self.shoot()
            self.can_shoot = False
            self.shoot_cooldown = SHOOT_COOLDOWN

        if not c.shoot:
            self.can_shoot = True

        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= dt
            if self.shoot_cooldown <= 0:
                self.can_shoot = True

    def shoot(self) -> Bullet:
        """Fire a bullet from the ship along its heading."""
        bullet = Bullet.fire(self.ship.x, self.ship.y, self.ship.rotation)
        self.bullets.append(bullet)
        self.shots_fired += 1
        return bullet

    # ── Per-frame update ────────────────────────────────────────────────

    def update(self, dt: float) -> GameState:
        """Advance the simulation by *dt* seconds.

        Returns the GameState after the update.
        """
        if self.state != GameState.RUNNING:
            return self.state

        self.game_time += dt
        self.handle_input(dt)

        self.ship.update(dt, self.width, self.height)

        for bullet in self.bullets:
            bullet.update(dt, self.width, self.height)
        self.bullets = [b for b in self.bullets if b.active]

        for asteroid in self.asteroids:
            asteroid.update(dt, self.width, self.height)

        self.check_collisions()

        if self.state == GameState.RUNNING and not self.asteroids:
            self.next_wave()

        return self.state

    def next_wave(self) -> None:
        count = asteroids_for_score(self.score)
        self.wave += 1
        self.spawn_asteroids(count)
        logger.info("Wave %d: %d asteroids", self.wave, count)

    def check_collisions(self) -> None:
        """Resolve bullet/asteroid hits, then ship/asteroid contact."""
        for i in range(len(self.bullets) - 1, -1, -1):
            bullet = self.bullets[i]
            for j in range(len(self.asteroids) - 1, -1, -1):
                asteroid = self.asteroids[j]
                if not bullet.check_collision(asteroid):
                    continue
                del self.bullets[i]
                del self.asteroids[j]
                self.asteroids.extend(asteroid.split(self.rng))

                self.score_display.add(asteroid.points)
                self.asteroids_destroyed += 1
                self.shots_hit += 1
                break

        if self.ship.invulnerable:
            return
        for asteroid in self.asteroids:
            if self.ship.check_collision(asteroid):
                self.lose_life()
                break

    def lose_life(self) -> None:
        self.lives -= 1
        logger.debug("Ship destroyed, %d lives left", self.lives)
        if self.lives <= 0:
            self.end_game()
        else:
            self.ship.respawn(self.width / 2, self.height / 2)

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.score_display.player_score

    @property
    def high_score(self) -> int:
        return self.score_display.high_score

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.state == GameState.PAUSED

    @property
    def asteroid_count(self) -> int:
        return len(self.asteroids)

    @property
    def accuracy(self) -> float:
        return calculate_accuracy(self.shots_fired, self.shots_hit)

    def final_stats(self) -> GameStatistics:
        return GameStatistics(
            score=self.score,
            wave=self.wave,
            asteroids_destroyed=self.asteroids_destroyed,
            time_alive=self.game_time,
            lives_lost=self.starting_lives - self.lives,
            accuracy=self.accuracy,
        )
