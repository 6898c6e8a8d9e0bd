"""
Heads-up display for Asteroids.

Draws the score panel, arrows pointing at the nearest asteroids, and the
centre-screen message queue.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from asteroids.config import (
    HUD_FLASH_MS,
    HUD_FONT_SIZE,
    HUD_INDICATOR_COUNT,
    HUD_INDICATOR_RADIUS,
    HUD_LINE_HEIGHT,
    HUD_PADDING,
    HUD_SMALL_FONT_SIZE,
    HUD_THREAT_RANGE,
    UI_PANEL_ALPHA,
    UI_PRIMARY,
    UI_SECONDARY,
    UI_WARNING,
)
from asteroids.models.vector import Vector2D
from asteroids.ui.text import draw_panel, draw_text, get_font
from asteroids.utils.functions import threat_color

if TYPE_CHECKING:
    from asteroids.game import Game
    from asteroids.models.asteroid import Asteroid

MAIN_PANEL_SIZE = (200, 120)
CONTROLS_PANEL_SIZE = (240, 160)

CONTROLS_HELP: list[str] = [
    "CONTROLS:",
    "W - Move forward",
    "S - Move backward",
    "A - Rotate left",
    "D - Rotate right",
    "SPACE - Shoot",
    "ESC - Pause",
    "H - Toggle help",
    "F1 - Debug info",
    "R - Restart (Game Over)",
]

# Arrow outline in indicator-local space, pointing along +x
_ARROW: list[tuple[float, float]] = [(15, 0), (0, -5), (5, 0), (0, 5)]


@dataclass
class HUD:
    """Score panel, threat indicators and message display.

    ``flash_time`` (ms) highlights the main panel border after a notable
    event such as a new wave.
    """

    game: "Game"
    width: int = 0
    height: int = 0
    flash_time: float = 0.0

    def __post_init__(self) -> None:
        if not self.width:
            self.width = int(self.game.width)
        if not self.height:
            self.height = int(self.game.height)

    def update(self, dt_ms: float) -> None:
        if self.flash_time > 0:
            self.flash_time = max(0.0, self.flash_time - dt_ms)

    def flash(self) -> None:
        self.flash_time = HUD_FLASH_MS

    # ── Queries ─────────────────────────────────────────────────────────

    def find_nearest_asteroids(self, count: int) -> list[tuple["Asteroid", float]]:
        """Up to *count* (asteroid, distance) pairs, nearest first."""
        ship = self.game.ship
        ranked = [
            (a, a.position.distance_to(ship.position))
            for a in self.game.asteroids
        ]
        ranked.sort(key=lambda pair: pair[1])
        return ranked[:count]

    def indicator_polygons(self) -> list[tuple[list[tuple[float, float]], tuple[int, int, int]]]:
        """Arrow polygons and colours for the nearest threats."""
        centre = Vector2D(self.width / 2, self.height / 2)
        arrows = []
        for asteroid, dist in self.find_nearest_asteroids(HUD_INDICATOR_COUNT):
            dx = asteroid.x - self.game.ship.x
            dy = asteroid.y - self.game.ship.y
            angle = math.atan2(dy, dx)
            anchor = centre.add(Vector2D.from_angle(angle, HUD_INDICATOR_RADIUS))
            points = [
                Vector2D(px, py).rotate(angle).add(anchor).as_tuple()
                for px, py in _ARROW
            ]
            arrows.append((points, threat_color(dist, HUD_THREAT_RANGE)))
        return arrows

    # ── Rendering ───────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        self.render_main_panel(surface)
        self.render_indicators(surface)
        self.render_messages(surface)

    def render_main_panel(self, surface: pygame.Surface) -> None:
        x = y = HUD_PADDING
        rect = pygame.Rect(x - 10, y - 10, *MAIN_PANEL_SIZE)
        border = UI_SECONDARY if self.flash_time > 0 else UI_PRIMARY
        draw_panel(surface, rect, border, UI_PANEL_ALPHA,
                   width=3 if self.flash_time > 0 else 2)

        font = get_font(HUD_FONT_SIZE)
        game = self.game
        lives_color = UI_WARNING if game.lives <= 1 else UI_PRIMARY
        rows = [
            (game.score_display.format_score(), UI_PRIMARY),
            (f"LIVES: {game.lives}", lives_color),
            (f"WAVE: {game.wave}", UI_SECONDARY),
            (f"ASTEROIDS: {game.asteroid_count}", UI_PRIMARY),
        ]
        for i, (text, color) in enumerate(rows):
            draw_text(surface, text, font, color, (x, y + i * HUD_LINE_HEIGHT))

    def render_indicators(self, surface: pygame.Surface) -> None:
        if self.game.is_over:
            return
        for points, color in self.indicator_polygons():
            pygame.draw.polygon(surface, color, points)
            pygame.draw.polygon(surface, UI_PRIMARY, points, 2)

    def render_messages(self, surface: pygame.Surface) -> None:
        if not self.game.messages:
            return
        font = get_font(HUD_FONT_SIZE + 4)
        x = self.width / 2
        y = self.height / 2 - 100
        for i, message in enumerate(self.game.messages):
            draw_text(surface, message, font, UI_SECONDARY,
                      (x, y + i * HUD_LINE_HEIGHT),
                      align="center", outline=(0, 0, 0))

    def render_controls(self, surface: pygame.Surface) -> None:
        x = self.width - 250
        y = HUD_PADDING
        rect = pygame.Rect(x - 10, y - 10, *CONTROLS_PANEL_SIZE)
        draw_panel(surface, rect, UI_PRIMARY, UI_PANEL_ALPHA)

        font = get_font(HUD_SMALL_FONT_SIZE)
        for i, line in enumerate(CONTROLS_HELP):
            color = UI_SECONDARY if line.endswith(":") else UI_PRIMARY
            draw_text(surface, line, font, color, (x, y + i * 14))
