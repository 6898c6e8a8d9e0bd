"""
Radar minimap for Asteroids.

Shows the whole field scaled into a square in the bottom-right corner,
with a heat grid of asteroid density underneath the contacts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import pygame

from asteroids.config import (
    MINIMAP_DENSITY_CELL,
    MINIMAP_DENSITY_SATURATION,
    MINIMAP_MARGIN,
    MINIMAP_PING_MS,
    MINIMAP_SIZE,
    UI_GREY,
    UI_PRIMARY,
    UI_SECONDARY,
    UI_WHITE,
)
from asteroids.models.vector import Vector2D
from asteroids.ui.text import draw_text, get_font

if TYPE_CHECKING:
    from asteroids.game import Game


@dataclass
class Ping:
    """Short-lived click marker drawn on the radar."""
    x: float
    y: float
    time_left: float = MINIMAP_PING_MS

    @property
    def alpha(self) -> float:
        return max(0.0, self.time_left / MINIMAP_PING_MS)


@dataclass
class Minimap:
    """Scaled overview of the field.

    ``x``/``y`` are the top-left corner on screen; ``scale_x``/``scale_y``
    map world pixels to radar pixels.
    """

    game: "Game"
    canvas_width: int = 0
    canvas_height: int = 0
    size: int = MINIMAP_SIZE
    margin: int = MINIMAP_MARGIN
    cell_size: int = MINIMAP_DENSITY_CELL

    x: float = 0
    y: float = 0
    scale_x: float = 1.0
    scale_y: float = 1.0
    is_hovered: bool = False
    clickable: bool = True
    density_grid: list[list[int]] = field(default_factory=list)
    pings: list[Ping] = field(default_factory=list)
    last_click_world: Optional[tuple[float, float]] = None

    def __post_init__(self) -> None:
        if not self.canvas_width:
            self.canvas_width = int(self.game.width)
        if not self.canvas_height:
            self.canvas_height = int(self.game.height)
        self.update_position(self.canvas_width, self.canvas_height)

    def _init_density_grid(self) -> None:
        cols = math.ceil(self.game.width / self.cell_size)
        rows = math.ceil(self.game.height / self.cell_size)
        self.density_grid = [[0] * cols for _ in range(rows)]

    # ── Geometry ────────────────────────────────────────────────────────

    def update_position(self, canvas_width: int, canvas_height: int) -> None:
        """Re-anchor to the bottom-right corner after a resize.

        Scale and density grid follow the current game field.
        """
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.x = canvas_width - self.size - self.margin
        self.y = canvas_height - self.size - self.margin
        self.scale_x = self.size / self.game.width
        self.scale_y = self.size / self.game.height
        self._init_density_grid()

    def is_point_in_minimap(self, px: float, py: float) -> bool:
        return (self.x <= px <= self.x + self.size
                and self.y <= py <= self.y + self.size)

    def world_to_minimap(self, wx: float, wy: float) -> tuple[float, float]:
        return (self.x + wx * self.scale_x, self.y + wy * self.scale_y)

    def minimap_to_world(self, mx: float, my: float) -> tuple[float, float]:
        return ((mx - self.x) / self.scale_x, (my - self.y) / self.scale_y)

    # ── Interaction ─────────────────────────────────────────────────────

    def handle_mouse_move(self, px: float, py: float) -> bool:
        """Track hover state; returns True while over the radar."""
        self.is_hovered = self.is_point_in_minimap(px, py)
        return self.is_hovered

    def handle_click(self, px: float, py: float) -> bool:
        """Drop a ping at the click; returns False if the click missed."""
        if not self.clickable or not self.is_point_in_minimap(px, py):
            return False
        self.last_click_world = self.minimap_to_world(px, py)
        self.pings.append(Ping(px - self.x, py - self.y))
        return True

    def update(self, dt_ms: float) -> None:
        for ping in self.pings:
            ping.time_left -= dt_ms
        self.pings = [p for p in self.pings if p.time_left > 0]

    # ── Density ─────────────────────────────────────────────────────────

    def update_density_grid(self) -> None:
        """Recount asteroids per cell.  Off-field positions are skipped."""
        for row in self.density_grid:
            for i in range(len(row)):
                row[i] = 0
        rows = len(self.density_grid)
        cols = len(self.density_grid[0]) if rows else 0
        for asteroid in self.game.asteroids:
            gx = math.floor(asteroid.x / self.cell_size)
            gy = math.floor(asteroid.y / self.cell_size)
            if 0 <= gx < cols and 0 <= gy < rows:
                self.density_grid[gy][gx] += 1

    @staticmethod
    def density_alpha(count: int) -> float:
        """Cell opacity (0-0.3), saturating at five asteroids."""
        return min(count / MINIMAP_DENSITY_SATURATION, 1) * 0.3

    # ── Rendering ───────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        self.update_density_grid()

        radar = pygame.Surface((self.size, self.size), pygame.SRCALPHA)
        radar.fill((0, 0, 0, 204))
        self._render_density(radar)
        self._render_asteroids(radar)
        self._render_player(radar)
        self._render_pings(radar)
        surface.blit(radar, (self.x, self.y))

        border = UI_SECONDARY if self.is_hovered else UI_PRIMARY
        rect = pygame.Rect(int(self.x), int(self.y), self.size, self.size)
        pygame.draw.rect(surface, border, rect, 3 if self.is_hovered else 2)
        self._render_title(surface)

    def _render_density(self, radar: pygame.Surface) -> None:
        rows = len(self.density_grid)
        if not rows:
            return
        cell_w = self.size / len(self.density_grid[0])
        cell_h = self.size / rows
        for gy, row in enumerate(self.density_grid):
            for gx, count in enumerate(row):
                if count <= 0:
                    continue
                alpha = int(255 * self.density_alpha(count))
                cell = pygame.Rect(
                    int(gx * cell_w), int(gy * cell_h),
                    math.ceil(cell_w), math.ceil(cell_h),
                )
                radar.fill((255, 0, 0, alpha), cell)

    def _render_asteroids(self, radar: pygame.Surface) -> None:
        for asteroid in self.game.asteroids:
            side = max(1, asteroid.radius * self.scale_x * 0.5)
            cx = asteroid.x * self.scale_x
            cy = asteroid.y * self.scale_y
            rect = pygame.Rect(0, 0, math.ceil(side), math.ceil(side))
            rect.center = (int(cx), int(cy))
            radar.fill(UI_GREY, rect)

    def _render_player(self, radar: pygame.Surface) -> None:
        if self.game.is_over:
            return
        ship = self.game.ship
        origin = Vector2D(ship.x * self.scale_x, ship.y * self.scale_y)
        points = [
            Vector2D(px, py).rotate(ship.rotation).add(origin).as_tuple()
            for px, py in ((5, 0), (-3, -3), (-3, 3))
        ]
        pygame.draw.polygon(radar, UI_PRIMARY, points)
        pygame.draw.polygon(radar, UI_WHITE, points, 1)

    def _render_pings(self, radar: pygame.Surface) -> None:
        for ping in self.pings:
            alpha = int(255 * ping.alpha)
            grow = 5 + (1 - ping.alpha) * 10
            pygame.draw.circle(radar, (*UI_SECONDARY, alpha),
                               (int(ping.x), int(ping.y)), int(grow), 1)

    def _render_title(self, surface: pygame.Surface) -> None:
        centre_x = self.x + self.size / 2
        draw_text(surface, "RADAR", get_font(12), UI_PRIMARY,
                  (centre_x, self.y - 20), align="center")
        draw_text(surface, f"{self.game.asteroid_count} CONTACTS",
                  get_font(10), UI_GREY,
                  (centre_x, self.y + self.size + 5), align="center")
