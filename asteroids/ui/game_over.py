"""
Game-over screen for Asteroids.

Fades in over the field, lists final statistics and unlocked
achievements, and waits for R to restart.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

from asteroids.config import (
    ACHIEVEMENT_ACCURACY,
    ACHIEVEMENT_ASTEROIDS,
    ACHIEVEMENT_SCORE,
    ACHIEVEMENT_SURVIVAL_SECONDS,
    ACHIEVEMENT_WAVES,
    GAME_OVER_FADE_MS,
    UI_GREY,
    UI_PRIMARY,
    UI_SECONDARY,
    UI_WARNING,
    UI_WHITE,
)
from asteroids.ui.text import draw_text, get_font
from asteroids.utils.functions import format_time
from asteroids.utils.input_handler import GameAction

GRID_SPACING = 50
PANEL_SIZE = (400, 250)


@dataclass
class GameStatistics:
    """End-of-game figures shown on the game-over screen."""

    score: int = 0
    wave: int = 1
    asteroids_destroyed: int = 0
    time_alive: float = 0.0  # seconds
    lives_lost: int = 0
    accuracy: float = 0.0    # percent


@dataclass
class GameOverScreen:
    """Overlay shown once the last life is lost.

    ``show_time`` counts milliseconds since :meth:`show` and drives the
    fade-in and the pulsing restart prompt.
    """

    width: int
    height: int
    on_restart: Optional[Callable[[], None]] = None

    fade_in_duration: float = GAME_OVER_FADE_MS
    show_time: float = 0.0
    is_visible: bool = False
    statistics: GameStatistics = field(default_factory=GameStatistics)

    # ── Visibility ──────────────────────────────────────────────────────

    def show(self, stats: Optional[GameStatistics] = None) -> None:
        self.is_visible = True
        self.show_time = 0.0
        self.statistics = stats if stats is not None else GameStatistics()

    def hide(self) -> None:
        self.is_visible = False

    def is_shown(self) -> bool:
        return self.is_visible

    def restart(self) -> None:
        self.hide()
        if self.on_restart is not None:
            self.on_restart()

    def handle_key(self, action: GameAction) -> bool:
        """Consume RESTART while visible.  Returns True if handled."""
        if self.is_visible and action == GameAction.RESTART:
            self.restart()
            return True
        return False

    def update(self, dt_ms: float) -> None:
        if self.is_visible:
            self.show_time += dt_ms

    @property
    def fade_alpha(self) -> float:
        if self.fade_in_duration <= 0:
            return 1.0
        return min(1.0, self.show_time / self.fade_in_duration)

    @property
    def pulse(self) -> float:
        return math.sin(self.show_time / 200) * 0.3 + 0.7

    # ── Achievements ────────────────────────────────────────────────────

    def calculate_achievements(self) -> list[str]:
        stats = self.statistics
        achievements = []
        if stats.score >= ACHIEVEMENT_SCORE:
            achievements.append(f"Score Master - Reached {ACHIEVEMENT_SCORE:,} points")
        if stats.wave >= ACHIEVEMENT_WAVES:
            achievements.append(f"Wave Warrior - Survived {ACHIEVEMENT_WAVES} waves")
        if stats.asteroids_destroyed >= ACHIEVEMENT_ASTEROIDS:
            achievements.append(
                f"Asteroid Hunter - Destroyed {ACHIEVEMENT_ASTEROIDS} asteroids")
        if stats.accuracy >= ACHIEVEMENT_ACCURACY:
            achievements.append(
                f"Sharpshooter - {ACHIEVEMENT_ACCURACY:.0f}% accuracy or better")
        if stats.lives_lost == 0 and stats.asteroids_destroyed > 0:
            achievements.append("Untouchable - Never lost a life")
        if stats.time_alive >= ACHIEVEMENT_SURVIVAL_SECONDS:
            minutes = int(ACHIEVEMENT_SURVIVAL_SECONDS // 60)
            achievements.append(f"Survivor - Lasted {minutes} minutes")
        return achievements

    def statistic_rows(self) -> list[tuple[str, str, tuple[int, int, int]]]:
        stats = self.statistics
        return [
            ("FINAL SCORE", f"{stats.score:,}", UI_WARNING),
            ("WAVES COMPLETED", str(stats.wave), UI_SECONDARY),
            ("ASTEROIDS DESTROYED", str(stats.asteroids_destroyed), UI_PRIMARY),
            ("TIME SURVIVED", format_time(stats.time_alive), UI_PRIMARY),
            ("ACCURACY", f"{round(stats.accuracy)}%", UI_SECONDARY),
        ]

    # ── Rendering ───────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        if not self.is_visible:
            return
        alpha = self.fade_alpha
        self._render_background(surface, alpha)
        self._render_title(surface, alpha)
        self._render_statistics(surface, alpha)
        self._render_restart_prompt(surface, alpha)
        self._render_achievements(surface, alpha)

    def _render_background(self, surface: pygame.Surface, alpha: float) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(230 * alpha)))
        line = (255, 255, 255, int(25 * alpha))
        for x in range(0, self.width, GRID_SPACING):
            pygame.draw.line(overlay, line, (x, 0), (x, self.height))
        for y in range(0, self.height, GRID_SPACING):
            pygame.draw.line(overlay, line, (0, y), (self.width, y))
        surface.blit(overlay, (0, 0))

    def _render_title(self, surface: pygame.Surface, alpha: float) -> None:
        cx = self.width / 2
        y = self.height / 2 - 250
        draw_text(surface, "GAME OVER", get_font(72, bold=True), UI_WARNING,
                  (cx, y), align="center", alpha=alpha, outline=(0, 0, 0))
        draw_text(surface, "ALL SHIPS LOST", get_font(24), UI_SECONDARY,
                  (cx, y + 80), align="center", alpha=alpha)

    def _render_statistics(self, surface: pygame.Surface, alpha: float) -> None:
        cx = self.width / 2
        start_y = self.height / 2 - 120
        panel = pygame.Rect(0, 0, *PANEL_SIZE)
        panel.midtop = (int(cx), int(start_y - 20))

        backdrop = pygame.Surface(panel.size, pygame.SRCALPHA)
        backdrop.fill((0, 0, 0, int(204 * alpha)))
        surface.blit(backdrop, panel.topleft)
        pygame.draw.rect(surface, UI_PRIMARY, panel, 2)

        font = get_font(20)
        draw_text(surface, "FINAL STATISTICS", font, UI_PRIMARY,
                  (cx, start_y), align="center", alpha=alpha)
        for i, (label, value, color) in enumerate(self.statistic_rows()):
            y = start_y + 45 + i * 35
            draw_text(surface, label, font, UI_WHITE, (cx - 180, y), alpha=alpha)
            draw_text(surface, value, font, color, (cx + 180, y),
                      align="right", alpha=alpha)

    def _render_restart_prompt(self, surface: pygame.Surface, alpha: float) -> None:
        cx = self.width / 2
        y = self.height - 55
        draw_text(surface, "PRESS [R] TO RESTART", get_font(28, bold=True),
                  UI_SECONDARY, (cx, y), align="center",
                  alpha=alpha * self.pulse, outline=(0, 0, 0))
        draw_text(surface, "ESC to quit", get_font(16), UI_GREY,
                  (cx, y + 32), align="center", alpha=alpha)

    def _render_achievements(self, surface: pygame.Surface, alpha: float) -> None:
        achievements = self.calculate_achievements()
        if not achievements:
            return
        x = 30
        y = self.height / 2 + 120
        draw_text(surface, "ACHIEVEMENTS UNLOCKED:", get_font(18, bold=True),
                  UI_SECONDARY, (x, y), alpha=alpha)
        font = get_font(14)
        for i, achievement in enumerate(achievements):
            draw_text(surface, f"* {achievement}", font, UI_PRIMARY,
                      (x + 20, y + 22 + i * 18), alpha=alpha)
