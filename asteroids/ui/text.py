"""
UI text utilities for Asteroids.

Provides score bookkeeping for the HUD and a small text-drawing helper
shared by every overlay.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import pygame

FONT_NAME = "couriernew,couriernewps,monospace"


@dataclass
class ScoreDisplay:
    """Tracks the player score and the best score of this session."""

    player_score: int = 0
    high_score: int = 0

    def add(self, points: int) -> None:
        """Add *points* to the player score and update high score."""
        self.player_score += points
        if self.player_score > self.high_score:
            self.high_score = self.player_score

    def reset(self) -> None:
        """Reset player score (high score persists)."""
        self.player_score = 0

    def format_score(self) -> str:
        return f"SCORE: {self.player_score:,}"

    def format_high_score(self) -> str:
        return f"BEST: {self.high_score:,}"


@lru_cache(maxsize=None)
def get_font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a cached monospace font, falling back to pygame's default."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont(FONT_NAME, size, bold=bold)


def draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: tuple[int, int, int],
    pos: tuple[float, float],
    align: str = "left",
    alpha: float = 1.0,
    outline: Optional[tuple[int, int, int]] = None,
) -> pygame.Rect:
    """Blit *text* anchored at *pos* (top edge; ``align`` picks x anchor).

    *alpha* is 0-1.  An *outline* colour draws a one-pixel halo first.
    """
    image = font.render(text, True, color)
    rect = image.get_rect()
    x, y = pos
    if align == "center":
        rect.midtop = (int(x), int(y))
    elif align == "right":
        rect.topright = (int(x), int(y))
    else:
        rect.topleft = (int(x), int(y))

    opacity = max(0, min(255, int(255 * alpha)))
    if outline is not None:
        halo = font.render(text, True, outline)
        halo.set_alpha(opacity)
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            surface.blit(halo, rect.move(dx, dy))
    image.set_alpha(opacity)
    surface.blit(image, rect)
    return rect


def draw_panel(
    surface: pygame.Surface,
    rect: pygame.Rect,
    border: tuple[int, int, int],
    fill_alpha: int,
    width: int = 2,
) -> None:
    """Translucent black panel with a solid border."""
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill((0, 0, 0, fill_alpha))
    surface.blit(panel, rect.topleft)
    pygame.draw.rect(surface, border, rect, width)
