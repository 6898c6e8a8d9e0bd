"""
UI manager for Asteroids.

Coordinates the HUD, minimap and game-over screen, owns the timed
message queue, and draws the debug and pause overlays.  It only reads
game state, except for pausing and for mirroring messages into
``Game.messages``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

import pygame

from asteroids.config import (
    FPS_SAMPLE_FRAMES,
    MAX_MESSAGES,
    MESSAGE_DURATION_MS,
    UI_DEBUG,
    UI_SECONDARY,
    UI_WHITE,
)
from asteroids.ui.game_over import GameOverScreen
from asteroids.ui.hud import HUD, MAIN_PANEL_SIZE
from asteroids.ui.minimap import Minimap
from asteroids.ui.text import draw_panel, draw_text, get_font
from asteroids.utils.input_handler import GameAction

if TYPE_CHECKING:
    from asteroids.game import Game

logger = logging.getLogger(__name__)


@dataclass
class Message:
    """A queued notice and the milliseconds it has left on screen."""
    text: str
    time_left: float
    kind: str = "info"
    duration: float = MESSAGE_DURATION_MS
    timestamp: float = field(default_factory=time.time)


@dataclass
class UIManager:
    """Owns every overlay and routes UI key actions.

    ``update`` takes milliseconds, matching the overlays' own timers.
    """

    game: "Game"
    width: int = 0
    height: int = 0
    on_restart: Optional[Callable[[], None]] = None

    hud: HUD = field(init=False)
    minimap: Minimap = field(init=False)
    game_over_screen: GameOverScreen = field(init=False)

    show_controls: bool = False
    debug_mode: bool = False
    paused: bool = False

    # Performance tracking
    fps: float = 60.0
    frame_count: int = 0
    last_frame_time: float = field(default_factory=time.perf_counter)

    # Message system
    messages: list[Message] = field(default_factory=list)
    message_history: list[Message] = field(default_factory=list)
    max_messages: int = MAX_MESSAGES
    message_duration: float = MESSAGE_DURATION_MS

    _last_wave: Optional[int] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.width:
            self.width = int(self.game.width)
        if not self.height:
            self.height = int(self.game.height)
        self.hud = HUD(self.game, self.width, self.height)
        self.minimap = Minimap(self.game, self.width, self.height)
        self.game_over_screen = GameOverScreen(
            self.width, self.height, on_restart=self._restart,
        )

    # ── Input ───────────────────────────────────────────────────────────

    def handle_action(self, action: GameAction) -> bool:
        """Apply a UI action.  Returns True if it was consumed."""
        if self.game_over_screen.handle_key(action):
            return True
        if action == GameAction.TOGGLE_CONTROLS:
            self.toggle_controls()
        elif action == GameAction.TOGGLE_DEBUG:
            self.toggle_debug()
        elif action == GameAction.PAUSE:
            self.set_paused(not self.paused)
        else:
            return False
        return True

    def set_paused(self, paused: bool) -> None:
        if self.game.is_over:
            return
        self.paused = paused
        self.game.set_paused(paused)

    def handle_resize(self, width: int, height: int) -> None:
        """Resize the game field and re-anchor overlays to the window."""
        self.game.resize(width, height)
        self.width = width
        self.height = height
        self.hud.width = width
        self.hud.height = height
        self.game_over_screen.width = width
        self.game_over_screen.height = height
        self.minimap.update_position(width, height)

    def toggle_controls(self) -> None:
        self.show_controls = not self.show_controls

    def toggle_debug(self) -> None:
        self.debug_mode = not self.debug_mode

    # ── Update ──────────────────────────────────────────────────────────

    def update(self, dt_ms: float, now: Optional[float] = None) -> None:
        self.update_performance_metrics(now)
        self.update_messages(dt_ms)
        self.hud.update(dt_ms)
        self.minimap.update(dt_ms)
        self.game_over_screen.update(dt_ms)
        self.handle_game_state_changes()

    def update_performance_metrics(self, now: Optional[float] = None) -> None:
        """Sample FPS from the latest frame gap every FPS_SAMPLE_FRAMES frames."""
        current = time.perf_counter() if now is None else now
        delta = current - self.last_frame_time
        self.frame_count += 1
        if self.frame_count % FPS_SAMPLE_FRAMES == 0 and delta > 0:
            self.fps = round(1.0 / delta)
        self.last_frame_time = current

    def update_messages(self, dt_ms: float) -> None:
        """Expire old messages and mirror the rest into the game."""
        for message in self.messages:
            message.time_left -= dt_ms
        self.messages = [m for m in self.messages if m.time_left > 0]
        self.game.messages = [m.text for m in self.messages]

    def handle_game_state_changes(self) -> None:
        if self.game.is_over and not self.game_over_screen.is_shown():
            self.show_game_over()

        if self._last_wave != self.game.wave:
            if self._last_wave is not None:
                self.show_message(f"WAVE {self.game.wave}")
                self.hud.flash()
            self._last_wave = self.game.wave

    def show_message(
        self,
        text: str,
        duration: Optional[float] = None,
        kind: str = "info",
    ) -> Message:
        """Queue *text* for *duration* ms; the oldest drops past the limit."""
        duration = self.message_duration if duration is None else duration
        message = Message(text=text, time_left=duration, kind=kind,
                          duration=duration)
        self.messages.append(message)
        self.message_history.append(message)
        if len(self.messages) > self.max_messages:
            self.messages.pop(0)
        self.game.messages = [m.text for m in self.messages]
        logger.debug("Message [%s]: %s", kind, text)
        return message

    def show_game_over(self) -> None:
        self.paused = False
        self.game_over_screen.show(self.game.final_stats())

    def _restart(self) -> None:
        self.game.reset()
        self.reset()
        if self.on_restart is not None:
            self.on_restart()

    # ── Rendering ───────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        if self.game_over_screen.is_shown():
            self.game_over_screen.render(surface)
            return

        self.hud.render(surface)
        self.minimap.render(surface)
        if self.show_controls:
            self.hud.render_controls(surface)
        if self.debug_mode:
            self.render_debug_info(surface)
        if self.paused:
            self.render_pause_overlay(surface)

    def debug_lines(self) -> list[str]:
        game = self.game
        return [
            "DEBUG INFO:",
            f"FPS: {self.fps:.0f}",
            f"Player: {'None' if game.is_over else 'Active'}",
            f"Asteroids: {game.asteroid_count}",
            f"Bullets: {len(game.bullets)}",
            f"Messages: {len(self.messages)}",
            f"Canvas: {self.width}x{self.height}",
            f"State: {game.state.name}",
            "",
            "F1 - Toggle Debug",
            "H - Toggle Controls",
        ]

    def render_debug_info(self, surface: pygame.Surface) -> None:
        x = self.width - 200
        y = 200
        rect = pygame.Rect(x - 10, y - 10, 190, 170)
        draw_panel(surface, rect, UI_DEBUG, 204, width=1)
        font = get_font(12)
        for i, line in enumerate(self.debug_lines()):
            draw_text(surface, line, font, UI_DEBUG, (x, y + i * 14))

    def render_pause_overlay(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 178))
        surface.blit(overlay, (0, 0))

        cx = self.width / 2
        cy = self.height / 2
        draw_text(surface, "PAUSED", get_font(48, bold=True), UI_SECONDARY,
                  (cx, cy - 30), align="center", outline=(0, 0, 0))
        draw_text(surface, "Press ESC to resume", get_font(20), UI_WHITE,
                  (cx, cy + 35), align="center")

    # ── Hit testing ─────────────────────────────────────────────────────

    def get_ui_bounds(self) -> list[dict[str, object]]:
        return [
            {
                "name": "minimap",
                "x": self.minimap.x,
                "y": self.minimap.y,
                "width": self.minimap.size,
                "height": self.minimap.size,
            },
            {
                "name": "hud",
                "x": 0,
                "y": 0,
                "width": MAIN_PANEL_SIZE[0] + 50,
                "height": MAIN_PANEL_SIZE[1] + 20,
            },
        ]

    def get_ui_element_at_point(self, x: float, y: float) -> Optional[dict[str, object]]:
        for bound in self.get_ui_bounds():
            if (bound["x"] <= x <= bound["x"] + bound["width"]
                    and bound["y"] <= y <= bound["y"] + bound["height"]):
                return bound
        return None

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Clear overlays for a new game."""
        self.messages = []
        self.message_history = []
        self.game.messages = []
        self.game_over_screen.hide()
        self.paused = False
        self._last_wave = None
