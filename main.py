"""
Main entry point for Asteroids.

Initializes pygame, runs the variable-timestep game loop at up to 60 Hz,
and wires keyboard and mouse input to the game and its UI overlays.

Usage:
    python main.py [OPTIONS]

Options:
    --width N            Window width in pixels (default: 800)
    --height N           Window height in pixels (default: 600)
    --fullscreen         Launch in fullscreen mode
    --debug              Start with the debug panel visible
    --controls           Start with the controls help visible
    --lives N            Starting lives (1-9, default: 5)
    --seed N             Seed the random generator for a repeatable field
    --log-level LEVEL    Logging verbosity (default: WARNING)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass, field
from typing import Optional

import pygame

from asteroids.config import (
    BACKGROUND,
    MAX_FRAME_DELTA,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STARTING_LIVES,
    TITLE,
    UPDATE_RATE,
)
from asteroids.game import Game
from asteroids.ui.draw import draw_asteroid, draw_bullet, draw_ship, fade_surface
from asteroids.ui.manager import UIManager
from asteroids.utils.input_handler import (
    GameAction,
    InputState,
    action_for_key,
)

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

MIN_LIVES: int = 1
MAX_LIVES: int = 9
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ── Argument parsing ───────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Asteroids - wrap-around arcade shooter",
    )
    parser.add_argument(
        "--width", type=_positive_int, default=SCREEN_WIDTH, metavar="N",
        help=f"Window width in pixels (default: {SCREEN_WIDTH})",
    )
    parser.add_argument(
        "--height", type=_positive_int, default=SCREEN_HEIGHT, metavar="N",
        help=f"Window height in pixels (default: {SCREEN_HEIGHT})",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Start with the debug panel (FPS, entity counts) visible",
    )
    parser.add_argument(
        "--controls", action="store_true",
        help="Start with the controls help panel visible",
    )
    parser.add_argument(
        "--lives", type=int, default=STARTING_LIVES,
        choices=range(MIN_LIVES, MAX_LIVES + 1),
        metavar="N",
        help=f"Starting lives ({MIN_LIVES}-{MAX_LIVES}, default: {STARTING_LIVES})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, metavar="N",
        help="Seed the random generator for a repeatable asteroid field",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class AsteroidsApp:
    """Top-level application wrapper.

    Owns the pygame display, the game, its UI overlays, and the main loop.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fullscreen: bool = False
    debug: bool = False
    show_controls: bool = False
    lives: int = STARTING_LIVES
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    trail: object = field(default=None, repr=False)
    world: object = field(default=None, repr=False)
    game: Optional[Game] = None
    ui: Optional[UIManager] = None
    running: bool = False

    # ── Initialisation ──────────────────────────────────────────────────

    def create_game(self) -> None:
        """Build the game and its overlays (no display needed)."""
        rng = random.Random(self.seed)
        self.game = Game(
            width=self.width,
            height=self.height,
            starting_lives=self.lives,
            rng=rng,
        )
        self.ui = UIManager(self.game, self.width, self.height,
                            on_restart=self._on_restart)
        self.ui.show_controls = self.show_controls
        self.ui.debug_mode = self.debug

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        try:
            pygame.init()
        except pygame.error as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        flags = pygame.FULLSCREEN if self.fullscreen else pygame.RESIZABLE
        try:
            self.screen = pygame.display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self._make_layers(self.screen.get_size())

        self.create_game()
        self.running = True
        logger.info("Display %dx%d ready", self.width, self.height)
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop."""
        if not self.running:
            return

        try:
            while self.running:
                dt = self.clock.tick(UPDATE_RATE) / 1000.0
                self._handle_events()
                if not self.running:
                    break
                self.step(dt)
                pygame.display.flip()
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    def step(self, dt: float) -> bool:
        """Advance and draw one frame of *dt* seconds.

        Frames slower than MAX_FRAME_DELTA (window drags, breakpoints)
        are skipped entirely.  Returns True if the frame was processed.
        """
        if dt >= MAX_FRAME_DELTA:
            logger.debug("Skipping long frame (%.3fs)", dt)
            return False
        self._update(dt)
        self._render()
        return True

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pygame events.

        Keyboard controls:
            W / S      - thrust forward / backward (held)
            A / D      - rotate left / right (held)
            Space      - shoot (held, 0.25 s cooldown)
            ESC        - pause / resume; quit from the game-over screen
            H          - toggle controls help
            F1         - toggle debug panel
            R          - restart from the game-over screen

        Mouse:
            Movement   - radar hover highlight
            Left click - ping the radar
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

            elif event.type == pygame.MOUSEMOTION:
                self.ui.minimap.handle_mouse_move(*event.pos)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.ui.minimap.handle_click(*event.pos)

            elif event.type == pygame.VIDEORESIZE:
                self.ui.handle_resize(event.w, event.h)
                self._make_layers((event.w, event.h))

        self.game.controls = InputState.from_pressed(pygame.key.get_pressed())

    def handle_key(self, key: int) -> None:
        """Route a key press to the UI.  Unbound keys are ignored."""
        action = action_for_key(key)
        if action == GameAction.NONE:
            return
        if action == GameAction.PAUSE and self.game.is_over:
            self.running = False
            return
        self.ui.handle_action(action)

    def _on_restart(self) -> None:
        logger.info("Restarting")
        if self.world is not None:
            self.world.fill(BACKGROUND)

    def _make_layers(self, size: tuple[int, int]) -> None:
        """(Re)create the persistent entity layer and its fade overlay."""
        self.world = pygame.Surface(size)
        self.world.fill(BACKGROUND)
        self.trail = fade_surface(size)

    # ── Update / render ─────────────────────────────────────────────────

    def _update(self, dt: float) -> None:
        self.game.update(dt)
        self.ui.update(dt * 1000.0)

    def _render(self) -> None:
        """Fade the entity layer, draw entities, then the overlays."""
        if self.screen is None or self.world is None:
            return

        # Entities accumulate on ``world`` to leave trails; overlays don't
        self.world.blit(self.trail, (0, 0))
        game = self.game
        if not game.is_over:
            draw_ship(self.world, game.ship)
        for bullet in game.bullets:
            draw_bullet(self.world, bullet)
        for asteroid in game.asteroids:
            draw_asteroid(self.world, asteroid)

        self.screen.blit(self.world, (0, 0))
        self.ui.render(self.screen)

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = AsteroidsApp(
        width=args.width,
        height=args.height,
        fullscreen=args.fullscreen,
        debug=args.debug,
        show_controls=args.controls,
        lives=args.lives,
        seed=args.seed,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
