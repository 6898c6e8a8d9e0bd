"""
Tests for the command line and the application wrapper.

Most tests skip the display: ``create_game`` builds the game and UI
without one and ``step`` skips drawing while ``screen`` is unset.  The
event tests open a window on SDL's dummy driver and post events to it.
"""

import logging

import pygame
import pytest

from asteroids.game import GameState
from asteroids.models.asteroid import Asteroid
from asteroids.models.vector import Vector2D
from main import AsteroidsApp, main, parse_args


# ── Argument parsing ───────────────────────────────────────────────────────


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.width == 800
        assert args.height == 600
        assert not args.fullscreen
        assert not args.debug
        assert not args.controls
        assert args.lives == 5
        assert args.seed is None
        assert args.log_level == "WARNING"

    def test_options(self):
        args = parse_args(["--width", "1024", "--height", "768", "--debug",
                           "--controls", "--lives", "3", "--seed", "9"])
        assert (args.width, args.height) == (1024, 768)
        assert args.debug and args.controls
        assert args.lives == 3
        assert args.seed == 9

    def test_log_level_case_insensitive(self):
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    @pytest.mark.parametrize("argv", [
        ["--lives", "0"],
        ["--lives", "10"],
        ["--width", "-5"],
        ["--height", "0"],
        ["--log-level", "chatty"],
    ])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)


# ── Application ─────────────────────────────────────────────────────────────


@pytest.fixture
def app(pygame_session):
    app = AsteroidsApp(seed=5)
    app.create_game()
    app.running = True
    return app


class TestAsteroidsApp:
    def test_defaults(self):
        app = AsteroidsApp()
        assert (app.width, app.height) == (800, 600)
        assert app.game is None
        assert not app.running

    def test_create_game_applies_flags(self, pygame_session):
        app = AsteroidsApp(lives=2, debug=True, show_controls=True, seed=1)
        app.create_game()
        assert app.game.lives == 2
        assert app.ui.debug_mode
        assert app.ui.show_controls

    def test_seed_repeats_field(self, pygame_session):
        first = AsteroidsApp(seed=77)
        second = AsteroidsApp(seed=77)
        first.create_game()
        second.create_game()
        assert ([r.position for r in first.game.asteroids]
                == [r.position for r in second.game.asteroids])

    def test_step_advances_game(self, app):
        assert app.step(0.016)
        assert app.game.game_time == pytest.approx(0.016)

    def test_long_frame_skipped(self, app):
        assert not app.step(0.1)
        assert not app.step(0.5)
        assert app.game.game_time == 0.0

    def test_escape_pauses(self, app):
        app.handle_key(pygame.K_ESCAPE)
        assert app.game.state == GameState.PAUSED
        assert app.running

    def test_escape_quits_from_game_over(self, app):
        app.game.end_game()
        app.handle_key(pygame.K_ESCAPE)
        assert not app.running

    def test_help_and_debug_keys(self, app):
        app.handle_key(pygame.K_h)
        app.handle_key(pygame.K_F1)
        assert app.ui.show_controls
        assert app.ui.debug_mode

    def test_restart_key(self, app):
        app.game.end_game()
        app.step(0.016)
        app.handle_key(pygame.K_r)
        assert app.game.state == GameState.RUNNING
        assert not app.ui.game_over_screen.is_shown()

    def test_unbound_key_ignored(self, app):
        app.handle_key(pygame.K_q)
        assert app.running
        assert app.game.state == GameState.RUNNING

    def test_game_over_logged_once(self, app, caplog):
        caplog.set_level(logging.INFO)
        app.game.lives = 1
        app.game.asteroids = [Asteroid(position=Vector2D(400, 300))]
        app.step(0.016)
        assert app.game.is_over
        scores = [r for r in caplog.records if "score" in r.getMessage().lower()]
        assert len(scores) == 1


# ── Display lifecycle and events ───────────────────────────────────────────


class _InterruptingClock:
    def tick(self, framerate=0):
        raise KeyboardInterrupt


@pytest.fixture
def quit_calls(monkeypatch):
    """Record pygame.quit() so the session's pygame stays initialised."""
    calls = []
    monkeypatch.setattr(pygame, "quit", lambda: calls.append(1))
    return calls


@pytest.fixture
def live_app(pygame_session):
    app = AsteroidsApp(seed=5)
    assert app.init()
    pygame.event.clear()
    return app


class TestDisplay:
    def test_init_creates_window_and_game(self, live_app):
        assert live_app.running
        assert live_app.screen.get_size() == (800, 600)
        assert live_app.world.get_size() == (800, 600)
        assert live_app.game is not None
        assert live_app.ui.game is live_app.game

    def test_init_failure_reports_to_stderr(self, pygame_session, monkeypatch,
                                            quit_calls, capsys):
        def broken_set_mode(*args, **kwargs):
            raise pygame.error("no video device")

        monkeypatch.setattr(pygame.display, "set_mode", broken_set_mode)
        app = AsteroidsApp()
        assert not app.init()
        assert not app.running
        assert "no video device" in capsys.readouterr().err
        assert quit_calls == [1]

    def test_main_exit_code_on_init_failure(self, monkeypatch):
        monkeypatch.setattr(AsteroidsApp, "init", lambda self: False)
        assert main(["--log-level", "error"]) == 1

    def test_run_stops_on_keyboard_interrupt(self, app, quit_calls):
        app.clock = _InterruptingClock()
        app.run()
        assert not app.running
        assert quit_calls == [1]

    def test_run_ends_on_quit_event(self, live_app, quit_calls):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        live_app.run()
        assert not live_app.running
        assert quit_calls == [1]

    def test_run_without_init_is_noop(self, quit_calls):
        AsteroidsApp().run()
        assert quit_calls == []


class TestEvents:
    def test_quit_event_stops_app(self, live_app):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        live_app._handle_events()
        assert not live_app.running

    def test_keydown_routed_to_ui(self, live_app):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h))
        live_app._handle_events()
        assert live_app.ui.show_controls

    def test_mouse_motion_hovers_radar(self, live_app):
        pygame.event.post(pygame.event.Event(
            pygame.MOUSEMOTION, pos=(700, 500), rel=(0, 0), buttons=(0, 0, 0)))
        live_app._handle_events()
        assert live_app.ui.minimap.is_hovered

    def test_left_click_pings_radar(self, live_app):
        pygame.event.post(pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, pos=(680, 480), button=1))
        live_app._handle_events()
        assert len(live_app.ui.minimap.pings) == 1
        assert live_app.ui.minimap.last_click_world == pytest.approx((400, 300))

    def test_right_click_ignored(self, live_app):
        pygame.event.post(pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, pos=(680, 480), button=3))
        live_app._handle_events()
        assert live_app.ui.minimap.pings == []

    def test_resize_follows_window(self, live_app):
        pygame.event.post(pygame.event.Event(
            pygame.VIDEORESIZE, w=400, h=300, size=(400, 300)))
        live_app._handle_events()
        game = live_app.game
        assert (game.width, game.height) == (400, 300)
        assert live_app.world.get_size() == (400, 300)
        assert (live_app.ui.minimap.x, live_app.ui.minimap.y) == (180, 80)

        game.asteroids = [Asteroid(position=Vector2D(100, 100))]
        game.ship.position = Vector2D(700, 200)
        assert live_app.step(0.01)
        assert game.ship.position == Vector2D(0, 200)

    def test_held_keys_become_controls(self, live_app, monkeypatch):
        held = {pygame.K_w: True, pygame.K_SPACE: True}
        monkeypatch.setattr(pygame.key, "get_pressed", lambda: held)
        live_app._handle_events()
        controls = live_app.game.controls
        assert controls.thrust_forward
        assert controls.shoot
        assert not controls.rotate_left
