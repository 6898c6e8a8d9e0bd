"""
Tests for the UI overlays: score text, HUD, radar, game-over screen and
the UI manager.  Rendering tests draw onto an off-screen surface.
"""

import pytest

from asteroids.config import (
    BULLET_COLOR,
    HUD_FLASH_MS,
    MAX_MESSAGES,
    MINIMAP_PING_MS,
    UI_PRIMARY,
)
from asteroids.game import GameState
from asteroids.models.asteroid import Asteroid, AsteroidSize
from asteroids.models.bullet import Bullet
from asteroids.models.vector import Vector2D
from asteroids.ui.draw import draw_asteroid, draw_bullet, draw_ship
from asteroids.ui.game_over import GameOverScreen, GameStatistics
from asteroids.ui.hud import HUD
from asteroids.ui.manager import UIManager
from asteroids.ui.minimap import Minimap
from asteroids.ui.text import ScoreDisplay, draw_text, get_font
from asteroids.utils.input_handler import GameAction


def rock_at(x, y, size=AsteroidSize.LARGE):
    return Asteroid(position=Vector2D(x, y), size=size)


# ── ScoreDisplay ────────────────────────────────────────────────────────────


class TestScoreDisplay:
    def test_add_tracks_high_score(self):
        sd = ScoreDisplay()
        sd.add(1500)
        assert sd.player_score == 1500
        assert sd.high_score == 1500

    def test_reset_keeps_high_score(self):
        sd = ScoreDisplay()
        sd.add(300)
        sd.reset()
        sd.add(100)
        assert sd.player_score == 100
        assert sd.high_score == 300

    def test_format(self):
        sd = ScoreDisplay(player_score=12345, high_score=20000)
        assert sd.format_score() == "SCORE: 12,345"
        assert sd.format_high_score() == "BEST: 20,000"

    def test_draw_text_alignment(self, surface):
        font = get_font(18)
        left = draw_text(surface, "ABC", font, UI_PRIMARY, (100, 50))
        right = draw_text(surface, "ABC", font, UI_PRIMARY, (100, 50), align="right")
        centre = draw_text(surface, "ABC", font, UI_PRIMARY, (100, 50), align="center")
        assert left.left == 100
        assert right.right == 100
        assert centre.centerx == pytest.approx(100, abs=1)
        assert left.top == right.top == centre.top == 50


# ── HUD ─────────────────────────────────────────────────────────────────────


class TestHUD:
    def test_nearest_sorted(self, game):
        far, near, mid = rock_at(700, 300), rock_at(450, 300), rock_at(600, 300)
        game.asteroids = [far, near, mid]
        hud = HUD(game)
        ranked = hud.find_nearest_asteroids(2)
        assert [a for a, _ in ranked] == [near, mid]
        assert ranked[0][1] == pytest.approx(50)

    def test_indicator_count_capped(self, game):
        game.asteroids = [rock_at(100 + i * 50, 50) for i in range(6)]
        assert len(HUD(game).indicator_polygons()) == 3

    def test_indicator_points_at_asteroid(self, game):
        game.asteroids = [rock_at(500, 300)]
        (points, color), = HUD(game).indicator_polygons()
        assert points[0] == pytest.approx((515, 300))
        assert color[0] == 255
        assert 0 < color[1] < 255
        assert color[2] == 0

    def test_flash_decays(self, game):
        hud = HUD(game)
        hud.flash()
        assert hud.flash_time == HUD_FLASH_MS
        hud.update(HUD_FLASH_MS + 100)
        assert hud.flash_time == 0.0

    def test_dimensions_default_to_game(self, game):
        hud = HUD(game)
        assert (hud.width, hud.height) == (800, 600)


# ── Minimap ─────────────────────────────────────────────────────────────────


class TestMinimap:
    def test_anchored_bottom_right(self, game):
        radar = Minimap(game)
        assert (radar.x, radar.y) == (580, 380)

    def test_coordinate_mapping(self, game):
        radar = Minimap(game)
        assert radar.world_to_minimap(0, 0) == (580, 380)
        assert radar.world_to_minimap(800, 600) == pytest.approx((780, 580))
        mx, my = radar.world_to_minimap(400, 300)
        assert radar.minimap_to_world(mx, my) == pytest.approx((400, 300))

    def test_hit_testing(self, game):
        radar = Minimap(game)
        assert radar.is_point_in_minimap(600, 400)
        assert not radar.is_point_in_minimap(100, 100)

    def test_hover(self, game):
        radar = Minimap(game)
        assert radar.handle_mouse_move(700, 500)
        assert radar.is_hovered
        assert not radar.handle_mouse_move(10, 10)

    def test_click_adds_ping(self, game):
        radar = Minimap(game)
        assert radar.handle_click(680, 480)
        assert len(radar.pings) == 1
        assert radar.last_click_world == pytest.approx((400, 300))

    def test_click_outside_ignored(self, game):
        radar = Minimap(game)
        assert not radar.handle_click(10, 10)
        assert radar.pings == []

    def test_click_disabled(self, game):
        radar = Minimap(game, clickable=False)
        assert not radar.handle_click(680, 480)

    def test_pings_expire(self, game):
        radar = Minimap(game)
        radar.handle_click(680, 480)
        radar.update(MINIMAP_PING_MS / 2)
        assert radar.pings[0].alpha == pytest.approx(0.5)
        radar.update(MINIMAP_PING_MS)
        assert radar.pings == []

    def test_density_grid(self, game):
        game.asteroids = [rock_at(15, 25), rock_at(12, 28), rock_at(795, 595),
                          rock_at(800, 100)]
        radar = Minimap(game)
        radar.update_density_grid()
        assert len(radar.density_grid) == 60
        assert len(radar.density_grid[0]) == 80
        assert radar.density_grid[2][1] == 2
        assert radar.density_grid[59][79] == 1
        assert sum(map(sum, radar.density_grid)) == 3

    def test_density_alpha(self):
        assert Minimap.density_alpha(1) == pytest.approx(0.06)
        assert Minimap.density_alpha(5) == pytest.approx(0.3)
        assert Minimap.density_alpha(12) == pytest.approx(0.3)

    def test_resize(self, game):
        radar = Minimap(game)
        radar.update_position(1024, 768)
        assert (radar.x, radar.y) == (804, 548)


# ── Game over ───────────────────────────────────────────────────────────────


class TestGameOverScreen:
    def test_all_achievements(self):
        screen = GameOverScreen(800, 600)
        screen.show(GameStatistics(score=12000, wave=6, asteroids_destroyed=60,
                                   time_alive=400, lives_lost=0, accuracy=85))
        achievements = screen.calculate_achievements()
        assert len(achievements) == 6
        assert "Score Master - Reached 10,000 points" in achievements
        assert "Survivor - Lasted 5 minutes" in achievements

    def test_no_achievements(self):
        screen = GameOverScreen(800, 600)
        screen.show(GameStatistics(lives_lost=5))
        assert screen.calculate_achievements() == []

    def test_untouchable_needs_a_kill(self):
        screen = GameOverScreen(800, 600)
        screen.show(GameStatistics(lives_lost=0, asteroids_destroyed=0))
        assert screen.calculate_achievements() == []

    def test_statistic_rows(self):
        screen = GameOverScreen(800, 600)
        screen.show(GameStatistics(score=12000, wave=3, asteroids_destroyed=7,
                                   time_alive=125, accuracy=66.6))
        rows = {label: value for label, value, _ in screen.statistic_rows()}
        assert rows["FINAL SCORE"] == "12,000"
        assert rows["WAVES COMPLETED"] == "3"
        assert rows["TIME SURVIVED"] == "2m 5s"
        assert rows["ACCURACY"] == "67%"

    def test_fade_in(self):
        screen = GameOverScreen(800, 600)
        screen.update(500)
        assert screen.show_time == 0
        screen.show()
        screen.update(500)
        assert screen.fade_alpha == pytest.approx(0.5)
        screen.update(5000)
        assert screen.fade_alpha == 1.0

    def test_restart_only_while_visible(self):
        calls = []
        screen = GameOverScreen(800, 600, on_restart=lambda: calls.append(1))
        assert not screen.handle_key(GameAction.RESTART)
        screen.show()
        assert not screen.handle_key(GameAction.PAUSE)
        assert screen.handle_key(GameAction.RESTART)
        assert calls == [1]
        assert not screen.is_shown()


# ── UI manager ──────────────────────────────────────────────────────────────


class TestUIManager:
    def test_message_queue_capped(self, game):
        ui = UIManager(game)
        for i in range(MAX_MESSAGES + 1):
            ui.show_message(f"MSG {i}")
        assert len(ui.messages) == MAX_MESSAGES
        assert game.messages == ["MSG 1", "MSG 2", "MSG 3"]
        assert len(ui.message_history) == MAX_MESSAGES + 1

    def test_messages_expire(self, game):
        ui = UIManager(game)
        ui.show_message("SHORT", duration=1000)
        ui.show_message("LONG", duration=5000)
        ui.update(1500)
        assert game.messages == ["LONG"]

    def test_wave_change_announced(self, game):
        ui = UIManager(game)
        ui.update(16)
        assert game.messages == []
        game.wave = 2
        ui.update(16)
        assert game.messages == ["WAVE 2"]
        assert ui.hud.flash_time == HUD_FLASH_MS

    def test_game_over_shows_screen(self, game):
        ui = UIManager(game)
        game.score_display.add(700)
        game.end_game()
        ui.update(16)
        assert ui.game_over_screen.is_shown()
        assert ui.game_over_screen.statistics.score == 700

    def test_toggles(self, game):
        ui = UIManager(game)
        assert ui.handle_action(GameAction.TOGGLE_CONTROLS)
        assert ui.show_controls
        assert ui.handle_action(GameAction.TOGGLE_DEBUG)
        assert ui.debug_mode
        ui.handle_action(GameAction.TOGGLE_DEBUG)
        assert not ui.debug_mode

    def test_pause_toggle(self, game):
        ui = UIManager(game)
        ui.handle_action(GameAction.PAUSE)
        assert ui.paused
        assert game.state == GameState.PAUSED
        ui.handle_action(GameAction.PAUSE)
        assert not ui.paused
        assert game.state == GameState.RUNNING

    def test_restart_ignored_during_play(self, game):
        ui = UIManager(game)
        assert not ui.handle_action(GameAction.RESTART)

    def test_restart_from_game_over(self, game):
        calls = []
        ui = UIManager(game, on_restart=lambda: calls.append(1))
        game.lives = 0
        game.end_game()
        ui.update(16)
        ui.show_message("HELLO")
        assert ui.handle_action(GameAction.RESTART)
        assert game.state == GameState.RUNNING
        assert game.lives == game.starting_lives
        assert not ui.game_over_screen.is_shown()
        assert ui.messages == []
        assert calls == [1]

    def test_fps_sampling(self, game):
        ui = UIManager(game)
        ui.last_frame_time = 0.0
        for i in range(1, 31):
            ui.update_performance_metrics(i / 50)
        assert ui.fps == 50

    def test_debug_lines(self, game):
        ui = UIManager(game)
        lines = ui.debug_lines()
        assert "Asteroids: 5" in lines
        assert "Canvas: 800x600" in lines
        assert "State: RUNNING" in lines

    def test_ui_element_at_point(self, game):
        ui = UIManager(game)
        assert ui.get_ui_element_at_point(600, 400)["name"] == "minimap"
        assert ui.get_ui_element_at_point(10, 10)["name"] == "hud"
        assert ui.get_ui_element_at_point(400, 300) is None

    def test_resize(self, game):
        ui = UIManager(game)
        ui.handle_resize(1024, 768)
        assert ui.minimap.x == 804
        assert ui.hud.width == 1024
        assert ui.game_over_screen.height == 768
        assert (game.width, game.height) == (1024, 768)
        assert ui.minimap.scale_x == pytest.approx(200 / 1024)
        assert len(ui.minimap.density_grid) == 77
        assert len(ui.minimap.density_grid[0]) == 103

    def test_shrunk_window_wraps_at_new_edge(self, game):
        ui = UIManager(game)
        ui.handle_resize(400, 300)
        game.asteroids = [rock_at(200, 100)]
        game.ship.position = Vector2D(700, 200)
        game.update(0.01)
        assert game.ship.x == 0
        assert game.ship.y == 200


# ── Rendering smoke tests ───────────────────────────────────────────────────


class TestRendering:
    def test_render_play_overlays(self, game, surface):
        ui = UIManager(game, show_controls=True, debug_mode=True)
        ui.show_message("WAVE 2")
        ui.render(surface)
        assert tuple(surface.get_at((580, 380)))[:3] == UI_PRIMARY

    def test_render_paused(self, game, surface):
        ui = UIManager(game)
        ui.set_paused(True)
        ui.render(surface)

    def test_render_game_over(self, game, surface):
        ui = UIManager(game)
        game.end_game()
        ui.update(500)
        ui.render(surface)

    def test_draw_entities(self, game, surface):
        draw_ship(surface, game.ship)
        for rock in game.asteroids:
            draw_asteroid(surface, rock)
        draw_bullet(surface, Bullet(position=Vector2D(50, 50)))
        assert tuple(surface.get_at((50, 50)))[:3] == BULLET_COLOR
