import random

import pygame
import pytest

from wavesurvivor.characters import Player, Zombie
from wavesurvivor.definitions import Position
from wavesurvivor.game import GameHandler
from wavesurvivor.gui import (
    GOLD,
    GREEN,
    RED,
    DebugPanel,
    draw_enemy_health_bar,
    draw_player_health_bar,
    draw_time,
    draw_xp_bar,
    draw_zombies_killed,
    format_elapsed,
    health_bar_width,
)


def count_color(surface, color):
    w, h = surface.get_size()
    return sum(1 for x in range(w) for y in range(h) if surface.get_at((x, y))[:3] == color)


def count_non_black(surface):
    w, h = surface.get_size()
    return sum(1 for x in range(w) for y in range(h) if surface.get_at((x, y))[:3] != (0, 0, 0))


@pytest.fixture
def game():
    return GameHandler(clock=lambda: 1000, rng=random.Random(3))


def test_format_elapsed_pinned_values():
    assert format_elapsed(0) == "00:00"
    assert format_elapsed(65_000) == "01:05"
    assert format_elapsed(3_661_000) == "01:01:01"


def test_format_elapsed_hour_part_appears_only_after_an_hour():
    assert len(format_elapsed(3_599_999).split(":")) == 2
    assert len(format_elapsed(3_600_000).split(":")) == 3


def test_health_bar_width_bounds_and_order():
    assert health_bar_width(100, 100, 30.0) == 30.0
    assert health_bar_width(0, 100, 30.0) == 0.0
    assert health_bar_width(25, 100, 30.0) < health_bar_width(75, 100, 30.0)


def test_xp_bar_fills_with_experience():
    surface = pygame.Surface((200, 50))
    player = Player()
    draw_xp_bar(surface, player)
    assert surface.get_at((0, 5))[:3] == (0, 0, 0)

    player.gain_xp(player.level_threshold // 2)
    surface.fill((0, 0, 0))
    draw_xp_bar(surface, player)
    assert surface.get_at((0, 5))[:3] == GOLD
    assert surface.get_at((199, 5))[:3] == (0, 0, 0)


def test_zombies_killed_and_time_draw_text():
    surface = pygame.Surface((120, 70))
    draw_zombies_killed(surface, 42)
    assert count_non_black(surface) > 0
    surface.fill((0, 0, 0))
    draw_time(surface, 65_000)
    assert count_non_black(surface) > 0


def _player_bar_green(health):
    surface = pygame.Surface((200, 100))
    player = Player()
    player.health = health
    draw_player_health_bar(surface, player)
    return count_color(surface, GREEN)


def test_player_health_bar_shrinks_with_health():
    full = _player_bar_green(100)
    half = _player_bar_green(50)
    assert full > half > 0
    assert _player_bar_green(0) == 0


def _enemy_bar_red(health):
    surface = pygame.Surface((200, 100))
    zombie = Zombie(Position(1000, 1000))
    zombie.health = health
    draw_enemy_health_bar(surface, zombie, Position(1000, 1000))
    return count_color(surface, RED)


def test_enemy_health_bar_shrinks_with_health():
    full = _enemy_bar_red(50)
    half = _enemy_bar_red(25)
    assert full > half > 0
    assert _enemy_bar_red(0) == 0


def _center(rect):
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


def test_debug_panel_spawn_enemy(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    before = len(game.world.zombies)
    label = panel.draw(surface, game, _center(panel.spawn_enemy_button), clicked=True)
    assert label == "Spawn enemy"
    assert len(game.world.zombies) == before + 1


def test_debug_panel_spawn_chest(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    before = len(game.world.objects)
    panel.draw(surface, game, _center(panel.spawn_chest_button), clicked=True)
    assert len(game.world.objects) == before + 1


def test_debug_panel_level_up(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    start_level = game.player.level
    panel.draw(surface, game, _center(panel.level_up_button), clicked=True)
    assert game.player.level == start_level + 1


def test_debug_panel_trigger_cards(game):
    calls = []
    game.on_player_level_up = lambda: calls.append("cards")
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    panel.draw(surface, game, _center(panel.trigger_cards_button), clicked=True)
    assert calls == ["cards"]


def test_debug_panel_hover_without_click_does_nothing(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    before = len(game.world.zombies)
    assert panel.draw(surface, game, _center(panel.spawn_enemy_button), clicked=False) is None
    assert len(game.world.zombies) == before


def test_debug_panel_god_mode_toggles(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    panel.draw(surface, game, _center(panel.god_mode_box), clicked=True)
    assert panel.god_mode is True
    panel.draw(surface, game, _center(panel.god_mode_box), clicked=True)
    assert panel.god_mode is False


def test_debug_panel_close_disables_controls(game):
    panel = DebugPanel()
    surface = pygame.Surface((1280, 720))
    panel.draw(surface, game, _center(panel.close_button), clicked=True)
    assert panel.active is False
    before = len(game.world.zombies)
    assert panel.draw(surface, game, _center(panel.spawn_enemy_button), clicked=True) is None
    assert len(game.world.zombies) == before