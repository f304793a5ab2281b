"""Heads-up display, health bars and the debug panel."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import pygame

from .definitions import (
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_PLAYER_WIDTH,
    DEFAULT_ZOMBIE_HEIGHT,
    DEFAULT_ZOMBIE_WIDTH,
    Position,
    Rect,
)
from .tools import center_text_x, world_to_screen

WHITE = (255, 255, 255)
GOLD = (255, 203, 0)
GREEN = (0, 228, 48)
RED = (230, 41, 55)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
BLACK = (0, 0, 0)

PLAYER_HEALTH_BAR_WIDTH = 100.0
ENEMY_HEALTH_BAR_WIDTH = 30.0


@lru_cache(maxsize=None)
def _default_font(size: int) -> pygame.font.Font:
    """The default font at the given size."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _pg_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(
        math.trunc(rect.x), math.trunc(rect.y), math.trunc(rect.width), math.trunc(rect.height)
    )


def _fill(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    w, h = math.trunc(w), math.trunc(h)
    if w > 0 and h > 0:
        pygame.draw.rect(surface, color, pygame.Rect(math.trunc(x), math.trunc(y), w, h))


def _outline(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    w, h = math.trunc(w), math.trunc(h)
    if w > 0 and h > 0:
        pygame.draw.rect(surface, color, pygame.Rect(math.trunc(x), math.trunc(y), w, h), 1)


def _text(
    surface: pygame.Surface,
    text: str,
    x: float,
    y: float,
    size: int,
    color,
    font: pygame.font.Font | None = None,
) -> None:
    used = font if font is not None else _default_font(size)
    surface.blit(used.render(text, True, color), (math.trunc(x), math.trunc(y)))


def format_elapsed(elapsed_ms: int) -> str:
    """Elapsed time as MM:SS, or HH:MM:SS once an hour has passed."""
    hours = elapsed_ms // 3_600_000
    minutes = (elapsed_ms % 3_600_000) // 60_000
    seconds = (elapsed_ms % 60_000) // 1000
    prefix = f"{hours:02d}:" if hours > 0 else ""
    return f"{prefix}{minutes:02d}:{seconds:02d}"


def health_bar_width(health: float, max_health: float, bar_width: float) -> float:
    """Width of the filled part of a health bar."""
    return health / max_health * bar_width


def draw_xp_bar(surface: pygame.Surface, player: Any, font: pygame.font.Font | None = None) -> None:
    """Draw the experience bar along the top of the screen and the player's level."""
    screen_width = surface.get_width()
    fraction = player.xp / float(player.level_threshold)
    _fill(surface, 0, 0, fraction * screen_width, 10, GOLD)
    level = str(player.level)
    _text(surface, level, screen_width // 2 - len(level), 20, 30, WHITE, font)


def draw_zombies_killed(
    surface: pygame.Surface, zombies_killed: int, font: pygame.font.Font | None = None
) -> None:
    text = str(zombies_killed)
    _text(surface, text, len(text) + 10, 20, 20, WHITE, font)


def draw_time(surface: pygame.Surface, elapsed_ms: int, font: pygame.font.Font | None = None) -> None:
    text = format_elapsed(elapsed_ms)
    _text(surface, text, len(text), 20 + 20, 20, WHITE, font)


def draw_player_health_bar(surface: pygame.Surface, player: Any) -> None:
    """Draw the player's health bar above the player, who sits at the screen centre."""
    screen_width, screen_height = surface.get_size()
    pos = player.position
    screen_pos = world_to_screen(pos, pos, screen_width, screen_height)
    filled = health_bar_width(player.health, player.max_health, PLAYER_HEALTH_BAR_WIDTH)
    x = math.trunc(screen_pos.x + DEFAULT_PLAYER_WIDTH // 2 - PLAYER_HEALTH_BAR_WIDTH / 2)
    y = screen_pos.y - DEFAULT_PLAYER_HEIGHT - 5
    _fill(surface, x, y, filled, 10, GREEN)
    _outline(surface, x, y, PLAYER_HEALTH_BAR_WIDTH, 10, WHITE)


def draw_enemy_health_bar(surface: pygame.Surface, zombie: Any, player_position: Position) -> None:
    """Draw a zombie's health bar above it."""
    screen_width, screen_height = surface.get_size()
    screen_pos = world_to_screen(zombie.position, player_position, screen_width, screen_height)
    filled = health_bar_width(zombie.health, zombie.max_health, ENEMY_HEALTH_BAR_WIDTH)
    x = math.trunc(screen_pos.x + DEFAULT_ZOMBIE_WIDTH // 2 - ENEMY_HEALTH_BAR_WIDTH / 2)
    y = screen_pos.y - DEFAULT_ZOMBIE_HEIGHT
    _fill(surface, x, y, filled, 5, RED)
    _outline(surface, x, y, ENEMY_HEALTH_BAR_WIDTH, 5, WHITE)


class DebugPanel:
    """A small window with debug controls acting on a running game."""

    TITLE = "Debug"
    GOD_MODE_TEXT = "Godmode"
    LEVEL_UP_TEXT = "Level up"
    SPAWN_ENEMY_TEXT = "Spawn enemy"
    SPAWN_CHEST_TEXT = "Spawn chest"
    TRIGGER_CARDS_TEXT = "Trigger cards"

    def __init__(self, anchor: tuple[float, float] = (920, 48)) -> None:
        ax, ay = anchor
        self.window = Rect(ax - 56, ay, 216, 192)
        self.god_mode_box = Rect(ax - 8, ay + 40, 16, 16)
        self.level_up_button = Rect(ax - 8, ay + 80, 112, 16)
        self.spawn_enemy_button = Rect(ax - 8, ay + 104, 112, 16)
        self.spawn_chest_button = Rect(ax - 8, ay + 128, 112, 16)
        self.trigger_cards_button = Rect(ax - 8, ay + 152, 112, 16)
        self.close_button = Rect(self.window.x + self.window.width - 20, self.window.y + 3, 18, 18)
        self.active = True
        self.god_mode = False

    def draw(
        self,
        surface: pygame.Surface,
        game: Any,
        mouse_pos: tuple[float, float] = (0, 0),
        clicked: bool = False,
    ) -> str | None:
        """Draw the panel and run the control clicked this frame; return its label."""
        if not self.active:
            return None
        mx, my = mouse_pos

        def pressed(rect: Rect) -> bool:
            return clicked and rect.contains_point(mx, my)

        self._draw_window(surface)
        if pressed(self.close_button):
            self.active = False

        if pressed(self.god_mode_box):
            self.god_mode = not self.god_mode
        box = self.god_mode_box
        _outline(surface, box.x, box.y, box.width, box.height, DARKGRAY)
        if self.god_mode:
            _fill(surface, box.x + 3, box.y + 3, box.width - 6, box.height - 6, DARKGRAY)
        _text(surface, self.GOD_MODE_TEXT, box.x + box.width + 4, box.y, 16, DARKGRAY)

        actions = (
            (self.LEVEL_UP_TEXT, self.level_up_button, game.debug_level_up_player),
            (self.SPAWN_ENEMY_TEXT, self.spawn_enemy_button, game.spawn_enemy),
            (self.SPAWN_CHEST_TEXT, self.spawn_chest_button, game.spawn_chest),
            (self.TRIGGER_CARDS_TEXT, self.trigger_cards_button, lambda: game.on_player_level_up()),
        )
        triggered = None
        for label, rect, action in actions:
            hovered = rect.contains_point(mx, my)
            self._draw_button(surface, label, rect, hovered)
            if pressed(rect):
                action()
                triggered = label
        return triggered

    def _draw_window(self, surface: pygame.Surface) -> None:
        w = self.window
        _fill(surface, w.x, w.y, w.width, w.height, (245, 245, 245))
        _fill(surface, w.x, w.y, w.width, 24, LIGHTGRAY)
        _outline(surface, w.x, w.y, w.width, w.height, GRAY)
        _text(surface, self.TITLE, w.x + 6, w.y + 5, 16, DARKGRAY)
        c = self.close_button
        _outline(surface, c.x, c.y, c.width, c.height, GRAY)
        _text(surface, "x", c.x + 5, c.y + 2, 16, DARKGRAY)

    @staticmethod
    def _draw_button(surface: pygame.Surface, label: str, rect: Rect, hovered: bool) -> None:
        _fill(surface, rect.x, rect.y, rect.width, rect.height, (201, 239, 254) if hovered else LIGHTGRAY)
        _outline(surface, rect.x, rect.y, rect.width, rect.height, GRAY)
        font = _default_font(16)
        x = rect.x + center_text_x(math.trunc(rect.width), font.size(label)[0])
        _text(surface, label, x, rect.y + 1, 16, DARKGRAY, font)