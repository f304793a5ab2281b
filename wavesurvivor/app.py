"""The application: builds every part of the game and wires them together."""

from __future__ import annotations

import argparse
import os
from typing import Any

import pygame

from . import logger
from .definitions import (
    EVENTS_PATH,
    HEIGHT,
    MAIN_MENU_BUTTON_EXIT_ID,
    MAIN_MENU_BUTTON_OPTIONS_ID,
    MAIN_MENU_BUTTON_START_ID,
    TITLE,
    WIDTH,
    GameState,
    RenderState,
    TextureName,
)
from .events import EventHandler, EventParser
from .game import GameHandler
from .levelup import LevelUpScreen
from .logger import LogLevel
from .menus import MainMenu, OptionsMenu
from .network import ConnectionManager
from .renderer import Renderer
from .textures import DEFAULT_TEXTURE_PATH, TextureHandler

# Card images, in CardType order.
_CARD_IMAGES = (
    TextureName.MOVE_SPEED_UPGRADE_TEXTURE,
    TextureName.DAMAGE_UPGRADE_TEXTURE,
    TextureName.FIRE_SPEED_UPGRADE_TEXTURE,
    TextureName.HEALTH_UPGRADE_TEXTURE,
    TextureName.PICKUP_UPGRADE_TEXTURE,
    TextureName.THORN_AURA_TEXTURE,
)


def _connect() -> ConnectionManager | None:
    try:
        return ConnectionManager()
    except ConnectionError as exc:
        logger.log(LogLevel.ERROR, exc)
        return None


class WaveSurvivor:
    """Owns the window, the game, its screens and the renderer."""

    def __init__(
        self,
        *,
        surface: pygame.Surface | None = None,
        textures: TextureHandler | None = None,
        game: GameHandler | None = None,
        event_handler: EventHandler | None = None,
        texture_path: str | os.PathLike[str] = DEFAULT_TEXTURE_PATH,
        events_path: str | os.PathLike[str] = EVENTS_PATH,
    ) -> None:
        self._owns_window = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
        self.surface = surface
        screen_size = surface.get_size()

        if game is None:
            if event_handler is None:
                event_handler = EventHandler(EventParser(events_path))
                event_handler.load_events()
        else:
            event_handler = game.event_handler
        self.event_handler = event_handler

        self.textures = textures if textures is not None else TextureHandler(texture_path)

        if game is None:
            game = GameHandler(event_handler, _connect(), screen_size=screen_size)
        self.game: Any = game
        self.game.on_game_over = self.game_over
        self.game.on_player_level_up = self.player_leveled_up
        self.game.on_player_opened_chest = self.player_opened_chest

        self.level_up = LevelUpScreen(
            self.game,
            self.textures.texture(TextureName.CARD_TEXTURE),
            [self.textures.texture(name) for name in _CARD_IMAGES],
            callback=self.level_up_card_selected,
            screen_size=screen_size,
        )
        self.options_menu = OptionsMenu(on_resize=self._resize, screen_size=screen_size)
        self.main_menu = MainMenu(
            self.textures.texture(TextureName.BUTTON_TEXTURE),
            callback=self.main_menu_button,
            background=self.textures.texture(TextureName.MAIN_MENU_BACKGROUND_TEXTURE),
            screen_size=screen_size,
        )
        self.renderer = Renderer(
            self.textures,
            self.game,
            self.level_up,
            self.main_menu,
            self.options_menu,
            self.surface,
        )

    def _resize(self, size: tuple[int, int]) -> None:
        if self._owns_window:
            self.surface = pygame.display.set_mode(size)
        else:
            self.surface = pygame.Surface(size)
        self.renderer.surface = self.surface

    def main_menu_button(self, button_id: int) -> None:
        """React to a main menu button; ValueError for an unknown button."""
        if button_id == MAIN_MENU_BUTTON_START_ID:
            self.renderer.state = RenderState.GAME
            self.game.reset_start_time()
            if self.game.state is not GameState.RUNNING:
                self.game.state = GameState.RUNNING
        elif button_id == MAIN_MENU_BUTTON_OPTIONS_ID:
            self.renderer.state = RenderState.OPTIONS
            if self.game.state is GameState.RUNNING:
                self.game.pause()
        elif button_id == MAIN_MENU_BUTTON_EXIT_ID:
            self.renderer.running = False
        else:
            raise ValueError(f"Main menu button not implemented: {button_id}")

    def level_up_card_selected(self) -> None:
        self.renderer.state = RenderState.GAME
        self.game.unpause()
        self.level_up.reset()

    def game_over(self) -> None:
        self.renderer.state = RenderState.MAIN_MENU

    def player_leveled_up(self) -> None:
        self.renderer.state = RenderState.LEVEL_UP
        self.game.pause()

    def player_opened_chest(self) -> None:
        self.renderer.state = RenderState.LEVEL_UP
        self.game.pause()

    def run(self) -> int:
        """Run until the window closes or exit is chosen; return the exit status."""
        self.renderer.run()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wavesurvivor", description="Survive waves of zombies.")
    parser.add_argument("--textures", default=DEFAULT_TEXTURE_PATH, help="texture directory")
    parser.add_argument("--events", default=EVENTS_PATH, help="event file directory")
    args = parser.parse_args(argv)
    try:
        return WaveSurvivor(texture_path=args.textures, events_path=args.events).run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())