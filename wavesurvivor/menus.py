"""The main menu and the options menu."""

from __future__ import annotations

import math
from collections.abc import Callable

import pygame

from . import logger
from .definitions import (
    CARD_TEXT_SIZE,
    HEIGHT,
    MAIN_MENU_BUTTON_EXIT_ID,
    MAIN_MENU_BUTTON_OPTIONS_ID,
    MAIN_MENU_BUTTON_START_ID,
    NUM_BUTTON_FRAMES,
    WIDTH,
    MenuButton,
    Rect,
)
from .gui import DARKGRAY, GRAY, LIGHTGRAY, WHITE, _default_font, _fill, _outline, _pg_rect
from .tools import center_text_x

BUTTON_PADDING = 120
RESOLUTIONS: tuple[tuple[int, int], ...] = ((640, 480), (1280, 720))


def _ignore(_button_id: int) -> None:
    return None


class MainMenu:
    """Start, options and exit buttons over a background image."""

    def __init__(
        self,
        button_texture: pygame.Surface,
        callback: Callable[[int], None] | None = None,
        *,
        background: pygame.Surface | None = None,
        screen_size: tuple[int, int] = (WIDTH, HEIGHT),
    ) -> None:
        self.button_texture = button_texture
        self.callback = callback if callback is not None else _ignore
        self.background = background
        self.screen_width, self.screen_height = screen_size
        self._init_buttons()

    def _init_buttons(self) -> None:
        button_w, button_h = self.button_texture.get_size()
        self.frame_height = button_h / NUM_BUTTON_FRAMES
        self.source_rec = Rect(0.0, 0.0, float(button_w), self.frame_height)

        x = self.screen_width / 2.0 - button_w / 2.0
        base_y = self.screen_height / 2.0 - (button_h // NUM_BUTTON_FRAMES) / 2.0
        specs = (
            (MAIN_MENU_BUTTON_START_ID, "START", -BUTTON_PADDING),
            (MAIN_MENU_BUTTON_OPTIONS_ID, "OPTIONS", 0),
            (MAIN_MENU_BUTTON_EXIT_ID, "EXIT", BUTTON_PADDING),
        )
        self.buttons = [
            MenuButton(
                id=button_id,
                text=text,
                source_rec=Rect(0.0, 0.0, float(button_w), self.frame_height),
                bounds=Rect(x, base_y + offset, float(button_w), self.frame_height),
            )
            for button_id, text, offset in specs
        ]

    def update(
        self,
        surface: pygame.Surface | None,
        mouse_pos: tuple[float, float],
        mouse_down: bool = False,
        mouse_released: bool = False,
    ) -> int | None:
        """Handle the mouse and draw the menu; return the id of a clicked button."""
        mx, my = mouse_pos
        clicked = None
        for button in self.buttons:
            if button.bounds.contains_point(mx, my):
                button.state = 2 if mouse_down else 1
                if mouse_released:
                    logger.debug("Clicked menu button", button.id)
                    self.callback(button.id)
                    clicked = button.id
            else:
                button.state = 0
            button.source_rec.y = button.state * self.frame_height

        if surface is not None:
            self._draw(surface)
        return clicked

    def _draw(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            screen_w, screen_h = surface.get_size()
            bg_w, bg_h = self.background.get_size()
            scale = (screen_w / bg_w + screen_h / bg_h) / 2.0
            size = (max(1, math.trunc(bg_w * scale)), max(1, math.trunc(bg_h * scale)))
            surface.blit(pygame.transform.scale(self.background, size), (0, 0))

        font = _default_font(CARD_TEXT_SIZE)
        for button in self.buttons:
            b = button.bounds
            x_max = math.trunc(b.x + (b.x + b.width))
            text_x = center_text_x(x_max, font.size(button.text)[0])
            surface.blit(
                self.button_texture,
                (math.trunc(b.x), math.trunc(b.y)),
                area=_pg_rect(button.source_rec),
            )
            surface.blit(
                font.render(button.text, True, WHITE),
                (text_x, math.trunc(b.y + CARD_TEXT_SIZE + 20)),
            )


class OptionsMenu:
    """A drop-down for choosing the window resolution."""

    DROPDOWN_WIDTH = 125
    DROPDOWN_HEIGHT = 30
    DROPDOWN_TOP = 25
    ITEM_SPACING = 2

    def __init__(
        self,
        on_resize: Callable[[tuple[int, int]], None] | None = None,
        *,
        screen_size: tuple[int, int] = (WIDTH, HEIGHT),
    ) -> None:
        self.resolutions = RESOLUTIONS
        self.selected_resolution = 1
        self.edit_mode = False
        self.on_resize = on_resize
        self._layout(screen_size[0])

    @property
    def labels(self) -> list[str]:
        return [f"{w}x{h}" for w, h in self.resolutions]

    def _layout(self, screen_width: int) -> None:
        self.bounds = Rect(
            screen_width / 2.0 - self.DROPDOWN_WIDTH // 2,
            float(self.DROPDOWN_TOP),
            float(self.DROPDOWN_WIDTH),
            float(self.DROPDOWN_HEIGHT),
        )
        step = self.bounds.height + self.ITEM_SPACING
        self.item_rects = [
            Rect(self.bounds.x, self.bounds.y + (i + 1) * step, self.bounds.width, self.bounds.height)
            for i in range(len(self.resolutions))
        ]

    def select_resolution(self, index: int) -> tuple[int, int]:
        """Choose a resolution; raise ValueError for one that does not exist."""
        if not 0 <= index < len(self.resolutions):
            raise ValueError(f"Screen resolution not implemented: {index}")
        self.selected_resolution = index
        size = self.resolutions[index]
        if self.on_resize is not None:
            self.on_resize(size)
        return size

    def update(
        self,
        surface: pygame.Surface | None,
        mouse_pos: tuple[float, float] = (0, 0),
        clicked: bool = False,
    ) -> tuple[int, int] | None:
        """Handle a click and draw; return the new resolution if it changed."""
        if surface is not None:
            self._layout(surface.get_width())
        mx, my = mouse_pos
        resized = None
        if clicked:
            if self.edit_mode:
                previous = self.selected_resolution
                choice = next(
                    (i for i, rect in enumerate(self.item_rects) if rect.contains_point(mx, my)),
                    previous,
                )
                self.edit_mode = False
                if choice != previous:
                    resized = self.select_resolution(choice)
            elif self.bounds.contains_point(mx, my):
                self.edit_mode = True

        if surface is not None:
            self._draw(surface)
        return resized

    def _draw(self, surface: pygame.Surface) -> None:
        font = _default_font(20)
        rects = [self.bounds] + (self.item_rects if self.edit_mode else [])
        labels = [self.labels[self.selected_resolution]] + (self.labels if self.edit_mode else [])
        for idx, (rect, label) in enumerate(zip(rects, labels)):
            highlighted = idx > 0 and idx - 1 == self.selected_resolution
            _fill(surface, rect.x, rect.y, rect.width, rect.height,
                  (201, 239, 254) if highlighted else LIGHTGRAY)
            _outline(surface, rect.x, rect.y, rect.width, rect.height, GRAY)
            text_x = rect.x + center_text_x(math.trunc(rect.width), font.size(label)[0])
            surface.blit(
                font.render(label, True, DARKGRAY),
                (math.trunc(text_x), math.trunc(rect.y + (rect.height - font.get_height()) / 2)),
            )