"""The card screen shown when the player levels up or opens a chest."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence
from typing import Any

import pygame

from . import logger
from .definitions import (
    CARD_DESCRIPTION_SIZE,
    CARD_TEXT_SIZE,
    HEIGHT,
    WIDTH,
    Card,
    CardEvent,
    CardType,
    Rect,
)
from .gui import WHITE, _default_font, _pg_rect
from .tools import center_text_x

NUM_CARD_FRAMES = 3
CARD_PADDING = 20
_FADE = (0, 0, 0, 100)


def _noop() -> None:
    return None


class LevelUpScreen:
    """Offers three different upgrade cards and applies the one clicked."""

    def __init__(
        self,
        game: Any,
        card_texture: pygame.Surface,
        images: Sequence[pygame.Surface],
        callback: Callable[[], None] | None = None,
        *,
        rng: random.Random | None = None,
        screen_size: tuple[int, int] = (WIDTH, HEIGHT),
    ) -> None:
        self.game = game
        self.card_texture = card_texture
        self.images = tuple(images)
        if len(self.images) != len(CardType):
            raise ValueError(f"expected {len(CardType)} card images, got {len(self.images)}")
        self.callback = callback if callback is not None else _noop
        self.rng = rng if rng is not None else random.Random()
        self.screen_width, self.screen_height = screen_size
        self.cards: list[Card] = []
        self.card_event = CardEvent()
        self._init_cards()

    def _init_cards(self) -> None:
        card_w, card_h = self.card_texture.get_size()
        self.frame_width = card_w / NUM_CARD_FRAMES
        self.source_rec = Rect(0.0, 0.0, self.frame_width, float(card_h))

        half_w = self.screen_width / 2.0
        y = self.screen_height / 2.0 - card_h / 2.0
        frame_half = (card_w // NUM_CARD_FRAMES) / 2.0
        xs = (
            half_w - card_w / 2.0 - CARD_PADDING,
            half_w - frame_half,
            half_w + frame_half + CARD_PADDING,
        )

        types = list(CardType)
        self.rng.shuffle(types)
        self.cards = [
            Card(
                id=idx,
                type=card_type,
                image=self.images[card_type],
                source_rec=Rect(0.0, 0.0, self.frame_width, float(card_h)),
                bounds=Rect(x, y, self.frame_width, float(card_h)),
            )
            for idx, (x, card_type) in enumerate(zip(xs, types))
        ]
        self.card_event = CardEvent()

    def reset(self) -> None:
        """Deal three new cards and forget the last selection."""
        self._init_cards()

    def update(
        self,
        surface: pygame.Surface | None,
        mouse_pos: tuple[float, float],
        mouse_down: bool = False,
        mouse_released: bool = False,
    ) -> Card | None:
        """Handle the mouse, apply a chosen card, then draw; return the chosen card."""
        mx, my = mouse_pos
        for card in self.cards:
            if card.bounds.contains_point(mx, my):
                card.state = 2 if mouse_down else 1
                if mouse_released:
                    self.card_event.selected_card = card.id
                    self.card_event.card_action = True
                    self.card_event.type = card.type
            else:
                card.state = 0
            card.source_rec.x = card.state * self.frame_width

        selected = None
        if self.card_event.card_action:
            selected = self.cards[self.card_event.selected_card]
            logger.debug("Clicked card", self.card_event.selected_card)
            self.game.handle_selected_card(selected)
            self.callback()

        if surface is not None:
            self._draw(surface)
        return selected

    def _draw(self, surface: pygame.Surface) -> None:
        fade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        fade.fill(_FADE)
        surface.blit(fade, (0, 0))

        text_font = _default_font(CARD_TEXT_SIZE)
        description_font = _default_font(CARD_DESCRIPTION_SIZE)
        for card in self.cards:
            b = card.bounds
            x_max = math.trunc(b.x + (b.x + b.width))
            text_x = center_text_x(x_max, text_font.size(card.text)[0])
            description_x = center_text_x(x_max, description_font.size(card.description)[0])
            image = card.image
            image_x = math.trunc((x_max - image.get_width()) / 2)
            top = b.y + CARD_TEXT_SIZE + 20

            surface.blit(
                self.card_texture, (math.trunc(b.x), math.trunc(b.y)), area=_pg_rect(card.source_rec)
            )
            surface.blit(text_font.render(card.text, True, WHITE), (text_x, math.trunc(top)))
            surface.blit(image, (image_x, math.trunc(top + image.get_height() - 30)))
            surface.blit(
                description_font.render(card.description, True, WHITE),
                (description_x, math.trunc(top + image.get_height() + 50)),
            )