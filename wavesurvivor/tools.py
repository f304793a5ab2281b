"""Time, coordinate, shape, text and random helpers."""

from __future__ import annotations

import math
import random
import time
from typing import Any

from .definitions import FPS, HEIGHT, WIDTH, Position, PositionF


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def tick_to_ms(tick: int) -> int:
    return _div_trunc(_div_trunc(tick, FPS), 1000)


def ms_to_s(ms: int) -> int:
    return ms * 1000


def current_epoch_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def world_to_screen(
    target: Position,
    player: Position,
    screen_width: int = WIDTH,
    screen_height: int = HEIGHT,
) -> Position:
    """Map a world position to the screen, with the player at the screen's centre."""
    return Position(
        target.x - player.x + screen_width // 2,
        target.y - player.y + screen_height // 2,
    )


def world_to_screen_f(
    target: PositionF,
    player: Position,
    screen_width: int = WIDTH,
    screen_height: int = HEIGHT,
) -> PositionF:
    """Like world_to_screen for float positions; the result is truncated to whole units."""
    x = target.x - player.x + screen_width // 2
    y = target.y - player.y + screen_height // 2
    return PositionF(float(math.trunc(x)), float(math.trunc(y)))


def rectangle_center(start_x: int, start_y: int, width: int, height: int) -> Position:
    return Position(start_x + _div_trunc(width, 2), start_y + _div_trunc(height, 2))


def rectangle_center_f(start_x: float, start_y: float, width: int, height: int) -> PositionF:
    """Centre of a rectangle with a float origin, truncated to whole units."""
    x = start_x + width / 2.0
    y = start_y + height / 2.0
    return PositionF(float(math.trunc(x)), float(math.trunc(y)))


def center_text_x(width: int, text_width: int) -> int:
    """X offset that centres text of the given measured width within `width`."""
    return _div_trunc(width - text_width, 2)


def center_text_y(height: int, font_size: int) -> int:
    return _div_trunc(height - font_size, 2)


def _source(rng: random.Random | None) -> Any:
    return random if rng is None else rng


def random_coordinate(start: int, max_distance: int, rng: random.Random | None = None) -> int:
    """A coordinate within max_distance of start, either side."""
    offset = _source(rng).randint(-max_distance, max_distance)
    return start + offset


def random_position(
    min_x: int, max_x: int, min_y: int, max_y: int, rng: random.Random | None = None
) -> Position:
    """A random position with both bounds of each axis inclusive, in either order."""
    source = _source(rng)
    return Position(
        source.randint(min(min_x, max_x), max(min_x, max_x)),
        source.randint(min(min_y, max_y), max(min_y, max_y)),
    )


def random_sign(rng: random.Random | None = None) -> int:
    """-1 or 1, each with equal chance."""
    value = _source(rng).randint(0, 1)
    if value == 0:
        return -1
    return 1


def vector_distance(a: Any, b: Any) -> float:
    """Euclidean distance between two objects with x and y."""
    return math.hypot(a.x - b.x, a.y - b.y)