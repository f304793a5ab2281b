"""Characters that move through the world: the player and zombies."""

from __future__ import annotations

import math
import random
from enum import Enum

from . import logger
from .definitions import (
    DEFAULT_PLAYER_ATTACK_SPEED,
    DEFAULT_PLAYER_HEALTH,
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_PLAYER_LEVEL_THRESHOLD,
    DEFAULT_PLAYER_PICKUP_RADIUS,
    DEFAULT_PLAYER_WIDTH,
    DEFAULT_ZOMBIE_HEALTH,
    DEFAULT_ZOMBIE_HEIGHT,
    DEFAULT_ZOMBIE_MOVE_SPEED,
    DEFAULT_ZOMBIE_WIDTH,
    DEFAULT_ZOMBIE_XP_VALUE,
    MIN_DISTANCE_FROM_PLAYER,
    WORLD_HEIGHT,
    WORLD_WIDTH,
    CardType,
    Hitbox,
    Position,
)
from .spells import BaseSpell, ThornAura
from .tools import random_position, random_sign


class MoveDirection(Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Character:
    """Something with health and a position that its hitbox follows."""

    def __init__(self) -> None:
        self.max_health = DEFAULT_PLAYER_HEALTH
        self._health = DEFAULT_PLAYER_HEALTH
        self._position = Position(0, 0)
        self.move_speed = 10.0
        self.hitbox = Hitbox(self._position, DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT)

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = math.trunc(value)

    @property
    def position(self) -> Position:
        """A copy of the current position."""
        return Position(self._position.x, self._position.y)

    @position.setter
    def position(self, value: Position) -> None:
        self._position.x = math.trunc(value.x)
        self._position.y = math.trunc(value.y)
        self.update_hitbox()

    def update_hitbox(self) -> None:
        self.hitbox.update()

    def take_damage(self, damage: int) -> bool:
        """Lose health; return True if the character is now dead."""
        self._health -= damage
        return self._health <= 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position!r}, health={self._health})"


class Player(Character):
    """The player: gains experience, levels up and owns spells."""

    def __init__(self) -> None:
        super().__init__()
        self.move_speed = 10.0
        self.xp = 0
        self.level = 0
        self.level_threshold = DEFAULT_PLAYER_LEVEL_THRESHOLD
        self.pickup_radius = DEFAULT_PLAYER_PICKUP_RADIUS
        self._fire_speed = DEFAULT_PLAYER_ATTACK_SPEED
        self.spells: dict[int, BaseSpell] = {}
        self._num_spells = 0

    @property
    def fire_speed(self) -> int:
        """Milliseconds between shots."""
        return self._fire_speed

    @fire_speed.setter
    def fire_speed(self, value: float) -> None:
        self._fire_speed = math.trunc(value)

    def move(self, direction: MoveDirection, limit: int) -> None:
        """Take one step, unless it would reach or pass `limit` on that axis."""
        direction = MoveDirection(direction)
        pos = self._position
        if direction is MoveDirection.UP:
            new = pos.y - self.move_speed
            if new > limit:
                pos.y = math.trunc(new)
        elif direction is MoveDirection.LEFT:
            new = pos.x - self.move_speed
            if new > limit:
                pos.x = math.trunc(new)
        elif direction is MoveDirection.DOWN:
            new = pos.y + self.move_speed
            if new < limit:
                pos.y = math.trunc(new)
        else:
            new = pos.x + self.move_speed
            if new < limit:
                pos.x = math.trunc(new)
        self.update_hitbox()

    def gain_xp(self, xp_value: int) -> bool:
        """Add experience; return True if the player levelled up."""
        self.xp += xp_value
        return self._level_up()

    def add_or_upgrade_spell(self, spell: CardType) -> None:
        if CardType(spell) is not CardType.THORN_AURA:
            raise ValueError(f"spell is not implemented: {spell!r}")
        self.spells[self._num_spells] = ThornAura(self._num_spells)
        self._num_spells += 1

    def _level_up(self) -> bool:
        if self.xp < self.level_threshold:
            return False
        logger.debug("Player leveled up")
        self.level += 1
        self.xp = 0
        self.level_threshold = self.level * DEFAULT_PLAYER_LEVEL_THRESHOLD
        self.max_health += 20
        self._fire_speed -= 50
        self.move_speed += 0.01
        return True


class Zombie(Character):
    """An enemy that walks towards the player."""

    def __init__(self, position: Position | None = None) -> None:
        super().__init__()
        self._health = DEFAULT_ZOMBIE_HEALTH
        self.max_health = DEFAULT_ZOMBIE_HEALTH
        self.move_speed = DEFAULT_ZOMBIE_MOVE_SPEED
        self.hitbox.area.width = float(DEFAULT_ZOMBIE_WIDTH)
        self.hitbox.area.height = float(DEFAULT_ZOMBIE_HEIGHT)
        self.xp_value = DEFAULT_ZOMBIE_XP_VALUE
        if position is not None:
            self.position = position


def spawn_zombie(
    player_position: Position, max_distance: int, rng: random.Random | None = None
) -> Zombie:
    """A zombie placed at a random spot away from the player, out of view."""
    sign1 = random_sign(rng)
    sign2 = random_sign(rng)
    min_x = player_position.x + MIN_DISTANCE_FROM_PLAYER * sign1
    min_y = player_position.y + MIN_DISTANCE_FROM_PLAYER * sign2

    # The first sign decides the shape of both ranges.
    if sign1 == -1:
        bounds = (
            max(max_distance * sign1 + min_x, 1),
            max(min_x, 1),
            max(max_distance * sign1 + min_y, 1),
            max(min_y, 1),
        )
    else:
        bounds = (
            min(min_x, WORLD_WIDTH - 1),
            min(max_distance + min_x, WORLD_WIDTH - 1),
            min(min_y, WORLD_HEIGHT - 1),
            min(max_distance + min_y, WORLD_HEIGHT - 1),
        )
    return Zombie(random_position(*bounds, rng=rng))