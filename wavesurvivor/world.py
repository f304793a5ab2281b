"""The game world and everything in it."""

from __future__ import annotations

import random

from . import logger
from .characters import Player, Zombie
from .definitions import WORLD_HEIGHT, WORLD_WIDTH, NetPlayer, Position
from .objects import Chest, GameObject, XPOrb
from .projectile import Projectile
from .tools import random_position


class World:
    """Holds the player, other players, zombies, projectiles and objects."""

    def __init__(self) -> None:
        self.size = Position(WORLD_WIDTH, WORLD_HEIGHT)
        self.player = Player()
        self.player.position = Position(self.size.x // 2, self.size.y // 2)
        self.other_players: dict[int, NetPlayer] | None = None
        self.zombies: dict[int, Zombie] = {}
        self.objects: set[GameObject] = set()
        self.projectiles: dict[int, Projectile] = {}

    def spawn_xp_orb(self, position: Position) -> XPOrb:
        orb = XPOrb(position)
        self.objects.add(orb)
        return orb

    def spawn_chest(self, rng: random.Random | None = None) -> Chest:
        """Place a chest at a random spot anywhere in the world."""
        pos = random_position(0, self.size.x, 0, self.size.y, rng)
        chest = Chest(pos)
        self.objects.add(chest)
        logger.debug("Spawned chest at ", pos.x, pos.y)
        return chest