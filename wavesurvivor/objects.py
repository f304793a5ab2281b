"""Objects lying in the world: chests and experience orbs."""

from __future__ import annotations

from .definitions import DEFAULT_ZOMBIE_XP_VALUE, Hitbox, ObjectType, Position


class GameObject:
    """Something that sits at a position in the world."""

    type: ObjectType = ObjectType.NONE

    def __init__(self, position: Position | None = None) -> None:
        self.position = position if position is not None else Position()
        self.hitbox = Hitbox()

    def __lt__(self, other: GameObject) -> bool:
        return self.position < other.position

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class Chest(GameObject):
    """A chest; picking it up opens the card screen."""

    type = ObjectType.CHEST


class XPOrb(GameObject):
    """An orb dropped by a killed zombie, worth some experience."""

    type = ObjectType.XP_ORB

    def __init__(self, position: Position | None = None) -> None:
        super().__init__(position)
        self.xp_value = DEFAULT_ZOMBIE_XP_VALUE