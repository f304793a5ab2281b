"""Projectiles fired by the player."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .definitions import DEFAULT_PROJECTILE_DAMAGE, DEFAULT_PROJECTILE_SPEED, PositionF


@dataclass(eq=False)
class Projectile:
    """A projectile travelling in a straight line towards its destination."""

    position: PositionF = field(default_factory=PositionF)
    destination: PositionF = field(default_factory=PositionF)
    speed: float = DEFAULT_PROJECTILE_SPEED
    damage: int = DEFAULT_PROJECTILE_DAMAGE

    def has_reached_destination(self) -> bool:
        """Whether the destination is within one step of the current position."""
        x_start = math.trunc(self.position.x - self.speed)
        x_end = math.trunc(self.position.x + self.speed)
        y_start = math.trunc(self.position.y - self.speed)
        y_end = math.trunc(self.position.y + self.speed)
        return (
            x_start <= self.destination.x <= x_end
            and y_start <= self.destination.y <= y_end
        )

    def advance(self) -> None:
        """Move one step of `speed` towards the destination, keeping whole units."""
        angle = math.atan2(
            self.destination.y - self.position.y,
            self.destination.x - self.position.x,
        )
        new_x = self.position.x + math.cos(angle) * self.speed
        new_y = self.position.y + math.sin(angle) * self.speed
        self.position = PositionF(float(math.trunc(new_x)), float(math.trunc(new_y)))

    def __lt__(self, other: Projectile) -> bool:
        return self.position < other.position