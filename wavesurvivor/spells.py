"""Spells the player can own."""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from .definitions import (
    DEFAULT_BOLT_DAMAGE,
    DEFAULT_BOLT_FIRE_RATE,
    DEFAULT_THORN_DAMAGE,
    DEFAULT_THORN_FIRE_RATE,
    Hitbox,
    SpellType,
)


@total_ordering
class BaseSpell:
    """A spell; spells compare, order and hash by id."""

    def __init__(
        self,
        spell_type: SpellType,
        spell_id: int = 0,
        level: int = 1,
        damage: int = 0,
        fire_rate: float = 0.0,
        texture: Any = None,
        shader: Any = None,
    ) -> None:
        self.id = spell_id
        self.level = level
        self.damage = damage
        self.fire_rate = float(fire_rate)
        self.hitbox = Hitbox()
        self.type = spell_type
        self.texture = texture
        self.shader = shader

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSpell):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: BaseSpell) -> bool:
        if not isinstance(other, BaseSpell):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, level={self.level})"


class Bolt(BaseSpell):
    """A bolt fired at enemies."""

    def __init__(self, spell_id: int, texture: Any = None, shader: Any = None) -> None:
        super().__init__(
            SpellType.SPELL_BOLT,
            spell_id=spell_id,
            level=1,
            damage=DEFAULT_BOLT_DAMAGE,
            fire_rate=DEFAULT_BOLT_FIRE_RATE,
            texture=texture,
            shader=shader,
        )


class ThornAura(BaseSpell):
    """An aura of thorns around the player."""

    def __init__(self, spell_id: int = 0) -> None:
        super().__init__(
            SpellType.SPELL_THORN_AURA,
            spell_id=spell_id,
            level=1,
            damage=DEFAULT_THORN_DAMAGE,
            fire_rate=DEFAULT_THORN_FIRE_RATE,
        )