"""Shared constants, geometry primitives and enumerations for the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

EVENTS_PATH = "Events/"

# Window properties
WIDTH = 1280
HEIGHT = 720
FPS = 60
TITLE = "Wave Survivor"

# Sizes
DEFAULT_PLAYER_WIDTH = 20
DEFAULT_PLAYER_HEIGHT = 20
DEFAULT_ZOMBIE_WIDTH = 20
DEFAULT_ZOMBIE_HEIGHT = 20
DEFAULT_ZOMBIE_RADIUS = 10
DEFAULT_PROJECTILE_WIDTH = 24
DEFAULT_PROJECTILE_HEIGHT = 24
DEFAULT_XP_ORB_RADIUS = 10
WORLD_WIDTH = 10000
WORLD_HEIGHT = 10000

# Speed
DEFAULT_PLAYER_MOVE_SPEED = 7.0
DEFAULT_ZOMBIE_MOVE_SPEED = 1.0
DEFAULT_PROJECTILE_SPEED = 5.0

# Health
DEFAULT_PLAYER_HEALTH = 100
DEFAULT_ZOMBIE_HEALTH = 50

# Damage
DEFAULT_ZOMBIE_DAMAGE = 2
DEFAULT_PROJECTILE_DAMAGE = 5

# Player stats
DEFAULT_PLAYER_PICKUP_RADIUS = 20.0
DEFAULT_PLAYER_ATTACK_SPEED = 800

# Render settings
MAX_DISTANCE_FROM_PLAYER = 1000
MIN_DISTANCE_FROM_PLAYER = 300

# XP values
DEFAULT_ZOMBIE_XP_VALUE = 20
DEFAULT_PLAYER_LEVEL_THRESHOLD = 100

# Spawn rates
DEFAULT_CHEST_SPAWNRATE = 100

# Cards; the text tables are indexed by CardType
CARD_TEXT_SIZE = 20
CARD_DESCRIPTION_SIZE = 10

CARD_TEXT = (
    "Speed",
    "Damage",
    "Attack speed",
    "Health",
    "Pickup",
    "Thorn aura",
)

CARD_DESCRIPTIONS = (
    "Move speed +5%",
    "Damage +5%",
    "Attack speed +5%",
    "Health +5%",
    "Pickup +5%",
    "Creates a thorn aura around player",
)

# Spells
DEFAULT_THORN_AURA = 30
DEFAULT_THORN_DAMAGE = 10
DEFAULT_THORN_FIRE_RATE = 1100
DEFAULT_BOLT_FIRE_RATE = 800
DEFAULT_BOLT_DAMAGE = 10

# Main menu button ids
MAIN_MENU_BUTTON_START_ID = 0
MAIN_MENU_BUTTON_OPTIONS_ID = 1
MAIN_MENU_BUTTON_EXIT_ID = 2

NUM_BUTTON_FRAMES = 3


@dataclass(order=True)
class Position:
    """Integer position in world or screen space."""

    x: int = 0
    y: int = 0

    def to_vector(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))


@dataclass(order=True)
class PositionF:
    """Floating-point position in world or screen space."""

    x: float = 0.0
    y: float = 0.0

    def to_vector(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))


@dataclass
class Rect:
    """Axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rect) -> bool:
        """Whether the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Whether the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class Hitbox:
    """A rectangle that follows a source position."""

    def __init__(
        self,
        source: Position | None = None,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        self.source = source if source is not None else Position()
        self.area = Rect(float(self.source.x), float(self.source.y), float(width), float(height))

    def is_touching(self, other: Hitbox) -> bool:
        return self.area.collides(other.area)

    def update(self) -> None:
        """Move the area to where the source position is now."""
        self.area.x = float(self.source.x)
        self.area.y = float(self.source.y)

    def __repr__(self) -> str:
        return f"Hitbox(source={self.source!r}, area={self.area!r})"


def check_collision_circles(
    center1: tuple[float, float],
    radius1: float,
    center2: tuple[float, float],
    radius2: float,
) -> bool:
    """Whether two circles, given as (x, y) centres and radii, overlap or touch."""
    distance = math.hypot(center2[0] - center1[0], center2[1] - center1[1])
    return distance <= radius1 + radius2


class ObjectType(Enum):
    NONE = 0
    XP_ORB = 1
    ITEM = 2
    CHEST = 3


class InstanceType(Enum):
    PLAYER = 0
    ZOMBIE = 1
    OBJECT = 2


class CardType(IntEnum):
    SPEED = 0
    DAMAGE = 1
    ATTACK_SPEED = 2
    HEALTH = 3
    PICKUP = 4
    THORN_AURA = 5


@dataclass
class CardEvent:
    selected_card: int = -1
    card_action: bool = False
    type: CardType | None = None


@dataclass
class Card:
    """A level-up card; text and description default to those of its type."""

    id: int
    type: CardType
    text: str = ""
    description: str = ""
    image: Any = None
    source_rec: Rect = field(default_factory=Rect)
    bounds: Rect = field(default_factory=Rect)
    state: int = 0

    def __post_init__(self) -> None:
        if not self.text:
            self.text = CARD_TEXT[self.type]
        if not self.description:
            self.description = CARD_DESCRIPTIONS[self.type]


@dataclass
class MenuButton:
    id: int
    text: str
    source_rec: Rect = field(default_factory=Rect)
    bounds: Rect = field(default_factory=Rect)
    state: int = 0


class RenderState(Enum):
    GAME = 0
    MAIN_MENU = 1
    OPTIONS = 2
    LEVEL_UP = 3


class SpellType(Enum):
    SPELL_BOLT = 0
    SPELL_THORN_AURA = 1


class TextureName(Enum):
    BACKGROUND_TEXTURE = 0
    PLAYER_TEXTURE = 1
    PLAYER_MOVE_ANIMATION = 2
    PLAYER_IDLE_ANIMATION = 3
    ZOMBIE_TEXTURE = 4
    XP_ORB_TEXTURE = 5
    CHEST_TEXTURE = 6
    CARD_TEXTURE = 7
    DAMAGE_UPGRADE_TEXTURE = 8
    HEALTH_UPGRADE_TEXTURE = 9
    MOVE_SPEED_UPGRADE_TEXTURE = 10
    FIRE_SPEED_UPGRADE_TEXTURE = 11
    PICKUP_UPGRADE_TEXTURE = 12
    THORN_AURA_TEXTURE = 13
    BOLT_TEXTURE = 14
    BUTTON_TEXTURE = 15
    MAIN_MENU_BACKGROUND_TEXTURE = 16
    ALT_MENU_BACKGROUND_TEXTURE = 17
    CHARACTER_SELECT_BORDER_TEXTURE = 18


class ShaderName(Enum):
    XP_ORB_SHADER = 0


class EnemyType(IntEnum):
    ERROR = 0
    ZOMBIE = 1


@dataclass
class Event:
    """A timed spawn event: at `time` seconds, spawn the listed enemies."""

    id: int
    name: str
    time: int
    enemies: dict[EnemyType, list[int]] = field(default_factory=dict)


class GameState(Enum):
    RUNNING = 0
    PAUSED = 1
    PLAYER_DEAD = 2
    WIN = 3


@dataclass
class NetPlayer:
    """Another player's position as reported by the server; id -1 means invalid."""

    id: int = -1
    x: int = 0
    y: int = 0