"""Game rules: spawning, movement, combat, pickups, events and game state."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import logger
from .characters import MoveDirection, Player, Zombie, spawn_zombie
from .definitions import (
    DEFAULT_CHEST_SPAWNRATE,
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_PLAYER_WIDTH,
    DEFAULT_PROJECTILE_HEIGHT,
    DEFAULT_PROJECTILE_WIDTH,
    DEFAULT_XP_ORB_RADIUS,
    DEFAULT_ZOMBIE_DAMAGE,
    DEFAULT_ZOMBIE_HEIGHT,
    DEFAULT_ZOMBIE_WIDTH,
    HEIGHT,
    MAX_DISTANCE_FROM_PLAYER,
    WIDTH,
    Card,
    CardType,
    EnemyType,
    GameState,
    NetPlayer,
    ObjectType,
    Position,
    PositionF,
    Rect,
    check_collision_circles,
)
from .logger import LogLevel
from .objects import Chest, GameObject, XPOrb
from .projectile import Projectile
from .tools import current_epoch_ms, rectangle_center, rectangle_center_f, vector_distance
from .world import World

_INT_MAX = 2**31 - 1


class Difficulty(Enum):
    """How often enemies spawn; the value is the interval in milliseconds."""

    EASY = 3000
    MEDIUM = 2000
    HARD = 1000

    @property
    def spawn_interval_ms(self) -> int:
        return self.value


@dataclass
class InputState:
    """Keyboard state for one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    released: bool = False
    toggle_debug: bool = False


def _noop() -> None:
    return None


class GameHandler:
    """Runs one game: the world, its enemies, projectiles, pickups and events."""

    def __init__(
        self,
        event_handler: Any = None,
        connection: Any = None,
        *,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
        screen_size: tuple[int, int] = (WIDTH, HEIGHT),
    ) -> None:
        self.clock = clock if clock is not None else current_epoch_ms
        self.rng = rng
        self.screen_width, self.screen_height = screen_size
        self.event_handler = event_handler
        self.connection = connection

        self.on_game_over: Callable[[], None] = _noop
        self.on_player_level_up: Callable[[], None] = _noop
        self.on_player_opened_chest: Callable[[], None] = _noop

        self.state = GameState.RUNNING
        self.zombies_killed = 0
        self.elapsed_time = 0
        self.player_is_moving = False
        self.projectile_id = 0
        self.last_time_player_fired = 0
        self._initialize()

        if self.connection is not None:
            self.connection.start_receiving()
            self.connection.send_message("Hello server!")

    def _initialize(self) -> None:
        self.enemy_id = 0
        self.world = World()
        self.last_time_enemy_spawned = 0
        self.difficulty = Difficulty.EASY
        self.player_fire_destination = Position(0, 0)
        self.debug_mode = False
        self.game_over = False
        self.start_time = self.clock()

        size = self.world.size
        self.world.player.position = Position(size.x // 2, size.y // 2)
        self.world.objects.add(Chest(Position(size.x // 2 + 100, size.y // 2)))

    # State accessors

    @property
    def player(self) -> Player:
        return self.world.player

    @property
    def player_position(self) -> Position:
        return self.world.player.position

    @property
    def player_level(self) -> int:
        return self.world.player.level

    # Frame update

    def update(self, controls: InputState | None = None) -> None:
        """Advance the game by one frame."""
        controls = controls if controls is not None else InputState()
        if self.state is GameState.RUNNING:
            self._handle_player(controls)
            self._handle_other_players()
            self._handle_enemies()
            self.move_projectiles()
            self._handle_general_input(controls)
            self.handle_events()
            self._handle_time()
        elif self.state is GameState.PLAYER_DEAD:
            self.state = GameState.PAUSED

    def _handle_player(self, controls: InputState) -> None:
        current_ms = self.clock()
        nearest = self.nearest_enemy_position()
        player_pos = self.player_position
        player_rect = Rect(player_pos.x, player_pos.y, DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT)
        enemy_rect = Rect(nearest.x, nearest.y, DEFAULT_ZOMBIE_WIDTH, DEFAULT_ZOMBIE_HEIGHT)
        if player_rect.collides(enemy_rect):
            self.world.player.take_damage(DEFAULT_ZOMBIE_DAMAGE)
            if self.world.player.health <= 0:
                self.on_game_over()
                self._initialize()

        if self.should_player_fire(current_ms) and nearest.x != 0 and nearest.y != 0:
            self.last_time_player_fired = current_ms
            self.player_fire_destination = rectangle_center(
                nearest.x, nearest.y, DEFAULT_ZOMBIE_WIDTH, DEFAULT_ZOMBIE_HEIGHT
            )
            pos = self.player_position
            start = rectangle_center_f(
                float(pos.x), float(pos.y), DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT
            )
            destination = PositionF(
                float(self.player_fire_destination.x), float(self.player_fire_destination.y)
            )
            self.world.projectiles[self.projectile_id] = Projectile(start, destination)
            self.projectile_id += 1

        self.handle_pickup()
        self._handle_player_movement(controls)
        if self.connection is not None:
            pos = self.player_position
            self.connection.send_message(f"{pos.x},{pos.y}")

    def _handle_player_movement(self, controls: InputState) -> None:
        player = self.world.player
        size = self.world.size
        moves = (
            (controls.up, MoveDirection.UP, 0),
            (controls.left, MoveDirection.LEFT, 0),
            (controls.down, MoveDirection.DOWN, size.y),
            (controls.right, MoveDirection.RIGHT, size.x),
        )
        for held, direction, limit in moves:
            if held:
                player.move(direction, limit)
                self.player_is_moving = True
        if controls.released:
            self.player_is_moving = False

    def _handle_other_players(self) -> None:
        self.world.other_players = (
            self.connection.players if self.connection is not None else None
        )

    def _handle_enemies(self) -> None:
        current_ms = self.clock()
        if self.should_enemy_spawn(current_ms):
            self.last_time_enemy_spawned = current_ms
            self.spawn_enemy()
        self.move_enemies()

    def _handle_general_input(self, controls: InputState) -> None:
        if controls.toggle_debug:
            self.debug_mode = not self.debug_mode

    def _handle_time(self) -> None:
        self.elapsed_time = self.clock() - self.start_time

    # Viewport queries

    def _viewport_bounds(self) -> tuple[int, int, int, int]:
        pos = self.player_position
        size = self.world.size
        half_w = self.screen_width // 2
        half_h = self.screen_height // 2
        x_start = pos.x - half_w if pos.x - half_w > 0 else 0
        x_end = pos.x + half_w if pos.x + half_w < size.x else size.x
        y_start = pos.y - half_h if pos.y - half_h > 0 else 0
        y_end = pos.y + half_h if pos.y + half_h < size.y else size.y
        return x_start, x_end, y_start, y_end

    def _visible(self, x: float, y: float) -> bool:
        x_start, x_end, y_start, y_end = self._viewport_bounds()
        return x_start <= x <= x_end and y_start <= y <= y_end

    def objects_in_viewport(self) -> list[GameObject]:
        return [o for o in list(self.world.objects) if self._visible(o.position.x, o.position.y)]

    def enemies_in_viewport(self) -> list[Zombie]:
        return [
            z for _, z in sorted(self.world.zombies.items())
            if self._visible(z.position.x, z.position.y)
        ]

    def projectiles_in_viewport(self) -> list[Projectile]:
        return [
            p for _, p in sorted(self.world.projectiles.items(), key=lambda item: item[0])
            if self._visible(p.position.x, p.position.y)
        ]

    def other_players_in_viewport(self) -> list[NetPlayer]:
        others = self.world.other_players
        if others is None:
            return []
        return [
            p for _, p in sorted(list(others.items()), key=lambda item: item[0])
            if self._visible(p.x, p.y)
        ]

    # Timing

    def should_enemy_spawn(self, current_ms: int) -> bool:
        """Whether enough time has passed to spawn an enemy; the first call only starts the timer."""
        if self.last_time_enemy_spawned == 0:
            self.last_time_enemy_spawned = current_ms
            return False
        return current_ms - self.last_time_enemy_spawned >= self.difficulty.spawn_interval_ms

    def should_player_fire(self, current_ms: int) -> bool:
        return current_ms - self.last_time_player_fired >= self.world.player.fire_speed

    # Enemies and projectiles

    def nearest_enemy_position(self) -> Position:
        """Position of the zombie nearest the player, or (0, 0) if there is none."""
        nearest = Position(0, 0)
        min_distance = _INT_MAX
        player_pos = self.player_position
        for zombie in list(self.world.zombies.values()):
            zombie_pos = zombie.position
            distance = math.trunc(vector_distance(player_pos, zombie_pos))
            if distance < min_distance:
                min_distance = distance
                nearest = zombie_pos
        return nearest

    def move_enemies(self) -> None:
        """Step every zombie towards the player on each axis."""
        player_pos = self.player_position
        for zombie in list(self.world.zombies.values()):
            pos = zombie.position
            x, y = pos.x, pos.y
            if pos.x > player_pos.x:
                x = math.trunc(x - zombie.move_speed)
            if pos.x < player_pos.x:
                x = math.trunc(x + zombie.move_speed)
            if pos.y > player_pos.y:
                y = math.trunc(y - zombie.move_speed)
            if pos.y < player_pos.y:
                y = math.trunc(y + zombie.move_speed)
            zombie.position = Position(x, y)

    def move_projectiles(self) -> None:
        """Advance projectiles; drop those that arrived or hit something."""
        projectiles = self.world.projectiles
        finished = [
            pid for pid, projectile in list(projectiles.items())
            if projectile.has_reached_destination() or self._projectile_hits(projectile)
            or projectile.advance()
        ]
        for pid in finished:
            projectiles.pop(pid, None)

    def _projectile_hits(self, projectile: Projectile) -> bool:
        hit = False
        dead: list[int] = []
        area = Rect(
            projectile.position.x,
            projectile.position.y,
            DEFAULT_PROJECTILE_WIDTH,
            DEFAULT_PROJECTILE_HEIGHT,
        )
        for zid, zombie in list(self.world.zombies.items()):
            if zombie.hitbox.area.collides(area):
                hit = True
                if zombie.take_damage(projectile.damage):
                    dead.append(zid)
                    self.world.spawn_xp_orb(zombie.position)
                    self._update_zombies_killed()
        for zid in dead:
            self.world.zombies.pop(zid, None)
        return hit

    def _update_zombies_killed(self) -> None:
        self.zombies_killed += 1
        if self.zombies_killed % DEFAULT_CHEST_SPAWNRATE == 0:
            self.spawn_chest()

    def spawn_enemy(self) -> Zombie:
        """Spawn a zombie out of view of the player."""
        zombie = spawn_zombie(self.player_position, MAX_DISTANCE_FROM_PLAYER, self.rng)
        self.world.zombies[self.enemy_id] = zombie
        self.enemy_id += 1
        return zombie

    def spawn_chest(self) -> Chest:
        return self.world.spawn_chest(self.rng)

    # Pickups and upgrades

    def handle_pickup(self) -> None:
        """Collect every object within the player's pickup radius."""
        player = self.world.player
        center = self.player_position.to_vector()
        picked = [
            o for o in list(self.world.objects)
            if check_collision_circles(
                center, player.pickup_radius, o.position.to_vector(), DEFAULT_XP_ORB_RADIUS
            )
        ]
        for obj in picked:
            if obj.type is ObjectType.XP_ORB and isinstance(obj, XPOrb):
                if player.gain_xp(obj.xp_value):
                    self.on_player_level_up()
                if player.level == 3:
                    self.difficulty = Difficulty.MEDIUM
                elif player.level == 8:
                    self.difficulty = Difficulty.HARD
            elif obj.type is ObjectType.CHEST:
                self.on_player_opened_chest()
            elif obj.type is not ObjectType.NONE:
                logger.log(LogLevel.ERROR, "Object not implemented!")
            self.world.objects.discard(obj)

    def handle_selected_card(self, card: Card) -> None:
        """Apply the upgrade of a chosen level-up card."""
        player = self.world.player
        card_type = CardType(card.type)
        if card_type is CardType.SPEED:
            player.move_speed = player.move_speed * 1.05
        elif card_type is CardType.ATTACK_SPEED:
            player.fire_speed = player.fire_speed * 0.95
        elif card_type is CardType.HEALTH:
            player.health = player.health * 1.05
        elif card_type is CardType.PICKUP:
            player.pickup_radius = player.pickup_radius * 1.05
        elif card_type is CardType.THORN_AURA:
            player.add_or_upgrade_spell(CardType.THORN_AURA)

    def debug_level_up_player(self) -> None:
        player = self.world.player
        player.gain_xp(player.level_threshold - player.xp)

    # Events

    def handle_events(self) -> None:
        """Run every event whose time (in seconds of the current minute) has passed."""
        if self.event_handler is None:
            return
        seconds = (self.elapsed_time % 60000) // 1000
        due: list[int] = []
        for idx, event in enumerate(list(self.event_handler.events)):
            if seconds <= event.time:
                continue
            logger.debug("Executing event", event.id, event.name)
            for enemy_type, counts in event.enemies.items():
                for count in counts:
                    if enemy_type is EnemyType.ZOMBIE:
                        for _ in range(count):
                            self.spawn_enemy()
                    else:
                        logger.log(LogLevel.ERROR, "Enemy type in event does not exist")
            due.append(idx)
        for idx in reversed(due):
            self.event_handler.remove_event(idx)

    # Game state

    def pause(self) -> None:
        self.state = GameState.PAUSED

    def unpause(self) -> None:
        """Resume, keeping the elapsed time from before the pause."""
        self.start_time = self.clock() - self.elapsed_time
        self.state = GameState.RUNNING

    def reset_start_time(self) -> None:
        self.start_time = self.clock()