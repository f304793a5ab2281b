import random

import pytest

from wavesurvivor.characters import Character, MoveDirection, Player, Zombie, spawn_zombie
from wavesurvivor.definitions import (
    DEFAULT_PLAYER_ATTACK_SPEED,
    DEFAULT_PLAYER_HEALTH,
    DEFAULT_PLAYER_LEVEL_THRESHOLD,
    DEFAULT_ZOMBIE_HEALTH,
    DEFAULT_ZOMBIE_XP_VALUE,
    MAX_DISTANCE_FROM_PLAYER,
    MIN_DISTANCE_FROM_PLAYER,
    WORLD_WIDTH,
    CardType,
    Position,
)
from wavesurvivor.spells import ThornAura


def test_character_defaults():
    c = Character()
    assert c.health == DEFAULT_PLAYER_HEALTH
    assert c.max_health == DEFAULT_PLAYER_HEALTH
    assert c.position == Position(0, 0)


def test_set_position_moves_hitbox():
    c = Character()
    c.position = Position(30, 40)
    assert c.position == Position(30, 40)
    assert (c.hitbox.area.x, c.hitbox.area.y) == (30.0, 40.0)


def test_take_damage_reports_death():
    z = Zombie()
    assert z.health == DEFAULT_ZOMBIE_HEALTH
    assert z.take_damage(DEFAULT_ZOMBIE_HEALTH - 1) is False
    assert z.take_damage(1) is True


def test_health_truncates():
    p = Player()
    p.health = 105.7
    assert p.health == 105


@pytest.mark.parametrize(
    "direction, axis, sign, limit",
    [
        (MoveDirection.UP, "y", -1, 0),
        (MoveDirection.LEFT, "x", -1, 0),
        (MoveDirection.DOWN, "y", 1, 1000),
        (MoveDirection.RIGHT, "x", 1, 1000),
    ],
)
def test_move_steps_by_speed(direction, axis, sign, limit):
    p = Player()
    p.position = Position(50, 50)
    before = getattr(p.position, axis)
    p.move(direction, limit)
    after = getattr(p.position, axis)
    assert after - before == sign * p.move_speed
    assert p.hitbox.area.x == p.position.x
    assert p.hitbox.area.y == p.position.y


@pytest.mark.parametrize(
    "direction, limit",
    [(MoveDirection.UP, 45), (MoveDirection.DOWN, 55), (MoveDirection.LEFT, 40), (MoveDirection.RIGHT, 60)],
)
def test_move_blocked_by_limit(direction, limit):
    p = Player()
    p.position = Position(50, 50)
    p.move(direction, limit)
    assert p.position == Position(50, 50)


def test_gain_xp_below_threshold():
    p = Player()
    assert p.gain_xp(10) is False
    assert p.xp == 10
    assert p.level == 0


def test_gain_xp_levels_up():
    p = Player()
    old_max = p.max_health
    assert p.gain_xp(DEFAULT_PLAYER_LEVEL_THRESHOLD) is True
    assert p.level == 1
    assert p.xp == 0
    assert p.level_threshold == DEFAULT_PLAYER_LEVEL_THRESHOLD
    assert p.max_health > old_max
    assert p.fire_speed < DEFAULT_PLAYER_ATTACK_SPEED


def test_add_thorn_aura():
    p = Player()
    p.add_or_upgrade_spell(CardType.THORN_AURA)
    p.add_or_upgrade_spell(CardType.THORN_AURA)
    assert len(p.spells) == 2
    assert all(isinstance(s, ThornAura) for s in p.spells.values())


def test_add_unknown_spell_raises():
    with pytest.raises(ValueError):
        Player().add_or_upgrade_spell(CardType.SPEED)


def test_zombie_stats():
    z = Zombie(Position(7, 8))
    assert z.position == Position(7, 8)
    assert z.xp_value == DEFAULT_ZOMBIE_XP_VALUE
    assert z.hitbox.area.x == 7.0


@pytest.mark.parametrize("seed", range(40))
def test_spawn_zombie_away_from_player(seed):
    player = Position(5000, 5000)
    z = spawn_zombie(player, MAX_DISTANCE_FROM_PLAYER, random.Random(seed))
    dx = abs(z.position.x - player.x)
    dy = abs(z.position.y - player.y)
    assert MIN_DISTANCE_FROM_PLAYER <= dx <= MIN_DISTANCE_FROM_PLAYER + MAX_DISTANCE_FROM_PLAYER
    assert dy <= MIN_DISTANCE_FROM_PLAYER + MAX_DISTANCE_FROM_PLAYER


@pytest.mark.parametrize("seed", range(40))
def test_spawn_zombie_near_edge_stays_in_world_horizontally(seed):
    z = spawn_zombie(Position(50, 50), MAX_DISTANCE_FROM_PLAYER, random.Random(seed))
    assert 1 <= z.position.x <= WORLD_WIDTH - 1