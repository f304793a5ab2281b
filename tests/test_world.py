import random

from wavesurvivor.characters import Player
from wavesurvivor.definitions import WORLD_HEIGHT, WORLD_WIDTH, ObjectType, Position
from wavesurvivor.objects import Chest, XPOrb
from wavesurvivor.world import World


def test_world_starts_with_player_in_centre():
    w = World()
    assert w.size == Position(WORLD_WIDTH, WORLD_HEIGHT)
    assert isinstance(w.player, Player)
    assert w.player.position == Position(WORLD_WIDTH // 2, WORLD_HEIGHT // 2)
    assert w.zombies == {}
    assert w.projectiles == {}
    assert w.objects == set()
    assert w.other_players is None


def test_spawn_xp_orb():
    w = World()
    orb = w.spawn_xp_orb(Position(12, 34))
    assert orb in w.objects
    assert isinstance(orb, XPOrb)
    assert orb.position == Position(12, 34)
    assert orb.type is ObjectType.XP_ORB


def test_spawn_chest_within_world():
    w = World()
    rng = random.Random(3)
    chests = [w.spawn_chest(rng) for _ in range(20)]
    assert len(w.objects) == 20
    for chest in chests:
        assert isinstance(chest, Chest)
        assert 0 <= chest.position.x <= WORLD_WIDTH
        assert 0 <= chest.position.y <= WORLD_HEIGHT


def test_spawn_chest_is_reproducible_with_seed():
    a = World().spawn_chest(random.Random(9))
    b = World().spawn_chest(random.Random(9))
    assert a.position == b.position