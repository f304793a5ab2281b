import random
import time

from wavesurvivor.definitions import (
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_PLAYER_WIDTH,
    FPS,
    HEIGHT,
    WIDTH,
    Position,
    PositionF,
)
from wavesurvivor import tools


def test_player_maps_to_screen_centre():
    player = Position(5000, 5000)
    assert tools.world_to_screen(player, player) == Position(WIDTH // 2, HEIGHT // 2)


def test_world_to_screen_preserves_offsets():
    player = Position(100, 200)
    a = tools.world_to_screen(Position(150, 230), player, 800, 600)
    b = tools.world_to_screen(Position(160, 250), player, 800, 600)
    assert (b.x - a.x, b.y - a.y) == (10, 20)


def test_world_to_screen_f_gives_whole_units():
    result = tools.world_to_screen_f(PositionF(10.7, 3.2), Position(0, 0), 800, 600)
    assert result.x.is_integer()
    assert result.y.is_integer()
    centre = tools.world_to_screen_f(PositionF(42.0, 17.0), Position(42, 17), 800, 600)
    assert centre == PositionF(400.0, 300.0)


def test_rectangle_center():
    centre = tools.rectangle_center(0, 0, DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT)
    assert centre == Position(DEFAULT_PLAYER_WIDTH // 2, DEFAULT_PLAYER_HEIGHT // 2)


def test_rectangle_center_f_truncates():
    assert tools.rectangle_center_f(0.5, 0.0, 20, 20) == PositionF(10.0, 10.0)


def test_center_text_invariants():
    assert tools.center_text_x(200, 200) == 0
    assert tools.center_text_y(40, 40) == 0
    wide = tools.center_text_x(300, 100)
    narrow = tools.center_text_x(300, 50)
    assert narrow > wide


def test_time_conversions():
    assert tools.tick_to_ms(0) == 0
    assert tools.tick_to_ms(FPS * 1000) == 1
    assert tools.ms_to_s(1) == 1000


def test_current_epoch_ms_is_now():
    before = int(time.time() * 1000)
    now = tools.current_epoch_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_random_position_stays_in_bounds():
    rng = random.Random(1)
    for _ in range(200):
        pos = tools.random_position(10, 20, 30, 40, rng)
        assert 10 <= pos.x <= 20
        assert 30 <= pos.y <= 40


def test_random_position_accepts_reversed_bounds():
    rng = random.Random(2)
    for _ in range(50):
        pos = tools.random_position(20, 10, 40, 30, rng)
        assert 10 <= pos.x <= 20
        assert 30 <= pos.y <= 40


def test_random_position_fixed_bounds():
    assert tools.random_position(7, 7, 9, 9, random.Random(3)) == Position(7, 9)


def test_random_sign_yields_both_signs():
    rng = random.Random(4)
    signs = {tools.random_sign(rng) for _ in range(100)}
    assert signs == {-1, 1}


def test_random_coordinate_within_distance():
    rng = random.Random(5)
    for _ in range(100):
        value = tools.random_coordinate(500, 50, rng)
        assert 450 <= value <= 550
    assert tools.random_coordinate(500, 0, rng) == 500


def test_vector_distance():
    assert tools.vector_distance(Position(0, 0), Position(3, 4)) == 5.0
    a, b = Position(12, -7), Position(-3, 22)
    assert tools.vector_distance(a, b) == tools.vector_distance(b, a)
    assert tools.vector_distance(a, a) == 0.0