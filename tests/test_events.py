import pytest

from wavesurvivor.definitions import EnemyType
from wavesurvivor.events import EventHandler, EventParser, enemy_type_from_string

SAMPLE = """EVENT first_wave
TIME=10
SPAWN=ZOMBIE:5, ZOMBIE:2
END
EVENT second_wave
TIME=30
SPAWN=ZOMBIE:1
END
"""


def write_events(directory, name, text):
    (directory / name).write_text(text, encoding="utf-8")


def test_enemy_type_from_string():
    assert enemy_type_from_string("ZOMBIE") is EnemyType.ZOMBIE
    assert enemy_type_from_string("zombie") is EnemyType.ERROR


def test_parse_spawn_single():
    assert EventParser().parse_spawn_str("ZOMBIE:5") == {EnemyType.ZOMBIE: [5]}


def test_parse_spawn_multiple_with_space():
    assert EventParser().parse_spawn_str("ZOMBIE:5, ZOMBIE:3") == {EnemyType.ZOMBIE: [5, 3]}


def test_parse_spawn_three_entries():
    result = EventParser().parse_spawn_str("ZOMBIE:1, ZOMBIE:2, ZOMBIE:3")
    assert result == {EnemyType.ZOMBIE: [1, 2, 3]}


def test_parse_spawn_without_space_loses_following_entries():
    assert EventParser().parse_spawn_str("ZOMBIE:5,ZOMBIE:3") == {EnemyType.ZOMBIE: [5]}


def test_parse_spawn_trailing_comma_gives_empty():
    assert EventParser().parse_spawn_str("ZOMBIE:5,") == {}


def test_parse_spawn_unknown_enemy_is_skipped():
    assert EventParser().parse_spawn_str("GHOST:4") == {}


def test_parse_events(tmp_path):
    write_events(tmp_path, "waves.txt", SAMPLE)
    events = EventParser(tmp_path).parse_events()
    assert [e.name for e in events] == ["first_wave", "second_wave"]
    assert [e.id for e in events] == [0, 1]
    assert [e.time for e in events] == [10, 30]
    assert events[0].enemies == {EnemyType.ZOMBIE: [5, 2]}
    assert events[1].enemies == {EnemyType.ZOMBIE: [1]}


def test_event_ids_continue_across_files(tmp_path):
    write_events(tmp_path, "a.txt", SAMPLE)
    write_events(tmp_path, "b.txt", SAMPLE)
    events = EventParser(tmp_path).parse_events()
    assert [e.id for e in events] == list(range(4))


def test_missing_directory_gives_no_events(tmp_path):
    parser = EventParser(tmp_path / "missing")
    assert parser.find_event_file_names() == []
    assert parser.parse_events() == []


def test_find_event_file_names(tmp_path):
    write_events(tmp_path, "b.txt", SAMPLE)
    write_events(tmp_path, "a.txt", SAMPLE)
    assert EventParser(tmp_path).find_event_file_names() == ["a.txt", "b.txt"]


def test_missing_time_raises(tmp_path):
    write_events(tmp_path, "bad.txt", "EVENT broken\nSPAWN=ZOMBIE:1\nEND\n")
    with pytest.raises(ValueError):
        EventParser(tmp_path).parse_events()


def test_handler_loads_and_removes(tmp_path):
    write_events(tmp_path, "waves.txt", SAMPLE)
    handler = EventHandler(EventParser(tmp_path))
    handler.load_events()
    assert len(handler.events) == 2
    handler.remove_event(0)
    assert [e.name for e in handler.events] == ["second_wave"]


def test_handler_without_events_keeps_empty(tmp_path):
    handler = EventHandler(EventParser(tmp_path))
    handler.load_events()
    assert handler.events == []