"""Timed spawn events read from event files."""

from __future__ import annotations

import os
import re
from pathlib import Path

from . import logger
from .definitions import EVENTS_PATH, EnemyType, Event
from .logger import LogLevel

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    """The integer at the start of `text` after whitespace, or None."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _atoi(text: str) -> int:
    value = _leading_int(text)
    return 0 if value is None else value


def _split_key_value(part: str) -> tuple[str, int]:
    # Without a colon both the key and the value are read from the whole part.
    idx = part.find(":")
    key = part[:idx] if idx >= 0 else part
    return key, _atoi(part[idx + 1:])


def enemy_type_from_string(enemy_str: str) -> EnemyType:
    return EnemyType.ZOMBIE if enemy_str == "ZOMBIE" else EnemyType.ERROR


class EventParser:
    """Reads event files from a directory."""

    def __init__(self, events_path: str | os.PathLike[str] = EVENTS_PATH) -> None:
        self.events_path = Path(events_path)
        self.event_id = 0

    def find_event_file_names(self) -> list[str]:
        if not self.events_path.exists():
            logger.log(LogLevel.ERROR, "Directory does not exist:", self.events_path)
            return []
        return sorted(os.listdir(self.events_path))

    def parse_events(self) -> list[Event]:
        """Parse every event file; stop at the first file that cannot be opened."""
        events: list[Event] = []
        for file_name in self.find_event_file_names():
            try:
                handle = open(self.events_path / file_name, encoding="utf-8", errors="replace")
            except OSError:
                logger.log(LogLevel.ERROR, "Failed to open events file")
                return events
            with handle:
                lines = (line.rstrip("\r\n") for line in handle)
                for line in lines:
                    if "EVENT" in line:
                        events.append(self._parse_event(line, lines))
        return events

    def _parse_event(self, header: str, lines) -> Event:
        words = header.split()
        name = words[1] if len(words) > 1 else words[0]

        time_str = spawn_str = ""
        for line in lines:
            if "END" in line:
                break
            if "TIME=" in line:
                time_str = line[line.find("=") + 1:]
            elif "SPAWN=" in line:
                spawn_str = line[line.find("=") + 1:]

        time = _leading_int(time_str)
        if time is None:
            raise ValueError(f"invalid TIME in event {name!r}: {time_str!r}")
        spawn_map = self.parse_spawn_str(spawn_str)

        event = Event(id=self.event_id, name=name, time=time, enemies=spawn_map)
        self.event_id += 1

        logger.debug("Loaded event", name, ", occurs at", time, "and spawns")
        for enemy, counts in spawn_map.items():
            for count in counts:
                logger.debug(enemy.value, count)
        return event

    def parse_spawn_str(self, spawn_str: str) -> dict[EnemyType, list[int]]:
        """Parse 'ZOMBIE:5, ZOMBIE:3' into {ZOMBIE: [5, 3]}; entries after a comma skip one space."""
        commas = [i for i, ch in enumerate(spawn_str) if ch == ","]
        pairs: list[tuple[str, int]] = []

        if commas:
            pairs.append(_split_key_value(spawn_str[:commas[0]]))
            for comma, next_comma in zip(commas, commas[1:] + [None]):
                start = comma + 2
                if start > len(spawn_str):
                    logger.log(
                        LogLevel.ERROR,
                        "Something went wrong when parsing event file",
                        "position out of range",
                    )
                    return {}
                if next_comma is None or next_comma < start:
                    part = spawn_str[start:]
                else:
                    part = spawn_str[start:next_comma]
                pairs.append(_split_key_value(part))
        else:
            pairs.append(_split_key_value(spawn_str))

        spawn_map: dict[EnemyType, list[int]] = {}
        for key, value in pairs:
            enemy = enemy_type_from_string(key)
            if enemy is EnemyType.ERROR:
                continue
            spawn_map.setdefault(enemy, []).append(value)
        return spawn_map


class EventHandler:
    """Keeps the events still waiting to happen."""

    def __init__(self, parser: EventParser | None = None) -> None:
        self.parser = parser if parser is not None else EventParser()
        self.events: list[Event] = []

    def load_events(self) -> None:
        events = self.parser.parse_events()
        if events:
            self.events = events
        else:
            logger.debug("No events loaded")

    def remove_event(self, idx: int) -> Event:
        """Remove the event at `idx` and return it."""
        removed = self.events.pop(idx)
        return removed