"""Console logging helpers."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, TextIO


class LogLevel(Enum):
    DEBUG = 0
    ERROR = 1
    PRINT = 2


def _emit(stream: TextIO, prefix: str, args: tuple[Any, ...]) -> None:
    print(prefix + " ".join(str(arg) for arg in args), file=stream)


def log(level: LogLevel, *args: Any) -> None:
    """Write the arguments, separated by spaces, at the given level."""
    level = LogLevel(level)
    if level is LogLevel.DEBUG:
        _emit(sys.stdout, "DEBUG: ", args)
    elif level is LogLevel.ERROR:
        _emit(sys.stderr, "ERROR: ", args)
    else:
        _emit(sys.stdout, "", args)


def debug(*args: Any) -> None:
    """Write a debug line to standard output."""
    _emit(sys.stdout, "DEBUG: ", args)