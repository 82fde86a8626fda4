"""A minimal levelled logger writing to a text stream."""

from __future__ import annotations

from enum import IntEnum
from typing import TextIO


class Level(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


_LEVEL_NAMES = {Level.INFO: "Info", Level.WARNING: "Warning", Level.ERROR: "Error"}


def level_name(level: Level) -> str:
    """Return the display name of a level, or an empty string."""
    return _LEVEL_NAMES.get(level, "")


class Logger:
    """Writes "[Level] message" lines at or above a minimum level."""

    def __init__(self, stream: TextIO, minimum_level: Level = Level.INFO) -> None:
        self.stream = stream
        self.minimum_level = minimum_level

    def log(self, message: str, level: Level) -> None:
        """Write ``message`` unless ``level`` is below the minimum."""
        if level < self.minimum_level:
            return
        self.stream.write(f"[{level_name(level)}] {message}\n")