"""Map tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TileType(IntEnum):
    """Kind of ground on a square; the integer value goes on the wire."""

    FREE = 0
    DESTRUCTIBLE_WALL = 1
    INDESTRUCTIBLE_WALL = 2


_CHARS = {
    TileType.FREE: "F",
    TileType.DESTRUCTIBLE_WALL: "D",
    TileType.INDESTRUCTIBLE_WALL: "I",
}


@dataclass
class Tile:
    """A single square's ground."""

    type: TileType = TileType.FREE

    def to_char(self) -> str:
        """Return the one-letter code of the tile type."""
        return _CHARS[self.type]