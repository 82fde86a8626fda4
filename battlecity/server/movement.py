"""Directions on the grid and the positions they lead to."""

from __future__ import annotations

from enum import IntEnum

Position = tuple[int, int]


class Direction(IntEnum):
    """Facing of a player or bullet; the integer value goes on the wire."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


_NAMES = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}


def position_after(position: Position, direction: Direction) -> Position:
    """Return the (column, line) one step from ``position`` towards ``direction``."""
    column, line = position
    if direction is Direction.UP:
        line -= 1
    elif direction is Direction.DOWN:
        line += 1
    elif direction is Direction.LEFT:
        column -= 1
    elif direction is Direction.RIGHT:
        column += 1
    return column, line


def direction_from_string(message: str) -> Direction:
    """Parse "Up", "Down", "Left" or "Right"; raise ValueError otherwise."""
    try:
        return _NAMES[message]
    except KeyError:
        raise ValueError("Invalid direction") from None