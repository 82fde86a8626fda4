"""Things that occupy a square of the map."""

from __future__ import annotations

from battlecity.server.movement import Position


class Entity:
    """Anything placed on the map at a (column, line) position."""

    def __init__(self, position: Position = (0, 0)) -> None:
        self.position: Position = tuple(position)
        self.invisible = False
        self.controls_inverted = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class Bomb(Entity):
    """A bomb hidden in a wall. Bombs are unique and cannot be copied."""

    def __copy__(self):
        raise TypeError("bombs cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("bombs cannot be copied")