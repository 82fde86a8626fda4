"""Bullets fired by players."""

from __future__ import annotations

from battlecity.server.entity import Entity
from battlecity.server.movement import position_after
from battlecity.server.player import Player
from battlecity.server.timer import Timer


class Bullet(Entity):
    """A bullet travelling in a fixed direction.

    Each tick adds the bullet's speed to its build-up; it advances one
    square once the build-up reaches ``MINIMUM_SPEED_BUILDUP``.
    """

    MINIMUM_SPEED_BUILDUP = 1

    def __init__(self, player: Player) -> None:
        super().__init__(position_after(player.position, player.direction))
        self.direction = player.direction
        self._speed = player.weapon.bullet_speed
        self.speed_build_up = 0.0
        self.timer = Timer()

    @property
    def speed(self) -> float:
        """Squares gained per tick; fixed when the bullet is fired."""
        return self._speed

    def add_speed_build_up(self) -> None:
        """Accumulate one tick of speed and restart the tick timer."""
        self.speed_build_up += self._speed
        self.timer.restart()

    def reset_speed_build_up(self) -> None:
        """Clear the accumulated speed after a move."""
        self.speed_build_up = 0.0