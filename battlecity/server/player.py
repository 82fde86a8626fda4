"""Players taking part in a match."""

from __future__ import annotations

from battlecity.server.entity import Entity
from battlecity.server.movement import Direction, Position
from battlecity.server.timer import Timer
from battlecity.server.user import User
from battlecity.server.weapon import Weapon

INITIAL_LIVES = 3

_SCORE_MASK = 0xFFFF
_POINTS_MASK = 0xFF
_LIVES_MASK = 0b11


class Player(Entity):
    """A user's avatar on the map.

    The score is kept in sixteen bits and the lives in two, so both wrap
    around on overflow.
    """

    INITIAL_LIVES = INITIAL_LIVES

    def __init__(
        self,
        user: User,
        weapon: Weapon | None = None,
        position: Position = (0, 0),
    ) -> None:
        super().__init__(position)
        self.id: int = user.id
        self.score = 0
        self.lives = INITIAL_LIVES
        self.direction = Direction.UP
        self.weapon = weapon if weapon is not None else Weapon(user_id=user.id)
        self.timer = Timer()
        self.starting_position: Position = self.position

    def add_score(self, points: int) -> None:
        """Add up to 255 points to the score, wrapping at sixteen bits."""
        self.score = (self.score + (points & _POINTS_MASK)) & _SCORE_MASK

    def decrease_lives(self) -> None:
        """Take one life away, wrapping at two bits."""
        self.lives = (self.lives - 1) & _LIVES_MASK