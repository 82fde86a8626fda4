"""A player's weapon and its upgradable stats."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from battlecity.server.timer import Timer

DEFAULT_BULLET_SPEED = 0.25
DEFAULT_BULLET_WAIT_TIME = 4


@dataclass
class Weapon:
    """Weapon stats as stored per user; the timer tracks the last shot."""

    DEFAULT_BULLET_SPEED = DEFAULT_BULLET_SPEED
    DEFAULT_BULLET_WAIT_TIME = DEFAULT_BULLET_WAIT_TIME

    user_id: int = 0
    id: int = 0
    bullet_wait_time: int = DEFAULT_BULLET_WAIT_TIME
    bullet_speed: float = DEFAULT_BULLET_SPEED
    timer: Timer = field(default_factory=Timer, compare=False, repr=False)

    def wait_time(self) -> timedelta:
        """Return the wait time between shots as milliseconds."""
        return timedelta(milliseconds=self.bullet_wait_time)

    def reset_timer(self) -> None:
        """Restart the shot timer."""
        self.timer.restart()