"""Power-ups that can be picked up on the map."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from battlecity.server.entity import Entity
from battlecity.server.movement import Position


class PowerUpType(Enum):
    GHOST_BULLET = 0
    MINI_BOMB_BULLET = 1
    INVISIBILITY = 2
    TRACING_BULLET = 3
    BEER_EFFECT = 4
    NONE = 5


_TYPE_NAMES = {
    PowerUpType.GHOST_BULLET: "Ghost Bullet",
    PowerUpType.MINI_BOMB_BULLET: "Mini Bomb Bullet",
    PowerUpType.INVISIBILITY: "Invisibility",
    PowerUpType.TRACING_BULLET: "Tracing Bullet",
    PowerUpType.BEER_EFFECT: "Beer Effect",
}


class PowerUp(Entity):
    """A power-up of a given type with a description of its effect."""

    DURATION = timedelta(seconds=10)

    def __init__(self, type: PowerUpType, effect: str, position: Position = (0, 0)) -> None:
        super().__init__(position)
        self.type = type
        self.effect = effect

    def type_name(self, type: PowerUpType) -> str:
        """Return the display name of a power-up type."""
        return _TYPE_NAMES.get(type, "Unknown PowerUp")

    @classmethod
    def ghost_bullet(cls) -> PowerUp:
        return cls(PowerUpType.GHOST_BULLET, "Makes bullets pass through walls.")

    @classmethod
    def mini_bomb_bullet(cls) -> PowerUp:
        return cls(
            PowerUpType.MINI_BOMB_BULLET,
            "Makes bullets explode in a small radius on impact",
        )

    @classmethod
    def invisibility(cls) -> PowerUp:
        return cls(PowerUpType.INVISIBILITY, "Player becomes invisible for 10 seconds")

    @classmethod
    def tracing_bullet(cls) -> PowerUp:
        return cls(
            PowerUpType.TRACING_BULLET, "Avoids obstacles to seek the nearest target."
        )

    @classmethod
    def beer_effect(cls) -> PowerUp:
        return cls(PowerUpType.BEER_EFFECT, "Inverts controls for all other players.")

    def activate(self, target: Entity) -> None:
        """Apply the effect to ``target``.

        Only invisibility and beer change the target itself; bullet
        power-ups act on the bullets that are fired.
        """
        if self.type is PowerUpType.INVISIBILITY:
            target.invisible = True
        elif self.type is PowerUpType.BEER_EFFECT:
            target.controls_inverted = True

    def deactivate(self, target: Entity) -> None:
        """Undo the effect on ``target``."""
        if self.type is PowerUpType.INVISIBILITY:
            target.invisible = False
        elif self.type is PowerUpType.BEER_EFFECT:
            target.controls_inverted = False