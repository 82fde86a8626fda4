from datetime import timedelta

import pytest

from battlecity.server.entity import Entity
from battlecity.server.powerup import PowerUp, PowerUpType


@pytest.mark.parametrize(
    "factory, kind, effect",
    [
        (PowerUp.ghost_bullet, PowerUpType.GHOST_BULLET, "Makes bullets pass through walls."),
        (
            PowerUp.mini_bomb_bullet,
            PowerUpType.MINI_BOMB_BULLET,
            "Makes bullets explode in a small radius on impact",
        ),
        (PowerUp.invisibility, PowerUpType.INVISIBILITY, "Player becomes invisible for 10 seconds"),
        (
            PowerUp.tracing_bullet,
            PowerUpType.TRACING_BULLET,
            "Avoids obstacles to seek the nearest target.",
        ),
        (PowerUp.beer_effect, PowerUpType.BEER_EFFECT, "Inverts controls for all other players."),
    ],
)
def test_factories(factory, kind, effect):
    power_up = factory()
    assert power_up.type is kind
    assert power_up.effect == effect


@pytest.mark.parametrize(
    "kind, name",
    [
        (PowerUpType.GHOST_BULLET, "Ghost Bullet"),
        (PowerUpType.MINI_BOMB_BULLET, "Mini Bomb Bullet"),
        (PowerUpType.INVISIBILITY, "Invisibility"),
        (PowerUpType.TRACING_BULLET, "Tracing Bullet"),
        (PowerUpType.BEER_EFFECT, "Beer Effect"),
        (PowerUpType.NONE, "Unknown PowerUp"),
    ],
)
def test_type_name(kind, name):
    assert PowerUp.ghost_bullet().type_name(kind) == name


def test_power_up_is_an_entity_with_position():
    power_up = PowerUp(PowerUpType.BEER_EFFECT, "fizz", (4, 5))
    assert isinstance(power_up, Entity)
    assert power_up.position == (4, 5)


def test_duration_is_ten_seconds():
    assert PowerUp.invisibility().DURATION == timedelta(seconds=10)


def test_invisibility_round_trip():
    target = Entity((1, 1))
    power_up = PowerUp.invisibility()
    power_up.activate(target)
    assert target.invisible is True
    power_up.deactivate(target)
    assert target.invisible is False


def test_beer_inverts_controls_round_trip():
    target = Entity((2, 2))
    power_up = PowerUp.beer_effect()
    power_up.activate(target)
    assert target.controls_inverted is True
    power_up.deactivate(target)
    assert target.controls_inverted is False


@pytest.mark.parametrize(
    "factory", [PowerUp.ghost_bullet, PowerUp.mini_bomb_bullet, PowerUp.tracing_bullet]
)
def test_bullet_power_ups_leave_target_flags(factory):
    target = Entity((0, 0))
    factory().activate(target)
    assert (target.invisible, target.controls_inverted) == (False, False)