from datetime import timedelta

from battlecity.server.timer import Timer
from battlecity.server.weapon import Weapon


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_new_weapon_has_default_stats():
    weapon = Weapon(user_id=9)
    assert weapon.user_id == 9
    assert weapon.bullet_speed == 0.25
    assert weapon.bullet_wait_time == 4


def test_wait_time_is_in_milliseconds():
    weapon = Weapon(user_id=1, bullet_wait_time=250)
    assert weapon.wait_time() == timedelta(milliseconds=250)


def test_default_wait_time_matches_constant():
    weapon = Weapon()
    assert weapon.wait_time() == timedelta(milliseconds=Weapon.DEFAULT_BULLET_WAIT_TIME)


def test_reset_timer_restarts_elapsed():
    clock = FakeClock(0.0)
    weapon = Weapon(user_id=2, timer=Timer(clock))
    clock.now = 10.0
    assert weapon.timer.elapsed() == 10.0
    weapon.reset_timer()
    assert weapon.timer.elapsed() == 0.0


def test_equality_ignores_timer():
    first = Weapon(user_id=3, id=5, bullet_wait_time=2, bullet_speed=0.5)
    second = Weapon(user_id=3, id=5, bullet_wait_time=2, bullet_speed=0.5)
    assert first == second


def test_stats_can_be_changed():
    weapon = Weapon(user_id=4)
    weapon.bullet_speed = weapon.bullet_speed * 2
    assert weapon.bullet_speed == Weapon.DEFAULT_BULLET_SPEED * 2