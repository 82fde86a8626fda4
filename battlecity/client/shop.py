"""The shop where players spend their score and special money on upgrades."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from battlecity.client.board import DEFAULT_BASE_URL
from battlecity.client.events import Signal
from battlecity.client.http import HttpClient, HttpResponse

WAIT_TIME_PRICE = 500
BULLET_SPEED_PRICE = 10
UPGRADE_SLOTS = 5
MESSAGE_MS = 1000
UNSET_USER = "0"

Schedule = Callable[[int, Callable[[], None]], None]

_log = logging.getLogger(__name__)


@dataclass
class UpgradeTrack:
    """An upgrade bought step by step, shown as a row of circles."""

    title: str
    price: int
    slots: int = UPGRADE_SLOTS
    count: int = 0

    @property
    def circles(self) -> tuple[bool, ...]:
        """Whether each circle of the row is lit."""
        return tuple(index < self.count for index in range(self.slots))

    def advance(self) -> int:
        """Record one more purchased step and return the new count."""
        self.count += 1
        return self.count


class Shop:
    """Balances of the logged-in user and the upgrades they can buy.

    Messages for the player go to ``message``; with a ``schedule`` they
    are hidden again after a second. ``back_to_battle_city`` is emitted
    when the player leaves the shop.
    """

    def __init__(
        self,
        http: HttpClient | None = None,
        base_url: str = DEFAULT_BASE_URL,
        schedule: Schedule | None = None,
    ) -> None:
        self.http = http if http is not None else HttpClient()
        self.base_url = base_url.rstrip("/")
        self._schedule = schedule
        self.user_id = ""
        self.coins = 0
        self.money = 0
        self.special_money = 0
        self.wait_time_track = UpgradeTrack("Wait Time", WAIT_TIME_PRICE)
        self.bullet_speed_track = UpgradeTrack("Bullet Speed", BULLET_SPEED_PRICE)
        self.message = ""
        self.message_visible = False
        self.back_to_battle_city = Signal()

    def _show(self, text: str) -> None:
        self.message = text
        self.message_visible = True
        if self._schedule is not None:
            self._schedule(MESSAGE_MS, self._hide)

    def _hide(self) -> None:
        self.message_visible = False

    def _fetch(self, path: str, key: str, failure: str, attribute: str) -> None:
        def on_reply(response: HttpResponse) -> None:
            if response.status_code != 200:
                _log.debug("GET request failed with status code: %s", response.status_code)
                self._show(failure)
                return
            try:
                payload: Any = json.loads(response.text)
            except ValueError as exc:
                _log.debug("Error parsing response: %s", exc)
                self._show("Failed to parse response")
                return
            if not isinstance(payload, dict) or key not in payload:
                _log.debug("%s field is missing in response.", key)
                self._show("Invalid response data")
                return
            value = payload[key]
            if not isinstance(value, (int, float)):
                _log.debug("Error parsing response: %s is not a number", key)
                self._show("Failed to parse response")
                return
            setattr(self, attribute, int(value))
            _log.debug("Updated %s: %s", key, int(value))

        self.http.get(f"{self.base_url}{path}?userId={self.user_id}", on_reply)

    def fetch_total_score(self) -> int:
        """Refresh the score balance from the server and return it."""
        self._fetch(
            "/get/total-score", "totalScore", "Failed to fetch total score", "money"
        )
        return self.money

    def fetch_special_money(self) -> int:
        """Refresh the special money from the server and return it."""
        self._fetch(
            "/get/specialMoney",
            "specialMoney",
            "Failed to fetch special money",
            "special_money",
        )
        return self.special_money

    def _buy(
        self,
        track: UpgradeTrack,
        refresh: Callable[[], int],
        attribute: str,
        path: str,
    ) -> bool:
        if self.user_id == UNSET_USER:
            _log.warning("userId not set!")
            return False
        refresh()
        if getattr(self, attribute) < track.price:
            _log.debug(
                "Insufficient funds. Required: %s Available: %s",
                track.price,
                getattr(self, attribute),
            )
            self._show("Insufficient funds")
            return False

        body = json.dumps(
            {"userId": self.user_id}, separators=(",", ":"), ensure_ascii=False
        )
        bought: list[bool] = []

        def on_reply(response: HttpResponse) -> None:
            if response.status_code == 200:
                setattr(self, attribute, getattr(self, attribute) - track.price)
                track.advance()
                bought.append(True)
            else:
                _log.debug("Upgrade failed with status code: %s", response.status_code)
                self._show("Upgrade failed!")

        self.http.post(f"{self.base_url}{path}", body, on_reply)
        return bool(bought)

    def buy_wait_time(self) -> bool:
        """Buy a shorter wait between shots with score; return whether it worked."""
        return self._buy(
            self.wait_time_track,
            self.fetch_total_score,
            "money",
            "/upgrade/bullet-wait-time",
        )

    def buy_bullet_speed(self) -> bool:
        """Buy faster bullets with special money; return whether it worked."""
        return self._buy(
            self.bullet_speed_track,
            self.fetch_special_money,
            "special_money",
            "/upgrade/bullet-speed",
        )

    def go_back(self) -> None:
        """Leave the shop."""
        self.back_to_battle_city.emit()