"""Registered user accounts."""

from __future__ import annotations

from dataclasses import dataclass

_NO_PASSWORD = ""
_SCORE_MASK = 0xFF
_MONEY_MASK = 0xFFFF


@dataclass
class User:
    """A user account.

    The total score is kept in eight bits and special money in sixteen,
    so both wrap around when they overflow.
    """

    username: str = ""
    password: str = _NO_PASSWORD
    id: int = 0
    total_score: int = 0
    special_money: int = 0
    weapon_id: int = 0

    def __post_init__(self) -> None:
        self.total_score &= _SCORE_MASK
        self.special_money &= _MONEY_MASK

    def add_total_score(self, amount: int) -> None:
        """Add to the total score, wrapping at eight bits."""
        self.total_score = (self.total_score + amount) & _SCORE_MASK

    def add_special_money(self, amount: int) -> None:
        """Add to the special money, wrapping at sixteen bits."""
        self.special_money = (self.special_money + amount) & _MONEY_MASK

    def __str__(self) -> str:
        return f"{self.username} {self.special_money} {self.total_score}"