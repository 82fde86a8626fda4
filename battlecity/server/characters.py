"""Playable characters, their camps and skins."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkinType(Enum):
    SKIN1 = 0
    SKIN2 = 1
    SKIN3 = 2
    SKIN4 = 3
    SKIN5 = 4
    SKIN6 = 5
    SKIN7 = 6
    SKIN8 = 7


class Camp(Enum):
    POLICE = 0
    ZOMBIES = 1


_CAMP_NAMES = {Camp.POLICE: "Police", Camp.ZOMBIES: "Zombies"}


def camp_to_string(camp: Camp) -> str:
    """Return the display name of a camp, or "Unknown"."""
    return _CAMP_NAMES.get(camp, "Unknown")


def skin_to_string(skin: SkinType) -> str:
    """Return the name of a skin, or "Unknown"."""
    return skin.name if isinstance(skin, SkinType) else "Unknown"


@dataclass(frozen=True)
class Character:
    """A named character in a camp wearing a skin."""

    name: str
    camp: Camp
    skin: SkinType