"""Choosing the character to play."""

from __future__ import annotations

from enum import Enum

from battlecity.client import resources
from battlecity.client.events import Signal

POLICE_HEADING = "Police Officer"
ZOMBIE_HEADING = "Zombie"


class CharacterChoice(Enum):
    """A selectable character; the value is the name sent on selection."""

    POLICE_OFFICER_1 = "PoliceOfficer1"
    POLICE_OFFICER_2 = "PoliceOfficer2"
    POLICE_OFFICER_3 = "PoliceOfficer3"
    POLICE_OFFICER_4 = "PoliceOfficer4"
    ZOMBIE_TYPE_1 = "Zombie_Type1"
    ZOMBIE_TYPE_2 = "Zombie_Type2"
    ZOMBIE_TYPE_3 = "Zombie_Type3"
    ZOMBIE_TYPE_4 = "Zombie_Type4"

    @property
    def camp(self) -> str:
        """Heading of the column the character is shown under."""
        return _DETAILS[self][0]

    @property
    def label(self) -> str:
        """Text of the character's button."""
        return _DETAILS[self][1]

    @property
    def image(self) -> str:
        """Image shown above the button."""
        return _DETAILS[self][2]


_DETAILS = {
    CharacterChoice.POLICE_OFFICER_1: (POLICE_HEADING, "Choose Blue Police Officer", resources.POLICE_OFFICER),
    CharacterChoice.POLICE_OFFICER_2: (POLICE_HEADING, "Choose Purple Police Officer", resources.POLICE_OFFICER_2),
    CharacterChoice.POLICE_OFFICER_3: (POLICE_HEADING, "Choose Green Police Officer", resources.POLICE_OFFICER_3),
    CharacterChoice.POLICE_OFFICER_4: (POLICE_HEADING, "Choose Yellow Police Officer", resources.POLICE_OFFICER_4),
    CharacterChoice.ZOMBIE_TYPE_1: (ZOMBIE_HEADING, "Choose Purple Zombie", resources.ZOMBIE),
    CharacterChoice.ZOMBIE_TYPE_2: (ZOMBIE_HEADING, "Choose Green Zombie", resources.ZOMBIE_1),
    CharacterChoice.ZOMBIE_TYPE_3: (ZOMBIE_HEADING, "Choose Yellow Zombie", resources.ZOMBIE_2),
    CharacterChoice.ZOMBIE_TYPE_4: (ZOMBIE_HEADING, "Choose Zombie Type 4", resources.ZOMBIE_3),
}


class CharacterSelection:
    """Offers every character; ``character_chosen`` carries the pick."""

    def __init__(self) -> None:
        self.closed = False
        self.character_chosen = Signal()

    @property
    def options(self) -> dict[str, tuple[CharacterChoice, ...]]:
        """The characters grouped under their headings, in display order."""
        return {
            heading: tuple(choice for choice in CharacterChoice if choice.camp == heading)
            for heading in (POLICE_HEADING, ZOMBIE_HEADING)
        }

    def choose(self, choice: CharacterChoice | str) -> str:
        """Pick a character, announce it and close; raise ValueError if unknown."""
        picked = CharacterChoice(choice)
        self.character_chosen.emit(picked.value)
        self.closed = True
        return picked.value