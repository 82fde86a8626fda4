import pytest

from battlecity.client import resources
from battlecity.client.characters import CharacterChoice, CharacterSelection


@pytest.mark.parametrize("choice", list(CharacterChoice))
def test_choose_emits_name_and_closes(choice):
    selection = CharacterSelection()
    seen = []
    selection.character_chosen.connect(seen.append)
    assert selection.choose(choice) == choice.value
    assert seen == [choice.value]
    assert selection.closed is True


def test_choose_by_name():
    selection = CharacterSelection()
    seen = []
    selection.character_chosen.connect(seen.append)
    selection.choose("Zombie_Type2")
    assert seen == ["Zombie_Type2"]


def test_unknown_name_rejected():
    selection = CharacterSelection()
    seen = []
    selection.character_chosen.connect(seen.append)
    with pytest.raises(ValueError):
        selection.choose("Dragon")
    assert seen == []
    assert selection.closed is False


@pytest.mark.parametrize(
    "name",
    [
        "PoliceOfficer1",
        "PoliceOfficer2",
        "PoliceOfficer3",
        "PoliceOfficer4",
        "Zombie_Type1",
        "Zombie_Type2",
        "Zombie_Type3",
        "Zombie_Type4",
    ],
)
def test_names_fixed_by_selection(name):
    selection = CharacterSelection()
    seen = []
    selection.character_chosen.connect(seen.append)
    assert selection.choose(name) == name
    assert seen == [name]


def test_options_grouped_by_camp():
    options = CharacterSelection().options
    assert list(options) == ["Police Officer", "Zombie"]
    assert all(choice.value.startswith("PoliceOfficer") for choice in options["Police Officer"])
    assert all(choice.value.startswith("Zombie_Type") for choice in options["Zombie"])
    assert len(options["Police Officer"]) + len(options["Zombie"]) == len(CharacterChoice)


def test_images():
    assert CharacterChoice("PoliceOfficer1").image == resources.POLICE_OFFICER
    assert CharacterChoice("Zombie_Type1").image == resources.ZOMBIE
    assert CharacterChoice("Zombie_Type4").image == resources.ZOMBIE_3
    assert CharacterChoice("PoliceOfficer2").label == "Choose Purple Police Officer"