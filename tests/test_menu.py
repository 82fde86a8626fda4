import pytest

from battlecity.client.menu import MenuOption, StartMenu


def _record(menu):
    seen = []
    menu.start_clicked.connect(lambda: seen.append(MenuOption.START))
    menu.shop_clicked.connect(lambda: seen.append(MenuOption.SHOP))
    menu.server_clicked.connect(lambda: seen.append(MenuOption.SERVER))
    menu.quit_requested.connect(lambda: seen.append(MenuOption.QUIT))
    return seen


@pytest.mark.parametrize("option", list(MenuOption))
def test_select_emits_only_its_signal(option):
    menu = StartMenu()
    seen = _record(menu)
    menu.select(option)
    assert seen == [option]


def test_option_labels():
    menu = StartMenu()
    seen = _record(menu)
    for label in ["Start", "Shop", "Server", "Quit game"]:
        menu.select(MenuOption(label))
    assert seen == [MenuOption.START, MenuOption.SHOP, MenuOption.SERVER, MenuOption.QUIT]


def test_start_game_sends_user_id_and_closes():
    menu = StartMenu()
    menu.user_id = "7"
    started = []
    menu.game_started.connect(started.append)
    menu.start_game()
    assert started == ["7"]
    assert menu.closed is True


def test_empty_character_is_ignored():
    menu = StartMenu()
    started = []
    menu.game_started.connect(started.append)
    assert menu.on_character_chosen("") is False
    assert started == []
    assert menu.closed is False


def test_character_choice_starts_game():
    menu = StartMenu()
    menu.user_id = "3"
    started = []
    menu.game_started.connect(started.append)
    assert menu.on_character_chosen("Zombie_Type1") is True
    assert started == ["3"]
    assert menu.closed is True


def test_title():
    menu = StartMenu()
    assert (menu.GREETING, menu.TITLE) == ("Welcome to", "BattleCity")
    assert menu.closed is False