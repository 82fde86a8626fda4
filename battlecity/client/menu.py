"""The start menu shown after logging in."""

from __future__ import annotations

import logging
from enum import Enum

from battlecity.client.events import Signal

_log = logging.getLogger(__name__)


class MenuOption(Enum):
    """A button of the start menu; the value is its label."""

    START = "Start"
    SHOP = "Shop"
    SERVER = "Server"
    QUIT = "Quit game"


class StartMenu:
    """Start menu of the game.

    Each option has its own signal; ``game_started`` carries the user id
    when a game begins, after which the menu is closed.
    """

    TITLE = "BattleCity"
    GREETING = "Welcome to"

    def __init__(self) -> None:
        self.user_id = ""
        self.closed = False
        self.start_clicked = Signal()
        self.shop_clicked = Signal()
        self.server_clicked = Signal()
        self.quit_requested = Signal()
        self.game_started = Signal()

    def select(self, option: MenuOption) -> None:
        """Press the button for ``option``."""
        signal = {
            MenuOption.START: self.start_clicked,
            MenuOption.SHOP: self.shop_clicked,
            MenuOption.SERVER: self.server_clicked,
            MenuOption.QUIT: self.quit_requested,
        }[option]
        signal.emit()

    def start_game(self) -> None:
        """Start a game for the current user and close the menu."""
        self.game_started.emit(self.user_id)
        self.closed = True

    def on_character_chosen(self, character: str) -> bool:
        """Start the game once a character is picked; return whether it started."""
        if not character:
            return False
        _log.debug("Character chosen: %s", character)
        self.start_game()
        return True