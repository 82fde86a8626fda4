"""The game board as the client sees it: tiles, effects and moves."""

from __future__ import annotations

import json
import logging
import random
import re
from enum import Enum
from typing import Any, Callable

from battlecity.client import resources
from battlecity.client.events import ClickableCell, Signal
from battlecity.client.http import HttpClient, HttpResponse

DEFAULT_BASE_URL = "http://localhost:18080"
EXPLOSION_RADIUS = 5
BOMB_DELAY_MS = 500
BLAST_DELAY_MS = 200
COIN_INTERVAL_MS = 10000
SPAWN_INTERVAL_MS = 10000
OFFICER_ENTITY = "1"

FREE = 0
BREAKABLE_WALL = 1
BOMB = 3
COIN = 4

_UINT32_LIMIT = 1 << 32
_INT32_LIMIT = 1 << 31
_PLAYER_ID = re.compile(r"\+?\d+")

Cell = tuple[int, str]
Schedule = Callable[[int, Callable[[], None]], None]

_log = logging.getLogger(__name__)


class MoveDirection(Enum):
    """A move request; the value is what the server expects."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


_KEYS = {
    "W": MoveDirection.UP,
    "S": MoveDirection.DOWN,
    "A": MoveDirection.LEFT,
    "D": MoveDirection.RIGHT,
}


class MapError(ValueError):
    """Raised when map data from the server cannot be used."""


def _run_now(delay_ms: int, action: Callable[[], None]) -> None:
    action()


def _lenient_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _strict_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("expected a number")
    return int(value)


def _rows(squares: list[Cell], width: int) -> list[list[Cell]]:
    rows: list[list[Cell]] = []
    current: list[Cell] = []
    for square in squares:
        current.append(square)
        if len(current) == width:
            rows.append(current)
            current = []
    return rows


def parse_layout(payload: Any) -> list[list[Cell]]:
    """Turn a map payload into rows of (tile, entity) cells.

    Raises MapError when the payload is not an object, lacks a field or
    has a layout whose size does not match its dimensions.
    """
    if not isinstance(payload, dict):
        raise MapError("Map data is invalid")
    if not all(key in payload for key in ("width", "height", "layout")):
        raise MapError("Map incomplete")
    width = _lenient_int(payload["width"])
    height = _lenient_int(payload["height"])
    layout = payload["layout"] if isinstance(payload["layout"], list) else []
    if len(layout) != width * height:
        raise MapError("Wrong dimensions for layout")
    squares = [
        (
            _lenient_int(square.get("tile")),
            square["entity"] if isinstance(square.get("entity"), str) else "",
        )
        for square in layout
        if isinstance(square, dict)
    ]
    return _rows(squares, width)


def _parse_move_layout(payload: dict[str, Any]) -> list[list[Cell]]:
    width = _strict_int(payload["width"])
    _strict_int(payload["height"])
    layout = payload["layout"]
    if not isinstance(layout, list):
        raise TypeError("layout is not a list")
    squares = []
    for square in layout:
        tile = _strict_int(square["tile"])
        entity = square["entity"]
        if not isinstance(entity, str):
            raise TypeError("entity is not a string")
        _strict_int(square["direction"])
        squares.append((tile, entity))
    return _rows(squares, width)


class Board:
    """The player's view of the map.

    ``notice`` is emitted with a title and a text for every message the
    player should see; ``back_to_battle_city`` when the player leaves.
    Delayed effects go through ``schedule(delay_ms, action)``.
    """

    def __init__(
        self,
        http: HttpClient | None = None,
        base_url: str = DEFAULT_BASE_URL,
        rng: random.Random | None = None,
        schedule: Schedule | None = None,
    ) -> None:
        self.http = http if http is not None else HttpClient()
        self.base_url = base_url.rstrip("/")
        self._rng = rng if rng is not None else random.Random()
        self._schedule = schedule if schedule is not None else _run_now
        self.user_id = ""
        self.direction: MoveDirection | None = None
        self.map_data: list[list[Cell]] = []
        self.cells: list[list[ClickableCell]] = []
        self.back_to_battle_city = Signal()
        self.notice = Signal()

    def _warn(self, text: str) -> None:
        self.notice.emit("Error", text)

    def on_login_success(self, user_id: str) -> None:
        """Remember the logged-in user and fetch the map."""
        self.user_id = user_id
        self.load_map()

    def load_map(self) -> None:
        """Fetch the map from the server and show it."""
        self.http.get(f"{self.base_url}/map", self._on_map_loaded)

    def _on_map_loaded(self, response: HttpResponse) -> None:
        if response.status_code != 200:
            self._warn("The map couldn't be loaded from server.")
            return
        try:
            payload = json.loads(response.text)
        except ValueError:
            payload = None
        try:
            self.apply_map(payload)
        except MapError as exc:
            self._warn(str(exc))

    def apply_map(self, payload: Any) -> None:
        """Replace the board with the map in ``payload``; raise MapError if unusable."""
        self.map_data = parse_layout(payload)
        self._render()

    def _render(self) -> None:
        self.cells = []
        for row, squares in enumerate(self.map_data):
            line = []
            for col, (tile, entity) in enumerate(squares):
                cell = ClickableCell(row, col)
                image = resources.image_for_tile(tile)
                if entity == OFFICER_ENTITY:
                    image = resources.POLICE_OFFICER
                cell.style = resources.cell_style(image)
                cell.clicked.connect(self.on_cell_clicked)
                line.append(cell)
            self.cells.append(line)

    def _update(self, row: int, col: int, tile: int, image: str, entity: str | None = None) -> None:
        current_entity = self.map_data[row][col][1]
        self.map_data[row][col] = (tile, current_entity if entity is None else entity)
        self.cells[row][col].style = resources.cell_style(image)

    def style_at(self, row: int, col: int) -> str:
        """Return the style currently shown in a cell."""
        return self.cells[row][col].style

    def on_cell_clicked(self, row: int, col: int) -> None:
        """Plant a bomb in a breakable wall, or set off a planted bomb."""
        tile = self.map_data[row][col][0]
        if tile == BREAKABLE_WALL:
            self._update(row, col, BOMB, resources.BOMB)
            self._schedule(BOMB_DELAY_MS, lambda: self.trigger_explosion(row, col))
        elif tile == BOMB:
            self.trigger_explosion(row, col)

    def trigger_explosion(self, row: int, col: int) -> None:
        """Break the wall here and, shortly after, every breakable wall in range."""
        if self.map_data[row][col][0] == BREAKABLE_WALL:
            self._update(row, col, FREE, resources.PATH)

        def blast() -> None:
            height = len(self.map_data)
            width = len(self.map_data[0]) if self.map_data else 0
            for r in range(row - EXPLOSION_RADIUS, row + EXPLOSION_RADIUS + 1):
                for c in range(col - EXPLOSION_RADIUS, col + EXPLOSION_RADIUS + 1):
                    if 0 <= r < height and 0 <= c < width:
                        if self.map_data[r][c][0] == BREAKABLE_WALL:
                            self._update(r, c, FREE, resources.PATH)

        self._schedule(BLAST_DELAY_MS, blast)

    def clear_around(self, row: int, col: int) -> None:
        """Break the breakable walls directly above, below, left and right."""
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= r < len(self.map_data) and 0 <= c < len(self.map_data[r]):
                if self.map_data[r][c][0] == BREAKABLE_WALL:
                    self._update(r, c, FREE, resources.PATH)

    def place_coins(self) -> int:
        """Drop one to five coins on empty path; return how many were placed."""
        placed = 0
        for _ in range(self._rng.randint(1, 5)):
            if not self.place_coin_at_random_location():
                break
            placed += 1
        return placed

    def place_coin_at_random_location(self) -> bool:
        """Put a coin on a random empty path cell; return False if there is none."""
        empty = [
            (row, col)
            for row, squares in enumerate(self.map_data)
            for col, (tile, entity) in enumerate(squares)
            if tile == FREE and not entity
        ]
        if not empty:
            return False
        row, col = self._rng.choice(empty)
        self._update(row, col, COIN, resources.COIN, "coin")
        return True

    def spawn_random_objects(self) -> None:
        """Try three random cells and place an object on each one that is empty path."""
        if not self.map_data:
            return
        for index, image in enumerate(resources.OBJECT_IMAGES[:3]):
            row = self._rng.randrange(len(self.map_data))
            if not self.map_data[row]:
                continue
            col = self._rng.randrange(len(self.map_data[row]))
            tile, entity = self.map_data[row][col]
            if tile == FREE and not entity:
                self._update(row, col, COIN + index, image, "object")

    def key_pressed(self, key: str) -> None:
        """Move the player with W, A, S or D; other keys are ignored."""
        direction = _KEYS.get(key.upper())
        if direction is None:
            return
        self.direction = direction
        _log.debug("userid %s", self.user_id)
        self.move_player(self.user_id, direction)

    def move_player(self, player_id: str, direction: MoveDirection) -> bool:
        """Ask the server to move a player; return False if the id is not a number."""
        text = player_id.strip()
        if not _PLAYER_ID.fullmatch(text) or int(text) >= _UINT32_LIMIT:
            _log.warning("Conversion of playerID to uint32_t failed!")
            return False
        value = int(text)
        signed = value - _UINT32_LIMIT if value >= _INT32_LIMIT else value
        body = json.dumps(
            {"playerID": signed, "direction": direction.value}, separators=(",", ":")
        )
        self.http.post(f"{self.base_url}/move", body, self._on_moved)
        return True

    def _on_moved(self, response: HttpResponse) -> None:
        if response.status_code != 200:
            _log.debug("Server response status code: %s Message: %s",
                       response.status_code, response.text)
            self._warn("Server error")
            return
        try:
            payload = json.loads(response.text)
            if not (
                isinstance(payload, dict)
                and all(key in payload for key in ("width", "height", "layout"))
            ):
                self._warn("Invalid response format!")
                return
            rows = _parse_move_layout(payload)
        except (ValueError, TypeError, KeyError) as exc:
            _log.debug("Server response status code: %s Message: %s %s",
                       response.status_code, response.text, exc)
            self._warn("Error parsing the server response")
            return
        self.map_data = rows
        self._render()
        self.notice.emit("Success", "Player moved successfully and map updated!")

    def request_back(self, confirmed: bool) -> bool:
        """Leave the board if the player confirmed quitting."""
        if confirmed:
            self.back_to_battle_city.emit()
        return confirmed