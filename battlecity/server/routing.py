"""HTTP endpoints of the game server."""

from __future__ import annotations

import json
import re
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable
from urllib.parse import parse_qs, urlsplit

from battlecity.server.bullet import Bullet
from battlecity.server.database import GameDatabase
from battlecity.server.entity import Bomb, Entity
from battlecity.server.gamemap import GameMap
from battlecity.server.movement import Direction, direction_from_string
from battlecity.server.player import Player
from battlecity.server.powerup import PowerUp, PowerUpType

DEFAULT_PORT = 18080
_UINT32_MAX = 0xFFFFFFFF
_QUERY_NUMBER = re.compile(r"\s*\+?(\d+)")
_BODY_NUMBER = re.compile(r"[+-]?\d+")

_POWER_UP_VALUES = {
    PowerUpType.BEER_EFFECT: "beer",
    PowerUpType.TRACING_BULLET: "tracing",
    PowerUpType.GHOST_BULLET: "ghost",
    PowerUpType.MINI_BOMB_BULLET: "explosive",
    PowerUpType.INVISIBILITY: "invisible",
}


@dataclass(frozen=True)
class Response:
    """An HTTP reply: a status and either text or a JSON object."""

    status: int
    body: str | dict[str, Any] = field(default="")

    @property
    def content_type(self) -> str:
        return "application/json" if isinstance(self.body, dict) else "text/plain"

    @property
    def text(self) -> str:
        """The body as it goes on the wire."""
        return json.dumps(self.body) if isinstance(self.body, dict) else self.body


def entity_value(entity: Entity | None) -> str:
    """Describe what stands on a square for the map payload."""
    if entity is None:
        return "nothing"
    if isinstance(entity, Player):
        return str(entity.id)
    if isinstance(entity, Bullet):
        return "bullet"
    if isinstance(entity, Bomb):
        return "bomb"
    if isinstance(entity, PowerUp) and entity.type in _POWER_UP_VALUES:
        return _POWER_UP_VALUES[entity.type]
    raise TypeError("Non-game component received")


def entity_direction(entity: Entity | None) -> Direction:
    """Return the facing of a player or bullet, NONE for anything else."""
    if isinstance(entity, (Player, Bullet)):
        return entity.direction
    return Direction.NONE


def map_payload(game_map: GameMap) -> dict[str, Any]:
    """Serialise the map as width, height and a row-major layout."""
    return {
        "width": game_map.width,
        "height": game_map.height,
        "layout": [
            {
                "tile": int(square.tile.type),
                "entity": entity_value(square.entity),
                "direction": int(entity_direction(square.entity)),
            }
            for square in game_map.squares
        ],
    }


def _load_json(body: str) -> Any | None:
    try:
        return json.loads(body)
    except ValueError:
        return None


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise TypeError("request body is not an object")
    return data[key]


def _string(data: Any, key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise TypeError(f"{key} is not a string")
    return value


def _uint32(data: Any, key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool):
        raise TypeError(f"{key} is not a number")
    if isinstance(value, int):
        return value & _UINT32_MAX
    if isinstance(value, str) and _BODY_NUMBER.fullmatch(value):
        return int(value) & _UINT32_MAX
    raise ValueError(f"{key} is not an integer")


def _query_user_id(query: dict[str, list[str]]) -> int | None:
    """Parse a userId the way a leading-digits conversion would; None if invalid."""
    match = _QUERY_NUMBER.match(query["userId"][0])
    if match is None:
        return None
    value = int(match.group(1))
    return value if value <= _UINT32_MAX else None


Handler = Callable[[str, dict[str, list[str]]], Response]


class Router:
    """Dispatches requests to the game's endpoints."""

    def __init__(self, database: GameDatabase, game_map: GameMap) -> None:
        self.database = database
        self.game_map = game_map
        self._lock = threading.Lock()
        self._routes: dict[str, dict[str, Handler]] = {
            "/": {"GET": self._welcome},
            "/register": {"POST": self._register},
            "/login": {"POST": self._login},
            "/map": {"GET": self._map},
            "/move": {"POST": self._move},
            "/upgrade/bullet-wait-time": {"POST": self._upgrade_wait_time},
            "/upgrade/bullet-speed": {"POST": self._upgrade_speed},
            "/get/total-score": {"GET": self._total_score},
            "/get/specialMoney": {"GET": self._special_money},
        }

    def handle(self, method: str, target: str, body: bytes | str = b"") -> Response:
        """Answer one request; errors inside an endpoint become a 500."""
        parts = urlsplit(target)
        methods = self._routes.get(parts.path)
        if methods is None:
            return Response(404, "Not Found")
        handler = methods.get(method.upper())
        if handler is None:
            return Response(405, "Method Not Allowed")
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        query = parse_qs(parts.query, keep_blank_values=True)
        with self._lock:
            try:
                return handler(body, query)
            except Exception:
                return Response(500, "")

    def _welcome(self, body: str, query: dict[str, list[str]]) -> Response:
        return Response(200, "Welcome to Battle City!")

    def _register(self, body: str, query: dict[str, list[str]]) -> Response:
        data = _load_json(body)
        if data is None:
            return Response(400, "Invalid JSON")
        username = _string(data, "username")
        password = _string(data, "password")
        if not username or not password:
            return Response(400, "Username and password cannot be empty")
        if self.database.user_exists(username):
            return Response(409, "User already exists")
        if self.database.register_user(username, password):
            return Response(201, "User registered successfully")
        return Response(500, "Failed to register user")

    def _login(self, body: str, query: dict[str, list[str]]) -> Response:
        data = _load_json(body)
        if data is None:
            return Response(400, "Invalid JSON")
        username = _string(data, "username")
        password = _string(data, "password")
        user_id = int(self.database.validate_user_credentials(username, password))
        return Response(200, {"status": "Login successful", "userId": user_id})

    def _map(self, body: str, query: dict[str, list[str]]) -> Response:
        return Response(200, map_payload(self.game_map))

    def _move(self, body: str, query: dict[str, list[str]]) -> Response:
        data = _load_json(body)
        player_id = _uint32(data, "playerID")
        direction = direction_from_string(_string(data, "direction"))
        self.game_map.move_player(player_id, direction)
        return Response(200, map_payload(self.game_map))

    def _upgrade(
        self, body: str, upgrade: Callable[[int], None], success: str, failure: str
    ) -> Response:
        data = _load_json(body)
        if data is None:
            return Response(400, "Invalid JSON")
        user_id = _uint32(data, "userId")
        try:
            upgrade(user_id)
        except Exception:
            return Response(500, failure)
        return Response(200, success)

    def _upgrade_wait_time(self, body: str, query: dict[str, list[str]]) -> Response:
        return self._upgrade(
            body,
            self.database.upgrade_bullet_wait_time,
            "Bullet wait time upgraded successfully",
            "Failed to upgrade bullet wait time",
        )

    def _upgrade_speed(self, body: str, query: dict[str, list[str]]) -> Response:
        return self._upgrade(
            body,
            self.database.upgrade_bullet_speed,
            "Bullet speed upgraded successfully",
            "Failed to upgrade bullet speed",
        )

    def _user_value(
        self,
        query: dict[str, list[str]],
        fetch: Callable[[int], int],
        key: str,
    ) -> Response:
        if "userId" not in query:
            return Response(400, "Missing userId parameter")
        user_id = _query_user_id(query)
        if user_id is None:
            return Response(400, "Invalid userId parameter")
        try:
            value = fetch(user_id)
        except Exception:
            return Response(500, f"Failed to get {key}")
        return Response(200, {key: value})

    def _total_score(self, body: str, query: dict[str, list[str]]) -> Response:
        return self._user_value(query, self.database.get_total_score, "totalScore")

    def _special_money(self, body: str, query: dict[str, list[str]]) -> Response:
        return self._user_value(query, self.database.get_special_money, "specialMoney")

    def _handler_class(self) -> type[BaseHTTPRequestHandler]:
        router = self

        class _RequestHandler(BaseHTTPRequestHandler):
            def _dispatch(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                response = router.handle(self.command, self.path, body)
                payload = response.text.encode("utf-8")
                self.send_response(response.status)
                self.send_header("Content-Type", response.content_type)
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            do_GET = _dispatch
            do_POST = _dispatch
            do_PUT = _dispatch
            do_DELETE = _dispatch

        return _RequestHandler

    def serve(self, host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> None:
        """Serve requests on several threads until interrupted."""
        server = ThreadingHTTPServer((host, port), self._handler_class())
        with server:
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass