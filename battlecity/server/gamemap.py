"""The battlefield: a grid of tiles, each holding at most one entity."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace

from battlecity.server.bullet import Bullet
from battlecity.server.entity import Bomb, Entity
from battlecity.server.movement import Direction, Position, position_after
from battlecity.server.player import Player
from battlecity.server.tile import Tile, TileType

WIDTH_MIN = 45
WIDTH_MAX = 50
HEIGHT_MIN = 25
HEIGHT_MAX = 30
BOMB_COUNT = 3
PLAYER_SLOTS = 4


@dataclass
class Square:
    """One cell of the map: its ground and what stands on it."""

    tile: Tile
    entity: Entity | None = None


class GameMap:
    """A randomly generated map with up to four players."""

    WIDTH_MIN = WIDTH_MIN
    WIDTH_MAX = WIDTH_MAX
    HEIGHT_MIN = HEIGHT_MIN
    HEIGHT_MAX = HEIGHT_MAX
    BOMB_COUNT = BOMB_COUNT

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.width = self._rng.randint(WIDTH_MIN, WIDTH_MAX)
        self.height = self._rng.randint(HEIGHT_MIN, HEIGHT_MAX)
        self._squares = [
            Square(Tile(self._random_tile_type()))
            for _ in range(self.width * self.height)
        ]
        for corner in self._corners():
            self[corner].tile.type = TileType.FREE
        self.players: list[Player | None] = [None] * PLAYER_SLOTS

    def _random_tile_type(self) -> TileType:
        # 50% free, 46% destructible wall, 4% indestructible wall.
        roll = self._rng.randrange(100)
        if roll < 50:
            return TileType.FREE
        if roll <= 95:
            return TileType.DESTRUCTIBLE_WALL
        return TileType.INDESTRUCTIBLE_WALL

    def _corners(self) -> list[Position]:
        right, bottom = self.width - 1, self.height - 1
        return [(0, 0), (right, 0), (0, bottom), (right, bottom)]

    def _in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def _find_player(self, player_id: int) -> Player:
        for player in self.players:
            if player is not None and player.id == player_id:
                return player
        raise LookupError("Player not found")

    @property
    def squares(self) -> tuple[Square, ...]:
        """All squares in row-major order."""
        return tuple(self._squares)

    def __getitem__(self, position: Position) -> Square:
        if not self._in_bounds(position):
            raise IndexError("Invalid position accessed")
        x, y = position
        return self._squares[y * self.width + x]

    def tile(self, position: Position) -> Tile:
        """Return a copy of the tile at ``position``."""
        if not self._in_bounds(position):
            raise IndexError("Attempting to access Tile outside defined bounds!")
        return replace(self[position].tile)

    def place_bombs_on_walls(self) -> list[Bomb]:
        """Hide up to ``BOMB_COUNT`` bombs in random destructible walls."""
        walls = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self[(x, y)].tile.type == TileType.DESTRUCTIBLE_WALL
        ]
        self._rng.shuffle(walls)
        bombs = []
        for position in walls[:BOMB_COUNT]:
            bomb = Bomb(position)
            self[position].entity = bomb
            bombs.append(bomb)
        return bombs

    def place_players(self) -> None:
        """Put the players, in slot order, on the four corners."""
        for corner, player in zip(self._corners(), self.players):
            self[corner].entity = player
            if player is not None:
                player.position = corner
                player.starting_position = corner

    def move_player(self, player_id: int, direction: Direction) -> None:
        """Step a player one square if the target is free ground."""
        player = self._find_player(player_id)
        current = player.position
        target = position_after(current, direction)
        if not self._in_bounds(target):
            return
        square = self[target]
        if square.entity is None and square.tile.type == TileType.FREE:
            square.entity = self[current].entity
            self[current].entity = None
            player.position = target

    def insert_player(self, player: Player) -> None:
        """Put ``player`` in the first free slot; ignored when all are taken."""
        for slot, occupant in enumerate(self.players):
            if occupant is None:
                self.players[slot] = player
                return

    def kill_player(self, player_id: int) -> None:
        """Take a life from a player and send them back to their start."""
        player = self._find_player(player_id)
        player.decrease_lives()
        entity = self[player.position].entity
        self[player.position].entity = None
        self[player.starting_position].entity = entity
        player.position = player.starting_position

    def shoot_bullet(self, player_id: int) -> Bullet | None:
        """Fire from a player's position; return the bullet if one was placed.

        Nothing happens before the weapon's wait time has elapsed. A player
        in front is killed at once and a destructible wall in front is
        broken instead of spawning a bullet.
        """
        player = self._find_player(player_id)
        weapon = player.weapon
        if weapon.timer.elapsed() < weapon.bullet_wait_time:
            return None
        target = position_after(player.position, player.direction)
        if not self._in_bounds(target):
            return None
        square = self[target]
        if square.tile.type == TileType.FREE and square.entity is None:
            bullet = Bullet(player)
            square.entity = bullet
            return bullet
        if isinstance(square.entity, Player):
            self.kill_player(square.entity.id)
        elif square.tile.type == TileType.DESTRUCTIBLE_WALL:
            square.tile.type = TileType.FREE
        return None

    def explode_bomb(self, position: Position) -> bool:
        """Remove the bomb at ``position``; return whether there was one."""
        square = self[position]
        if isinstance(square.entity, Bomb):
            square.entity = None
            return True
        return False

    def _move_bullet(self, position: Position) -> None:
        square = self[position]
        bullet = square.entity
        if not isinstance(bullet, Bullet):
            return
        if bullet.speed_build_up < Bullet.MINIMUM_SPEED_BUILDUP:
            return
        square.entity = None

        target = position_after(bullet.position, bullet.direction)
        if not self._in_bounds(target):
            return
        ahead = self[target]

        if ahead.tile.type == TileType.DESTRUCTIBLE_WALL:
            ahead.tile.type = TileType.FREE
            if isinstance(ahead.entity, Bomb):
                self.explode_bomb(ahead.entity.position)
            return
        if ahead.tile.type == TileType.INDESTRUCTIBLE_WALL:
            return
        if isinstance(ahead.entity, Player):
            self.kill_player(ahead.entity.id)
            return
        if isinstance(ahead.entity, (Bullet, Bomb)):
            return
        if ahead.tile.type == TileType.FREE:
            bullet.reset_speed_build_up()
            bullet.position = target
            ahead.entity = bullet

    def move_bullets(self) -> None:
        """Advance every bullet whose tick of at least one second has passed."""
        for square in self._squares:
            bullet = square.entity
            if isinstance(bullet, Bullet) and bullet.timer.elapsed() >= 1.0:
                bullet.add_speed_build_up()
                self._move_bullet(bullet.position)

    def __str__(self) -> str:
        lines = [f"Map Dimensions: {self.width} x {self.height}"]
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                square = self[(x, y)]
                if isinstance(square.entity, Player):
                    cells.append("P ")
                elif isinstance(square.entity, Bullet):
                    cells.append("B ")
                else:
                    cells.append(square.tile.to_char() + " ")
            lines.append("".join(cells))
        return "\n".join(lines) + "\n"