import pytest

from battlecity.server.tile import Tile, TileType


@pytest.mark.parametrize(
    "kind, char",
    [
        (TileType.FREE, "F"),
        (TileType.DESTRUCTIBLE_WALL, "D"),
        (TileType.INDESTRUCTIBLE_WALL, "I"),
    ],
)
def test_to_char(kind, char):
    assert Tile(kind).to_char() == char


def test_changing_type_changes_char():
    tile = Tile(TileType.DESTRUCTIBLE_WALL)
    tile.type = TileType.FREE
    assert tile.type is TileType.FREE
    assert tile.to_char() == "F"


def test_default_tile_is_free():
    assert Tile().type is TileType.FREE


def test_tile_type_wire_values():
    tiles = [Tile(kind) for kind in TileType]
    assert [int(tile.type) for tile in tiles] == [0, 1, 2]
    assert [tile.to_char() for tile in tiles] == ["F", "D", "I"]