"""Image locations of the client and the cell style built from them."""

from __future__ import annotations

POLICE_OFFICER = ":/BattleCity/images/PoliceOfficer.png"
POLICE_OFFICER_2 = ":/BattleCity/images/PoliceOfficer2.png"
POLICE_OFFICER_3 = ":/BattleCity/images/PoliceOfficer3.png"
POLICE_OFFICER_4 = ":/BattleCity/images/PoliceOfficer4.png"

ZOMBIE = ":/BattleCity/images/Zombie_Type1.png"
ZOMBIE_1 = ":/BattleCity/images/Zombie1.png"
ZOMBIE_2 = ":/BattleCity/images/Zombie2.png"
ZOMBIE_3 = ":/BattleCity/images/Zombie3.png"

INTRO = ":/BattleCity/images/Intro2.png"
BACK = ":/BattleCity/images/Back.png"

BREAKABLE_WALL = ":/BattleCity/images/BreakableWall_Type1.png"
UNBREAKABLE_WALL = ":/BattleCity/images/UnbreakableWall_Type1.png"
PATH = ":/BattleCity/images/Path.png"
BOMB = ":/BattleCity/images/Bomb.png"

BEER = ":/BattleCity/images/Beer.png"
INVISIBLE = ":/BattleCity/images/Invisible.png"
WALL_BOMB = ":/BattleCity/images/BombBall_Type1.png"
POWERUP = ":/BattleCity/images/Powerup.png"

COIN = ":/BattleCity/images/Coins.png"
SPECIAL_MONEY = ":/BattleCity/images/SpecialMoney.png"
UPGRADE_ICON = ":/BattleCity/images/UpgradeIcon.png"

OBJECT_IMAGES = (BEER, INVISIBLE, WALL_BOMB, BOMB, POWERUP)

_TILE_IMAGES = {
    0: PATH,
    1: BREAKABLE_WALL,
    2: UNBREAKABLE_WALL,
    3: BOMB,
}


def image_for_tile(tile: int) -> str:
    """Return the image of a tile code; unknown codes show as path."""
    return _TILE_IMAGES.get(tile, PATH)


def cell_style(image: str) -> str:
    """Return the style sheet that fills a cell with ``image``."""
    return (
        f"background-image: url({image}); background-repeat: no-repeat; "
        "background-size: cover; border: 0px; margin: 0px; padding: 0px;"
    )