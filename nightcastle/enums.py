"""Enumerations shared by game objects, loaders and scenes."""

from enum import IntEnum


class ObjectState(IntEnum):
    """Life-cycle state of a game object."""

    ALIVE = 0
    BURN = 1
    ACTIVE_DAMAGE = 2
    DIE = 3


class LoaderKind(IntEnum):
    """Object kinds that appear in object layout files."""

    BRICK = 0
    BRICK2 = 1
    BRICK3 = 2
    BRICK_FLAG = 3
    BRICK_INTRO = 4
    CANDLE = 5
    TORCH = 6
    DOOR = 7
    STAIR = 8
    GHOST = 9
    DOG = 10
    BAT = 11
    FISHMAN = 12


class TeamType(IntEnum):
    """Which side or category an object belongs to."""

    LEAGUE = 0
    ENEMY = 1
    ITEM = 2
    GROUND = 3
    STATIC = 4
    WEAPON = 5
    STAIR = 6
    DOOR = 7


class ObjectId(IntEnum):
    """Identifiers of object and item kinds; item ids double as sprite ids."""

    SIMON = 0
    WEAPON_WHIP = 1
    WEAPON_WHIP1 = 2
    WEAPON_WHIP2 = 3
    WEAPON_WHIP3 = 4
    SUBWEAPON_DAGGER = 5
    SUBWEAPON_AXE = 6
    SUBWEAPON_HOLLYWATER = 7
    SUBWEAPON_BOOMERANG = 8
    ENEMY_GHOST = 9
    ENEMY_FIREBALL = 10
    GROUND = 11
    ITEM_SUBWEAPON_NULL = 12
    ITEM_SMALLHEART = 13
    ITEM_BIGHEART = 14
    ITEM_MONEYBAG = 15
    ITEM_MORNINGSTAR = 16
    ITEM_DAGGER = 17
    ITEM_CROSS = 18
    ITEM_AXE = 19
    ITEM_BOOMERANG = 20
    ITEM_FIREBOMB = 21
    ITEM_PORKCHOP = 22
    ITEM_MAGICCRYSTAL = 23
    STATIC_TORCH = 24
    STATIC_CANDLE = 25
    ITEM_STOPWATCH = 26