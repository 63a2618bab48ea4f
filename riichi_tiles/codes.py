"""
Tile Codes

Canonical numeric identities for every tile kind:
- 01-09: 1-9 Characters
- 11-19: 1-9 Circles
- 21-29: 1-9 Bamboo
- 31, 41, 51, 61: East, South, West, North
- 71, 81, 91: Red, Green, White dragons
- 105, 115, 125: red fives of Characters, Circles, Bamboo

TileCode is the single source of truth. The display table and the
code <-> tile lookups are all derived from it once, at import.
"""

from enum import IntEnum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .errors import InvalidTile, UnknownTileCode
from .tiles import Tile, Suit, Honor, NUMBERED_SUITS, RED_FIVE_FACE, is_integer, validate


class TileCode(IntEnum):
    """Canonical tile codes"""
    # Characters
    M1 = 1
    M2 = 2
    M3 = 3
    M4 = 4
    M5 = 5
    M6 = 6
    M7 = 7
    M8 = 8
    M9 = 9
    # Circles
    P1 = 11
    P2 = 12
    P3 = 13
    P4 = 14
    P5 = 15
    P6 = 16
    P7 = 17
    P8 = 18
    P9 = 19
    # Bamboo
    S1 = 21
    S2 = 22
    S3 = 23
    S4 = 24
    S5 = 25
    S6 = 26
    S7 = 27
    S8 = 28
    S9 = 29
    # Honors
    EAST = 31
    SOUTH = 41
    WEST = 51
    NORTH = 61
    RED_DRAGON = 71
    GREEN_DRAGON = 81
    WHITE_DRAGON = 91
    # Red fives
    M5_RED = 105
    P5_RED = 115
    S5_RED = 125


RED_CODE_OFFSET = 100

# Unicode Mahjong Tiles block: first glyph of each run
_GLYPH_BASE = {
    Suit.HONOR: 0x1F000,       # East .. White Dragon
    Suit.CHARACTERS: 0x1F007,  # 1m .. 9m
    Suit.BAMBOO: 0x1F010,      # 1s .. 9s
    Suit.CIRCLES: 0x1F019,     # 1p .. 9p
}

HONOR_NAMES = {
    Honor.EAST: "East Wind",
    Honor.SOUTH: "South Wind",
    Honor.WEST: "West Wind",
    Honor.NORTH: "North Wind",
    Honor.RED_DRAGON: "Red Dragon",
    Honor.GREEN_DRAGON: "Green Dragon",
    Honor.WHITE_DRAGON: "White Dragon",
}


@dataclass(frozen=True)
class TileInfo:
    """
    Display metadata for a tile code. Purely descriptive.

    Attributes:
        code: The tile code
        name: Display name ("5m", "0m" for a red five, "East Wind", ...)
        glyph: Unicode Mahjong tile character (U+1F000-U+1F021)
        suit_char: Suit tag character
        face: Face value of the decoded tile
        red: Whether this is a red five (shares the plain five's glyph)
    """
    code: TileCode
    name: str
    glyph: str
    suit_char: str
    face: int
    red: bool = False

    @property
    def tile(self) -> Tile:
        return Tile(Suit.from_char(self.suit_char), self.face)


def _tile_for_code(code: TileCode) -> Tile:
    value = int(code)
    if value > RED_CODE_OFFSET:
        return Tile(NUMBERED_SUITS[(value - RED_CODE_OFFSET) // 10], RED_FIVE_FACE)
    if value < 30:
        return Tile(NUMBERED_SUITS[value // 10], value % 10)
    # 31, 41, ..., 91 -> honor faces 1..7
    return Tile(Suit.HONOR, value // 10 - 2)


def _info_for_code(code: TileCode) -> TileInfo:
    tile = _tile_for_code(code)
    glyph = chr(_GLYPH_BASE[tile.suit] + tile.number - 1)
    if tile.is_honor:
        name = HONOR_NAMES[Honor(tile.face)]
    else:
        name = str(tile)
    return TileInfo(
        code=code,
        name=name,
        glyph=glyph,
        suit_char=tile.suit.to_char(),
        face=tile.face,
        red=tile.is_red,
    )


def _build_tables():
    table: Dict[TileCode, TileInfo] = {}
    by_tile: Dict[Tile, TileCode] = {}
    for code in TileCode:
        entry = _info_for_code(code)
        tile = entry.tile
        if not validate(tile) or tile in by_tile:
            raise RuntimeError(f"Malformed tile code table at {code!r}")
        table[code] = entry
        by_tile[tile] = code
    return MappingProxyType(table), MappingProxyType(by_tile)


TILE_TABLE: Mapping[TileCode, TileInfo]
CODE_BY_TILE: Mapping[Tile, TileCode]
TILE_TABLE, CODE_BY_TILE = _build_tables()
_CODE_VALUES = frozenset(int(code) for code in TileCode)


def is_tile_code(code: Any) -> bool:
    """Check if a value is a canonical tile code"""
    if not is_integer(code):
        return False
    return int(code) in _CODE_VALUES


def _lookup(code: Any) -> TileInfo:
    if not is_tile_code(code):
        raise UnknownTileCode(code)
    return TILE_TABLE[TileCode(int(code))]


def decode(code: int) -> Tile:
    """
    Decode a tile code into its tile.

    Raises:
        UnknownTileCode: if code is not a canonical tile code
    """
    return _lookup(code).tile


def encode(tile: Tile) -> TileCode:
    """
    Get the canonical code for a tile (inverse of decode).

    Raises:
        InvalidTile: if the tile has no code (e.g. face 0 for an honor)
    """
    if not validate(tile) or tile not in CODE_BY_TILE:
        raise InvalidTile(tile, "no tile code")
    return CODE_BY_TILE[tile]


def info(code: int) -> TileInfo:
    """
    Display metadata lookup.

    Raises:
        UnknownTileCode: if code is not a canonical tile code
    """
    return _lookup(code)
