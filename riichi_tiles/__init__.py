"""
Riichi Mahjong Tiles
Tile codes, the 136-tile set and the dora indicator rule.
"""

from .errors import TileError, InvalidSuitChar, UnknownTileCode, InvalidTile
from .tiles import Suit, Honor, Tile, validate
from .codes import TileCode, TileInfo, TILE_TABLE, decode, encode, info, is_tile_code
from .tileset import TileSet, build_tileset
from .dora import DoraSystem, successor, predecessor
from .rules import TileRules, DEFAULT_RULES, NO_RED_RULES

__version__ = "0.1.0"
__all__ = [
    "TileError",
    "InvalidSuitChar",
    "UnknownTileCode",
    "InvalidTile",
    "Suit",
    "Honor",
    "Tile",
    "validate",
    "TileCode",
    "TileInfo",
    "TILE_TABLE",
    "decode",
    "encode",
    "info",
    "is_tile_code",
    "TileSet",
    "build_tileset",
    "DoraSystem",
    "successor",
    "predecessor",
    "TileRules",
    "DEFAULT_RULES",
    "NO_RED_RULES",
]
