"""
Riichi Mahjong Tiles

Defines the suits and the (suit, face) tile value:
- Characters (m), Circles (p), Bamboo (s): faces 1-9, face 0 is the red five
- Honors (z): faces 1-4 are the winds East, South, West, North,
  faces 5-7 are the Red, Green and White dragons
"""

import numbers
from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InvalidSuitChar, InvalidTile


class Suit(Enum):
    """Tile suits, valued by their single-character tag"""
    CHARACTERS = 'm'  # 萬子 (Manzu)
    CIRCLES = 'p'     # 筒子 (Pinzu)
    BAMBOO = 's'      # 索子 (Souzu)
    HONOR = 'z'       # 字牌 (Jihai)

    @classmethod
    def from_char(cls, c: Any) -> 'Suit':
        """
        Get the suit for a tag character.

        Raises:
            InvalidSuitChar: if c is not one of 'm', 'p', 's', 'z'
        """
        if isinstance(c, str) and c in _SUIT_BY_CHAR:
            return _SUIT_BY_CHAR[c]
        raise InvalidSuitChar(c)

    def to_char(self) -> str:
        return self.value

    @property
    def is_numbered(self) -> bool:
        return self is not Suit.HONOR

    @property
    def order(self) -> int:
        """Position of the suit in the canonical iteration order"""
        return SUIT_ORDER.index(self)


_SUIT_BY_CHAR = {suit.value: suit for suit in Suit}

SUIT_ORDER: Tuple[Suit, ...] = (Suit.CHARACTERS, Suit.CIRCLES, Suit.BAMBOO, Suit.HONOR)
NUMBERED_SUITS: Tuple[Suit, ...] = SUIT_ORDER[:3]


class Honor(IntEnum):
    """Honor tile faces"""
    EAST = 1
    SOUTH = 2
    WEST = 3
    NORTH = 4
    RED_DRAGON = 5    # 中 (Chun)
    GREEN_DRAGON = 6  # 發 (Hatsu)
    WHITE_DRAGON = 7  # 白 (Haku)


RED_FIVE_FACE = 0

# Valid face ranges per suit kind (inclusive)
NUMBERED_FACES = range(0, 10)
HONOR_FACES = range(1, 8)


def is_integer(value: Any) -> bool:
    """Check for an integer value (numpy integers included), excluding bools"""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate(tile: Any) -> bool:
    """
    Structural validity check for a tile.

    Numbered suits accept faces 0-9 (0 being the red five), honors 1-7.
    Independent of the code table.
    """
    if not isinstance(tile, Tile) or not isinstance(tile.suit, Suit):
        return False
    face = tile.face
    if not is_integer(face):
        return False
    if tile.suit is Suit.HONOR:
        return face in HONOR_FACES
    return face in NUMBERED_FACES


@dataclass(frozen=True)
class Tile:
    """
    A single tile value.

    Attributes:
        suit: The suit of the tile
        face: 1-9 for numbered suits (0 for a red five), 1-7 for honors

    Two tiles are equal when suit and face match, so a red five is not
    equal to a plain five. Use kind() or number to compare nominal ranks.
    """
    suit: Suit
    face: int

    @property
    def is_valid(self) -> bool:
        return validate(self)

    @property
    def is_honor(self) -> bool:
        return self.suit is Suit.HONOR

    @property
    def is_red(self) -> bool:
        """Check if tile is a red five"""
        return self.suit is not Suit.HONOR and self.face == RED_FIVE_FACE

    @property
    def number(self) -> int:
        """Nominal face: a red five reads as 5"""
        return 5 if self.is_red else self.face

    @property
    def is_terminal(self) -> bool:
        """Check if tile is a terminal (1 or 9 of numbered suits)"""
        return not self.is_honor and self.face in (1, 9)

    @property
    def is_simple(self) -> bool:
        """Check if tile is a simple (2-8 of numbered suits)"""
        return not self.is_honor and 2 <= self.number <= 8

    @property
    def is_wind(self) -> bool:
        return self.is_honor and Honor.EAST <= self.face <= Honor.NORTH

    @property
    def is_dragon(self) -> bool:
        return self.is_honor and Honor.RED_DRAGON <= self.face <= Honor.WHITE_DRAGON

    @property
    def tile_index(self) -> int:
        """
        Get unique index for this tile kind (0-33).
        A red five shares the index of the plain five.
        """
        if not self.is_valid:
            raise InvalidTile(self, "no kind index")
        if self.is_honor:
            return 27 + self.face - 1  # 27-33
        return self.suit.order * 9 + self.number - 1  # 0-26

    def kind(self) -> 'Tile':
        """Return this tile with a red five normalised to a plain five"""
        if self.is_red:
            return Tile(self.suit, 5)
        return self

    def sort_key(self) -> Tuple[int, int, int]:
        # red five sorts before the plain fives of its suit
        return (self.suit.order, self.number, 0 if self.is_red else 1)

    def __lt__(self, other) -> bool:
        """Comparison for sorting"""
        if not isinstance(other, Tile):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        suit = getattr(self.suit, 'name', self.suit)
        return f"Tile({suit}, {self.face})"

    def __str__(self) -> str:
        """Single-tile notation, e.g. 5m, 0p, 7z"""
        suit = getattr(self.suit, 'value', self.suit)
        return f"{self.face}{suit}"

    @classmethod
    def from_index(cls, tile_index: int) -> 'Tile':
        """
        Create the plain tile for a kind index (0-33).

        Raises:
            InvalidTile: if the index is out of range
        """
        if not is_integer(tile_index) or not 0 <= tile_index < 34:
            raise InvalidTile(tile_index, "kind index must be 0-33")
        tile_index = int(tile_index)
        if tile_index >= 27:
            return cls(Suit.HONOR, tile_index - 27 + 1)
        return cls(NUMBERED_SUITS[tile_index // 9], tile_index % 9 + 1)

    @classmethod
    def from_string(cls, s: str) -> 'Tile':
        """
        Parse single-tile notation: a face digit followed by a suit tag.

        Examples: "1m", "0p" (red five), "9s", "7z" (White Dragon)
        """
        if not isinstance(s, str) or len(s.strip()) != 2:
            raise InvalidTile(s, "expected a face digit and a suit tag")
        s = s.strip()
        suit = Suit.from_char(s[1])
        if s[0] not in "0123456789":
            raise InvalidTile(s, "face must be a digit")
        tile = cls(suit, int(s[0]))
        if not tile.is_valid:
            raise InvalidTile(tile, "face out of range for suit")
        return tile


# Convenience functions for creating specific tiles
def man(value: int) -> Tile:
    """Create a Characters tile (1-9m, 0 for red five)"""
    return Tile(Suit.CHARACTERS, value)

def pin(value: int) -> Tile:
    """Create a Circles tile (1-9p, 0 for red five)"""
    return Tile(Suit.CIRCLES, value)

def sou(value: int) -> Tile:
    """Create a Bamboo tile (1-9s, 0 for red five)"""
    return Tile(Suit.BAMBOO, value)

def honor(face: int) -> Tile:
    """Create an Honor tile (1-7z)"""
    return Tile(Suit.HONOR, int(face))


# Named wind tiles
EAST = honor(Honor.EAST)
SOUTH = honor(Honor.SOUTH)
WEST = honor(Honor.WEST)
NORTH = honor(Honor.NORTH)

# Named dragon tiles
RED_DRAGON = honor(Honor.RED_DRAGON)
GREEN_DRAGON = honor(Honor.GREEN_DRAGON)
WHITE_DRAGON = honor(Honor.WHITE_DRAGON)
