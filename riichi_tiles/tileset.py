"""
Riichi Mahjong Tile Set

Builds the 136 tiles used to play one round:
- 9 Characters x4 = 36
- 9 Circles x4 = 36
- 9 Bamboo x4 = 36
- 7 Honors x4 = 28 (4 winds, 3 dragons)

With red fives enabled, one of the four fives of each numbered suit is
replaced by its red variant (face 0). Shuffling is left to the caller.
"""

import logging
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .codes import TileCode, encode
from .tiles import Tile, Suit, SUIT_ORDER, RED_FIVE_FACE, validate

logger = logging.getLogger(__name__)

# Total number of unique tile types
NUM_TILE_TYPES = 34
# Total tiles in a complete set
NUM_TILES = 136
# Copies of each tile type
COPIES_PER_TYPE = 4
# The copy whose five becomes red
RED_FIVE_COPY = 0

_SENTINEL_FACE = 666


@lru_cache(maxsize=2)
def build_tileset(include_red_fives: bool = False) -> Tuple[Tile, ...]:
    """
    Build the complete 136-tile set in deterministic order.

    Suits are emitted in order Characters, Circles, Bamboo, Honor. Each
    numbered suit contributes four runs of faces 1-9, honors four runs of
    faces 1-7. When include_red_fives is set, the five of the first run of
    each numbered suit is emitted as face 0.

    The result is cached per flag; tuples are immutable so callers can
    share it freely.
    """
    include_red_fives = bool(include_red_fives)
    tiles: List[Tile] = [Tile(Suit.CHARACTERS, _SENTINEL_FACE)] * NUM_TILES
    index = 0

    for suit in SUIT_ORDER:
        max_face = 7 if suit is Suit.HONOR else 9
        for copy in range(COPIES_PER_TYPE):
            for face in range(1, max_face + 1):
                if (include_red_fives and suit.is_numbered
                        and copy == RED_FIVE_COPY and face == 5):
                    tiles[index] = Tile(suit, RED_FIVE_FACE)
                else:
                    tiles[index] = Tile(suit, face)
                index += 1

    # every slot must have been overwritten
    if index != NUM_TILES or not all(validate(t) for t in tiles):
        raise RuntimeError(f"Tile set construction left invalid slots (filled {index})")

    logger.debug("Built tile set of %d tiles (red fives: %s)", index, include_red_fives)
    return tuple(tiles)


class TileSet:
    """
    An immutable collection of tiles with counting utilities.

    Counting is by kind: a red five counts as a five of its suit.
    """

    NUM_TILE_TYPES = NUM_TILE_TYPES
    NUM_TILES = NUM_TILES
    COPIES_PER_TYPE = COPIES_PER_TYPE

    def __init__(self, tiles: Optional[Iterable[Tile]] = None):
        """Initialize tile set with optional tiles"""
        self._tiles: Tuple[Tile, ...] = tuple(tiles) if tiles is not None else ()

    @classmethod
    def create_full_set(cls, red_fives: bool = False) -> 'TileSet':
        """Create a complete set of 136 tiles"""
        return cls(build_tileset(red_fives))

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    def contains(self, tile: Tile) -> bool:
        """Check if tile (exact, red fives distinct) is in the set"""
        return tile in self._tiles

    def count(self, tile: Tile) -> int:
        """Count occurrences of a tile kind"""
        kind = tile.kind()
        return sum(1 for t in self._tiles if t.kind() == kind)

    def count_exact(self, tile: Tile) -> int:
        """Count occurrences of exactly this tile value"""
        return self._tiles.count(tile)

    def count_by_index(self, tile_index: int) -> int:
        """Count tiles by type index"""
        return sum(1 for t in self._tiles if t.tile_index == tile_index)

    def red_count(self) -> int:
        return sum(1 for t in self._tiles if t.is_red)

    def kinds(self) -> List[Tile]:
        """Get list of unique tile kinds in the set, in first-seen order"""
        seen = set()
        unique = []
        for tile in self._tiles:
            kind = tile.kind()
            if kind not in seen:
                seen.add(kind)
                unique.append(kind)
        return unique

    def to_count_array(self) -> np.ndarray:
        """
        Convert to a 34-element array counting each tile type.
        Useful for hand analysis and encoding.
        """
        counts = np.zeros(self.NUM_TILE_TYPES, dtype=np.int8)
        for tile in self._tiles:
            counts[tile.tile_index] += 1
        return counts

    def codes(self) -> List[TileCode]:
        """Canonical codes of the tiles, in order"""
        return [encode(t) for t in self._tiles]

    def sorted(self) -> 'TileSet':
        """Return a new set sorted by suit and face"""
        return TileSet(sorted(self._tiles))

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, index):
        return self._tiles[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileSet):
            return NotImplemented
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __repr__(self) -> str:
        return f"TileSet({len(self._tiles)} tiles)"

    def __str__(self) -> str:
        return " ".join(str(t) for t in sorted(self._tiles))
