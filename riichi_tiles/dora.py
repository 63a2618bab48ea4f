"""
Dora System for Riichi Mahjong

The dora is the tile that follows a revealed indicator:
- Numbered suits: 1 -> 2 -> ... -> 9 -> 1
- Winds: East -> South -> West -> North -> East
- Dragons: 5 -> 7 -> 6 -> 5 (Red -> White -> Green -> Red by face name)

Red fives count as one extra dora each (akadora) when the rules enable them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

import numpy as np

from .errors import InvalidTile
from .rules import TileRules, DEFAULT_RULES
from .tiles import Tile, Suit, RED_FIVE_FACE, is_integer

logger = logging.getLogger(__name__)

# Honor faces: winds cycle within 1-4, dragons within 5-7
HONOR_SUCCESSOR: Dict[int, int] = {
    1: 2,
    2: 3,
    3: 4,
    4: 1,
    5: 7,
    6: 5,
    7: 6,
}
HONOR_PREDECESSOR: Dict[int, int] = {v: k for k, v in HONOR_SUCCESSOR.items()}

# Maximum dora indicators: 1 initial + 4 from kans
MAX_INDICATORS = 5


def _checked_face(tile: Any, red_five_as_five: bool) -> int:
    if not isinstance(tile, Tile) or not isinstance(tile.suit, Suit):
        raise InvalidTile(tile, "not a tile")
    if not is_integer(tile.face):
        raise InvalidTile(tile, "face must be an integer")
    face = int(tile.face)
    if tile.suit is Suit.HONOR:
        if face not in HONOR_SUCCESSOR:
            raise InvalidTile(tile, "honor face must be 1-7")
        return face
    if face == RED_FIVE_FACE:
        if not red_five_as_five:
            raise InvalidTile(tile, "red five indicators are disabled")
        return 5
    if not 1 <= face <= 9:
        raise InvalidTile(tile, "numbered face must be 1-9")
    return face


def successor(tile: Tile, red_five_as_five: bool = False) -> Tile:
    """
    Get the dora tile designated by an indicator.

    Args:
        tile: The revealed indicator
        red_five_as_five: Accept a red five (face 0) as an indicator,
            reading it as a 5. Rejected otherwise.

    Raises:
        InvalidTile: if the tile is outside the indicator domain
    """
    face = _checked_face(tile, red_five_as_five)
    if tile.suit is Suit.HONOR:
        return Tile(Suit.HONOR, HONOR_SUCCESSOR[face])
    return Tile(tile.suit, face % 9 + 1)


def predecessor(dora: Tile) -> Tile:
    """
    Get the indicator that designates a dora.

    A red five dora is read as its plain five; the result is always a
    plain tile.

    Raises:
        InvalidTile: if the tile is outside the dora domain
    """
    face = _checked_face(dora, red_five_as_five=True)
    if dora.suit is Suit.HONOR:
        return Tile(Suit.HONOR, HONOR_PREDECESSOR[face])
    return Tile(dora.suit, (face - 2) % 9 + 1)


@dataclass
class DoraSystem:
    """
    Manages dora (bonus tiles) for a round.

    Types of dora:
    - Regular dora: Based on indicator tiles
    - Uradora: Additional indicators revealed for riichi wins
    - Akadora: Red 5 tiles (if enabled by the rules)
    """

    rules: TileRules = DEFAULT_RULES

    # Indicator tiles
    dora_indicators: List[Tile] = field(default_factory=list)
    uradora_indicators: List[Tile] = field(default_factory=list)

    def get_dora_tile(self, indicator: Tile) -> Tile:
        """Get the actual dora tile from an indicator"""
        return successor(indicator, red_five_as_five=self.rules.red_five_indicator)

    def get_all_dora_tiles(self) -> List[Tile]:
        """Get list of all current dora tiles"""
        return [self.get_dora_tile(ind) for ind in self.dora_indicators]

    def get_all_uradora_tiles(self) -> List[Tile]:
        """Get list of all uradora tiles"""
        return [self.get_dora_tile(ind) for ind in self.uradora_indicators]

    def add_dora_indicator(self, indicator: Tile) -> Tile:
        """
        Add a new dora indicator (e.g., after kan).

        Returns the dora it designates. Raises InvalidTile before
        recording anything if the indicator is rejected.
        """
        dora = self.get_dora_tile(indicator)
        self.dora_indicators.append(indicator)
        logger.debug("Dora indicator %s -> dora %s", indicator, dora)
        return dora

    def add_uradora_indicator(self, indicator: Tile) -> Tile:
        """Add a new uradora indicator"""
        dora = self.get_dora_tile(indicator)
        self.uradora_indicators.append(indicator)
        logger.debug("Uradora indicator %s -> dora %s", indicator, dora)
        return dora

    def is_red_five(self, tile: Tile) -> bool:
        """Check if a tile counts as akadora under the current rules"""
        return self.rules.red_fives and tile.is_red

    def count_dora(
        self,
        tiles: Iterable[Tile],
        include_uradora: bool = False,
        include_akadora: bool = True
    ) -> int:
        """
        Count total dora in a collection of tiles.

        Args:
            tiles: Tiles to check
            include_uradora: Whether to count uradora (for riichi wins)
            include_akadora: Whether to count red fives

        Returns:
            Total dora count
        """
        dora_tiles = self.get_all_dora_tiles()
        if include_uradora:
            dora_tiles.extend(self.get_all_uradora_tiles())

        count = 0
        for tile in tiles:
            # a red five is still a five for regular dora
            kind = tile.kind()
            count += sum(1 for dora in dora_tiles if dora == kind)
            if include_akadora and self.is_red_five(tile):
                count += 1
        return count

    def to_observation_array(self) -> np.ndarray:
        """
        Convert dora indicators to observation array.

        Returns:
            (5, 34) array where each row is a dora indicator (one-hot)
        """
        obs = np.zeros((MAX_INDICATORS, 34), dtype=np.int8)
        for i, indicator in enumerate(self.dora_indicators[:MAX_INDICATORS]):
            obs[i, indicator.tile_index] = 1
        return obs

    def reset(self) -> None:
        """Reset for a new round"""
        self.dora_indicators = []
        self.uradora_indicators = []

    def copy(self) -> 'DoraSystem':
        """Create a copy of the dora system"""
        return DoraSystem(
            rules=self.rules,
            dora_indicators=list(self.dora_indicators),
            uradora_indicators=list(self.uradora_indicators),
        )

    def __repr__(self) -> str:
        dora_str = ", ".join(str(d) for d in self.get_all_dora_tiles())
        return f"DoraSystem(dora=[{dora_str}], rules={self.rules})"


def create_dora_system(
    initial_indicator: Tile,
    rules: TileRules = DEFAULT_RULES
) -> DoraSystem:
    """
    Create a new dora system for a round.

    Args:
        initial_indicator: First dora indicator tile
        rules: Tile rules for the round

    Returns:
        Configured DoraSystem
    """
    system = DoraSystem(rules=rules)
    system.add_dora_indicator(initial_indicator)
    return system
