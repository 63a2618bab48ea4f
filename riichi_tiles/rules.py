"""
Tile Rule Sets

Configures the parts of the tile system that differ between rule sets:
whether the set contains red fives, and whether a revealed red five
is accepted as a dora indicator.
"""

from dataclasses import dataclass
from typing import Tuple

from .tiles import Tile
from .tileset import build_tileset


@dataclass(frozen=True)
class TileRules:
    """
    Tile configuration for a round.

    Attributes:
        name: Display name of the rule set
        red_fives: Build the set with one red five per numbered suit
        red_five_indicator: Treat a red five indicator as a 5 (dora is the 6).
            When False, a red five indicator is rejected as an invalid tile.
    """

    name: str = "Default"

    # Red dora (akadora)
    red_fives: bool = True

    # A red five can be flipped as an indicator once it is in the set
    red_five_indicator: bool = True

    def build_tileset(self) -> Tuple[Tile, ...]:
        """Build the 136-tile set for these rules"""
        return build_tileset(self.red_fives)

    def __str__(self) -> str:
        return f"TileRules({self.name})"


# Standard online rules: three red fives
DEFAULT_RULES = TileRules(
    name="Default",
    red_fives=True,
    red_five_indicator=True,
)

# No red fives; a face-0 indicator can never be drawn so it is rejected
NO_RED_RULES = TileRules(
    name="No Red Fives",
    red_fives=False,
    red_five_indicator=False,
)
