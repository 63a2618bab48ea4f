"""
Tile Errors

All input-validation failures raised by the tile system derive from
TileError, which is itself a ValueError.
"""

from typing import Any


class TileError(ValueError):
    """Base class for invalid tile input"""


class InvalidSuitChar(TileError):
    """Raised when a character is not one of the suit tags m, p, s, z"""

    def __init__(self, char: Any):
        self.char = char
        super().__init__(f"Invalid suit character: {char!r}")


class UnknownTileCode(TileError):
    """Raised when an integer is not a canonical tile code"""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Unknown tile code: {code!r}")


class InvalidTile(TileError):
    """Raised when a tile value is outside the domain of an operation"""

    def __init__(self, tile: Any, reason: str = ""):
        self.tile = tile
        message = f"Invalid tile: {tile!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
