"""
Tests for tile codes and display metadata
"""

import numpy as np
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from riichi_tiles.errors import InvalidTile, UnknownTileCode
from riichi_tiles.tiles import Suit, Tile, validate, man, pin, sou, EAST, RED_DRAGON, WHITE_DRAGON
from riichi_tiles.codes import (
    TileCode, TileInfo, TILE_TABLE, CODE_BY_TILE, decode, encode, info, is_tile_code
)

ALL_CODES = (
    list(range(1, 10)) + list(range(11, 20)) + list(range(21, 30))
    + [31, 41, 51, 61, 71, 81, 91] + [105, 115, 125]
)


class TestTileCodeTable:
    """Test the canonical code table"""

    def test_domain(self):
        """The table covers exactly the canonical codes"""
        assert sorted(int(c) for c in TileCode) == sorted(ALL_CODES)
        assert set(TILE_TABLE) == set(TileCode)
        assert len(TILE_TABLE) == 37

    def test_table_is_read_only(self):
        """The table cannot be mutated"""
        with pytest.raises(TypeError):
            TILE_TABLE[TileCode.M1] = None

    def test_one_code_per_tile(self):
        """Every code decodes to a distinct tile"""
        assert len(CODE_BY_TILE) == len(TILE_TABLE)

    def test_is_tile_code(self):
        assert is_tile_code(5)
        assert is_tile_code(TileCode.S5_RED)
        assert not is_tile_code(0)
        assert not is_tile_code(10)
        assert not is_tile_code(True)
        assert not is_tile_code("5")


class TestDecode:
    """Test decoding codes to tiles"""

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_decoded_tiles_are_valid(self, code):
        """Every canonical code decodes to a valid tile"""
        assert validate(decode(code))

    def test_concrete_cases(self):
        """Known decodings"""
        assert decode(5) == Tile(Suit.CHARACTERS, 5)
        assert decode(105) == Tile(Suit.CHARACTERS, 0)
        assert decode(91) == Tile(Suit.HONOR, 7)
        assert decode(15) == pin(5)
        assert decode(115) == pin(0)
        assert decode(125) == sou(0)
        assert decode(29) == sou(9)
        assert decode(31) == EAST
        assert decode(71) == RED_DRAGON

    def test_suit_runs(self):
        """X1..X9 decode to faces 1..9 of the run's suit"""
        for base, suit in ((0, Suit.CHARACTERS), (10, Suit.CIRCLES), (20, Suit.BAMBOO)):
            for face in range(1, 10):
                assert decode(base + face) == Tile(suit, face)

    def test_honor_codes(self):
        """31..91 decode to honor faces 1..7"""
        for face, code in enumerate((31, 41, 51, 61, 71, 81, 91), start=1):
            assert decode(code) == Tile(Suit.HONOR, face)

    @pytest.mark.parametrize("code", [0, 10, 20, 30, 32, 92, 100, 135, 200, -5, 5.0, "5", None])
    def test_unknown_codes(self, code):
        """Codes outside the domain fail"""
        with pytest.raises(UnknownTileCode):
            decode(code)


class TestEncode:
    """Test encoding tiles to codes"""

    @pytest.mark.parametrize("code", list(TileCode))
    def test_inverse_of_decode(self, code):
        assert encode(decode(code)) == code

    def test_no_code(self):
        """Valid-looking tiles without a code fail"""
        with pytest.raises(InvalidTile):
            encode(Tile(Suit.HONOR, 0))
        with pytest.raises(InvalidTile):
            encode(Tile(Suit.CHARACTERS, 10))


class TestInfo:
    """Test display metadata"""

    def test_suited(self):
        entry = info(1)
        assert isinstance(entry, TileInfo)
        assert entry.name == "1m"
        assert entry.glyph == "\U0001F007"
        assert entry.suit_char == "m"
        assert not entry.red
        assert info(19).glyph == "\U0001F021"
        assert info(21).glyph == "\U0001F010"

    def test_honors(self):
        assert info(31).name == "East Wind"
        assert info(31).glyph == "\U0001F000"
        assert info(31).suit_char == "z"
        assert info(91).name == "White Dragon"
        assert info(91).glyph == "\U0001F006"
        assert info(91).tile == WHITE_DRAGON

    def test_red_five(self):
        """Red fives share the glyph of the plain five"""
        red = info(TileCode.M5_RED)
        assert red.red
        assert red.name == "0m"
        assert red.glyph == info(TileCode.M5).glyph
        assert red.tile == man(0)

    def test_glyphs_in_block(self):
        """Every glyph is one code point in the Mahjong Tiles block"""
        for entry in TILE_TABLE.values():
            assert len(entry.glyph) == 1
            assert 0x1F000 <= ord(entry.glyph) <= 0x1F021

    def test_numpy_codes(self):
        """Codes read back from numpy arrays decode"""
        assert decode(np.int16(5)) == man(5)
        assert decode(np.array([105], dtype=np.int16)[0]) == man(0)
        assert info(np.int64(91)).name == "White Dragon"
        assert is_tile_code(np.uint8(31))
        with pytest.raises(UnknownTileCode):
            decode(np.int32(200))

    def test_unknown(self):
        with pytest.raises(UnknownTileCode):
            info(200)
