"""
Shared fixtures: a 5x5 tiling of five pentominoes and a hand-colored board.
"""

import pytest

from polycolor.board import ColorCell, ColorPiece, Point, RawTiling
from polycolor.colorable_board import Full, IndexedBoard
from polycolor.pieces import build_variations


# ============================================================================
# Pieces of the 5x5 tiling
# ============================================================================

def build_i() -> ColorPiece:
    return ColorPiece.from_coords([(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)], piece_id=0, name="I")


def build_p() -> ColorPiece:
    return ColorPiece.from_coords([(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)], piece_id=1, name="P")


def build_y() -> ColorPiece:
    return ColorPiece.from_coords([(1, 0), (0, 1), (1, 1), (1, 2), (1, 3)], piece_id=2, name="Y")


def build_c() -> ColorPiece:
    return ColorPiece.from_coords([(0, 0), (0, 1), (1, 0), (0, 2), (1, 2)], piece_id=3, name="C")


def build_f() -> ColorPiece:
    return ColorPiece.from_coords([(1, 0), (0, 1), (1, 1), (1, 2), (2, 2)], piece_id=4, name="F")


#  +-+-+-+-+-+
#  |I|P P P|Y|
#  + +   +-+ +
#  |I|P P|Y Y|
#  + +-+-+-+ +
#  |I|C C|F|Y|
#  + + +-+ + +
#  |I|C|F F|Y|
#  + + +-+ +-+
#  |I|C C|F F|
#  +-+-+-+-+-+

FIVE_PIECE_LAYOUT = [
    "IPPPY",
    "IPPYY",
    "ICCFY",
    "ICFFY",
    "ICCFF",
]


@pytest.fixture
def five_pieces():
    return [build_i(), build_p(), build_y(), build_c(), build_f()]


@pytest.fixture
def five_piece_tiling(five_pieces):
    i, p, y, c, f = five_pieces
    return RawTiling.from_placements(5, 5, [
        (i, Point(0, 0)),
        (p, Point(1, 0)),
        (y, Point(3, 0)),
        (c, Point(1, 2)),
        (f, Point(2, 2)),
    ])


@pytest.fixture
def five_piece_board(five_piece_tiling):
    return IndexedBoard.from_tiling(five_piece_tiling)


@pytest.fixture
def five_piece_library(five_pieces):
    return build_variations(five_pieces)


# ============================================================================
# Hand-colored 5x5 board for the pattern verifier
# ============================================================================
#
# Colors on the board:
#
#   0 1 1 1 1
#   0 1 1 0 1
#   0 1 0 0 0
#   0 1 1 0 1
#   0 1 1 1 1
#
# The left column is an isolated vertical I of '0'; the '0's on the right
# form an isolated X.

def _colored(cells):
    return ColorPiece([ColorCell(x, y, color) for x, y, color in cells])


@pytest.fixture
def pattern_board():
    pieces = [
        # P
        _colored([(0, 0, "0"), (0, 1, "0"), (0, 2, "0"), (1, 0, "1"), (1, 1, "1")]),
        # L at the bottom
        _colored([(0, 0, "0"), (0, 1, "0"), (1, 1, "1"), (2, 1, "1"), (3, 1, "1")]),
        # I on the right side
        _colored([(0, 0, "1"), (0, 1, "1"), (0, 2, "0"), (0, 3, "1"), (0, 4, "1")]),
        # Backwards L
        _colored([(0, 3, "1"), (1, 0, "1"), (1, 1, "0"), (1, 2, "0"), (1, 3, "0")]),
        # Zig-zag
        _colored([(0, 2, "1"), (0, 3, "1"), (1, 0, "1"), (1, 1, "1"), (1, 2, "0")]),
    ]

    cells = [
        Full(0, 0, 0, 0), Full(0, 3, 0, 0), Full(4, 2, 2, 0), Full(3, 1, 3, 0), Full(2, 0, 4, 0),
        Full(0, 2, 0, 0), Full(0, 4, 0, 0), Full(4, 3, 2, 0), Full(3, 2, 3, 0), Full(2, 1, 4, 0),
        Full(0, 2, 0, 0), Full(4, 0, 2, 0), Full(4, 4, 2, 0), Full(3, 3, 3, 0), Full(2, 2, 4, 0),
        Full(1, 0, 0, 3), Full(4, 1, 2, 0), Full(3, 0, 2, 0), Full(3, 4, 3, 0), Full(2, 3, 4, 0),
        Full(1, 1, 0, 3), Full(1, 2, 0, 3), Full(1, 3, 0, 3), Full(1, 4, 0, 3), Full(2, 4, 4, 0),
    ]

    return IndexedBoard(5, 5, cells, pieces)
