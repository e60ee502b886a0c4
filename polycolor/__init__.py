"""
polycolor - colored polyomino tiling puzzles

Core components:
- IndexedBoard: a tiling whose cells refer to a list of colorable pieces
- color_board: proper coloring of the piece adjacency graph
- overlay / has_all_patterns: paint one tiling with another's colors and
  check that every piece shape shows up as an isolated colored blob
"""

from .board import ColorCell, ColorPiece, Piece, Point, RawTiling
from .colorable_board import Full, IndexedBoard
from .coloring import build_adjacency_graph, color_board, color_rlf, find_coloring
from .patterns import Orientation, has_all_patterns, has_single_color_piece, overlay
from .pieces import build_variations, get_polyominoes
from .solver import solve_tilings
