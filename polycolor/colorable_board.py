"""
Indexed (colorable) board.

Like a raw tiling, but cells refer to pieces by an index into a side list
(the piece arena) so that coloring a piece once colors every cell that
refers to it. Cells never hold the pieces themselves.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .board import ColorCell, ColorPiece, Empty, Placed, RawTiling, Void


@dataclass(frozen=True)
class Full:
    """A cell covered by arena piece `piece_index`.

    anchor_x/anchor_y record where the piece's first cell sits on the
    board. They are provenance only: same piece_index means same piece.
    """
    piece_index: int
    cell_index: int
    anchor_x: int
    anchor_y: int


CellState = Union[Void, Empty, Full]

VOID = Void()
EMPTY = Empty()


def connected_to(state: CellState, other: CellState) -> bool:
    """True if two cell states belong to the same region.

    Void joins void, empty joins empty, full cells join when they belong
    to the same piece. Cell and anchor fields are ignored.
    """
    if isinstance(state, Full):
        return isinstance(other, Full) and state.piece_index == other.piece_index
    return state == other


def find_insert(pieces: list[ColorPiece], needle: ColorPiece) -> int:
    """Index of a piece structurally equal to needle, appending a copy if absent."""
    for index, piece in enumerate(pieces):
        if piece == needle:
            return index
    pieces.append(needle.copy())
    return len(pieces) - 1


class IndexedBoard:
    """A width x height grid of cell states plus the piece arena."""

    def __init__(self, width: int, height: int,
                 cells: list[CellState], pieces: list[ColorPiece]):
        self.width = width
        self.height = height
        self.cells = cells      # row-major
        self.pieces = pieces

    @classmethod
    def from_tiling(cls, tiling: RawTiling) -> "IndexedBoard":
        """Group the cells of a raw tiling into distinct pieces.

        Scans row-major; a placed piece joins the arena the first time it
        is seen, structurally equal placements share one entry.
        """
        pieces: list[ColorPiece] = []
        cells: list[CellState] = []

        for y in range(tiling.height):
            for x in range(tiling.width):
                raw = tiling.get(x, y)
                if isinstance(raw, Placed):
                    cells.append(Full(find_insert(pieces, raw.piece), raw.cell_index,
                                      raw.anchor_x, raw.anchor_y))
                elif isinstance(raw, Void):
                    cells.append(VOID)
                else:
                    cells.append(EMPTY)

        return cls(tiling.width, tiling.height, cells, pieces)

    def copy(self) -> "IndexedBoard":
        """Independent copy: the grid and every arena piece are duplicated."""
        return IndexedBoard(self.width, self.height, list(self.cells),
                            [piece.copy() for piece in self.pieces])

    def on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _to_idx(self, x: int, y: int) -> int:
        return x + y * self.width

    def get(self, x: int, y: int) -> CellState:
        """Cell state at (x, y); VOID anywhere off the board."""
        if self.on_board(x, y):
            return self.cells[self._to_idx(x, y)]
        return VOID

    def get_piece(self, piece_index: int) -> ColorPiece:
        return self.pieces[piece_index]

    def get_cell(self, piece_index: int, cell_index: int) -> ColorCell:
        return self.pieces[piece_index].nth(cell_index)

    def piece_index_at(self, x: int, y: int) -> Optional[int]:
        state = self.get(x, y)
        return state.piece_index if isinstance(state, Full) else None

    def get_color(self, x: int, y: int) -> Optional[str]:
        """Color at (x, y), or None when the cell is not covered or off the board."""
        state = self.get(x, y)
        if isinstance(state, Full):
            return self.get_cell(state.piece_index, state.cell_index).color
        return None

    def set_color(self, x: int, y: int, color: str) -> None:
        """Paint the piece cell at (x, y). No-op on uncovered cells."""
        state = self.get(x, y)
        if isinstance(state, Full):
            self.pieces[state.piece_index].set_cell_color(state.cell_index, color)

    def color_grid(self) -> np.ndarray:
        """(height, width) array of color symbols, '' where uncolored."""
        grid = np.full((self.height, self.width), "", dtype="<U1")
        for y in range(self.height):
            for x in range(self.width):
                color = self.get_color(x, y)
                if color is not None:
                    grid[y, x] = color
        return grid

    def piece_grid(self) -> np.ndarray:
        """(height, width) array of arena indices, -1 where not covered."""
        grid = np.full((self.height, self.width), -1, dtype=int)
        for y in range(self.height):
            for x in range(self.width):
                index = self.piece_index_at(x, y)
                if index is not None:
                    grid[y, x] = index
        return grid

    def __str__(self) -> str:
        from .viz import render_text
        return render_text(self, use_color=False)
