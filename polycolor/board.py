"""
Polyomino geometry and raw tilings.

Coordinate system:
- x (horizontal) grows to the right, y (vertical) grows downward
- Board cell (0, 0) is the top-left corner
- Piece offsets are relative; after sorting, the first offset is the anchor

Adjacency is 4-directional: (x±1, y) and (x, y±1). Diagonal cells are
not neighbors.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union


@dataclass(frozen=True, order=True)
class Point:
    """An integer offset or board position. Orders by x, then y."""
    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def neighbors(self) -> list["Point"]:
        """The four orthogonal neighbors (right, left, down, up)."""
        return [
            Point(self.x + 1, self.y),
            Point(self.x - 1, self.y),
            Point(self.x, self.y + 1),
            Point(self.x, self.y - 1),
        ]


@dataclass(frozen=True)
class Piece:
    """An uncolored shape: a sorted, deduplicated tuple of offsets."""
    points: tuple[Point, ...]

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(sorted(set(self.points))))

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[int, int]]) -> "Piece":
        return cls(tuple(Point(x, y) for x, y in coords))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def nth(self, index: int) -> Point:
        return self.points[index]


@dataclass(frozen=True, order=True)
class ColorCell:
    """A point carrying one color symbol. Orders by x, y, then color."""
    x: int
    y: int
    color: str = "0"

    def __post_init__(self):
        # Boards render and grid colors one character per cell
        if len(self.color) != 1:
            raise ValueError(f"Color symbol must be one character, got {self.color!r}")

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def with_color(self, color: str) -> "ColorCell":
        return ColorCell(self.x, self.y, color)


@dataclass
class ColorPiece:
    """A piece whose cells each carry a color, plus an external identity.

    The identity (piece_id) is a dense key into a coloring result. It is
    assigned once per library before any variants are built and variants
    keep the identity of the piece they came from.
    """
    cells: list[ColorCell]
    piece_id: int = 0
    name: str = field(default="", compare=False)

    def __post_init__(self):
        self.cells = sorted(set(self.cells))

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[int, int]], color: str = "0",
                    piece_id: int = 0, name: str = "") -> "ColorPiece":
        return cls([ColorCell(x, y, color) for x, y in coords], piece_id, name)

    def __hash__(self):
        return hash((self.piece_id, tuple(self.cells)))

    def __iter__(self) -> Iterator[ColorCell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def nth(self, index: int) -> ColorCell:
        return self.cells[index]

    @property
    def shape(self) -> Piece:
        return Piece(tuple(cell.point for cell in self.cells))

    @property
    def colors(self) -> list[str]:
        return [cell.color for cell in self.cells]

    def set_color(self, color: str) -> None:
        """Paint every cell with one color."""
        self.cells = [cell.with_color(color) for cell in self.cells]

    def set_cell_color(self, index: int, color: str) -> None:
        """Paint one cell. Keeps the cell order stable."""
        self.cells[index] = self.cells[index].with_color(color)

    def copy(self) -> "ColorPiece":
        return ColorPiece(list(self.cells), self.piece_id, self.name)

    def _transformed(self, transform) -> "ColorPiece":
        """Apply transform(x, y) to every cell, then shift to the origin."""
        moved = [(transform(c.x, c.y), c.color) for c in self.cells]
        min_x = min(x for (x, _), _ in moved)
        min_y = min(y for (_, y), _ in moved)
        return ColorPiece(
            [ColorCell(x - min_x, y - min_y, color) for (x, y), color in moved],
            self.piece_id,
            self.name,
        )

    def normalized(self) -> "ColorPiece":
        """Translate so the minimum x and y are both 0."""
        return self._transformed(lambda x, y: (x, y))

    def rotate(self) -> "ColorPiece":
        """Rotate 90° clockwise (y grows downward) and normalize."""
        return self._transformed(lambda x, y: (-y, x))

    def flip(self) -> "ColorPiece":
        """Mirror across the vertical axis and normalize."""
        return self._transformed(lambda x, y: (-x, y))


# A shape the pattern verifier can match: only geometry is used
Shape = Union[Piece, ColorPiece]


# Raw tiling cell states, as produced by the tiling collaborator

@dataclass(frozen=True)
class Void:
    """Outside the playable footprint."""


@dataclass(frozen=True)
class Empty:
    """Playable but unfilled."""


@dataclass(frozen=True)
class Placed:
    """A cell covered by a placed piece."""
    piece: ColorPiece
    cell_index: int   # offset of this cell within piece.cells
    anchor_x: int     # board position of the piece's first cell
    anchor_y: int


RawCell = Union[Void, Empty, Placed]


@dataclass
class RawTiling:
    """A width x height grid of raw cell states, stored row-major."""
    width: int
    height: int
    cells: list[RawCell]

    @classmethod
    def empty(cls, width: int, height: int) -> "RawTiling":
        return cls(width, height, [Empty()] * (width * height))

    @classmethod
    def from_placements(
        cls,
        width: int,
        height: int,
        placements: Iterable[tuple[ColorPiece, Point]],
    ) -> "RawTiling":
        """Build a tiling from (piece, origin) pairs.

        Each piece offset is translated by its origin. Placements must fit
        on the board and must not overlap.
        """
        tiling = cls.empty(width, height)
        for piece, origin in placements:
            tiling.place(piece, origin)
        return tiling

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> RawCell:
        if not self.in_bounds(x, y):
            return Void()
        return self.cells[x + y * self.width]

    def place(self, piece: ColorPiece, origin: Point) -> None:
        """Place piece with its offsets translated by origin (mutates)."""
        first = piece.nth(0)
        anchor_x, anchor_y = origin.x + first.x, origin.y + first.y
        for cell_index, cell in enumerate(piece):
            x, y = origin.x + cell.x, origin.y + cell.y
            if not self.in_bounds(x, y):
                raise ValueError(f"Cell ({x}, {y}) of {piece.name or 'piece'} is off the board")
            if not isinstance(self.cells[x + y * self.width], Empty):
                raise ValueError(f"Cell ({x}, {y}) is already covered")
            self.cells[x + y * self.width] = Placed(piece, cell_index, anchor_x, anchor_y)

    def is_complete(self) -> bool:
        """True if no playable cell is left empty."""
        return not any(isinstance(cell, Empty) for cell in self.cells)
