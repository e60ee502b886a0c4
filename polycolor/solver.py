"""
Tiling enumeration using backtracking.

Finds every way to cover a rectangle with a set of pieces, each piece used
at most once. Strategy:
- Cells are numbered along the short side first, so the first empty cell
  sits on a narrow frontier
- Every placement is precomputed as a bitmask and filed under its first
  cell: the placements that can fill the first empty cell are exactly
  the ones filed there
- Try each fitting placement of each unused piece there and recurse

All solutions are sorted afterwards, so a solution index names the same
tiling from one run to the next.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from .board import ColorPiece, Placed, Point, RawTiling

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """One way to put one variant of one piece group on the board."""
    group: int
    variant: int
    origin: Point


def _extent(piece: ColorPiece) -> tuple[int, int]:
    return max(c.x for c in piece) + 1, max(c.y for c in piece) + 1


def enumerate_placements(width: int, height: int,
                         variant_groups: list[list[ColorPiece]]) -> list[Placement]:
    """All in-bounds placements of every variant of every group."""
    placements = []
    for group, variants in enumerate(variant_groups):
        for variant_index, variant in enumerate(variants):
            piece_w, piece_h = _extent(variant)
            for oy in range(height - piece_h + 1):
                for ox in range(width - piece_w + 1):
                    placements.append(Placement(group, variant_index, Point(ox, oy)))
    return placements


def cell_bit(x: int, y: int, width: int, height: int) -> int:
    """Bit number of a cell: the short side of the board varies fastest."""
    if width >= height:
        return x * height + y
    return y * width + x


def placement_mask(placement: Placement, variant_groups: list[list[ColorPiece]],
                   width: int, height: int) -> int:
    mask = 0
    for cell in variant_groups[placement.group][placement.variant]:
        mask |= 1 << cell_bit(placement.origin.x + cell.x, placement.origin.y + cell.y,
                              width, height)
    return mask


def _search(by_first_cell: list[list[tuple[int, Placement]]], full: int,
            group_count: int) -> Iterator[list[Placement]]:
    """Yield the placements of every exact cover of full."""
    used = [False] * group_count
    chosen: list[Placement] = []

    def fill(occupied: int) -> Iterator[list[Placement]]:
        if occupied == full:
            yield list(chosen)
            return

        # Lowest unset bit
        cell = (~occupied & (occupied + 1)).bit_length() - 1
        for mask, placement in by_first_cell[cell]:
            if used[placement.group] or occupied & mask:
                continue
            used[placement.group] = True
            chosen.append(placement)
            yield from fill(occupied | mask)
            chosen.pop()
            used[placement.group] = False

    yield from fill(0)


def solve_tilings(width: int, height: int,
                  variant_groups: list[list[ColorPiece]]) -> list[RawTiling]:
    """Every tiling of a full width x height rectangle.

    variant_groups holds, per piece, the orientations it may be placed in
    (see pieces.build_variations). A piece is used at most once. Placed
    cells keep the variant, so colored variants keep their colors.
    """
    cell_count = width * height
    full = (1 << cell_count) - 1

    by_first_cell: list[list[tuple[int, Placement]]] = [[] for _ in range(cell_count)]
    reachable = 0
    placements = enumerate_placements(width, height, variant_groups)
    for p in placements:
        mask = placement_mask(p, variant_groups, width, height)
        reachable |= mask
        first = (mask & -mask).bit_length() - 1
        by_first_cell[first].append((mask, p))

    if reachable != full:
        logger.info("Some cell of the %dx%d board cannot be covered", width, height)
        return []

    tilings = []
    for chosen in _search(by_first_cell, full, len(variant_groups)):
        tiling = RawTiling.empty(width, height)
        for p in chosen:
            tiling.place(variant_groups[p.group][p.variant], p.origin)
        tilings.append(tiling)
    logger.debug("%d placements, %d solutions", len(placements), len(tilings))

    tilings.sort(key=tiling_key)
    logger.info("Found %d tilings of a %dx%d board", len(tilings), width, height)
    return tilings


def tiling_key(tiling: RawTiling) -> tuple:
    """Deterministic ordering key: per cell, row-major, the placed piece and offset."""
    key = []
    for cell in tiling.cells:
        if isinstance(cell, Placed):
            key.append((cell.piece.piece_id, cell.cell_index, tuple(cell.piece.cells)))
        else:
            key.append((-1, -1, ()))
    return tuple(key)
