"""
Shape libraries for polycolor.

A library is a named, versioned set of canonical pieces. Loading one
assigns the piece identities 0..N-1 in library order; those identities
are the vertex keys of every coloring graph built later in the run.
"""

import logging
from typing import Callable

from .board import ColorPiece
from .config import MissingShapeLibrary

logger = logging.getLogger(__name__)

LIBRARY_VERSION = 1


def make_piece(name: str, coords: list[tuple[int, int]]) -> ColorPiece:
    """Helper to create an uncolored piece from (x, y) offsets."""
    return ColorPiece.from_coords(coords, name=name).normalized()


# The twelve pentominoes, in their conventional letter order

PENTOMINOES = [
    make_piece("F", [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)]),
    make_piece("I", [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]),
    make_piece("L", [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3)]),
    make_piece("N", [(1, 0), (1, 1), (0, 2), (1, 2), (0, 3)]),
    make_piece("P", [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]),
    make_piece("T", [(0, 0), (1, 0), (2, 0), (1, 1), (1, 2)]),
    make_piece("U", [(0, 0), (2, 0), (0, 1), (1, 1), (2, 1)]),
    make_piece("V", [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]),
    make_piece("W", [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)]),
    make_piece("X", [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)]),
    make_piece("Y", [(1, 0), (0, 1), (1, 1), (1, 2), (1, 3)]),
    make_piece("Z", [(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)]),
]

TETROMINOES = [
    make_piece("I", [(0, 0), (0, 1), (0, 2), (0, 3)]),
    make_piece("O", [(0, 0), (1, 0), (0, 1), (1, 1)]),
    make_piece("T", [(0, 0), (1, 0), (2, 0), (1, 1)]),
    make_piece("S", [(1, 0), (2, 0), (0, 1), (1, 1)]),
    make_piece("L", [(0, 0), (0, 1), (0, 2), (1, 2)]),
]

PIECE_LIBRARIES: dict[str, list[ColorPiece]] = {
    "pentominoes": PENTOMINOES,
    "tetrominoes": TETROMINOES,
}


def assign_ids(pieces: list[ColorPiece]) -> list[ColorPiece]:
    """Give pieces the contiguous identities 0..N-1 (mutates, returns pieces).

    Call once, before variants are built. Identities must not change
    afterwards.
    """
    for piece_id, piece in enumerate(pieces):
        piece.piece_id = piece_id
    return pieces


def get_polyominoes(name: str) -> list[ColorPiece]:
    """Load a predefined library as fresh pieces with identities assigned.

    Raises MissingShapeLibrary for an unknown name.
    """
    try:
        library = PIECE_LIBRARIES[name]
    except KeyError:
        raise MissingShapeLibrary(
            f"No shape library named {name!r} (known: {', '.join(sorted(PIECE_LIBRARIES))})"
        ) from None
    logger.debug("Loaded library %s v%d (%d pieces)", name, LIBRARY_VERSION, len(library))
    return assign_ids([piece.copy() for piece in library])


def all_orientations(piece: ColorPiece) -> list[ColorPiece]:
    """Return all unique rotations and reflections of a piece.

    Uses 4 rotations (90° each), each with and without a flip. Colors
    travel with their cells, so a colored piece can have more distinct
    orientations than its bare shape. Every orientation is shifted so its
    minimum x and y are 0.
    """
    seen = set()
    orientations = []

    p = piece.normalized()
    for _ in range(4):
        for candidate in (p, p.flip()):
            key = tuple(candidate.cells)
            if key not in seen:
                seen.add(key)
                orientations.append(candidate)
        p = p.rotate()

    return orientations


def _turn(piece: ColorPiece, times: int) -> ColorPiece:
    for _ in range(times):
        piece = piece.rotate()
    return piece


def board_symmetries(width: int, height: int) -> list[Callable[[ColorPiece], ColorPiece]]:
    """Rotations and reflections (not the identity) mapping the board onto itself.

    Returned as transforms on pieces: three for an oblong board (half turn
    and the two mirrors), seven for a square one.
    """
    symmetries = [
        lambda p: _turn(p, 2),
        lambda p: p.flip(),
        lambda p: _turn(p.flip(), 2),
    ]
    if width == height:
        symmetries += [
            lambda p: _turn(p, 1),
            lambda p: _turn(p, 3),
            lambda p: _turn(p.flip(), 1),
            lambda p: _turn(p.flip(), 3),
        ]
    return symmetries


def breaks_symmetry(piece: ColorPiece, symmetries: list[Callable[[ColorPiece], ColorPiece]]) -> bool:
    """True if no symmetry maps the piece onto itself and no two map it alike."""
    base = piece.normalized()
    images = {tuple(symmetry(base).cells) for symmetry in symmetries}
    return len(images) == len(symmetries) and tuple(base.cells) not in images


def restrict_orientations(orientations: list[ColorPiece],
                          symmetries: list[Callable[[ColorPiece], ColorPiece]]) -> list[ColorPiece]:
    """Keep one orientation out of each set the board symmetries relate."""
    kept = []
    covered = set()
    for orientation in orientations:
        key = tuple(orientation.cells)
        if key in covered:
            continue
        kept.append(orientation)
        covered.add(key)
        covered.update(tuple(symmetry(orientation).cells) for symmetry in symmetries)
    return kept


def build_variations(pieces: list[ColorPiece],
                     board_size: tuple[int, int] | None = None) -> list[list[ColorPiece]]:
    """One group of orientations per piece, in the order given.

    With board_size, the first piece that breaks every symmetry of that
    rectangle is limited to one orientation per symmetry class. Each
    tiling that uses the piece is then found once instead of once per
    rotation or reflection of the board. Pattern libraries must keep
    every orientation, so leave board_size out for those.
    """
    groups = [all_orientations(piece) for piece in pieces]
    if board_size is None:
        return groups

    symmetries = board_symmetries(*board_size)
    for index, piece in enumerate(pieces):
        if breaks_symmetry(piece, symmetries):
            groups[index] = restrict_orientations(groups[index], symmetries)
            logger.debug("Piece %s limited to %d orientations on a %dx%d board",
                         piece.name or piece.piece_id, len(groups[index]), *board_size)
            break
    else:
        logger.debug("No piece breaks the symmetry of a %dx%d board", *board_size)
    return groups


def find_piece(pieces: list[ColorPiece], name: str) -> ColorPiece:
    """Look up a piece by its name."""
    for piece in pieces:
        if piece.name == name:
            return piece
    raise ValueError(f"No piece named {name!r}")
