"""
Overlaying colorings and searching boards for colored piece patterns.

A pattern is present when the cells in the shape of a piece are all one
color and no orthogonal neighbor outside the shape has that color: an
isolated blob. Diagonal contact is allowed.

    00000
    00100   matches the X pentomino
    01110
    00100
    00000

    00100
    00100   does not: the top '1' extends the blob
    01110
    00100
    00000

    00010
    00100   matches: diagonal neighbors don't count
    01110
    00100
    00000
"""

import logging
from enum import Enum
from typing import Iterable

from .board import Point, Shape
from .colorable_board import IndexedBoard

logger = logging.getLogger(__name__)


class Orientation(Enum):
    NORMAL = "normal"
    ONE_EIGHTY = "one_eighty"
    FLIP_HORIZONTALLY = "flip_horizontally"
    FLIP_ONE_EIGHTY = "flip_one_eighty"

    def apply(self, x: int, y: int, width: int, height: int) -> tuple[int, int]:
        """Map (x, y) on a width x height board under this orientation."""
        if self is Orientation.ONE_EIGHTY:
            return width - 1 - x, height - 1 - y
        if self is Orientation.FLIP_HORIZONTALLY:
            return width - 1 - x, y
        if self is Orientation.FLIP_ONE_EIGHTY:
            return x, height - 1 - y
        return x, y


def overlay(colored_board: IndexedBoard, blank_board: IndexedBoard,
            orientation: Orientation = Orientation.NORMAL) -> None:
    """Copy colors from colored_board onto blank_board (mutates blank_board).

    Both boards must have the same width and height. Colors landing on
    uncovered target cells are dropped.
    """
    for x in range(colored_board.width):
        for y in range(colored_board.height):
            color = colored_board.get_color(x, y)
            if color is not None:
                tx, ty = orientation.apply(x, y, colored_board.width, colored_board.height)
                blank_board.set_color(tx, ty, color)


def has_single_color_piece(board: IndexedBoard) -> bool:
    """True if some piece on the board is painted a single color.

    Such boards are boring: the piece itself already forms its pattern.
    """
    for piece in board.pieces:
        first = piece.nth(0).color
        if all(cell.color == first for cell in piece):
            return True
    return False


def adjacent_points(points: Iterable[Point]) -> set[Point]:
    """All orthogonal neighbors of points that are not points themselves.

    Not clipped to any board: off-board points simply have no color.
    """
    points = set(points)
    adjacent = set()
    for pt in points:
        adjacent.update(pt.neighbors())
    return adjacent - points


def has_single_color_pattern_at(board: IndexedBoard, shape: Shape, x: int, y: int) -> bool:
    """True if shape, anchored at (x, y), covers an isolated one-color region.

    Every shape cell must be colored the same as the shape's first cell,
    and every orthogonal neighbor outside the shape must be uncolored or
    another color.
    """
    points = [Point(x + pt.x, y + pt.y) for pt in shape]
    first = shape.nth(0)
    color = board.get_color(x + first.x, y + first.y)
    if color is None:
        return False

    if not all(board.get_color(pt.x, pt.y) == color for pt in points):
        return False

    return all(board.get_color(pt.x, pt.y) != color for pt in adjacent_points(points))


def has_single_color_pattern(board: IndexedBoard, shape: Shape) -> bool:
    """True if the shape matches an isolated one-color region anywhere."""
    for x in range(board.width):
        for y in range(board.height):
            if has_single_color_pattern_at(board, shape, x, y):
                return True
    return False


def has_all_patterns(board: IndexedBoard, library: list[list[Shape]]) -> bool:
    """True if, for every group of variants, at least one variant is present."""
    return all(
        any(has_single_color_pattern(board, variant) for variant in variants)
        for variants in library
    )


def missing_patterns(board: IndexedBoard, library: list[list[Shape]]) -> list[int]:
    """Indices of the variant groups with no variant present."""
    return [
        index for index, variants in enumerate(library)
        if not any(has_single_color_pattern(board, variant) for variant in variants)
    ]
