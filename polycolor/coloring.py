"""
Piece adjacency graph and graph coloring.

Vertices are piece identities (ColorPiece.piece_id), not arena indices or
board positions. Identities must be assigned once, contiguously, before
any graph is built (see pieces.assign_ids).
"""

import logging
from collections import Counter
from dataclasses import dataclass, field

from .colorable_board import Full, IndexedBoard
from .config import BALANCED_CLASS_SIZES

logger = logging.getLogger(__name__)


@dataclass
class AdjacencyGraph:
    """Undirected simple graph over piece identities."""
    vertices: set[int] = field(default_factory=set)
    edges: set[tuple[int, int]] = field(default_factory=set)

    def add_edge(self, a: int, b: int) -> None:
        """Add edge (a, b), stored as (min, max). Self-loops are ignored."""
        if a == b:
            return
        self.vertices.update((a, b))
        self.edges.add((min(a, b), max(a, b)))

    def adjacency(self) -> dict[int, set[int]]:
        """Neighbor sets for every vertex."""
        adj: dict[int, set[int]] = {v: set() for v in self.vertices}
        for a, b in self.edges:
            adj[a].add(b)
            adj[b].add(a)
        return adj

    def neighbors(self, v: int) -> set[int]:
        return {b if a == v else a for a, b in self.edges if v in (a, b)}

    def degree(self, v: int) -> int:
        return len(self.neighbors(v))


def _piece_id_at(board: IndexedBoard, x: int, y: int) -> int | None:
    state = board.get(x, y)
    if isinstance(state, Full):
        return board.get_piece(state.piece_index).piece_id
    return None


def build_adjacency_graph(board: IndexedBoard) -> AdjacencyGraph:
    """Graph of pieces that touch horizontally or vertically.

    Looking right and down from every cell visits each adjacent pair once.
    """
    graph = AdjacencyGraph()

    for y in range(board.height):
        for x in range(board.width):
            here = _piece_id_at(board, x, y)
            if here is None:
                continue
            graph.vertices.add(here)
            for nx, ny in ((x + 1, y), (x, y + 1)):
                there = _piece_id_at(board, nx, ny)
                if there is not None and there != here:
                    graph.add_edge(here, there)

    return graph


def color_rlf(graph: AdjacencyGraph) -> dict[int, int]:
    """Recursive-largest-first coloring. Returns {vertex: color index}.

    Each round opens a new color class with the uncolored vertex of
    highest degree among uncolored vertices, then keeps adding the
    candidate that has the most neighbors already excluded from the class
    (fewest neighbors among the remaining candidates breaks ties, then the
    lowest vertex). The result is proper but not necessarily minimum.
    """
    adj = graph.adjacency()
    uncolored = set(graph.vertices)
    colors: dict[int, int] = {}
    color = 0

    while uncolored:
        first = max(sorted(uncolored), key=lambda v: len(adj[v] & uncolored))
        color_class = {first}
        excluded = adj[first] & uncolored
        candidates = uncolored - excluded - color_class

        while candidates:
            chosen = max(
                sorted(candidates),
                key=lambda v: (len(adj[v] & excluded), -len(adj[v] & candidates)),
            )
            color_class.add(chosen)
            excluded |= adj[chosen] & uncolored
            candidates -= adj[chosen] | {chosen}

        for v in color_class:
            colors[v] = color
        uncolored -= color_class
        color += 1

    return colors


def find_coloring(board: IndexedBoard) -> dict[int, int]:
    """Build the board's adjacency graph and color it."""
    graph = build_adjacency_graph(board)
    colors = color_rlf(graph)
    logger.debug("Colored %d pieces (%d adjacencies) with %d colors",
                 len(graph.vertices), len(graph.edges), len(set(colors.values())))
    return colors


def color_symbol(color: int) -> str:
    """Single-character symbol for a color index: its last hex digit."""
    return format(color, "x")[-1]


def color_board(board: IndexedBoard) -> dict[int, int]:
    """Color the board's pieces in place so no two adjacent pieces match.

    Every cell of a piece receives the same color. Returns the coloring.
    """
    colors = find_coloring(board)
    for piece in board.pieces:
        if piece.piece_id in colors:
            piece.set_color(color_symbol(colors[piece.piece_id]))
    return colors


def color_count(board: IndexedBoard) -> Counter:
    """Number of covered cells per color symbol."""
    counts: Counter = Counter()
    for y in range(board.height):
        for x in range(board.width):
            color = board.get_color(x, y)
            if color is not None:
                counts[color] += 1
    return counts


def is_balanced_coloring(board: IndexedBoard,
                         class_sizes: dict[int, int] = BALANCED_CLASS_SIZES) -> bool:
    """True if the number of colors is in class_sizes and every class has that size."""
    counts = color_count(board)
    expected = class_sizes.get(len(counts))
    return expected is not None and all(n == expected for n in counts.values())
