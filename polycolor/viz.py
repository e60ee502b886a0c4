"""
Visualization utilities for colored boards.

Diagnostic output only: a bordered text grid for the terminal and an SVG
file. Neither is a stable format.
"""

from .board import Empty, Void
from .colorable_board import VOID, Full, IndexedBoard, connected_to

CELL_GLYPH = "■"

# Color symbol -> (ANSI foreground code, SVG fill)
PALETTE: dict[str, tuple[int, str]] = {
    "0": (31, "#de241b"),  # red
    "1": (34, "#00325b"),  # blue
    "2": (33, "#ffc100"),  # yellow
    "3": (32, "#006c43"),  # green
}
FALLBACK_COLOR = (30, "#000000")  # black
EMPTY_FILL = "#1b2856"


def make_color(color: str) -> tuple[int, str]:
    """Display color for a color symbol. Unknown symbols render black."""
    return PALETTE.get(color, FALLBACK_COLOR)


def _glyph(board: IndexedBoard, x: int, y: int, use_color: bool) -> str:
    state = board.get(x, y)
    if isinstance(state, Void):
        return " "
    if isinstance(state, Empty):
        return "."
    color = board.get_color(x, y)
    if not use_color:
        return color
    ansi, _ = make_color(color)
    return f"\033[{ansi}m{CELL_GLYPH}\033[0m"


def render_text(board: IndexedBoard, use_color: bool = True) -> str:
    """Render the board with '+', '-' and '|' between distinct pieces.

    Covered cells show a colored square, or their color symbol when
    use_color is False. Empty cells show '.', void cells are blank.
    """
    get = board.get
    lines = []

    # Top border
    top = [" " if get(0, 0) == VOID else "+"]
    for x in range(board.width):
        if get(x, 0) == VOID:
            top.append("  " if get(x + 1, 0) == VOID else " +")
        else:
            top.append("-+")
    lines.append("".join(top))

    for y in range(board.height):
        row = []
        for x in range(board.width):
            piece = get(x, y)
            if x == 0:
                row.append(" " if piece == VOID else "|")
            row.append(_glyph(board, x, y, use_color))
            row.append(" " if connected_to(piece, get(x + 1, y)) else "|")
        lines.append("".join(row))

        bottom = [" " if get(0, y) == VOID else "+"]
        for x in range(board.width):
            piece = get(x, y)
            if connected_to(piece, get(x, y + 1)):
                if connected_to(piece, get(x + 1, y)) and connected_to(get(x, y + 1), get(x + 1, y + 1)):
                    bottom.append("  ")
                else:
                    bottom.append(" +")
            else:
                bottom.append("-+")
        lines.append("".join(bottom))

    return "\n".join(lines)


def display_board(board: IndexedBoard, title: str = "", use_color: bool = True) -> None:
    """Print the board, optionally under a title."""
    if title:
        print(title)
    print(render_text(board, use_color))


def render_svg(board: IndexedBoard, filename: str = "solution.svg") -> str:
    """
    Render board to SVG file with colored cells and piece outlines.
    Returns the filename.
    """
    scale = 40  # pixels per cell
    margin = 20
    width = margin * 2 + board.width * scale
    height = margin * 2 + board.height * scale

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">',
        '<rect width="100%" height="100%" fill="#ffffff"/>',
    ]

    # Cells
    for y in range(board.height):
        for x in range(board.width):
            state = board.get(x, y)
            if isinstance(state, Void):
                continue
            if isinstance(state, Full):
                _, fill = make_color(board.get_color(x, y))
            else:
                fill = EMPTY_FILL
            px, py = margin + x * scale, margin + y * scale
            svg_parts.append(
                f'<rect x="{px}" y="{py}" width="{scale}" height="{scale}" '
                f'fill="{fill}" stroke="#888" stroke-width="1"/>'
            )

    # Piece boundaries: right and bottom edge of every cell, plus the outer
    # left and top edges
    def edge(x1, y1, x2, y2):
        svg_parts.append(
            f'<line x1="{margin + x1 * scale}" y1="{margin + y1 * scale}" '
            f'x2="{margin + x2 * scale}" y2="{margin + y2 * scale}" '
            f'stroke="#000" stroke-width="3"/>'
        )

    for y in range(-1, board.height):
        for x in range(-1, board.width):
            here = board.get(x, y)
            if not connected_to(here, board.get(x + 1, y)) and y >= 0:
                edge(x + 1, y, x + 1, y + 1)
            if not connected_to(here, board.get(x, y + 1)) and x >= 0:
                edge(x, y + 1, x + 1, y + 1)

    svg_parts.append('</svg>')
    svg_content = "\n".join(svg_parts)

    with open(filename, "w") as f:
        f.write(svg_content)

    return filename
