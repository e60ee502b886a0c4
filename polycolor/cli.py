"""
polycolor command line.

The idea: take a tiling, color it (three or four colors usually do), and
overlay that coloring on a different tiling of the same rectangle. The
second tiling's pieces now carry colors. Re-tile the rectangle with those
colored pieces and look for tilings in which the colors themselves form a
complete set of isolated, single-colored piece shapes.

Usage:
    polycolor width height                  list tilings with a balanced coloring
    polycolor width height base             print tiling 'base' colored
    polycolor width height base target      overlay 'base' on 'target' and search
    polycolor width height base --explore   overlay 'base' on every tiling
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum

from .board import ColorPiece
from .colorable_board import IndexedBoard
from .coloring import color_board, color_count, is_balanced_coloring
from .config import MAX_RENDERED_SOLUTIONS, InvalidConfiguration, MissingShapeLibrary, RunConfig
from .patterns import Orientation, has_all_patterns, has_single_color_piece, missing_patterns, overlay
from .pieces import build_variations, get_polyominoes
from .solver import solve_tilings
from .viz import display_board, render_svg

logger = logging.getLogger(__name__)


class OverlayOutcome(Enum):
    DEGENERATE = "degenerate"      # target has a single-color piece
    NO_SOLUTIONS = "no_solutions"
    FOUND = "found"


@dataclass
class OverlayResult:
    outcome: OverlayOutcome
    target: IndexedBoard
    candidates: int = 0
    solutions: list[IndexedBoard] = field(default_factory=list)


def enumerate_solutions(config: RunConfig,
                        variant_groups: list[list[ColorPiece]]) -> list[IndexedBoard]:
    """All tilings of the configured board as indexed boards."""
    tilings = solve_tilings(config.width, config.height, variant_groups)
    return [IndexedBoard.from_tiling(t) for t in tilings]


def library_for(board: IndexedBoard, library: list[list[ColorPiece]]) -> list[list[ColorPiece]]:
    """The variant groups of the pieces that appear on board.

    On a board that uses the whole library this is the whole library.
    """
    present = {piece.piece_id for piece in board.pieces}
    return [variants for variants in library if variants[0].piece_id in present]


def find_nice_colorings(solutions: list[IndexedBoard]) -> list[int]:
    """Indices of the solutions whose coloring is perfectly balanced."""
    nice = []
    for i, solution in enumerate(solutions):
        colored = solution.copy()
        color_board(colored)
        if is_balanced_coloring(colored):
            counts = color_count(colored)
            print(f"Solution {i} has a nice {len(counts)} coloring")
            nice.append(i)
    return nice


def build_single_solution_variations(
    config: RunConfig,
    base_solution: IndexedBoard,
    target_solution: IndexedBoard,
    orientation: Orientation,
    library: list[list[ColorPiece]],
    show: bool = True,
) -> OverlayResult:
    """Overlay the colored base onto target and search the colored re-tilings.

    target_solution is mutated by the overlay. The re-tilings are searched
    up to the board's symmetries; solutions are those whose colors contain
    every shape of library, which should hold every orientation of each
    shape, as an isolated blob.
    """
    overlay(base_solution, target_solution, orientation)

    if show:
        display_board(base_solution, "Base solution")
        display_board(target_solution, "Target solution")

    # A single-color piece on the target makes its own pattern: boring
    if has_single_color_piece(target_solution):
        logger.info("Overlay %s leaves a single-color piece", orientation.value)
        return OverlayResult(OverlayOutcome.DEGENERATE, target_solution)

    colored_groups = build_variations(target_solution.pieces, (config.width, config.height))
    print("Solving...")
    candidates = enumerate_solutions(config, colored_groups)
    print(f"Found {len(candidates)} possible solutions. Checking...")

    valid = []
    for board in candidates:
        if has_all_patterns(board, library):
            valid.append(board)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("Re-tiling misses patterns %s", missing_patterns(board, library))
    logger.debug("%d of %d re-tilings contain every pattern", len(valid), len(candidates))

    outcome = OverlayOutcome.FOUND if valid else OverlayOutcome.NO_SOLUTIONS
    return OverlayResult(outcome, target_solution, len(candidates), valid)


def explore_overlays(config: RunConfig, base_solution: IndexedBoard,
                     solutions: list[IndexedBoard],
                     library: list[list[ColorPiece]]) -> dict[tuple[int, Orientation], OverlayResult]:
    """Try the colored base on every other solution under all four orientations."""
    colored = base_solution.copy()
    color_board(colored)

    results = {}
    for index, target in enumerate(solutions):
        if index == config.base_index:
            continue
        for orientation in Orientation:
            result = build_single_solution_variations(
                config, colored, target.copy(), orientation,
                library_for(target, library), show=False)
            results[(index, orientation)] = result
            if result.outcome is OverlayOutcome.FOUND:
                print(f"Target {index} ({orientation.value}): "
                      f"{len(result.solutions)} valid solution(s)")
    return results


def report(result: OverlayResult) -> None:
    if result.outcome is OverlayOutcome.DEGENERATE:
        print("Target has a single-color piece. Try a different one")
        return
    if result.outcome is OverlayOutcome.NO_SOLUTIONS:
        print("No valid solutions")
        return

    print(f"\n\n{len(result.solutions)} valid solution(s)")
    if len(result.solutions) < MAX_RENDERED_SOLUTIONS:
        for solution in result.solutions:
            display_board(solution)


def run(config: RunConfig, explore: bool = False) -> None:
    pieces = get_polyominoes(config.library)
    # Patterns may show up in any orientation; tilings are searched up to symmetry
    library = build_variations(pieces)
    restricted = build_variations(pieces, (config.width, config.height))

    print("Generating solutions")
    solutions = enumerate_solutions(config, restricted)
    print(f"{len(solutions)} solutions")

    if config.base_index is None:
        find_nice_colorings(solutions)
        return

    config.check_index(config.base_index, len(solutions))
    if explore:
        explore_overlays(config, solutions[config.base_index], solutions, library)
        return

    base_solution = solutions[config.base_index].copy()
    color_board(base_solution)

    if config.target_index is None:
        display_board(base_solution)
        if config.svg_path:
            print(f"SVG saved to: {render_svg(base_solution, config.svg_path)}")
        return

    config.check_index(config.target_index, len(solutions))
    target_solution = solutions[config.target_index].copy()
    result = build_single_solution_variations(
        config, base_solution, target_solution, Orientation.NORMAL,
        library_for(target_solution, library))
    report(result)
    if config.svg_path:
        print(f"SVG saved to: {render_svg(result.target, config.svg_path)}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="polycolor",
        description="Find colorings of polyomino tilings that spell out every piece.",
    )
    parser.add_argument("width", type=int, help="Board width")
    parser.add_argument("height", type=int, help="Board height")
    parser.add_argument("base", type=int, nargs="?", help="Base solution index")
    parser.add_argument("target", type=int, nargs="?", help="Target solution index")
    parser.add_argument("--library", default="pentominoes", help="Shape library name")
    parser.add_argument("--svg", help="Also write the last board to this SVG file")
    parser.add_argument("--explore", action="store_true",
                        help="Overlay the base on every solution and orientation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig.build(
            width=args.width,
            height=args.height,
            base_index=args.base,
            target_index=args.target,
            library=args.library,
            svg_path=args.svg,
        )
        if args.explore and config.base_index is None:
            raise InvalidConfiguration("--explore needs a base solution")
        run(config, explore=args.explore)
    except (InvalidConfiguration, MissingShapeLibrary) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
