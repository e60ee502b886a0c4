"""
Tests for run configuration and the command line.
"""

import pytest

from polycolor import cli
from polycolor.cli import library_for, main, parse_args
from polycolor.coloring import color_board
from polycolor.config import InvalidConfiguration, RunConfig
from polycolor.pieces import build_variations, get_polyominoes


# ============================================================================
# Configuration
# ============================================================================

def test_run_config_defaults():
    config = RunConfig.build(width=15, height=4)
    assert config.base_index is None
    assert config.target_index is None
    assert config.library == "pentominoes"


@pytest.mark.parametrize("kwargs", [
    {"width": 0, "height": 4},
    {"width": 5, "height": -1},
    {"width": 5, "height": 5, "base_index": -2},
    {"width": 5, "height": 5, "target_index": 3},
])
def test_invalid_configurations(kwargs):
    with pytest.raises(InvalidConfiguration):
        RunConfig.build(**kwargs)


def test_check_index():
    config = RunConfig.build(width=5, height=5, base_index=3)
    config.check_index(3, 4)
    with pytest.raises(InvalidConfiguration):
        config.check_index(4, 4)


def test_parse_args():
    args = parse_args(["15", "4", "10", "58", "--svg", "out.svg"])
    assert (args.width, args.height, args.base, args.target) == (15, 4, 10, 58)
    assert args.svg == "out.svg"
    assert not args.explore


# ============================================================================
# main
# ============================================================================

def test_main_rejects_bad_size(capsys):
    assert main(["0", "5"]) == 2
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_library(capsys):
    assert main(["5", "5", "--library", "hexominoes"]) == 2
    assert "hexominoes" in capsys.readouterr().err


def test_main_rejects_out_of_range_solution(capsys):
    # No tiling of 4x5 by the five tetrominoes exists
    assert main(["4", "5", "0", "--library", "tetrominoes"]) == 2
    assert "out of range" in capsys.readouterr().err


def test_main_explore_needs_base(capsys):
    assert main(["4", "5", "--explore", "--library", "tetrominoes"]) == 2


def test_main_lists_nothing_for_impossible_board(capsys):
    assert main(["4", "5", "--library", "tetrominoes"]) == 0
    out = capsys.readouterr().out
    assert "0 solutions" in out
    assert "nice" not in out


def test_main_prints_colored_base(capsys, tmp_path):
    svg = tmp_path / "base.svg"
    # P, U and Y tile a 5x3 board, among others
    assert main(["5", "3", "0", "--svg", str(svg)]) == 0
    out = capsys.readouterr().out
    assert "SVG saved to" in out
    assert svg.exists()


def test_main_overlay_onto_itself_is_degenerate(capsys):
    # The overlay hands every piece back its own single color
    assert main(["5", "3", "0", "0"]) == 0
    out = capsys.readouterr().out
    assert "Base solution" in out
    assert "Target solution" in out
    assert "Target has a single-color piece. Try a different one" in out
    assert "Solving..." not in out
    assert "valid solution" not in out


def test_library_for_keeps_the_pieces_on_the_board(five_piece_board, five_piece_library):
    assert library_for(five_piece_board, five_piece_library) == five_piece_library

    # Ids 0..4 of the pentomino set are F, I, L, N, P
    pentominoes = build_variations(get_polyominoes("pentominoes"))
    kept = library_for(five_piece_board, pentominoes)
    assert [variants[0].piece_id for variants in kept] == [0, 1, 2, 3, 4]


def test_explore_colors_the_base_once(monkeypatch, capsys):
    calls = []

    def counting_color_board(board):
        calls.append(board)
        return color_board(board)

    monkeypatch.setattr(cli, "color_board", counting_color_board)

    assert main(["5", "3", "0", "--explore"]) == 0
    assert len(calls) == 1
