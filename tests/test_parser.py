from pathlib import Path

import pytest

from hexsudoku.core.errors import FormatError
from hexsudoku.core.grid import Grid
from hexsudoku.core.ordering import CandidateOrder
from hexsudoku.io.parser import SolverOptions, load_puzzle, parse_grid, strip_markup
from hexsudoku.notations import get_notation

PUZZLES = Path(__file__).resolve().parents[1] / "puzzles"


def test_load_classic_puzzle():
    puzzle = load_puzzle(PUZZLES / "classic.yaml")
    assert puzzle.notation == "classic"
    assert puzzle.grid.size == 3
    # '3' in classic notation is the value 2
    assert puzzle.grid.value_at(0, 0) == 2
    assert puzzle.grid.value_at(0, 1) is None
    assert puzzle.options.candidate_order is CandidateOrder.SHUFFLED
    assert puzzle.options.seed == 2024


def test_load_hex_puzzle():
    puzzle = load_puzzle(PUZZLES / "hex16.yaml")
    assert puzzle.grid.size == 4
    assert puzzle.grid.value_at(0, 15) == 15
    assert puzzle.options.candidate_order is CandidateOrder.ASCENDING
    assert puzzle.options.max_iterations == 100000


def test_puzzle_file_without_grid(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("name: nothing here\n", encoding="utf-8")
    with pytest.raises(FormatError):
        load_puzzle(path)


def test_puzzle_file_with_bad_option(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("grid: 0123/2301/1230/3012\noptions:\n  candidate_order: sideways\n", encoding="utf-8")
    with pytest.raises(FormatError):
        load_puzzle(path)


def test_options_defaults_and_unknown_keys():
    opts = SolverOptions.from_mapping(None)
    assert opts.candidate_order is CandidateOrder.SHUFFLED
    assert opts.seed is None
    with pytest.raises(FormatError):
        SolverOptions.from_mapping({"lookahead": True})
    with pytest.raises(FormatError):
        SolverOptions.from_mapping({"seed": "abc"})


def test_length_not_a_fourth_power():
    with pytest.raises(FormatError):
        Grid.from_text("0123456789")


def test_invalid_characters():
    with pytest.raises(FormatError):
        Grid.from_text("012g/..../..../....")
    # 'a' is 10, too large for a 9x9 board
    with pytest.raises(FormatError):
        Grid.from_text("a" + "." * 80)


def test_uneven_rows():
    with pytest.raises(FormatError):
        Grid.from_text("012/30123/0123/0123")


def test_explicit_size_must_match():
    with pytest.raises(FormatError):
        Grid.from_text("0123/2301/1230/3012", size=3)


def test_hex_is_case_insensitive():
    assert Grid.from_text("A" + "." * 255) == Grid.from_text("a" + "." * 255)


def test_classic_blanks():
    assert Grid.from_text("0" * 81, notation="classic") == Grid.empty(3)
    assert Grid.from_text("." * 81, notation="classic") == Grid.empty(3)


def test_unknown_notation():
    with pytest.raises(FormatError):
        get_notation("roman")


def test_strip_markup():
    assert strip_markup("│ \x1b[31m1\x1b[39m2 │") == " 12 "
    grid = parse_grid("╭──┬──╮\n│ 01 │ 23 │\n│ 23 │ 01 │\n├──┼──┤\n│ 12 │ 30 │\n│ 30 │ 12 │\n╰──┴──╯")
    assert grid == Grid.from_text("0123/2301/1230/3012")


def test_unquoted_numeric_grid_is_rejected(tmp_path):
    # YAML reads 0123230112303012 as an octal integer
    path = tmp_path / "numeric.yaml"
    path.write_text("grid: 0123230112303012\n", encoding="utf-8")
    with pytest.raises(FormatError):
        load_puzzle(path)


def test_quoted_one_line_grid(tmp_path):
    path = tmp_path / "quoted.yaml"
    path.write_text('grid: "0123230112303012"\n', encoding="utf-8")
    assert load_puzzle(path).grid == Grid.from_text("0123/2301/1230/3012")
