import numpy as np

from nonogram.grid.parser import grid_from_strings
from nonogram.postprocess.render_result import (
    build_result,
    render_row,
    render_solution,
    solution_to_frame,
)
from nonogram.types import Puzzle, SearchStats


def test_render_row():
    assert render_row([True, False, True]) == "XOX"
    assert render_row(np.array([False, False])) == "OO"


def test_render_solution():
    grid = grid_from_strings(["OXO", "XXO", "XOX"])
    assert render_solution(grid) == "OXO\nXXO\nXOX\n\n"
    assert render_solution(None) == "No solution found\n"


def test_solution_to_frame():
    grid = grid_from_strings(["XO", "OX", "XX"])
    df = solution_to_frame(grid)
    assert df.shape == (3, 2)
    assert list(df.index) == ["r0", "r1", "r2"]
    assert list(df.columns) == ["c0", "c1"]
    assert df.loc["r1", "c1"] == "X"


def test_build_result_solved():
    puzzle = Puzzle.from_clues([[2], [2], [1]], [[1], [2], [1, 1]])
    grid = grid_from_strings(["OXO", "XXO", "XOX"])
    result = build_result(puzzle, grid, stats=SearchStats(nodes_visited=5), elapsed_us=12)

    assert result["solved"] is True
    assert result["shape"] == (3, 3)
    assert result["solved_board"] == ["OXO", "XXO", "XOX"]
    assert result["grid"] == [[0, 1, 0], [1, 1, 0], [1, 0, 1]]
    assert result["row_clues"] == [[1], [2], [1, 1]]
    assert result["stats"]["nodes_visited"] == 5
    assert result["elapsed_us"] == 12


def test_build_result_unsolved():
    puzzle = Puzzle.from_clues([[1]], [[1], [1]])
    result = build_result(puzzle, None)
    assert result["solved"] is False
    assert result["solved_board"] is None
    assert result["grid"] is None
    assert result["message"] == "No solution found"
    assert "stats" not in result
