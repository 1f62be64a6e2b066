import numpy as np

from nonogram.csp.validity import is_valid, valid_dimensions
from nonogram.grid.parser import clues_from_grid, grid_from_strings

T, F = True, False

COLS_3X3 = [(2,), (2,), (1,)]
ROWS_3X3 = [(1,), (2,), (1, 1)]
SOLUTION_3X3 = [
    [F, T, F],
    [T, T, F],
    [T, F, T],
]


def test_valid_grid_as_lists_and_array():
    assert is_valid(COLS_3X3, ROWS_3X3, SOLUTION_3X3)
    assert is_valid(COLS_3X3, ROWS_3X3, np.array(SOLUTION_3X3))


def test_row_mismatch():
    grid = [row[:] for row in SOLUTION_3X3]
    grid[0] = [T, F, F]
    assert not is_valid(COLS_3X3, ROWS_3X3, grid)


def test_column_mismatch_with_rows_ok():
    # 各行は行ヒントを満たすが、列が合わない
    grid = [
        [T, F, F],
        [T, T, F],
        [T, F, T],
    ]
    assert not is_valid(COLS_3X3, ROWS_3X3, grid)


def test_too_few_rows_is_rejected_without_error():
    assert not is_valid(COLS_3X3, ROWS_3X3, SOLUTION_3X3[:2])


def test_wrong_width_is_rejected_without_error():
    grid = [row[:2] for row in SOLUTION_3X3]
    assert not is_valid(COLS_3X3, ROWS_3X3, grid)


def test_ragged_grid_is_rejected_without_error():
    grid = [[F, T, F], [T, T], [T, F, T]]
    assert not is_valid(COLS_3X3, ROWS_3X3, grid)


def test_same_cell_count_but_transposed_shape():
    cols = [(1,), (1,), (1,)]
    rows = [(1,), (1,)]
    grid = [[T, F], [F, T], [F, F]]
    assert not valid_dimensions(cols, rows, grid)
    assert not is_valid(cols, rows, grid)


def test_one_dimensional_array_is_rejected():
    assert not is_valid(COLS_3X3, ROWS_3X3, np.array([True, False, True]))


def test_empty_grid():
    assert is_valid([], [], [])
    assert is_valid([], [], np.zeros((0, 0), dtype=bool))
    assert not is_valid([(1,)], [], [])
    assert not is_valid([], [()], [[]])


def test_round_trip_with_derived_clues():
    rng = np.random.default_rng(7)
    for _ in range(50):
        rows, cols = rng.integers(1, 6, size=2)
        grid = rng.random((rows, cols)) < 0.5
        column_clues, row_clues = clues_from_grid(grid)
        assert is_valid(column_clues, row_clues, grid)


def test_round_trip_from_strings():
    grid = grid_from_strings(["XOXO", "XXXX", "OOXX", "OOXO"])
    column_clues, row_clues = clues_from_grid(grid)
    assert column_clues == [(2,), (1,), (4,), (2,)]
    assert row_clues == [(1, 1), (4,), (2,), (1,)]
    assert is_valid(column_clues, row_clues, grid)


def test_flat_list_is_rejected_without_error():
    assert not is_valid([(1,), (1,)], [(1,), (1,)], [True, False, True, False])


def test_non_grid_values_are_rejected_without_error():
    assert not is_valid([(1,)], [(1,)], None)
    assert not is_valid([(1,)], [(1,)], True)
    assert not is_valid([(1,)], [(1,)], ["X"])
