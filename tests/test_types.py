import numpy as np
import pytest

from nonogram.types import Puzzle, SearchStats, normalize_clues


def test_puzzle_from_clues():
    puzzle = Puzzle.from_clues([[2], [2], [1]], [[1], [2], [1, 1]])
    assert puzzle.column_clues == ((2,), (2,), (1,))
    assert puzzle.row_clues == ((1,), (2,), (1, 1))
    assert puzzle.width == 3
    assert puzzle.height == 3
    assert puzzle.cell_count == 9


def test_puzzle_is_read_only():
    puzzle = Puzzle.from_clues([[1]], [[1]])
    with pytest.raises(AttributeError):
        puzzle.row_clues = ()


def test_normalize_clues():
    assert normalize_clues([]) == ()
    assert normalize_clues([0]) == ()
    assert normalize_clues([1, 2]) == (1, 2)
    assert normalize_clues(np.array([3, 1])) == (3, 1)


@pytest.mark.parametrize(
    "raw", [[0, 1], [-2], [1.5], ["2"], [True], [None], [float("inf")], [float("nan")]]
)
def test_normalize_clues_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        normalize_clues(raw)


def test_search_stats_to_dict():
    stats = SearchStats(nodes_visited=3)
    assert stats.to_dict() == {
        "nodes_visited": 3,
        "leaves_checked": 0,
        "rows_pruned": 0,
        "solutions_found": 0,
    }
