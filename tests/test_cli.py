import pytest

from nonogram import run_solver
from nonogram.cli import main


def test_single_sample(capsys):
    assert main(["--sample", "3x3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("3x3 Solution:\nOXO\nXXO\nXOX\n\n")
    assert "Time: " in out
    assert "microseconds" in out


def test_all_samples_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for name in ("3x3", "4x4", "5x5"):
        assert f"{name} Solution:" in out
    assert "OOXOO\nOXXXO\nXOXOX\nOOXOO\nOOXOO\n" in out


def test_adhoc_clues(capsys):
    assert main(["--columns", "1/1", "--rows", "1;1", "--no-prune"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("2x2 Solution:\nOX\nXO\n")


def test_unsolvable(capsys):
    assert main(["--columns", "1", "--rows", "1;1"]) == 0
    out = capsys.readouterr().out
    assert "2x1 Solution:\nNo solution found\n" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--columns", "1"],
        ["--columns", "0 1", "--rows", "1"],
        ["--columns", "a", "--rows", "1"],
        ["--sample", "9x9"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_run_solver():
    result = run_solver([[2], [2], [1]], [[1], [2], [1, 1]])
    assert result["solved"] is True
    assert result["solved_board"] == ["OXO", "XXO", "XOX"]
    assert result["stats"]["solutions_found"] == 1
    assert result["elapsed_us"] >= 0


def test_run_solver_rejects_bad_clues():
    with pytest.raises(ValueError):
        run_solver([[0, 2]], [[1]])
