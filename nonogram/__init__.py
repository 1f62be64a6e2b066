# nonogram/__init__.py
# -*- coding: utf-8 -*-
"""
nonogram パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from nonogram import solve, run_solver

と呼び出されることを想定しています。

run_solver() では、ヒントを受け取り、
1. ヒントの検査・正規化（Puzzle の構築）
2. 深さ優先探索による解の探索（時間計測つき）
3. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

import time
from typing import Any, Dict, Sequence

from .config import PRUNE_COMPLETED_ROWS
from .csp.line_validator import is_line_valid
from .csp.search import count_solutions, find_solutions, solve, solve_puzzle
from .csp.validity import is_valid
from .logging_utils import get_logger
from .postprocess.render_result import build_result, render_solution
from .types import Puzzle, SearchStats

__all__ = [
    "Puzzle",
    "SearchStats",
    "count_solutions",
    "find_solutions",
    "is_line_valid",
    "is_valid",
    "render_solution",
    "run_solver",
    "solve",
    "solve_puzzle",
]

logger = get_logger()


def run_solver(
    column_clues: Sequence[Sequence[Any]],
    row_clues: Sequence[Sequence[Any]],
    prune_rows: bool = PRUNE_COMPLETED_ROWS,
) -> Dict[str, Any]:
    """
    ヒントから解を探し、表示用の辞書を返すメイン関数。

    ヒントが不正な場合は、探索前に ValueError を送出します。
    """
    puzzle = Puzzle.from_clues(column_clues, row_clues)
    logger.info("=== run_solver() START ===")
    logger.info("Puzzle shape: %dx%d", puzzle.height, puzzle.width)

    stats = SearchStats()
    begin = time.perf_counter()
    solution = solve_puzzle(puzzle, prune_rows=prune_rows, stats=stats)
    elapsed_us = int((time.perf_counter() - begin) * 1_000_000)

    if solution is None:
        logger.info("No solution (%d us)", elapsed_us)
    else:
        logger.info("Solved in %d us", elapsed_us)

    result = build_result(puzzle, solution, stats=stats, elapsed_us=elapsed_us)
    logger.info("=== run_solver() END ===")
    return result
