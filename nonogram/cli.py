# -*- coding: utf-8 -*-
"""
コンソールからノノグラムを解くためのエントリポイントです。

使い方（例）:

    python -m nonogram                       # サンプル問題をすべて解く
    python -m nonogram --sample 5x5
    python -m nonogram --columns "2;2;1" --rows "1;2;1 1"
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional, Sequence, Tuple

from .config import PRUNE_COMPLETED_ROWS
from .csp.search import solve_puzzle
from .grid.parser import parse_clue_list
from .logging_utils import set_log_level
from .postprocess.render_result import render_solution
from .samples import SAMPLE_PUZZLES
from .types import Puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nonogram",
        description="Brute-force nonogram solver",
    )
    parser.add_argument(
        "--sample",
        choices=sorted(SAMPLE_PUZZLES),
        action="append",
        help="Solve only the given sample puzzle (repeatable)",
    )
    parser.add_argument("--columns", help='Column clues, e.g. "2;2;1"')
    parser.add_argument("--rows", help='Row clues, e.g. "1;2;1 1"')
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Check the grid only when every cell is decided",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logs")
    return parser


def _collect_puzzles(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> List[Tuple[str, Puzzle]]:
    if (args.columns is None) != (args.rows is None):
        parser.error("--columns and --rows must be given together")

    try:
        if args.columns is not None:
            puzzle = Puzzle.from_clues(
                parse_clue_list(args.columns), parse_clue_list(args.rows)
            )
            return [(f"{puzzle.height}x{puzzle.width}", puzzle)]

        names = args.sample or list(SAMPLE_PUZZLES)
        return [(name, Puzzle.from_clues(*SAMPLE_PUZZLES[name])) for name in names]
    except ValueError as e:
        parser.error(str(e))
        raise  # parser.error は SystemExit を送出する


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    prune_rows = PRUNE_COMPLETED_ROWS and not args.no_prune
    for name, puzzle in _collect_puzzles(parser, args):
        begin = time.perf_counter()
        solution = solve_puzzle(puzzle, prune_rows=prune_rows)
        delta = int((time.perf_counter() - begin) * 1_000_000)

        print(f"{name} Solution:")
        print(render_solution(solution), end="")
        print(f"Time: {delta} microseconds\n")

    return 0
