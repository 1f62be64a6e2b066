# -*- coding: utf-8 -*-
"""
ノノグラムの盤面を探索するモジュールです。

本バージョンは、制約伝播などの工夫をしない
「1 マスずつ 空白 / 塗り を決めていく深さ優先探索」です。

ざっくり流れ
------------
1. すべて空白の盤面を 1 枚用意する
2. 行優先の通し番号 0, 1, 2, ... の順にマスを決めていく
3. 各マスでは「空白」を先に、「塗り」を後に試す
4. 全マスが決まったら、盤面全体を :func:`is_valid` で検査する
5. 最初に検査を通った盤面を解として返す

再帰は使わず、「各マスで次に試す値」を並べた配列をスタックとして
前後に移動します（マス数が多くても再帰の深さの上限にかかりません）。
盤面は 1 枚だけを使い回し、後戻りするときに
そのマスを必ず元（空白）に戻します。
兄弟の枝が、お互いの仮の書き込みを見ることはありません。

行の最後のマスを決めた時点でその行だけを検査して枝を打ち切る
（``prune_rows=True``）こともできます。
打ち切るのは「どうせ最後の検査で不合格になる枝」だけなので、
見つかる解と、その順番は変わりません。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import numpy as np

from ..config import LOG_EVERY_NODES, PRUNE_COMPLETED_ROWS
from ..grid.lines import freeze, index_to_cell, new_grid
from ..logging_utils import get_logger
from ..types import Puzzle, SearchStats
from .line_validator import is_line_valid
from .validity import is_valid

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    puzzle: Puzzle
    grid: np.ndarray
    prune_rows: bool
    stats: SearchStats
    # 何個解を見つけたら止めるか（None なら全列挙）
    limit: Optional[int] = 1
    solutions: List[np.ndarray] = field(default_factory=list)


def _check_leaf(ctx: SearchContext) -> bool:
    """全マスが決まった盤面を検査し、探索を止めるべきなら True を返します。"""
    ctx.stats.leaves_checked += 1

    if not is_valid(ctx.puzzle.column_clues, ctx.puzzle.row_clues, ctx.grid):
        return False

    ctx.stats.solutions_found += 1
    ctx.solutions.append(freeze(ctx.grid))
    logger.debug("[search] solution #%d found", ctx.stats.solutions_found)

    return ctx.limit is not None and ctx.stats.solutions_found >= ctx.limit


def _visit(ctx: SearchContext) -> None:
    ctx.stats.nodes_visited += 1
    if ctx.stats.nodes_visited % LOG_EVERY_NODES == 0:
        logger.info(
            "[search] nodes_visited = %d, leaves_checked = %d, rows_pruned = %d",
            ctx.stats.nodes_visited,
            ctx.stats.leaves_checked,
            ctx.stats.rows_pruned,
        )


def _search(ctx: SearchContext) -> bool:
    """
    通し番号 0 のマスから順に、すべてのマスを決めていきます。

    Returns
    -------
    bool
        探索を打ち切った（必要な数の解が見つかった）なら True。
    """
    total = ctx.puzzle.cell_count
    width = ctx.puzzle.width

    # next_value[i]: マス i で次に試す値（0 = 空白, 1 = 塗り, 2 = 試し終わり）
    next_value: List[int] = [0] * total
    index = 0
    _visit(ctx)

    while index >= 0:
        if index == total:
            if _check_leaf(ctx):
                # 採用した解はコピー済みなので、盤面は空白に戻しておく
                ctx.grid[...] = False
                return True
            index -= 1
            continue

        row, column = index_to_cell(index, width)
        value = next_value[index]

        if value > 1:
            # 両方試し終わったので、元に戻して 1 つ前のマスへ
            ctx.grid[row, column] = False
            next_value[index] = 0
            index -= 1
            continue

        # 空白 → 塗り の順に試す
        next_value[index] = value + 1
        ctx.grid[row, column] = bool(value)

        if column == width - 1 and ctx.prune_rows and not is_line_valid(
            ctx.grid[row], ctx.puzzle.row_clues[row]
        ):
            ctx.stats.rows_pruned += 1
            continue

        index += 1
        _visit(ctx)

    return False


def _run(
    puzzle: Puzzle,
    prune_rows: bool,
    stats: Optional[SearchStats],
    limit: Optional[int],
) -> SearchContext:
    ctx = SearchContext(
        puzzle=puzzle,
        grid=new_grid(puzzle.height, puzzle.width),
        prune_rows=prune_rows,
        stats=stats if stats is not None else SearchStats(),
        limit=limit,
    )

    logger.info(
        "Search start: %dx%d (%d cells), prune_rows=%s",
        puzzle.height,
        puzzle.width,
        puzzle.cell_count,
        prune_rows,
    )
    _search(ctx)
    logger.info(
        "Search end: solutions=%d, nodes_visited=%d, leaves_checked=%d, rows_pruned=%d",
        ctx.stats.solutions_found,
        ctx.stats.nodes_visited,
        ctx.stats.leaves_checked,
        ctx.stats.rows_pruned,
    )
    return ctx


def solve_puzzle(
    puzzle: Puzzle,
    prune_rows: bool = PRUNE_COMPLETED_ROWS,
    stats: Optional[SearchStats] = None,
) -> Optional[np.ndarray]:
    """
    :class:`Puzzle` を受け取って最初の解を返します。

    解がなければ None を返します（例外にはしません）。
    """
    ctx = _run(puzzle, prune_rows, stats, limit=1)
    return ctx.solutions[0] if ctx.solutions else None


def solve(
    column_clues: Sequence[Sequence[Any]],
    row_clues: Sequence[Sequence[Any]],
    prune_rows: bool = PRUNE_COMPLETED_ROWS,
    stats: Optional[SearchStats] = None,
) -> Optional[np.ndarray]:
    """
    ノノグラム探索のエントリポイント。

    Parameters
    ----------
    column_clues : list of list of int
        左から順に、各列のヒント列。
    row_clues : list of list of int
        上から順に、各行のヒント列。
    prune_rows : bool
        行が埋まるたびに検査して枝を打ち切るかどうか。
    stats : SearchStats, optional
        探索ノード数などを書き込むカウンタ。

    Returns
    -------
    numpy.ndarray or None
        shape = (行数, 列数) の書き込み禁止 bool 配列。解がなければ None。

    Raises
    ------
    ValueError
        0 以下のヒントなど、ヒントそのものが不正な場合（探索前に検出）。
    """
    puzzle = Puzzle.from_clues(column_clues, row_clues)
    return solve_puzzle(puzzle, prune_rows=prune_rows, stats=stats)


def find_solutions(
    column_clues: Sequence[Sequence[Any]],
    row_clues: Sequence[Sequence[Any]],
    limit: Optional[int] = None,
    prune_rows: bool = PRUNE_COMPLETED_ROWS,
    stats: Optional[SearchStats] = None,
) -> List[np.ndarray]:
    """
    解を探索順（:func:`solve` と同じ順番）に最大 ``limit`` 個まで列挙します。

    ``limit=None`` なら全探索します。
    """
    if limit is not None and limit <= 0:
        return []
    puzzle = Puzzle.from_clues(column_clues, row_clues)
    return _run(puzzle, prune_rows, stats, limit=limit).solutions


def count_solutions(
    column_clues: Sequence[Sequence[Any]],
    row_clues: Sequence[Sequence[Any]],
    limit: Optional[int] = None,
    prune_rows: bool = PRUNE_COMPLETED_ROWS,
) -> int:
    """解の個数を返します（``limit`` 個見つかった時点で打ち切り）。"""
    return len(find_solutions(column_clues, row_clues, limit=limit, prune_rows=prune_rows))
