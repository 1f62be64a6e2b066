# -*- coding: utf-8 -*-
"""
盤面（グリッド）と、そこから取り出す「ライン」に関する小さな道具集です。

- 盤面は numpy の bool 2次元配列 (rows, cols) で持ちます
- 列は保存せず、必要なときに行から組み立てます
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np


def new_grid(height: int, width: int) -> np.ndarray:
    """すべて空白の盤面を作ります。"""
    return np.zeros((height, width), dtype=bool)


def grid_shape(grid: Any) -> Optional[Tuple[int, int]]:
    """
    盤面の (行数, 列数) を返します。

    list の list でも numpy 配列でも受け付けます。
    行ごとに長さが違う（長方形でない）場合や、
    行が list などの並びになっていない場合は None を返します。
    行が 0 本のときは (0, 0) です。
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            return None
        return int(grid.shape[0]), int(grid.shape[1])

    try:
        rows = list(grid)
    except TypeError:
        return None
    if not rows:
        return 0, 0

    # 各行は list などの並びでなければならない（文字列は除く）
    for row in rows:
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            return None

    widths = {len(row) for row in rows}
    if len(widths) != 1:
        return None
    return len(rows), widths.pop()


def get_column(grid: Any, column_index: int) -> List[bool]:
    """
    列 ``column_index`` を上から順に取り出します。

    Parameters
    ----------
    grid : list of list or numpy.ndarray
        長方形であることが確認済みの盤面。
    column_index : int
        取り出す列の番号。
    """
    return [bool(row[column_index]) for row in grid]


def index_to_cell(index: int, width: int) -> Tuple[int, int]:
    """行優先の通し番号を (row, column) に変換します。"""
    return index // width, index % width


def freeze(grid: np.ndarray) -> np.ndarray:
    """
    書き込み禁止のコピーを返します。

    探索で採用した解を、呼び出し側で誤って書き換えないようにするためのものです。
    """
    out = np.array(grid, dtype=bool, copy=True)
    out.flags.writeable = False
    return out
