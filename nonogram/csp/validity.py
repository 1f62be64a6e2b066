# -*- coding: utf-8 -*-
"""
盤面全体がヒントをすべて満たしているかを判定するモジュールです。

判定の順番
----------
1. 盤面の大きさがヒントの数と合っているか
2. 各行がその行のヒント列と一致するか
3. 各列がその列のヒント列と一致するか

どこかで不一致が見つかった時点で False を返します。
"""

from __future__ import annotations

from typing import Any, Sequence

from ..grid.lines import get_column, grid_shape
from ..types import Clues
from .line_validator import is_line_valid


def valid_dimensions(
    column_clues: Sequence[Clues],
    row_clues: Sequence[Clues],
    grid: Any,
) -> bool:
    """
    盤面の形がヒントの数と一致しているかを返します。

    - 長方形であること
    - 行数 = 行ヒントの数、列数 = 列ヒントの数
    - マスが 0 個の盤面は、両方のヒントが空のときだけ有効
    """
    shape = grid_shape(grid)
    if shape is None:
        return False

    rows, cols = shape
    if rows == 0 or cols == 0:
        # マスが 1 つもない盤面は、ヒントが両方空のときだけ認める
        return rows == cols == 0 and len(row_clues) == 0 and len(column_clues) == 0

    if rows * cols != len(column_clues) * len(row_clues):
        return False
    return rows == len(row_clues) and cols == len(column_clues)


def is_valid(
    column_clues: Sequence[Clues],
    row_clues: Sequence[Clues],
    grid: Any,
) -> bool:
    """
    盤面 ``grid`` がすべての行ヒント・列ヒントを満たすかを返します。

    Parameters
    ----------
    column_clues : sequence of Clues
        左から順に、各列のヒント列。
    row_clues : sequence of Clues
        上から順に、各行のヒント列。
    grid : list of list or numpy.ndarray
        判定する盤面。形が合わない場合も例外は出さず False を返します。
    """
    # 形が合わなければ、行・列の走査はしない（範囲外アクセスを避ける）
    if not valid_dimensions(column_clues, row_clues, grid):
        return False

    for row, clues in zip(grid, row_clues):
        if not is_line_valid(row, clues):
            return False

    for column_index, clues in enumerate(column_clues):
        if not is_line_valid(get_column(grid, column_index), clues):
            return False

    return True
