# -*- coding: utf-8 -*-
"""
1 本のライン（行または列）がヒント列と一致するかを判定するモジュールです。

ざっくり流れ
------------
左から 1 マスずつ見ていき、
- 「空白 → 塗り」に変わったら次のヒントに進む
- 塗りマスを見るたびに、今のヒントの残り数を 1 減らす
- 最後に、すべてのヒントの残り数が 0 になっていれば一致
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..types import Clue


def is_line_valid(line: Iterable[object], clues: Sequence[Clue]) -> bool:
    """
    ``line`` の塗りマスの連続長が、左から順に ``clues`` と一致するかを返します。

    Parameters
    ----------
    line : sequence of bool
        判定するライン。長さ 0 でも構いません。
    clues : sequence of int
        ヒント列。空なら「塗りマスが 1 つもない」ことを表します。

    Returns
    -------
    bool
        一致すれば True。
    """
    # ヒント列そのものは書き換えない
    remaining: List[int] = list(clues)
    clue_index = -1
    prev_filled = False

    for cell in line:
        filled = bool(cell)
        if filled:
            if not prev_filled:
                # 新しい連続の始まり
                if clue_index >= 0 and remaining[clue_index] != 0:
                    # 前の連続が短すぎた
                    return False
                clue_index += 1
                if clue_index >= len(remaining):
                    # ヒントより連続の数が多い
                    return False

            remaining[clue_index] -= 1
            if remaining[clue_index] < 0:
                # 連続が長すぎる
                return False

        prev_filled = filled

    return all(r == 0 for r in remaining)


def clue_sum(clues: Sequence[Clue]) -> int:
    """塗られるべきマスの総数を返します。"""
    return sum(clues)


def min_line_length(clues: Sequence[Clue]) -> int:
    """
    ヒント列を置くのに最低限必要なラインの長さを返します。

    連続と連続の間には空白が 1 マス以上必要です。
    """
    if not clues:
        return 0
    return clue_sum(clues) + len(clues) - 1
