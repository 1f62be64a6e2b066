# -*- coding: utf-8 -*-
"""
ヒントの文字列表現や、完成した盤面とヒント列を相互に変換するモジュールです。

主な役割:
- "1 1" や "1.1" のような文字列をヒント列に変換
- 盤面の各行・各列から、塗りマスの連続長（ヒント列）を数え上げる
- "XOX" のような文字列の行から盤面を作る
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

from ..config import FILLED_GLYPH
from ..types import Clues, CluesList, normalize_clues
from .lines import get_column, grid_shape

# 1 本のヒント列の中の区切り（空白・ドット・カンマ）
CLUE_SEP_RE = re.compile(r"[\s.,]+")

# ヒント列どうしの区切り
LINE_SEP_RE = re.compile(r"[;/|]")


def parse_clue_sequence(text: str) -> Clues:
    """
    1 本分のヒント列を文字列から読み取ります。

    変換ルール（例）
    ----------------
    - "1 1", "1.1", "1,1" → (1, 1)
    - "" または "0" → ()（塗りマスなし）
    - 数字以外が混じっている場合は ValueError
    """
    s = str(text).strip()
    if not s:
        return ()

    tokens = [t for t in CLUE_SEP_RE.split(s) if t]
    values: List[int] = []
    for tok in tokens:
        if not tok.lstrip("-").isdigit():
            raise ValueError(f"Invalid clue token {tok!r} in {text!r}")
        values.append(int(tok))

    return normalize_clues(values)


def parse_clue_list(text: str) -> CluesList:
    """
    全ライン分のヒントを 1 つの文字列から読み取ります。

    ライン同士は ";" "/" "|" のいずれかで区切ります。

    例: "2;2;1" → [(2,), (2,), (1,)]
        "1/3/1 1 1/1/1" → [(1,), (3,), (1, 1, 1), (1,), (1,)]
    """
    s = str(text).strip()
    if not s:
        return []
    return [parse_clue_sequence(part) for part in LINE_SEP_RE.split(s)]


def clues_from_line(line: Iterable[Any]) -> Clues:
    """
    すべて決まった 1 本のラインから、塗りマスの連続長を数えます。

    例: [True, False, True, True] → (1, 2)
    """
    out: List[int] = []
    run = 0
    for cell in line:
        if cell:
            run += 1
        elif run:
            out.append(run)
            run = 0
    if run:
        out.append(run)
    return tuple(out)


def clues_from_grid(grid: Any) -> Tuple[CluesList, CluesList]:
    """
    完成した盤面から (列ヒント, 行ヒント) を作ります。

    Returns
    -------
    (column_clues, row_clues)
        ソルバーに渡すのと同じ順番のタプル。
    """
    shape = grid_shape(grid)
    if shape is None:
        raise ValueError("Grid must be rectangular")

    _, cols = shape
    row_clues = [clues_from_line(row) for row in grid]
    column_clues = [clues_from_line(get_column(grid, c)) for c in range(cols)]
    return column_clues, row_clues


def grid_from_strings(rows: Sequence[str], filled: str = FILLED_GLYPH) -> np.ndarray:
    """
    "XOX" のような文字列の行から盤面を作ります。

    ``filled`` と同じ文字が塗りマス、それ以外はすべて空白として扱います。
    """
    if not rows:
        return np.zeros((0, 0), dtype=bool)

    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise ValueError("All rows must have the same length")

    return np.array([[ch == filled for ch in r] for r in rows], dtype=bool)
