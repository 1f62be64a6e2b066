# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from ..config import EMPTY_GLYPH, FILLED_GLYPH, NO_SOLUTION_TEXT
from ..types import Puzzle, SearchStats


def render_row(row: Iterable[Any]) -> str:
    """1 行分を "OXO" のような文字列にします。"""
    return "".join(FILLED_GLYPH if cell else EMPTY_GLYPH for cell in row)


def render_rows(solution: np.ndarray) -> List[str]:
    return [render_row(row) for row in solution]


def render_solution(solution: Optional[np.ndarray]) -> str:
    """
    解をコンソール表示用の文字列にします。

    1 行ごとに改行し、最後に空行を 1 つ付けます。
    解がない場合は :data:`NO_SOLUTION_TEXT` を返します。
    """
    if solution is None:
        return NO_SOLUTION_TEXT + "\n"

    return "".join(line + "\n" for line in render_rows(solution)) + "\n"


def solution_to_frame(solution: np.ndarray) -> pd.DataFrame:
    """
    解を、各マスに表示記号が入った DataFrame にします。

    行ラベルは r0, r1, ...、列ラベルは c0, c1, ... です。
    """
    rows, cols = solution.shape
    glyphs = np.where(solution, FILLED_GLYPH, EMPTY_GLYPH)
    return pd.DataFrame(
        glyphs,
        index=[f"r{i}" for i in range(rows)],
        columns=[f"c{j}" for j in range(cols)],
    )


def build_result(
    puzzle: Puzzle,
    solution: Optional[np.ndarray],
    stats: Optional[SearchStats] = None,
    elapsed_us: Optional[int] = None,
) -> Dict[str, Any]:
    """
    API や CLI で返すための、JSON にそのまま変換できる辞書を作ります。
    """
    result: Dict[str, Any] = {
        "solved": solution is not None,
        "shape": (puzzle.height, puzzle.width),
        "column_clues": [list(c) for c in puzzle.column_clues],
        "row_clues": [list(r) for r in puzzle.row_clues],
    }

    if solution is None:
        result["solved_board"] = None
        result["grid"] = None
        result["message"] = NO_SOLUTION_TEXT
    else:
        solved_df = solution_to_frame(solution)
        # DataFrame は返さず、行ごとの文字列にする
        result["solved_board"] = ["".join(r) for r in solved_df.values.tolist()]
        result["grid"] = solution.astype(int).tolist()

    if stats is not None:
        result["stats"] = stats.to_dict()
    if elapsed_us is not None:
        result["elapsed_us"] = int(elapsed_us)

    return result
