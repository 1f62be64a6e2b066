# -*- coding: utf-8 -*-
"""
nonogram solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Sequence, Tuple

# マス: True = 塗り, False = 空白
Cell = bool

# 1 本のライン（行または列）
Line = Sequence[Cell]

# 1 つのヒント（連続して塗られるマスの数）
Clue = int

# 1 本のラインに対するヒント列 例: (1, 1)
Clues = Tuple[Clue, ...]

# 全ライン分のヒント列
CluesList = List[Clues]


def normalize_clues(raw: Sequence[Any]) -> Clues:
    """
    1 本分のヒント列を検査し、int のタプルに変換します。

    変換ルール
    ----------
    - ``[]`` または ``[0]`` は「塗りマスなし」を表し、``()`` になる
    - 0 以下の値や整数でない値を含む場合は ValueError
    """
    values = list(raw)

    # [0] は「塗りなし」の番兵として扱う
    if len(values) == 1 and _is_int(values[0]) and int(values[0]) == 0:
        return ()

    out: List[int] = []
    for v in values:
        if not _is_int(v):
            raise ValueError(f"Clue values must be integers, got {v!r}")
        if int(v) <= 0:
            raise ValueError(f"Clue values must be positive, got {v!r} in {values!r}")
        out.append(int(v))
    return tuple(out)


def _is_int(v: Any) -> bool:
    # bool は int のサブクラスなので明示的に除外する
    if isinstance(v, bool):
        return False
    try:
        return int(v) == v
    except (TypeError, ValueError, OverflowError):
        return False


@dataclass(frozen=True)
class Puzzle:
    """
    1 問分のノノグラム（列ヒントと行ヒントの組）を表すクラスです。

    Attributes
    ----------
    column_clues : list of Clues
        左から順に、各列のヒント列。列数 = この長さ。
    row_clues : list of Clues
        上から順に、各行のヒント列。行数 = この長さ。
    """

    column_clues: Tuple[Clues, ...]
    row_clues: Tuple[Clues, ...]

    @classmethod
    def from_clues(
        cls,
        column_clues: Sequence[Sequence[Any]],
        row_clues: Sequence[Sequence[Any]],
    ) -> "Puzzle":
        """ヒントを検査・正規化して Puzzle を作ります。"""
        return cls(
            column_clues=tuple(normalize_clues(c) for c in column_clues),
            row_clues=tuple(normalize_clues(r) for r in row_clues),
        )

    @property
    def height(self) -> int:
        """行数を返します。"""
        return len(self.row_clues)

    @property
    def width(self) -> int:
        """列数を返します。"""
        return len(self.column_clues)

    @property
    def cell_count(self) -> int:
        return self.height * self.width


@dataclass
class SearchStats:
    """
    探索中の統計情報です。

    探索関数に外から渡して、探索後に中身を見る使い方を想定しています。

    Attributes
    ----------
    nodes_visited : int
        再帰呼び出し（探索ノード）の数。
    leaves_checked : int
        全マスが決まった盤面を検査した回数。
    rows_pruned : int
        行の検査で打ち切った枝の数。
    solutions_found : int
        見つけた解の数。
    """

    nodes_visited: int = 0
    leaves_checked: int = 0
    rows_pruned: int = 0
    solutions_found: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
