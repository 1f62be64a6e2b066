# -*- coding: utf-8 -*-
"""
nonogram 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 表示に使う記号（塗り / 空白）
- 探索の枝刈りの有無
- 進捗ログの間隔
などを簡単に変更できます。
"""

from __future__ import annotations

# ==== 表示関連 =============================================================

# 塗られたマスの表示記号
FILLED_GLYPH: str = "X"

# 空白マスの表示記号
EMPTY_GLYPH: str = "O"

# 解が見つからなかったときに表示する文字列
NO_SOLUTION_TEXT: str = "No solution found"


# ==== 探索関連 =============================================================

# 行の最後のマスを決めた時点で、その行をヒントと照合して枝刈りするかどうか。
# False にすると、全マスを決めてから盤面全体を一度だけ検査する
# 素朴な全探索になります（結果は同じですが、非常に遅くなります）。
PRUNE_COMPLETED_ROWS: bool = True

# 何ノード探索するごとに進捗ログを出すか
LOG_EVERY_NODES: int = 100000
