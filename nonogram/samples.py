# -*- coding: utf-8 -*-
"""
動作確認用のサンプル問題です。

各問題は (列ヒント, 行ヒント) の組で、
SAMPLE_SOLUTIONS にはその答え（X = 塗り, O = 空白）を入れてあります。
"""

from __future__ import annotations

from typing import Dict, List, Tuple

SamplePuzzle = Tuple[List[List[int]], List[List[int]]]

# OXO
# XXO
# XOX
TINY_3X3: SamplePuzzle = (
    [[2], [2], [1]],
    [[1], [2], [1, 1]],
)

# XOXO
# XXXX
# OOXX
# OOXO
SMALL_4X4: SamplePuzzle = (
    [[2], [1], [4], [2]],
    [[1, 1], [4], [2], [1]],
)

# OOXOO
# OXXXO
# XOXOX
# OOXOO
# OOXOO
MEDIUM_5X5: SamplePuzzle = (
    [[1], [1], [5], [1], [1]],
    [[1], [3], [1, 1, 1], [1], [1]],
)

SAMPLE_PUZZLES: Dict[str, SamplePuzzle] = {
    "3x3": TINY_3X3,
    "4x4": SMALL_4X4,
    "5x5": MEDIUM_5X5,
}

SAMPLE_SOLUTIONS: Dict[str, List[str]] = {
    "3x3": ["OXO", "XXO", "XOX"],
    "4x4": ["XOXO", "XXXX", "OOXX", "OOXO"],
    "5x5": ["OOXOO", "OXXXO", "XOXOX", "OOXOO", "OOXOO"],
}
