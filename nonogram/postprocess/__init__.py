# -*- coding: utf-8 -*-
"""
nonogram.postprocess パッケージ

探索結果（盤面）を表示用の文字列や辞書に変換する処理をまとめています。
"""
