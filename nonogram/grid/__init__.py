# -*- coding: utf-8 -*-
"""
nonogram.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- lines.py  : 盤面の生成、形の確認、列の取り出し
- parser.py : ヒント文字列の読み取り、盤面からのヒント列の算出
"""
