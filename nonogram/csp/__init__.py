# -*- coding: utf-8 -*-
"""
nonogram.csp パッケージ

制約充足（ヒントを満たす盤面探し）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- line_validator.py : 1 本のラインとヒント列の照合
- validity.py       : 盤面全体の検査（形・全行・全列）
- search.py         : 深さ優先探索による解の探索
"""
