# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 探索が「どこまで進んだか」「何ノード調べたか」を
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging

# nonogram パッケージ共通で使うロガー名
LOGGER_NAME = "nonogram"


def get_logger() -> logging.Logger:
    """
    nonogram 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def set_log_level(level: int) -> None:
    """共通 logger のレベルを変更します（CLI の --verbose 用）。"""
    get_logger().setLevel(level)
