"""
どこで: `common.logging`
何を: ロガー既定構成のヘルパ。各モジュールは `logging.getLogger(__name__)` を使い、
      実行側（スクリプト/テスト外の起動コード）だけが本ヘルパを呼ぶ。
なぜ: ライブラリとして import されたときにルートロガーを勝手に触らないため。
"""

from __future__ import annotations

import logging

from .env import env_str

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """ログレベルを数値へ解決する。

    `None` の場合は環境変数 `SPLASH_LOG_LEVEL`（既定 "INFO"）を参照する。
    未知の名前は INFO とみなす。
    """
    if level is None:
        level = env_str("SPLASH_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小構成のロギングを一度だけ設定する。

    - ルートロガーに既にハンドラがあれば何もしない（アプリ側の構成を尊重）。
    - 実行エントリ（`api.run_timeline` を回すスクリプト等）から呼ぶ想定。
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)


__all__ = ["setup_default_logging", "resolve_level"]
