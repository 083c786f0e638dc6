"""
どこで: `common.settings`
何を: スプラッシュ遷移の既定値（時間/待機/イージング/円の分割数/キュー上限）を環境変数から型付きで読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # アニメーション（秒）
    SPLASH_DURATION: float = 1.0
    SPLASH_SETTLE_DELAY: float = 1.0
    SPLASH_EASING: str = "ease_in_out"

    # 円マスクを Geometry 化する際の分割数
    SPLASH_CIRCLE_SEGMENTS: int = 64

    # None なら無制限
    SPLASH_MAX_PENDING: int | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 時間は負値を 0 に丸める。
    - 分割数は最小 3（多角形として閉じられる下限）。
    - `SPLASH_MAX_PENDING` は未設定で無制限、設定時は下限 1。
    """
    _settings.SPLASH_DURATION = env_float("SPLASH_DURATION", 1.0, min_value=0.0)
    _settings.SPLASH_SETTLE_DELAY = env_float("SPLASH_SETTLE_DELAY", 1.0, min_value=0.0)
    _settings.SPLASH_EASING = env_str("SPLASH_EASING", "ease_in_out")
    _settings.SPLASH_CIRCLE_SEGMENTS = env_int("SPLASH_CIRCLE_SEGMENTS", 64, min_value=3) or 64
    _settings.SPLASH_MAX_PENDING = env_int("SPLASH_MAX_PENDING", None, min_value=1)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
