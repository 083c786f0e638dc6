"""共通フィクスチャ。

- 代表的な矩形（正方形/横長/縦長/ゼロ幅）
- 環境変数を汚さない設定リロード
- 空のシーケンサ
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.mask_path import Rect
from engine.splash.sequencer import SplashSequencer

_SPLASH_ENV = (
    "SPLASH_DURATION",
    "SPLASH_SETTLE_DELAY",
    "SPLASH_EASING",
    "SPLASH_CIRCLE_SEGMENTS",
    "SPLASH_MAX_PENDING",
    "SPLASH_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_splash_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テストごとに SPLASH_* を外して既定値で再読込する。"""
    for name in _SPLASH_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    for name in _SPLASH_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()


@pytest.fixture()
def rect_square() -> Rect:
    return Rect(100.0, 100.0)


@pytest.fixture()
def rect_wide() -> Rect:
    return Rect(200.0, 100.0)


@pytest.fixture()
def rect_tall() -> Rect:
    return Rect(60.0, 180.0)


@pytest.fixture()
def rect_flat() -> Rect:
    return Rect(0.0, 50.0)


@pytest.fixture()
def sequencer() -> SplashSequencer:
    return SplashSequencer("red", max_pending=None)
