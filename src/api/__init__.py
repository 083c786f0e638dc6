"""
どこで: `api` 入口（高レベル公開 API）。
何を: マスク生成 `S`・シーケンサ/ドライバ/フレーム合成・装飾子 `splash_shape` などを再輸出。
なぜ: 利用者が単一名前空間から「色変更 → 進捗駆動 → 描画指示」まで完結できるようにするため。

Usage:
    from api import S, SplashSequencer, SplashAnimator, compose_frame, run_timeline

    seq = SplashSequencer("red")
    anim = SplashAnimator(seq)
    seq.on_new_color("blue")

    run_timeline(anim, dt=0.25, steps=2)
    frame = compose_frame(seq, (200, 100), "angle:30")   # 背景 red + blue のウェッジ
    run_timeline(anim, dt=0.25, steps=6)
    assert seq.base_color == "blue"
"""

from engine.core.geometry import Geometry
from engine.core.mask_path import ArcPath, PolygonPath, Rect, clamp_progress, coverage
from engine.splash import (
    ColorLayer,
    ColorStore,
    LayerState,
    SequencerFullError,
    SplashAnimator,
    SplashFrame,
    SplashSequencer,
    compose_frame,
    run_timeline,
)
from shapes import SplashAnimation, SplashKind, compute_path
from shapes.registry import splash_shape as splash_shape  # 公開唯一経路（api.splash_shape）

from .splash import S, SplashShapesAPI

__all__ = [
    # マスク生成
    "S",
    "compute_path",
    "splash_shape",
    "SplashAnimation",
    "SplashKind",
    "Rect",
    "PolygonPath",
    "ArcPath",
    "clamp_progress",
    "coverage",
    "Geometry",
    # 色レイヤー
    "SplashSequencer",
    "ColorLayer",
    "LayerState",
    "SequencerFullError",
    "ColorStore",
    "SplashAnimator",
    "run_timeline",
    "SplashFrame",
    "compose_frame",
    # クラス（高度な使用）
    "SplashShapesAPI",
]

__version__ = "2026.10"
