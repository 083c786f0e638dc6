"""
どこで: `engine.splash` サブパッケージ。
何を: 色レイヤーのシーケンサ・目標色ストア・時間ドライバ・フレーム合成。
なぜ: 「色変更要求 → レイヤー追加 → 進捗駆動 → 先頭確定」の流れを形状生成から分離して扱うため。
"""

from .animator import SplashAnimator, run_timeline
from .color_store import ColorStore
from .frame import Layer, SplashFrame, compose_frame
from .sequencer import (
    ColorLayer,
    LayerSnapshot,
    LayerState,
    SequencerFullError,
    SequencerState,
    SplashSequencer,
)

__all__ = [
    "SplashSequencer",
    "ColorLayer",
    "LayerState",
    "LayerSnapshot",
    "SequencerState",
    "SequencerFullError",
    "ColorStore",
    "SplashAnimator",
    "run_timeline",
    "Layer",
    "SplashFrame",
    "compose_frame",
]
