"""
どこで: `engine.splash.frame`。
何を: シーケンサの現在状態から 1 フレーム分の描画指示（背景色 + マスク付きレイヤー列）を組み立てる。
なぜ: 外部レンダラには「背景を塗り、index 0 から順にマスクを重ね塗りする」だけを任せ、
      形状生成と状態の読み出しを 1 回のスナップショットにまとめるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import RGBA, Color, Vec2
from engine.core.geometry import Geometry
from engine.core.mask_path import MaskPath, Rect
from shapes.generator import RectLike, as_rect, compute_path
from shapes.kinds import SplashAnimation, SplashKind, as_animation
from util.color import normalize_color

from .sequencer import SplashSequencer


@dataclass(frozen=True)
class Layer:
    """色付きマスク 1 枚。"""

    path: MaskPath
    color: Color
    progress: float
    layer_id: int | None = None

    def geometry(self, segments: int | None = None) -> Geometry:
        return self.path.to_geometry(segments)


@dataclass(frozen=True)
class SplashFrame:
    """1 フレーム分の描画指示。`layers` は描画順（index 0 が最背面）。"""

    rect: Rect
    animation: SplashAnimation
    background: Color
    layers: tuple[Layer, ...]

    def __len__(self) -> int:
        return len(self.layers)

    def rgba(self) -> tuple[RGBA, tuple[RGBA, ...]]:
        """背景とレイヤーの色を RGBA(0–1) に正規化して返す（`util.color.normalize_color` の受理形式のみ）。"""
        bg = normalize_color(self.background)
        return bg, tuple(normalize_color(layer.color) for layer in self.layers)

    def geometries(
        self, *, origin: Vec2 = (0.0, 0.0), segments: int | None = None
    ) -> tuple[Geometry, ...]:
        """各レイヤーのマスクを `Geometry` に平坦化し、`origin` へ平行移動して返す。"""
        ox, oy = origin
        out = []
        for layer in self.layers:
            g = layer.geometry(segments)
            out.append(g.translate(ox, oy) if (ox or oy) else g)
        return tuple(out)


def compose_frame(
    sequencer: SplashSequencer,
    rect: RectLike,
    animation: SplashAnimation | SplashKind | str,
) -> SplashFrame:
    """シーケンサのスナップショットから描画指示を作る。"""
    r = as_rect(rect)
    anim = as_animation(animation)
    state = sequencer.snapshot()
    layers = tuple(
        Layer(
            path=compute_path(r, snap.progress, anim),
            color=snap.color,
            progress=snap.progress,
            layer_id=snap.layer_id,
        )
        for snap in state.layers
    )
    return SplashFrame(rect=r, animation=anim, background=state.base_color, layers=layers)


__all__ = ["Layer", "SplashFrame", "compose_frame"]
