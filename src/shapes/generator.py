"""
どこで: `shapes.generator`。
何を: `compute_path(rect, progress, animation)`。種別に応じたマスク境界を返す入口。
なぜ: 呼び出し側（ドライバ/フレーム合成/外部レンダラ）が種別の表記揺れやレジストリを
      意識せずに、(矩形, 進捗, 種別) → パス の純関数として扱えるようにするため。

性質:
- 純粋・決定的。共有可変状態を持たないのでスレッド間で同期なしに呼べる。
- 有限の進捗に対して例外を出さない（範囲外は縮退/はみ出したジオメトリになる）。
"""

from __future__ import annotations

from typing import Sequence

from engine.core.mask_path import MaskPath, Rect

from .kinds import SplashAnimation, SplashKind, as_animation
from .registry import get_splash_shape

RectLike = Rect | Sequence[float]


def as_rect(rect: RectLike) -> Rect:
    """`Rect` または `(width, height)` を `Rect` に揃える。"""
    if isinstance(rect, Rect):
        return rect
    w, h = rect
    return Rect(float(w), float(h))


def compute_path(
    rect: RectLike,
    progress: float,
    animation: SplashAnimation | SplashKind | str,
) -> MaskPath:
    """進捗 `progress` 時点でのマスク境界を返す。

    Parameters
    ----------
    rect : Rect | (width, height)
        対象矩形（原点左上、Y 下向き）。
    progress : float
        0..1 の進捗。範囲外も受理する（呼び出し側で `clamp_progress` 推奨）。
    animation : SplashAnimation | SplashKind | str
        種別。文字列は `SplashAnimation.parse` の表記（例: "circle", "angle:30"）。

    Returns
    -------
    MaskPath
        `PolygonPath`（矩形/三角形）または `ArcPath`（円）。
    """
    anim = as_animation(animation)
    fn = get_splash_shape(anim.name)
    r = as_rect(rect)
    p = float(progress)
    if anim.kind is SplashKind.ANGLE:
        return fn(r, p, angle=anim.angle_deg)
    return fn(r, p)


__all__ = ["compute_path", "as_rect", "RectLike"]
