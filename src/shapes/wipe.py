"""
どこで: `shapes.wipe`。
何を: 矩形の一辺から反対側へ伸びる 4 方向のワイプマスク。
なぜ: 基本の遷移であり、角度スイープ（`shapes.sweep`）の 90° 倍数ケースもここへ委譲する。

各関数は 4 頂点の閉多角形を返す。頂点順は「固定辺の始点 → 進行辺 → 固定辺の終点」。
`progress=0` で面積 0、`progress=1` で矩形全体。
"""

from __future__ import annotations

from engine.core.mask_path import PolygonPath, Rect

from .registry import splash_shape


@splash_shape
def left_to_right(rect: Rect, progress: float) -> PolygonPath:
    w, h = rect.width, rect.height
    x = w * progress
    return PolygonPath.from_points((0.0, 0.0), (x, 0.0), (x, h), (0.0, h))


@splash_shape
def right_to_left(rect: Rect, progress: float) -> PolygonPath:
    w, h = rect.width, rect.height
    x = w - w * progress
    return PolygonPath.from_points((w, 0.0), (x, 0.0), (x, h), (w, h))


@splash_shape
def top_to_bottom(rect: Rect, progress: float) -> PolygonPath:
    w, h = rect.width, rect.height
    y = h * progress
    return PolygonPath.from_points((0.0, 0.0), (w, 0.0), (w, y), (0.0, y))


@splash_shape
def bottom_to_top(rect: Rect, progress: float) -> PolygonPath:
    w, h = rect.width, rect.height
    y = h - h * progress
    return PolygonPath.from_points((0.0, h), (w, h), (w, y), (0.0, y))


__all__ = ["left_to_right", "right_to_left", "top_to_bottom", "bottom_to_top"]
