from __future__ import annotations

from engine.core.mask_path import ArcPath, Rect

from .registry import splash_shape


@splash_shape
def circle(rect: Rect, progress: float) -> ArcPath:
    """矩形中心から広がる円マスク。

    半径は `progress × 半対角線`。`progress=1` で 4 隅まで覆う。
    負の進捗は半径 0（空マスク）に丸める。
    """
    radius = max(0.0, rect.half_diagonal * progress)
    return ArcPath(
        center=(rect.mid_x, rect.mid_y),
        radius=radius,
        start_deg=0.0,
        end_deg=360.0,
        clockwise=True,
    )


__all__ = ["circle"]
