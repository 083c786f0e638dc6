"""
どこで: `shapes.sweep`。
何を: 任意角度で矩形の隅から伸びる直角三角形（ウェッジ）マスク。
なぜ: 4 方向ワイプの一般化。90° の倍数では三角形の式が特異（tan(0)=0 → 逆傾き無限大）に
      なるため、その場合は `shapes.wipe` の矩形ケースへ厳密に委譲する。

幾何（矩形 W×H, 進捗 p, 正規化角 a = angle mod 360）:
- c = a mod 90 ∈ (0, 90)、m = tan(c)、m1 = -1/m。
- 矩形の対角を通る逆傾き直線の切片 b = H - m1·W（= H + W/m）。
- 三角形の脚長は x = b·m·p（X 方向）、y = b·p（Y 方向）。p に対して線形。
- W または H が 0 の矩形では起点 1 点の縮退三角形（面積 0）を返す。
- 象限で起点の隅と脚の向きを選ぶ:

      (0, 90)    起点 (0, 0)   そのまま
      (90, 180)  起点 (W, 0)   x 反転
      (180, 270) 起点 (W, H)   x, y 反転
      (270, 360) 起点 (0, H)   y 反転

`p=1` で斜辺は起点の対角の隅を通り、矩形全体を覆う。
"""

from __future__ import annotations

import math

from engine.core.mask_path import PolygonPath, Rect

from .registry import splash_shape
from .wipe import bottom_to_top, left_to_right, right_to_left, top_to_bottom


_CARDINAL = {
    0.0: left_to_right,
    90.0: top_to_bottom,
    180.0: right_to_left,
    270.0: bottom_to_top,
}


def normalize_angle(angle: float) -> float:
    """度数を [0, 360) に正規化する（負の角度も同じ向きへ写す）。"""
    a = float(angle) % 360.0
    # -1e-20 % 360 のような丸めで 360.0 になるケースを 0 へ
    return 0.0 if a >= 360.0 else a


def _anchor(a: float, rect: Rect) -> tuple[float, float, float, float]:
    """起点の隅 (ox, oy) と脚の符号 (sx, sy) を返す。"""
    w, h = rect.width, rect.height
    if 90.0 < a < 180.0:
        return w, 0.0, -1.0, 1.0
    if 180.0 < a < 270.0:
        return w, h, -1.0, -1.0
    if 270.0 < a < 360.0:
        return 0.0, h, 1.0, -1.0
    return 0.0, 0.0, 1.0, 1.0


@splash_shape
def angle(rect: Rect, progress: float, *, angle: float = 0.0) -> PolygonPath:
    """角度 `angle`（度）でスイープするウェッジマスク。"""
    a = normalize_angle(angle)
    cardinal = _CARDINAL.get(a)
    if cardinal is not None:
        return cardinal(rect, progress)

    c = math.radians(a % 90.0)
    m = math.tan(c)
    if m == 0.0:
        # 90° 倍数からの差がラジアン変換で 0 に丸められた角度
        return _CARDINAL[90.0 * math.floor(a / 90.0)](rect, progress)

    ox, oy, sx, sy = _anchor(a, rect)
    if rect.width == 0.0 or rect.height == 0.0:
        # 潰れた矩形は起点 1 点に縮退（面積 0）
        return PolygonPath.from_points((ox, oy), (ox, oy), (ox, oy))

    m1 = -1.0 / m
    b = rect.height - m1 * rect.width
    x = sx * b * m * progress
    y = sy * b * progress
    return PolygonPath.from_points((ox, oy), (ox + x, oy), (ox, oy + y))


__all__ = ["angle", "normalize_angle"]
