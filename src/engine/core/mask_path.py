"""
どこで: `engine.core.mask_path`。
何を: スプラッシュマスクの解析的境界表現（`Rect` / `PolygonPath` / `ArcPath`）と、
      面積・被覆率・`Geometry` への平坦化を提供する。
なぜ: 形状生成（`shapes`）は純関数として厳密な頂点/半径を返し、描画側はそれを
      任意の解像度で平坦化できるようにするため。

座標系:
- 原点は矩形の左上、X は右、Y は下向き。
- 角度は度数法。`ArcPath` は中心・半径・開始/終了角・回転方向で円弧を表す。

不変条件:
- `PolygonPath.points` は (K, 2) float64 の読み取り専用配列。閉路は暗黙（先頭頂点は末尾に複製しない）。
- 生成される多角形は穴なし・自己交差なし（三角形または軸平行矩形）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry

from common import settings as _settings

from .geometry import Geometry


def clamp_progress(progress: float) -> float:
    """進捗を [0, 1] に丸める（生成関数は範囲外も受理するので、呼び出し側で使う）。"""
    p = float(progress)
    return 0.0 if p < 0.0 else 1.0 if p > 1.0 else p


@dataclass(frozen=True)
class Rect:
    """幅 `width`・高さ `height` の軸平行矩形（原点左上）。"""

    width: float
    height: float

    def __post_init__(self) -> None:
        w = float(self.width)
        h = float(self.height)
        if not (w >= 0.0 and h >= 0.0):
            raise ValueError(f"Rect の幅/高さは非負である必要があります: ({self.width}, {self.height})")
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "height", h)

    @property
    def mid_x(self) -> float:
        return self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.height / 2.0

    @property
    def half_diagonal(self) -> float:
        """中心から角までの距離（円マスクの最終半径）。"""
        return math.sqrt(self.mid_y**2 + self.mid_x**2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_shapely(self) -> Polygon:
        return box(0.0, 0.0, self.width, self.height)


@dataclass(frozen=True, eq=False)
class PolygonPath:
    """単一の閉多角形。"""

    points: np.ndarray

    def __post_init__(self) -> None:
        pts = np.array(self.points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"PolygonPath の頂点配列は (K, 2) である必要があります: {pts.shape}")
        pts.setflags(write=False)
        object.__setattr__(self, "points", pts)

    @classmethod
    def from_points(cls, *points: tuple[float, float]) -> "PolygonPath":
        return cls(np.array(points, dtype=np.float64).reshape(-1, 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolygonPath):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __hash__(self) -> int:
        return hash(self.points.tobytes())

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def area(self) -> float:
        """靴紐公式による符号なし面積（矩形でクリップしない）。"""
        if self.points.shape[0] < 3:
            return 0.0
        x = self.points[:, 0]
        y = self.points[:, 1]
        return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2.0)

    def to_geometry(self, segments: int | None = None) -> Geometry:
        """閉ループ（先頭頂点を末尾に複製）の `Geometry` を返す。`segments` は円弧との互換用で無視。"""
        if self.points.shape[0] == 0:
            return Geometry.empty()
        ring = np.vstack([self.points, self.points[0:1]])
        return Geometry.from_lines([ring])

    def to_shapely(self, segments: int | None = None) -> Polygon:
        return Polygon(self.points)


@dataclass(frozen=True)
class ArcPath:
    """中心・半径・角度範囲で表す円弧マスク（既定は 0°→360° の全円）。"""

    center: tuple[float, float]
    radius: float
    start_deg: float = 0.0
    end_deg: float = 360.0
    clockwise: bool = True

    @property
    def sweep_deg(self) -> float:
        """塗られる角度幅（360 を上限）。"""
        return min(360.0, abs(self.end_deg - self.start_deg))

    @property
    def is_full_circle(self) -> bool:
        return self.sweep_deg >= 360.0

    def area(self) -> float:
        # 全円は πr²、部分円弧は扇形
        return 0.5 * self.radius * self.radius * math.radians(self.sweep_deg)

    def sample(self, segments: int | None = None) -> np.ndarray:
        """円弧を `segments` 分割した頂点列 (K, 2) を返す（全円は閉路を暗黙とし末尾を含めない）。"""
        n = int(segments if segments is not None else _settings.get().SPLASH_CIRCLE_SEGMENTS)
        n = max(3, n)
        cx, cy = self.center
        start = math.radians(self.start_deg)
        span = math.radians(self.sweep_deg)
        if self.is_full_circle:
            t = np.linspace(0.0, span, n, endpoint=False)
        else:
            t = np.linspace(0.0, span, n + 1)
        # Y 下向き座標では clockwise が角度増加方向
        sign = 1.0 if self.clockwise else -1.0
        ang = start + sign * t
        xs = cx + self.radius * np.cos(ang)
        ys = cy + self.radius * np.sin(ang)
        pts = np.stack([xs, ys], axis=1)
        if not self.is_full_circle:
            pts = np.vstack([[cx, cy], pts])
        return pts

    def to_geometry(self, segments: int | None = None) -> Geometry:
        if self.radius <= 0.0:
            return Geometry.empty()
        pts = self.sample(segments)
        return Geometry.from_lines([np.vstack([pts, pts[0:1]])])

    def to_shapely(self, segments: int | None = None) -> BaseGeometry:
        if self.radius <= 0.0:
            return Polygon()
        if self.is_full_circle:
            n = int(segments if segments is not None else _settings.get().SPLASH_CIRCLE_SEGMENTS)
            return Point(self.center).buffer(self.radius, quad_segs=max(1, n // 4))
        return Polygon(self.sample(segments))


MaskPath = Union[PolygonPath, ArcPath]


def coverage(path: MaskPath, rect: Rect) -> float:
    """矩形のうちマスクに覆われた割合 [0, 1] を返す（shapely で矩形クリップ）。

    面積 0 の矩形・面積 0 のパスは 0.0。円は多角形近似なので全被覆でも 1 をわずかに
    下回ることがある（呼び出し側で許容誤差を取る）。
    """
    rect_area = rect.area
    if rect_area <= 0.0 or path.area() <= 0.0:
        return 0.0
    covered = path.to_shapely().intersection(rect.to_shapely()).area
    return min(1.0, float(covered) / rect_area)


__all__ = [
    "Rect",
    "PolygonPath",
    "ArcPath",
    "MaskPath",
    "clamp_progress",
    "coverage",
]
