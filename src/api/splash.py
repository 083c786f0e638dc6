"""
どこで: `api.splash`（マスク生成の高レベル API）。
何を: 登録済みマスク生成関数を `S.<name>(rect, progress, **params)` として呼べる薄いファサード。
なぜ: 種別を文字列/値で渡す `S.path(...)` と、関数的に呼ぶ `S.circle(...)` を同じ入口にまとめるため。

Examples
--------
    from api import S

    p = S.path((200, 100), 0.5, "left_to_right")   # PolygonPath
    c = S.circle((100, 100), 1.0)                  # ArcPath（半径 ≈ 70.71）
    w = S.angle((100, 100), 0.3, angle=30)         # 三角形ウェッジ
"""

from __future__ import annotations

from typing import Any, Callable

import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.mask_path import MaskPath, coverage
from shapes.generator import RectLike, as_rect, compute_path
from shapes.kinds import SplashAnimation, SplashKind
from shapes.registry import get_splash_shape, is_splash_shape_registered, list_splash_shapes


class SplashShapesAPI:
    """マスク生成 API（`S` の実体）。

    - 未登録名の属性参照は `AttributeError`。
    - 解決したメソッドはインスタンス辞書にキャッシュし、登録解除時に破棄する。
    """

    @staticmethod
    def path(
        rect: RectLike,
        progress: float,
        animation: SplashAnimation | SplashKind | str,
    ) -> MaskPath:
        """`shapes.generator.compute_path` の別名。"""
        return compute_path(rect, progress, animation)

    @staticmethod
    def coverage(path: MaskPath, rect: RectLike) -> float:
        """矩形のうちマスクが覆う割合（0..1）。"""
        return coverage(path, as_rect(rect))

    @staticmethod
    def list_shapes() -> list[str]:
        return list_splash_shapes()

    def _build_shape_method(self, name: str) -> Callable[..., MaskPath]:
        def _shape_method(rect: RectLike, progress: float, **params: Any) -> MaskPath:
            if not is_splash_shape_registered(name):
                self.__dict__.pop(name, None)
                raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
            fn = get_splash_shape(name)
            return fn(as_rect(rect), float(progress), **params)

        _shape_method.__name__ = name
        _shape_method.__qualname__ = f"{self.__class__.__name__}.{name}"
        return _shape_method

    def __getattr__(self, name: str) -> Callable[..., MaskPath]:
        if name.startswith("_") or not is_splash_shape_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")
        method = self._build_shape_method(name)
        self.__dict__[name] = method
        return method


S = SplashShapesAPI()

__all__ = ["S", "SplashShapesAPI"]
