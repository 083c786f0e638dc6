"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトインのスプラッシュマスク生成関数を import 副作用で登録し、`compute_path` から解決できるようにする。
なぜ: 形状生成の拡張点を一箇所に集約するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import circle as _register_circle  # noqa: F401
from . import sweep as _register_sweep  # noqa: F401
from . import wipe as _register_wipe  # noqa: F401
from .generator import as_rect, compute_path
from .kinds import SplashAnimation, SplashKind, as_animation
from .registry import (
    get_splash_shape,
    is_splash_shape_registered,
    list_splash_shapes,
    splash_shape,
)

__all__ = [
    "compute_path",
    "as_rect",
    "SplashAnimation",
    "SplashKind",
    "as_animation",
    "splash_shape",
    "get_splash_shape",
    "list_splash_shapes",
    "is_splash_shape_registered",
]
