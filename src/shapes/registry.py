"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@splash_shape` デコレータでマスク生成関数を登録し、取得/一覧/検査を提供。
なぜ: 種別ごとの形状生成を一貫 API で管理し、`shapes.generator.compute_path` から
      名前で解決するため。

概要:
- 登録対象は「関数」のみ。シグネチャは `fn(rect, progress, **params) -> MaskPath`。
- デコレータは名前省略可（`@splash_shape` / `@splash_shape()`）と明示名指定をサポート。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from common.base_registry import BaseRegistry

SplashShapeFn = Callable[..., Any]

_splash_registry = BaseRegistry()


def splash_shape(arg: Any | None = None, /, name: str | None = None):
    """マスク生成関数をレジストリに登録するデコレータ。

    使用例:
    - `@splash_shape` / `@splash_shape()`                      → 関数名から自動推論。
    - `@splash_shape("custom")` / `@splash_shape(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@splash_shape は関数のみ登録可能です: got {obj!r}")
        return _splash_registry.register(resolved_name)(obj)

    # 直付け (@splash_shape)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@splash_shape("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_splash_shape(name: str) -> SplashShapeFn:
    """登録されたマスク生成関数を取得。

    例外:
        KeyError: 登録されていない場合
    """
    return _splash_registry.get(name)


def list_splash_shapes() -> list[str]:
    return sorted(_splash_registry.list_all())


def is_splash_shape_registered(name: str) -> bool:
    return _splash_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _splash_registry.unregister(name)


__all__ = [
    "splash_shape",
    "get_splash_shape",
    "list_splash_shapes",
    "is_splash_shape_registered",
    "unregister",
]
