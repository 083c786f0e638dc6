"""
どこで: `common` の型定義。
何を: Vec2・RGBA と、遷移アニメーションで扱う色の型エイリアス。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from typing import Any

Vec2 = tuple[float, float]
RGBA = tuple[float, float, float, float]

# 色はシーケンサ内では不透明値（同一性/等価性のみ利用）。
Color = Any


__all__ = ["Vec2", "RGBA", "Color"]
