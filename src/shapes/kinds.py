"""
どこで: `shapes.kinds`。
何を: スプラッシュアニメーション種別（閉じた 6 種）と、その不変値 `SplashAnimation`。
なぜ: 種別を文字列/列挙/角度付き値のどれで受け取っても、形状レジストリの同じキーへ
      解決できるようにするため。

受理する文字列表記（`SplashAnimation.parse`）:
- "left_to_right" / "LeftToRight" / "left-to-right" など（レジストリと同じ正規化）
- "angle:45" / "angle(45)" / "angle=45"（角度は度数法）
- "circle"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from common.base_registry import BaseRegistry


class SplashKind(str, Enum):
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"
    TOP_TO_BOTTOM = "top_to_bottom"
    BOTTOM_TO_TOP = "bottom_to_top"
    ANGLE = "angle"
    CIRCLE = "circle"


_ANGLE_RE = re.compile(r"^angle\s*[:=(]\s*([-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*\)?$")


@dataclass(frozen=True)
class SplashAnimation:
    """アニメーション種別。`angle_deg` は `ANGLE` のときのみ意味を持つ。"""

    kind: SplashKind
    angle_deg: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", SplashKind(self.kind))
        if self.kind is SplashKind.ANGLE:
            object.__setattr__(self, "angle_deg", float(self.angle_deg))
        else:
            object.__setattr__(self, "angle_deg", 0.0)

    # ── 生成 ───────────────────
    @classmethod
    def left_to_right(cls) -> "SplashAnimation":
        return cls(SplashKind.LEFT_TO_RIGHT)

    @classmethod
    def right_to_left(cls) -> "SplashAnimation":
        return cls(SplashKind.RIGHT_TO_LEFT)

    @classmethod
    def top_to_bottom(cls) -> "SplashAnimation":
        return cls(SplashKind.TOP_TO_BOTTOM)

    @classmethod
    def bottom_to_top(cls) -> "SplashAnimation":
        return cls(SplashKind.BOTTOM_TO_TOP)

    @classmethod
    def angle(cls, degrees: float) -> "SplashAnimation":
        return cls(SplashKind.ANGLE, degrees)

    @classmethod
    def circle(cls) -> "SplashAnimation":
        return cls(SplashKind.CIRCLE)

    @classmethod
    def parse(cls, text: str) -> "SplashAnimation":
        """文字列表記から `SplashAnimation` を生成する。

        例外:
        - ValueError: 未知の種別、または角度の欠落/不正。
        """
        if not isinstance(text, str):
            raise TypeError(f"SplashAnimation.parse expects str: got {type(text)!r}")
        raw = text.strip()
        m = _ANGLE_RE.match(raw.lower())
        if m is not None:
            return cls.angle(float(m.group(1)))
        try:
            key = BaseRegistry.normalize_key(raw)
        except ValueError as e:
            raise ValueError(f"invalid splash animation: {text!r}") from e
        try:
            kind = SplashKind(key)
        except ValueError:
            raise ValueError(f"unknown splash animation: {text!r}") from None
        if kind is SplashKind.ANGLE:
            raise ValueError(f"angle animation requires degrees (e.g. 'angle:45'): {text!r}")
        return cls(kind)

    @property
    def name(self) -> str:
        """形状レジストリのキー。"""
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is SplashKind.ANGLE:
            return f"angle:{self.angle_deg:g}"
        return self.kind.value


def as_animation(value: "SplashAnimation | SplashKind | str") -> SplashAnimation:
    """`SplashAnimation`・`SplashKind`・文字列のいずれかを `SplashAnimation` に揃える。"""
    if isinstance(value, SplashAnimation):
        return value
    if isinstance(value, SplashKind):
        if value is SplashKind.ANGLE:
            raise ValueError("SplashKind.ANGLE requires an angle; use SplashAnimation.angle(deg)")
        return SplashAnimation(value)
    return SplashAnimation.parse(value)


__all__ = ["SplashKind", "SplashAnimation", "as_animation"]
