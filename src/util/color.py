"""
どこで: `util.color`。
何を: 色指定（名前, Hex, RGB(A) 0–1 / 0–255）を RGBA(0–1) に正規化する。
なぜ: シーケンサは色を不透明値として扱うが、描画指示（`engine.splash.frame.SplashFrame.rgba`）
      を受け取るレンダラには一様な RGBA を渡すため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA

# 代表的な UI 色名（小文字キー）
NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "orange": "#FFA500",
    "purple": "#800080",
    "pink": "#FFC0CB",
    "gray": "#808080",
    "grey": "#808080",
    "clear": "#00000000",
}


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def parse_color_str(s: str) -> RGBA:
    """色名または Hex 文字列を RGBA(0–1) に変換する。"""
    named = NAMED_COLORS.get(s.strip().lower())
    return parse_hex_color_str(named if named is not None else s)


def _from_sequence(seq: Sequence[float | int]) -> RGBA:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    vals = [float(v) for v in seq]
    # 全要素が 0..1 ならそのまま、そうでなければ 0–255 とみなす
    if all(0.0 <= x <= 1.0 for x in vals):
        r, g, b = vals[:3]
        a = vals[3] if len(vals) == 4 else 1.0
        return (r, g, b, a)
    u8 = [max(0, min(255, int(round(x)))) for x in vals]
    if len(u8) == 3:
        u8.append(255)
    return (u8[0] / 255.0, u8[1] / 255.0, u8[2] / 255.0, u8[3] / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: 色名, Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_color_str(value)
    if isinstance(value, (list, tuple)):
        try:
            return _from_sequence(value)
        except TypeError as e:
            raise ValueError(f"invalid color tuple/list: {value!r}") from e
    raise ValueError(f"unsupported color type: {type(value)!r}")


__all__ = [
    "NAMED_COLORS",
    "parse_hex_color_str",
    "parse_color_str",
    "normalize_color",
]
