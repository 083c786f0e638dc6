"""
どこで: `common.easing`
何を: 正規化時間 u∈[0,1] を進捗 p∈[0,1] に写すイージング関数（linear / ease_in_out）。
なぜ: アニメーションドライバ（`engine.splash.animator`）が時間→進捗の曲線を所有するため。
      形状生成やシーケンサは時間を知らない。

設計方針:
- 純粋・決定的。副作用なし。
- ease_in_out は CSS/UI 標準の 3 次ベジェ (0.42, 0, 0.58, 1)。
- 入力は [0,1] に clamp し、端点は厳密に 0/1 を返す（完了判定を誤差で揺らさない）。
"""

from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]

_EPS = 1e-7


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def linear(u: float) -> float:
    return _clamp01(u)


def _bezier_coord(t: float, p1: float, p2: float) -> float:
    """端点 0/1・制御点 p1/p2 の 1 次元 3 次ベジェ値。"""
    mt = 1.0 - t
    return 3.0 * mt * mt * t * p1 + 3.0 * mt * t * t * p2 + t * t * t


def _bezier_slope(t: float, p1: float, p2: float) -> float:
    mt = 1.0 - t
    return 3.0 * mt * mt * p1 + 6.0 * mt * t * (p2 - p1) + 3.0 * t * t * (1.0 - p2)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """制御点 (x1,y1),(x2,y2) の 3 次ベジェイージングを返す。

    x(t)=u を Newton 法で解き、収束しない場合は二分法に切り替える。
    x1, x2 は [0,1] に制限される（x が単調であることの前提）。
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("cubic_bezier: x1/x2 は [0, 1] の範囲である必要があります")

    def _solve_t(u: float) -> float:
        t = u
        for _ in range(8):
            err = _bezier_coord(t, x1, x2) - u
            if abs(err) < _EPS:
                return t
            d = _bezier_slope(t, x1, x2)
            if abs(d) < 1e-6:
                break
            t -= err / d
        # 二分法（単調性により必ず収束）
        lo, hi = 0.0, 1.0
        t = _clamp01(t)
        for _ in range(64):
            x = _bezier_coord(t, x1, x2)
            if abs(x - u) < _EPS:
                break
            if x < u:
                lo = t
            else:
                hi = t
            t = 0.5 * (lo + hi)
        return t

    def _ease(u: float) -> float:
        u = _clamp01(u)
        if u <= 0.0 or u >= 1.0:
            return u
        return _clamp01(_bezier_coord(_solve_t(u), y1, y2))

    return _ease


ease_in_out: Easing = cubic_bezier(0.42, 0.0, 0.58, 1.0)

_EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in_out": ease_in_out,
}


def get_easing(name: str) -> Easing:
    """名前からイージング関数を取得（"ease-in-out" 等の表記揺れは吸収）。"""
    key = name.strip().lower().replace("-", "_")
    try:
        return _EASINGS[key]
    except KeyError:
        raise KeyError(f"unknown easing: {name!r} (available: {sorted(_EASINGS)})") from None


__all__ = ["Easing", "linear", "ease_in_out", "cubic_bezier", "get_easing"]
