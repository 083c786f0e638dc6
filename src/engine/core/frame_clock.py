"""
どこで: `engine.core` の簡易フレームドライバ。
何を: 1 フレーム更新 `Tickable` Protocol と、その列を固定順序で呼び出す FrameClock（dt 測定・経過時間・固定刻みの実行）。
なぜ: 実時間ループ（GUI のスケジューラ）からも、テスト/オフライン書き出しの固定刻みからも
      同じ更新順でアニメーションドライバを進めるため。
"""

from __future__ import annotations

import time
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん進める。"""


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self._elapsed = 0.0
        self._frames = 0

    @property
    def elapsed(self) -> float:
        """これまでに配った dt の合計（秒）。"""
        return self._elapsed

    @property
    def frames(self) -> int:
        return self._frames

    # 外部スケジューラから呼ばせる。dt 省略時は実時間差分。
    def tick(self, dt: float | None = None) -> None:
        if dt is None:
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now
        if dt < 0:
            raise ValueError(f"dt は非負である必要があります: {dt}")

        for t in self._tickables:
            t.tick(dt)
        self._elapsed += dt
        self._frames += 1

    def run(self, dt: float, steps: int) -> None:
        """固定刻み `dt` で `steps` 回 `tick` する（実時間は待たない）。"""
        for _ in range(int(steps)):
            self.tick(dt)


__all__ = ["Tickable", "FrameClock"]
