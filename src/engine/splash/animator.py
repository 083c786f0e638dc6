"""
どこで: `engine.splash.animator`。
何を: `SplashSequencer` のレイヤー進捗を時間で駆動し、待機後に先頭確定を呼ぶ `SplashAnimator`（Tickable）。
なぜ: シーケンサと形状生成を時計非依存に保ち、タイミング/イージングをこのドライバに閉じ込めるため。

振る舞い:
- レイヤー追加ごとに独立したタイマーを開始する（経過 0 秒）。生成時点で既にキューにある
  レイヤーにも経過 0 秒のタイマーを割り当てる。
- 毎 tick、各タイマーの進捗 `easing(min(1, elapsed / duration))` をシーケンサへ反映する。
- 経過が `duration + settle_delay` に達したタイマーは 1 回だけ `on_layer_settled()` を呼ぶ。
  呼ばれたシーケンサは「先頭」を確定するため、確定順は常に要求順になる。
- 経過時間は dt の浮動小数和なので、境界判定は `_TIME_EPS` だけ緩める
  （1/60 秒 × 120 フレームで 2.0 秒の締切に届く）。

タイマー列はロックで保護し、シーケンサ呼び出し（`set_progress`/`on_layer_settled`）は
ロック外で行う。色変更が別スレッドから届いてもタイマーは失われない。

使用例:
    seq = SplashSequencer("red")
    anim = SplashAnimator(seq)
    seq.on_new_color("blue")
    FrameClock([anim]).run(dt=1 / 60, steps=120)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from common import settings as _settings
from common.easing import Easing, get_easing

from ..core.frame_clock import FrameClock
from .sequencer import ColorLayer, SplashSequencer

logger = logging.getLogger(__name__)

_TIME_EPS = 1e-9


@dataclass
class _LayerTimer:
    layer: ColorLayer
    elapsed: float = 0.0


class SplashAnimator:
    """時間 → 進捗 の駆動と確定タイミングを持つドライバ。

    Parameters
    ----------
    sequencer : SplashSequencer
        駆動対象。生成時に追加リスナーとして登録され、既存の未確定レイヤーにも
        タイマーを割り当てる。
    duration : float, optional
        0→1 のアニメーション時間（秒）。省略時は `SPLASH_DURATION`。
    settle_delay : float, optional
        進捗 1 到達後、確定までの追加待機（秒）。省略時は `SPLASH_SETTLE_DELAY`。
    easing : str | Callable[[float], float], optional
        イージング。省略時は `SPLASH_EASING`。
    """

    def __init__(
        self,
        sequencer: SplashSequencer,
        *,
        duration: float | None = None,
        settle_delay: float | None = None,
        easing: str | Easing | None = None,
    ) -> None:
        cfg = _settings.get()
        self._sequencer = sequencer
        self._duration = float(cfg.SPLASH_DURATION if duration is None else duration)
        self._settle_delay = float(cfg.SPLASH_SETTLE_DELAY if settle_delay is None else settle_delay)
        if self._duration < 0.0 or self._settle_delay < 0.0:
            raise ValueError("duration/settle_delay は非負である必要があります")
        if easing is None:
            easing = cfg.SPLASH_EASING
        self._easing: Easing = get_easing(easing) if isinstance(easing, str) else easing
        self._lock = threading.RLock()
        self._timers: list[_LayerTimer] = []
        self._detach: Callable[[], None] | None = None
        with self._lock:
            self._detach = sequencer.add_listener(on_added=self._on_layer_added)
            seeded = [_LayerTimer(layer) for layer in sequencer.layers]
            self._timers.extend(seeded)
        if seeded:
            logger.debug("seeded %d timer(s) for already queued layers", len(seeded))

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def settle_delay(self) -> float:
        return self._settle_delay

    @property
    def active(self) -> int:
        """確定待ちのタイマー数。"""
        with self._lock:
            return len(self._timers)

    def _on_layer_added(self, layer: ColorLayer) -> None:
        with self._lock:
            if self._detach is None:
                return
            # 生成中に別スレッドから届いた通知は既存分として割り当て済み
            if any(t.layer is layer for t in self._timers):
                return
            self._timers.append(_LayerTimer(layer))

    def _progress_at(self, elapsed: float) -> float:
        if self._duration <= 0.0 or elapsed >= self._duration - _TIME_EPS:
            return 1.0
        return self._easing(elapsed / self._duration)

    def tick(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt は非負である必要があります: {dt}")

        deadline = self._duration + self._settle_delay - _TIME_EPS
        with self._lock:
            if not self._timers:
                return
            updates: list[tuple[ColorLayer, float]] = []
            for timer in self._timers:
                timer.elapsed += dt
                updates.append((timer.layer, self._progress_at(timer.elapsed)))
            due = [t for t in self._timers if t.elapsed >= deadline]
            if due:
                self._timers = [t for t in self._timers if t.elapsed < deadline]

        for layer, progress in updates:
            self._sequencer.set_progress(layer, progress)
        for timer in due:
            committed = self._sequencer.on_layer_settled()
            logger.debug(
                "timer for layer %d elapsed (%.3fs); committed color=%r",
                timer.layer.layer_id,
                timer.elapsed,
                committed,
            )

    def close(self) -> None:
        """シーケンサからの通知購読を解除する（進行中タイマーは破棄）。"""
        with self._lock:
            detach, self._detach = self._detach, None
            self._timers.clear()
        if detach is not None:
            detach()


def run_timeline(animator: SplashAnimator, *, dt: float, steps: int) -> FrameClock:
    """固定刻みでアニメーターを `steps` フレーム進め、使用した FrameClock を返す。"""
    clock = FrameClock([animator])
    clock.run(dt, steps)
    return clock


__all__ = ["SplashAnimator", "run_timeline"]
