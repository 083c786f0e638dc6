"""
どこで: `engine.splash.color_store`。
何を: 目標色の発行元 `ColorStore`（明示的なコールバック購読）。
なぜ: 色変更の通知を暗黙の購読機構ではなく関数呼び出しとして表し、
      `SplashSequencer.bind(store)` で直接つなげるようにするため。

発行規則:
- `set_color` は値が同じでも毎回発行する（呼ばれた回数だけ遷移レイヤーが積まれる）。
- 購読直後に現在値は発行しない。
- 購読者の例外は握りつぶさず呼び出し元へ伝播する。
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from common.types import Color

logger = logging.getLogger(__name__)

ColorCallback = Callable[[Color], object]


class ColorStore:
    """現在の目標色を保持し、変更を購読者へ通知する。"""

    def __init__(self, color: Color) -> None:
        self._color = color
        self._subscribers: list[ColorCallback] = []
        self._lock = threading.Lock()

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self.set_color(value)

    def subscribe(self, callback: ColorCallback) -> Callable[[], None]:
        """購読を登録し、解除関数を返す。"""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def set_color(self, color: Color) -> None:
        with self._lock:
            self._color = color
            subscribers = tuple(self._subscribers)
        logger.debug("publish color=%r to %d subscriber(s)", color, len(subscribers))
        for cb in subscribers:
            cb(color)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)


__all__ = ["ColorStore"]
