"""
どこで: `engine.splash.sequencer`。
何を: 遷移中の色レイヤー列（`ColorLayer` のキュー）と確定済み背景色を管理する `SplashSequencer`。
なぜ: 色変更要求の順序どおりに背景色を確定させ、描画側には「背景 + 未確定レイヤー列」を
      一貫したスナップショットとして渡すため。

レイヤーの状態遷移（後戻りなし）:

    PENDING(progress=0) → ANIMATING(0<p<1) → COMPLETE(p=1) → COMMITTED(キューから除去)

順序ポリシー:
- `on_new_color` は常に末尾へ追加する。
- `on_layer_settled` は常に先頭（index 0）だけを確定・除去する。後続レイヤーが先に
  アニメーションを終えていても追い越さない（背景色の入れ替わり順を要求順に固定する）。

時間は扱わない。進捗の駆動と確定タイミングは外部ドライバ（`engine.splash.animator`
または利用側のフレームループ）が所有する。
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterator

from common import settings as _settings
from common.types import Color

if TYPE_CHECKING:
    from .color_store import ColorStore

logger = logging.getLogger(__name__)

LayerCallback = Callable[["ColorLayer"], None]

_DEFAULT = object()
_layer_ids = itertools.count(1)


class SequencerFullError(RuntimeError):
    """`max_pending` を設定したシーケンサのキューが満杯。"""


class LayerState(str, Enum):
    PENDING = "pending"
    ANIMATING = "animating"
    COMPLETE = "complete"
    COMMITTED = "committed"


class ColorLayer:
    """遷移中の 1 色ぶんのレイヤー（色 + 進捗）。

    進捗の更新は `SplashSequencer.set_progress` 経由でのみ行う。
    """

    __slots__ = ("layer_id", "color", "_progress", "_committed")

    def __init__(self, color: Color) -> None:
        self.layer_id = next(_layer_ids)
        self.color = color
        self._progress = 0.0
        self._committed = False

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def state(self) -> LayerState:
        if self._committed:
            return LayerState.COMMITTED
        if self._progress <= 0.0:
            return LayerState.PENDING
        if self._progress >= 1.0:
            return LayerState.COMPLETE
        return LayerState.ANIMATING

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return (
            f"ColorLayer(id={self.layer_id}, color={self.color!r}, "
            f"progress={self._progress:.3f}, state={self.state.value})"
        )


@dataclass(frozen=True)
class LayerSnapshot:
    layer_id: int
    color: Color
    progress: float
    state: LayerState


@dataclass(frozen=True)
class SequencerState:
    """ある時点の背景色と未確定レイヤー列（描画順: index 0 が最背面）。"""

    base_color: Color
    layers: tuple[LayerSnapshot, ...]

    @property
    def pending_colors(self) -> tuple[Color, ...]:
        return tuple(layer.color for layer in self.layers)


class SplashSequencer:
    """色レイヤーのキューと背景色の状態機械。

    Parameters
    ----------
    base_color : Color
        初期の背景色（不透明値として扱い、解釈しない）。
    max_pending : int | None, optional
        未確定レイヤーの上限。省略時は `common.settings` の `SPLASH_MAX_PENDING`
        （既定は無制限）。上限到達時の `on_new_color` は `SequencerFullError`。

    Notes
    -----
    キューの変更（追加/先頭除去/進捗更新）は 1 つのロックで直列化する。リスナーは
    ロック解放後に呼ぶので、リスナー内からシーケンサを操作してよい。
    """

    def __init__(self, base_color: Color, *, max_pending: Any = _DEFAULT) -> None:
        if max_pending is _DEFAULT:
            max_pending = _settings.get().SPLASH_MAX_PENDING
        limit = None if max_pending is None else int(max_pending)
        if limit is not None and limit < 1:
            raise ValueError(f"max_pending は 1 以上である必要があります: {max_pending!r}")
        self._base_color = base_color
        self._layers: list[ColorLayer] = []
        self._max_pending = limit
        self._lock = threading.RLock()
        self._on_added: list[LayerCallback] = []
        self._on_committed: list[LayerCallback] = []

    # ── 参照 ───────────────────
    @property
    def base_color(self) -> Color:
        with self._lock:
            return self._base_color

    @property
    def layers(self) -> tuple[ColorLayer, ...]:
        """未確定レイヤー（挿入順）。"""
        with self._lock:
            return tuple(self._layers)

    @property
    def max_pending(self) -> int | None:
        return self._max_pending

    def __len__(self) -> int:
        with self._lock:
            return len(self._layers)

    def __iter__(self) -> Iterator[ColorLayer]:
        return iter(self.layers)

    def snapshot(self) -> SequencerState:
        """背景色とレイヤー列の不変スナップショットを返す。"""
        with self._lock:
            return SequencerState(
                base_color=self._base_color,
                layers=tuple(
                    LayerSnapshot(layer.layer_id, layer.color, layer.progress, layer.state)
                    for layer in self._layers
                ),
            )

    # ── リスナー ─────────────────
    def add_listener(
        self,
        *,
        on_added: LayerCallback | None = None,
        on_committed: LayerCallback | None = None,
    ) -> Callable[[], None]:
        """レイヤー追加/確定の通知先を登録する。戻り値は登録解除関数。"""
        with self._lock:
            if on_added is not None:
                self._on_added.append(on_added)
            if on_committed is not None:
                self._on_committed.append(on_committed)

        def _remove() -> None:
            with self._lock:
                if on_added is not None and on_added in self._on_added:
                    self._on_added.remove(on_added)
                if on_committed is not None and on_committed in self._on_committed:
                    self._on_committed.remove(on_committed)

        return _remove

    def bind(self, store: ColorStore) -> Callable[[], None]:
        """`ColorStore` の発行を `on_new_color` に接続する。戻り値は接続解除関数。"""
        return store.subscribe(self.on_new_color)

    # ── 変更 ───────────────────
    def on_new_color(self, color: Color) -> ColorLayer:
        """新しい目標色を `(color, 0)` として末尾に追加する。

        例外:
        - SequencerFullError: `max_pending` 到達時。
        """
        with self._lock:
            if self._max_pending is not None and len(self._layers) >= self._max_pending:
                raise SequencerFullError(
                    f"pending layers reached max_pending={self._max_pending}"
                )
            layer = ColorLayer(color)
            self._layers.append(layer)
            depth = len(self._layers)
            callbacks = tuple(self._on_added)
        logger.debug("layer %d appended: color=%r depth=%d", layer.layer_id, color, depth)
        for cb in callbacks:
            cb(layer)
        return layer

    def set_progress(self, layer: ColorLayer, progress: float) -> bool:
        """レイヤーの進捗を単調に進める。

        - 値は [0, 1] に丸める。
        - 現在値より小さい値は無視する（後戻りなし）。
        - 既に確定（キューから除去）されたレイヤーは何もしない。

        Returns
        -------
        bool
            進捗を更新したら True。確定済み/後戻りで無視したら False。
        """
        p = float(progress)
        p = 0.0 if p < 0.0 else 1.0 if p > 1.0 else p
        with self._lock:
            if layer._committed or layer not in self._layers:
                return False
            if p < layer._progress:
                logger.debug(
                    "layer %d: ignored backward progress %.4f < %.4f",
                    layer.layer_id,
                    p,
                    layer._progress,
                )
                return False
            layer._progress = p
        return True

    def on_layer_settled(self) -> Color | None:
        """先頭レイヤーの色を背景色へ確定し、キューから除去する。

        先頭以外のレイヤーは完了済みでも除去しない。キューが空の場合は呼び出し側の
        契約違反として警告を出し、状態を変えずに None を返す。

        Returns
        -------
        Color | None
            確定した色。空キューなら None。
        """
        with self._lock:
            if not self._layers:
                logger.warning("on_layer_settled called with no pending layers; ignored")
                return None
            head = self._layers.pop(0)
            head._committed = True
            self._base_color = head.color
            remaining = len(self._layers)
            callbacks = tuple(self._on_committed)
        if head._progress < 1.0:
            logger.debug(
                "layer %d committed before reaching progress 1 (%.4f)",
                head.layer_id,
                head._progress,
            )
        logger.debug("layer %d committed: color=%r remaining=%d", head.layer_id, head.color, remaining)
        for cb in callbacks:
            cb(head)
        return head.color


__all__ = [
    "SplashSequencer",
    "ColorLayer",
    "LayerState",
    "LayerSnapshot",
    "SequencerState",
    "SequencerFullError",
]
