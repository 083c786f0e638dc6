"""
統合 Geometry 型（レンダラ受け渡し用のポリライン集合）

本モジュールは、マスク境界（`engine.core.mask_path`）を外部レンダラへ渡すときの
唯一の頂点表現 `Geometry` を提供する。形状生成は解析的な `MaskPath` で行い、
描画境界でのみ本型へ平坦化する。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)` — 全頂点を 1 本の連続メモリで保持（行は XY、Y は下向き）。
- `offsets: int32 ndarray (M+1,)` — 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線分配列は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- 閉多角形は「先頭頂点を末尾に複製」して閉ループとして格納する。

直感図（2 枚のマスク）:

    # 三角形（4 点: 閉ループ）＋ 矩形（5 点: 閉ループ）
    # offsets (M+1=3): [0, 4, 9]
    #   マスク0 = coords[0:4]
    #   マスク1 = coords[4:9]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`（線本数 M=0）。
- `concat` は後続の `offsets[1:]` に先行頂点数を加算して結合する。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets は 1 次元配列である必要があります。")
    if offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")

    return coords_arr, offsets_arr


class Geometry:
    """平面ポリライン集合。

    フィールド:
    - `coords (N,2) float32`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。

    変換はインスタンスを複製する純関数（元は不変）。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        norm_coords, norm_offsets = _normalize_geometry_input(coords, offsets)
        self.coords = norm_coords
        self.offsets = norm_offsets

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 2), dtype=np.float32), np.array([0], dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """線分集合を統一表現に正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は `(K, 2)` の座標列。`list`/`tuple`/`ndarray` いずれも可。

        Returns
        -------
        Geometry

        Raises
        ------
        ValueError
            形状が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float32)
            if arr.size == 0:
                arr = arr.reshape(0, 2)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            return cls.empty()

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([a.shape[0] for a in np_lines])
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets)

    # ── 基本操作（すべて純粋） ────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """内部配列を返す。

        `copy=False` は読み取り専用ビュー（`setflags(write=False)`）を返す。書き込みが
        必要な場合は `copy=True` を指定する。
        """
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def lines(self) -> list[np.ndarray]:
        """ポリラインごとの座標ビューを返す。"""
        return [
            self.coords[self.offsets[i] : self.offsets[i + 1]] for i in range(len(self))
        ]

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数）。レンダラ座標系の矩形原点へ配置するのに使う。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        vec = np.array([dx, dy], dtype=np.float32)
        return Geometry(self.coords + vec, self.offsets.copy())

    def bounds(self) -> tuple[float, float, float, float] | None:
        """`(min_x, min_y, max_x, max_y)`。空なら None。"""
        if self.is_empty:
            return None
        lo = self.coords.min(axis=0)
        hi = self.coords.max(axis=0)
        return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

    def concat(self, other: "Geometry") -> "Geometry":
        """ポリライン集合の連結（純関数）。

        `coords` は縦方向に結合し、`offsets` は後段の先頭を `len(self.coords)` だけ
        シフトして統合する。いずれかが空集合の場合は他方のコピーを返す。
        """
        if self.is_empty:
            return Geometry(other.coords.copy(), other.offsets.copy())
        if other.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        shift = self.coords.shape[0]
        new_coords = np.vstack([self.coords, other.coords])
        new_offsets = np.hstack([self.offsets, other.offsets[1:] + shift])
        return Geometry(new_coords, new_offsets)

    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines}, float32/int32)"


__all__ = ["Geometry"]
