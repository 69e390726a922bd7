"""
統合 Geometry 型（線描画向けのポリライン集合）

本モジュールは、マーカー形状を線描画レンダラへ渡すための幾何表現 `Geometry` を提供する。
マーカー記述子（`markers.drawable`）は `to_geometry()` でこの表現へ変換され、
多数の点に対するマーカーは `concat` で 1 つの `Geometry` にまとめられる。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)` — 全頂点を 1 本の連続メモリで保持（行は XY）。
- `offsets: int32 ndarray (M+1,)` — 各ポリラインの開始 index（末尾は必ず N）。
- `closed: bool ndarray (M,)` — 各ポリラインが閉ループかどうか。
- i 本目の線分配列は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- 閉ループの線は末尾に先頭頂点を複製して格納する（レンダラは単純な折れ線として描ける）。

API 方針:
- 変換は `translate/concat` の最小セットのみを提供。
- すべて純関数（副作用ゼロ）であり、新しい `Geometry` インスタンスを返す。

直感図（複数線の格納）:

    # 2 本のポリライン（線0は閉じた三角形 4 点、線1は開いた 2 点）
    #
    # coords (N=6)
    #   idx  xy
    #   0   [0, -1]
    #   1   [1,  1]
    #   2   [-1, 1]
    #   3   [0, -1]   <- 先頭の複製
    #   4   [5,  5]
    #   5   [6,  6]
    # offsets (M+1=3): [0, 4, 6]
    # closed  (M=2):   [True, False]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`, `closed==[]`（線本数 M=0）。
- `concat` は後続の `offsets[1:]` に先行頂点数を加算して結合する。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
    closed: np.ndarray | None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError(f"coords must have shape (N, 2), got {coords_arr.shape}")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets must be a 1-D array")
    if offsets_arr.size == 0:
        raise ValueError("offsets must contain at least one element")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] must be 0")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] must equal the number of coords rows")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets must be non-decreasing")

    n_lines = offsets_arr.size - 1
    if closed is None:
        closed_arr = np.zeros(n_lines, dtype=bool)
    else:
        closed_arr = np.ascontiguousarray(closed, dtype=bool)
        if closed_arr.shape != (n_lines,):
            raise ValueError(f"closed must have shape ({n_lines},), got {closed_arr.shape}")

    return coords_arr, offsets_arr, closed_arr


class Geometry:
    """ポリライン集合。

    フィールド:
    - `coords (N,2) float32`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。
    - `closed (M,) bool`: 閉ループ判定。
    """

    __slots__ = ("coords", "offsets", "closed")

    coords: np.ndarray
    offsets: np.ndarray
    closed: np.ndarray

    def __init__(
        self, coords: np.ndarray, offsets: np.ndarray, closed: np.ndarray | None = None
    ) -> None:
        self.coords, self.offsets, self.closed = _normalize_geometry_input(
            coords, offsets, closed
        )

    # ── ファクトリ ───────────────────
    @classmethod
    def from_lines(
        cls, lines: Iterable[LineLike], closed: bool | Sequence[bool] = False
    ) -> "Geometry":
        """線分集合を正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は `(K, 2)` の座標列。`list`/`tuple`/`ndarray` いずれも可。
        closed : bool | Sequence[bool], default False
            閉ループ指定。bool は全線に適用、列は線ごとに指定する。閉ループの線は
            先頭頂点を末尾に複製する（既に末尾が先頭と一致している線には複製しない）。

        Raises
        ------
        ValueError
            形状が `(K, 2)` に適合しない場合、または `closed` の長さが線本数と異なる場合。
        """
        line_list = list(lines)
        if isinstance(closed, (bool, np.bool_)):
            flags = [bool(closed)] * len(line_list)
        else:
            flags = [bool(c) for c in closed]
            if len(flags) != len(line_list):
                raise ValueError(
                    f"closed has {len(flags)} flags for {len(line_list)} lines"
                )

        np_lines: list[np.ndarray] = []
        for line, is_closed in zip(line_list, flags):
            arr = np.asarray(line, dtype=np.float32)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"line must have shape (K, 2), got {arr.shape}")
            if is_closed and arr.shape[0] > 1 and not np.array_equal(arr[0], arr[-1]):
                arr = np.vstack([arr, arr[:1]])
            np_lines.append(arr)

        if not np_lines:
            return cls(np.empty((0, 2), dtype=np.float32), np.array([0], dtype=np.int32))

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([arr.shape[0] for arr in np_lines])
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets, np.array(flags, dtype=bool))

    # ── 基本操作（すべて純粋） ────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)` を返す。

        `copy=False` は読み取り専用ビュー（`setflags(write=False)`）を返す。
        書き込みが必要な場合は `copy=True` を指定する。
        """
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    def lines(self) -> Iterator[np.ndarray]:
        """各ポリラインの頂点配列（ビュー）を順に返す。"""
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[start:end]

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数）。常に新しいインスタンスを返す。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy(), self.closed.copy())
        new_coords = self.coords + np.array([dx, dy], dtype=np.float32)
        return Geometry(new_coords, self.offsets.copy(), self.closed.copy())

    def concat(self, other: "Geometry") -> "Geometry":
        """ポリライン集合の連結（純関数）。

        `coords` は縦方向に結合し、`offsets` は後段の先頭を `len(self.coords)` だけ
        シフトして統合する。いずれかが空集合の場合は他方のコピーを返す。
        """
        if self.n_lines == 0:
            return Geometry(other.coords.copy(), other.offsets.copy(), other.closed.copy())
        if other.n_lines == 0:
            return Geometry(self.coords.copy(), self.offsets.copy(), self.closed.copy())
        offset_shift = self.coords.shape[0]
        new_coords = np.vstack([self.coords, other.coords])
        new_offsets = np.hstack([self.offsets, other.offsets[1:] + offset_shift])
        new_closed = np.hstack([self.closed, other.closed])
        return Geometry(new_coords, new_offsets, new_closed)

    def __add__(self, other: "Geometry") -> "Geometry":
        """糖衣: `concat` のエイリアス。"""
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
        n_closed = int(self.closed.sum())
        return f"Geometry(N={self.n_vertices}, M={self.n_lines}, closed={n_closed})"
