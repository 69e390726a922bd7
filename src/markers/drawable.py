"""
どこで: `markers.drawable`（マーカーの出力値）。
何を: 描画バックエンドに依存しない形状記述子 `RectShape` / `OvalShape` / `PathShape`。
なぜ: ファクトリは「何を描くか」だけを返し、塗り/線/座標変換はレンダラ側に委ねるため。

記述子は 2 系統:
- 矩形系（`RectShape` / `OvalShape`）: 原点 `(x, y)` と `width/height`。
  `OvalShape` は同じ矩形に内接する楕円として描かれる。
- パス系（`PathShape`）: 頂点列 `(K, 2)` と閉ループフラグ。閉ループでは末尾頂点が
  暗黙に先頭へ接続される（頂点列に先頭の複製は含めない）。

すべて不変（frozen）で、`translate` は新しいインスタンスを返す。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

import numpy as np
from shapely.geometry import LineString, Point, Polygon

from common import settings
from common.types import Bounds, Vec2
from engine.core.geometry import Geometry


class DrawableShape(ABC):
    """形状記述子の共通インターフェース。"""

    kind: ClassVar[str]

    @property
    def closed(self) -> bool:
        return True

    @property
    @abstractmethod
    def bounds(self) -> Bounds:
        """`(minx, miny, maxx, maxy)`。負サイズでも min <= max に正規化される。"""

    @abstractmethod
    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "DrawableShape": ...

    @abstractmethod
    def vertices_xy(self, segments: int | None = None) -> np.ndarray:
        """輪郭頂点 `(K, 2) float64`（閉ループでも先頭の複製は含めない）。

        `segments` は楕円の分割数で、それ以外の記述子では無視される。
        """

    def to_geometry(self, segments: int | None = None) -> Geometry:
        """線描画向けの 1 本のポリラインへ変換する。"""
        return Geometry.from_lines([self.vertices_xy(segments)], closed=self.closed)

    def to_shapely(self, segments: int | None = None) -> Polygon | LineString | Point:
        """shapely のジオメトリへ変換する（閉ループは Polygon、1 頂点のパスは Point）。"""
        pts = self.vertices_xy(segments)
        if len(pts) == 1:
            return Point(pts[0])
        if self.closed and len(pts) >= 3:
            return Polygon(pts)
        return LineString(pts)


@dataclass(frozen=True)
class _BoxShape(DrawableShape):
    """原点 `(x, y)` と幅/高さで表す軸平行な矩形（Rect/Oval の共通部）。"""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Vec2:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def bounds(self) -> Bounds:
        x0, x1 = sorted((self.x, self.x + self.width))
        y0, y1 = sorted((self.y, self.y + self.height))
        return (x0, y0, x1, y1)

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "_BoxShape":
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True)
class RectShape(_BoxShape):
    """矩形。"""

    kind: ClassVar[str] = "rect"

    def vertices_xy(self, segments: int | None = None) -> np.ndarray:
        # 原点から時計回り（画面座標系: y 下向き）
        x0, y0 = self.x, self.y
        x1, y1 = self.x + self.width, self.y + self.height
        return np.array([[x0, y0], [x1, y0], [x1, y1], [x0, y1]], dtype=np.float64)


@dataclass(frozen=True)
class OvalShape(_BoxShape):
    """矩形に内接する楕円。"""

    kind: ClassVar[str] = "oval"

    def vertices_xy(self, segments: int | None = None) -> np.ndarray:
        n = int(segments) if segments is not None else settings.get().OVAL_SEGMENTS
        if n < 3:
            raise ValueError(f"segments must be >= 3, got {n}")
        cx, cy = self.center
        t = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
        xs = cx + np.cos(t) * (self.width / 2)
        ys = cy + np.sin(t) * (self.height / 2)
        return np.stack([xs, ys], axis=1)


@dataclass(frozen=True, eq=False)
class PathShape(DrawableShape):
    """折れ線/多角形パス。

    Attributes:
        vertices: `(K, 2)` 頂点列（読み取り専用の float64 配列に正規化）
        is_closed: 末尾頂点を先頭へ暗黙に接続するか（`closed` プロパティで参照）
    """

    kind: ClassVar[str] = "path"

    vertices: np.ndarray
    is_closed: bool = True

    def __post_init__(self) -> None:
        arr = np.array(self.vertices, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2 or arr.shape[0] == 0:
            raise ValueError(f"vertices must be a non-empty (K, 2) array, got {arr.shape}")
        arr.flags.writeable = False
        object.__setattr__(self, "vertices", arr)
        object.__setattr__(self, "is_closed", bool(self.is_closed))

    @property
    def closed(self) -> bool:
        return self.is_closed

    def __len__(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def bounds(self) -> Bounds:
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "PathShape":
        return PathShape(self.vertices + np.array([dx, dy]), self.is_closed)

    def vertices_xy(self, segments: int | None = None) -> np.ndarray:
        return self.vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathShape):
            return NotImplemented
        return self.is_closed == other.is_closed and np.array_equal(self.vertices, other.vertices)

    def __hash__(self) -> int:
        # -0.0 と 0.0 は等価なので +0.0 で符号を揃えてからハッシュする
        return hash((self.is_closed, self.vertices.shape, (self.vertices + 0.0).tobytes()))

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"PathShape(K={len(self)}, closed={self.is_closed})"


__all__ = ["DrawableShape", "RectShape", "OvalShape", "PathShape"]
