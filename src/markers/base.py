"""
マーカー基底モジュール

概要:
- 点ジオメトリを画面上に描くための「マーカー形状ファクトリ」の契約と基底を定義する。
- 点そのものには描ける形が無いため、中心点とサイズから矩形/楕円/パスを作って代用する。

設計意図:
- 契約は `PointShapeFactory.create_point(center) -> DrawableShape` の 1 操作のみ。
  呼び出し側はどの派生（Square/Star など）を持っているかを知らなくてよい。
- サイズは構築時に 1 度だけ決まり、以後は不変（再構築以外に変更手段は無い）。
  既定値は `DEFAULT_SIZE = 3.0`。値の検証は行わない（0/負値は退化した形状になる）。
- `create_point` は `(center, size)` だけで決まる純関数。乱数/I/O/共有可変状態に触れない。
- 派生クラスは :meth:`BaseMarker.generate` を実装し、中心座標 `(cx, cy)` 基準の形状を返す。

使用例:
    from markers import Square, MarkerConfig

    Square(4.0).create_point((10, 10))          # RectShape(x=8.0, y=8.0, width=4.0, height=4.0)
    Square.from_config(MarkerConfig(size=4.0))  # 上と同じファクトリ
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable

import numpy as np

from common import settings
from common.types import HasXY, PointLike, Vec2

from .drawable import DrawableShape, OvalShape, PathShape, RectShape

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 3.0


@dataclass(frozen=True)
class MarkerConfig:
    """マーカー生成の設定値（現状はサイズのみ）。"""

    size: float = DEFAULT_SIZE


@runtime_checkable
class PointShapeFactory(Protocol):
    """点を表す形状を生成するインターフェース。"""

    def create_point(self, center: PointLike) -> DrawableShape:
        """`center` に置くマーカー形状を返す。"""
        ...


def as_center(point: PointLike) -> Vec2:
    """中心点入力を `(x, y)` の float タプルへ正規化する。

    受け付ける形:
    - `.x` / `.y` を持つ点オブジェクト（`shapely.geometry.Point` など）
    - 長さ 2 の列 `(x, y)`、または長さ 3 の列 `(x, y, z)`（Z は無視）

    Raises
    ------
    ValueError
        上記いずれにも適合しない場合。
    """
    if isinstance(point, HasXY):
        return (float(point.x), float(point.y))
    arr = np.asarray(point, dtype=np.float64)
    if arr.shape not in ((2,), (3,)):
        raise ValueError(f"center must be (x, y) or (x, y, z), got shape {arr.shape}")
    return (float(arr[0]), float(arr[1]))


class BaseMarker(ABC):
    """すべてのマーカーファクトリの基底クラス。

    同一派生かつ同一サイズのファクトリは等価（ハッシュ可能）。
    """

    __slots__ = ("_size",)

    def __init__(self, size: float = DEFAULT_SIZE) -> None:
        self._size = float(size)

    @classmethod
    def from_config(cls, config: MarkerConfig) -> "BaseMarker":
        return cls(config.size)

    @property
    def size(self) -> float:
        return self._size

    @property
    def config(self) -> MarkerConfig:
        return MarkerConfig(size=self._size)

    @abstractmethod
    def generate(self, cx: float, cy: float) -> DrawableShape:
        """中心 `(cx, cy)` の形状を生成する（派生クラスで実装）。"""

    def create_point(self, center: PointLike) -> DrawableShape:
        """点 `center` を表すマーカー形状を返す。"""
        cx, cy = as_center(center)
        shape = self.generate(cx, cy)
        if settings.get().DEBUG_MARKERS:
            logger.debug("%r.create_point((%r, %r)) -> %r", self, cx, cy, shape)
        return shape

    def __call__(self, center: PointLike) -> DrawableShape:
        """糖衣: `create_point` のエイリアス。"""
        return self.create_point(center)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseMarker):
            return NotImplemented
        return type(self) is type(other) and self._size == other._size

    def __hash__(self) -> int:
        return hash((type(self), self._size))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size!r})"


class BoxMarker(BaseMarker):
    """中心に置いた `size x size` の矩形を使うマーカー（Square/Circle）。"""

    __slots__ = ()

    shape_type: ClassVar[type[RectShape] | type[OvalShape]] = RectShape

    def generate(self, cx: float, cy: float) -> DrawableShape:
        half = self._size / 2
        return self.shape_type(cx - half, cy - half, self._size, self._size)


class PathMarker(BaseMarker):
    """サイズ単位の頂点オフセット表から閉じたパスを作るマーカー。

    派生クラスは `OFFSETS`（`(K, 2)`、サイズ 1 あたりの中心からの相対座標）を定義する。
    頂点は `center + OFFSETS * size` で、表の順序のまま出力される。
    """

    __slots__ = ()

    OFFSETS: ClassVar[np.ndarray]

    def generate(self, cx: float, cy: float) -> DrawableShape:
        vertices = np.array([cx, cy]) + self.OFFSETS * self._size
        return PathShape(vertices, True)


def offsets_table(rows: list[tuple[float, float]]) -> np.ndarray:
    """`PathMarker.OFFSETS` 用の読み取り専用配列を作る。"""
    arr = np.array(rows, dtype=np.float64)
    arr.flags.writeable = False
    return arr


__all__ = [
    "DEFAULT_SIZE",
    "MarkerConfig",
    "PointShapeFactory",
    "BaseMarker",
    "BoxMarker",
    "PathMarker",
    "as_center",
    "offsets_table",
]
