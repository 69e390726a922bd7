"""
どこで: `api.markers`（マーカー生成の高レベル API）。
何を: 登録済みマーカーを名前で解決してファクトリを返す薄いファサード `M` と、
      多数の点へ一括でマーカーを置くヘルパ。
なぜ: 点ジオメトリ（座標列・shapely の Point/MultiPoint）から描画用の形状までを
      1 つの入口で完結させるため。

Notes
-----
- 利用者は `from api import M` として、`M.star(size=6)` のようにファクトリを得る。
- 実体はレジストリ（`markers.registry`）に登録済みのクラスを解決して構築するだけ。
- 未登録名は `AttributeError`（`getattr` 規約に合わせる）。
- `points`/`geometry` は各点で `create_point` を呼ぶだけの純関数。
- `points`/`geometry`/`list_markers` はマーカー名として登録できない（`RESERVED_NAMES`）。

Examples
--------
    from api import M

    factory = M.cross(size=4.0)
    shape = factory.create_point((0, 0))          # PathShape（12 頂点）

    g = M.geometry(M.circle(size=2.0), [(0, 0), (10, 5)], segments=16)
    # -> Geometry（閉ループ 2 本）
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

import numpy as np
from shapely.geometry.base import BaseGeometry

# レジストリ登録の副作用を発火させるため、markers パッケージを 1 度だけ import すれば十分
import markers  # noqa: F401  (登録目的の副作用)
from common.types import PointLike
from engine.core.geometry import Geometry
from markers.base import BaseMarker, MarkerConfig, PointShapeFactory
from markers.drawable import DrawableShape
from markers.registry import create_marker, is_marker_registered, list_markers

logger = logging.getLogger(__name__)


def _iter_centers(points: Any) -> Iterable[PointLike]:
    """点集合入力を中心点の列へ展開する。

    - shapely: `Point` は 1 点、`MultiPoint` などは `.geoms` を展開
    - `ndarray (N, 2|3)` は行ごと
    - それ以外は反復可能な点の列として扱う
    """
    if isinstance(points, BaseGeometry):
        if points.is_empty:
            return []
        if points.geom_type == "Point":
            return [points]
        if points.geom_type == "MultiPoint":
            return list(points.geoms)
        raise ValueError(f"expected a Point or MultiPoint, got {points.geom_type}")
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise ValueError(f"points array must have shape (N, 2) or (N, 3), got {points.shape}")
        return list(points)
    return points


class MarkersAPI:
    """マーカー API（`M` の実体）。

    責務:
    - マーカー名→ファクトリクラスの動的ディスパッチ（インスタンス属性で遅延解決）
    - 多数の点への一括適用（記述子の列 / 連結済み `Geometry`）

    使い方:
        from api import M
        sq = M.square()            # 既定サイズ 3.0
        st = M.star(size=8.0)
    """

    def _build_marker_method(self, name: str) -> Callable[..., BaseMarker]:
        """レジストリ名から `M.<name>(size=..., config=...)` を構築する。"""

        def _marker_method(
            size: float | None = None, *, config: MarkerConfig | None = None
        ) -> BaseMarker:
            if not is_marker_registered(name):
                # 登録解除と整合を取るため、キャッシュ済みの属性を破棄して AttributeError を送出
                self.__dict__.pop(name, None)
                raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
            if size is None:
                return create_marker(name, config)
            return create_marker(name, config, size=size)

        _marker_method.__name__ = name
        _marker_method.__qualname__ = f"{self.__class__.__name__}.{name}"
        return _marker_method

    def __getattr__(self, name: str) -> Callable[..., BaseMarker]:
        """レジストリに基づき `M.<name>` を遅延生成する。

        Raises
        ------
        AttributeError
            未登録名を指定した場合。
        """
        if name.startswith("_") or not is_marker_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        method = self._build_marker_method(name)
        self.__dict__[name] = method
        return method

    @staticmethod
    def list_markers() -> list[str]:
        """利用可能なマーカー名の一覧を返す。"""
        return list_markers()

    # === 一括適用 ===

    @staticmethod
    def points(factory: PointShapeFactory, points: Any) -> list[DrawableShape]:
        """各点に `factory.create_point` を適用した記述子の列を返す。

        Parameters
        ----------
        factory : PointShapeFactory
            使用するマーカーファクトリ。
        points : Any
            中心点の列、`ndarray (N, 2|3)`、shapely の `Point` / `MultiPoint`。
        """
        shapes = [factory.create_point(c) for c in _iter_centers(points)]
        logger.debug("created %d markers with %r", len(shapes), factory)
        return shapes

    @classmethod
    def geometry(
        cls, factory: PointShapeFactory, points: Any, segments: int | None = None
    ) -> Geometry:
        """各点のマーカーを `Geometry` に変換して連結する（線描画レンダラ向け）。

        `segments` は円マーカーの分割数（省略時は `PXM_OVAL_SEGMENTS`）。
        点が無い場合は空の `Geometry` を返す。
        """
        shapes = cls.points(factory, points)
        return Geometry.from_lines(
            [s.vertices_xy(segments) for s in shapes], closed=[s.closed for s in shapes]
        )

    # 補完体験向上: dir(M) で登録マーカー名を出す
    def __dir__(self) -> list[str]:
        return sorted(set(object.__dir__(self)).union(list_markers()))


# シングルトンインスタンス（`from api import M` で公開）
M = MarkersAPI()
