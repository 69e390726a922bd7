"""
どこで: `common` の型定義。
何を: Vec2 などの軽量エイリアスと、マーカー中心点として受け付ける入力型。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from typing import Protocol, Sequence, Union, runtime_checkable

Vec2 = tuple[float, float]
Bounds = tuple[float, float, float, float]


@runtime_checkable
class HasXY(Protocol):
    """`.x` / `.y` 属性を持つ点オブジェクト（例: `shapely.geometry.Point`）。"""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


PointLike = Union[HasXY, Sequence[float]]


__all__ = ["Vec2", "Bounds", "HasXY", "PointLike"]
