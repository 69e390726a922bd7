"""
どこで: `markers` パッケージ（点マーカー形状ファクトリ）。
何を: ビルトインのマーカー（square/circle/triangle/star/cross/x）を import 副作用で登録し、
      契約・基底・記述子と合わせて再輸出する。
なぜ: 点ジオメトリの描画用マーカーを、種類を意識せず `create_point` 1 つで扱えるようにするため。
"""

# ビルトインのマーカーを import して登録（副作用）
from .base import DEFAULT_SIZE, BaseMarker, MarkerConfig, PointShapeFactory
from .circle import Circle
from .cross import Cross
from .drawable import DrawableShape, OvalShape, PathShape, RectShape
from .registry import (
    create_marker,
    get_marker,
    is_marker_registered,
    list_markers,
    marker,
)
from .square import Square
from .star import Star
from .triangle import Triangle
from .x import X

__all__ = [
    "DEFAULT_SIZE",
    "MarkerConfig",
    "PointShapeFactory",
    "BaseMarker",
    "DrawableShape",
    "RectShape",
    "OvalShape",
    "PathShape",
    "Square",
    "Circle",
    "Triangle",
    "Cross",
    "Star",
    "X",
    "marker",
    "get_marker",
    "list_markers",
    "is_marker_registered",
    "create_marker",
]
