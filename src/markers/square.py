from __future__ import annotations

from .base import BoxMarker
from .drawable import RectShape
from .registry import marker


@marker
class Square(BoxMarker):
    """中心に置いた一辺 `size` の正方形。

    `Square(4.0).create_point((10, 10))` は原点 (8, 8)、幅/高さ 4 の `RectShape`。
    """

    __slots__ = ()

    shape_type = RectShape
