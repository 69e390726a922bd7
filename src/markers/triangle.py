from __future__ import annotations

from .base import PathMarker, offsets_table
from .registry import marker


@marker
class Triangle(PathMarker):
    """上向きの二等辺三角形（頂点は上辺中央、右下、左下の順）。

    `Triangle(2.0).create_point((0, 0))` → (0, -1), (1, 1), (-1, 1)（閉ループ）。
    """

    __slots__ = ()

    OFFSETS = offsets_table(
        [
            (0.0, -0.5),
            (0.5, 0.5),
            (-0.5, 0.5),
        ]
    )
