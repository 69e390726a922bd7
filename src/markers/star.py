from __future__ import annotations

from .base import PathMarker, offsets_table
from .registry import marker


@marker
class Star(PathMarker):
    """星形の輪郭（10 頂点）。上端 (0, -size/2) から時計回り。

    頂点表は描画互換のため固定値（幾何的な再導出はしない）。
    """

    __slots__ = ()

    OFFSETS = offsets_table(
        [
            (0.0, -0.5),
            (0.125, -0.125),
            (0.5, -0.125),
            (0.25, 0.125),
            (0.375, 0.5),
            (0.0, 0.25),
            (-0.375, 0.5),
            (-0.25, 0.125),
            (-0.5, -0.125),
            (-0.125, -0.125),
        ]
    )
