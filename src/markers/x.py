from __future__ import annotations

from .base import PathMarker, offsets_table
from .registry import marker


@marker
class X(PathMarker):
    """線幅 `size / 4` の「X」字の輪郭（12 頂点）。上の交点付近から時計回り。"""

    __slots__ = ()

    OFFSETS = offsets_table(
        [
            (0.0, -0.125),
            (0.25, -0.5),
            (0.5, -0.5),
            (0.125, 0.0),
            (0.5, 0.5),
            (0.25, 0.5),
            (0.0, 0.125),
            (-0.25, 0.5),
            (-0.5, 0.5),
            (-0.125, 0.0),
            (-0.5, -0.5),
            (-0.25, -0.5),
        ]
    )
