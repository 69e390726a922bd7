from __future__ import annotations

from .base import PathMarker, offsets_table
from .registry import marker

# 腕の外縁 (±1/2) と内縁 (±1/4)
_XS = (-0.5, -0.25, 0.25, 0.5)
_YS = (-0.5, -0.25, 0.25, 0.5)

# (x index, y index) の輪郭順
_OUTLINE = (
    # 上の腕
    (1, 0),
    (2, 0),
    (2, 1),
    # 右の腕
    (3, 1),
    (3, 2),
    (2, 2),
    # 下の腕
    (2, 3),
    (1, 3),
    (1, 2),
    # 左の腕
    (0, 2),
    (0, 1),
    (1, 1),
)


@marker
class Cross(PathMarker):
    """プラス記号（+）の輪郭。腕の太さは `size / 2`、12 頂点の閉ループ。"""

    __slots__ = ()

    OFFSETS = offsets_table([(_XS[i], _YS[j]) for i, j in _OUTLINE])
