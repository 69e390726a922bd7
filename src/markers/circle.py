from __future__ import annotations

from .base import BoxMarker
from .drawable import OvalShape
from .registry import marker


@marker
class Circle(BoxMarker):
    """直径 `size` の円。

    外接正方形（Square と同じ矩形）を `OvalShape` として返し、楕円の描画はレンダラに任せる。
    """

    __slots__ = ()

    shape_type = OvalShape
