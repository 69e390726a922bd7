"""
どこで: `api` 入口（高レベル公開 API）。
何を: マーカー `M`・装飾子 `marker`・設定 `MarkerConfig`・`Geometry` などを再輸出。
なぜ: 利用者が単一名前空間から点マーカーの生成→線描画用ジオメトリ化まで完結できるようにするため。

Usage:
    from api import M

    star = M.star(size=6.0)
    shape = star.create_point((100, 50))      # PathShape（10 頂点・閉ループ）
    g = M.geometry(star, [(0, 0), (10, 10)])  # Geometry（線 2 本）
"""

# コアクラス（高度な使用）
from engine.core.geometry import Geometry
from markers import (
    DEFAULT_SIZE,
    BaseMarker,
    DrawableShape,
    MarkerConfig,
    OvalShape,
    PathShape,
    PointShapeFactory,
    RectShape,
)
from markers.registry import (
    marker as marker,
)  # 公開唯一経路（api.marker）

# 主要API
from .markers import M, MarkersAPI

__all__ = [
    # メインAPI
    "M",  # マーカーファクトリ
    "marker",  # ユーザー拡張用デコレータ
    "MarkerConfig",
    "DEFAULT_SIZE",
    # クラス（高度な使用）
    "MarkersAPI",
    "PointShapeFactory",
    "BaseMarker",
    "DrawableShape",
    "RectShape",
    "OvalShape",
    "PathShape",
    "Geometry",
]

# バージョン情報
__version__ = "2025.10"
