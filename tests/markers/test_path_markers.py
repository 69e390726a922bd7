"""
どこで: tests（markers/triangle・cross・star・x）。
何を: パス系マーカーの頂点表（順序・値・閉ループ）と退化サイズの扱いを確認。
なぜ: 頂点表は描画互換のため固定であり、1 点でもずれると見た目が変わるため。
"""

from __future__ import annotations

import numpy as np
import pytest

from markers import Cross, PathShape, Star, Triangle, X


def test_triangle_example() -> None:
    shape = Triangle(2.0).create_point((0, 0))
    assert isinstance(shape, PathShape)
    assert shape.closed
    assert shape.vertices.tolist() == [[0.0, -1.0], [1.0, 1.0], [-1.0, 1.0]]


def test_triangle_geometry_returns_to_start() -> None:
    g = Triangle(2.0).create_point((0, 0)).to_geometry()
    assert g.coords.tolist() == [[0.0, -1.0], [1.0, 1.0], [-1.0, 1.0], [0.0, -1.0]]


def test_cross_example() -> None:
    shape = Cross(4.0).create_point((0, 0))
    assert len(shape) == 12
    assert shape.closed
    top = [(-1, -2), (1, -2), (1, -1)]
    right = [(2, -1), (2, 1), (1, 1)]
    bottom = [(1, 2), (-1, 2), (-1, 1)]
    left = [(-2, 1), (-2, -1), (-1, -1)]
    expected = top + right + bottom + left
    assert shape.vertices.tolist() == [[float(x), float(y)] for x, y in expected]


def test_star_vertices() -> None:
    shape = Star(8.0).create_point((10.0, 20.0))
    assert len(shape) == 10
    right_half = [(0, -4), (1, -1), (4, -1), (2, 1), (3, 4)]
    left_half = [(0, 2), (-3, 4), (-2, 1), (-4, -1), (-1, -1)]
    expected = np.array(right_half + left_half, dtype=np.float64) + np.array([10.0, 20.0])
    np.testing.assert_array_equal(shape.vertices, expected)


def test_x_vertices() -> None:
    shape = X(8.0).create_point((0.0, 0.0))
    assert len(shape) == 12
    upper = [(0, -1), (2, -4), (4, -4), (1, 0), (4, 4), (2, 4)]
    lower = [(0, 1), (-2, 4), (-4, 4), (-1, 0), (-4, -4), (-2, -4)]
    expected = upper + lower
    assert shape.vertices.tolist() == [[float(x), float(y)] for x, y in expected]


@pytest.mark.parametrize(
    "cls, n_vertices",
    [(Triangle, 3), (Cross, 12), (Star, 10), (X, 12)],
)
def test_vertex_counts_and_closed(cls, n_vertices) -> None:
    shape = cls().create_point((0.0, 0.0))
    assert len(shape) == n_vertices
    assert shape.closed


def test_extreme_offsets_are_half_size(path_marker_cls) -> None:
    size = 6.0
    shape = path_marker_cls(size).create_point((0.0, 0.0))
    minx, miny, maxx, maxy = shape.bounds
    # 少なくとも一方の軸で ±size/2 に達し、どの頂点も外には出ない
    assert (minx, maxx) == (-3.0, 3.0) or (miny, maxy) == (-3.0, 3.0)
    assert -3.0 <= minx and maxx <= 3.0 and -3.0 <= miny and maxy <= 3.0


def test_zero_size_collapses_to_center(path_marker_cls) -> None:
    shape = path_marker_cls(0.0).create_point((2.0, -1.0))
    assert np.all(shape.vertices == np.array([2.0, -1.0]))
    # 退化形状でも Geometry 化できる（先頭複製は不要）
    g = shape.to_geometry()
    assert g.n_lines == 1


def test_negative_size_reflects_through_center(path_marker_cls) -> None:
    pos = path_marker_cls(2.0).create_point((0.0, 0.0))
    neg = path_marker_cls(-2.0).create_point((0.0, 0.0))
    np.testing.assert_array_equal(neg.vertices, -pos.vertices)


def test_offset_tables_are_read_only(path_marker_cls) -> None:
    with pytest.raises(ValueError):
        path_marker_cls.OFFSETS[0, 0] = 9.0
