import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from markers import Circle, Cross, Square, Star, Triangle, X

ALL = (Square, Circle, Triangle, Cross, Star, X)

coord = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
positive_size = st.floats(0.01, 1e3, allow_nan=False, allow_infinity=False)
marker_classes = st.sampled_from(ALL)


def _outline(shape) -> np.ndarray:
    return shape.vertices_xy(32)


@given(cls=marker_classes, size=positive_size, cx=coord, cy=coord)
def test_vertices_within_centered_box(cls, size, cx, cy):
    shape = cls(size).create_point((cx, cy))
    pts = _outline(shape)
    half = size / 2
    tol = 1e-9 * max(1.0, abs(cx), abs(cy), size)
    assert np.all(pts[:, 0] >= cx - half - tol) and np.all(pts[:, 0] <= cx + half + tol)
    assert np.all(pts[:, 1] >= cy - half - tol) and np.all(pts[:, 1] <= cy + half + tol)


@given(cls=marker_classes, size=positive_size, cx=coord, cy=coord, dx=coord, dy=coord)
def test_translation_equivariance(cls, size, cx, cy, dx, dy):
    factory = cls(size)
    moved = factory.create_point((cx + dx, cy + dy))
    shifted = factory.create_point((cx, cy)).translate(dx, dy)
    assert moved.kind == shifted.kind
    np.testing.assert_allclose(_outline(moved), _outline(shifted), rtol=1e-9, atol=1e-7)


@given(size=positive_size, cx=coord, cy=coord)
def test_box_markers_have_exact_size(size, cx, cy):
    for cls in (Square, Circle):
        shape = cls(size).create_point((cx, cy))
        assert shape.width == size and shape.height == size


@given(cls=st.sampled_from((Triangle, Cross, Star, X)), size=positive_size)
def test_path_extremes_reach_half_size(cls, size):
    shape = cls(size).create_point((0.0, 0.0))
    minx, miny, maxx, maxy = shape.bounds
    half = size / 2
    assert (minx == -half and maxx == half) or (miny == -half and maxy == half)


@given(cls=marker_classes, size=st.floats(-1e3, 1e3, allow_nan=False), cx=coord, cy=coord)
def test_create_point_is_deterministic_for_any_size(cls, size, cx, cy):
    factory = cls(size)
    assert factory.create_point((cx, cy)) == factory.create_point((cx, cy))
