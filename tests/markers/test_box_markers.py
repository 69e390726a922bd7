"""
どこで: tests（markers/square・circle）。
何を: 矩形系マーカーの原点・サイズ・既定サイズ・種別タグを確認。
"""

from __future__ import annotations

import pytest

from markers import DEFAULT_SIZE, Circle, MarkerConfig, OvalShape, RectShape, Square


def test_square_example() -> None:
    shape = Square(4.0).create_point((10, 10))
    assert isinstance(shape, RectShape)
    assert (shape.x, shape.y, shape.width, shape.height) == (8.0, 8.0, 4.0, 4.0)
    assert shape.kind == "rect"


def test_circle_uses_same_box_as_square_tagged_as_oval() -> None:
    sq = Square(5.0).create_point((1.5, -2.0))
    ci = Circle(5.0).create_point((1.5, -2.0))
    assert isinstance(ci, OvalShape)
    assert ci.kind == "oval"
    assert (ci.x, ci.y, ci.width, ci.height) == (sq.x, sq.y, sq.width, sq.height)
    # 種別が違えば等価ではない
    assert ci != sq


@pytest.mark.parametrize("cls", [Square, Circle])
def test_default_size_matches_explicit(cls) -> None:
    assert DEFAULT_SIZE == 3.0
    assert cls().size == 3.0
    assert cls() == cls(3.0)
    assert cls().create_point((0.0, 0.0)) == cls(3.0).create_point((0.0, 0.0))


@pytest.mark.parametrize("cls", [Square, Circle])
def test_bounds_are_centered_box(cls) -> None:
    shape = cls(2.0).create_point((3.0, 4.0))
    assert shape.bounds == (2.0, 3.0, 4.0, 5.0)
    assert shape.center == (3.0, 4.0)


def test_from_config() -> None:
    factory = Square.from_config(MarkerConfig(size=6.0))
    assert factory == Square(6.0)
    assert factory.config == MarkerConfig(size=6.0)


def test_zero_size_degenerates_without_error() -> None:
    shape = Square(0.0).create_point((1.0, 1.0))
    assert (shape.x, shape.y, shape.width, shape.height) == (1.0, 1.0, 0.0, 0.0)


def test_negative_size_inverts_box_but_bounds_stay_ordered() -> None:
    shape = Square(-2.0).create_point((0.0, 0.0))
    assert (shape.x, shape.y, shape.width, shape.height) == (1.0, 1.0, -2.0, -2.0)
    assert shape.bounds == (-1.0, -1.0, 1.0, 1.0)
