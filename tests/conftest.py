"""共通フィクスチャ。

- 全ビルトインマーカーの列挙
- 設定の再読込（環境変数を触るテスト用）
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from markers import Circle, Cross, Square, Star, Triangle, X

ALL_MARKERS = (Square, Circle, Triangle, Cross, Star, X)
PATH_MARKERS = (Triangle, Cross, Star, X)


@pytest.fixture(params=ALL_MARKERS, ids=lambda cls: cls.__name__)
def marker_cls(request: pytest.FixtureRequest) -> type:
    return request.param


@pytest.fixture(params=PATH_MARKERS, ids=lambda cls: cls.__name__)
def path_marker_cls(request: pytest.FixtureRequest) -> type:
    return request.param


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """テスト内で環境変数を設定し `settings.reload_from_env()` を呼べるようにする。"""
    for key in ("PXM_OVAL_SEGMENTS", "PXM_LOG_LEVEL", "PXM_DEBUG_MARKERS"):
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
