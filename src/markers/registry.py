"""
どこで: `markers` のレジストリ層（クラス専用）。
何を: `@marker` デコレータでファクトリクラスを登録し、取得/一覧/検査/生成を提供。
なぜ: マーカーの種類を名前（"square", "star" など）で選べるようにし、
`api.markers` から安全に解決するため。

概要:
- 登録対象は `BaseMarker` の派生クラスのみ。
- デコレータは名前省略可（`@marker` / `@marker()`）と明示名指定をサポート。
- キーは `BaseRegistry` で正規化（"Square" -> "square", "RoundDot" -> "round_dot"）。
"""

from __future__ import annotations

import inspect
from dataclasses import replace
from typing import Any, Mapping

from common.base_registry import BaseRegistry

from .base import BaseMarker, MarkerConfig

_marker_registry = BaseRegistry("marker")

# `api.M` 自身のメソッド名。マーカー名に使うと `M.<name>` で到達できなくなる
RESERVED_NAMES = frozenset({"points", "geometry", "list_markers"})


def marker(arg: Any | None = None, /, name: str | None = None):
    """マーカーファクトリクラスをレジストリに登録するデコレータ。

    使用例:
    - `@marker` / `@marker()`                       → クラス名から自動推論。
    - `@marker("dot")` / `@marker(name="dot")`      → 明示名で登録。

    例外:
    - TypeError: `BaseMarker` の派生クラス以外を登録しようとした場合、
      または位置引数の名前と `name=` を同時に指定した場合。
    - ValueError: 正規化後の名前が `RESERVED_NAMES` に含まれる場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not (inspect.isclass(obj) and issubclass(obj, BaseMarker)):
            raise TypeError(f"@marker only accepts BaseMarker subclasses: got {obj!r}")
        key = _marker_registry.normalize_key(resolved_name or obj.__name__)
        if key in RESERVED_NAMES:
            raise ValueError(f"marker name '{key}' is reserved by the M facade")
        return _marker_registry.register(key)(obj)

    # 直付け (@marker)。クラス以外もここで TypeError にする
    if arg is not None and not isinstance(arg, str):
        return _register_checked(arg, name)

    if isinstance(arg, str) and name is not None:
        raise TypeError(f"@marker got two names: {arg!r} and name={name!r}")

    # 位置引数で名前を渡した (@marker("name"))
    if isinstance(arg, str):

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_marker(name: str) -> type[BaseMarker]:
    """登録されたファクトリクラスを取得（未登録は KeyError）。"""
    return _marker_registry.get(name)


def list_markers() -> list[str]:
    return sorted(_marker_registry.list_all())


def is_marker_registered(name: str) -> bool:
    return _marker_registry.is_registered(name)


def create_marker(name: str, config: MarkerConfig | None = None, **overrides: Any) -> BaseMarker:
    """名前と設定からファクトリを生成する。

    引数:
        name: マーカー名
        config: 生成設定。省略時は `MarkerConfig()`（サイズ 3.0）
        overrides: `MarkerConfig` のフィールド上書き（例: `size=4.0`）
    """
    cls = get_marker(name)
    cfg = config or MarkerConfig()
    if overrides:
        cfg = replace(cfg, **overrides)
    return cls.from_config(cfg)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _marker_registry.unregister(name)


def get_registry() -> Mapping[str, type[BaseMarker]]:
    """レジストリ辞書のコピーを返す。"""
    return _marker_registry.registry


__all__ = [
    "marker",
    "get_marker",
    "list_markers",
    "is_marker_registered",
    "create_marker",
    "unregister",
    "get_registry",
    "RESERVED_NAMES",
]
