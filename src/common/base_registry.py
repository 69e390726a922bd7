"""
共通レジストリ基底クラス
markers/ で使用する名前→オブジェクトの登録表（キー正規化付き）
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

logger = logging.getLogger(__name__)


class BaseRegistry:
    """名前付きレジストリ。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - デコレータは名前省略可。省略時はクラス/関数名から自動推論します。
    - `label` はログ/例外メッセージ中の登録対象の呼称（例: "marker"）。
    """

    def __init__(self, label: str = "entry") -> None:
        self._label = label
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "RoundDot" -> "round_dot", "X" -> "x"）。"""
        if not isinstance(name, str):
            raise TypeError(f"registry key must be str, got {type(name).__name__}")
        if not name:
            raise ValueError("registry key must not be empty")
        name = name.replace("-", "_")
        # 大文字を含む場合のみキャメル→スネーク変換
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """クラス/関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self.normalize_key(name) if name else self.normalize_key(obj.__name__)
            current = self._registry.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"{self._label} '{key}' is already registered ({current!r})")
            self._registry[key] = obj
            logger.debug("registered %s '%s' -> %r", self._label, key, obj)
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録されたクラス/関数を取得（未登録は KeyError）。"""
        key = self.normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"{self._label} '{name}' is not registered")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self.normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        if self._registry.pop(self.normalize_key(name), None) is not None:
            logger.debug("unregistered %s '%s'", self._label, name)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリのコピー（変更しても内部状態に影響しない）。"""
        return self._registry.copy()
