"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value : Optional[int]
        下限（指定時、結果が下回れば下限に丸める）。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        logger.warning("%s=%r is not an integer; using %r", name, raw, default)
        return default
    if min_value is not None and val < min_value:
        logger.warning("%s=%d is below %d; clamped", name, val, min_value)
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        # 数値優先
        return int(s) != 0
    except ValueError:
        pass
    if s in {"true", "t", "yes", "y", "on"}:
        return True
    if s in {"false", "f", "no", "n", "off"}:
        return False
    logger.warning("%s=%r is not a boolean; using %r", name, raw, default)
    return bool(default)


def env_str(name: str, default: str, *, choices: Optional[set[str]] = None) -> str:
    """文字列環境変数を取得（前後空白は除去、空文字は既定値）。

    `choices` 指定時は大文字化した値が候補に含まれない場合に既定値へ戻す。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    val = raw.strip()
    if choices is not None and val.upper() not in choices:
        logger.warning("%s=%r is not one of %s; using %r", name, raw, sorted(choices), default)
        return default
    return val


__all__ = ["env_int", "env_bool", "env_str"]
