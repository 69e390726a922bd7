"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

注意: マーカーの既定サイズ（3.0）は環境変数では変更できない。
`Square()` と `Square(3.0)` が常に同一形状になることを保つため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class _Settings:
    # OvalShape の楕円近似（分割数）
    OVAL_SEGMENTS: int = 32

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_MARKERS: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - int は `env_int`（下限丸め）、bool は `env_bool`、str は `env_str` を使用。
    - 不正値は警告ログを出して既定値に戻す。
    """
    _settings.OVAL_SEGMENTS = env_int("PXM_OVAL_SEGMENTS", 32, min_value=8)
    _settings.LOG_LEVEL = env_str("PXM_LOG_LEVEL", "INFO", choices=_LOG_LEVELS).upper()
    _settings.DEBUG_MARKERS = env_bool("PXM_DEBUG_MARKERS", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
