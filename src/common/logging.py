"""
どこで: `common.logging`
何を: アプリ未設定時だけ最小のロギング構成を適用するヘルパ。
なぜ: ライブラリ側は `logging.getLogger(__name__)` のみを使い、構成はランナー/CLI に寄せるため。
"""

from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("PVU_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `level` 省略時は環境変数 `PVU_LOG_LEVEL`（既定 INFO）
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=_resolve_level(level), format=_FORMAT)


__all__ = ["setup_default_logging"]
