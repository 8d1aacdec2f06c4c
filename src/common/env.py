"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/float/bool）を提供。
なぜ: `os.getenv` + 例外/境界ガードの散在を防ぎ、設定の読み込みを一箇所に寄せるため。
"""

from __future__ import annotations

import math
import os
from typing import Optional


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
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_float(
    name: str, default: float, *, min_value: Optional[float] = None
) -> float:
    """浮動小数の環境変数を取得する。

    - 未設定/数値でない/非有限（nan, inf）の場合は `default`。
    - `min_value` 指定時は下限に丸める。
    """
    raw = os.getenv(name)
    if raw is None:
        return float(default)
    try:
        val = float(raw)
    except ValueError:
        return float(default)
    if not math.isfinite(val):
        return float(default)
    if min_value is not None and val < min_value:
        val = float(min_value)
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # 数値優先
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


__all__ = ["env_int", "env_float", "env_bool"]
