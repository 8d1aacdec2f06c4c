"""
どこで: `util.color`。
何を: 色指定（Hex 文字列 / RGB(A) 0–1 / RGB(A) 0–255）を RGBA(0–1) へ正規化する。
なぜ: 設定ファイル・API 引数・ウィンドウ背景で同一の受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

from typing import Iterable

from common.types import RGBA


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"（大文字/小文字不問）。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 6:
        t += "ff"
    if len(t) != 8:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, 8, 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列、長さ 3/4 の数値シーケンス（list/tuple/ndarray/Vector4 などの反復可能）
    - 全要素が 0..1 なら 0–1 とみなし、そうでなければ 0–255 とみなして丸め・クランプする
    - アルファ省略時は不透明
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, Iterable):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    try:
        comps = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color sequence: {value!r}") from e
    if len(comps) not in (3, 4):
        raise ValueError("color sequence must be length 3 or 4")

    if all(0.0 <= c <= 1.0 for c in comps):
        if len(comps) == 3:
            comps.append(1.0)
        r, g, b, a = (_clamp01(c) for c in comps)
        return (r, g, b, a)

    if len(comps) == 3:
        comps.append(255.0)
    r, g, b, a = (max(0, min(255, int(round(c)))) / 255.0 for c in comps)
    return (r, g, b, a)


__all__ = ["normalize_color", "parse_hex_color_str"]
