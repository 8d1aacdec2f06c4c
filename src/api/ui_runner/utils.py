"""
どこで: `api.ui_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウ寸法・背景色を「明示引数 → YAML 設定 → 既定値」の順で解決する。
なぜ: `api.runner` を薄く保ち、テスト容易性を上げるため。
"""

from __future__ import annotations

from typing import Any, Mapping

from util.color import normalize_color
from util.utils import config_get

DEFAULT_FPS = 60
DEFAULT_WINDOW_SIZE = (1280, 720)
DEFAULT_BACKGROUND = (0.12, 0.12, 0.12, 1.0)


def _positive_int(value: Any, default: int) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError):
        return int(default)
    return v if v > 0 else int(default)


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None, *, default: int = DEFAULT_FPS) -> int:
    """FPS を解決して 1 以上の int を返す（数値化できない/<=0 は既定へ）。"""
    if requested_fps is not None:
        return _positive_int(requested_fps, default)
    return _positive_int(config_get(cfg, "fps", default), default)


def resolve_window_size(
    width: int | None, height: int | None, cfg: Mapping[str, Any] | None
) -> tuple[int, int]:
    """ウィンドウ寸法 [px] を解決する。幅/高さは独立に解決する。"""
    dw, dh = DEFAULT_WINDOW_SIZE
    w = width if width is not None else config_get(cfg, "window.width", dw)
    h = height if height is not None else config_get(cfg, "window.height", dh)
    return _positive_int(w, dw), _positive_int(h, dh)


def resolve_background(
    background: Any, cfg: Mapping[str, Any] | None
) -> tuple[float, float, float, float]:
    """背景色を RGBA(0–1) に解決する。

    明示指定の不正値は `ValueError` をそのまま送出し、設定ファイル側の不正値は既定色へ戻す。
    """
    if background is not None:
        return normalize_color(background)
    src = config_get(cfg, "window.background_color")
    if src is None:
        return DEFAULT_BACKGROUND
    try:
        return normalize_color(src)
    except ValueError:
        return DEFAULT_BACKGROUND


__all__ = ["resolve_background", "resolve_fps", "resolve_window_size"]
