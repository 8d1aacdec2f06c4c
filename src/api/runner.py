"""
どこで: `api.runner`（実行ランナー）。
何を: `GameEngine` を組み立ててユーザの `setup(ge)` で UI 要素を配置し、pyglet ウィンドウで描画し続ける。
なぜ: 少ない記述で UI 配置（ピボット/正規化座標）を目視確認できるようにするため。

実行フロー（概要）:
1) 設定解決: 引数 → `util.utils.load_config()` の YAML → 既定値の順に、ウィンドウ寸法/FPS/背景色を決める。
2) エンジン: `GameEngine(target_frame_rate=fps)` を作り、ウィンドウ寸法で UI カメラの aspect を合わせる。
3) ユーザ初期化: `setup(ge)` を呼ぶ（`create_planes` 指定時はその間だけ `DEBUG_UI_PLANES` を上書き）。
4) カメラ配置: UI 半高さが画面にちょうど収まる距離へ UI カメラを置く。
5) `init_only=True` ならここでエンジンを返す（ウィンドウ/GL には触れない）。
6) ウィンドウ/GL: `RenderWindow` と ModernGL コンテキスト、`UIRenderer` を生成。
7) フレーム駆動: `FrameClock([ge, renderer])` を `pyglet.clock` で回し、リサイズは `ge.resize` へ。
   `ESC` またはウィンドウを閉じるとスケジュール解除と GL リソース解放を行う。

例:
    from api import UIComponent, Vector2, Vector3, run_ui

    def setup(ge):
        ui = UIComponent(ge, "Panel", create_plane=True)
        ui.transform_all(Vector3(0.5, 0.5, 1), Vector3(0.5, 0.5, 0), Vector3.one(),
                         Vector3(0, 0, 15), Vector2.center(), Vector2.center(), Vector2(0, 0))

    run_ui(setup)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from common.logging import setup_default_logging
from common.settings import get as get_settings
from engine.core.frame_clock import FrameClock
from engine.scene.game_engine import GameEngine
from util.utils import load_config

from .ui_runner.render import create_window_and_renderer, place_ui_camera
from .ui_runner.utils import resolve_background, resolve_fps, resolve_window_size

logger = logging.getLogger(__name__)


def _run_setup(setup: Callable[[GameEngine], Any], ge: GameEngine, create_planes: bool | None) -> None:
    settings = get_settings()
    previous = settings.DEBUG_UI_PLANES
    if create_planes is not None:
        settings.DEBUG_UI_PLANES = bool(create_planes)
    try:
        setup(ge)
    finally:
        settings.DEBUG_UI_PLANES = previous


def run_ui(
    setup: Callable[[GameEngine], Any],
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    background: Any = None,
    create_planes: bool | None = None,
    init_only: bool = False,
) -> GameEngine:
    """UI シーンを構築し、ウィンドウを閉じるまで描画する。

    Parameters
    ----------
    setup : Callable[[GameEngine], Any]
        UI 要素を生成/配置するコールバック。
    width, height : int | None
        ウィンドウ寸法 [px]。None は設定ファイル → 1280x720。
    fps : int | None
        更新レート。None は設定ファイル → 60。
    background : Any
        背景色（Hex / RGB(A) 0–1 / 0–255）。None は設定ファイル → 暗灰色。
    create_planes : bool | None
        `setup` 中に生成される UIComponent のデバッグプレーン既定値。None は設定値のまま。
    init_only : bool
        True でウィンドウ/GL を作らずにエンジンを返す。

    Returns
    -------
    GameEngine
        構築済み（`init_only=False` の場合は終了後）のエンジン。
    """
    setup_default_logging()

    cfg = load_config()
    fps = resolve_fps(fps, cfg)
    window_width, window_height = resolve_window_size(width, height, cfg)
    bg_rgba = resolve_background(background, cfg)

    ge = GameEngine(target_frame_rate=fps)
    ge.resize(window_width, window_height)
    _run_setup(setup, ge, create_planes)
    place_ui_camera(ge.ui_camera)
    logger.info(
        "UI scene ready: %dx%d @ %d fps, components=%d",
        window_width,
        window_height,
        fps,
        len(ge.components),
    )

    if init_only:
        return ge

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    rendering_window, _mgl_ctx, ui_renderer = create_window_and_renderer(
        window_width, window_height, background=bg_rgba, ge=ge
    )
    rendering_window.add_draw_callback(ui_renderer.draw)
    rendering_window.add_resize_callback(ge.resize)

    frame_clock = FrameClock([ge, ui_renderer])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()

    closed = False

    @rendering_window.event
    def on_close():  # noqa: ANN001
        nonlocal closed
        if closed:
            return
        closed = True
        pyglet.clock.unschedule(frame_clock.tick)
        ui_renderer.release()
        pyglet.app.exit()

    pyglet.app.run()
    return ge


__all__ = ["run_ui"]
