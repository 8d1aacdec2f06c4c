"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア/リサイズ通知）と描画コールバック登録を提供。
なぜ: シーン/UI 層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(1280, 720, bg_color=(0.1, 0.1, 0.1, 1.0))
    win.add_draw_callback(renderer.draw)
    win.add_resize_callback(engine.resize)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
        caption: str = "pivotui",
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
            caption: タイトル。
            resizable: True でユーザーのリサイズを許可（UI カメラの aspect に反映）。
        """
        config = Config(
            double_buffer=True, sample_buffers=1, samples=4, vsync=True, depth_size=24
        )
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=resizable
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._resize_callbacks: list[Callable[[int, int], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_resize_callback(self, func: Callable[[int, int], None]) -> None:
        """フレームバッファサイズ（px）の変更時に呼ぶ関数を登録する。"""
        self._resize_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):  # Pyglet 既定のイベント名
        # HiDPI ではフレームバッファサイズを通知する
        fb_w, fb_h = self.get_framebuffer_size()
        for cb in self._resize_callbacks:
            cb(fb_w, fb_h)
        return super().on_resize(width, height)

    # ---- helpers ----
    def set_background_color(self, rgba: tuple[float, float, float, float]) -> None:
        """背景色 RGBA(0–1) を更新する。次フレームから反映。"""
        r, g, b, a = rgba
        self._bg_color = (float(r), float(g), float(b), float(a))
