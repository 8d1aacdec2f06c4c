"""
どこで: `api.ui_runner.render`
何を: RenderWindow/ModernGL コンテキスト/UIRenderer の初期化と、UI カメラの配置。
なぜ: `api.runner` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import logging

import moderngl

from common.settings import get as get_settings
from common.types import RGBA
from engine.core.vectors import Vector3
from engine.scene.camera import Camera
from engine.scene.game_engine import GameEngine

logger = logging.getLogger(__name__)


def place_ui_camera(camera: Camera) -> float:
    """UI 半高さ（較正定数）がちょうど画面高さに収まる距離へ、カメラを +Z 上に置く。

    Returns
    -------
    float
        原点からの距離。
    """
    distance = camera.distance_to_fit(get_settings().UI_WORLD_UNIT_PER_LOGICAL_UNIT)
    camera.position = Vector3(0.0, 0.0, distance)
    logger.debug(
        "UI camera placed: z=%.4f fov=%.3f", distance, camera.effective_field_of_view
    )
    return distance


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    background: RGBA,
    ge: GameEngine,
):
    """ウィンドウ/ModernGL/UIRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, ui_renderer)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import UIRenderer

    rendering_window = RenderWindow(window_width, window_height, bg_color=background)  # type: ignore[abstract]

    # ModernGL コンテキスト（半透明プレーン用にブレンド有効）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    ui_renderer = UIRenderer(mgl_ctx, ge.ui_camera, ge.main_game_object)
    return rendering_window, mgl_ctx, ui_renderer


__all__ = ["create_window_and_renderer", "place_ui_camera"]
