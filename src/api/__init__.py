"""
どこで: `api` 入口（高レベル公開 API）。
何を: UI 要素 `UIComponent`・ホスト `GameEngine`・ベクトル型・プレーン生成・ランナー `run_ui` を再輸出。
なぜ: 利用者が単一名前空間から UI 配置→描画確認まで完結できるようにするため。

Usage:
    from api import GameEngine, UIComponent, Vector2, Vector3

    ge = GameEngine()
    ui = UIComponent(ge, "Button")
    ui.transform_scale(Vector3(2, 2, 1), pivot=Vector2(0, 0))   # 左上を固定して拡大
"""

from engine.core.quaternion import Quaternion
from engine.core.vectors import Vector2, Vector3, Vector4
from engine.scene.camera import Camera
from engine.scene.game_engine import GameEngine
from engine.scene.game_object import GameObject
from engine.scene.mesh import MeshResourceError
from engine.ui.component import UIComponent, compose_ui_transform
from engine.ui.plane import create_ui_plane

from .runner import run_ui
from .runner import run_ui as run

__all__ = [
    # メインAPI
    "UIComponent",
    "GameEngine",
    "run_ui",
    "run",
    # 値型
    "Vector2",
    "Vector3",
    "Vector4",
    "Quaternion",
    # シーン（高度な使用）
    "Camera",
    "GameObject",
    "MeshResourceError",
    "compose_ui_transform",
    "create_ui_plane",
]

__version__ = "2026.10"
