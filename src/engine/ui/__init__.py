"""
どこで: `engine.ui` サブパッケージ。
何を: ピボット基準の UI 要素 `UIComponent` と、デバッグ用 UI プレーン生成。
なぜ: 正規化座標の UI 配置をシーングラフの絶対 TRS へ変換する層を、描画から独立させるため。
"""

from .component import UIComponent, UILocalTransform, compose_ui_transform
from .plane import border_quads, create_ui_plane

__all__ = [
    "UIComponent",
    "UILocalTransform",
    "border_quads",
    "compose_ui_transform",
    "create_ui_plane",
]
