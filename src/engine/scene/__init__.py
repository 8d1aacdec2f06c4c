"""
どこで: `engine.scene` サブパッケージ。
何を: シーンノード（GameObject/ModelEntity）・Transform アダプタ・カメラ・メッシュ・ホスト（GameEngine）。
なぜ: UI 合成アルゴリズムが必要とする外部協調者を、描画 API から独立した純データとして提供するため。
"""

from .camera import Camera
from .game_engine import GameEngine
from .game_object import GameObject
from .mesh import MeshDescriptor, MeshResource, MeshResourceError, ModelEntity, UnlitMaterial
from .transform import Transform

__all__ = [
    "Camera",
    "GameEngine",
    "GameObject",
    "MeshDescriptor",
    "MeshResource",
    "MeshResourceError",
    "ModelEntity",
    "Transform",
    "UnlitMaterial",
]
