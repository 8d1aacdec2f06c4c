"""
どこで: `engine.render` の高レベル描画。
何を: シーングラフを走査して有効な `ModelEntity` を集め、奥から手前の順に ModernGL で単色描画する。
なぜ: 毎フレームの走査/アップロード/描画/リソース寿命を一箇所に集約し、UI 層を GPU から切り離すため。
"""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import moderngl as mgl
import numpy as np

from engine.scene.camera import Camera
from engine.scene.game_object import GameObject
from engine.scene.mesh import MeshResource, ModelEntity

from ..core.tickable import Tickable
from .quad_mesh import QuadMesh
from .shader import Shader
from .types import DrawItem

logger = logging.getLogger(__name__)


@dataclass
class _MeshSlot:
    node_ref: "weakref.ReferenceType[ModelEntity]"
    resource: MeshResource
    gpu: QuadMesh


class UIRenderer(Tickable):
    """
    `root` 以下の描画ノードを、UI カメラの射影/ビュー行列で描く。
    メッシュはノードごとに 1 回だけ GPU へ送り、ノードの破棄/差し替えで解放/再送する。
    """

    def __init__(self, mgl_context: Any, camera: Camera, root: GameObject):
        self.ctx = mgl_context
        self.camera = camera
        self.root = root
        self.program = Shader.create_shader(mgl_context)
        self._slots: dict[int, _MeshSlot] = {}
        self._last_draw_count = 0

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """破棄済み/回収済みノードの GPU メッシュを解放する。"""
        stale = [
            key
            for key, slot in self._slots.items()
            if (node := slot.node_ref()) is None or node.is_destroyed
        ]
        for key in stale:
            self._release_slot(self._slots.pop(key))
        if stale:
            logger.debug("released %d stale mesh(es)", len(stale))

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """GPU に送ったメッシュを画面に描画"""
        items = _collect_draw_items(self.root)
        view_proj = self.camera.projection_matrix.astype(np.float64) @ self.camera.view_matrix()
        for item in items:
            slot = self._ensure_uploaded(item.node)
            mvp = view_proj @ item.world
            # GLSL は列優先
            self.program["mvp"].write(np.ascontiguousarray(mvp.T, dtype=np.float32).tobytes())
            self.program["color"].value = item.color
            slot.gpu.render(mgl.TRIANGLES)
        self._last_draw_count = len(items)

    def clear(self, color: Sequence[float]) -> None:
        """画面を指定色でクリア"""
        self.ctx.clear(*color)  # type: ignore

    def release(self) -> None:
        """GPU リソースを解放。"""
        for slot in self._slots.values():
            self._release_slot(slot)
        self._slots.clear()
        try:
            self.program.release()
        except Exception as e:  # 終了時のコンテキスト破棄順に依存
            logger.warning("shader program release failed: %s", e)

    def get_last_draw_count(self) -> int:
        return int(self._last_draw_count)

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #
    def _ensure_uploaded(self, node: ModelEntity) -> _MeshSlot:
        key = id(node)
        slot = self._slots.get(key)
        if slot is not None and slot.node_ref() is node and slot.resource is node.mesh:
            return slot
        if slot is not None:
            # id 再利用やメッシュ差し替え
            self._release_slot(slot)

        gpu = QuadMesh(self.ctx, self.program)
        packed = _pack_mesh(node.mesh)
        if packed is not None:
            gpu.upload(*packed)
        slot = _MeshSlot(weakref.ref(node), node.mesh, gpu)
        self._slots[key] = slot
        logger.debug(
            "uploaded mesh for %s: verts=%d tris=%d",
            node.name,
            node.mesh.n_vertices,
            node.mesh.n_triangles,
        )
        return slot

    @staticmethod
    def _release_slot(slot: _MeshSlot) -> None:
        try:
            slot.gpu.release()
        except Exception as e:
            logger.warning("mesh release failed: %s", e)


# ---------- utility -------------------------------------------------------- #
def _collect_draw_items(root: GameObject) -> list[DrawItem]:
    """
    `root` 以下の有効な `ModelEntity` を集め、ワールド Z 昇順（奥→手前）に並べる。
    無効ノードの部分木は丸ごと除外する。同じ深度では走査順を保つ。
    """
    parent = root.parent
    base = parent.world_matrix() if parent is not None else np.identity(4, dtype=np.float64)
    if parent is not None and not parent.is_active_in_hierarchy:
        return []

    items: list[DrawItem] = []

    def visit(node: GameObject, parent_world: np.ndarray) -> None:
        if not node.is_enabled or node.is_destroyed:
            return
        world = parent_world @ node.local_matrix()
        if isinstance(node, ModelEntity):
            items.append(DrawItem(node, world, node.draw_color(), float(world[2, 3])))
        for child in node.children:
            visit(child, world)

    visit(root, base)
    items.sort(key=lambda item: item.depth)
    return items


def _pack_mesh(resource: MeshResource) -> Optional[tuple[np.ndarray, np.ndarray]]:
    """MeshResource を GPU 転送用の float32/uint32 連続配列へ変換する。空なら None。"""
    if resource.n_vertices == 0 or len(resource.indices) == 0:
        return None
    vertices = np.ascontiguousarray(resource.positions, dtype=np.float32)
    indices = np.ascontiguousarray(resource.indices, dtype=np.uint32)
    return vertices, indices
