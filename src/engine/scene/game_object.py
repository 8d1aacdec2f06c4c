"""
どこで: `engine.scene` のシーンノード。
何を: 親子階層・ローカル TRS（位置/スケール/向き）・有効フラグ・論理サイズ・破棄を持つ `GameObject`。
なぜ: UI 合成アルゴリズムが要求する最小のシーングラフ操作（付け替え/TRS 設定/有効化/破棄）を提供するため。

所有関係:
- 親 → 子は所有（`_children` が強参照）。子 → 親は弱参照（非所有の逆参照）。
- `destroy()` は子を先に（後順で）破棄してから自身を親から外す。2 回目以降は no-op。

行列規約:
- 列ベクトル（`M @ [x, y, z, 1]`）。ローカル行列は `T @ R @ S`。
"""

from __future__ import annotations

import logging
import weakref
from typing import Iterator, Optional

import numpy as np

from engine.core.quaternion import Quaternion
from engine.core.vectors import Vector2, Vector3

from .transform import Transform

logger = logging.getLogger(__name__)


class GameObject:
    """名前付きシーンノード。"""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.position: Vector3 = Vector3.zero()
        self.scale: Vector3 = Vector3.one()
        self.orientation: Quaternion = Quaternion.identity()
        self.is_enabled: bool = True
        self.layer: int = 0
        # RectTransform 相当の論理サイズ（ワールド単位）
        self.local_size: Vector2 = Vector2.zero()
        self._parent_ref: Optional[weakref.ReferenceType[GameObject]] = None
        self._children: list[GameObject] = []
        self._destroyed = False
        self.transform = Transform(self)

    # ── 階層 ──────────────────────────
    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> tuple[GameObject, ...]:
        return tuple(self._children)

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def is_ancestor_of(self, other: GameObject) -> bool:
        node = other.parent
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def set_parent(self, parent: Optional[GameObject]) -> None:
        """親を付け替える。ローカル TRS は変更しない。

        Raises
        ------
        RuntimeError
            破棄済みノードを付け替えようとした場合（`None` への付け替えは許容）。
        ValueError
            自身または子孫を親にしようとした場合（循環）。
        """
        if parent is not None:
            if self._destroyed or parent._destroyed:
                raise RuntimeError(f"destroyed GameObject cannot be re-parented: {self.name!r}")
            if parent is self or self.is_ancestor_of(parent):
                raise ValueError(f"cyclic parenting: {self.name!r} -> {parent.name!r}")
        current = self.parent
        if current is parent:
            return
        if current is not None:
            current._children.remove(self)
        if parent is None:
            self._parent_ref = None
        else:
            parent._children.append(self)
            self._parent_ref = weakref.ref(parent)

    def add_child(self, child: GameObject) -> None:
        child.set_parent(self)

    def remove_child(self, child: GameObject) -> None:
        if child.parent is self:
            child.set_parent(None)

    def iter_tree(self) -> Iterator[GameObject]:
        """自身を含む前順走査。"""
        yield self
        for child in list(self._children):
            yield from child.iter_tree()

    @property
    def is_active_in_hierarchy(self) -> bool:
        node: Optional[GameObject] = self
        while node is not None:
            if not node.is_enabled:
                return False
            node = node.parent
        return True

    # ── 行列 ──────────────────────────
    def local_matrix(self) -> np.ndarray:
        m = np.identity(4, dtype=np.float64)
        m[:3, :3] = self.orientation.to_matrix() * np.array(
            [self.scale.x, self.scale.y, self.scale.z], dtype=np.float64
        )
        m[:3, 3] = (self.position.x, self.position.y, self.position.z)
        return m

    def world_matrix(self) -> np.ndarray:
        m = self.local_matrix()
        node = self.parent
        while node is not None:
            m = node.local_matrix() @ m
            node = node.parent
        return m

    def local_to_world(self, point: Vector3) -> Vector3:
        """ノードローカルの点をワールド座標へ変換する。"""
        p = self.world_matrix() @ np.array([point.x, point.y, point.z, 1.0], dtype=np.float64)
        return Vector3(float(p[0]), float(p[1]), float(p[2]))

    # ── 破棄 ──────────────────────────
    def destroy(self) -> None:
        if self._destroyed:
            return
        for child in list(self._children):
            child.destroy()
        self.set_parent(None)
        self._children.clear()
        self._destroyed = True
        logger.debug("GameObject destroyed: %s", self.name)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        state = "destroyed" if self._destroyed else f"children={len(self._children)}"
        return f"GameObject({self.name!r}, {state})"


__all__ = ["GameObject"]
