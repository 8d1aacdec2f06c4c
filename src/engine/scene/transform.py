"""
どこで: `engine.scene` の Transform アダプタ。
何を: シーンノードのローカル位置/スケール/回転を Unity 風 API（度指定の回転・ppu 換算など）で読み書きする。
なぜ: 呼び出し側の「度・Vector3」と、ノード側の「クォータニオン」表現の変換を一箇所に閉じ込めるため。

注意:
- 回転合成は `Rz * Rx * Ry`。UI 合成（`engine.ui.component`）の `Ry * Rx * Rz` とは別物であり、統一しない。
- ノードへの参照は弱参照（アダプタはノードを所有しない）。
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Optional

from engine.core.quaternion import Quaternion
from engine.core.vectors import Vector3

if TYPE_CHECKING:
    from .game_object import GameObject


class Transform:
    """`GameObject` のローカル変換への薄いアクセサ。"""

    __slots__ = ("_owner_ref",)

    def __init__(self, owner: GameObject) -> None:
        self._owner_ref = weakref.ref(owner)

    @property
    def owner(self) -> GameObject:
        owner = self._owner_ref()
        if owner is None:
            raise ReferenceError("Transform owner has been released")
        return owner

    def set_parent(self, parent: Optional[Transform]) -> None:
        """親を付け替える（ローカル値は保持するため、見た目の位置は新しい親基準に変わる）。"""
        self.owner.set_parent(parent.owner if parent is not None else None)

    # ── ローカル値 ────────────────────
    @property
    def local_position(self) -> Vector3:
        return self.owner.position

    @local_position.setter
    def local_position(self, value: Vector3) -> None:
        self.owner.position = value

    @property
    def local_scale(self) -> Vector3:
        return self.owner.scale

    @local_scale.setter
    def local_scale(self, value: Vector3) -> None:
        self.owner.scale = value

    @property
    def local_rotation(self) -> Quaternion:
        return self.owner.orientation

    @local_rotation.setter
    def local_rotation(self, value: Quaternion) -> None:
        self.owner.orientation = value

    # ── 便利セッタ ────────────────────
    def set_local_rotation(self, x: float, y: float, z: float) -> None:
        """各軸の角度（度）から向きを設定する。合成順は `Rz * Rx * Ry`。"""
        qx = Quaternion.about_x(x)
        qy = Quaternion.about_y(y)
        qz = Quaternion.about_z(z)
        self.owner.orientation = qz * qx * qy

    def set_rotation(self, x: float, y: float, z: float) -> None:
        """`set_local_rotation` のエイリアス。"""
        self.set_local_rotation(x, y, z)

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.local_scale = Vector3(x, y, z)

    def set_position(self, x: float, y: float, z: float, ppu: float) -> None:
        """ピクセル値を `ppu`（pixels per unit）で割り、ワールド単位のローカル位置として設定する。"""
        self.local_position = Vector3(x / ppu, y / ppu, z / ppu)


__all__ = ["Transform"]
