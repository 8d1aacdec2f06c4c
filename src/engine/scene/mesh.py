"""
どこで: `engine.scene` のメッシュ/マテリアル。
何を: 三角形メッシュ記述子 `MeshDescriptor`、検証済みの `MeshResource`、単色 `UnlitMaterial`、
      それらを保持する描画ノード `ModelEntity`。
なぜ: デバッグ用 UI プレーンを GPU 非依存の純データとして組み立て、描画層へ受け渡すため。

データモデル（不変条件）:
- `positions: float32 ndarray (N, 3)`、全要素が有限。
- `indices: uint32 ndarray (3K,)`、すべて `< N`。
- 複数記述子の結合時は後続の indices に先行頂点数を加算する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from common.types import RGBA
from engine.core.vectors import Vector3

from .game_object import GameObject


class MeshResourceError(ValueError):
    """メッシュ生成の失敗（不正な記述子）。"""


@dataclass
class MeshDescriptor:
    """三角形リストの記述子（未検証の入力）。"""

    positions: np.ndarray | Sequence[Sequence[float]]
    indices: np.ndarray | Sequence[int]
    name: str = ""


def _normalize_descriptor(desc: MeshDescriptor) -> tuple[np.ndarray, np.ndarray]:
    try:
        pos = np.asarray(desc.positions, dtype=np.float32)
        idx = np.asarray(desc.indices, dtype=np.int64)
    except (TypeError, ValueError) as e:
        raise MeshResourceError(f"mesh '{desc.name}': 数値配列へ変換できません") from e
    if pos.ndim != 2 or pos.shape[1] != 3:
        raise MeshResourceError(
            f"mesh '{desc.name}': positions は形状 (N, 3) である必要があります: {pos.shape}"
        )
    if not np.all(np.isfinite(pos)):
        raise MeshResourceError(f"mesh '{desc.name}': positions に非有限値が含まれます")
    if idx.ndim != 1 or idx.size % 3 != 0:
        raise MeshResourceError(
            f"mesh '{desc.name}': indices は 3 の倍数長の 1 次元配列である必要があります"
        )
    if idx.size and (idx.min() < 0 or idx.max() >= pos.shape[0]):
        raise MeshResourceError(f"mesh '{desc.name}': indices が頂点範囲外を参照しています")
    return np.ascontiguousarray(pos), idx.astype(np.uint32)


class MeshResource:
    """検証済みの三角形メッシュ（読み取り専用配列）。"""

    __slots__ = ("positions", "indices")

    def __init__(self, positions: np.ndarray, indices: np.ndarray) -> None:
        positions.setflags(write=False)
        indices.setflags(write=False)
        self.positions = positions
        self.indices = indices

    @classmethod
    def generate(cls, descriptors: Sequence[MeshDescriptor]) -> MeshResource:
        """記述子群を検証・結合してメッシュを生成する。

        Raises
        ------
        MeshResourceError
            記述子が空、または形状/値が不正な場合。
        """
        if not descriptors:
            raise MeshResourceError("mesh descriptors が空です")
        all_pos: list[np.ndarray] = []
        all_idx: list[np.ndarray] = []
        base = 0
        for desc in descriptors:
            pos, idx = _normalize_descriptor(desc)
            all_pos.append(pos)
            all_idx.append(idx + np.uint32(base))
            base += pos.shape[0]
        positions = np.concatenate(all_pos, axis=0).astype(np.float32, copy=False)
        indices = np.concatenate(all_idx).astype(np.uint32, copy=False)
        return cls(positions, indices)

    @property
    def n_vertices(self) -> int:
        return int(self.positions.shape[0])

    @property
    def n_triangles(self) -> int:
        return int(self.indices.shape[0] // 3)

    def bounds(self) -> tuple[Vector3, Vector3]:
        """軸並行境界ボックス（min, max）。"""
        if self.n_vertices == 0:
            return Vector3.zero(), Vector3.zero()
        return (
            Vector3.from_array(self.positions.min(axis=0)),
            Vector3.from_array(self.positions.max(axis=0)),
        )


@dataclass(frozen=True)
class UnlitMaterial:
    """ライティングなしの単色マテリアル（RGBA 0–1）。"""

    color: RGBA = (1.0, 1.0, 1.0, 1.0)


class ModelEntity(GameObject):
    """メッシュとマテリアルを持つ描画ノード。"""

    def __init__(
        self,
        mesh: MeshResource,
        materials: Sequence[UnlitMaterial] = (),
        *,
        name: str = "",
        opacity: float = 1.0,
    ) -> None:
        super().__init__(name)
        self.mesh = mesh
        self.materials: list[UnlitMaterial] = list(materials) or [UnlitMaterial()]
        self.opacity = float(opacity)

    @property
    def material(self) -> UnlitMaterial:
        return self.materials[0]

    def draw_color(self) -> RGBA:
        """マテリアル色に不透明度を掛けた描画色。"""
        r, g, b, a = self.material.color
        return (r, g, b, a * self.opacity)


__all__ = [
    "MeshDescriptor",
    "MeshResource",
    "MeshResourceError",
    "UnlitMaterial",
    "ModelEntity",
]
