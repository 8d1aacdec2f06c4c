"""
どこで: `engine.core` の回転表現。
何を: 単位クォータニオン（軸角生成・ハミルトン積・ベクトル回転・回転行列化）。
なぜ: シーンノードの向きを保持し、ピボット補正で「回転後の点」を求めるため。

規約:
- 成分は `(x, y, z, w)`（虚部 xyz, 実部 w）。
- `a * b` は「先に b、次に a」を適用する合成（右手系、行列積と同じ順序）。
- `q.act(v)` は `q v q*` によるベクトル回転。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .vectors import Vector3


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vector3) -> Quaternion:
        """軸 `axis` 回りに `angle`（ラジアン）回転するクォータニオン。

        軸は内部で正規化する。長さ 0 の軸は恒等回転。
        """
        length = math.sqrt(axis.dot(axis))
        if length == 0.0:
            return cls.identity()
        half = angle * 0.5
        s = math.sin(half) / length
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def about_x(cls, degrees: float) -> Quaternion:
        return cls.from_axis_angle(math.radians(degrees), Vector3(1.0, 0.0, 0.0))

    @classmethod
    def about_y(cls, degrees: float) -> Quaternion:
        return cls.from_axis_angle(math.radians(degrees), Vector3(0.0, 1.0, 0.0))

    @classmethod
    def about_z(cls, degrees: float) -> Quaternion:
        return cls.from_axis_angle(math.radians(degrees), Vector3(0.0, 0.0, 1.0))

    # ── 演算 ─────────────────────────
    def __mul__(self, other: Quaternion) -> Quaternion:
        ax, ay, az, aw = self.x, self.y, self.z, self.w
        bx, by, bz, bw = other.x, other.y, other.z, other.w
        return Quaternion(
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        )

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalized(self) -> Quaternion:
        n = self.norm()
        if n < 1e-12:
            return Quaternion.identity()
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def act(self, v: Vector3) -> Vector3:
        """ベクトル `v` を回転する（単位クォータニオン前提）。"""
        u = Vector3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)

    def to_matrix(self) -> np.ndarray:
        """3x3 回転行列（列ベクトル規約、`R @ v`）。"""
        x, y, z, w = self.x, self.y, self.z, self.w
        return np.array(
            [
                [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)],
                [2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)],
                [2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)],
            ],
            dtype=np.float64,
        )


__all__ = ["Quaternion"]
