"""
どこで: `engine.core` の値型。
何を: Unity 互換の `Vector2/Vector3/Vector4`（成分ごとの四則演算のみを持つ不変データクラス）。
なぜ: 位置（正規化 0..1）・スケール・オイラー角（度）・ピボットを同じ表現で受け渡すため。

補足:
- `*` はスカラー倍、同型ベクトルとの積は成分ごとの積（SIMD の `*=` と同じ意味）。
- 値は Python float で保持する。numpy へは `to_array()` で float32 に変換する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

Number = Union[float, int]


@dataclass(frozen=True)
class Vector2:
    """2 成分ベクトル（ピボット・論理サイズなど）。"""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, scalar: Number) -> Vector2:
        return self * scalar

    def __truediv__(self, scalar: Number) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        """タプル展開用: `x, y = v`"""
        return iter((self.x, self.y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float32)

    @classmethod
    def from_array(cls, arr: Sequence[Number] | np.ndarray) -> Vector2:
        return cls(float(arr[0]), float(arr[1]))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def center(cls) -> Vector2:
        """正規化空間の中心（既定ピボット）。"""
        return cls(0.5, 0.5)


@dataclass(frozen=True)
class Vector3:
    """3 成分ベクトル（位置・スケール・オイラー角[度]）。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, Number]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: Number) -> Vector3:
        return self * scalar

    def __truediv__(self, scalar: Number) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    @classmethod
    def from_array(cls, arr: Sequence[Number] | np.ndarray) -> Vector3:
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Vector4:
    """4 成分ベクトル（主に RGBA 色）。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Union[Vector4, Number]) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(
                self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w
            )
        return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, scalar: Number) -> Vector4:
        return self * scalar

    def __truediv__(self, scalar: Number) -> Vector4:
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float32)

    @classmethod
    def from_array(cls, arr: Sequence[Number] | np.ndarray) -> Vector4:
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    @classmethod
    def zero(cls) -> Vector4:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector4:
        return cls(1.0, 1.0, 1.0, 1.0)


__all__ = ["Vector2", "Vector3", "Vector4"]
