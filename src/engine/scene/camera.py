"""
どこで: `engine.scene` のカメラ。
何を: Unity 互換のカメラ（orthographic/fieldOfView/orthoSize/aspect）と透視投影行列の再計算、
      `viewport_to_world_point` による正規化ビューポート → ワールド座標変換。
なぜ: UI 要素のビューポートサイズ算出と、描画層の投影行列を同じパラメータから得るため。

注意（近似）:
- 描画側に真の正射影モードがない前提で、orthographic は「極小 FOV の透視投影」で近似する。
  厳密な正射影を要する非 UI 用途には使わないこと。
- 透視時の `viewport_to_world_point` は近平面を単位正方形とみなす簡略化であり、
  FOV/距離を考慮した逆投影ではない（UI 配置用途の意図的な単純化）。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from common.settings import get as get_settings
from engine.core.vectors import Vector3

from .game_object import GameObject

logger = logging.getLogger(__name__)


def perspective_matrix(fov_y_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL 形式の透視投影行列（列ベクトル規約、クリップ z は -1..1）。"""
    f = 1.0 / math.tan(math.radians(fov_y_degrees) * 0.5)
    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = f / max(1e-6, aspect)
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2.0 * far * near) / (near - far)
    proj[3, 2] = -1.0
    return proj


class Camera(GameObject):
    """UI/ワールド兼用のカメラノード。各セッタは即座に投影を再計算する。"""

    def __init__(self, name: str = "Camera") -> None:
        super().__init__(name)
        settings = get_settings()
        self._orthographic = False
        self._field_of_view = 60.0
        self._ortho_size = 1.0
        self._aspect = 1.0
        self.near = float(settings.CAMERA_NEAR)
        self.far = float(settings.CAMERA_FAR)
        self.effective_field_of_view = self._field_of_view
        self.projection_matrix = np.identity(4, dtype=np.float32)
        self.projection_updates = 0
        self._update_projection()

    # ── Unity 互換プロパティ ──────────
    @property
    def orthographic(self) -> bool:
        return self._orthographic

    @orthographic.setter
    def orthographic(self, value: bool) -> None:
        self._orthographic = bool(value)
        self._update_projection()

    @property
    def field_of_view(self) -> float:
        """透視時の垂直 FOV（度）。"""
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value: float) -> None:
        self._field_of_view = float(value)
        self._update_projection()

    @property
    def ortho_size(self) -> float:
        return self._ortho_size

    @ortho_size.setter
    def ortho_size(self, value: float) -> None:
        self._ortho_size = float(value)
        self._update_projection()

    @property
    def aspect(self) -> float:
        """ビューポートの幅/高さ。"""
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self._aspect = float(value)
        self._update_projection()

    def set_viewport_size(self, width: float, height: float) -> None:
        """ピクセルサイズから aspect を更新する。高さ 0 は無視（直前の aspect を保持）。"""
        if height <= 0:
            logger.warning("viewport height must be positive: %sx%s (ignored)", width, height)
            return
        self.aspect = float(width) / float(height)

    # ── 投影 ──────────────────────────
    def _update_projection(self) -> None:
        if self._orthographic:
            # 極小 FOV で正射影を近似する
            fov = float(get_settings().ORTHO_APPROX_FOV)
        else:
            fov = self._field_of_view
        self.effective_field_of_view = fov
        self.projection_matrix = perspective_matrix(fov, self._aspect, self.near, self.far)
        self.projection_updates += 1
        logger.debug(
            "camera %s projection: ortho=%s fov=%.3f aspect=%.4f",
            self.name,
            self._orthographic,
            fov,
            self._aspect,
        )

    def view_matrix(self) -> np.ndarray:
        return np.linalg.inv(self.world_matrix()).astype(np.float32)

    def distance_to_fit(self, half_height: float) -> float:
        """現在の実効 FOV で、視軸から上方向に `half_height` が見える距離。"""
        return float(half_height) / math.tan(math.radians(self.effective_field_of_view) * 0.5)

    # ── Unity 互換 ────────────────────
    def viewport_to_world_point(self, x: float, y: float, z: float) -> Vector3:
        """正規化ビューポート座標 (x, y: 0..1, z: 深度) をワールド座標へ写す。範囲外は線形外挿。"""
        if self._orthographic:
            return Vector3((x - 0.5) * self._ortho_size, (y - 0.5) * self._ortho_size, -z)
        return Vector3((x - 0.5) * 2.0, (y - 0.5) * 2.0, -z)


__all__ = ["Camera", "perspective_matrix"]
