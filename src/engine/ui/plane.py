"""
どこで: `engine.ui` のデバッグ用 UI プレーン生成。
何を: カメラのビューポートに合わせた塗り矩形（2 三角形）と、一定太さの白枠（4 本の板ポリ）を持つノードを作る。
なぜ: UI 要素の配置/ピボット挙動を目視確認するための可視化。ピボット計算には関与しない。

寸法:
- 半高さ `h` は較正定数（`settings.UI_WORLD_UNIT_PER_LOGICAL_UNIT`）、半幅 `w = h * aspect`。
- 枠はプレーン外周から内側へ `thickness`、`z = border_z` に置く（塗りより手前）。
"""

from __future__ import annotations

import numpy as np

from common.settings import get as get_settings
from engine.core.vectors import Vector2, Vector4
from engine.scene.game_object import GameObject
from engine.scene.mesh import MeshDescriptor, MeshResource, ModelEntity, UnlitMaterial

_QUAD_INDICES = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)


def _fill_descriptor(width: float, height: float) -> MeshDescriptor:
    positions = np.array(
        [
            [-width, -height, 0.0],
            [width, -height, 0.0],
            [width, height, 0.0],
            [-width, height, 0.0],
        ],
        dtype=np.float32,
    )
    return MeshDescriptor(positions, _QUAD_INDICES.copy(), name="fill")


def border_quads(
    width: float, height: float, thickness: float, z: float
) -> list[np.ndarray]:
    """枠の 4 本（上/下/左/右）を `(4, 3)` の頂点配列で返す。各 quad は (0,1,2)(0,2,3) で張る。"""
    outer_l, outer_r = -width, width
    outer_b, outer_t = -height, height
    t = thickness
    inner_l, inner_r = outer_l + t, outer_r - t
    inner_b, inner_t = outer_b + t, outer_t - t

    def quad(a, b, c, d) -> np.ndarray:
        return np.array([a, b, c, d], dtype=np.float32)

    return [
        # Top
        quad((outer_l, inner_t, z), (outer_r, inner_t, z), (outer_r, outer_t, z), (outer_l, outer_t, z)),
        # Bottom
        quad((outer_l, outer_b, z), (outer_r, outer_b, z), (outer_r, inner_b, z), (outer_l, inner_b, z)),
        # Left
        quad((outer_l, inner_b, z), (inner_l, inner_b, z), (inner_l, inner_t, z), (outer_l, inner_t, z)),
        # Right
        quad((inner_r, inner_b, z), (outer_r, inner_b, z), (outer_r, inner_t, z), (inner_r, inner_t, z)),
    ]


def create_ui_plane(
    name: str,
    aspect: float,
    bg_color: Vector4 | None = None,
    *,
    half_height: float | None = None,
    border_thickness: float | None = None,
    border_z: float | None = None,
) -> GameObject:
    """カメラ aspect に合わせたデバッグ用 UI プレーンを生成する。

    Parameters
    ----------
    name : str
        ルートノード名。子は `<name>_Model` / `<name>_Border`。
    aspect : float
        ビューポートの幅/高さ。
    bg_color : Vector4 | None
        塗り色 RGBA。RGB はマテリアル（alpha=1）、`w` は不透明度として適用。None は白・不透明。
    half_height, border_thickness, border_z : float | None
        None の場合は `common.settings` の値。

    Raises
    ------
    MeshResourceError
        寸法が非有限などでメッシュを生成できない場合（ノードは作られない）。
    """
    settings = get_settings()
    height = float(settings.UI_WORLD_UNIT_PER_LOGICAL_UNIT if half_height is None else half_height)
    width = height * float(aspect)
    thickness = float(settings.UI_BORDER_THICKNESS if border_thickness is None else border_thickness)
    z = float(settings.UI_BORDER_Z if border_z is None else border_z)
    color = bg_color if bg_color is not None else Vector4.one()

    # メッシュを先に生成し、失敗時に半端なノードを残さない
    fill_mesh = MeshResource.generate([_fill_descriptor(width, height)])
    border_mesh = MeshResource.generate(
        [
            MeshDescriptor(q, _QUAD_INDICES.copy(), name=f"border{i}")
            for i, q in enumerate(border_quads(width, height, thickness, z))
        ]
    )

    go = GameObject(name)
    model = ModelEntity(
        fill_mesh,
        [UnlitMaterial((float(color.x), float(color.y), float(color.z), 1.0))],
        name=f"{name}_Model",
        opacity=float(color.w),
    )
    go.add_child(model)

    border = ModelEntity(
        border_mesh, [UnlitMaterial((1.0, 1.0, 1.0, 1.0))], name=f"{name}_Border"
    )
    go.add_child(border)

    # RectTransform 相当の既定サイズ
    go.local_size = Vector2(width * 2.0, height * 2.0)
    return go


__all__ = ["create_ui_plane", "border_quads"]
