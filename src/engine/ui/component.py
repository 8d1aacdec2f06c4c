"""
どこで: `engine.ui` の中核（UI 要素）。
何を: Unity 流の正規化座標・ピボット基準の位置/スケール/回転を、シーンノードのローカル TRS 1 組へ合成する `UIComponent`。
なぜ: 描画側は絶対値の TRS ノードしか持たないため、3 種のピボット基準系を正しい順序で畳み込む必要がある。

座標規約:
- 正規化位置/ピボットは 0..1、`(0, 0)` が左上・Y は下向き（ワールドの Y は上向き）。
- 要素の既定表示サイズはビューポート全体。半高さ `half_h` は較正定数、半幅 `half_w = half_h * aspect`。

合成手順（`compose_ui_transform`、順序固定・入れ替え不可）:
    1) TRS をリセット（位置 0 / 回転なし / スケール 1）
    2) scale = base_scale
    3) 位置: 正規化位置をビューポートへ写し、位置ピボットを base_scale 込みで畳み込む
         ox = (p.x*2hw - hw) + (hw - pp.x*2hw) * bs.x
         oy = (hh - p.y*2hh) + (pp.y*2hh - hh) * bs.y      # Y 反転
         oz = p.z * bs.z
    4) 追加スケール s を掛け、スケールピボットとの差分だけ位置を補正
         base_w = 2hw*bs.x, base_h = 2hh*bs.y
         pos += (-base_w*(s.x-1)*(sp.x-0.5), base_h*(s.y-1)*(sp.y-0.5), 0)
    5) 回転 q = Ry * Rx * Rz（度→ラジアン）、回転ピボット周りになるよう位置を補正
         pivot = ((rp.x-0.5)*base_w*s.x, (0.5-rp.y)*base_h*s.y, 0)
         pos -= q.act(pivot) - pivot

例（aspect=1, 較正定数 k）:
    base_scale=(1,1,1), position=(0.5,0.5,0), scale=(2,2,1), 全ピボット中心, 回転なし
    → 位置 (0,0,0), スケール (2,2,1)

毎回ゼロから再計算する（差分適用しない）ため、同じ引数での再呼び出しは同一の TRS を与える。
入力の検証は行わない（スケール 0 や範囲外ピボットもそのまま幾何的に退化した結果を返す）。
"""

from __future__ import annotations

import itertools
import logging
import threading
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from common.settings import get as get_settings
from engine.core.quaternion import Quaternion
from engine.core.vectors import Vector2, Vector3, Vector4
from engine.scene.game_object import GameObject

from .plane import create_ui_plane

if TYPE_CHECKING:
    from engine.scene.game_engine import GameEngine

logger = logging.getLogger(__name__)

_id_lock = threading.Lock()
_id_counter = itertools.count(1)
_color_rng = np.random.default_rng()


def _next_component_id() -> int:
    with _id_lock:
        return next(_id_counter)


def _random_plane_color() -> Vector4:
    r, g, b = _color_rng.random(3)
    return Vector4(float(r), float(g), float(b), 0.7)


@dataclass(frozen=True)
class UILocalTransform:
    """合成結果（ノードへそのまま書き込むローカル TRS）。"""

    position: Vector3
    scale: Vector3
    orientation: Quaternion


def compose_ui_transform(
    half_height: float,
    aspect: float,
    base_scale: Vector3,
    position: Vector3,
    scale: Vector3,
    rotation: Vector3,
    position_pivot: Vector2,
    scale_pivot: Vector2,
    rotation_pivot: Vector2,
) -> UILocalTransform:
    """7 つの入力とビューポート半サイズから、ノードのローカル TRS を求める（純関数）。

    Parameters
    ----------
    half_height : float
        ビューポート半高さ（ワールド単位、較正定数）。
    aspect : float
        ビューポートの幅/高さ。半幅は `half_height * aspect`。
    base_scale, position, scale, rotation : Vector3
        基準スケール・正規化位置（z はワールド）・追加スケール・各軸回転（度）。
    position_pivot, scale_pivot, rotation_pivot : Vector2
        各操作のピボット（0..1、左上原点）。

    Returns
    -------
    UILocalTransform
        位置・スケール・向き。
    """
    hh = float(half_height)
    hw = hh * float(aspect)
    bs = base_scale

    # 基準スケール（要素中心基準）
    node_scale = Vector3(bs.x, bs.y, bs.z)

    # 正規化位置 → ビューポート上の位置（位置ピボットを畳み込む）
    offset_x = (position.x * (hw * 2.0) - hw) + (hw - position_pivot.x * (hw * 2.0)) * bs.x
    offset_y = (hh - position.y * (hh * 2.0)) + (position_pivot.y * (hh * 2.0) - hh) * bs.y
    offset_z = position.z * bs.z
    node_position = Vector3(offset_x, offset_y, offset_z)

    # base_scale 適用後の実寸
    base_w = hw * bs.x * 2.0
    base_h = hh * bs.y * 2.0

    # 追加スケールと、スケールピボットに対する位置補正
    delta_w = base_w * (scale.x - 1.0)
    delta_h = base_h * (scale.y - 1.0)
    pivot_offset_x = -delta_w * (scale_pivot.x - 0.5)
    pivot_offset_y = delta_h * (scale_pivot.y - 0.5)
    node_scale = node_scale * scale
    node_position = node_position + Vector3(pivot_offset_x, pivot_offset_y, 0.0)

    # 回転ピボット（スケール後の実寸で、ノード中心からのオフセット）
    final_w = base_w * scale.x
    final_h = base_h * scale.y
    pivot_local = Vector3(
        (rotation_pivot.x - 0.5) * final_w,
        (0.5 - rotation_pivot.y) * final_h,
        0.0,
    )
    # Ry * Rx * Rz（Transform.set_local_rotation の Rz * Rx * Ry とは別の規約）
    q = Quaternion.about_y(rotation.y) * Quaternion.about_x(rotation.x) * Quaternion.about_z(rotation.z)
    delta = q.act(pivot_local) - pivot_local
    node_position = node_position - delta

    return UILocalTransform(node_position, node_scale, q)


class UIComponent:
    """ピボット基準の UI 要素。要素ノードと、任意のコントローラノードを所有する。

    Parameters
    ----------
    ge : GameEngine
        ホスト（非所有・弱参照）。UI カメラとルートノードを提供する。
    object_name : str | None
        要素ノード名。None は ``"UIComponent"``。
    parent : UIComponent | None
        親要素（非所有）。コントローラ（無ければ要素ノード）をその要素ノードの子にする。
    controller_required : bool
        True でコントローラノードを作り、要素ノードをその子にする。親が無ければルートの子。
    create_plane : bool | None
        True でデバッグ用 UI プレーンを要素ノードにする。None は `settings.DEBUG_UI_PLANES`。
    plane_color : Vector4 | None
        プレーン色。None はランダム RGB・alpha 0.7。

    Raises
    ------
    MeshResourceError
        プレーン生成に失敗した場合（シーングラフ/エンジンには何も登録されない）。
    """

    def __init__(
        self,
        ge: GameEngine,
        object_name: Optional[str] = None,
        parent: Optional[UIComponent] = None,
        *,
        controller_required: bool = True,
        create_plane: Optional[bool] = None,
        plane_color: Optional[Vector4] = None,
    ) -> None:
        settings = get_settings()
        self._ge_ref = weakref.ref(ge)
        name = object_name or "UIComponent"

        self.base_scale = Vector3.one()
        self.position = Vector3(0.5, 0.5, 0.0)
        self.scale = Vector3.one()
        self.rotation = Vector3.zero()  # degrees
        self.position_pivot = Vector2.center()
        self.scale_pivot = Vector2.center()
        self.rotation_pivot = Vector2.center()

        # フレーム数（ゲーム FPS 基準）と、その上限（到達で 0 に戻す）
        self.frames = 0
        self.max_frames = 0
        # 同一レイヤ内の並び順（保持のみ、描画順は深度で決まる）
        self.sort_order = 0

        # Unity 互換: orthoSize = ビューポート高さ（ワールド単位）
        self.scale_screen_width = 0.0
        self.scale_screen_height = 0.0
        self._compute_viewport_size()

        if create_plane is None:
            create_plane = settings.DEBUG_UI_PLANES
        if create_plane:
            color = plane_color if plane_color is not None else _random_plane_color()
            self.this_object: GameObject = create_ui_plane(name, ge.ui_camera.aspect, color)
        else:
            self.this_object = GameObject(name)
            self.this_object.layer = settings.UI_LAYER

        self.controller: Optional[GameObject] = None
        viewport = Vector2(self.scale_screen_width, self.scale_screen_height)
        if controller_required:
            # ピボット制御用のコンテナ。親が無ければルート直下
            controller = GameObject("UIComponentController")
            self.controller = controller
            parent_transform = (
                parent.this_object.transform
                if parent is not None
                else ge.main_game_object.transform
            )
            controller.transform.set_parent(parent_transform)
            self.this_object.transform.set_parent(controller.transform)
            controller.transform.local_position = Vector3.zero()
            controller.local_size = viewport
        elif parent is not None:
            self.this_object.transform.set_parent(parent.this_object.transform)

        # 既定ではビューポート全体の大きさ
        self.this_object.local_size = viewport

        self.id = _next_component_id()
        self._destroyed = False
        ge.register(self)
        logger.debug(
            "UIComponent created: id=%d name=%s viewport=%.4fx%.4f controller=%s",
            self.id,
            name,
            self.scale_screen_width,
            self.scale_screen_height,
            self.controller is not None,
        )

    # ── 参照 ──────────────────────────
    @property
    def ge(self) -> GameEngine:
        ge = self._ge_ref()
        if ge is None:
            raise ReferenceError("GameEngine has been released")
        return ge

    @property
    def is_visible(self) -> bool:
        return self.this_object.is_enabled

    @is_visible.setter
    def is_visible(self, value: bool) -> None:
        self.this_object.is_enabled = bool(value)

    @property
    def name(self) -> str:
        return (self.controller or self.this_object).name

    @name.setter
    def name(self, value: str) -> None:
        (self.controller or self.this_object).name = value

    # ── ビューポート ──────────────────
    def _compute_viewport_size(self) -> None:
        camera = self.ge.ui_camera
        self.scale_screen_height = float(camera.ortho_size)
        self.scale_screen_width = self.scale_screen_height * float(camera.aspect)

    def refresh_viewport_size(self) -> None:
        """カメラの orthoSize/aspect 変更後にビューポートサイズと論理サイズを更新し、TRS を組み直す。"""
        self._compute_viewport_size()
        viewport = Vector2(self.scale_screen_width, self.scale_screen_height)
        if self.controller is not None:
            self.controller.local_size = viewport
        self.this_object.local_size = viewport
        # 新しい aspect で組み直す
        self._apply()

    # ── フレーム ──────────────────────
    def update(self) -> None:
        ge = self.ge
        self.frames = ge.frame_count % ge.target_frame_rate if ge.target_frame_rate > 0 else 0
        if self.frames >= self.max_frames:
            self.frames = 0

    # ── 変換 ──────────────────────────
    @staticmethod
    def _reset_node(node: GameObject) -> None:
        node.transform.local_position = Vector3.zero()
        node.transform.set_local_rotation(0.0, 0.0, 0.0)
        node.transform.local_scale = Vector3.one()

    def reset_transform(self) -> None:
        """Unity 風のローカルリセット（コントローラがあればコントローラ側）。"""
        self._reset_node(self.controller or self.this_object)

    def transform_all(
        self,
        base_scale: Vector3,
        position: Vector3,
        scale: Vector3,
        rotation: Vector3,
        position_pivot: Vector2,
        scale_pivot: Vector2,
        rotation_pivot: Vector2,
    ) -> None:
        """7 つの入力を保存し、要素ノードの TRS をゼロから組み直す。"""
        self.base_scale = base_scale
        self.position = position
        self.scale = scale
        self.rotation = rotation
        self.position_pivot = position_pivot
        self.scale_pivot = scale_pivot
        self.rotation_pivot = rotation_pivot

        node = self.this_object
        self._reset_node(node)

        result = compose_ui_transform(
            get_settings().UI_WORLD_UNIT_PER_LOGICAL_UNIT,
            self.ge.ui_camera.aspect,
            base_scale,
            position,
            scale,
            rotation,
            position_pivot,
            scale_pivot,
            rotation_pivot,
        )
        node.scale = result.scale
        node.position = result.position
        node.transform.local_rotation = result.orientation

    def _apply(self) -> None:
        self.transform_all(
            self.base_scale,
            self.position,
            self.scale,
            self.rotation,
            self.position_pivot,
            self.scale_pivot,
            self.rotation_pivot,
        )

    def transform_position(self, position: Vector3, pivot: Optional[Vector2] = None) -> None:
        self.position = position
        self.position_pivot = pivot if pivot is not None else self.position_pivot
        self._apply()

    def transform_scale(self, scale: Vector3, pivot: Optional[Vector2] = None) -> None:
        self.scale = scale
        self.scale_pivot = pivot if pivot is not None else self.scale_pivot
        self._apply()

    def transform_rotation(self, rotation: Vector3, pivot: Optional[Vector2] = None) -> None:
        self.rotation = rotation
        self.rotation_pivot = pivot if pivot is not None else self.rotation_pivot
        self._apply()

    # ── 破棄 ──────────────────────────
    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """コントローラ → 要素ノードの順に切り離して破棄し、エンジンから登録解除する。2 回目以降は no-op。"""
        if self._destroyed:
            return
        self._destroyed = True

        if self.controller is not None:
            controller = self.controller
            controller.transform.set_parent(None)
            controller.destroy()
            self.controller = None

        # コントローラ破棄で既に破棄済みの場合も destroy は冪等
        self.this_object.transform.set_parent(None)
        self.this_object.destroy()

        ge = self._ge_ref()
        if ge is not None:
            ge.unregister(self)
        logger.debug("UIComponent destroyed: id=%d", self.id)


__all__ = ["UIComponent", "UILocalTransform", "compose_ui_transform"]
