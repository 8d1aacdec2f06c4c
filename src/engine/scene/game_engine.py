"""
どこで: `engine.scene` のホスト。
何を: ルートノード・UI カメラ・フレームカウンタと、登録された UI 要素への更新/リサイズ通知をまとめる `GameEngine`。
なぜ: UI 要素が参照する「カメラとルート」を 1 つの非所有参照先に集約し、FrameClock から一様に駆動するため。
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .camera import Camera
from .game_object import GameObject

logger = logging.getLogger(__name__)


class EngineComponent(Protocol):
    """`GameEngine` に登録できる要素（UIComponent など）。"""

    def update(self) -> None: ...

    def refresh_viewport_size(self) -> None: ...


class GameEngine:
    """シーンルートと UI カメラを保持するホスト。`tick(dt)` で 1 フレーム進める。"""

    def __init__(
        self,
        main_game_object: Optional[GameObject] = None,
        *,
        ui_camera: Optional[Camera] = None,
        target_frame_rate: int = 60,
    ) -> None:
        self.main_game_object = main_game_object or GameObject("GameMain")
        self.ui_camera = ui_camera or Camera("UICamera")
        self.target_frame_rate = int(target_frame_rate)
        self.frame_count = 0
        self._components: list[EngineComponent] = []

    @property
    def components(self) -> tuple[EngineComponent, ...]:
        return tuple(self._components)

    def register(self, component: EngineComponent) -> None:
        if component not in self._components:
            self._components.append(component)

    def unregister(self, component: EngineComponent) -> None:
        if component in self._components:
            self._components.remove(component)

    # ── Tickable ─────────────────────
    def tick(self, dt: float) -> None:
        self.frame_count += 1
        for component in list(self._components):
            component.update()

    def resize(self, width: int, height: int) -> None:
        """ウィンドウ（px）サイズ変更を UI カメラと各要素へ伝える。"""
        self.ui_camera.set_viewport_size(width, height)
        for component in list(self._components):
            component.refresh_viewport_size()
        logger.debug("viewport resized: %dx%d aspect=%.4f", width, height, self.ui_camera.aspect)


__all__ = ["GameEngine", "EngineComponent"]
