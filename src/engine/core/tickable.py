"""
どこで: `engine.core` のフレーム駆動インターフェース。
何を: 1 フレーム更新 `tick(dt)` を持つ `Tickable` Protocol。
なぜ: GameEngine（フレームカウンタ/UI 更新）と Renderer を同じ FrameClock で回すため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん進める。"""


__all__ = ["Tickable"]
