"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出し、dt 計測と経過フレーム数を管理する FrameClock。
なぜ: GameEngine → Renderer の更新順を 1 箇所で固定し、UI 更新と描画のずれを防ぐため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self.frames: int = 0

    # pyglet.clock.schedule_interval から dt 付きで呼ばれる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.frames += 1


__all__ = ["FrameClock"]
