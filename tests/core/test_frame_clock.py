from __future__ import annotations

from engine.core.frame_clock import FrameClock


class _Recorder:
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def tick(self, dt: float) -> None:
        self.log.append((self.name, dt))


def test_ticks_in_registration_order_with_given_dt() -> None:
    log: list = []
    clock = FrameClock([_Recorder("engine", log), _Recorder("renderer", log)])
    clock.tick(0.5)
    assert log == [("engine", 0.5), ("renderer", 0.5)]
    assert clock.frames == 1


def test_measures_dt_when_not_given() -> None:
    log: list = []
    clock = FrameClock([_Recorder("a", log)])
    clock.tick()
    clock.tick()
    assert len(log) == 2
    assert all(dt >= 0.0 for _, dt in log)
    assert clock.frames == 2
