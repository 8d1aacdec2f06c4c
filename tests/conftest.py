"""共通フィクスチャ。

- 乱数シード固定
- 設定（common.settings）の隔離
- GameEngine/UI カメラ試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings as settings_mod
from engine.scene.game_engine import GameEngine


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`PVU_*` を除去して既定値で読み直し、テスト後も既定値へ戻す。"""
    import os

    for key in list(os.environ):
        if key.startswith("PVU_"):
            monkeypatch.delenv(key, raising=False)
    settings_mod.reload_from_env()
    yield
    monkeypatch.undo()
    settings_mod.reload_from_env()


@pytest.fixture()
def engine() -> GameEngine:
    """aspect=1 の UI カメラを持つエンジン。"""
    return GameEngine()


@pytest.fixture()
def wide_engine() -> GameEngine:
    """aspect=2（幅 2 倍）の UI カメラを持つエンジン。"""
    ge = GameEngine()
    ge.resize(200, 100)
    return ge


@pytest.fixture()
def k() -> float:
    """UI 半高さ（較正定数）。"""
    return float(settings_mod.get().UI_WORLD_UNIT_PER_LOGICAL_UNIT)
