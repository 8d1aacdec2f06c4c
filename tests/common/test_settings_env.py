from __future__ import annotations

import pytest

from common import settings as settings_mod
from common.env import env_bool, env_float, env_int


def test_defaults() -> None:
    s = settings_mod.get()
    assert s.UI_WORLD_UNIT_PER_LOGICAL_UNIT == pytest.approx(0.866)
    assert s.UI_LAYER == 5
    assert s.UI_BORDER_THICKNESS == pytest.approx(0.02)
    assert s.UI_BORDER_Z == pytest.approx(0.001)
    assert s.DEBUG_UI_PLANES is False
    assert s.ORTHO_APPROX_FOV == pytest.approx(1.0)
    assert s.CAMERA_NEAR < s.CAMERA_FAR


def test_reload_reads_pvu_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PVU_UI_WORLD_UNIT_PER_LOGICAL_UNIT", "1.25")
    monkeypatch.setenv("PVU_UI_LAYER", "7")
    monkeypatch.setenv("PVU_DEBUG_UI_PLANES", "yes")
    settings_mod.reload_from_env()
    s = settings_mod.get()
    assert s.UI_WORLD_UNIT_PER_LOGICAL_UNIT == pytest.approx(1.25)
    assert s.UI_LAYER == 7
    assert s.DEBUG_UI_PLANES is True


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PVU_UI_WORLD_UNIT_PER_LOGICAL_UNIT", "nan")
    monkeypatch.setenv("PVU_UI_LAYER", "five")
    monkeypatch.setenv("PVU_UI_BORDER_THICKNESS", "-1")
    monkeypatch.setenv("PVU_CAMERA_NEAR", "5")
    monkeypatch.setenv("PVU_CAMERA_FAR", "1")
    settings_mod.reload_from_env()
    s = settings_mod.get()
    assert s.UI_WORLD_UNIT_PER_LOGICAL_UNIT == pytest.approx(0.866)
    assert s.UI_LAYER == 5
    assert s.UI_BORDER_THICKNESS == 0.0
    # far <= near は near の 10 倍へ補正
    assert s.CAMERA_FAR == pytest.approx(50.0)


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PVU_TEST_INT", "-3")
    monkeypatch.setenv("PVU_TEST_FLOAT", "inf")
    monkeypatch.setenv("PVU_TEST_BOOL", "maybe")
    assert env_int("PVU_TEST_INT", 1, min_value=0) == 0
    assert env_int("PVU_TEST_MISSING", None) is None
    assert env_float("PVU_TEST_FLOAT", 2.5) == 2.5
    assert env_bool("PVU_TEST_BOOL", True) is True
    assert env_bool("PVU_TEST_MISSING") is False
