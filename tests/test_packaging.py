"""
パッケージング設定の確認

目的:
- `__init__.py` を持たない名前空間パッケージ（engine/util）も wheel に含まれること
- src 直下のトップレベルパッケージがすべて include に含まれること
"""

from __future__ import annotations

import fnmatch
import pathlib

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"


def _find_config() -> dict:
    tomllib = pytest.importorskip("tomllib")
    with (REPO_ROOT / "pyproject.toml").open("rb") as f:
        data = tomllib.load(f)
    return data["tool"]["setuptools"]["packages"]["find"]


@pytest.mark.smoke
def test_namespace_packages_are_discovered() -> None:
    cfg = _find_config()
    assert cfg.get("namespaces") is True
    assert cfg["where"] == ["src"]
    for name in ("engine", "util"):
        assert not (SRC_DIR / name / "__init__.py").exists()


@pytest.mark.smoke
def test_every_top_level_package_is_included() -> None:
    include = _find_config()["include"]
    top_level = sorted(
        p.name for p in SRC_DIR.iterdir() if p.is_dir() and not p.name.startswith(("_", "."))
    )
    for name in top_level:
        assert any(fnmatch.fnmatch(name, pattern) for pattern in include), name
