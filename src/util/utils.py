"""
どこで: `util.utils`。
何を: YAML 設定の読み込み（`configs/default.yaml` → ルート `config.yaml`）と、ドット区切りキーの参照。
なぜ: ランナーのウィンドウ寸法/背景色/FPS を、コードを触らずに差し替え可能にするため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`pyproject.toml` / `configs/` / `.git` を持つ最も近い上位ディレクトリを返す。

    見つからない場合は `<repo>/src/util/utils.py` を想定して 2 階層上を返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if any((parent / marker).exists() for marker in ("pyproject.toml", "configs", ".git")):
            return parent
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（トップレベルのみ上書き、ディープマージなし）

    いずれも存在しない/不正な場合は空辞書。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    cfg: Dict[str, Any] = {}
    for path in (project_root / "configs" / "default.yaml", project_root / "config.yaml"):
        if path.exists():
            cfg.update(_safe_load_yaml(path))
    return cfg


def config_get(cfg: Mapping[str, Any] | None, key: str, default: Any = None) -> Any:
    """`"window.width"` のようなドット区切りキーで値を取り出す。途中が辞書でなければ `default`。"""
    node: Any = cfg or {}
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


__all__ = ["config_get", "load_config"]
