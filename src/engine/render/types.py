"""
どこで: `engine.render` 型定義。
何を: 1 ノード分の描画要求 `DrawItem`（ワールド行列・色・深度）。
なぜ: シーン走査（純 Python）と GPU 呼び出しを分け、走査結果を GPU 無しで検証できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from common.types import RGBA
from engine.scene.mesh import ModelEntity


@dataclass(frozen=True)
class DrawItem:
    """描画対象ノードと、走査時点のワールド行列/描画色。"""

    node: ModelEntity
    world: np.ndarray  # (4, 4) float64
    color: RGBA
    depth: float  # ワールド Z（小さいほど奥）


__all__ = ["DrawItem"]
