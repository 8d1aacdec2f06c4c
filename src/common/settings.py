"""
どこで: `common.settings`
何を: UI 座標系の較正値・デバッグ枠・カメラ近遠平面などを型付きで一元管理し、環境変数から読み込む。
なぜ: 描画スタック依存の経験値（較正定数）を数式へ直書きせず、差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int


@dataclass
class _Settings:
    # UI 座標系
    # 1 論理単位（画面高さいっぱいの UI 要素）あたりのワールド単位（半高さ）。
    # ホスト側レイアウト/セーフエリアで実効ビューポートが理論値と一致しないため経験的に較正する。
    UI_WORLD_UNIT_PER_LOGICAL_UNIT: float = 0.866
    UI_LAYER: int = 5

    # デバッグ用 UI プレーン
    UI_BORDER_THICKNESS: float = 0.02
    UI_BORDER_Z: float = 0.001
    DEBUG_UI_PLANES: bool = False

    # カメラ
    ORTHO_APPROX_FOV: float = 1.0
    CAMERA_NEAR: float = 0.01
    CAMERA_FAR: float = 1000.0


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数（`PVU_*`）から設定を再読込。

    - 不正値は既定値へフォールバック（フェイルソフト）。
    - 長さ系は負値を 0 に丸める。
    """
    _settings.UI_WORLD_UNIT_PER_LOGICAL_UNIT = env_float(
        "PVU_UI_WORLD_UNIT_PER_LOGICAL_UNIT", 0.866
    )
    _settings.UI_LAYER = env_int("PVU_UI_LAYER", 5, min_value=0) or 0

    _settings.UI_BORDER_THICKNESS = env_float("PVU_UI_BORDER_THICKNESS", 0.02, min_value=0.0)
    _settings.UI_BORDER_Z = env_float("PVU_UI_BORDER_Z", 0.001)
    _settings.DEBUG_UI_PLANES = env_bool("PVU_DEBUG_UI_PLANES", False)

    _settings.ORTHO_APPROX_FOV = env_float("PVU_ORTHO_APPROX_FOV", 1.0, min_value=1e-3)
    _settings.CAMERA_NEAR = env_float("PVU_CAMERA_NEAR", 0.01, min_value=1e-6)
    _settings.CAMERA_FAR = env_float("PVU_CAMERA_FAR", 1000.0)
    if _settings.CAMERA_FAR <= _settings.CAMERA_NEAR:
        _settings.CAMERA_FAR = _settings.CAMERA_NEAR * 10.0


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
