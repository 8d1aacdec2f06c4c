"""
どこで: `common` の型定義。
何を: 色（RGBA 0–1）など、依存の少ない軽量エイリアス。
なぜ: 下位層に置いて循環 import と分散定義を避けるため。
"""

RGBA = tuple[float, float, float, float]


__all__ = ["RGBA"]
