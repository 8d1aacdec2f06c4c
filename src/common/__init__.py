"""
どこで: `common` パッケージ。
何を: 設定（settings/env）・ロギング・軽量型エイリアスなど、全層から使う共通基盤。
なぜ: engine/api の双方が依存できる最下層を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
