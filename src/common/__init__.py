"""
どこで: `common` パッケージ。
何を: patterns/turtles/engine で共有する軽量基盤（BaseRegistry・設定・型エイリアス）。
なぜ: 最内層に共通部品を集め、上位層からの依存の向きを一方向に保つため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
