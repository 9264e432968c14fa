"""
どこで: `patterns` パッケージ。
何を: 命令列ジェネレータ（多角形・星・渦巻き・L-system フラクタル）とそのレジストリ。
なぜ: 命令列の生成を純関数に閉じ込め、再生（Animator）から独立させるため。
"""

from . import basic, fractals  # noqa: F401  登録のための import
from .registry import (
    generate,
    get_pattern,
    is_pattern_registered,
    list_patterns,
    pattern,
)

__all__ = [
    "pattern",
    "get_pattern",
    "generate",
    "list_patterns",
    "is_pattern_registered",
]
