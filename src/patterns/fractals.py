"""
どこで: `patterns.fractals`
何を: L-system で定義したフラクタル曲線の命令列ジェネレータ群。
なぜ: 再帰的な図形を平坦な命令列として一度に生成し、Animator で 1 本ずつ再生するため。

各関数の `size` は曲線全体のおおよその幅（論理単位）。深さに応じて 1 歩の長さを割り出す。
"""

from __future__ import annotations

from turtles.commands import Command

from .lsystem import expand, interpret
from .registry import pattern


def _check_depth(depth: int, limit: int) -> None:
    if depth < 0 or depth > limit:
        raise ValueError(f"depth must be in [0, {limit}], got {depth}")


@pattern
def koch_curve(*, depth: int = 3, size: float = 300.0) -> list[Command]:
    """コッホ曲線（右向きに 1 本）。"""
    _check_depth(depth, 7)
    symbols = expand("F", {"F": "F+F--F+F"}, depth)
    return interpret(symbols, step=size / 3**depth, angle=60.0)


@pattern
def koch_snowflake(*, depth: int = 3, size: float = 300.0) -> list[Command]:
    """コッホ雪片（閉曲線、右回り）。"""
    _check_depth(depth, 6)
    symbols = expand("F--F--F", {"F": "F+F--F+F"}, depth)
    return interpret(symbols, step=size / 3**depth, angle=60.0)


@pattern
def sierpinski_arrowhead(*, depth: int = 4, size: float = 300.0) -> list[Command]:
    """シェルピンスキーの矢じり曲線。"""
    _check_depth(depth, 8)
    symbols = expand("A", {"A": "B-A-B", "B": "A+B+A"}, depth)
    return interpret(symbols, step=size / 2**depth, angle=60.0, draw="AB")


@pattern
def dragon_curve(*, depth: int = 8, size: float = 300.0) -> list[Command]:
    """ドラゴン曲線。"""
    _check_depth(depth, 16)
    symbols = expand("F", {"F": "F+G", "G": "F-G"}, depth)
    return interpret(symbols, step=size / 2 ** (depth / 2), angle=90.0, draw="FG")


@pattern
def hilbert_curve(*, depth: int = 4, size: float = 300.0) -> list[Command]:
    """ヒルベルト曲線（一辺 size の正方形を埋める）。"""
    _check_depth(depth, 8)
    symbols = expand("A", {"A": "+BF-AFA-FB+", "B": "-AF+BFB+FA-"}, depth)
    return interpret(symbols, step=size / (2**depth - 1) if depth > 0 else size, angle=90.0)
