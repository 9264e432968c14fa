"""
どこで: `patterns.lsystem`
何を: L-system の文字列展開 `expand` と、展開結果を Turtle 命令列へ写す `interpret`。
なぜ: フラクタル曲線を「規則 + 深さ」だけで記述し、平坦な命令列として事前生成するため。

記号の既定解釈（`interpret`）:
- `draw` に含まれる記号 → Forward(step)
- "+" → TurnLeft(angle), "-" → TurnRight(angle)
- それ以外（X, Y など）は展開専用の変数として無視
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from turtles.commands import Command, Forward, TurnLeft, TurnRight


def expand(axiom: str, rules: Mapping[str, str], depth: int) -> str:
    """`axiom` に `rules` を `depth` 回適用した文字列を返す。"""
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    current = axiom
    for _ in range(depth):
        current = "".join(rules.get(c, c) for c in current)
    return current


def _iter_commands(
    symbols: Iterable[str], *, step: float, angle: float, draw: str
) -> Iterator[Command]:
    for c in symbols:
        if c in draw:
            yield Forward(step)
        elif c == "+":
            yield TurnLeft(angle)
        elif c == "-":
            yield TurnRight(angle)


def interpret(symbols: str, *, step: float, angle: float, draw: str = "F") -> list[Command]:
    """展開済み文字列を命令列へ変換する。"""
    return list(_iter_commands(symbols, step=step, angle=angle, draw=draw))


__all__ = ["expand", "interpret"]
