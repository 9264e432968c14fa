from __future__ import annotations

from turtles.commands import Command, Forward, TurnLeft, TurnRight

from .registry import pattern


@pattern
def polygon(*, sides: int = 6, length: float = 100.0) -> list[Command]:
    """正多角形（左回り）。最後の回転まで含め、実行後は初期方位に戻る。"""
    if sides < 3:
        raise ValueError(f"sides must be >= 3, got {sides}")
    turn = 360.0 / sides
    out: list[Command] = []
    for _ in range(sides):
        out += [Forward(length), TurnLeft(turn)]
    return out


@pattern
def star(*, points: int = 5, length: float = 150.0) -> list[Command]:
    """一筆書きの星形（points は 5 以上の奇数）。"""
    if points < 5 or points % 2 == 0:
        raise ValueError(f"points must be an odd number >= 5, got {points}")
    turn = 180.0 - 180.0 / points
    out: list[Command] = []
    for _ in range(points):
        out += [Forward(length), TurnRight(turn)]
    return out


@pattern
def spiral(
    *, steps: int = 100, step: float = 2.0, growth: float = 1.0, angle: float = 89.0
) -> list[Command]:
    """前進量を `growth` ずつ伸ばしながら回る角渦巻き。"""
    out: list[Command] = []
    for i in range(steps):
        out += [Forward(step + growth * i), TurnLeft(angle)]
    return out
