"""
どこで: `turtles.commands`
何を: Turtle への命令を表す閉じた直和型（Forward/Backward/TurnLeft/TurnRight）と簡易テキスト表記。
なぜ: 命令列を純データとして事前生成（パターン生成器）し、Animator が時間軸上で再生できるようにするため。

テキスト表記（`parse_commands`）:
    "F10 L90 R45 B5"  →  [Forward(10), TurnLeft(90), TurnRight(45), Backward(5)]
    大文字小文字は不問。トークンは空白/カンマ区切り。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True, slots=True)
class Forward:
    distance: float


@dataclass(frozen=True, slots=True)
class Backward:
    distance: float


@dataclass(frozen=True, slots=True)
class TurnLeft:
    angle: float


@dataclass(frozen=True, slots=True)
class TurnRight:
    angle: float


Command = Union[Forward, Backward, TurnLeft, TurnRight]

_TRANSLATIONS = (Forward, Backward)

_TOKEN = re.compile(r"^([FBLR])([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)$", re.IGNORECASE)
_KINDS: dict[str, type] = {"F": Forward, "B": Backward, "L": TurnLeft, "R": TurnRight}
_LETTERS: dict[type, str] = {v: k for k, v in _KINDS.items()}


def is_translation(cmd: Command) -> bool:
    """位置を変える命令（Forward/Backward）なら True。"""
    return isinstance(cmd, _TRANSLATIONS)


def parse_commands(text: str) -> list[Command]:
    """テキスト表記から命令列を作る。不正トークンは ValueError。"""
    out: list[Command] = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        m = _TOKEN.match(token)
        if m is None:
            raise ValueError(f"invalid command token: {token!r}")
        kind = _KINDS[m.group(1).upper()]
        out.append(kind(float(m.group(2))))
    return out


def format_commands(commands: Iterable[Command]) -> str:
    """命令列をテキスト表記へ戻す（`parse_commands` の逆）。"""
    parts = []
    for cmd in commands:
        value = cmd.distance if is_translation(cmd) else cmd.angle  # type: ignore[union-attr]
        parts.append(f"{_LETTERS[type(cmd)]}{value:g}")
    return " ".join(parts)


__all__ = [
    "Command",
    "Forward",
    "Backward",
    "TurnLeft",
    "TurnRight",
    "is_translation",
    "parse_commands",
    "format_commands",
]
