"""
どこで: `turtles` パッケージ。
何を: Turtle 状態機械・初期設定 TurtleConfig・命令の直和型 Command と角度規約の変換関数を提供。
なぜ: 運動学（位置/方位/ペン）を描画・時間軸から独立した 1 層にまとめるため。
"""

from .commands import (
    Backward,
    Command,
    Forward,
    TurnLeft,
    TurnRight,
    format_commands,
    is_translation,
    parse_commands,
)
from .config import TurtleConfig
from .heading import from_public_angle, shortest_arc, to_public_angle
from .turtle import Turtle

__all__ = [
    "Turtle",
    "TurtleConfig",
    "Command",
    "Forward",
    "Backward",
    "TurnLeft",
    "TurnRight",
    "is_translation",
    "parse_commands",
    "format_commands",
    "to_public_angle",
    "from_public_angle",
    "shortest_arc",
]
