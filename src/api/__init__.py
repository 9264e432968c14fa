"""
どこで: `api` 入口（高レベル公開 API）。
何を: Screen/Turtle/Animator/パターン/ランナーを単一名前空間へ再輸出。
なぜ: 利用者が「Screen を作る → Turtle/Animator を結線 → run」まで 1 つの import で完結できるようにするため。

Usage:
    from api import Screen, SpiralBehavior, Turtle, TurtleConfig, animate_pattern, run

    screen = Screen()
    snow = animate_pattern(screen, "koch_snowflake", depth=3, position=(-150, 90))
    spiral = SpiralBehavior(Turtle(screen, (200, -150)), interval=0.02)
    run(screen, [snow, spiral])
"""

from animation.animator import Animator
from animation.behavior import Behavior, SpiralBehavior
from animation.interval import IntervalChecker
from engine.core.transform import CoordinateTransform
from engine.core.vector import Vector2
from engine.render.present import present
from engine.render.screen import Screen
from engine.render.types import LineSegment
from patterns import generate, list_patterns, pattern
from turtles import (
    Backward,
    Command,
    Forward,
    TurnLeft,
    TurnRight,
    Turtle,
    TurtleConfig,
    parse_commands,
)

from .animate import animate_pattern
from .runner import run

__all__ = [
    # コア
    "Vector2",
    "CoordinateTransform",
    "Screen",
    "LineSegment",
    "present",
    # Turtle
    "Turtle",
    "TurtleConfig",
    "Command",
    "Forward",
    "Backward",
    "TurnLeft",
    "TurnRight",
    "parse_commands",
    # アニメーション
    "IntervalChecker",
    "Animator",
    "Behavior",
    "SpiralBehavior",
    # パターン
    "pattern",
    "generate",
    "list_patterns",
    "animate_pattern",
    # 実行
    "run",
]

__version__ = "2026.10"
