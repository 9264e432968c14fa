"""共通フィクスチャ。

- 空の共有 Screen
- 原点・上向き（standard 規約で 90°）・ペンを下ろした Turtle
"""

from __future__ import annotations

from typing import Callable

import pytest

from engine.render.screen import Screen
from turtles.config import TurtleConfig
from turtles.turtle import Turtle


@pytest.fixture()
def screen() -> Screen:
    return Screen()


@pytest.fixture()
def make_turtle(screen: Screen) -> Callable[..., Turtle]:
    def _make(position=(0.0, 0.0), **config) -> Turtle:
        return Turtle(screen, position, TurtleConfig(**config))

    return _make


@pytest.fixture()
def turtle_up(make_turtle) -> Turtle:
    return make_turtle(heading=90.0)
