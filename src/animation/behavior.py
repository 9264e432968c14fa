"""
どこで: `animation.behavior`
何を: フレーム駆動の振る舞いインターフェース `Behavior` と、渦巻きを 1 歩ずつ描く `SpiralBehavior`。
なぜ: 互いに無関係なアニメーション（命令列再生・渦巻き等）をホストループから一様に扱うため。
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from turtles.turtle import Turtle

from .interval import IntervalChecker

logger = logging.getLogger(__name__)


@runtime_checkable
class Behavior(Protocol):
    """`tick(dt)` で自身の Turtle を進めるアニメーション。"""

    def tick(self, dt: float) -> None: ...


class SpiralBehavior:
    """周期ごとに「前進 → 回転」し、前進量を少しずつ伸ばして渦巻きを描く。

    `max_steps` に達したら Screen を消して最初からやり直す（None なら止まらない）。
    """

    def __init__(
        self,
        turtle: Turtle,
        *,
        interval: float,
        step: float = 2.0,
        growth: float = 0.5,
        angle: float = 89.0,
        max_steps: int | None = 200,
    ) -> None:
        if max_steps is not None and max_steps <= 0:
            raise ValueError(f"max_steps must be > 0, got {max_steps}")
        self._turtle = turtle
        self._checker = IntervalChecker(interval)
        self._step = float(step)
        self._growth = float(growth)
        self._angle = float(angle)
        self._max_steps = max_steps
        self._elapsed = 0.0
        self._count = 0

    @property
    def turtle(self) -> Turtle:
        return self._turtle

    @property
    def step_count(self) -> int:
        return self._count

    def tick(self, dt: float) -> None:
        self._elapsed += max(0.0, float(dt))
        self.update(self._elapsed)

    def update(self, elapsed: float) -> None:
        if not self._checker.check(elapsed):
            return
        if self._max_steps is not None and self._count >= self._max_steps:
            logger.debug("spiral restart after %d steps", self._count)
            self._turtle.clear()
            self._turtle.reset()
            self._count = 0
        self._turtle.forward(self._step + self._growth * self._count)
        self._turtle.turn_left(self._angle)
        self._count += 1


__all__ = ["Behavior", "SpiralBehavior"]
