"""
どこで: `api.animate`
何を: 登録済みパターン名から Turtle + Animator を組み立てるファクトリ `animate_pattern`。
なぜ: 「どの Screen に・どこから・どの命令列を・どの周期で」を 1 呼び出しで結線するため。
"""

from __future__ import annotations

from typing import Any

from animation.animator import Animator
from common.types import Vec2
from engine.core.vector import Vector2
from engine.render.screen import Screen
from patterns.registry import generate
from turtles.config import TurtleConfig
from turtles.turtle import Turtle
from util.utils import config_section


def animate_pattern(
    screen: Screen,
    name: str,
    *,
    position: Vector2 | Vec2 = (0.0, 0.0),
    config: TurtleConfig | None = None,
    interval: float | None = None,
    auto_reset: bool | None = None,
    reset_timeout: float | None = None,
    **params: Any,
) -> Animator:
    """パターン `name` を `screen` 上で再生する Animator を返す。

    未指定の `config`/`interval`/`auto_reset`/`reset_timeout` は設定ファイルの
    `turtle:` / `animation:` セクション、なければ既定値で補う。
    """
    anim_cfg = config_section("animation")
    if config is None:
        config = TurtleConfig.from_mapping(config_section("turtle"))
    if interval is None:
        interval = float(anim_cfg.get("interval", 0.05))
    if auto_reset is None:
        auto_reset = bool(anim_cfg.get("auto_reset", False))
    if reset_timeout is None and auto_reset:
        reset_timeout = float(anim_cfg.get("reset_timeout", 3.0))

    turtle = Turtle(screen, position, config)
    commands = generate(name, **params)
    return Animator(
        turtle,
        commands,
        interval=interval,
        auto_reset=auto_reset,
        reset_timeout=reset_timeout,
    )


__all__ = ["animate_pattern"]
