"""
どこで: `animation.animator`
何を: 固定の命令列を 1 体の Turtle に対して一定周期で再生する `Animator`（任意で自動リセット）。
なぜ: 事前生成した命令列（フラクタル等）を「1 周期 = 1 本の線分」で見せるため。

1 回の発火での処理:
    カーソル位置から命令を順に実行し、Forward/Backward を 1 つ実行した時点、
    または命令列が尽きた時点で止まる（連続する回転命令は同じ発火内でまとめて適用）。

終端に達した後:
- auto_reset=False: 以後は何もしない（恒久的にアイドル）。
- auto_reset=True : 命令列が空でなければ、終端到達時刻からの経過が `reset_timeout` 以上になった時点で
  Turtle.clear() → Turtle.reset() → カーソルを 0 へ戻し、アイドルタイマーを未設定に戻す。
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from turtles.commands import Command, is_translation
from turtles.turtle import Turtle

from .interval import IntervalChecker

logger = logging.getLogger(__name__)


class Animator:
    """命令列再生器。Turtle を専有する。"""

    def __init__(
        self,
        turtle: Turtle,
        commands: Iterable[Command],
        *,
        interval: float,
        auto_reset: bool = False,
        reset_timeout: float | None = None,
    ) -> None:
        if auto_reset:
            if reset_timeout is None:
                raise ValueError("reset_timeout is required when auto_reset=True")
            reset_timeout = float(reset_timeout)
            if not math.isfinite(reset_timeout) or reset_timeout < 0.0:
                raise ValueError(f"reset_timeout must be finite and >= 0, got {reset_timeout}")
        self._turtle = turtle
        self._commands: tuple[Command, ...] = tuple(commands)
        self._checker = IntervalChecker(interval)
        self._auto_reset = bool(auto_reset)
        self._reset_timeout = reset_timeout
        self._cursor = 0
        self._idle_since: float | None = None
        self._elapsed = 0.0
        self._steps = 0
        self._restarts = 0

    # ---- 読み取り専用 ----
    @property
    def turtle(self) -> Turtle:
        return self._turtle

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_finished(self) -> bool:
        return self._cursor >= len(self._commands)

    @property
    def is_idle(self) -> bool:
        """終端に達しており、今後も描画しない/リセット待ちの状態なら True。"""
        return self.is_finished

    @property
    def step_count(self) -> int:
        """これまでに発火した周期数。"""
        return self._steps

    @property
    def restart_count(self) -> int:
        return self._restarts

    # ---- Tickable ----
    def tick(self, dt: float) -> None:
        self._elapsed += max(0.0, float(dt))
        self.update(self._elapsed)

    def update(self, elapsed: float) -> None:
        """累積経過時間 `elapsed` [秒] で 1 回更新する。"""
        if self.is_finished:
            self._update_idle(elapsed)
            return
        if not self._checker.check(elapsed):
            return
        self._steps += 1
        self._step()
        if self.is_finished and self._idle_since is None:
            self._idle_since = elapsed

    # ---- internal ----
    def _step(self) -> None:
        while self._cursor < len(self._commands):
            cmd = self._commands[self._cursor]
            self._cursor += 1
            self._turtle.execute(cmd)
            if is_translation(cmd):
                break

    def _update_idle(self, elapsed: float) -> None:
        if not self._auto_reset or self._reset_timeout is None:
            return
        # 空の命令列では共有 Screen を消さない
        if not self._commands:
            return
        if self._idle_since is None:
            self._idle_since = elapsed
            return
        if elapsed - self._idle_since < self._reset_timeout:
            return
        logger.debug(
            "animator restart: %d commands, idle %.3fs", len(self._commands), elapsed - self._idle_since
        )
        self._turtle.clear()
        self._turtle.reset()
        self._cursor = 0
        self._idle_since = None
        self._restarts += 1
        # 再生を同じ周期で続けるため、ゲートの基準を現在時刻へ移す
        self._checker.reset(elapsed)


__all__ = ["Animator"]
