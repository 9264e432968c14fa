"""
どこで: `turtles.turtle`
何を: 位置・方位（単位ベクトル）・ペン状態を持つカーソル `Turtle`。移動命令を線分へ変換し Screen へ積む。
なぜ: 命令的な move/turn を、共有 Screen 上の不変な LineSegment 列に落とす唯一の状態機械とするため。

不変条件:
- `heading` は常に長さ 1（回転のたびに再正規化してドリフトを打ち消す）。
- `origin` は生成後に変化しない（`to_origin`/`reset` の復帰先）。
- NaN/inf は状態に入らない。非有限入力の操作は無視し、警告ログを出す。

`clear()` は共有 Screen 全体を消去する（同じ Screen に描く他の Turtle の線も消える）。
"""

from __future__ import annotations

import logging
import math

from common.types import RGBA, Vec2
from engine.core.vector import Vector2
from engine.render.screen import Screen
from engine.render.types import LineSegment
from util.color import normalize_color

from .commands import Backward, Command, Forward, TurnLeft, TurnRight
from .config import TurtleConfig
from .heading import from_public_angle, shortest_arc, to_public_angle

logger = logging.getLogger(__name__)


def _warn_degenerate(op: str, value: object) -> None:
    from common.settings import get as _get_settings

    if _get_settings().WARN_DEGENERATE:
        logger.warning("Turtle.%s: non-finite input ignored (%r)", op, value)


class Turtle:
    """2D 平面上のカーソル。"""

    def __init__(
        self,
        screen: Screen,
        position: Vector2 | Vec2 = (0.0, 0.0),
        config: TurtleConfig | None = None,
    ) -> None:
        cfg = config if config is not None else TurtleConfig()
        start = position if isinstance(position, Vector2) else Vector2(*position)
        if not start.is_finite():
            raise ValueError(f"initial position must be finite, got {start}")

        self._screen = screen
        self._config = cfg  # frozen なので共有しても外から変わらない
        self._origin = start
        self._position = start
        self._pen_width = float(cfg.pen_width)
        self._pen_color: RGBA = cfg.pen_color
        self._pen_down = bool(cfg.pen_down)
        self._angle_offset = float(cfg.angle_offset)
        self._angle_sign = float(cfg.angle_sign)
        self._heading = self._initial_heading()

    # ---- 読み取り専用プロパティ ----
    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def config(self) -> TurtleConfig:
        return self._config

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def origin(self) -> Vector2:
        return self._origin

    @property
    def heading_vector(self) -> Vector2:
        return self._heading

    @property
    def is_pen_down(self) -> bool:
        return self._pen_down

    @property
    def pen_width(self) -> float:
        return self._pen_width

    @property
    def pen_color(self) -> RGBA:
        return self._pen_color

    # ---- 移動 ----
    def forward(self, distance: float) -> None:
        self._move(float(distance), "forward")

    def backward(self, distance: float) -> None:
        self._move(-float(distance), "backward")

    def teleport(self, point: Vector2 | Vec2) -> None:
        """線を引かずに位置だけを変える。"""
        target = point if isinstance(point, Vector2) else Vector2(*point)
        if not target.is_finite():
            _warn_degenerate("teleport", target)
            return
        self._position = target

    def to_origin(self) -> None:
        self.teleport(self._origin)

    def reset(self) -> None:
        """原点へ戻し、方位を初期値へ戻す（ペン状態と Screen は触らない）。"""
        self.to_origin()
        self._heading = self._initial_heading()

    # ---- 回転 ----
    def turn_left(self, angle: float) -> None:
        self._rotate(float(angle), "turn_left")

    def turn_right(self, angle: float) -> None:
        self._rotate(-float(angle), "turn_right")

    left = turn_left
    right = turn_right

    def get_heading(self) -> float:
        """公開方位角 [0, 360) を返す。"""
        return to_public_angle(self._heading.angle(), self._angle_offset, self._angle_sign)

    def set_heading(self, degrees: float) -> None:
        """公開方位角 `degrees` を向くよう、最短弧で回転する。"""
        target = float(degrees)
        if not math.isfinite(target):
            _warn_degenerate("set_heading", degrees)
            return
        desired = from_public_angle(target, self._angle_offset, self._angle_sign)
        self._rotate(shortest_arc(desired - self._heading.angle()), "set_heading")

    def point_towards(self, target: Vector2 | Vec2) -> None:
        """`target` の方向を向く。現在位置と同一点なら何もしない。"""
        point = target if isinstance(target, Vector2) else Vector2(*target)
        if not point.is_finite():
            _warn_degenerate("point_towards", point)
            return
        delta = point - self._position
        if delta.length() == 0.0:
            return
        bearing = to_public_angle(delta.angle(), self._angle_offset, self._angle_sign)
        self.set_heading(bearing)

    # ---- ペン ----
    def pen_up(self) -> None:
        self._pen_down = False

    def pen_down(self) -> None:
        self._pen_down = True

    def set_pen(self, *, width: float | None = None, color: object | None = None) -> None:
        """ペンの太さ/色を変更する（以後の線分にのみ反映）。"""
        if width is not None:
            w = float(width)
            if not (math.isfinite(w) and w > 0.0):
                raise ValueError(f"pen width must be > 0, got {width}")
            self._pen_width = w
        if color is not None:
            self._pen_color = normalize_color(color)

    # ---- 命令 / Screen ----
    def execute(self, command: Command) -> None:
        """1 命令をディスパッチする。"""
        if isinstance(command, Forward):
            self.forward(command.distance)
        elif isinstance(command, Backward):
            self.backward(command.distance)
        elif isinstance(command, TurnLeft):
            self.turn_left(command.angle)
        elif isinstance(command, TurnRight):
            self.turn_right(command.angle)
        else:
            raise TypeError(f"unsupported command: {command!r}")

    def clear(self) -> None:
        """共有 Screen 全体を消去する。"""
        self._screen.clear()

    # ---- internal ----
    def _initial_heading(self) -> Vector2:
        raw = from_public_angle(self._config.heading, self._angle_offset, self._angle_sign)
        return Vector2.from_angle(raw)

    def _move(self, distance: float, op: str) -> None:
        if not math.isfinite(distance):
            _warn_degenerate(op, distance)
            return
        destination = self._position + self._heading * distance
        if not destination.is_finite():
            _warn_degenerate(op, distance)
            return
        if self._pen_down:
            self._screen.append(
                LineSegment(self._position, destination, self._pen_width, self._pen_color)
            )
        self._position = destination

    def _rotate(self, degrees: float, op: str) -> None:
        if not math.isfinite(degrees):
            _warn_degenerate(op, degrees)
            return
        rotated = self._heading.rotate(degrees).normalize()
        # 正規化が零ベクトルを返した場合は元の方位を保つ
        if rotated.length() == 0.0:
            _warn_degenerate(op, degrees)
            return
        self._heading = rotated

    def __repr__(self) -> str:
        return (
            f"Turtle(position={self._position}, heading={self.get_heading():.3f}, "
            f"pen_down={self._pen_down})"
        )


__all__ = ["Turtle"]
