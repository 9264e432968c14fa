"""
どこで: `turtles.config`
何を: Turtle 生成時にコピーされる初期状態のスナップショット `TurtleConfig`。
なぜ: 初期方位・ペン・角度規約を 1 つの不変値にまとめ、`reset()` の復帰先を固定するため。

角度規約のプリセット:
- standard: 0° = 東、反時計回りに増加（offset=0, sign=+1）
- logo:     0° = 北、時計回りに増加（offset=90, sign=-1）
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Mapping

from util.color import RGBA, normalize_color

_MODES: dict[str, tuple[float, float]] = {
    "standard": (0.0, 1.0),
    "logo": (90.0, -1.0),
}


@dataclass(frozen=True)
class TurtleConfig:
    """Turtle の初期設定（不変）。

    Attributes
    ----------
    heading : float
        初期方位（公開方位角, 度）。
    pen_width : float
        線の太さ（論理単位）。> 0。
    pen_color : RGBA
        線色（RGBA 0–1）。
    pen_down : bool
        生成直後にペンを下ろしているか。
    angle_offset : float
        公開方位角の 0° に対応する内部角。
    angle_sign : float
        +1 で反時計回り、-1 で時計回りに公開方位角が増える。
    """

    heading: float = 0.0
    pen_width: float = 1.0
    pen_color: RGBA = (1.0, 1.0, 1.0, 1.0)
    pen_down: bool = True
    angle_offset: float = 0.0
    angle_sign: float = 1.0

    def __post_init__(self) -> None:
        if self.angle_sign not in (1.0, -1.0):
            raise ValueError(f"angle_sign must be +1 or -1, got {self.angle_sign}")
        if not math.isfinite(self.heading) or not math.isfinite(self.angle_offset):
            raise ValueError("heading/angle_offset must be finite")
        if not (math.isfinite(self.pen_width) and self.pen_width > 0.0):
            raise ValueError(f"pen_width must be > 0, got {self.pen_width}")
        # 受理した色表現を RGBA(0–1) へ正規化して保持する
        object.__setattr__(self, "pen_color", normalize_color(self.pen_color))
        object.__setattr__(self, "angle_sign", float(self.angle_sign))

    @classmethod
    def for_mode(cls, mode: str, **overrides: Any) -> "TurtleConfig":
        """角度規約プリセット（"standard" / "logo"）から生成する。"""
        key = mode.strip().lower()
        if key not in _MODES:
            allowed = ", ".join(sorted(_MODES))
            raise ValueError(f"unknown angle mode: {mode!r}; allowed={allowed}")
        offset, sign = _MODES[key]
        return cls(angle_offset=offset, angle_sign=sign, **overrides)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TurtleConfig":
        """設定ファイルの `turtle:` セクション相当の辞書から生成する（未知キーは無視）。"""
        fields = {k: data[k] for k in ("heading", "pen_width", "pen_color", "pen_down") if k in data}
        mode = data.get("mode")
        if isinstance(mode, str):
            return cls.for_mode(mode, **fields)
        return cls(**fields)

    def with_changes(self, **changes: Any) -> "TurtleConfig":
        return replace(self, **changes)


__all__ = ["TurtleConfig"]
