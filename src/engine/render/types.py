"""
どこで: `engine.render` 型定義。
何を: Screen に積む不変の線分 `LineSegment` と色エイリアス `RGBA`。
なぜ: Turtle（生成側）と Renderer（消費側）の契約を 1 つのデータクラスに固定するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import RGBA
from engine.core.vector import Vector2


@dataclass(frozen=True, slots=True)
class LineSegment:
    """論理空間上の 1 本の線分（生成後は不変）。"""

    start: Vector2
    end: Vector2
    thickness: float
    color: RGBA

    def __post_init__(self) -> None:
        if not self.thickness > 0.0:
            raise ValueError(f"thickness must be > 0, got {self.thickness}")

    def length(self) -> float:
        return self.start.distance(self.end)


__all__ = ["LineSegment", "RGBA"]
