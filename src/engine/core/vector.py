"""
どこで: `engine.core` の 2D ベクトル値型。
何を: 不変 `Vector2`（加減算・スカラー/要素積・回転・正規化・角度・距離）。
なぜ: Turtle/CoordinateTransform/Screen が共有する唯一の座標表現を最内層に置くため。

角度の単位:
- 公開 API はすべて「度」。`angle()` は `atan2(y, x)` を度で返し、範囲は (-180, 180]。

退化ケースの方針:
- `normalize()` は長さ 0（または非有限）のベクトルに対し `Vector2(0, 0)` を返す（例外なし）。
- 非有限の角度で `rotate()` した結果は非有限になる。保存側（Turtle）が棄却する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector2:
    """2 次元の不変ベクトル。"""

    x: float = 0.0
    y: float = 0.0

    # ── ファクトリ ───────────────────
    @classmethod
    def from_angle(cls, degrees: float) -> "Vector2":
        """x 軸から反時計回りに `degrees` 度の単位ベクトルを返す。"""
        rad = math.radians(degrees)
        return cls(math.cos(rad), math.sin(rad))

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    # ── 算術 ─────────────────────────
    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, other: "float | Vector2") -> "Vector2":
        if isinstance(other, Vector2):
            return self.mul(other)
        return self.scale(other)

    def __rmul__(self, other: float) -> "Vector2":
        return self.scale(other)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def mul(self, other: "Vector2") -> "Vector2":
        """要素ごとの積。"""
        return Vector2(self.x * other.x, self.y * other.y)

    # ── 計量 ─────────────────────────
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: "Vector2") -> float:
        return (self - other).length()

    def angle(self) -> float:
        """`atan2(y, x)` を度で返す。範囲 (-180, 180]。"""
        deg = math.degrees(math.atan2(self.y, self.x))
        # atan2 は -180 を返しうる（y=-0.0, x<0）。半開区間に寄せる
        return 180.0 if deg == -180.0 else deg

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    # ── 変換 ─────────────────────────
    def normalize(self) -> "Vector2":
        """単位ベクトルを返す。長さ 0 または非有限なら `Vector2(0, 0)`。"""
        n = self.length()
        if n == 0.0 or not math.isfinite(n):
            return Vector2(0.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def perpendicular(self) -> "Vector2":
        """反時計回り 90 度の垂直ベクトル `(-y, x)`。"""
        return Vector2(-self.y, self.x)

    def rotate_by(self, unit: "Vector2") -> "Vector2":
        """`unit = (cos, sin)` で回転する（v·cos + perp(v)·sin）。"""
        perp = self.perpendicular()
        return Vector2(
            self.x * unit.x + perp.x * unit.y,
            self.y * unit.x + perp.y * unit.y,
        )

    def rotate(self, degrees: float) -> "Vector2":
        """反時計回りに `degrees` 度回転したベクトルを返す。"""
        return self.rotate_by(Vector2.from_angle(degrees))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


__all__ = ["Vector2"]
