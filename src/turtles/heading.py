"""
どこで: `turtles.heading`
何を: 内部の三角関数角（atan2, 反時計回り）と公開「方位角」の相互変換、および最短弧の計算。
なぜ: offset/sign の算術を 1 箇所に閉じ込め、Turtle の各操作から同じ純関数を使うため。

    public = (offset + sign * raw) mod 360
    raw    = sign * (public - offset)        # sign は ±1 なので 1/sign == sign
"""

from __future__ import annotations


def to_public_angle(raw: float, offset: float, sign: float) -> float:
    """内部角 `raw` [度] を公開方位角 [0, 360) へ写す。"""
    public = (offset + sign * raw) % 360.0
    # -1e-15 % 360 は 360.0 になりうる
    return 0.0 if public >= 360.0 else public


def from_public_angle(public: float, offset: float, sign: float) -> float:
    """公開方位角を内部角へ戻す（(-180, 180] に正規化）。"""
    return shortest_arc(sign * (public - offset))


def shortest_arc(delta: float) -> float:
    """任意の角度差を (-180, 180] の符号付き最短弧へ正規化する。"""
    d = delta % 360.0
    if d > 180.0:
        d -= 360.0
    return d


__all__ = ["to_public_angle", "from_public_angle", "shortest_arc"]
