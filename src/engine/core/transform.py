"""
どこで: `engine.core` の座標変換。
何を: 論理空間（Y 上向き・原点中央）↔ 表示空間（Y 下向き・左上原点）の写像 `CoordinateTransform`。
なぜ: Turtle を表示サイズから独立させ、ウィンドウのリサイズを描画時の射影だけで吸収するため。

式:
    display_x =  p.x * scale + width / 2
    display_y = -p.y * scale + height / 2

`scale` は生成時に固定（ズーム操作は持たない）。`resize` は幅/高さのみを更新する。
リサイズ（ウィンドウイベント）と射影（描画）が別スレッドから来ても整合するよう、
ビューポートの読み書きはロックで保護する。
"""

from __future__ import annotations

import math
import threading

import numpy as np

from .vector import Vector2


class CoordinateTransform:
    """論理座標 ↔ 表示座標の写像。"""

    def __init__(self, width: float, height: float, scale: float = 1.0) -> None:
        scale = float(scale)
        if not math.isfinite(scale) or scale <= 0.0:
            raise ValueError(f"scale must be a finite value > 0, got {scale}")
        self._scale = scale
        self._lock = threading.Lock()
        self._width = 0.0
        self._height = 0.0
        self.resize(width, height)

    # ---- properties ----
    @property
    def scale(self) -> float:
        return self._scale

    @property
    def viewport(self) -> tuple[float, float]:
        with self._lock:
            return (self._width, self._height)

    # ---- mutation ----
    def resize(self, width: float, height: float) -> None:
        """ビューポート寸法を更新する（scale は不変、同値での再呼び出しは冪等）。"""
        w, h = float(width), float(height)
        if not (math.isfinite(w) and math.isfinite(h)) or w < 0.0 or h < 0.0:
            raise ValueError(f"viewport size must be finite and >= 0, got {(width, height)}")
        with self._lock:
            self._width = w
            self._height = h

    # ---- projection ----
    def to_display(self, p: Vector2) -> Vector2:
        with self._lock:
            half_w, half_h = self._width / 2.0, self._height / 2.0
        return Vector2(p.x * self._scale + half_w, -p.y * self._scale + half_h)

    def to_logical(self, p: Vector2) -> Vector2:
        with self._lock:
            half_w, half_h = self._width / 2.0, self._height / 2.0
        return Vector2((p.x - half_w) / self._scale, -(p.y - half_h) / self._scale)

    def to_display_array(self, points: np.ndarray) -> np.ndarray:
        """`(N, 2)` 配列をまとめて表示座標へ写す（float64 の新しい配列を返す）。"""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("points は形状 (N, 2) の配列である必要があります。")
        with self._lock:
            half_w, half_h = self._width / 2.0, self._height / 2.0
        out = np.empty_like(pts)
        out[:, 0] = pts[:, 0] * self._scale + half_w
        out[:, 1] = -pts[:, 1] * self._scale + half_h
        return out

    def __repr__(self) -> str:
        w, h = self.viewport
        return f"CoordinateTransform(width={w}, height={h}, scale={self._scale})"


__all__ = ["CoordinateTransform"]
