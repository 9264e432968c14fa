"""
どこで: `engine.render` の提示ステップ。
何を: Screen のスナップショットを CoordinateTransform で射影し、`draw_line` コラボレータへ渡す。
なぜ: ラスタライズ実装（ModernGL/テスト用の記録器など）を差し替え可能な 1 関数に閉じ込めるため。
"""

from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from engine.core.transform import CoordinateTransform
from engine.core.vector import Vector2

from .screen import Screen
from .types import RGBA, LineSegment


class DrawLine(Protocol):
    def __call__(self, start: Vector2, end: Vector2, thickness: float, color: RGBA) -> None: ...


def segments_to_array(segments: Sequence[LineSegment]) -> np.ndarray:
    """線分列を `(2N, 2)` の端点配列（start0, end0, start1, end1, ...）へ並べる。"""
    pts = np.empty((2 * len(segments), 2), dtype=np.float64)
    for i, seg in enumerate(segments):
        pts[2 * i] = (seg.start.x, seg.start.y)
        pts[2 * i + 1] = (seg.end.x, seg.end.y)
    return pts


def project_segments(
    segments: Sequence[LineSegment], transform: CoordinateTransform
) -> np.ndarray:
    """線分列の端点をまとめて表示座標へ写し、`(N, 2, 2)` 配列で返す。"""
    if not segments:
        return np.empty((0, 2, 2), dtype=np.float64)
    projected = transform.to_display_array(segments_to_array(segments))
    return projected.reshape(len(segments), 2, 2)


def present(screen: Screen, transform: CoordinateTransform, draw_line: DrawLine) -> int:
    """1 フレーム分を提示し、描いた線の本数を返す。

    スナップショットは 1 回だけ取得するため、途中で `clear` が走っても
    その前後が混ざった描画にはならない。
    """
    return present_segments(screen.snapshot(), transform, draw_line)


def present_segments(
    segments: Sequence[LineSegment], transform: CoordinateTransform, draw_line: DrawLine
) -> int:
    """取得済みのスナップショットを提示する（端点は float64 のまま渡す）。"""
    projected = project_segments(segments, transform)
    for seg, ends in zip(segments, projected):
        start = Vector2(float(ends[0, 0]), float(ends[0, 1]))
        end = Vector2(float(ends[1, 0]), float(ends[1, 1]))
        draw_line(start, end, seg.thickness * transform.scale, seg.color)
    return len(segments)


__all__ = ["DrawLine", "present", "present_segments", "project_segments", "segments_to_array"]
