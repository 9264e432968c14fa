from __future__ import annotations

import pytest

from engine.core.transform import CoordinateTransform
from engine.core.vector import Vector2
from engine.render.present import present, project_segments
from engine.render.screen import Screen
from engine.render.types import LineSegment

RED = (1.0, 0.0, 0.0, 1.0)


def test_present_projects_and_preserves_order(screen: Screen) -> None:
    screen.append(LineSegment(Vector2(0.0, 0.0), Vector2(10.0, 0.0), 2.0, RED))
    screen.append(LineSegment(Vector2(10.0, 0.0), Vector2(10.0, 10.0), 1.0, RED))
    transform = CoordinateTransform(200, 100, scale=2.0)
    calls: list[tuple[Vector2, Vector2, float, tuple]] = []

    n = present(screen, transform, lambda s, e, w, c: calls.append((s, e, w, c)))

    assert n == 2
    assert calls[0][0] == Vector2(100.0, 50.0)
    assert calls[0][1] == Vector2(120.0, 50.0)
    assert calls[0][2] == pytest.approx(4.0)  # 太さも scale 倍
    assert calls[1][1] == Vector2(120.0, 30.0)  # Y 上向き → 表示では上（小さい y）
    assert calls[1][3] == RED


def test_present_empty_screen_draws_nothing(screen: Screen) -> None:
    calls: list[object] = []
    assert present(screen, CoordinateTransform(10, 10), lambda *a: calls.append(a)) == 0
    assert calls == []


def test_project_segments_shape() -> None:
    segs = [LineSegment(Vector2(0.0, 0.0), Vector2(1.0, 1.0), 1.0, RED)] * 3
    out = project_segments(segs, CoordinateTransform(10, 10))
    assert out.shape == (3, 2, 2)
    assert project_segments([], CoordinateTransform(10, 10)).shape == (0, 2, 2)


def test_present_passes_full_precision_endpoints(screen: Screen) -> None:
    p = Vector2(12345.6789, -0.1)
    screen.append(LineSegment(p, Vector2(0.0, 0.0), 1.0, RED))
    transform = CoordinateTransform(800, 600, scale=1.0)
    calls: list[Vector2] = []

    present(screen, transform, lambda s, e, w, c: calls.append(s))

    assert calls == [transform.to_display(p)]
