from __future__ import annotations

import pytest

from turtles.heading import from_public_angle, shortest_arc, to_public_angle


@pytest.mark.parametrize(
    "delta, expected",
    [(0.0, 0.0), (180.0, 180.0), (-180.0, 180.0), (190.0, -170.0), (-190.0, 170.0), (720.0, 0.0), (359.0, -1.0)],
)
def test_shortest_arc(delta: float, expected: float) -> None:
    assert shortest_arc(delta) == pytest.approx(expected)


def test_public_angle_range() -> None:
    for raw in (-179.0, -90.0, 0.0, 45.0, 180.0):
        for offset, sign in ((0.0, 1.0), (90.0, -1.0), (30.0, 1.0)):
            public = to_public_angle(raw, offset, sign)
            assert 0.0 <= public < 360.0


@pytest.mark.parametrize("offset, sign", [(0.0, 1.0), (90.0, -1.0), (270.0, 1.0), (45.0, -1.0)])
@pytest.mark.parametrize("public", [0.0, 30.0, 90.0, 180.0, 299.0])
def test_round_trip(public: float, offset: float, sign: float) -> None:
    raw = from_public_angle(public, offset, sign)
    assert -180.0 < raw <= 180.0
    assert to_public_angle(raw, offset, sign) == pytest.approx(public)


def test_logo_convention_examples() -> None:
    # logo: 北(内部 90°) が 0°、東(内部 0°) が 90°
    assert to_public_angle(90.0, 90.0, -1.0) == pytest.approx(0.0)
    assert to_public_angle(0.0, 90.0, -1.0) == pytest.approx(90.0)
    assert from_public_angle(180.0, 90.0, -1.0) == pytest.approx(-90.0)
