import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.core.transform import CoordinateTransform
from engine.core.vector import Vector2
from engine.render.screen import Screen
from turtles.config import TurtleConfig
from turtles.turtle import Turtle

pytestmark = pytest.mark.optional

coords = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
angles = st.floats(-720, 720, allow_nan=False, allow_infinity=False)


@given(x=coords, y=coords, w=st.floats(1, 4000), h=st.floats(1, 4000), s=st.floats(0.1, 10))
def test_display_logical_inverse(x, y, w, h, s):
    t = CoordinateTransform(w, h, s)
    back = t.to_logical(t.to_display(Vector2(x, y)))
    assert back.x == pytest.approx(x, abs=1e-6)
    assert back.y == pytest.approx(y, abs=1e-6)


@given(deg=angles)
def test_rotation_preserves_unit_length(deg):
    v = Vector2.from_angle(0.0).rotate(deg)
    assert v.length() == pytest.approx(1.0, abs=1e-9)


@given(heading=angles, distance=st.floats(0, 500), turn=angles)
def test_forward_backward_round_trip(heading, distance, turn):
    turtle = Turtle(Screen(), (0.0, 0.0), TurtleConfig(heading=heading))
    turtle.forward(distance)
    turtle.backward(distance)
    turtle.turn_left(turn)
    turtle.turn_right(turn)
    assert turtle.position.x == pytest.approx(0.0, abs=1e-6)
    assert turtle.position.y == pytest.approx(0.0, abs=1e-6)
    assert math.isclose(turtle.heading_vector.length(), 1.0, abs_tol=1e-9)
