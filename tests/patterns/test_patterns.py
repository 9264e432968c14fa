from __future__ import annotations

import math

import pytest

import patterns
from engine.render.screen import Screen
from patterns.lsystem import expand, interpret
from patterns.registry import get_registry, pattern, unregister
from turtles.commands import Command, Forward, TurnLeft, TurnRight, is_translation
from turtles.config import TurtleConfig
from turtles.turtle import Turtle


def _run(commands: list[Command], heading: float = 0.0) -> tuple[Turtle, Screen]:
    screen = Screen()
    turtle = Turtle(screen, (0.0, 0.0), TurtleConfig(heading=heading))
    for cmd in commands:
        turtle.execute(cmd)
    return turtle, screen


def _forward_count(commands: list[Command]) -> int:
    return sum(1 for c in commands if is_translation(c))


def test_builtin_patterns_are_registered() -> None:
    names = patterns.list_patterns()
    for expected in (
        "polygon",
        "star",
        "spiral",
        "koch_curve",
        "koch_snowflake",
        "sierpinski_arrowhead",
        "dragon_curve",
        "hilbert_curve",
    ):
        assert expected in names
    assert patterns.is_pattern_registered("Koch-Snowflake")


def test_generate_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        patterns.generate("no_such_pattern")


def test_pattern_decorator_variants() -> None:
    @pattern
    def _tmp_plain() -> list[Command]:
        return [Forward(1)]

    @pattern("tmp-named")
    def _named() -> list[Command]:
        return [TurnLeft(1)]

    @pattern(name="tmp_kw")
    def _kw() -> list[Command]:
        return []

    try:
        assert patterns.generate("_tmp_plain") == [Forward(1)]
        assert patterns.generate("tmp_named") == [TurnLeft(1)]
        assert patterns.get_pattern("tmp_kw") is _kw
        assert "tmp_named" in get_registry()
    finally:
        for n in ("_tmp_plain", "tmp_named", "tmp_kw"):
            unregister(n)
    assert not patterns.is_pattern_registered("tmp_named")


def test_pattern_rejects_non_function() -> None:
    with pytest.raises(TypeError):
        pattern(name="not_a_function")(object())


def test_lsystem_expand_and_interpret() -> None:
    assert expand("F", {"F": "F+F--F+F"}, 0) == "F"
    assert expand("F", {"F": "F+F--F+F"}, 1) == "F+F--F+F"
    assert expand("A", {"A": "AB", "B": "A"}, 4) == "ABAABABA"
    with pytest.raises(ValueError):
        expand("F", {}, -1)

    cmds = interpret("F+X-G", step=2.0, angle=30.0, draw="FG")
    assert cmds == [Forward(2.0), TurnLeft(30.0), TurnRight(30.0), Forward(2.0)]


@pytest.mark.parametrize("sides", [3, 4, 6, 12])
def test_polygon_closes_and_restores_heading(sides: int) -> None:
    cmds = patterns.generate("polygon", sides=sides, length=50.0)
    turtle, screen = _run(cmds, heading=30.0)
    assert len(screen) == sides
    assert turtle.position.x == pytest.approx(0.0, abs=1e-6)
    assert turtle.position.y == pytest.approx(0.0, abs=1e-6)
    assert turtle.get_heading() == pytest.approx(30.0, abs=1e-6)


def test_star_closes() -> None:
    cmds = patterns.generate("star", points=7, length=80.0)
    turtle, screen = _run(cmds)
    assert len(screen) == 7
    assert turtle.position.x == pytest.approx(0.0, abs=1e-6)
    assert turtle.position.y == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "name, params",
    [("polygon", {"sides": 2}), ("star", {"points": 6}), ("star", {"points": 3})],
)
def test_basic_shapes_reject_bad_parameters(name: str, params: dict) -> None:
    with pytest.raises(ValueError):
        patterns.generate(name, **params)


def test_spiral_lengths_grow() -> None:
    cmds = patterns.generate("spiral", steps=4, step=1.0, growth=0.5)
    lengths = [c.distance for c in cmds if isinstance(c, Forward)]
    assert lengths == [1.0, 1.5, 2.0, 2.5]


@pytest.mark.parametrize("depth", [0, 1, 2, 3])
def test_koch_curve_segments_and_endpoint(depth: int) -> None:
    cmds = patterns.generate("koch_curve", depth=depth, size=270.0)
    assert _forward_count(cmds) == 4**depth
    turtle, _ = _run(cmds)
    assert turtle.position.x == pytest.approx(270.0, abs=1e-6)
    assert turtle.position.y == pytest.approx(0.0, abs=1e-6)


def test_koch_snowflake_is_closed() -> None:
    cmds = patterns.generate("koch_snowflake", depth=2, size=90.0)
    assert _forward_count(cmds) == 3 * 4**2
    turtle, _ = _run(cmds)
    assert math.hypot(turtle.position.x, turtle.position.y) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "name, depth, expected",
    [
        ("sierpinski_arrowhead", 3, 3**3),
        ("dragon_curve", 5, 2**5),
        ("hilbert_curve", 3, 4**3 - 1),
    ],
)
def test_fractal_segment_counts(name: str, depth: int, expected: int) -> None:
    assert _forward_count(patterns.generate(name, depth=depth)) == expected


def test_hilbert_stays_inside_square() -> None:
    cmds = patterns.generate("hilbert_curve", depth=3, size=70.0)
    _, screen = _run(cmds)
    for seg in screen.snapshot():
        for p in (seg.start, seg.end):
            assert -70.0 - 1e-6 <= p.x <= 70.0 + 1e-6
            assert -70.0 - 1e-6 <= p.y <= 70.0 + 1e-6


def test_fractal_depth_limits() -> None:
    with pytest.raises(ValueError):
        patterns.generate("koch_curve", depth=8)
    with pytest.raises(ValueError):
        patterns.generate("dragon_curve", depth=-1)
