from __future__ import annotations

import pytest

from turtles.commands import (
    Backward,
    Forward,
    TurnLeft,
    TurnRight,
    format_commands,
    is_translation,
    parse_commands,
)


def test_commands_are_immutable_values() -> None:
    a = Forward(10)
    assert a == Forward(10)
    assert hash(a) == hash(Forward(10))
    assert a != Backward(10)
    with pytest.raises(AttributeError):
        a.distance = 5  # type: ignore[misc]


def test_is_translation() -> None:
    assert is_translation(Forward(1))
    assert is_translation(Backward(1))
    assert not is_translation(TurnLeft(1))
    assert not is_translation(TurnRight(1))


def test_parse_commands() -> None:
    cmds = parse_commands("F10 l90, R45.5  b-2 f1e2")
    assert cmds == [Forward(10.0), TurnLeft(90.0), TurnRight(45.5), Backward(-2.0), Forward(100.0)]


def test_parse_commands_empty() -> None:
    assert parse_commands("   ") == []


@pytest.mark.parametrize("bad", ["X10", "F", "Fabc", "10F"])
def test_parse_commands_rejects_bad_tokens(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_commands(bad)


def test_format_then_parse_is_identity() -> None:
    cmds = [Forward(10.0), TurnLeft(120.0), Backward(2.5), TurnRight(45.0)]
    assert format_commands(cmds) == "F10 L120 B2.5 R45"
    assert parse_commands(format_commands(cmds)) == cmds
