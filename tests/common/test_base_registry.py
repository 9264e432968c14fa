from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def KochCurve():  # noqa: N802 (テスト用)
        return []

    assert reg.is_registered("koch_curve")
    assert reg.get("KochCurve") is KochCurve
    assert reg.get("koch-curve") is KochCurve
    assert "koch_curve" in reg.list_all()


def test_duplicate_and_unregister() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def sample():
        return 1

    # 同一オブジェクトの再登録は許容
    reg.register("sample")(sample)

    with pytest.raises(ValueError):
        reg.register("sample")(lambda: 2)

    reg.unregister("Sample")
    assert not reg.is_registered("sample")
    reg.unregister("nonexistent")  # 例外にならない


def test_get_unregistered_raises_key_error() -> None:
    reg = BaseRegistry()
    with pytest.raises(KeyError):
        reg.get("does-not-exist")


def test_invalid_keys() -> None:
    reg = BaseRegistry()
    with pytest.raises(ValueError):
        reg.get("")
    with pytest.raises(TypeError):
        reg.is_registered(3)  # type: ignore[arg-type]


def test_registry_view_is_a_copy() -> None:
    reg = BaseRegistry()

    @reg.register("a")
    def a():
        return 1

    view = reg.registry
    view.clear()
    assert reg.is_registered("a")
    reg.clear()
    assert reg.list_all() == []


@pytest.mark.parametrize(
    "name",
    ["KochSnowflake", "Koch-Snowflake", "Koch_Snowflake", "koch-snowflake", "koch_snowflake"],
)
def test_hyphen_and_camel_case_resolve_to_one_key(name: str) -> None:
    reg = BaseRegistry()

    @reg.register("koch_snowflake")
    def fn():
        return 0

    assert reg.is_registered(name)
    assert reg.get(name) is fn


def test_leading_and_double_underscores_are_preserved() -> None:
    reg = BaseRegistry()

    @reg.register("__weird__")
    def w():
        return 0

    assert reg.get("__weird__") is w
    assert reg.list_all() == ["__weird__"]
