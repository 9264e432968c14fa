"""
どこで: `patterns` のレジストリ層（関数専用）。
何を: `@pattern` デコレータで命令列ジェネレータを登録し、取得/一覧/検査を提供。
なぜ: 命令列の生成器を名前で解決できるようにし、設定ファイルやデモから一貫 API で呼ぶため。

概要:
- 登録対象は「関数」のみ（`list[Command]` を返す純関数）。
- デコレータは名前省略可（`@pattern` / `@pattern()`）と明示名指定をサポート。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry
from turtles.commands import Command

PatternFn = Callable[..., list[Command]]

_pattern_registry = BaseRegistry()


def pattern(arg: Any | None = None, /, name: str | None = None):
    """命令列ジェネレータをレジストリに登録するデコレータ。

    使用例:
    - `@pattern` / `@pattern()`                        → 関数名から自動推論。
    - `@pattern("custom")` / `@pattern(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@pattern は関数のみ登録可能です: got {obj!r}")
        return _pattern_registry.register(resolved_name)(obj)

    # 直付け (@pattern)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@pattern("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_pattern(name: str) -> PatternFn:
    """登録された命令列ジェネレータを取得（未登録は KeyError）。"""
    return _pattern_registry.get(name)


def generate(name: str, **params: Any) -> list[Command]:
    """名前で解決したジェネレータを呼び、命令列を返す。"""
    return list(get_pattern(name)(**params))


def list_patterns() -> list[str]:
    return sorted(_pattern_registry.list_all())


def is_pattern_registered(name: str) -> bool:
    return _pattern_registry.is_registered(name)


def clear_registry() -> None:
    """レジストリをクリア（テスト用）。"""
    _pattern_registry.clear()


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _pattern_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _pattern_registry.registry


__all__ = [
    "pattern",
    "get_pattern",
    "generate",
    "list_patterns",
    "is_pattern_registered",
    "clear_registry",
    "unregister",
    "get_registry",
]
