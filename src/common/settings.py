"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`KAME_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int


@dataclass
class _Settings:
    # Turtle: 非有限入力を無視した際に警告ログを出すか
    WARN_DEGENERATE: bool = True

    # Renderer
    RENDER_DEBUG: bool = False
    MESH_RESERVE_BYTES: int = 1 * 1024 * 1024

    # Runner
    DEFAULT_FPS: int = 60


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - 容量/FPS は下限丸めを適用。
    """
    _settings.WARN_DEGENERATE = env_bool("KAME_WARN_DEGENERATE", True)

    _settings.RENDER_DEBUG = env_bool("KAME_RENDER_DEBUG", False)
    _settings.MESH_RESERVE_BYTES = (
        env_int("KAME_MESH_RESERVE_BYTES", 1 * 1024 * 1024, min_value=4096) or 4096
    )

    _settings.DEFAULT_FPS = env_int("KAME_DEFAULT_FPS", 60, min_value=1) or 60


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
