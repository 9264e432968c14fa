"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけ。
- ハンドラ設定はランナー（`api.runner`）/デモから 1 度だけ適用する。
- 既にアプリ側で設定済みなら何もしない（no-op）。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return int(getattr(logging, level.upper(), logging.INFO))
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    Returns
    -------
    bool
        今回の呼び出しで設定を適用した場合 True。ルートに既存ハンドラがあれば False。
    """
    root = logging.getLogger()
    if root.handlers:
        # アプリ側で構成済みとみなす
        return False
    logging.basicConfig(level=_resolve_level(level), format=_FORMAT)
    return True


__all__ = ["setup_default_logging"]
