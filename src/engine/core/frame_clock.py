"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定・累積経過時間・ループ管理）。
なぜ: ホストループから呼ぶだけで複数コンポーネントの更新順と時間軸を統一するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """これまでに配った dt の累積 [秒]。"""
        return self._elapsed

    # pyglet の schedule_interval から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()  # 他フレームワーク用
            dt = now - self._last_time
            self._last_time = now
        # 時計の巻き戻り等で負の dt は 0 に丸める
        dt = max(0.0, float(dt))
        self._elapsed += dt

        for t in self._tickables:
            t.tick(dt)
