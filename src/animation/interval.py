"""
どこで: `animation.interval`
何を: 単調増加する経過時間を受け取り、周期境界をまたいだ時だけ True を返すゲート `IntervalChecker`。
なぜ: アニメーションの歩進レートをフレームレートから切り離すため。

判定は `floor(elapsed / interval)` の増加で行う。同一周期内で何度ポーリングしても
発火は 1 回、複数の境界を一度に飛び越えても 1 回の呼び出しで返す True は 1 つ。
"""

from __future__ import annotations

import math

# 0.3 / 0.1 = 2.9999999999999996 のような二進丸めを境界として扱うための許容量
_EPS = 1e-9


class IntervalChecker:
    def __init__(self, interval: float) -> None:
        interval = float(interval)
        if not math.isfinite(interval) or interval <= 0.0:
            raise ValueError(f"interval must be a finite value > 0, got {interval}")
        self._interval = interval
        self._base = 0.0
        self._last = 0

    @property
    def interval(self) -> float:
        return self._interval

    def quotient(self, elapsed: float) -> int:
        return int(math.floor((elapsed - self._base) / self._interval + _EPS))

    def check(self, elapsed: float) -> bool:
        """新しい周期に入っていれば True を返し、現在の周期を記録する。"""
        q = self.quotient(elapsed)
        if q > self._last:
            self._last = q
            return True
        return False

    def reset(self, elapsed: float = 0.0) -> None:
        """`elapsed` を新しい基準時刻としてゲートを再始動する。"""
        self._base = float(elapsed)
        self._last = 0


__all__ = ["IntervalChecker"]
