"""
どこで: `engine.render` の共有線分バッファ。
何を: 複数の Turtle が追記し、描画側がスナップショットを読む、スレッド安全な `Screen`。
なぜ: 描画順（=追加順）を保ったまま、append/clear/snapshot を線形化可能にするため。

契約:
- `append`/`extend` は末尾へ追加する。個別削除は無い（縮めるのは `clear` のみ）。
- `snapshot` は不変タプルを返す。`clear` と並走しても前後どちらか一方の状態しか見えない。
- `version` は変更のたびに単調増加する（描画側の再アップロード判定用）。
- 容量上限は持たない。

シングルトンにはしない。ホスト側が Turtle と Screen を明示的に結線する。
"""

from __future__ import annotations

import threading
from typing import Iterable

from .types import LineSegment


class Screen:
    """線分の順序付きバッファ（ロックで保護）。"""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._segments: list[LineSegment] = []
        self._version = 0

    def append(self, segment: LineSegment) -> None:
        with self._lock:
            self._segments.append(segment)
            self._version += 1

    def extend(self, segments: Iterable[LineSegment]) -> None:
        """複数の線分を 1 回のロック保持でまとめて追加する。"""
        batch = list(segments)
        if not batch:
            return
        with self._lock:
            self._segments.extend(batch)
            self._version += 1

    def clear(self) -> None:
        with self._lock:
            self._segments.clear()
            self._version += 1

    def snapshot(self) -> tuple[LineSegment, ...]:
        """現在の線分列の一貫したコピーを返す。"""
        with self._lock:
            return tuple(self._segments)

    def snapshot_with_version(self) -> tuple[tuple[LineSegment, ...], int]:
        """スナップショットとその時点の version を同一ロック区間で取得する。"""
        with self._lock:
            return tuple(self._segments), self._version

    def version(self) -> int:
        with self._lock:
            return self._version

    def __len__(self) -> int:
        with self._lock:
            return len(self._segments)

    def __repr__(self) -> str:
        return f"Screen(segments={len(self)}, version={self.version()})"


__all__ = ["Screen"]
