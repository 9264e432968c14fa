"""
どこで: `engine.render` の高レベル描画。
何を: `present()` の `draw_line` コラボレータとして線分を頂点配列へ集め、ModernGL で描画。
なぜ: Screen の変更（version）かビューポート変更があった時だけ再アップロードし、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl as mgl
import numpy as np

from common.settings import get as get_settings
from engine.core.tickable import Tickable
from engine.core.transform import CoordinateTransform
from engine.core.vector import Vector2

from .line_mesh import FLOATS_PER_VERTEX, LineMesh
from .present import present_segments
from .screen import Screen
from .shader import Shader
from .types import RGBA


def build_projection(width: float, height: float) -> np.ndarray:
    """表示座標（px, Y 下向き, 左上原点）→ クリップ空間の正射影行列（ModernGL 用の転置済み）。"""
    w = max(1.0, float(width))
    h = max(1.0, float(height))
    proj = np.array(
        [
            [2 / w, 0, 0, -1],
            [0, -2 / h, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


def lines_to_vertices(lines: list[tuple[float, ...]]) -> np.ndarray:
    """`(x0, y0, x1, y1, w, r, g, b, a)` の列を `(2N, 7)` 頂点配列へ展開する。"""
    if not lines:
        return np.empty((0, FLOATS_PER_VERTEX), dtype=np.float32)
    arr = np.asarray(lines, dtype=np.float32)
    n = arr.shape[0]
    verts = np.empty((2 * n, FLOATS_PER_VERTEX), dtype=np.float32)
    verts[0::2, 0:2] = arr[:, 0:2]
    verts[1::2, 0:2] = arr[:, 2:4]
    verts[0::2, 2:6] = arr[:, 5:9]
    verts[1::2, 2:6] = arr[:, 5:9]
    verts[0::2, 6] = arr[:, 4]
    verts[1::2, 6] = arr[:, 4]
    return verts


class LineRenderer(Tickable):
    """
    Screen の内容を毎フレーム GPU に送り込む作業を管理。
    `draw_line` は present() から呼ばれ、実際の GPU 転送は 1 フレームに 1 回にまとめる。
    """

    def __init__(
        self,
        mgl_context: Any,
        screen: Screen,
        transform: CoordinateTransform,
        *,
        reserve_bytes: int | None = None,
    ):
        self.ctx = mgl_context
        self.screen = screen
        self.transform = transform
        self._logger = logging.getLogger(__name__)

        settings = get_settings()
        reserve = reserve_bytes or settings.MESH_RESERVE_BYTES
        self._debug = bool(settings.RENDER_DEBUG)

        self.program = Shader.create_shader(mgl_context)
        self.gpu = LineMesh(mgl_context, self.program, initial_reserve=int(reserve))

        self._pending: list[tuple[float, ...]] = []
        # 直近アップロード時の (screen version, viewport)
        self._uploaded_key: tuple[int, tuple[float, float]] | None = None

    # --------------------------------------------------------------------- #
    # draw_line コラボレータ                                                   #
    # --------------------------------------------------------------------- #
    def draw_line(self, start: Vector2, end: Vector2, thickness: float, color: RGBA) -> None:
        r, g, b, a = color
        self._pending.append((start.x, start.y, end.x, end.y, thickness, r, g, b, a))

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """Screen かビューポートに変化があれば頂点を作り直して GPU へ転送。"""
        segments, version = self.screen.snapshot_with_version()
        key = (version, self.transform.viewport)
        if key == self._uploaded_key:
            return
        self._pending = []
        line_count = present_segments(segments, self.transform, self.draw_line)
        verts = lines_to_vertices(self._pending)
        self._pending = []
        if self._debug:
            self._logger.debug(
                "Uploading lines: lines=%d (%.1f KB)", line_count, verts.nbytes / 1024.0
            )
        self.gpu.upload(verts)
        self._uploaded_key = key

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """GPU に送ったデータを画面に描画"""
        width, height = self.transform.viewport
        self.program["projection"].write(build_projection(width, height).tobytes())
        self.program["viewport"].value = (max(1.0, width), max(1.0, height))
        self.gpu.render(mgl.LINES)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()
        self.program.release()


__all__ = ["LineRenderer", "build_projection", "lines_to_vertices"]
