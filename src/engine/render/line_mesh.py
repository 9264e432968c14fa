"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 線分頂点（位置/色/太さ）の VBO と VAO の確保・更新・解放を担当。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

# 1 頂点 = in_vert(2f) + in_color(4f) + in_width(1f)
VERTEX_FORMAT = "2f 4f 1f"
VERTEX_ATTRIBUTES = ("in_vert", "in_color", "in_width")
FLOATS_PER_VERTEX = 7


class LineMesh:
    """
    GPU に線分頂点を送り込む作業を管理
    """

    def __init__(self, ctx: Any, program: Any, initial_reserve: int = 1024 * 1024):
        """
        ctx: moderngl コンテキスト
        program: `Shader.create_shader` で作ったプログラム
        initial_reserve: 初期 VBO 確保量 [bytes]。不足時は自動拡張。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve
        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program, [(self.vbo, VERTEX_FORMAT, *VERTEX_ATTRIBUTES)]
        )

    def _ensure_capacity(self, nbytes: int) -> None:
        """データが大きくなったら VBO を再確保し VAO を張り直す"""
        if nbytes <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(nbytes, 2 * self.initial_reserve), dynamic=True)
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """`(V, 7)` float32 の頂点配列を GPU へ送る。"""
        data = np.ascontiguousarray(vertices, dtype=np.float32)
        if data.size == 0:
            self.vertex_count = 0
            return
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())
        self.vertex_count = int(data.shape[0])

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
