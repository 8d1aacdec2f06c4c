"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 三角形メッシュ 1 つ分の VBO/IBO/VAO の確保・更新・解放を担当する `QuadMesh`。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class QuadMesh:
    """
    GPU に頂点/インデックスを送り、三角形として描画できる状態を保持する。
    """

    def __init__(self, ctx: Any, program: Any, initial_reserve: int = 64 * 1024):
        """
        ctx: moderngl コンテキスト
        program: `in_vert`（vec3）を受け取るシェーダープログラム
        initial_reserve: VBO/IBO の初期確保量（バイト）。足りなければ自動拡張。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert", index_buffer=self.ibo)

        self.index_count: int = 0

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int, ibo_size: int) -> None:
        """データが大きくなったら GPU のバッファを再確保"""
        grown = False
        if vbo_size > self.vbo.size:
            self.vbo.release()
            self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve), dynamic=True)
            grown = True

        if ibo_size > self.ibo.size:
            self.ibo.release()
            self.ibo = self.ctx.buffer(reserve=max(ibo_size, self.initial_reserve), dynamic=True)
            grown = True

        # VAO は VBO/IBO が差し替わったときだけ張り直す
        if grown:
            self.vao.release()
            self.vao = self.ctx.simple_vertex_array(
                self.program, self.vbo, "in_vert", index_buffer=self.ibo
            )

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        """float32 `(N, 3)` 頂点と uint32 インデックスを GPU へ送る。"""
        vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        indices = np.ascontiguousarray(indices, dtype=np.uint32)
        self._ensure_capacity(vertices.nbytes, indices.nbytes)

        self.vbo.orphan()
        self.vbo.write(vertices.tobytes())

        self.ibo.orphan()
        self.ibo.write(indices.tobytes())

        self.index_count = int(len(indices))

    def render(self, mode: int) -> None:
        if self.index_count > 0:
            self.vao.render(mode, self.index_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.ibo.release()
        self.vao.release()
