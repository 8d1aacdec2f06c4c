"""
どこで: `engine.render` のシェーダ定義。
何を: MVP 行列で頂点を変換し、単色（RGBA）で塗る GLSL 330 プログラムを生成。
なぜ: UI プレーンはライティング不要の単色描画のみで足りるため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 mvp;
in vec3 in_vert;
void main() {
    gl_Position = mvp * vec4(in_vert, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """単色描画用のプログラムを作る。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
