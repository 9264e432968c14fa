"""
どこで: `engine.render` のシェーダ定義。
何を: 線分ごとの太さ/色を持つ頂点を受け取り、ジオメトリシェーダで四角形へ展開する GLSL。
なぜ: `glLineWidth` に依存せず、任意の太さの線を 1 回のドローコールで描くため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec4 in_color;
in float in_width;
out vec4 v_color;
out float v_width;
void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
    v_color = in_color;
    v_width = in_width;
}
"""

GEOMETRY_SHADER = """
#version 330
layout(lines) in;
layout(triangle_strip, max_vertices = 4) out;
uniform vec2 viewport;
in vec4 v_color[];
in float v_width[];
out vec4 g_color;
void main() {
    vec2 p0 = gl_in[0].gl_Position.xy;
    vec2 p1 = gl_in[1].gl_Position.xy;
    vec2 dir = (p1 - p0) * viewport;
    float len = length(dir);
    vec2 n = len > 0.0 ? vec2(-dir.y, dir.x) / len : vec2(0.0, 1.0);
    // 太さ [px] をクリップ空間の半幅へ
    vec2 off = n * v_width[0] / viewport;
    g_color = v_color[0];
    gl_Position = vec4(p0 + off, 0.0, 1.0); EmitVertex();
    gl_Position = vec4(p0 - off, 0.0, 1.0); EmitVertex();
    gl_Position = vec4(p1 + off, 0.0, 1.0); EmitVertex();
    gl_Position = vec4(p1 - off, 0.0, 1.0); EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 g_color;
out vec4 frag_color;
void main() {
    frag_color = g_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """線描画用のプログラムを生成する。"""
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )
