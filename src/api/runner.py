"""
どこで: `api.runner`（実行ランナー）。
何を: 共有 Screen と振る舞い（Animator 等）を受け取り、pyglet ウィンドウ + ModernGL で再生する。
なぜ: 利用者が「Screen と Turtle を結線して渡すだけ」で動くホストループを提供するため。

実行フロー（概要）:
1) 設定解決: fps/背景色/ウィンドウ寸法を引数 → `configs/default.yaml` → 既定値の順に決定。
2) CoordinateTransform: ウィンドウ寸法と `scale` から生成（リサイズで更新）。
3) ウィンドウ/GL: `RenderWindow` を生成し、ModernGL のブレンドを有効化。
4) LineRenderer: Screen + Transform を購読し、変化時のみ GPU へアップロード。
5) フレーム駆動: `FrameClock` で振る舞い → レンダラの順に `tick(dt)`。
6) `ESC` でウィンドウを閉じ、GL リソースを解放。

`init_only=True` は pyglet/ModernGL を読み込まずに設定解決だけを検証して返す（ヘッドレス用）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from animation.behavior import Behavior
from common.logging import setup_default_logging
from engine.core.transform import CoordinateTransform
from engine.render.screen import Screen
from util.color import RGBA, normalize_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSettings:
    """解決済みの実行設定。"""

    width: int
    height: int
    scale: float
    fps: int
    background: RGBA


def resolve_settings(
    *,
    width: int | None = None,
    height: int | None = None,
    scale: float | None = None,
    fps: int | None = None,
    background: Any = None,
) -> RunSettings:
    """引数 > 設定ファイル(`canvas:`) > 既定値 の順で実行設定を決める。"""
    from common.settings import get as _get_settings
    from util.utils import config_section

    canvas = config_section("canvas")

    def _pick(value: Any, key: str, default: Any) -> Any:
        return value if value is not None else canvas.get(key, default)

    w = int(_pick(width, "width", 800))
    h = int(_pick(height, "height", 600))
    if w <= 0 or h <= 0:
        raise ValueError(f"window size must be positive, got {(w, h)}")
    s = float(_pick(scale, "scale", 1.0))
    if s <= 0.0:
        raise ValueError(f"scale must be > 0, got {s}")
    f = max(1, int(_pick(fps, "fps", _get_settings().DEFAULT_FPS)))
    bg = normalize_color(_pick(background, "background_color", (0.0, 0.0, 0.0, 1.0)))
    return RunSettings(width=w, height=h, scale=s, fps=f, background=bg)


def run(
    screen: Screen,
    behaviors: Sequence[Behavior],
    *,
    width: int | None = None,
    height: int | None = None,
    scale: float | None = None,
    fps: int | None = None,
    background: Any = None,
    caption: str = "kamedraw",
    init_only: bool = False,
) -> CoordinateTransform:
    """ウィンドウを開いて `behaviors` を再生し、`screen` を描画する。

    Parameters
    ----------
    screen : Screen
        振る舞い側の Turtle が描き込む共有バッファ。
    behaviors : Sequence[Behavior]
        毎フレーム `tick(dt)` される振る舞い（登録順に呼ばれる）。
    init_only : bool, default False
        True で設定解決と Transform 生成だけを行って返す。

    Returns
    -------
    CoordinateTransform
        ウィンドウと同期している座標変換（init_only 時は初期寸法のもの）。
    """
    setup_default_logging()
    settings = resolve_settings(
        width=width, height=height, scale=scale, fps=fps, background=background
    )
    transform = CoordinateTransform(settings.width, settings.height, settings.scale)
    if init_only:
        return transform

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import moderngl
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import LineRenderer

    window = RenderWindow(
        settings.width, settings.height, caption=caption, bg_color=settings.background
    )
    mgl_ctx = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    renderer = LineRenderer(mgl_ctx, screen, transform)

    def _on_resize(w: int, h: int) -> None:
        transform.resize(w, h)
        fb_w, fb_h = window.get_framebuffer_size()
        mgl_ctx.viewport = (0, 0, fb_w, fb_h)

    window.add_resize_callback(_on_resize)
    window.add_draw_callback(renderer.draw)

    frame_clock = FrameClock([*behaviors, renderer])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / settings.fps)

    @window.event
    def on_key_press(symbol: int, modifiers: int) -> None:  # noqa: ARG001
        if symbol == key.ESCAPE:
            window.close()

    @window.event
    def on_close() -> None:
        pyglet.clock.unschedule(frame_clock.tick)
        renderer.release()
        logger.info("closed after %.1fs", frame_clock.elapsed)

    logger.info(
        "running %d behavior(s) at %d fps (%dx%d, scale=%g)",
        len(behaviors),
        settings.fps,
        settings.width,
        settings.height,
        settings.scale,
    )
    pyglet.app.run()
    return transform


__all__ = ["RunSettings", "resolve_settings", "run"]
