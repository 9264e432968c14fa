"""
どこで: `engine.core` サブパッケージ。
何を: Vector2・CoordinateTransform・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: 幾何と時間の基盤を最内層にまとめ、上位層（turtles/animation/render）から再利用するため。
"""

from .frame_clock import FrameClock
from .tickable import Tickable
from .transform import CoordinateTransform
from .vector import Vector2

__all__ = ["Vector2", "CoordinateTransform", "Tickable", "FrameClock"]
