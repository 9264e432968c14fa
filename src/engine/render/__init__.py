"""
どこで: `engine.render` サブパッケージ。
何を: 共有線分バッファ Screen・LineSegment・提示ステップ present と GPU レンダラを提供。
なぜ: 線分の蓄積と描画の責務を分離し、GPU リソース管理を局所化するため。
"""

from .present import present
from .screen import Screen
from .types import RGBA, LineSegment

__all__ = ["Screen", "LineSegment", "RGBA", "present"]
