"""
どこで: `animation` パッケージ。
何を: 周期ゲート IntervalChecker・命令列再生 Animator・振る舞い Behavior/SpiralBehavior を提供。
なぜ: 「何を描くか（命令列）」と「いつ描くか（周期）」を分離するため。
"""

from .animator import Animator
from .behavior import Behavior, SpiralBehavior
from .interval import IntervalChecker

__all__ = ["Animator", "Behavior", "SpiralBehavior", "IntervalChecker"]
