"""
どこで: `util.color`。
何を: 色指定の正規化（Hex, RGBA 0–1, RGBA 0–255）を一元化。
なぜ: TurtleConfig/ランナー/レンダラで同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from common.types import RGBA


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a])（全要素が 0..1 なら 0–1 とみなし、それ以外は 0–255）
    - 返値: (r,g,b,a)（0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        channels = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(0.0 <= c <= 1.0 for c in channels):
        if len(channels) == 3:
            channels.append(1.0)
        r, g, b, a = channels
        return (r, g, b, a)
    # 0–255 とみなし、整数丸め → 0–1 へスケール
    if len(channels) == 3:
        channels.append(255.0)
    r, g, b, a = (max(0, min(255, int(round(c)))) / 255.0 for c in channels)
    return (r, g, b, a)


__all__ = [
    "RGBA",
    "parse_hex_color_str",
    "normalize_color",
]
