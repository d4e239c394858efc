"""
どこで: `util.color`。
何を: 6 桁 Hex 文字列の検証/正規化と、RGB(0–255) との相互変換を一元化。
なぜ: エンジン/ストレージ/CLI 全体で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

import re

HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")


def _clamp_u8(x: float) -> int:
    v = int(round(x))
    return 0 if v < 0 else 255 if v > 255 else v


def canonical_hex(s: str) -> str:
    """Hex 文字列を `#RRGGBB`（大文字）へ正規化する。

    受理形式: "#RRGGBB", "RRGGBB"（大文字/小文字は不問）。前後の空白も含めそれ以外は拒否。
    """
    if not isinstance(s, str) or HEX_PATTERN.fullmatch(s) is None:
        raise ValueError(f"invalid hex color: {s!r} (expected #RRGGBB)")
    t = s[1:] if s.startswith("#") else s
    return "#" + t.upper()


def hex_to_rgb(s: str) -> tuple[int, int, int]:
    """Hex 文字列から RGB(0–255) を返す。"""
    t = canonical_hex(s)
    return (int(t[1:3], 16), int(t[3:5], 16), int(t[5:7], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """RGB(0–255) を `#RRGGBB` へ変換する（各成分は丸めて [0, 255] にクランプ）。"""
    return f"#{_clamp_u8(r):02X}{_clamp_u8(g):02X}{_clamp_u8(b):02X}"


__all__ = [
    "HEX_PATTERN",
    "canonical_hex",
    "hex_to_rgb",
    "rgb_to_hex",
]
