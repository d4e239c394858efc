from __future__ import annotations

"""Color conversion engine between sRGB and perceptual LCH.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB (D65) and OKLCH via OKLab.

Both lightness and chroma are expressed on a 0–100 scale: ``L`` is OKLab
lightness times 100 and ``C`` is OKLCH chroma as a percentage of
:data:`CHROMA_SCALE` (the CSS Color 4 convention where ``100% == 0.4``).
"""

import math
from typing import Protocol, Tuple


LCH = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

#: OKLCH chroma that maps to C = 100.
CHROMA_SCALE = 0.4

#: OKLab chroma below which a color is treated as achromatic (hue = 0).
ACHROMATIC_EPSILON = 1e-7


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_lch(self, r: float, g: float, b: float) -> LCH: ...

    def lch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65)."""

    def srgb_to_lch(self, r: float, g: float, b: float) -> LCH:
        """Convert sRGB in [0, 1] to (L, C, h) with L, C in [0, 100]."""
        rl, gl, bl = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

        # Linear RGB to LMS (OKLab)
        l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
        m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
        s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

        l_ = math.copysign(abs(l) ** (1 / 3), l)
        m_ = math.copysign(abs(m) ** (1 / 3), m)
        s_ = math.copysign(abs(s) ** (1 / 3), s)

        L_ok = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
        a_ok = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
        b_ok = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

        C = math.sqrt(a_ok * a_ok + b_ok * b_ok)
        if C < ACHROMATIC_EPSILON:
            return (_clamp100(L_ok * 100.0), 0.0, 0.0)
        h_deg = math.degrees(math.atan2(b_ok, a_ok)) % 360.0
        return (_clamp100(L_ok * 100.0), _clamp100(C / CHROMA_SCALE * 100.0), h_deg)

    def lch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert (L, C, h) with L, C in [0, 100] to sRGB clipped to [0, 1]."""
        L_ok = _clamp100(L) / 100.0
        C_ok = _clamp100(C) / 100.0 * CHROMA_SCALE
        h_rad = math.radians(h % 360.0)

        a = C_ok * math.cos(h_rad)
        b = C_ok * math.sin(h_rad)

        # OKLab to LMS
        l_ = L_ok + 0.3963377774 * a + 0.2158037573 * b
        m_ = L_ok - 0.1055613458 * a - 0.0638541728 * b
        s_ = L_ok - 0.0894841775 * a - 1.2914855480 * b

        l = l_**3
        m = m_**3
        s = s_**3

        rl = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
        gl = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
        bl = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

        return (_linear_to_srgb(rl), _linear_to_srgb(gl), _linear_to_srgb(bl))


def _clamp100(x: float) -> float:
    return max(0.0, min(100.0, x))


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0:
        return 0.0
    if c >= 1.0:
        return 1.0
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055
