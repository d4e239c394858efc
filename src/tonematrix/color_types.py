from __future__ import annotations

"""Core color types used by the tonematrix engine.

This module defines the value types the engine computes with: a cyclic
:class:`Hue`, a clamped perceptual :class:`Lch` triple and a
:class:`Color` pairing the canonical hex string with its triple. It also
hosts the adapter functions converting between hex and LCH.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from util.color import canonical_hex, hex_to_rgb, rgb_to_hex

from .engine import ColorEngine, DefaultColorEngine
from .errors import InvalidColorFormat

#: Luminance (0–1) below which a color counts as dark.
DARK_THRESHOLD = 0.5


def _clamp100(x: float) -> float:
    return max(0.0, min(100.0, x))


def _require_finite(name: str, value: float) -> float:
    v = float(value)
    if not math.isfinite(v):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return v


class Hue(float):
    """Hue angle in degrees, always normalized into [0, 360)."""

    __slots__ = ()

    def __new__(cls, degrees: float = 0.0) -> "Hue":
        v = _require_finite("hue", degrees) % 360.0
        # A tiny negative input rounds up to exactly 360.0.
        if v >= 360.0:
            v = 0.0
        return super().__new__(cls, v)

    def shift(self, delta: float) -> "Hue":
        """Return the hue rotated by ``delta`` degrees."""
        return Hue(float(self) + delta)

    def delta(self, other: float) -> float:
        """Signed shortest angular difference ``self - other`` in (-180, 180]."""
        d = (float(self) - float(other)) % 360.0
        return d - 360.0 if d > 180.0 else d

    def __repr__(self) -> str:
        return f"Hue({float(self)!r})"


@dataclass(frozen=True)
class Lch:
    """Perceptual color triple.

    Attributes
    ----------
    L:
        Lightness in [0, 100].
    C:
        Chroma in [0, 100] (percentage of the engine's chroma scale).
    H:
        Hue in degrees, normalized into [0, 360).

    Out-of-range L and C are clamped and H is wrapped at construction, so
    every instance satisfies the range invariants.
    """

    L: float
    C: float
    H: Hue

    def __post_init__(self) -> None:
        object.__setattr__(self, "L", _clamp100(_require_finite("L", self.L)))
        object.__setattr__(self, "C", _clamp100(_require_finite("C", self.C)))
        if not isinstance(self.H, Hue):
            object.__setattr__(self, "H", Hue(self.H))

    def shifted(self, dL: float = 0.0, dC: float = 0.0, dH: float = 0.0) -> "Lch":
        """Return a new triple offset by the given deltas (clamped/wrapped)."""
        return Lch(self.L + dL, self.C + dC, self.H.shift(dH))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.L, self.C, float(self.H))


@dataclass(frozen=True)
class Color:
    """sRGB-representable color with its perceptual triple.

    Attributes
    ----------
    hex:
        Canonical ``#RRGGBB`` (uppercase).
    lch:
        Perceptual triple the color was derived from.
    """

    hex: str
    lch: Lch

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Return (r, g, b) channel values in [0, 255]."""
        return hex_to_rgb(self.hex)

    @property
    def is_dark(self) -> bool:
        return is_dark(self.hex)

    @classmethod
    def from_hex(cls, hex_str: str, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from a hex string, keeping the canonical hex as given."""
        canonical = normalize_hex(hex_str)
        return cls(hex=canonical, lch=to_perceptual(canonical, engine))

    @classmethod
    def from_lch(cls, lch: Lch, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from a perceptual triple, deriving its hex."""
        return cls(hex=from_perceptual(lch, engine), lch=lch)


def normalize_hex(hex_str: object) -> str:
    """Validate ``hex_str`` and return it as uppercase ``#RRGGBB``.

    Raises
    ------
    InvalidColorFormat
        If the value is not a 6-digit hex string with an optional ``#``.
    """
    if not isinstance(hex_str, str):
        raise InvalidColorFormat(hex_str)
    try:
        return canonical_hex(hex_str)
    except ValueError as exc:
        raise InvalidColorFormat(hex_str) from exc


def to_perceptual(hex_str: str, engine: ColorEngine | None = None) -> Lch:
    """Convert a hex color into its perceptual triple."""
    if engine is None:
        engine = DefaultColorEngine()
    r, g, b = hex_to_rgb(normalize_hex(hex_str))
    L, C, h = engine.srgb_to_lch(r / 255.0, g / 255.0, b / 255.0)
    return Lch(L, C, Hue(h))


def from_perceptual(lch: Lch, engine: ColorEngine | None = None) -> str:
    """Convert a perceptual triple into canonical hex, clipping RGB channels."""
    if engine is None:
        engine = DefaultColorEngine()
    r, g, b = engine.lch_to_srgb(lch.L, lch.C, float(lch.H))
    return rgb_to_hex(r * 255.0, g * 255.0, b * 255.0)


def luminance(hex_str: str) -> float:
    """Weighted channel brightness in [0, 1] (0.299 R + 0.587 G + 0.114 B)."""
    r, g, b = hex_to_rgb(normalize_hex(hex_str))
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255.0


def is_dark(hex_str: str) -> bool:
    """Return True when light text should be used on top of the color."""
    return luminance(hex_str) < DARK_THRESHOLD
