from __future__ import annotations

"""Harmony modes and their hue offset profiles.

This module defines :class:`HarmonyMode`, the fixed 9-step hue offset
profile for each mode, and the lightness/chroma shaping rule applied
across the spine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import UnknownHarmonyMode

#: Number of spine steps and the index of the seed within them.
SPINE_LENGTH = 9
CENTER_INDEX = 4


class HarmonyMode(Enum):
    """Hue-distribution strategies used to build the spine."""

    VIBRANT = "vibrant"
    MONOCHROME = "monochrome"
    ANALOGOUS = "analogous"
    TETRADIC = "tetradic"
    QUADRATIC = "quadratic"

    @classmethod
    def from_value(cls, value: "HarmonyMode | str") -> "HarmonyMode":
        """Resolve a mode from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if mode.value == key:
                    return mode
        raise UnknownHarmonyMode(value, tuple(m.value for m in cls))


@dataclass(frozen=True)
class HueOffsetProfile:
    """Signed hue offsets (degrees) for spine indices 0..8."""

    offsets: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.offsets) != SPINE_LENGTH:
            raise ValueError(f"profile needs {SPINE_LENGTH} offsets, got {len(self.offsets)}")
        if self.offsets[CENTER_INDEX] != 0:
            raise ValueError("profile center offset must be 0")

    def __getitem__(self, index: int) -> float:
        return self.offsets[index]

    def __len__(self) -> int:
        return len(self.offsets)

    @classmethod
    def linear(cls, step_degrees: float) -> "HueOffsetProfile":
        """Evenly spaced sweep: ``(i - 4) * step_degrees``."""
        return cls(tuple((i - CENTER_INDEX) * step_degrees for i in range(SPINE_LENGTH)))


@dataclass(frozen=True)
class ShapingRule:
    """Per-step lightness/chroma change away from the spine center.

    Left of center lightness rises and chroma falls by one step per index;
    right of center the signs flip.
    """

    lightness_step: float = 5.0
    chroma_step: float = 5.0

    def deltas(self, index: int) -> Tuple[float, float]:
        """Return (dL, dC) for a spine index."""
        step = index - CENTER_INDEX
        return (-step * self.lightness_step, step * self.chroma_step)


_PROFILES: Dict[HarmonyMode, HueOffsetProfile] = {
    HarmonyMode.VIBRANT: HueOffsetProfile.linear(22.0),
    HarmonyMode.MONOCHROME: HueOffsetProfile.linear(2.0),
    HarmonyMode.ANALOGOUS: HueOffsetProfile.linear(7.5),
    # Sweeps through the 60/180/240 pairs.
    HarmonyMode.TETRADIC: HueOffsetProfile(
        (-180.0, -120.0, -60.0, -30.0, 0.0, 30.0, 60.0, 120.0, 180.0)
    ),
    # Quarter turns with midpoints.
    HarmonyMode.QUADRATIC: HueOffsetProfile(
        (-180.0, -135.0, -90.0, -45.0, 0.0, 45.0, 90.0, 135.0, 180.0)
    ),
}

_SHAPING = ShapingRule(lightness_step=5.0, chroma_step=5.0)

_missing = set(HarmonyMode) - set(_PROFILES)
if _missing:
    raise RuntimeError(f"harmony profiles missing for: {sorted(m.value for m in _missing)}")


def profile_for(mode: HarmonyMode | str) -> HueOffsetProfile:
    """Return the hue offset profile for ``mode``."""
    return _PROFILES[HarmonyMode.from_value(mode)]


def shaping_for(mode: HarmonyMode | str) -> ShapingRule:
    """Return the lightness/chroma shaping rule (identical for every mode)."""
    HarmonyMode.from_value(mode)
    return _SHAPING


__all__ = [
    "SPINE_LENGTH",
    "CENTER_INDEX",
    "HarmonyMode",
    "HueOffsetProfile",
    "ShapingRule",
    "profile_for",
    "shaping_for",
]
