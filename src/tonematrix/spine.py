from __future__ import annotations

"""Spine construction: the 9 hue steps derived from the seed color."""

from typing import Tuple

from .color_types import Color
from .engine import ColorEngine, DefaultColorEngine
from .harmony import CENTER_INDEX, SPINE_LENGTH, HarmonyMode, profile_for, shaping_for


def build_spine(
    seed: Color,
    mode: HarmonyMode | str,
    engine: ColorEngine | None = None,
) -> Tuple[Color, ...]:
    """Apply the mode's hue profile and shaping rule to ``seed``.

    Index 4 is the seed object itself, so the center never drifts through
    a conversion round trip. Every other index offsets the seed's hue by
    the profile value and its lightness/chroma by the shaping deltas.
    """
    if engine is None:
        engine = DefaultColorEngine()
    profile = profile_for(mode)
    shaping = shaping_for(mode)

    spine: list[Color] = []
    for i in range(SPINE_LENGTH):
        if i == CENTER_INDEX:
            spine.append(seed)
            continue
        dL, dC = shaping.deltas(i)
        lch = seed.lch.shifted(dL, dC, profile[i])
        spine.append(Color.from_lch(lch, engine))
    return tuple(spine)


__all__ = ["build_spine"]
