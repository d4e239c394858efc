from __future__ import annotations

"""Tone expansion: four tonal rows derived from every spine color.

This module defines :class:`ToneRow` and the fixed (dL, dC, dH) deltas
that turn the 9-color spine into the 4x9 tone matrix. The deltas do not
depend on the harmony mode.
"""

from enum import IntEnum
from typing import Dict, Sequence, Tuple

from .color_types import Color
from .engine import ColorEngine, DefaultColorEngine
from .harmony import SPINE_LENGTH

ColorGrid = Tuple[Tuple[Color, ...], ...]


class ToneRow(IntEnum):
    """Matrix row indices."""

    HIGHLIGHT = 0
    MUTED = 1
    BASE = 2
    SHADOW = 3


TONE_DELTAS: Dict[ToneRow, Tuple[float, float, float]] = {
    ToneRow.HIGHLIGHT: (25.0, -15.0, -5.0),
    ToneRow.MUTED: (5.0, -25.0, 0.0),
    ToneRow.BASE: (0.0, 0.0, 0.0),
    ToneRow.SHADOW: (-25.0, 10.0, 5.0),
}

ROW_COUNT = len(ToneRow)


def expand(spine: Sequence[Color], engine: ColorEngine | None = None) -> ColorGrid:
    """Expand a 9-color spine into the 4x9 tone matrix.

    The BASE row holds the spine colors themselves.
    """
    if len(spine) != SPINE_LENGTH:
        raise ValueError(f"spine must have {SPINE_LENGTH} colors, got {len(spine)}")
    if engine is None:
        engine = DefaultColorEngine()

    rows: list[Tuple[Color, ...]] = []
    for row in ToneRow:
        if row is ToneRow.BASE:
            rows.append(tuple(spine))
            continue
        dL, dC, dH = TONE_DELTAS[row]
        rows.append(tuple(Color.from_lch(c.lch.shifted(dL, dC, dH), engine) for c in spine))
    return tuple(rows)


__all__ = ["ToneRow", "TONE_DELTAS", "ROW_COUNT", "ColorGrid", "expand"]
