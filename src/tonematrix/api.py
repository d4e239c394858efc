from __future__ import annotations

"""High-level public API for generating tone matrices.

This module provides :func:`generate_palette`, which validates the seed
and mode, builds the spine, expands it into the 4x9 tone matrix, labels
every entry and picks the featured set.
"""

import logging
from typing import Optional, Tuple

from common import settings

from .color_types import Color
from .engine import ColorEngine, DefaultColorEngine
from .harmony import HarmonyMode
from .naming import ColorNamer
from .palette import (
    Namer,
    PaletteEntry,
    PaletteResult,
    apply_edit,
    label_entries,
    select_featured,
)
from .spine import build_spine
from .tones import ColorGrid, expand

logger = logging.getLogger(__name__)


def resolve_mode(mode: HarmonyMode | str | None) -> HarmonyMode:
    """Return ``mode`` as a HarmonyMode, using the configured default for None."""
    if mode is None:
        return HarmonyMode.from_value(settings.get().DEFAULT_MODE)
    return HarmonyMode.from_value(mode)


def compute_matrix(
    seed_hex: str,
    mode: HarmonyMode | str | None = None,
    engine: Optional[ColorEngine] = None,
) -> ColorGrid:
    """Compute the 4x9 color grid without names.

    This is the deterministic stage of :func:`generate_palette`.
    """
    seed_mode = resolve_mode(mode)
    if engine is None:
        engine = DefaultColorEngine()
    seed = Color.from_hex(seed_hex, engine)
    spine = build_spine(seed, seed_mode, engine)
    return expand(spine, engine)


def generate_palette(
    seed_hex: str,
    mode: HarmonyMode | str | None = None,
    *,
    namer: Optional[Namer] = None,
    engine: Optional[ColorEngine] = None,
) -> PaletteResult:
    """Generate a tone matrix palette from a seed color.

    Parameters
    ----------
    seed_hex:
        Mother color as ``#RRGGBB`` or ``RRGGBB`` (case-insensitive).
    mode:
        HarmonyMode or its name. If None, the configured default mode
        (``vibrant`` unless overridden) is used.
    namer:
        Callable mapping a hex string to a display name. If None, a
        :class:`tonematrix.naming.ColorNamer` is created.
    engine:
        Optional ColorEngine for color space conversions. If None,
        DefaultColorEngine is used.

    Returns
    -------
    PaletteResult
        Featured set (5), matrix (4x9) and the resolved mode.

    Raises
    ------
    InvalidColorFormat
        If ``seed_hex`` is not a 6-digit hex color.
    UnknownHarmonyMode
        If ``mode`` is not one of the harmony modes.
    """
    seed_mode = resolve_mode(mode)
    grid = compute_matrix(seed_hex, seed_mode, engine)
    if namer is None:
        namer = ColorNamer()
    matrix = label_entries(grid, namer)
    logger.debug("generated %s palette for %s", seed_mode.value, grid[2][4].hex)
    return PaletteResult(featured=select_featured(matrix), matrix=matrix, mode=seed_mode)


def generate_arc_palette(seed_hex: str, *, namer: Optional[Namer] = None) -> Tuple[PaletteEntry, ...]:
    """Return only the five featured entries for the default mode."""
    return generate_palette(seed_hex, namer=namer).featured


__all__ = [
    "generate_palette",
    "generate_arc_palette",
    "compute_matrix",
    "resolve_mode",
    "apply_edit",
]
