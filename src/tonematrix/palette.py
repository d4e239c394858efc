from __future__ import annotations

"""Container types for generated palettes.

This module defines :class:`PaletteEntry` and :class:`PaletteResult`, the
featured-set selection, and :func:`apply_edit`, which keeps every entry
sharing an edited hex consistent across ``featured`` and ``matrix``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple, Union

from .color_types import Color, Lch, is_dark, normalize_hex, to_perceptual
from .harmony import SPINE_LENGTH, HarmonyMode
from .naming import ColorNamer
from .tones import ROW_COUNT, ColorGrid

logger = logging.getLogger(__name__)

Namer = Callable[[str], str]

#: (row, col) of the featured entries: mother, lightest, vibrant, contrast, pop.
FEATURED_COORDS: Tuple[Tuple[int, int], ...] = ((2, 4), (0, 1), (1, 3), (3, 7), (2, 6))


@dataclass(frozen=True)
class PaletteEntry:
    """A palette color plus display metadata.

    Attributes
    ----------
    hex:
        Canonical ``#RRGGBB`` (uppercase).
    name:
        Human-readable label.
    is_dark:
        True when light text reads better on top of the color.
    lch:
        Perceptual triple the entry was computed from.
    """

    hex: str
    name: str
    is_dark: bool
    lch: Lch

    @classmethod
    def from_color(cls, color: Color, namer: Namer) -> "PaletteEntry":
        return cls(hex=color.hex, name=namer(color.hex), is_dark=is_dark(color.hex), lch=color.lch)

    @classmethod
    def from_hex(cls, hex_str: str, name: str) -> "PaletteEntry":
        canonical = normalize_hex(hex_str)
        return cls(
            hex=canonical,
            name=name,
            is_dark=is_dark(canonical),
            lch=to_perceptual(canonical),
        )


Matrix = Tuple[Tuple[PaletteEntry, ...], ...]


@dataclass(frozen=True)
class FeaturedSlot:
    """Location of an entry in ``PaletteResult.featured``."""

    index: int


@dataclass(frozen=True)
class MatrixCell:
    """Location of an entry in ``PaletteResult.matrix``."""

    row: int
    col: int


Location = Union[FeaturedSlot, MatrixCell]


@dataclass(frozen=True)
class PaletteResult:
    """Engine output.

    Attributes
    ----------
    featured:
        Five entries copied from :data:`FEATURED_COORDS`; index 0 is the
        unmodified seed.
    matrix:
        4 rows (highlight, muted, base, shadow) of 9 entries.
    mode:
        Harmony mode used to build the spine.
    """

    featured: Tuple[PaletteEntry, ...]
    matrix: Matrix
    mode: HarmonyMode

    def __post_init__(self) -> None:
        if len(self.featured) != len(FEATURED_COORDS):
            raise ValueError(f"featured must have {len(FEATURED_COORDS)} entries.")
        if len(self.matrix) != ROW_COUNT or any(len(r) != SPINE_LENGTH for r in self.matrix):
            raise ValueError(f"matrix must be {ROW_COUNT}x{SPINE_LENGTH}.")

    def flat(self) -> List[PaletteEntry]:
        """Matrix entries in row-major order (36 items)."""
        return [e for row in self.matrix for e in row]

    def entry_at(self, location: Location) -> PaletteEntry:
        if isinstance(location, FeaturedSlot):
            if not 0 <= location.index < len(self.featured):
                raise IndexError(f"featured index out of range: {location.index}")
            return self.featured[location.index]
        if isinstance(location, MatrixCell):
            if not (0 <= location.row < ROW_COUNT and 0 <= location.col < SPINE_LENGTH):
                raise IndexError(f"matrix cell out of range: ({location.row}, {location.col})")
            return self.matrix[location.row][location.col]
        raise TypeError(f"unsupported location: {location!r}")

    def locations_of(self, hex_str: str) -> List[Location]:
        """Return every location whose entry has ``hex_str``."""
        target = normalize_hex(hex_str)
        found: List[Location] = [
            FeaturedSlot(i) for i, e in enumerate(self.featured) if e.hex == target
        ]
        for r, row in enumerate(self.matrix):
            found.extend(MatrixCell(r, c) for c, e in enumerate(row) if e.hex == target)
        return found

    def with_replaced(self, replacements: Dict[str, PaletteEntry]) -> "PaletteResult":
        """Return a copy where every entry whose hex is a key is replaced."""

        def swap(e: PaletteEntry) -> PaletteEntry:
            return replacements.get(e.hex, e)

        return PaletteResult(
            featured=tuple(swap(e) for e in self.featured),
            matrix=tuple(tuple(swap(e) for e in row) for row in self.matrix),
            mode=self.mode,
        )


def label_entries(grid: ColorGrid, namer: Namer) -> Matrix:
    """Decorate a color grid with names and dark/light flags."""
    return tuple(tuple(PaletteEntry.from_color(c, namer) for c in row) for row in grid)


def select_featured(matrix: Sequence[Sequence[PaletteEntry]]) -> Tuple[PaletteEntry, ...]:
    """Pick the featured entries at :data:`FEATURED_COORDS`."""
    return tuple(matrix[r][c] for r, c in FEATURED_COORDS)


def apply_edit(
    result: PaletteResult,
    location: Location,
    new_hex: str,
    namer: Namer | None = None,
) -> PaletteResult:
    """Replace the color at ``location`` and every entry sharing its hex.

    Entries are matched by hex value, not position, in both ``featured``
    and ``matrix``. The input result is left untouched.

    Parameters
    ----------
    result:
        Palette to edit.
    location:
        FeaturedSlot or MatrixCell of the edited swatch.
    new_hex:
        Replacement color; validated like a seed.
    namer:
        Label generator for the new color. If None, a default
        :class:`tonematrix.naming.ColorNamer` is used.
    """
    canonical = normalize_hex(new_hex)
    old = result.entry_at(location)
    if namer is None:
        namer = ColorNamer()
    replacement = PaletteEntry.from_hex(canonical, namer(canonical))
    logger.debug("edit %s: %s -> %s", location, old.hex, canonical)
    return result.with_replaced({old.hex: replacement})


__all__ = [
    "FEATURED_COORDS",
    "PaletteEntry",
    "PaletteResult",
    "FeaturedSlot",
    "MatrixCell",
    "Location",
    "label_entries",
    "select_featured",
    "apply_edit",
]
