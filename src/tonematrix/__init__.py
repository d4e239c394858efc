"""Public entrypoint for the tonematrix palette engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``tonematrix`` instead of individual
submodules.
"""

from .api import apply_edit, compute_matrix, generate_arc_palette, generate_palette
from .color_types import Color, Hue, Lch, from_perceptual, is_dark, normalize_hex, to_perceptual
from .errors import InvalidColorFormat, PaletteError, UnknownHarmonyMode
from .export import EXPORT_FORMAT_OPTIONS, HARMONY_MODE_OPTIONS, ExportFormat, export_palette
from .harmony import HarmonyMode, HueOffsetProfile, profile_for
from .naming import ColorNamer, nearest_color_name
from .palette import (
    FEATURED_COORDS,
    FeaturedSlot,
    MatrixCell,
    PaletteEntry,
    PaletteResult,
)
from .storage import flatten_matrix, from_record, rechunk_matrix, to_record
from .tones import ToneRow

__all__ = [
    "generate_palette",
    "generate_arc_palette",
    "compute_matrix",
    "apply_edit",
    "Color",
    "Hue",
    "Lch",
    "to_perceptual",
    "from_perceptual",
    "is_dark",
    "normalize_hex",
    "PaletteError",
    "InvalidColorFormat",
    "UnknownHarmonyMode",
    "HarmonyMode",
    "HueOffsetProfile",
    "profile_for",
    "ToneRow",
    "ColorNamer",
    "nearest_color_name",
    "FEATURED_COORDS",
    "FeaturedSlot",
    "MatrixCell",
    "PaletteEntry",
    "PaletteResult",
    "flatten_matrix",
    "rechunk_matrix",
    "to_record",
    "from_record",
    "ExportFormat",
    "export_palette",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
