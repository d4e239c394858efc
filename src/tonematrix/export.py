from __future__ import annotations

"""Text exports for generated palettes.

This module exposes label/enum pairs for harmony modes and export
formats, and :func:`export_palette`, which renders a PaletteResult as
design tokens, Procreate swatches, CSS variables, a hex list or the
storage JSON record.
"""

import colorsys
import json
from enum import Enum
from typing import Callable, Dict, List

from common import settings
from util.color import hex_to_rgb

from .harmony import HarmonyMode
from .palette import PaletteResult
from .storage import flatten_matrix, to_record

#: Procreate palettes hold at most 30 swatches.
PROCREATE_MAX_SWATCHES = 30


class ExportFormat(Enum):
    """Supported export formats."""

    W3C_TOKENS = "w3c_tokens"
    PROCREATE = "procreate"
    CSS = "css"
    HEX_LIST = "hex_list"
    JSON = "json"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
HARMONY_MODE_OPTIONS: List[tuple[str, HarmonyMode]] = [
    ("Vibrant", HarmonyMode.VIBRANT),
    ("Monochrome", HarmonyMode.MONOCHROME),
    ("Analogous", HarmonyMode.ANALOGOUS),
    ("Tetradic", HarmonyMode.TETRADIC),
    ("Quadratic", HarmonyMode.QUADRATIC),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("Design Tokens (W3C)", ExportFormat.W3C_TOKENS),
    ("Procreate Swatches", ExportFormat.PROCREATE),
    ("CSS Variables", ExportFormat.CSS),
    ("HEX List", ExportFormat.HEX_LIST),
    ("JSON", ExportFormat.JSON),
]


def _w3c_tokens(palette: PaletteResult) -> str:
    tokens: dict = {
        "color": {
            "mother": {"$value": palette.featured[0].hex, "$type": "color"},
            "palette": {},
        }
    }
    for r, row in enumerate(palette.matrix):
        for c, entry in enumerate(row):
            tokens["color"]["palette"][f"tone-{r}-{c}"] = {
                "$value": entry.hex,
                "$type": "color",
                "description": entry.name,
            }
    return json.dumps(tokens, indent=2)


def _procreate(palette: PaletteResult) -> str:
    mother = palette.featured[0]
    swatches = []
    for entry in flatten_matrix(palette.matrix)[:PROCREATE_MAX_SWATCHES]:
        r, g, b = hex_to_rgb(entry.hex)
        h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
        swatches.append({"hue": h, "saturation": s, "brightness": v, "alpha": 1})
    data = [{"name": f"{settings.get().EXPORT_TITLE}: {mother.name}", "swatches": swatches}]
    return json.dumps(data, indent=2)


def _css(palette: PaletteResult) -> str:
    mother = palette.featured[0]
    lines = [
        f"/* {settings.get().EXPORT_TITLE}: {mother.name} ({mother.hex}) */",
        ":root {",
        f"  --mother-color: {mother.hex};",
    ]
    for r, row in enumerate(palette.matrix):
        for c, entry in enumerate(row):
            lines.append(f"  --tone-{r}-{c}: {entry.hex}; /* {entry.name} */")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _hex_list(palette: PaletteResult) -> str:
    return "\n".join(e.hex for e in flatten_matrix(palette.matrix))


def _json(palette: PaletteResult) -> str:
    return json.dumps(to_record(palette), indent=2)


_EXPORTERS: Dict[ExportFormat, Callable[[PaletteResult], str]] = {
    ExportFormat.W3C_TOKENS: _w3c_tokens,
    ExportFormat.PROCREATE: _procreate,
    ExportFormat.CSS: _css,
    ExportFormat.HEX_LIST: _hex_list,
    ExportFormat.JSON: _json,
}


def export_palette(palette: PaletteResult, fmt: ExportFormat | str) -> str:
    """Render a PaletteResult in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    return _EXPORTERS[export_fmt](palette)


__all__ = [
    "ExportFormat",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "PROCREATE_MAX_SWATCHES",
    "export_palette",
]
