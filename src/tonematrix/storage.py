from __future__ import annotations

"""Storage boundary adapters.

Some document stores cannot hold nested arrays, so persisted palettes
keep the matrix as one flat row-major list of 36 entries. The helpers
here flatten on save and re-chunk into 4 rows of 9 on load.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple, TypeVar

from .harmony import SPINE_LENGTH, HarmonyMode
from .palette import PaletteEntry, PaletteResult
from .tones import ROW_COUNT

logger = logging.getLogger(__name__)

T = TypeVar("T")

MATRIX_SIZE = ROW_COUNT * SPINE_LENGTH


def flatten_matrix(matrix: Sequence[Sequence[T]]) -> List[T]:
    """Flatten a 4x9 matrix into 36 entries, row-major."""
    return [e for row in matrix for e in row]


def rechunk_matrix(seq: Sequence[Any]) -> Tuple[Tuple[Any, ...], ...]:
    """Rebuild 4 rows of 9 from a flat 36-entry sequence.

    Input that is already nested is returned as tuples unchanged.
    """
    if len(seq) == ROW_COUNT and all(isinstance(r, (list, tuple)) for r in seq):
        return tuple(tuple(r) for r in seq)
    if len(seq) != MATRIX_SIZE:
        raise ValueError(f"flat matrix must have {MATRIX_SIZE} entries, got {len(seq)}")
    return tuple(
        tuple(seq[i : i + SPINE_LENGTH]) for i in range(0, MATRIX_SIZE, SPINE_LENGTH)
    )


def _entry_to_dict(entry: PaletteEntry) -> Dict[str, Any]:
    return {"hex": entry.hex, "name": entry.name, "isDark": entry.is_dark}


def _entry_from_dict(data: Any) -> PaletteEntry:
    if not isinstance(data, dict) or "hex" not in data:
        raise ValueError(f"palette entry must be a mapping with 'hex': {data!r}")
    # isDark is derived from hex, so the stored flag is not trusted.
    return PaletteEntry.from_hex(str(data["hex"]), str(data.get("name", "")))


def to_record(result: PaletteResult) -> Dict[str, Any]:
    """Serialize a palette into a JSON-safe dict with a flat matrix."""
    return {
        "mode": result.mode.value,
        "featured": [_entry_to_dict(e) for e in result.featured],
        "matrix": [_entry_to_dict(e) for e in flatten_matrix(result.matrix)],
    }


def from_record(record: Dict[str, Any]) -> PaletteResult:
    """Rebuild a palette from :func:`to_record` output (flat or nested matrix).

    Only hex, name and isDark round-trip; each entry's ``lch`` is
    recomputed from its hex, so it can differ from the pre-clipping
    triple a freshly generated entry carries.
    """
    mode = HarmonyMode.from_value(record.get("mode", ""))
    raw_matrix = list(record.get("matrix") or [])
    if len(raw_matrix) == MATRIX_SIZE:
        logger.debug("re-chunking flat %s matrix (%d entries)", mode.value, len(raw_matrix))
    rows = rechunk_matrix(raw_matrix)
    matrix = tuple(tuple(_entry_from_dict(e) for e in row) for row in rows)
    featured = tuple(_entry_from_dict(e) for e in record.get("featured") or [])
    return PaletteResult(featured=featured, matrix=matrix, mode=mode)


__all__ = ["MATRIX_SIZE", "flatten_matrix", "rechunk_matrix", "to_record", "from_record"]
