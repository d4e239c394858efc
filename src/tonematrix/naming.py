from __future__ import annotations

"""Display names for palette colors.

Naming is a decoration stage kept apart from palette computation:
:func:`nearest_color_name` is deterministic, while :class:`ColorNamer`
prefixes it with a randomly drawn adjective.
"""

import logging
import random
from functools import lru_cache
from typing import Sequence, Tuple

import numpy as np
import webcolors

from common import settings

from .color_types import to_perceptual
from .engine import CHROMA_SCALE

logger = logging.getLogger(__name__)


def _to_oklab(hex_str: str) -> Tuple[float, float, float]:
    lch = to_perceptual(hex_str)
    C = lch.C / 100.0 * CHROMA_SCALE
    h = np.radians(float(lch.H))
    return (lch.L / 100.0, float(C * np.cos(h)), float(C * np.sin(h)))


@lru_cache(maxsize=1)
def _named_color_table() -> Tuple[Tuple[str, ...], np.ndarray]:
    """Return CSS3 color names and their OKLab coordinates (N x 3)."""
    names = tuple(sorted(webcolors.names("css3")))
    lab = np.array(
        [_to_oklab(webcolors.name_to_hex(n, spec="css3")) for n in names],
        dtype=np.float64,
    )
    logger.debug("loaded %d named colors", len(names))
    return names, lab


@lru_cache(maxsize=1024)
def nearest_color_name(hex_str: str) -> str:
    """Return the CSS3 color name closest to ``hex_str`` in OKLab.

    The first letter is capitalized for display, e.g. ``"Hotpink"``.
    """
    names, lab = _named_color_table()
    target = np.asarray(_to_oklab(hex_str), dtype=np.float64)
    dist = np.sum((lab - target) ** 2, axis=1)
    name = names[int(np.argmin(dist))]
    return name[:1].upper() + name[1:]


class ColorNamer:
    """Callable producing ``"<Adjective> <Nearest name>"`` labels.

    Parameters
    ----------
    adjectives:
        Word list to draw from. Defaults to the configured list.
    rng:
        Random source. If None, a ``random.Random`` seeded with ``seed``
        (or the configured ``NAME_SEED``; unseeded when that is unset).
    seed:
        Seed for the default random source.
    """

    def __init__(
        self,
        adjectives: Sequence[str] | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        cfg = settings.get()
        words = tuple(adjectives) if adjectives is not None else tuple(cfg.ADJECTIVES)
        if not words:
            raise ValueError("adjectives must not be empty.")
        self.adjectives = words
        if rng is None:
            rng = random.Random(seed if seed is not None else cfg.NAME_SEED)
        self._rng = rng

    def __call__(self, hex_str: str) -> str:
        adjective = self._rng.choice(self.adjectives)
        return f"{adjective} {nearest_color_name(hex_str)}"


__all__ = ["ColorNamer", "nearest_color_name"]
