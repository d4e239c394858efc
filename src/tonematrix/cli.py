"""
Command-line entry point: print a tone matrix palette for a seed color.

Usage:
    tonematrix "#EC4899"
    tonematrix EC4899 --mode tetradic --format css
    tonematrix "#2563EB" --format w3c_tokens --seed 7 > tokens.json

Notes:
    - Output goes to stdout; errors go to stderr with exit code 2.
    - `--seed` fixes the random adjective choice so names are reproducible.
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from typing import Optional, Sequence

from common import settings
from common.logging import setup_default_logging

from .api import generate_palette
from .errors import PaletteError
from .export import EXPORT_FORMAT_OPTIONS, HARMONY_MODE_OPTIONS, ExportFormat, export_palette
from .naming import ColorNamer

logger = logging.getLogger(__name__)


def _describe(options: Sequence[tuple[str, Enum]]) -> str:
    return ", ".join(f"{value.value} ({label})" for label, value in options)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tonematrix",
        description="Generate a 36-color tone matrix from one mother color.",
    )
    p.add_argument("seed_hex", help="mother color, e.g. '#EC4899' or EC4899")
    p.add_argument(
        "--mode",
        default=None,
        help=f"harmony mode: {_describe(HARMONY_MODE_OPTIONS)}; defaults to the configured mode",
    )
    p.add_argument(
        "--format",
        dest="fmt",
        default=ExportFormat.HEX_LIST.value,
        choices=[fmt.value for _, fmt in EXPORT_FORMAT_OPTIONS],
        help=f"output format: {_describe(EXPORT_FORMAT_OPTIONS)} (default: hex_list)",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed for color names")
    p.add_argument("--log-level", default=None, help="logging level (default: configured)")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)

    try:
        result = generate_palette(args.seed_hex, args.mode, namer=ColorNamer(seed=args.seed))
    except PaletteError as exc:
        print(f"tonematrix: error: {exc}", file=sys.stderr)
        return 2

    logger.info("%s palette from %s", result.mode.value, result.featured[0].hex)
    sys.stdout.write(export_palette(result, args.fmt))
    if args.fmt != ExportFormat.CSS.value:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
