from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import StageError
from .icon_job import make_icons
from .logging_config import setup_logging
from .settings import DEFAULT_SIZES, IconSettings, parse_sizes

DEFAULT_OUTPUT_DIR = "icons"

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Remove the white background from an image and save square PNG icons."
    )
    parser.add_argument("path", help="Source image (.png/.jpg/.jpeg/.bmp/.gif)")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--sizes",
        type=parse_sizes,
        help="Comma separated icon sizes (default: " + ",".join(str(s) for s in DEFAULT_SIZES) + ")",
    )
    parser.add_argument("--threshold", type=int, help="Distance from white treated as background (default: 40)")
    parser.add_argument("--keep-background", action="store_true", help="Skip background removal")
    parser.add_argument("--strict", action="store_true", help="Reject PNG chunks with bad checksums")
    parser.add_argument("--workers", type=int, help="Resample sizes on N threads (default: 1)")
    parser.add_argument("--config", metavar="FILE", help="JSON settings file; flags override its values")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log chunk-level details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> IconSettings:
    settings = IconSettings.load(Path(args.config)) if args.config else IconSettings()
    if args.sizes is not None:
        settings.sizes = args.sizes
    if args.threshold is not None:
        settings.threshold = args.threshold
    if args.keep_background:
        settings.remove_background = False
    if args.strict:
        settings.verify_checksums = True
    if args.workers is not None:
        settings.workers = args.workers
    settings.validate()
    return settings


def _verbosity(args: argparse.Namespace) -> int:
    if args.quiet:
        return -1
    if args.verbose:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(_verbosity(args))
    try:
        settings = build_settings(args)
    except (OSError, ValueError) as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2
    try:
        written = make_icons(args.path, Path(args.output), settings)
    except StageError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    logger.info("Done: %d icons in %s", len(written), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
