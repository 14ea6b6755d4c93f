#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""zpatchgen - command line entry point.

Usage: zpatchgen --mode {runtime,compiletime} [--patches PATH]
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from .exceptions import BaseError
from .logging_config import get_logger, setup_logging
from .patching import DEFAULT_PATCHES_FILE, RenderMode, load_patches, render, validate
from .version import load_version

logger = get_logger("main")

MODE_CHOICES = [mode.value for mode in RenderMode] + [f"bocfel-{mode.value}" for mode in RenderMode]


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="zpatchgen",
        description="Convert an interpreter patch list into a runtime listing or a compile-time table",
    )
    parser.add_argument(
        "-m", "--mode",
        required=True,
        choices=MODE_CHOICES,
        help="Output format to generate",
    )
    parser.add_argument(
        "--patches",
        metavar="PATH",
        default=DEFAULT_PATCHES_FILE,
        help=f"Patch list to read (default: {DEFAULT_PATCHES_FILE})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", default=None, help="Log as JSON lines")
    parser.add_argument("--version", action="version", version=f"zpatchgen {load_version()}")
    return parser.parse_args(argv)


def generate(patches_path: str, mode: RenderMode) -> List[str]:
    """Load, validate and render a patch list."""
    patches = load_patches(patches_path)
    validate(patches)
    logger.debug("Rendering %d patch(es) as %s", len(patches), mode.value)
    return render(patches, mode)


def main(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """Main function; returns the process exit status."""
    args = parse_arguments(argv)
    setup_logging("DEBUG" if args.debug else "WARNING", structured_json=args.log_json)
    out = stdout if stdout is not None else sys.stdout

    try:
        lines = generate(args.patches, RenderMode.parse(args.mode))
    except BaseError as exc:
        logger.error("error: %s", exc)
        logger.debug("error details: %s", exc.to_dict())
        return 1

    for line in lines:
        out.write(f"{line}\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
