"""Command-line entry point for huecraft.

This tool loads an image, applies one transformation (grayscale, invert,
sepia, black/white, rotate, hue/saturation/lightness shift, or the stylized
warm + vignette + grain filter), and saves the result.

All processing occurs on NumPy-backed rasters; Pillow is used only for
loading and saving.

Usage example:
    python -m huecraft.main -i input.png -o output.png --op hue --hue 30
    python -m huecraft.main -i input.png -o output.png --op filter \
        --halo halo.png --grain grain.png
"""
from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Optional

from .errors import HuecraftError
from .transforms import TRANSFORM_METHODS, apply_transform
from .utils.loader import load_raster, save_raster

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="huecraft",
        description=(
            "Apply colour, tone and geometry transforms to an image. "
            "All processing happens in memory on NumPy arrays."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument(
        "--op",
        type=str,
        default="grayscale",
        choices=TRANSFORM_METHODS,
        help="Transform to apply: " + " | ".join(TRANSFORM_METHODS),
    )
    parser.add_argument(
        "--hue",
        type=int,
        default=0,
        help="Degrees added to every pixel's hue (wraps at 360). Used by --op hue.",
    )
    parser.add_argument(
        "--saturation",
        type=float,
        default=0.0,
        help="Amount added to saturation, result clamped to [0, 1]. Used by --op saturation.",
    )
    parser.add_argument(
        "--lightness",
        type=float,
        default=0.0,
        help="Amount added to lightness, result clamped to [0, 1]. Used by --op lightness.",
    )
    parser.add_argument(
        "--halo",
        type=str,
        default=None,
        help="Vignette overlay image. Required by --op filter.",
    )
    parser.add_argument(
        "--grain",
        type=str,
        default=None,
        help="Grain overlay image. Required by --op filter.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if not math.isfinite(ns.saturation):
        raise ValueError("--saturation must be finite")
    if not math.isfinite(ns.lightness):
        raise ValueError("--lightness must be finite")
    if ns.op == "filter":
        if ns.halo is None or ns.grain is None:
            raise ValueError("--op filter needs both --halo and --grain")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    try:
        # 1) Load (Pillow -> Raster)
        img = load_raster(args.input)
        halo = load_raster(args.halo) if args.op == "filter" else None
        grain = load_raster(args.grain) if args.op == "filter" else None

        # 2) Transform
        out = apply_transform(
            img,
            args.op,
            hue=args.hue,
            saturation=args.saturation,
            lightness=args.lightness,
            halo=halo,
            grain=grain,
        )
    except HuecraftError as e:
        print(f"Error: {e}")
        return 1

    # 3) Save (Raster -> Pillow)
    save_raster(out, args.output)
    logger.info("Applied %s to %s -> %s", args.op, args.input, args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
