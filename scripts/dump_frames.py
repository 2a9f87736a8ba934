#!/usr/bin/env python3
"""
Sprite Sheet Frame Dump
=======================

Standalone script to decode a sprite sheet and dump every frame as PNG.

This script:
    1. Decodes a PCK/TAB pair or a raw DAT file
    2. Logs decode statistics
    3. Writes each frame as an 8-bit grayscale PNG of palette indices

Usage:
    python scripts/dump_frames.py pck UNITS/XCOM_0.PCK --tab UNITS/XCOM_0.TAB --size 32x40
    python scripts/dump_frames.py dat GEODATA/INTERWIN.DAT --size 160x96 --out out/interwin
"""

import argparse
import logging
import os
import sys
from typing import Tuple

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from sprite_codec import LoadError, SpriteSheet
from sprite_codec.config import load_config, setup_logging
from sprite_codec.observability.export import export_all_frames


logger = logging.getLogger(__name__)


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a WIDTHxHEIGHT frame size."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Frame size must be positive, got {value!r}")
    return width, height


def main():
    parser = argparse.ArgumentParser(
        description="Decode a sprite sheet and dump its frames as PNG"
    )
    parser.add_argument("format", choices=["pck", "dat"], help="Sprite sheet format")
    parser.add_argument("path", help="PCK or DAT file")
    parser.add_argument("--tab", default=None, help="TAB index file (pck only)")
    parser.add_argument(
        "--size",
        type=parse_size,
        required=True,
        help="Frame size as WIDTHxHEIGHT",
    )
    parser.add_argument("--out", default=None, help="Output directory")
    parser.add_argument("--scale", type=int, default=None, help="Upscale factor")
    parser.add_argument("--config", default=None, help="Path to sprite_codec.yaml")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Tolerate truncated or overrunning data",
    )

    args = parser.parse_args()

    settings = load_config(args.config)
    setup_logging(settings)

    decode_config = settings.decode
    if args.lenient:
        decode_config = decode_config.model_copy(update={"strict": False})

    width, height = args.size
    sheet = SpriteSheet(width, height, config=decode_config)

    try:
        if args.format == "pck":
            sheet.load_pck(args.path, args.tab)
        else:
            sheet.load_dat(args.path)
    except LoadError as e:
        logger.error(f"Decode failed: {e}")
        sys.exit(1)

    logger.info(f"Stats: {sheet.last_stats.to_dict()}")

    output_dir = args.out or os.path.join(
        settings.export.output_dir,
        os.path.splitext(os.path.basename(args.path))[0],
    )
    export_all_frames(
        sheet,
        output_dir,
        scale=args.scale or settings.export.scale,
    )


if __name__ == "__main__":
    main()
