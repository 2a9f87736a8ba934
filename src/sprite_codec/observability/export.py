"""
Frame Export
============

Dump decoded frames as 8-bit grayscale PNG images.

The PNG holds the raw palette indices as gray levels. No palette is
applied: this is a diagnostic view of what the decoder produced, useful for
eyeballing frame alignment and transparent runs.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import cv2
import numpy as np

from sprite_codec.sheet import SpriteSheet


logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Raised when a frame cannot be encoded."""
    pass


def _scaled(pixels: np.ndarray, scale: int) -> np.ndarray:
    if scale == 1 or pixels.size == 0:
        return pixels
    height, width = pixels.shape[:2]
    return cv2.resize(
        pixels,
        (width * scale, height * scale),
        interpolation=cv2.INTER_NEAREST,
    )


def encode_frame_png(sheet: SpriteSheet, index: int, scale: int = 1) -> bytes:
    """
    Encode one frame as PNG.

    Args:
        sheet: Decoded sprite sheet
        index: Frame number
        scale: Nearest-neighbour upscale factor (>= 1)

    Returns:
        PNG file contents

    Raises:
        IndexOutOfRangeError: If the sheet has no frame `index`
        ExportError: If OpenCV fails to encode the image
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    # cv2 needs a contiguous array
    pixels = np.ascontiguousarray(sheet.get_frame(index).view())

    ok, buffer = cv2.imencode(".png", _scaled(pixels, scale))
    if not ok:
        raise ExportError(f"Failed to encode frame {index} as PNG")
    return buffer.tobytes()


def export_frame_png(
    sheet: SpriteSheet,
    index: int,
    path: Union[str, Path],
    scale: int = 1,
) -> Path:
    """
    Write one frame to a PNG file.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_frame_png(sheet, index, scale=scale))
    logger.debug(f"Exported frame {index} to {path}")
    return path


def export_all_frames(
    sheet: SpriteSheet,
    output_dir: Union[str, Path],
    prefix: str = "frame",
    scale: int = 1,
    limit: Optional[int] = None,
) -> List[Path]:
    """
    Write every frame of a sheet to `output_dir` as <prefix>_NNNN.png.

    Args:
        sheet: Decoded sprite sheet
        output_dir: Target directory (created if missing)
        prefix: File name prefix
        scale: Nearest-neighbour upscale factor
        limit: Export at most this many frames

    Returns:
        Paths written, in frame order
    """
    output_dir = Path(output_dir)
    count = sheet.frame_count if limit is None else min(limit, sheet.frame_count)

    paths = [
        export_frame_png(sheet, i, output_dir / f"{prefix}_{i:04d}.png", scale=scale)
        for i in range(count)
    ]
    logger.info(f"Exported {len(paths)} frame(s) to {output_dir}")
    return paths
