"""
Raw Decoder
===========

Decoder for the uncompressed (DAT) sprite format.

A raw file is a headerless run of palette-index bytes. There is no index:
the frame count is the file length divided by the frame area, and the bytes
are copied verbatim into the canvas in row-major order.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from sprite_codec.codec.streams import Source, read_all
from sprite_codec.config import DecodeConfig, settings
from sprite_codec.errors import TruncatedDataError
from sprite_codec.models.frame import FrameRect, frame_rects
from sprite_codec.raster.canvas import Canvas


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawDecodeResult:
    """
    Output of a raw decode.

    Attributes:
        canvas: Filled canvas of size (frame_width, frame_height * frame_count)
        frames: One rectangle per whole frame
        bytes_read: Bytes copied into the canvas
        bytes_discarded: Trailing bytes not forming a whole frame (lenient only)
    """

    canvas: Canvas
    frames: Dict[int, FrameRect]
    bytes_read: int
    bytes_discarded: int

    @property
    def frame_count(self) -> int:
        return len(self.frames)


def decode_raw(
    source: Source,
    frame_width: int,
    frame_height: int,
    config: Optional[DecodeConfig] = None,
) -> RawDecodeResult:
    """
    Decode a raw sprite stream.

    Args:
        source: Raw pixel stream source
        frame_width: Frame width in pixels
        frame_height: Frame height in pixels
        config: Decoder configuration (defaults to global settings)

    Returns:
        RawDecodeResult holding the new canvas and its frames

    Raises:
        StreamOpenError: If the stream cannot be opened
        TruncatedDataError: If the byte count is not a whole number of
            frames (strict)
    """
    config = config or settings.decode
    data = read_all(source, "failed to open raw sprite data")

    frame_size = frame_width * frame_height
    frame_count = len(data) // frame_size
    used = frame_count * frame_size

    if used != len(data):
        message = (
            f"truncated or misaligned raw sprite data: {len(data)} bytes is not "
            f"a multiple of the {frame_width}x{frame_height} frame size"
        )
        if config.strict:
            raise TruncatedDataError(message)
        logger.warning(f"{message}; discarding {len(data) - used} trailing byte(s)")

    canvas = Canvas(frame_width, frame_height * frame_count)
    if used:
        with canvas.locked() as pixels:
            pixels[:] = np.frombuffer(data, dtype=np.uint8, count=used).reshape(
                frame_height * frame_count, frame_width
            )

    return RawDecodeResult(
        canvas=canvas,
        frames=frame_rects(frame_count, frame_width, frame_height),
        bytes_read=used,
        bytes_discarded=len(data) - used,
    )
