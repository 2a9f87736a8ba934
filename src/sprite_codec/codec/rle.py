"""
RLE Decoder
===========

Decoder for the compressed pack (PCK) pixel stream.

Per-frame grammar (executed once per frame, cursor reset to the frame's
top-left corner):

    <leading skip: u8>  transparent pixels (or rows) before any content
    then repeatedly:
        0xFF            end of frame
        0xFE <run: u8>  run of `run` transparent pixels
        any other byte  literal palette index, one pixel

Bytes are read unsigned and compared against 0xFF / 0xFE directly.

Strictness (DecodeConfig.strict):
    - strict: writing past a frame's band raises MalformedStreamError, and
      a stream that ends before the last frame starts raises
      TruncatedDataError
    - lenient: excess pixels are dropped and missing frames stay
      transparent, both with a warning

End of stream inside the last frame is never an error.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sprite_codec.codec.cursor import WriteCursor
from sprite_codec.codec.streams import Source, read_all
from sprite_codec.config import DecodeConfig, settings
from sprite_codec.errors import TruncatedDataError
from sprite_codec.raster.canvas import Canvas


logger = logging.getLogger(__name__)


END_OF_FRAME = 0xFF
TRANSPARENT_RUN = 0xFE


@dataclass(frozen=True, slots=True)
class RleDecodeResult:
    """
    Summary of one RLE decode pass.

    Attributes:
        frames_decoded: Frames that had data in the stream
        bytes_read: Bytes consumed from the stream
        pixels_written: Pixels written to the canvas
        transparent_pixels: Pixels written by leading skips and runs
        pixels_dropped: Pixels discarded past frame bands (lenient only)
    """

    frames_decoded: int
    bytes_read: int
    pixels_written: int
    transparent_pixels: int
    pixels_dropped: int


def decode_rle(
    source: Source,
    canvas: Canvas,
    frame_count: int,
    frame_height: int,
    config: Optional[DecodeConfig] = None,
) -> RleDecodeResult:
    """
    Decode a compressed pixel stream into `canvas`.

    Args:
        source: Compressed pixel stream source
        canvas: Target canvas of size (frame_width, frame_height * frame_count)
        frame_count: Number of frames, fixed by the frame index
        frame_height: Frame height in pixels
        config: Decoder configuration (defaults to global settings)

    Returns:
        RleDecodeResult with byte and pixel counts

    Raises:
        StreamOpenError: If the stream cannot be opened
        MalformedStreamError: If a frame overruns its band (strict)
        TruncatedDataError: If frames are missing from the stream (strict)
    """
    config = config or settings.decode
    data = read_all(source, "failed to open compressed sprite data")

    frame_width = canvas.width
    skip_unit = frame_width if config.leading_skip_unit == "rows" else 1

    end = len(data)
    pos = 0
    frames_decoded = 0
    pixels_written = 0
    transparent = 0
    dropped = 0

    with canvas.locked():
        for frame in range(frame_count):
            if pos >= end:
                break
            frames_decoded += 1

            cursor = WriteCursor(
                canvas,
                origin_y=frame * frame_height,
                frame_height=frame_height,
                strict=config.strict,
                frame=frame,
            )

            leading_skip = data[pos]
            pos += 1
            cursor.advance(leading_skip * skip_unit)

            while pos < end:
                token = data[pos]
                if token == END_OF_FRAME:
                    pos += 1
                    break
                if token == TRANSPARENT_RUN:
                    if pos + 1 >= end:
                        # Escape without its length byte: treat as end of stream
                        pos = end
                        break
                    cursor.advance(data[pos + 1])
                    pos += 2
                    continue

                # Literal run up to the next reserved byte
                run_end = pos + 1
                while run_end < end and data[run_end] < TRANSPARENT_RUN:
                    run_end += 1
                cursor.write(data[pos:run_end])
                pos = run_end

            pixels_written += cursor.pixels_written
            transparent += cursor.transparent_written
            dropped += cursor.pixels_dropped

    if frames_decoded < frame_count:
        message = (
            f"Compressed sprite data ended after {frames_decoded} of "
            f"{frame_count} frame(s)"
        )
        if config.strict:
            raise TruncatedDataError(message)
        logger.warning(f"{message}; remaining frames left transparent")

    if pos < end:
        logger.debug(f"{end - pos} trailing byte(s) after last frame ignored")

    return RleDecodeResult(
        frames_decoded=frames_decoded,
        bytes_read=pos,
        pixels_written=pixels_written,
        transparent_pixels=transparent,
        pixels_dropped=dropped,
    )
