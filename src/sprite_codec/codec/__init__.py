"""
Codec Module
============

Decoders for the two sprite sheet formats.

This module provides the decoding layer for sprite_codec:
    - build_frame_index: Frame rectangles from a TAB index stream
    - decode_rle: Compressed pack (PCK) pixel stream decoder
    - decode_raw: Uncompressed (DAT) pixel stream decoder
    - WriteCursor: Auto-wrapping write position shared by the RLE grammar

Example:
    from sprite_codec.codec import build_frame_index, decode_rle
    from sprite_codec.raster import Canvas

    index = build_frame_index("UNITS.TAB", 32, 40)
    canvas = Canvas(32, 40 * index.frame_count)
    decode_rle("UNITS.PCK", canvas, index.frame_count, 40)
"""

from sprite_codec.codec.cursor import WriteCursor
from sprite_codec.codec.index import build_frame_index
from sprite_codec.codec.raw import RawDecodeResult, decode_raw
from sprite_codec.codec.rle import (
    END_OF_FRAME,
    TRANSPARENT_RUN,
    RleDecodeResult,
    decode_rle,
)
from sprite_codec.codec.streams import Source, open_source


__all__ = [
    "WriteCursor",
    "build_frame_index",
    "decode_rle",
    "RleDecodeResult",
    "decode_raw",
    "RawDecodeResult",
    "END_OF_FRAME",
    "TRANSPARENT_RUN",
    "Source",
    "open_source",
]
