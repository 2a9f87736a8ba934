"""
sprite_codec
============

Decoders for legacy indexed-color sprite sheets.

This package decodes two sprite sheet formats into a single canvas of
palette indices addressable by frame number:
    - PCK/TAB: run-length-encoded pixels plus a 16-bit frame offset index
    - DAT: raw, headerless palette-index bytes

Components:
    - codec: Frame index builder, RLE decoder, raw decoder
    - raster: Canvas (numpy-backed pixel buffer with a crop window)
    - sheet: SpriteSheet aggregate and one-call loaders
    - observability: Decode statistics and PNG frame export

Example:
    from sprite_codec import load_pck

    sheet = load_pck("UNITS/XCOM_0.PCK", "UNITS/XCOM_0.TAB", 32, 40)
    frame = sheet.get_frame(0).view()
"""

__version__ = "0.1.0"

from sprite_codec.errors import (
    IndexOutOfRangeError,
    LoadError,
    MalformedStreamError,
    SpriteCodecError,
    StreamOpenError,
    TruncatedDataError,
)
from sprite_codec.models.frame import FrameIndex, FrameRect
from sprite_codec.raster.canvas import Canvas
from sprite_codec.sheet import SpriteSheet, load_dat, load_pck

__all__ = [
    "__version__",
    # Sheet
    "SpriteSheet",
    "load_pck",
    "load_dat",
    # Models
    "Canvas",
    "FrameRect",
    "FrameIndex",
    # Errors
    "SpriteCodecError",
    "LoadError",
    "StreamOpenError",
    "TruncatedDataError",
    "MalformedStreamError",
    "IndexOutOfRangeError",
]
