"""
Frame Index Builder
===================

Reads a frame index (TAB) stream into frame rectangles.

The index holds one unsigned 16-bit little-endian offset per frame. Only the
number of offsets matters: frames have a fixed size and are stacked
vertically, so frame i always sits at y = i * frame_height. The offsets are
kept on the result for diagnostics.

Missing Index:
    If the index source cannot be opened, `build_frame_index` returns None
    rather than raising. The caller then assumes a single frame.
"""

import logging
import struct
from typing import Optional

from sprite_codec.codec.streams import Source, read_all
from sprite_codec.errors import StreamOpenError
from sprite_codec.models.frame import FrameIndex, FrameRect


logger = logging.getLogger(__name__)


_OFFSET = struct.Struct("<H")


def build_frame_index(
    source: Optional[Source],
    frame_width: int,
    frame_height: int,
) -> Optional[FrameIndex]:
    """
    Build frame rectangles from an index stream.

    Args:
        source: Index stream source, or None when there is no index
        frame_width: Frame width in pixels
        frame_height: Frame height in pixels

    Returns:
        FrameIndex with one rectangle per 16-bit value, or None if the
        index is not available
    """
    if source is None:
        return None

    try:
        data = read_all(source, "failed to open frame index")
    except StreamOpenError as e:
        logger.warning(f"Frame index unavailable: {e}")
        return None

    usable = len(data) - len(data) % _OFFSET.size
    if usable != len(data):
        logger.debug(f"Ignoring trailing byte in frame index ({len(data)} bytes)")

    offsets = tuple(value for (value,) in _OFFSET.iter_unpack(data[:usable]))
    frames = tuple(
        FrameRect.for_index(i, frame_width, frame_height)
        for i in range(len(offsets))
    )

    logger.debug(f"Frame index: {len(frames)} frame(s)")
    return FrameIndex(offsets=offsets, frames=frames)
