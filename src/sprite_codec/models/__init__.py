"""
Data Models
===========

Frame geometry models for sprite_codec.

Models:
    - FrameRect: Rectangle of one frame inside the sheet canvas
    - FrameIndex: Offsets and rectangles read from a frame index stream
"""

from sprite_codec.models.frame import FrameIndex, FrameRect, frame_rects

__all__ = [
    "FrameRect",
    "FrameIndex",
    "frame_rects",
]
