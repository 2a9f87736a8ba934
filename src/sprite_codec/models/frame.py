"""
Frame Models
============

Frame geometry shared by both decode paths.

Frames are non-overlapping horizontal bands stacked top-to-bottom in
ascending index order. Every frame of a sheet has the same size, so a
frame's rectangle is fully determined by its index.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class FrameRect:
    """
    Rectangle of one frame inside the sheet canvas.

    Attributes:
        x: Left edge in pixels (always 0 for stacked sheets)
        y: Top edge in pixels
        width: Frame width in pixels
        height: Frame height in pixels
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def for_index(cls, index: int, width: int, height: int) -> "FrameRect":
        """Build the rectangle of frame `index` in a vertically stacked sheet."""
        return cls(x=0, y=index * height, width=width, height=height)

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    def as_slices(self) -> Tuple[slice, slice]:
        """Return (rows, columns) slices for indexing a (H, W) array."""
        return slice(self.y, self.bottom), slice(self.x, self.right)


@dataclass(frozen=True, slots=True)
class FrameIndex:
    """
    Result of reading a frame index (TAB) stream.

    Attributes:
        offsets: Raw 16-bit values, one per frame. Kept for diagnostics
            only; frame geometry does not depend on them.
        frames: One rectangle per offset, in stream order
    """

    offsets: Tuple[int, ...]
    frames: Tuple[FrameRect, ...]

    @property
    def frame_count(self) -> int:
        return len(self.frames)


def frame_rects(frame_count: int, width: int, height: int) -> Dict[int, FrameRect]:
    """
    Synthesize rectangles for `frame_count` stacked frames.

    Args:
        frame_count: Number of frames
        width: Frame width in pixels
        height: Frame height in pixels

    Returns:
        Mapping of frame index to FrameRect
    """
    return {i: FrameRect.for_index(i, width, height) for i in range(frame_count)}
