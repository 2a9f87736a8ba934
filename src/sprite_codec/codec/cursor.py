"""
Write Cursor
============

Auto-wrapping write cursor over one frame band of a canvas.

The compressed format has no per-row markers: a flat byte stream is mapped
onto the 2-D canvas by writing left to right and wrapping to the next row
whenever x reaches the frame width. Every write action of the RLE grammar
(leading skip, transparent run, literal pixels) goes through `_emit`, so
the wrap rule lives in exactly one place.

Bounds:
    A cursor may only write inside its own frame band
    [origin_y, origin_y + frame_height). Writes past the band either raise
    MalformedStreamError (strict) or are dropped with a warning (lenient).
"""

import logging
from typing import Optional

import numpy as np

from sprite_codec.errors import MalformedStreamError
from sprite_codec.raster.canvas import Canvas


logger = logging.getLogger(__name__)


class WriteCursor:
    """
    Write position inside one frame of a canvas.

    Attributes:
        x: Current column
        y: Current canvas row
        pixels_written: Pixels written so far
        transparent_written: Pixels written by transparent runs
        pixels_dropped: Pixels discarded past the frame band (lenient only)
    """

    def __init__(
        self,
        canvas: Canvas,
        origin_y: int,
        frame_height: int,
        strict: bool = True,
        frame: Optional[int] = None,
    ) -> None:
        """
        Initialize cursor at the top-left corner of a frame band.

        Args:
            canvas: Canvas to write into. Its width is the frame width.
            origin_y: First canvas row of the frame
            frame_height: Number of rows in the frame
            strict: Raise instead of dropping pixels past the band
            frame: Frame number, used in error messages
        """
        if canvas.width <= 0:
            raise ValueError("Canvas width must be positive")

        self._pixels = canvas.pixels
        self._width = canvas.width
        self._limit = min(origin_y + frame_height, canvas.height)
        self._strict = strict
        self._frame = frame

        self.x = 0
        self.y = origin_y
        self.pixels_written = 0
        self.transparent_written = 0
        self.pixels_dropped = 0

    @property
    def exhausted(self) -> bool:
        """True once the cursor has moved past the last row of its band."""
        return self.y >= self._limit

    def advance(self, count: int, value: int = 0) -> int:
        """
        Advance by `count` pixels, writing `value` at each position.

        Returns:
            Number of pixels actually written
        """
        written = self._emit(count, value=value)
        if value == 0:
            self.transparent_written += written
        return written

    def write(self, values: bytes) -> int:
        """
        Write literal palette indices, one pixel per byte.

        Returns:
            Number of pixels actually written
        """
        data = np.frombuffer(values, dtype=np.uint8)
        return self._emit(len(data), values=data)

    def _emit(
        self,
        count: int,
        value: int = 0,
        values: Optional[np.ndarray] = None,
    ) -> int:
        offset = 0
        while offset < count:
            if self.y >= self._limit:
                self._overflow(count - offset)
                break

            span = min(count - offset, self._width - self.x)
            row = self._pixels[self.y, self.x:self.x + span]
            if values is None:
                row[:] = value
            else:
                row[:] = values[offset:offset + span]

            offset += span
            self.x += span
            if self.x == self._width:
                self.x = 0
                self.y += 1

        self.pixels_written += offset
        return offset

    def _overflow(self, remaining: int) -> None:
        message = (
            f"Frame {self._frame} writes {remaining} pixel(s) past its last row "
            f"(row {self._limit - 1})"
        )
        if self._strict:
            raise MalformedStreamError(message)
        if self.pixels_dropped == 0:
            logger.warning(f"{message}; dropping excess pixels")
        self.pixels_dropped += remaining
