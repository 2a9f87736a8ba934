"""
Write Cursor Tests
==================

Tests for the auto-wrapping write primitive used by the RLE decoder.
"""

import numpy as np
import pytest

from sprite_codec.codec.cursor import WriteCursor
from sprite_codec.errors import MalformedStreamError
from sprite_codec.raster.canvas import Canvas


class TestWriteCursor:
    """Tests for WriteCursor."""

    def test_advance_wraps_at_frame_width(self):
        canvas = Canvas(3, 2)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=2)

        written = cursor.advance(4, 9)

        assert written == 4
        assert canvas.pixels.tolist() == [[9, 9, 9], [9, 0, 0]]
        assert (cursor.x, cursor.y) == (1, 1)

    def test_write_literals_across_rows(self):
        canvas = Canvas(2, 2)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=2)

        cursor.write(bytes([1, 2, 3]))

        assert canvas.pixels.tolist() == [[1, 2], [3, 0]]
        assert cursor.pixels_written == 3
        assert cursor.transparent_written == 0

    def test_starts_at_frame_origin(self):
        canvas = Canvas(2, 4)
        cursor = WriteCursor(canvas, origin_y=2, frame_height=2)

        cursor.write(bytes([7]))

        assert canvas.get_pixel(0, 2) == 7
        assert np.count_nonzero(canvas.pixels) == 1

    def test_transparent_runs_are_counted(self):
        canvas = Canvas(4, 1)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=1)

        cursor.advance(3)
        cursor.write(bytes([5]))

        assert cursor.transparent_written == 3
        assert cursor.pixels_written == 4

    def test_exactly_filling_band_is_not_overflow(self):
        canvas = Canvas(2, 2)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=2)

        cursor.advance(4, 1)

        assert cursor.exhausted
        assert cursor.pixels_dropped == 0

    def test_strict_overflow_raises(self):
        canvas = Canvas(2, 4)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=1, strict=True, frame=0)

        with pytest.raises(MalformedStreamError, match="Frame 0"):
            cursor.advance(3, 1)

    def test_lenient_overflow_drops_pixels(self):
        canvas = Canvas(2, 4)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=1, strict=False)

        written = cursor.advance(5, 1)

        assert written == 2
        assert cursor.pixels_dropped == 3
        # Next frame's band is untouched
        assert canvas.pixels[1:].sum() == 0

    def test_zero_length_advance(self):
        canvas = Canvas(2, 1)
        cursor = WriteCursor(canvas, origin_y=0, frame_height=1)

        assert cursor.advance(0) == 0
        assert (cursor.x, cursor.y) == (0, 0)
