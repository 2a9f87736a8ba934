"""
Canvas Tests
============

Tests for the numpy-backed pixel buffer.
"""

import pytest

from sprite_codec.models.frame import FrameRect
from sprite_codec.raster.canvas import Canvas


class TestCanvas:
    """Tests for Canvas."""

    def test_allocated_transparent(self):
        canvas = Canvas(4, 3)

        assert (canvas.width, canvas.height) == (4, 3)
        assert canvas.pixels.shape == (3, 4)
        assert canvas.pixels.sum() == 0

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Canvas(-1, 2)

    def test_pixel_get_set(self):
        canvas = Canvas(2, 2)
        canvas.set_pixel(1, 0, 200)

        assert canvas.get_pixel(1, 0) == 200
        assert canvas.pixels[0, 1] == 200

    def test_pixel_out_of_bounds(self):
        canvas = Canvas(2, 2)
        with pytest.raises(IndexError):
            canvas.get_pixel(2, 0)

    def test_view_follows_crop(self):
        canvas = Canvas(2, 4)
        canvas.set_pixel(0, 2, 9)

        canvas.set_crop(FrameRect(0, 2, 2, 2))

        assert canvas.view().tolist() == [[9, 0], [0, 0]]

    def test_view_is_shared(self):
        canvas = Canvas(2, 2)
        canvas.set_crop(FrameRect(0, 1, 2, 1))

        canvas.view()[0, 0] = 3

        assert canvas.get_pixel(0, 1) == 3

    def test_view_without_crop_is_whole_canvas(self):
        canvas = Canvas(3, 2)
        assert canvas.view().shape == (2, 3)

    def test_crop_outside_canvas_rejected(self):
        canvas = Canvas(2, 2)
        with pytest.raises(ValueError):
            canvas.set_crop(FrameRect(0, 2, 2, 2))

    def test_lock_is_exclusive(self):
        canvas = Canvas(1, 1)

        with canvas.locked():
            assert canvas.is_locked
            with pytest.raises(RuntimeError):
                with canvas.locked():
                    pass

        assert not canvas.is_locked
