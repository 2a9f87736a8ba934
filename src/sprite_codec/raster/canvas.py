"""
Canvas
======

Indexed-color raster that decoders write into and renderers read from.

The canvas is a single contiguous (height, width) uint8 numpy array of
palette indices. It carries a crop rectangle that selects the "current
view", plus a write lock held by a decoder during its write pass.

Design Rules:
    - Pixel values are raw palette indices, never colors
    - The crop rectangle is view state, not pixel data
    - Views are numpy views (shared memory), never copies
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np

from sprite_codec.models.frame import FrameRect


logger = logging.getLogger(__name__)


class Canvas:
    """
    Mutable 2-D indexed-color raster.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Backing (height, width) uint8 array
        crop: Active crop rectangle, or None for the whole canvas

    Example:
        canvas = Canvas(32, 64)
        canvas.set_pixel(3, 4, 17)
        canvas.set_crop(FrameRect(0, 32, 32, 32))
        frame = canvas.view()
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Allocate a canvas filled with palette index 0.

        Args:
            width: Width in pixels. Must be >= 0.
            height: Height in pixels. Must be >= 0.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid canvas size {width}x{height}")

        self._pixels = np.zeros((height, width), dtype=np.uint8)
        self._crop: Optional[FrameRect] = None
        self._locked = False

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """Backing pixel array (shared, not a copy)."""
        return self._pixels

    @property
    def crop(self) -> Optional[FrameRect]:
        return self._crop

    @property
    def is_locked(self) -> bool:
        return self._locked

    def set_crop(self, rect: Optional[FrameRect]) -> None:
        """
        Select the crop rectangle.

        Args:
            rect: Rectangle inside the canvas, or None to clear the crop

        Raises:
            ValueError: If the rectangle does not fit in the canvas
        """
        if rect is not None and not self.contains(rect):
            raise ValueError(
                f"Crop {rect} outside canvas {self.width}x{self.height}"
            )
        self._crop = rect

    def contains(self, rect: FrameRect) -> bool:
        """Whether `rect` lies entirely within the canvas."""
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.width >= 0
            and rect.height >= 0
            and rect.right <= self.width
            and rect.bottom <= self.height
        )

    def view(self) -> np.ndarray:
        """
        Pixels inside the crop rectangle (whole canvas when no crop is set).

        Returns:
            np.ndarray view into the backing array
        """
        if self._crop is None:
            return self._pixels
        rows, cols = self._crop.as_slices()
        return self._pixels[rows, cols]

    def region(self, rect: FrameRect) -> np.ndarray:
        """View of `rect` that leaves the crop state untouched."""
        rows, cols = rect.as_slices()
        return self._pixels[rows, cols]

    def get_pixel(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return int(self._pixels[y, x])

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = value

    @contextmanager
    def locked(self) -> Iterator[np.ndarray]:
        """
        Hold the canvas for an exclusive write pass.

        Yields:
            Backing pixel array

        Raises:
            RuntimeError: If the canvas is already locked
        """
        if self._locked:
            raise RuntimeError("Canvas is already locked")
        self._locked = True
        try:
            yield self._pixels
        finally:
            self._locked = False

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas {self.width}x{self.height}"
            )

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height}, crop={self._crop})"
