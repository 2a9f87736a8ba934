"""
Sprite Sheet
============

Top-level aggregate owning a decoded canvas and its frame table.

Lifecycle:
    1. Construct with the frame size: no canvas, frame_count == 0
    2. Decode once with load_pck() or load_dat()
    3. Look frames up with get_frame(); the canvas crop selects the frame
    4. close() (or leave the `with` block) to release the canvas

A second decode builds a new canvas and replaces the old one only after it
succeeds. A failed decode leaves the previous state untouched.

Example:
    from sprite_codec import SpriteSheet

    with SpriteSheet(32, 40).load_pck("UNITS/XCOM_0.PCK", "UNITS/XCOM_0.TAB") as sheet:
        canvas = sheet.get_frame(3)
        pixels = canvas.view()
"""

import logging
import time
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

import numpy as np

from sprite_codec.codec.index import build_frame_index
from sprite_codec.codec.raw import decode_raw
from sprite_codec.codec.rle import decode_rle
from sprite_codec.codec.streams import Source
from sprite_codec.config import DecodeConfig, settings
from sprite_codec.errors import IndexOutOfRangeError
from sprite_codec.models.frame import FrameRect, frame_rects
from sprite_codec.observability.stats import DecodeStats
from sprite_codec.raster.canvas import Canvas


logger = logging.getLogger(__name__)


class SpriteSheet:
    """
    Frames of equal size stacked vertically in one canvas.

    Attributes:
        frame_width: Width of every frame in pixels
        frame_height: Height of every frame in pixels
        frame_count: Number of decoded frames
        frames: Read-only mapping of frame index to FrameRect
        canvas: Owned canvas, or None before the first decode
        last_stats: DecodeStats of the last successful decode
    """

    def __init__(
        self,
        frame_width: int,
        frame_height: int,
        config: Optional[DecodeConfig] = None,
    ) -> None:
        """
        Initialize an empty sheet.

        Args:
            frame_width: Frame width in pixels. Must be > 0.
            frame_height: Frame height in pixels. Must be > 0.
            config: Decoder configuration (defaults to global settings)
        """
        for name, value in (("frame_width", frame_width), ("frame_height", frame_height)):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self._width = int(frame_width)
        self._height = int(frame_height)
        self._config = config
        self._canvas: Optional[Canvas] = None
        self._frames: Dict[int, FrameRect] = {}
        self._last_stats: Optional[DecodeStats] = None

    @property
    def frame_width(self) -> int:
        return self._width

    @property
    def frame_height(self) -> int:
        return self._height

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> Mapping[int, FrameRect]:
        return MappingProxyType(self._frames)

    @property
    def canvas(self) -> Optional[Canvas]:
        """Owned canvas for bulk rendering (None before decode)."""
        return self._canvas

    @property
    def last_stats(self) -> Optional[DecodeStats]:
        return self._last_stats

    @property
    def config(self) -> DecodeConfig:
        return self._config or settings.decode

    # =========================================================================
    # Decoding
    # =========================================================================

    def load_pck(
        self,
        pck_source: Source,
        tab_source: Optional[Source] = None,
    ) -> "SpriteSheet":
        """
        Decode a compressed pack (PCK) with its frame index (TAB).

        When the index is missing or cannot be opened, the sheet holds a
        single frame covering the whole canvas.

        Args:
            pck_source: Compressed pixel stream
            tab_source: Frame index stream, or None

        Returns:
            self, for chaining

        Raises:
            StreamOpenError: If the pixel stream cannot be opened
            MalformedStreamError: If a frame overruns its band (strict)
            TruncatedDataError: If frames are missing (strict)
        """
        start_time = time.perf_counter()

        index = build_frame_index(tab_source, self._width, self._height)
        if index is None:
            logger.warning("No frame index available, assuming a single frame")
            frames = frame_rects(1, self._width, self._height)
        else:
            frames = dict(enumerate(index.frames))

        canvas = Canvas(self._width, self._height * len(frames))
        result = decode_rle(
            pck_source,
            canvas,
            frame_count=len(frames),
            frame_height=self._height,
            config=self.config,
        )

        stats = DecodeStats(
            format="pck",
            frame_count=len(frames),
            bytes_read=result.bytes_read,
            pixels_written=result.pixels_written,
            transparent_pixels=result.transparent_pixels,
            index_present=index is not None,
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )
        self._publish(canvas, frames, stats)
        return self

    def load_dat(self, source: Source) -> "SpriteSheet":
        """
        Decode an uncompressed (DAT) sprite stream.

        Args:
            source: Raw pixel stream

        Returns:
            self, for chaining

        Raises:
            StreamOpenError: If the stream cannot be opened
            TruncatedDataError: If the length is not a whole number of
                frames (strict)
        """
        start_time = time.perf_counter()

        result = decode_raw(source, self._width, self._height, config=self.config)

        stats = DecodeStats(
            format="dat",
            frame_count=result.frame_count,
            bytes_read=result.bytes_read,
            pixels_written=result.bytes_read,
            transparent_pixels=int(np.count_nonzero(result.canvas.pixels == 0)),
            index_present=False,
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )
        self._publish(result.canvas, result.frames, stats)
        return self

    def _publish(
        self,
        canvas: Canvas,
        frames: Dict[int, FrameRect],
        stats: DecodeStats,
    ) -> None:
        if self._canvas is not None:
            logger.debug("Replacing previously decoded canvas")
        self._canvas = canvas
        self._frames = frames
        self._last_stats = stats
        logger.info(
            f"Decoded {stats.format} sheet: {stats.frame_count} frame(s) of "
            f"{self._width}x{self._height}, {stats.bytes_read} bytes, "
            f"{stats.elapsed_ms:.2f}ms"
        )

    # =========================================================================
    # Frame access
    # =========================================================================

    def get_frame(self, index: int) -> Canvas:
        """
        Select a frame on the canvas.

        Args:
            index: Frame number (0-based)

        Returns:
            The sheet's canvas (shared, not a copy) cropped to the frame

        Raises:
            IndexOutOfRangeError: If the sheet has no frame `index`
        """
        rect = self._frames.get(index)
        if rect is None or self._canvas is None:
            raise IndexOutOfRangeError(
                f"frame out of range: {index} (frame_count={self.frame_count})"
            )
        self._canvas.set_crop(rect)
        return self._canvas

    def iter_frames(self) -> Iterator[Tuple[int, np.ndarray]]:
        """Yield (index, pixels) for every frame without touching the crop."""
        if self._canvas is None:
            return
        for index in sorted(self._frames):
            yield index, self._canvas.region(self._frames[index])

    def close(self) -> None:
        """Release the canvas and frame table."""
        self._canvas = None
        self._frames = {}

    def __len__(self) -> int:
        return self.frame_count

    def __enter__(self) -> "SpriteSheet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"SpriteSheet(frame_width={self._width}, "
            f"frame_height={self._height}, "
            f"frame_count={self.frame_count})"
        )


def load_pck(
    pck_source: Source,
    tab_source: Optional[Source],
    frame_width: int,
    frame_height: int,
    config: Optional[DecodeConfig] = None,
) -> SpriteSheet:
    """Construct a sheet and decode a PCK/TAB pair into it."""
    return SpriteSheet(frame_width, frame_height, config=config).load_pck(
        pck_source, tab_source
    )


def load_dat(
    source: Source,
    frame_width: int,
    frame_height: int,
    config: Optional[DecodeConfig] = None,
) -> SpriteSheet:
    """Construct a sheet and decode a raw DAT stream into it."""
    return SpriteSheet(frame_width, frame_height, config=config).load_dat(source)
