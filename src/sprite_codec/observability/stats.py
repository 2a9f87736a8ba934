"""
Decode Statistics
=================

Summary of a completed decode, for logging and diagnostics.

Stats are PURELY DESCRIPTIVE. They do not influence decoding.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DecodeStats:
    """
    Summary of one decode call.

    Attributes:
        format: "pck" or "dat"
        frame_count: Frames in the decoded sheet
        bytes_read: Pixel stream bytes consumed
        pixels_written: Pixels written to the canvas
        transparent_pixels: Pixels written by skips and transparent runs
        index_present: Whether a frame index was read (always False for dat)
        elapsed_ms: Wall time of the decode in milliseconds
    """

    format: str
    frame_count: int
    bytes_read: int
    pixels_written: int
    transparent_pixels: int
    index_present: bool
    elapsed_ms: float

    def __repr__(self) -> str:
        return (
            f"DecodeStats(format={self.format}, frames={self.frame_count}, "
            f"bytes={self.bytes_read}, t={self.elapsed_ms:.2f}ms)"
        )

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "format": self.format,
            "frame_count": self.frame_count,
            "bytes_read": self.bytes_read,
            "pixels_written": self.pixels_written,
            "transparent_pixels": self.transparent_pixels,
            "index_present": self.index_present,
            "elapsed_ms": round(self.elapsed_ms, 3),
        }
