"""
Errors
======

Exception hierarchy for sprite sheet decoding.

Hierarchy:
    SpriteCodecError
        LoadError
            StreamOpenError      - index, pixel or raw source cannot be opened
            TruncatedDataError   - byte count inconsistent with frame geometry
            MalformedStreamError - RLE write would leave the frame band
        IndexOutOfRangeError     - frame lookup beyond the decoded frame count

Design Rules:
    - Errors are raised to the caller immediately, never retried
    - A missing frame index is NOT an error (single-frame fallback)
"""


class SpriteCodecError(Exception):
    """Base class for all sprite_codec errors."""
    pass


class LoadError(SpriteCodecError):
    """Raised when a sprite sheet cannot be decoded."""
    pass


class StreamOpenError(LoadError):
    """Raised when a byte source cannot be opened."""
    pass


class TruncatedDataError(LoadError):
    """Raised when the data ends early or leaves bytes unaccounted for."""
    pass


class MalformedStreamError(LoadError):
    """Raised when compressed data writes outside its frame."""
    pass


class IndexOutOfRangeError(SpriteCodecError, IndexError):
    """Raised when a frame index has no rectangle in the sheet."""
    pass
