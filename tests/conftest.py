"""
Test Configuration
==================

Pytest fixtures and test configuration for sprite_codec.

The library has no encode path, so these fixtures carry a small synthetic
encoder for building compressed test streams.
"""

import struct
from typing import Callable, Iterable, List

import numpy as np
import pytest

from sprite_codec.config import DecodeConfig


@pytest.fixture
def strict_config() -> DecodeConfig:
    """Strict decoder configuration (the default)."""
    return DecodeConfig(strict=True)


@pytest.fixture
def lenient_config() -> DecodeConfig:
    """Decoder configuration that tolerates bad data."""
    return DecodeConfig(strict=False)


@pytest.fixture
def make_tab() -> Callable[[Iterable[int]], bytes]:
    """Build a TAB index stream from a list of 16-bit offsets."""
    def _make_tab(offsets: Iterable[int]) -> bytes:
        offsets = list(offsets)
        return struct.pack(f"<{len(offsets)}H", *offsets)
    return _make_tab


@pytest.fixture
def encode_literal_frames() -> Callable[[List[np.ndarray]], bytes]:
    """
    Encode frames as [leading skip 0][one literal per pixel][0xFF].

    Pixel values must be below 0xFE, which are reserved.
    """
    def _encode(frames: List[np.ndarray]) -> bytes:
        out = bytearray()
        for frame in frames:
            flat = np.asarray(frame, dtype=np.uint8).ravel()
            assert (flat < 0xFE).all(), "0xFE and 0xFF cannot be literals"
            out.append(0)
            out.extend(flat.tobytes())
            out.append(0xFF)
        return bytes(out)
    return _encode


@pytest.fixture
def two_frame_pck() -> bytes:
    """Two 2x2 frames: [5,0,0,0] and [9,0,7,0]."""
    return bytes([
        0, 5, 0xFF,
        0, 9, 0xFE, 0x01, 7, 0xFF,
    ])
