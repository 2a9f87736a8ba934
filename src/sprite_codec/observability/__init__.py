"""
Observability Module
====================

Decode statistics and diagnostic frame export.

Components:
    - DecodeStats: Summary of a completed decode
    - export.encode_frame_png / export_frame_png / export_all_frames: PNG dumps of
      raw palette indices (OpenCV)

Both are PURELY DESCRIPTIVE and do not influence decoding.
"""

from sprite_codec.observability.stats import DecodeStats

__all__ = [
    "DecodeStats",
]
