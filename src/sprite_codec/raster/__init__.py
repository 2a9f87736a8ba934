"""
Raster Module
=============

Pixel buffer that backs a decoded sprite sheet.
"""

from sprite_codec.raster.canvas import Canvas

__all__ = [
    "Canvas",
]
