"""
Domain models.

Contains the raster domain: Canvas and its storage index mapping.
"""

from src.core.domain.canvas import Canvas, pixel_index

__all__ = [
    # Canvas
    "Canvas",
    "pixel_index",
]
