"""
Core numeric and raster layer: tuple algebra, canvas, PPM encoding, and errors.

This module contains the foundational building blocks of the ray tracer that
are independent of any scene, shape, or lighting model.
"""
