"""
I/O — сериализация canvas.

PPM (P3) текстовый формат.
"""

from .ppm import PPMConfig, channel_values, encode_ppm, pack_lines

__all__ = [
    "PPMConfig",
    "channel_values",
    "encode_ppm",
    "pack_lines",
]
