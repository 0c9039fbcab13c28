"""Texture decompressor implementations"""
from .base import TextureDecompressor
from .dxt1 import DXT1Decompressor
from .dxt5 import DXT5Decompressor
from .placeholder import MarkerDecompressor, MARKER_COLOR
from .uncompressed import UncompressedDecompressor
from ..enums import PAPA_FORMAT


def get_decompressor(papa_format: PAPA_FORMAT) -> TextureDecompressor:
    """Select the decompressor for a format, or the marker for anything else"""
    if papa_format == PAPA_FORMAT.DXT1:
        return DXT1Decompressor()
    if papa_format == PAPA_FORMAT.DXT5:
        return DXT5Decompressor()
    if papa_format in UncompressedDecompressor.FORMAT_DESCRIPTORS:
        return UncompressedDecompressor(papa_format)
    return MarkerDecompressor()


__all__ = [
    'TextureDecompressor',
    'DXT1Decompressor',
    'DXT5Decompressor',
    'MarkerDecompressor',
    'MARKER_COLOR',
    'UncompressedDecompressor',
    'get_decompressor',
]
