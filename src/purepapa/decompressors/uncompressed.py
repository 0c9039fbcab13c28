"""Decompressor for the raw 8-bit papa formats"""
from dataclasses import dataclass
import numpy as np
from .base import TextureDecompressor
from ..enums import PAPA_FORMAT


@dataclass
class FormatDescriptor:
    """Descriptor for raw format properties"""
    channels: str  # Channel layout: 'RGBA', 'RGBX', 'BGRA' or 'R'
    opaque: bool = False  # Force alpha to 255 instead of leaving it at 0

    @property
    def bytes_per_pixel(self) -> int:
        return len(self.channels)


class UncompressedDecompressor(TextureDecompressor):
    """Generic decompressor for raw 8-bit-per-channel formats"""

    FORMAT_DESCRIPTORS = {
        PAPA_FORMAT.RGBA8888: FormatDescriptor('RGBA'),
        PAPA_FORMAT.RGBX8888: FormatDescriptor('RGBX', opaque=True),
        PAPA_FORMAT.BGRA8888: FormatDescriptor('BGRA'),
        # Single channel textures only carry red, alpha stays 0
        PAPA_FORMAT.R8: FormatDescriptor('R'),
    }

    def __init__(self, papa_format: PAPA_FORMAT):
        """
        Initialize uncompressed decompressor

        Args:
            papa_format: PAPA_FORMAT enum value
        """
        self.papa_format = papa_format
        self.descriptor = self.FORMAT_DESCRIPTORS.get(papa_format)
        if self.descriptor is None:
            raise ValueError(f"Unsupported uncompressed format: {papa_format!r}")

    def required_size(self, width: int, height: int) -> int:
        return width * height * self.descriptor.bytes_per_pixel

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress raw texture data to a four channel buffer

        Args:
            data: Raw texture data
            width: Texture width in pixels
            height: Texture height in pixels

        Returns:
            numpy array of shape (height, width, 4) with dtype uint8,
            bottom row first
        """
        desc = self.descriptor
        num_channels = desc.bytes_per_pixel
        expected = self.required_size(width, height)
        if len(data) < expected:
            raise ValueError(
                f"{self.papa_format.name} data too small for {width}x{height}: "
                f"expected {expected} bytes, got {len(data)}"
            )

        pixels = np.frombuffer(data, dtype=np.uint8, count=expected)
        pixels = pixels.reshape(height, width, num_channels)

        # Flip to bottom row first while swizzling
        return self._swizzle_to_rgba(pixels[::-1], desc)

    @staticmethod
    def _swizzle_to_rgba(pixels: np.ndarray, desc: FormatDescriptor) -> np.ndarray:
        """Swizzle channel layout to RGBA"""
        height, width = pixels.shape[:2]
        output = np.zeros((height, width, 4), dtype=np.uint8)

        channel_map = {'R': 0, 'G': 1, 'B': 2, 'A': 3}

        for i, ch in enumerate(desc.channels):
            target_idx = channel_map.get(ch)
            if target_idx is not None:
                output[:, :, target_idx] = pixels[:, :, i]

        if desc.opaque:
            output[:, :, 3] = 255

        return output
