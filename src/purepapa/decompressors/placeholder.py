"""Marker image for formats purepapa cannot decode"""
import numpy as np
from .base import TextureDecompressor

# Near-black and fully opaque, so the thumbnail is visibly "something"
MARKER_COLOR = (1, 0, 0, 255)


class MarkerDecompressor(TextureDecompressor):
    """Ignores the payload and emits a solid marker-colored image"""

    def required_size(self, width: int, height: int) -> int:
        return 0

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        output = np.empty((height, width, 4), dtype=np.uint8)
        output[:, :] = MARKER_COLOR
        return output
