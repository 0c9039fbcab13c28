"""Base class for texture decompression"""
from abc import ABC, abstractmethod
import numpy as np


class TextureDecompressor(ABC):
    """Base class for texture decompression"""
    @abstractmethod
    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress texture data to a four channel buffer

        Args:
            data: Texture payload (at least the level 0 footprint)
            width: Texture width in pixels
            height: Texture height in pixels

        Returns:
            numpy array of shape (height, width, 4) with dtype uint8, stored
            bottom row first (source row y lands in row height-1-y)
        """
        pass

    @classmethod
    def required_size(cls, width: int, height: int) -> int:
        """Minimum payload size in bytes for a width x height level 0 image"""
        return width * height * 4
