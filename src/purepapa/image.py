"""Canonical RGBA image buffer and in-place pixel operations"""
from dataclasses import dataclass
import numpy as np

from .enums import ImageOrigin


@dataclass
class CanonicalImage:
    """
    Owned 4-bytes-per-pixel image buffer.

    The buffer is a numpy array of shape (height, width, 4) with dtype uint8.
    Row 0 of the array is the top row when origin is TOP_FIRST and the bottom
    row when origin is BOTTOM_FIRST. The channel order is whatever the stage
    that produced the image established; purepapa never reinterprets it.
    """
    pixels: np.ndarray
    origin: ImageOrigin = ImageOrigin.TOP_FIRST

    def __post_init__(self) -> None:
        if not isinstance(self.pixels, np.ndarray):
            raise TypeError(f"pixels must be a numpy array, got {type(self.pixels).__name__}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"pixels must have dtype uint8, got {self.pixels.dtype}")
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"pixels must have shape (height, width, 4), got {self.pixels.shape}")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError(f"Image dimensions must be positive, got {self.pixels.shape[1]}x{self.pixels.shape[0]}")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def blank(cls, width: int, height: int, origin: ImageOrigin = ImageOrigin.TOP_FIRST) -> 'CanonicalImage':
        """Create a fully transparent black image"""
        return cls(np.zeros((height, width, 4), dtype=np.uint8), origin)

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int,
                   origin: ImageOrigin = ImageOrigin.TOP_FIRST) -> 'CanonicalImage':
        """Copy a packed width*height*4 byte buffer into a new image"""
        expected = width * height * 4
        if len(data) < expected:
            raise ValueError(f"Expected {expected} bytes for a {width}x{height} image, got {len(data)}")
        pixels = np.frombuffer(data, dtype=np.uint8, count=expected).reshape(height, width, 4).copy()
        return cls(pixels, origin)

    def copy(self) -> 'CanonicalImage':
        return CanonicalImage(self.pixels.copy(), self.origin)

    def to_rgba_array(self) -> np.ndarray:
        """Return a top-first copy of the pixels, ready for imageio"""
        if self.origin is ImageOrigin.BOTTOM_FIRST:
            return np.ascontiguousarray(self.pixels[::-1])
        return self.pixels.copy()


def swap_red_blue(image: CanonicalImage) -> CanonicalImage:
    """Exchange the first and third byte of every pixel in place"""
    image.pixels[:, :, [0, 2]] = image.pixels[:, :, [2, 0]]
    return image


def flip_vertical(image: CanonicalImage) -> CanonicalImage:
    """Reverse the row order in place and toggle the origin tag"""
    image.pixels[:] = image.pixels[::-1].copy()
    image.origin = image.origin.flipped()
    return image
