"""Enumerations used by the papa reader"""
from enum import Enum, IntEnum


class PAPA_FORMAT(IntEnum):
    """Texture format tags stored in a papa texture entry"""
    UNKNOWN = 0
    RGBA8888 = 1
    RGBX8888 = 2
    BGRA8888 = 3
    DXT1 = 4
    DXT5 = 6
    R8 = 13

    @classmethod
    def from_tag(cls, tag: int) -> 'PAPA_FORMAT':
        """Map a raw tag byte to a format, falling back to UNKNOWN"""
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


class ImageOrigin(Enum):
    """Which row of a pixel buffer is stored first"""
    TOP_FIRST = 'top_first'
    BOTTOM_FIRST = 'bottom_first'

    def flipped(self) -> 'ImageOrigin':
        if self is ImageOrigin.TOP_FIRST:
            return ImageOrigin.BOTTOM_FIRST
        return ImageOrigin.TOP_FIRST


class AlphaType(IntEnum):
    """Alpha interpretation handed to the host along with the pixels"""
    UNKNOWN = 0
    RGB = 1  # Alpha channel ignored
    ARGB = 2  # Straight (not premultiplied) alpha


class ResampleKernel(Enum):
    """Resampling kernels understood by purepapa.resample"""
    NEAREST = 'nearest'
    BILINEAR = 'bilinear'
    BICUBIC = 'bicubic'
