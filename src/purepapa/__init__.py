"""purepapa - Papa texture reader and thumbnail renderer"""

__version__ = "0.1.0"

# Main papa class and thumbnail pipeline
from .papa import PAPA, decode_texture
from .thumbnail import Thumbnail, generate_thumbnail

# Header structures
from .headers import (
    PAPA_HEADER,
    PAPA_TEXTURE,
    parse_header,
    parse_texture_entry,
)

# Enumerations
from .enums import (
    PAPA_FORMAT,
    AlphaType,
    ImageOrigin,
    ResampleKernel,
)

# Image buffer, resampling and compositing
from .image import CanonicalImage, flip_vertical, swap_red_blue
from .resample import bicubic, bilinear, nearest_neighbour, stepped_rescale
from .composite import blit

from .config import ThumbnailConfig
from .errors import (
    PapaError,
    FormatError,
    InvalidMagicError,
    NoTexturesError,
    TruncatedReadError,
    InvalidTextureError,
    ResourceLimitError,
    StreamError,
)

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'PAPA',
    'decode_texture',
    'Thumbnail',
    'generate_thumbnail',
    'PAPA_HEADER',
    'PAPA_TEXTURE',
    'parse_header',
    'parse_texture_entry',
    'PAPA_FORMAT',
    'AlphaType',
    'ImageOrigin',
    'ResampleKernel',
    'CanonicalImage',
    'flip_vertical',
    'swap_red_blue',
    'bicubic',
    'bilinear',
    'nearest_neighbour',
    'stepped_rescale',
    'blit',
    'ThumbnailConfig',
    'PapaError',
    'FormatError',
    'InvalidMagicError',
    'NoTexturesError',
    'TruncatedReadError',
    'InvalidTextureError',
    'ResourceLimitError',
    'StreamError',
    'main',
]
