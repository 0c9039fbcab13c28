"""Papa thumbnail generation: decode, scale, badge"""
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple, Union

from .badge import BADGE_HEIGHT, BADGE_WIDTH, load_badge
from .composite import blit
from .config import ThumbnailConfig
from .enums import AlphaType, ImageOrigin
from .errors import ResourceLimitError
from .image import CanonicalImage, flip_vertical, swap_red_blue
from .papa import PAPA
from .resample import nearest_neighbour, resample, stepped_rescale

logger = logging.getLogger(__name__)


@dataclass
class Thumbnail:
    """Finished thumbnail: BGRA pixels, bottom row first, straight alpha"""
    image: CanonicalImage
    alpha_type: AlphaType = AlphaType.ARGB


def _scaled_size(width: int, height: int, factor: float) -> Tuple[int, int]:
    return max(1, int(width * factor + 0.5)), max(1, int(height * factor + 0.5))


def scale_canvas(canvas: CanonicalImage, requested_edge: int, config: ThumbnailConfig) -> CanonicalImage:
    """
    Scale the decoded texture so its shorter edge matches the request

    Upscaling always happens. Downscaling only happens when
    config.downscale is set; otherwise larger textures keep their size.
    """
    factor = requested_edge / min(canvas.width, canvas.height)
    if factor > 1:
        width, height = _scaled_size(canvas.width, canvas.height, factor)
        if width * height > config.max_texture_pixels:
            raise ResourceLimitError(
                f"Scaled thumbnail {width}x{height} exceeds the limit of {config.max_texture_pixels} pixels"
            )
        logger.debug("Upscaling %dx%d to %dx%d (%s)", canvas.width, canvas.height,
                     width, height, config.upscale_kernel)
        return resample(canvas, width, height, config.upscale_kernel)

    if factor < 1 and config.downscale:
        width, height = _scaled_size(canvas.width, canvas.height, factor)
        logger.debug("Downscaling %dx%d to %dx%d (%s)", canvas.width, canvas.height,
                     width, height, config.downscale_kernel)
        return stepped_rescale(canvas, width, height, config.downscale_kernel)

    logger.debug("Keeping native size %dx%d", canvas.width, canvas.height)
    return canvas


def badge_size(canvas_width: int, canvas_height: int, fraction: float = 0.25) -> Tuple[int, int]:
    """
    Size of the badge on a canvas

    The badge's longer side covers `fraction` of the canvas's longer side,
    and the badge never exceeds the canvas on either axis.
    """
    target = max(canvas_width, canvas_height) * fraction
    width_ratio = target / BADGE_WIDTH
    height_ratio = target / BADGE_HEIGHT
    ratio = min(width_ratio, height_ratio)
    ratio = min(ratio, canvas_width / BADGE_WIDTH, canvas_height / BADGE_HEIGHT)
    return max(1, int(BADGE_WIDTH * ratio)), max(1, int(BADGE_HEIGHT * ratio))


def prepare_badge(canvas: CanonicalImage, config: ThumbnailConfig) -> CanonicalImage:
    """Load the badge in the canvas's channel order and orientation, scaled to fit"""
    badge = swap_red_blue(load_badge())
    if badge.origin is not canvas.origin:
        flip_vertical(badge)
    width, height = badge_size(canvas.width, canvas.height, config.badge_fraction)
    return nearest_neighbour(badge, width, height)


def badge_position(canvas: CanonicalImage, badge: CanonicalImage, margin: int) -> Tuple[int, int]:
    """Buffer offset placing the badge in the bottom-right corner, inset by margin"""
    dest_x = canvas.width - badge.width - margin
    if canvas.origin is ImageOrigin.BOTTOM_FIRST:
        dest_y = margin
    else:
        dest_y = canvas.height - badge.height - margin
    return dest_x, dest_y


def generate_thumbnail(source: Union[bytes, bytearray, memoryview, BinaryIO], requested_edge: int,
                       config: Optional[ThumbnailConfig] = None) -> Thumbnail:
    """
    Build a thumbnail for the first texture of a papa file

    Args:
        source: Papa file contents, or a seekable binary stream
        requested_edge: Target edge length in pixels
        config: Optional settings; defaults are used when omitted

    Returns:
        Thumbnail holding a BGRA, bottom-first image with straight alpha

    Raises:
        ValueError: requested_edge is not a positive integer within config.max_edge
        FormatError: The header or texture entry is unusable
        ResourceLimitError: A size exceeds the stream or a configured limit
        StreamError: The stream failed to read or seek
    """
    if config is None:
        config = ThumbnailConfig()
    if isinstance(requested_edge, bool) or not isinstance(requested_edge, int):
        raise ValueError(f"requested_edge must be an integer, got {requested_edge!r}")
    if requested_edge <= 0 or requested_edge > config.max_edge:
        raise ValueError(f"requested_edge must be in [1, {config.max_edge}], got {requested_edge}")

    if isinstance(source, (bytes, bytearray, memoryview)):
        papa = PAPA.from_bytes(bytes(source), config.max_payload_bytes, config.max_texture_pixels)
    else:
        papa = PAPA.from_stream(source, config.max_payload_bytes, config.max_texture_pixels)

    canvas = papa.to_image()
    # The host surface expects BGRA
    swap_red_blue(canvas)

    canvas = scale_canvas(canvas, requested_edge, config)

    badge = prepare_badge(canvas, config)
    dest_x, dest_y = badge_position(canvas, badge, config.badge_margin)
    blit(badge, canvas, dest_x, dest_y)

    return Thumbnail(canvas, AlphaType.ARGB)
