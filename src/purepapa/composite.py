"""Alpha compositing of one image onto another"""
import numpy as np

from .image import CanonicalImage


def _clamp_offset(offset: int, src_extent: int, dst_extent: int) -> int:
    # Only pull the footprint inside when it can fit at all
    if src_extent <= dst_extent:
        return min(max(offset, 0), dst_extent - src_extent)
    return offset


def blit(src: CanonicalImage, dst: CanonicalImage, dest_x: int, dest_y: int) -> CanonicalImage:
    """
    Composite src onto dst in place with the source-over rule

    Per channel, with alphas normalized to [0, 1]:
        out_color = src_color * src_alpha + dst_color * (1 - src_alpha)
        out_alpha = src_alpha + dst_alpha * (1 - src_alpha)
    Results are truncated to 8 bits.

    The offset is clamped so src lies fully inside dst whenever src is no
    larger than dst on that axis; the copied region is then clipped to
    the part of dst that is actually in bounds.

    Args:
        src: Image to draw
        dst: Image drawn onto (modified)
        dest_x: Column of dst receiving src column 0
        dest_y: Row of dst receiving src row 0

    Returns:
        dst
    """
    if src.origin is not dst.origin:
        raise ValueError(f"Cannot blit a {src.origin.value} image onto a {dst.origin.value} image")

    dest_x = _clamp_offset(dest_x, src.width, dst.width)
    dest_y = _clamp_offset(dest_y, src.height, dst.height)

    x0 = max(dest_x, 0)
    y0 = max(dest_y, 0)
    x1 = min(dest_x + src.width, dst.width)
    y1 = min(dest_y + src.height, dst.height)
    if x0 >= x1 or y0 >= y1:
        return dst

    s = src.pixels[y0 - dest_y:y1 - dest_y, x0 - dest_x:x1 - dest_x].astype(np.float64)
    d = dst.pixels[y0:y1, x0:x1].astype(np.float64)

    # Both rules scaled by 255 so whole-number results stay exact before truncation
    src_alpha = s[:, :, 3:4]
    inverse = 255.0 - src_alpha

    color = (s[:, :, :3] * src_alpha + d[:, :, :3] * inverse) / 255.0
    alpha = src_alpha + d[:, :, 3:4] * inverse / 255.0

    region = dst.pixels[y0:y1, x0:x1]
    region[:, :, :3] = color.astype(np.uint8)
    region[:, :, 3:4] = alpha.astype(np.uint8)
    return dst
