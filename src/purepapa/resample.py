"""Image resampling kernels and the stepped downscale scheduler"""
import logging
from typing import Callable, Union
import numpy as np
from numba import jit

from .enums import ResampleKernel
from .image import CanonicalImage

logger = logging.getLogger(__name__)

KernelFunc = Callable[[CanonicalImage, int, int], CanonicalImage]


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Target dimensions must be positive, got {width}x{height}")


def nearest_neighbour(src: CanonicalImage, dst_width: int, dst_height: int) -> CanonicalImage:
    """
    Nearest neighbour resample

    dst[x, y] = src[floor(x * src_w / dst_w), floor(y * src_h / dst_h)],
    computed in integer arithmetic so the mapping is exact.
    """
    _check_size(dst_width, dst_height)
    rows = (np.arange(dst_height, dtype=np.int64) * src.height) // dst_height
    cols = (np.arange(dst_width, dtype=np.int64) * src.width) // dst_width
    return CanonicalImage(src.pixels[rows[:, np.newaxis], cols[np.newaxis, :]], src.origin)


@jit(nopython=True, cache=True)
def _bilinear_jit(src, output):
    """JIT-compiled bilinear sampling with half-pixel centred mapping"""
    src_h = src.shape[0]
    src_w = src.shape[1]
    dst_h = output.shape[0]
    dst_w = output.shape[1]
    for y in range(dst_h):
        gy = y / dst_h * (src_h - 0.5)
        gyi = int(gy)
        ty = gy - gyi
        gyi1 = min(gyi + 1, src_h - 1)
        for x in range(dst_w):
            gx = x / dst_w * (src_w - 0.5)
            gxi = int(gx)
            tx = gx - gxi
            gxi1 = min(gxi + 1, src_w - 1)
            for c in range(4):
                c00 = float(src[gyi, gxi, c])
                c10 = float(src[gyi, gxi1, c])
                c01 = float(src[gyi1, gxi, c])
                c11 = float(src[gyi1, gxi1, c])
                top = c00 + (c10 - c00) * tx
                bottom = c01 + (c11 - c01) * tx
                output[y, x, c] = int(top + (bottom - top) * ty)


def bilinear(src: CanonicalImage, dst_width: int, dst_height: int) -> CanonicalImage:
    """Bilinear resample; each channel is blended independently and truncated"""
    _check_size(dst_width, dst_height)
    if (dst_width, dst_height) == (src.width, src.height):
        return src.copy()
    output = np.zeros((dst_height, dst_width, 4), dtype=np.uint8)
    _bilinear_jit(src.pixels, output)
    return CanonicalImage(output, src.origin)


@jit(nopython=True, cache=True)
def _sample_or_zero(src, x, y, c):
    """Read one channel, treating everything outside the image as 0"""
    if x < 0 or y < 0 or x >= src.shape[1] or y >= src.shape[0]:
        return 0.0
    return float(src[y, x, c])


@jit(nopython=True, cache=True)
def _cubic(p0, p1, p2, p3, t):
    """Cubic through four samples, from the three differences against p1"""
    d0 = p0 - p1
    d2 = p2 - p1
    d3 = p3 - p1
    a1 = -1.0 / 3.0 * d0 + d2 - 1.0 / 6.0 * d3
    a2 = 0.5 * d0 + 0.5 * d2
    a3 = -1.0 / 6.0 * d0 - 0.5 * d2 + 1.0 / 6.0 * d3
    return p1 + a1 * t + a2 * t * t + a3 * t * t * t


@jit(nopython=True, cache=True)
def _bicubic_jit(src, output):
    """JIT-compiled 4x4 cubic convolution"""
    src_h = src.shape[0]
    src_w = src.shape[1]
    dst_h = output.shape[0]
    dst_w = output.shape[1]
    tx = src_w / dst_w
    ty = src_h / dst_h
    column = np.zeros(4, dtype=np.float64)
    for i in range(dst_h):
        y = int(ty * i)
        dy = ty * i - y
        for j in range(dst_w):
            x = int(tx * j)
            dx = tx * j - x
            for c in range(4):
                for jj in range(4):
                    z = y - 1 + jj
                    column[jj] = _cubic(
                        _sample_or_zero(src, x - 1, z, c),
                        _sample_or_zero(src, x, z, c),
                        _sample_or_zero(src, x + 1, z, c),
                        _sample_or_zero(src, x + 2, z, c),
                        dx,
                    )
                value = _cubic(column[0], column[1], column[2], column[3], dy)
                output[i, j, c] = int(min(max(value, 0.0), 255.0))


def bicubic(src: CanonicalImage, dst_width: int, dst_height: int) -> CanonicalImage:
    """Bicubic resample, clamped to [0, 255]; out of range samples read as 0"""
    _check_size(dst_width, dst_height)
    if (dst_width, dst_height) == (src.width, src.height):
        return src.copy()
    output = np.zeros((dst_height, dst_width, 4), dtype=np.uint8)
    _bicubic_jit(src.pixels, output)
    return CanonicalImage(output, src.origin)


_KERNELS = {
    ResampleKernel.NEAREST: nearest_neighbour,
    ResampleKernel.BILINEAR: bilinear,
    ResampleKernel.BICUBIC: bicubic,
}


def get_kernel(kernel: Union[ResampleKernel, str, KernelFunc]) -> KernelFunc:
    """Resolve a kernel enum, its string value, or pass a callable through"""
    if callable(kernel):
        return kernel
    return _KERNELS[ResampleKernel(kernel)]


def resample(src: CanonicalImage, dst_width: int, dst_height: int,
             kernel: Union[ResampleKernel, str, KernelFunc] = ResampleKernel.NEAREST) -> CanonicalImage:
    """Resample in a single pass with the chosen kernel"""
    return get_kernel(kernel)(src, dst_width, dst_height)


def stepped_rescale(src: CanonicalImage, target_width: int, target_height: int,
                    kernel: Union[ResampleKernel, str, KernelFunc] = ResampleKernel.BILINEAR) -> CanonicalImage:
    """
    Rescale to the target size, halving repeatedly for large downscales

    While either working dimension is more than twice its target, both are
    halved (never below the target) and the kernel runs on that step. The
    last step goes straight to the target size. Upscales and downscales of
    at most 2x run the kernel exactly once.

    Args:
        src: Image to rescale (left untouched)
        target_width: Output width in pixels
        target_height: Output height in pixels
        kernel: ResampleKernel, its string value, or a kernel function

    Returns:
        New image of exactly target_width x target_height
    """
    _check_size(target_width, target_height)
    kernel_func = get_kernel(kernel)

    current = src
    steps = 0
    while (current.width, current.height) != (target_width, target_height):
        if current.width > 2 * target_width or current.height > 2 * target_height:
            next_width = max(current.width // 2, target_width)
            next_height = max(current.height // 2, target_height)
        else:
            next_width, next_height = target_width, target_height

        # Buffers from intermediate steps are dropped as soon as the next one exists
        current = kernel_func(current, next_width, next_height)
        steps += 1
        logger.debug("Rescale step %d: %dx%d", steps, next_width, next_height)

    if current is src:
        return src.copy()
    return current
