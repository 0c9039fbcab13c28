"""DXT1 texture decompressor"""
import numpy as np
from numba import jit
from .base import TextureDecompressor


def unpack_rgb565(packed: np.ndarray) -> np.ndarray:
    """
    Expand packed 5:6:5 colors to 8-bit channels

    The low bits are left at zero (no bit replication), so pure white
    565 expands to (248, 252, 248).

    Args:
        packed: uint16 array of packed colors

    Returns:
        uint16 array of shape packed.shape + (3,) holding R, G, B
    """
    packed = packed.astype(np.uint16)
    r = (packed >> 8) & 0xF8
    g = (packed >> 3) & 0xFC
    b = (packed << 3) & 0xF8
    return np.stack([r, g, b], axis=-1)


def build_color_palettes(c0_packed: np.ndarray, c1_packed: np.ndarray) -> np.ndarray:
    """
    Build the four entry RGBA palette of every block

    Four-color mode (color0 > color1) adds the 2/3-1/3 and 1/3-2/3 blends.
    Otherwise entry 2 is the midpoint and entry 3 is black. Alpha is
    always opaque.

    Returns:
        uint8 array of shape (num_blocks, 4, 4)
    """
    c0 = unpack_rgb565(c0_packed)
    c1 = unpack_rgb565(c1_packed)

    # Determine mode (4-color vs 3-color) for all blocks
    four_color_mode = (c0_packed > c1_packed)[:, np.newaxis]

    colors = np.zeros((len(c0_packed), 4, 4), dtype=np.uint8)
    colors[:, 0, :3] = c0
    colors[:, 1, :3] = c1
    colors[:, 2, :3] = np.where(four_color_mode, (2 * c0 + c1) // 3, (c0 + c1) // 2)
    colors[:, 3, :3] = np.where(four_color_mode, (c0 + 2 * c1) // 3, 0)
    colors[:, :, 3] = 255

    return colors


def read_color_indices(blocks: np.ndarray, start: int) -> np.ndarray:
    """Read the 32-bit little-endian index word of every block"""
    return blocks[:, start].astype(np.uint32) | \
           (blocks[:, start + 1].astype(np.uint32) << 8) | \
           (blocks[:, start + 2].astype(np.uint32) << 16) | \
           (blocks[:, start + 3].astype(np.uint32) << 24)


class DXT1Decompressor(TextureDecompressor):
    """DXT1 texture decompressor - NumPy vectorization + Numba JIT"""

    BLOCK_SIZE = 8

    @staticmethod
    @jit(nopython=True, cache=True)
    def _process_blocks_jit(colors, indices, output, blocks_x, blocks_y, width, height):
        """JIT-compiled block processing for DXT1 decompression"""
        num_blocks = blocks_x * blocks_y
        for block_idx in range(num_blocks):
            block_x = block_idx % blocks_x
            block_y = block_idx // blocks_x

            idx_bits = indices[block_idx]

            y_start = block_y * 4
            x_start = block_x * 4

            for pixel_idx in range(16):
                pixel_y = pixel_idx // 4
                pixel_x = pixel_idx % 4

                color_idx = (idx_bits >> (pixel_idx * 2)) & 0x3

                out_y = y_start + pixel_y
                out_x = x_start + pixel_x

                # Partial edge blocks: each axis against its own extent
                if out_y < height and out_x < width:
                    row = height - 1 - out_y
                    output[row, out_x, 0] = colors[block_idx, color_idx, 0]
                    output[row, out_x, 1] = colors[block_idx, color_idx, 1]
                    output[row, out_x, 2] = colors[block_idx, color_idx, 2]
                    output[row, out_x, 3] = 255

    @classmethod
    def required_size(cls, width: int, height: int) -> int:
        return ((width + 3) // 4) * ((height + 3) // 4) * cls.BLOCK_SIZE

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress DXT1 texture data to RGBA8 using vectorized NumPy operations

        DXT1 stores 4x4 pixel blocks in 8 bytes each:
        - 2 bytes: color0 (RGB565)
        - 2 bytes: color1 (RGB565)
        - 4 bytes: 16 2-bit indices, first pixel in the lowest bits
        """
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        num_blocks = blocks_x * blocks_y

        if len(data) < num_blocks * self.BLOCK_SIZE:
            raise ValueError(
                f"DXT1 data too small for {width}x{height}: "
                f"expected {num_blocks * self.BLOCK_SIZE} bytes, got {len(data)}"
            )

        blocks = np.frombuffer(data, dtype=np.uint8, count=num_blocks * self.BLOCK_SIZE).reshape(-1, 8)

        c0_packed = blocks[:, 0].astype(np.uint16) | (blocks[:, 1].astype(np.uint16) << 8)
        c1_packed = blocks[:, 2].astype(np.uint16) | (blocks[:, 3].astype(np.uint16) << 8)
        colors = build_color_palettes(c0_packed, c1_packed)

        indices = read_color_indices(blocks, 4)

        output = np.zeros((height, width, 4), dtype=np.uint8)
        self._process_blocks_jit(colors, indices, output, blocks_x, blocks_y, width, height)

        return output
