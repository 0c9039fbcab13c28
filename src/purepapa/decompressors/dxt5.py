"""DXT5 texture decompressor"""
import numpy as np
from numba import jit
from .base import TextureDecompressor
from .dxt1 import build_color_palettes, read_color_indices


def build_alpha_palettes(alpha0: np.ndarray, alpha1: np.ndarray) -> np.ndarray:
    """
    Build the eight entry alpha table of every block

    When alpha0 > alpha1 entries 2-7 step linearly from alpha0 to alpha1 in
    sevenths. Otherwise entries 2-5 step in fifths, entry 6 is 0 and entry 7
    is 255. Interpolated values are truncated.

    Returns:
        uint8 array of shape (num_blocks, 8)
    """
    alpha0 = alpha0.astype(np.uint16)
    alpha1 = alpha1.astype(np.uint16)

    alpha_palettes = np.zeros((len(alpha0), 8), dtype=np.uint8)
    alpha_palettes[:, 0] = alpha0
    alpha_palettes[:, 1] = alpha1

    eight_alpha_mode = alpha0 > alpha1

    for i in range(1, 7):
        seven_step = ((7 - i) * alpha0 + i * alpha1) // 7
        if i < 5:
            five_step = ((5 - i) * alpha0 + i * alpha1) // 5
        else:
            five_step = np.full_like(alpha0, 0 if i == 5 else 255)
        alpha_palettes[:, i + 1] = np.where(eight_alpha_mode, seven_step, five_step)

    return alpha_palettes


class DXT5Decompressor(TextureDecompressor):
    """
    DXT5 texture decompressor - NumPy vectorization + Numba JIT

    The color sub-block is decoded exactly like DXT1, including the
    three-color mode when color0 <= color1.
    """

    BLOCK_SIZE = 16

    @staticmethod
    @jit(nopython=True, cache=True)
    def _process_blocks_jit(colors, alpha_palettes, alpha_indices, color_indices, output, blocks_x, blocks_y, width, height):
        """JIT-compiled block processing for DXT5 decompression"""
        num_blocks = blocks_x * blocks_y
        for block_idx in range(num_blocks):
            block_x = block_idx % blocks_x
            block_y = block_idx // blocks_x

            alpha_idx_bits = alpha_indices[block_idx]
            color_idx_bits = color_indices[block_idx]

            y_start = block_y * 4
            x_start = block_x * 4

            for pixel_idx in range(16):
                pixel_y = pixel_idx // 4
                pixel_x = pixel_idx % 4

                alpha_idx = (alpha_idx_bits >> (pixel_idx * 3)) & 0x7
                color_idx = (color_idx_bits >> (pixel_idx * 2)) & 0x3

                out_y = y_start + pixel_y
                out_x = x_start + pixel_x

                if out_y < height and out_x < width:
                    row = height - 1 - out_y
                    output[row, out_x, 0] = colors[block_idx, color_idx, 0]
                    output[row, out_x, 1] = colors[block_idx, color_idx, 1]
                    output[row, out_x, 2] = colors[block_idx, color_idx, 2]
                    output[row, out_x, 3] = alpha_palettes[block_idx, alpha_idx]

    @classmethod
    def required_size(cls, width: int, height: int) -> int:
        return ((width + 3) // 4) * ((height + 3) // 4) * cls.BLOCK_SIZE

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress DXT5 texture data to RGBA8 using vectorized NumPy operations

        DXT5 stores 4x4 pixel blocks in 16 bytes each:
        - 1 byte: alpha0 endpoint
        - 1 byte: alpha1 endpoint
        - 6 bytes: 16 3-bit alpha indices (48 bits total)
        - 8 bytes: color sub-block laid out as a DXT1 block
        """
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        num_blocks = blocks_x * blocks_y

        if len(data) < num_blocks * self.BLOCK_SIZE:
            raise ValueError(
                f"DXT5 data too small for {width}x{height}: "
                f"expected {num_blocks * self.BLOCK_SIZE} bytes, got {len(data)}"
            )

        blocks = np.frombuffer(data, dtype=np.uint8, count=num_blocks * self.BLOCK_SIZE).reshape(-1, 16)

        alpha_palettes = build_alpha_palettes(blocks[:, 0], blocks[:, 1])

        # 48 index bits padded to a little-endian int64 per block
        alpha_indices_bytes = np.pad(blocks[:, 2:8], ((0, 0), (0, 2)), constant_values=0)
        alpha_indices = alpha_indices_bytes.copy().view('<i8').flatten()

        c0_packed = blocks[:, 8].astype(np.uint16) | (blocks[:, 9].astype(np.uint16) << 8)
        c1_packed = blocks[:, 10].astype(np.uint16) | (blocks[:, 11].astype(np.uint16) << 8)
        colors = build_color_palettes(c0_packed, c1_packed)

        color_indices = read_color_indices(blocks, 12)

        output = np.zeros((height, width, 4), dtype=np.uint8)
        self._process_blocks_jit(colors, alpha_palettes, alpha_indices, color_indices, output, blocks_x, blocks_y, width, height)

        return output
